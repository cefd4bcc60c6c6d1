"""Application tests for the engagement form commands."""

import pytest
from engagement.inquiry.inquiries import ArtisanApplication, ContactMessage, VolunteerApplication
from engagement.inquiry.submission import ApplyAsArtisan, ApplyToVolunteer, SendContactMessage
from engagement.newsletter.subscription import NewsletterSubscription, Subscribe
from protean import current_domain
from protean.exceptions import ValidationError


def _all(aggregate_cls):
    return current_domain.repository_for(aggregate_cls)._dao.query.all().items


class TestInquiries:
    def test_contact_message_stored(self):
        record_id = current_domain.process(
            SendContactMessage(name="Layla", email="layla@example.com", message="Do you ship to Alexandria?"),
            asynchronous=False,
        )
        assert current_domain.repository_for(ContactMessage).get(record_id).name == "Layla"

    def test_invalid_contact_message_not_stored(self):
        with pytest.raises(ValidationError):
            current_domain.process(
                SendContactMessage(name="Layla", email="layla@example.com", message="short"),
                asynchronous=False,
            )
        assert _all(ContactMessage) == []

    def test_volunteer_application(self):
        current_domain.process(
            ApplyToVolunteer(name="Omar", email="omar@example.com", availability="Weekends"),
            asynchronous=False,
        )
        assert _all(VolunteerApplication)[0].availability == "Weekends"

    def test_artisan_application(self):
        current_domain.process(
            ApplyAsArtisan(name="Hoda Ali", phone="01001234567", location="Fayoum", skills="Embroidery"),
            asynchronous=False,
        )
        assert _all(ArtisanApplication)[0].location == "Fayoum"


class TestNewsletter:
    def test_subscribe_normalises_email(self):
        subscription_id = current_domain.process(Subscribe(email="  Layla@Example.com "), asynchronous=False)

        subscription = current_domain.repository_for(NewsletterSubscription).get(subscription_id)
        assert subscription.email == "layla@example.com"
        assert subscription.language == "en"

    def test_resubscribing_is_idempotent(self):
        first = current_domain.process(Subscribe(email="layla@example.com", language="ar"), asynchronous=False)
        second = current_domain.process(Subscribe(email="LAYLA@example.com"), asynchronous=False)

        assert first == second
        assert len(_all(NewsletterSubscription)) == 1

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            current_domain.process(Subscribe(email="not-an-email"), asynchronous=False)
