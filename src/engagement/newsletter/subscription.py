"""Newsletter subscriptions: aggregate, command and handler.

Subscribing twice with the same address is not an error; the existing
subscription is returned.
"""

from datetime import UTC, datetime

from protean import handle, invariant
from protean.fields import DateTime, String
from protean.utils.globals import current_domain

from engagement.domain import engagement, logger
from engagement.shared.contact import check_email


def utc_now():
    return datetime.now(UTC)


@engagement.aggregate
class NewsletterSubscription:
    email: String(required=True, max_length=254)
    language: String(max_length=2, default="en")
    subscribed_at: DateTime(default=utc_now)

    @invariant.post
    def email_must_be_valid(self):
        check_email(self.email)


@engagement.command(part_of="NewsletterSubscription")
class Subscribe:
    email = String(required=True, max_length=254)
    language = String(max_length=2)


@engagement.command_handler(part_of=NewsletterSubscription)
class SubscribeHandler:
    @handle(Subscribe)
    def subscribe(self, command):
        email = command.email.strip().lower()
        repo = current_domain.repository_for(NewsletterSubscription)

        existing = repo._dao.query.filter(email=email).all().items
        if existing:
            logger.info("Already subscribed", subscription_id=str(existing[0].id))
            return str(existing[0].id)

        subscription = NewsletterSubscription(email=email, language=command.language or "en")
        repo.add(subscription)
        return str(subscription.id)
