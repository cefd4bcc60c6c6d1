"""Inquiry aggregates: one record per form a visitor sends in.

None of these have a lifecycle yet; staff read them from the admin
listing and follow up outside the system.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.fields import DateTime, String, Text

from engagement.domain import engagement
from engagement.shared.contact import check_email, check_min_length


def utc_now():
    return datetime.now(UTC)


@engagement.aggregate
class ContactMessage:
    name: String(required=True, max_length=200)
    email: String(required=True, max_length=254)
    message: Text(required=True)
    submitted_at: DateTime(default=utc_now)

    @invariant.post
    def contact_details_must_be_valid(self):
        check_min_length(self.name, "name")
        check_email(self.email)
        check_min_length(self.message, "message", minimum=10)


@engagement.aggregate
class TextileDonationInquiry:
    """A company or individual offering textile offcuts for upcycling."""

    name: String(required=True, max_length=200)
    email: String(required=True, max_length=254)
    phone: String(max_length=30)
    company: String(max_length=200)
    message: Text()
    submitted_at: DateTime(default=utc_now)

    @invariant.post
    def contact_details_must_be_valid(self):
        check_min_length(self.name, "name")
        check_email(self.email)


@engagement.aggregate
class VolunteerApplication:
    name: String(required=True, max_length=200)
    email: String(required=True, max_length=254)
    phone: String(max_length=30)
    skills: Text()
    availability: String(max_length=200)
    message: Text()
    submitted_at: DateTime(default=utc_now)

    @invariant.post
    def contact_details_must_be_valid(self):
        check_min_length(self.name, "name")
        check_email(self.email)


@engagement.aggregate
class ArtisanApplication:
    """A woman artisan asking to join the program. Email is optional."""

    name: String(required=True, max_length=200)
    phone: String(required=True, max_length=30)
    email: String(max_length=254)
    location: String(required=True, max_length=200)
    skills: String(required=True, max_length=200)
    experience: String(max_length=100)
    availability: String(max_length=100)
    submitted_at: DateTime(default=utc_now)

    @invariant.post
    def applicant_details_must_be_valid(self):
        check_min_length(self.name, "name")
        check_min_length(self.phone, "phone", minimum=10)
        check_email(self.email, required=False)
        check_min_length(self.location, "location")
