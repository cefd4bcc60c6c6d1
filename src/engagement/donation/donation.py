"""Donation aggregate: money given towards the current campaign.

Card processing is mocked: every donation is recorded as paid by card
(``stripe``) and counts towards the campaign immediately.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, String

from engagement.domain import engagement
from engagement.donation.events import DonationReceived
from engagement.shared.contact import check_email


class DonationType(Enum):
    ONE_TIME = "one-time"
    MONTHLY = "monthly"


@engagement.aggregate
class Donation:
    donor_name: String(max_length=200)
    email: String(required=True, max_length=254)
    amount: Float(required=True, min_value=0.01)
    donation_type: String(choices=DonationType, default=DonationType.ONE_TIME.value)
    payment_method: String(max_length=20, default="stripe")
    donated_at: DateTime()

    @classmethod
    def receive(cls, amount, email, donor_name=None, donation_type=None):
        check_email(email)
        now = datetime.now(UTC)
        donation = cls(
            donor_name=donor_name,
            email=email,
            amount=amount,
            donation_type=donation_type or DonationType.ONE_TIME.value,
            donated_at=now,
        )
        donation.raise_(
            DonationReceived(
                donation_id=str(donation.id),
                amount=donation.amount,
                donation_type=donation.donation_type,
                donated_at=now,
            )
        )
        return donation

    def to_record(self) -> dict:
        return {
            "_id": str(self.id),
            "donor_name": self.donor_name or "",
            "email": self.email,
            "amount": self.amount,
            "type": self.donation_type,
            "payment_method": self.payment_method,
            "donated_at": self.donated_at.isoformat() if self.donated_at else None,
        }
