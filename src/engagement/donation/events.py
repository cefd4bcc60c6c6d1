"""Domain events for the Donation aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from engagement.domain import engagement


@engagement.event(part_of="Donation")
class DonationReceived:
    """A donation towards the current campaign was recorded."""

    __version__ = 1

    donation_id = Identifier(required=True)
    amount = Float(required=True)
    donation_type = String(required=True)
    donated_at = DateTime(required=True)
