"""Giving: the donate command and its handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from engagement.domain import engagement, logger
from engagement.donation.donation import Donation


@engagement.command(part_of="Donation")
class Donate:
    amount = Float(required=True)
    email = String(required=True, max_length=254)
    donor_name = String(max_length=200)
    donation_type = String(max_length=20)


@engagement.command_handler(part_of=Donation)
class DonateHandler:
    @handle(Donate)
    def donate(self, command):
        donation = Donation.receive(
            amount=command.amount,
            email=command.email,
            donor_name=command.donor_name,
            donation_type=command.donation_type,
        )
        current_domain.repository_for(Donation).add(donation)
        logger.info("Donation recorded", donation_id=str(donation.id), amount=donation.amount, type=donation.donation_type)
        return str(donation.id)
