"""Inquiry submission: commands and handler for the engagement forms."""

from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from engagement.domain import engagement, logger
from engagement.inquiry.inquiries import (
    ArtisanApplication,
    ContactMessage,
    TextileDonationInquiry,
    VolunteerApplication,
)


@engagement.command(part_of="ContactMessage")
class SendContactMessage:
    name = String(required=True, max_length=200)
    email = String(required=True, max_length=254)
    message = Text(required=True)


@engagement.command(part_of="TextileDonationInquiry")
class OfferTextileDonation:
    name = String(required=True, max_length=200)
    email = String(required=True, max_length=254)
    phone = String(max_length=30)
    company = String(max_length=200)
    message = Text()


@engagement.command(part_of="VolunteerApplication")
class ApplyToVolunteer:
    name = String(required=True, max_length=200)
    email = String(required=True, max_length=254)
    phone = String(max_length=30)
    skills = Text()
    availability = String(max_length=200)
    message = Text()


@engagement.command(part_of="ArtisanApplication")
class ApplyAsArtisan:
    name = String(required=True, max_length=200)
    phone = String(required=True, max_length=30)
    email = String(max_length=254)
    location = String(required=True, max_length=200)
    skills = String(required=True, max_length=200)
    experience = String(max_length=100)
    availability = String(max_length=100)


def _store(aggregate):
    current_domain.repository_for(type(aggregate)).add(aggregate)
    logger.info("Engagement form received", kind=type(aggregate).__name__, record_id=str(aggregate.id))
    return str(aggregate.id)


@engagement.command_handler(part_of=ContactMessage)
class ContactMessageHandler:
    @handle(SendContactMessage)
    def send_contact_message(self, command):
        return _store(ContactMessage(name=command.name, email=command.email, message=command.message))


@engagement.command_handler(part_of=TextileDonationInquiry)
class TextileDonationInquiryHandler:
    @handle(OfferTextileDonation)
    def offer_textile_donation(self, command):
        return _store(
            TextileDonationInquiry(
                name=command.name,
                email=command.email,
                phone=command.phone,
                company=command.company,
                message=command.message,
            )
        )


@engagement.command_handler(part_of=VolunteerApplication)
class VolunteerApplicationHandler:
    @handle(ApplyToVolunteer)
    def apply_to_volunteer(self, command):
        return _store(
            VolunteerApplication(
                name=command.name,
                email=command.email,
                phone=command.phone,
                skills=command.skills,
                availability=command.availability,
                message=command.message,
            )
        )


@engagement.command_handler(part_of=ArtisanApplication)
class ArtisanApplicationHandler:
    @handle(ApplyAsArtisan)
    def apply_as_artisan(self, command):
        return _store(
            ArtisanApplication(
                name=command.name,
                phone=command.phone,
                email=command.email,
                location=command.location,
                skills=command.skills,
                experience=command.experience,
                availability=command.availability,
            )
        )
