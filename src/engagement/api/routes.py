"""FastAPI routes for the Engagement domain: visitor forms and impact figures."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain
from shared.auth import require_admin

from engagement.api.schemas import (
    ContactRequest,
    DonationRequest,
    DonationResponse,
    FormResponse,
    ImpactMetricsResponse,
    JoinArtisanRequest,
    NewsletterRequest,
    TextileDonationRequest,
    VolunteerRequest,
)
from engagement.donation.donation import Donation
from engagement.donation.giving import Donate
from engagement.impact.metrics import current_metrics
from engagement.inquiry.submission import (
    ApplyAsArtisan,
    ApplyToVolunteer,
    OfferTextileDonation,
    SendContactMessage,
)
from engagement.newsletter.subscription import Subscribe

form_router = APIRouter(tags=["engagement"])
impact_router = APIRouter(prefix="/impact", tags=["impact"])
admin_donation_router = APIRouter(prefix="/admin/donations", tags=["admin"], dependencies=[Depends(require_admin)])


@form_router.post("/contact", status_code=201, response_model=FormResponse)
async def contact(body: ContactRequest) -> FormResponse:
    current_domain.process(SendContactMessage(**body.model_dump()), asynchronous=False)
    return FormResponse(message="Contact form submitted successfully")


@form_router.post("/textile-donation", status_code=201, response_model=FormResponse)
async def textile_donation(body: TextileDonationRequest) -> FormResponse:
    current_domain.process(OfferTextileDonation(**body.model_dump()), asynchronous=False)
    return FormResponse(message="Textile donation inquiry submitted successfully")


@form_router.post("/volunteer", status_code=201, response_model=FormResponse)
async def volunteer(body: VolunteerRequest) -> FormResponse:
    current_domain.process(ApplyToVolunteer(**body.model_dump()), asynchronous=False)
    return FormResponse(message="Volunteer application submitted successfully")


@form_router.post("/join-artisan", status_code=201, response_model=FormResponse)
async def join_artisan(body: JoinArtisanRequest) -> FormResponse:
    current_domain.process(ApplyAsArtisan(**body.model_dump()), asynchronous=False)
    return FormResponse(message="Artisan application submitted successfully")


@form_router.post("/donate", status_code=201, response_model=FormResponse)
async def donate(body: DonationRequest) -> FormResponse:
    command = Donate(
        amount=body.amount,
        email=body.email,
        donor_name=body.donor_name,
        donation_type=body.type,
    )
    current_domain.process(command, asynchronous=False)
    return FormResponse(message="Donation processed successfully")


@form_router.post("/newsletter", status_code=201, response_model=FormResponse)
async def newsletter(body: NewsletterRequest) -> FormResponse:
    current_domain.process(Subscribe(email=body.email, language=body.language), asynchronous=False)
    return FormResponse(message="Newsletter subscription successful")


@impact_router.get("", response_model=ImpactMetricsResponse)
async def impact() -> ImpactMetricsResponse:
    return ImpactMetricsResponse.model_validate(current_metrics().to_record())


@admin_donation_router.get("", response_model=list[DonationResponse])
async def list_donations() -> list[DonationResponse]:
    donations = current_domain.repository_for(Donation)._dao.query.all().items
    donations = sorted(donations, key=lambda donation: donation.donated_at, reverse=True)
    return [DonationResponse.model_validate(donation.to_record()) for donation in donations]
