"""Pydantic request/response schemas for the Engagement API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class ContactRequest(BaseModel):
    name: str
    email: str
    message: str


class TextileDonationRequest(BaseModel):
    name: str
    email: str
    phone: str | None = None
    company: str | None = None
    message: str | None = None


class VolunteerRequest(BaseModel):
    name: str
    email: str
    phone: str | None = None
    skills: str | None = None
    availability: str | None = None
    message: str | None = None


class JoinArtisanRequest(BaseModel):
    name: str
    phone: str
    email: str | None = None
    location: str
    skills: str
    experience: str | None = None
    availability: str | None = None


class DonationRequest(BaseModel):
    amount: float = Field(gt=0)
    email: str
    donor_name: str | None = None
    type: Literal["one-time", "monthly"] = "one-time"

    model_config = {
        "json_schema_extra": {
            "examples": [{"amount": 500, "donor_name": "Layla", "email": "layla@example.com", "type": "monthly"}]
        }
    }


class NewsletterRequest(BaseModel):
    email: str
    language: Literal["en", "ar"] | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class FormResponse(BaseModel):
    success: bool = True
    message: str


class ImpactMetricsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    textiles_diverted_kg: float
    women_trained: int
    income_disbursed_egp: float
    current_campaign_goal_egp: float
    current_campaign_raised_egp: float
    updated_at: str | None = None


class DonationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    donor_name: str = ""
    email: str
    amount: float
    type: str
    payment_method: str
    donated_at: str | None = None
