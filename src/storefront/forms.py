"""Engagement forms: contact, donation, textile donation, volunteer,
join-artisan and newsletter.

Each form has a validator that turns raw input into the payload the
backend expects, raising ``FormValidationError`` for the first rule that
fails. ``FormService`` runs the validator, sends the payload through the
gateway and publishes the localized outcome.
"""

from collections.abc import Callable, Mapping

import structlog

from storefront.checkout.validation import is_valid_email
from storefront.errors import FormValidationError, GatewayError
from storefront.formatting import format_currency, format_phone_number
from storefront.gateway.models import FormKind
from storefront.gateway.port import FormAcknowledgement, StorefrontGateway
from storefront.notifier import Notifier

logger = structlog.get_logger(__name__)

DONATION_TYPES = ("one-time", "monthly")


def _text(form: Mapping, name: str) -> str:
    value = form.get(name)
    return str(value).strip() if value is not None else ""


def _phone(form: Mapping) -> str:
    return format_phone_number(_text(form, "phone"))


def _require_name(form: Mapping, name: str = "name") -> str:
    value = _text(form, name)
    if len(value) < 2:
        raise FormValidationError(f"{name} must have at least 2 characters", field=name, message_key="form.invalid_name")
    return value


def _require_email(form: Mapping, name: str = "email") -> str:
    value = _text(form, name)
    if not is_valid_email(value):
        raise FormValidationError(f"{name} is not a valid email address", field=name, message_key="form.invalid_email")
    return value


def validate_contact(form: Mapping) -> dict:
    name = _require_name(form)
    email = _require_email(form)
    message = _text(form, "message")
    if len(message) < 10:
        raise FormValidationError(
            "message must have at least 10 characters",
            field="message",
            message_key="form.invalid_message",
        )
    return {"name": name, "email": email, "message": message}


def validate_donation(form: Mapping) -> dict:
    try:
        amount = float(form.get("amount") or 0)
    except (TypeError, ValueError):
        amount = 0.0
    if amount <= 0:
        raise FormValidationError("amount must be positive", field="amount", message_key="form.invalid_amount")

    email = _require_email(form)
    donation_type = _text(form, "type") or "one-time"
    if donation_type not in DONATION_TYPES:
        raise FormValidationError(f"unknown donation type {donation_type!r}", field="type")

    return {
        "amount": amount,
        "donor_name": _text(form, "donor_name"),
        "email": email,
        "type": donation_type,
    }


def validate_textile_donation(form: Mapping) -> dict:
    return {
        "name": _require_name(form),
        "email": _require_email(form),
        "phone": _phone(form),
        "company": _text(form, "company"),
        "message": _text(form, "message"),
    }


def validate_volunteer(form: Mapping) -> dict:
    return {
        "name": _require_name(form),
        "email": _require_email(form),
        "phone": _phone(form),
        "skills": _text(form, "skills"),
        "availability": _text(form, "availability"),
        "message": _text(form, "message"),
    }


def validate_join_artisan(form: Mapping) -> dict:
    name = _require_name(form)

    phone = _text(form, "phone")
    if len(phone) < 10:
        raise FormValidationError("phone must have at least 10 characters", field="phone", message_key="form.invalid_phone")

    # Email is optional for artisans, but must be well formed when given
    email = _text(form, "email")
    if email and not is_valid_email(email):
        raise FormValidationError("email is not a valid email address", field="email", message_key="form.invalid_email")

    location = _text(form, "location")
    if len(location) < 2:
        raise FormValidationError(
            "location must have at least 2 characters",
            field="location",
            message_key="form.invalid_location",
        )

    skills = _text(form, "skills")
    if not skills:
        raise FormValidationError("skills is required", field="skills", message_key="form.invalid_skills")

    return {
        "name": name,
        "phone": format_phone_number(phone),
        "email": email,
        "location": location,
        "skills": skills,
        "experience": _text(form, "experience"),
        "availability": _text(form, "availability"),
    }


def validate_newsletter(form: Mapping) -> dict:
    return {"email": _require_email(form)}


VALIDATORS: dict[FormKind, Callable[[Mapping], dict]] = {
    FormKind.CONTACT: validate_contact,
    FormKind.DONATION: validate_donation,
    FormKind.TEXTILE_DONATION: validate_textile_donation,
    FormKind.VOLUNTEER: validate_volunteer,
    FormKind.JOIN_ARTISAN: validate_join_artisan,
    FormKind.NEWSLETTER: validate_newsletter,
}

SUCCESS_MESSAGE_KEYS = {
    FormKind.CONTACT: "form.contact.success",
    FormKind.DONATION: "form.donation.success",
    FormKind.TEXTILE_DONATION: "form.textile_donation.success",
    FormKind.VOLUNTEER: "form.volunteer.success",
    FormKind.JOIN_ARTISAN: "form.join_artisan.success",
    FormKind.NEWSLETTER: "form.newsletter.success",
}


class FormService:
    def __init__(self, gateway: StorefrontGateway, notifier: Notifier, currency: str = "EGP"):
        self.gateway = gateway
        self.notifier = notifier
        self.currency = currency

    async def submit(self, kind: FormKind, form: Mapping) -> FormAcknowledgement | None:
        """Validate and send a form.

        Validation failures are published and re-raised; nothing is sent.
        Gateway failures are published and return ``None``.
        """
        try:
            payload = VALIDATORS[kind](form)
        except FormValidationError as exc:
            if exc.message_key:
                self.notifier.error(exc.message_key)
            logger.info("Form rejected", kind=kind.value, field=exc.field)
            raise

        try:
            acknowledgement = await self.gateway.submit_form(kind, payload)
        except GatewayError as exc:
            logger.warning("Form submission failed", kind=kind.value, error=str(exc))
            self.notifier.error("error.generic")
            return None

        params = {}
        if kind is FormKind.DONATION:
            params["amount"] = format_currency(payload["amount"], self.currency, self.notifier.language)
        self.notifier.success(SUCCESS_MESSAGE_KEYS[kind], **params)
        return acknowledgement
