"""Tests for submitting engagement forms through the gateway."""

import asyncio

import pytest
from storefront.errors import FormValidationError, ServerError
from storefront.forms import FormService
from storefront.gateway.models import FormKind


@pytest.fixture()
def forms(gateway, notifier):
    return FormService(gateway, notifier)


def test_contact_is_sent(forms, gateway, notifier):
    acknowledgement = asyncio.run(
        forms.submit(FormKind.CONTACT, {"name": "Aisha", "email": "aisha@example.com", "message": "Hello from Cairo!"})
    )

    assert acknowledgement.success
    assert gateway.forms == [
        (FormKind.CONTACT, {"name": "Aisha", "email": "aisha@example.com", "message": "Hello from Cairo!"})
    ]
    assert notifier.last.message_key == "form.contact.success"


def test_invalid_form_is_not_sent(forms, gateway, notifier):
    with pytest.raises(FormValidationError):
        asyncio.run(forms.submit(FormKind.NEWSLETTER, {"email": "not-an-email"}))

    assert gateway.forms == []
    assert notifier.last.message_key == "form.invalid_email"


def test_gateway_failure_is_reported(forms, gateway, notifier):
    async def failing(kind, payload):
        raise ServerError("boom", status_code=500)

    gateway.submit_form = failing

    result = asyncio.run(forms.submit(FormKind.DONATION, {"amount": 500, "email": "d@example.com"}))

    assert result is None
    assert notifier.last.message_key == "error.generic"


def test_success_message_follows_language(forms, notifier, language):
    language.switch_language("ar")
    asyncio.run(forms.submit(FormKind.DONATION, {"amount": 500, "email": "d@example.com"}))
    assert notifier.last.message == "شكرًا لك على تبرعك الكريم بمبلغ ٥٠٠ ج.م.!"


def test_donation_message_shows_amount_in_store_currency(gateway, notifier):
    forms = FormService(gateway, notifier, currency="USD")
    asyncio.run(forms.submit(FormKind.DONATION, {"amount": "1250", "email": "d@example.com"}))
    assert notifier.last.message == "Thank you for your generous donation of USD 1,250!"
