"""Per-step input validation for checkout.

Raw form input arrives as a mapping of strings. Validators return the
immutable per-step value object or raise ``CheckoutValidationError`` naming
the first offending field.
"""

import re
from collections.abc import Mapping

from storefront.checkout.session import CardDetails, ShippingInfo
from storefront.errors import CheckoutValidationError
from storefront.formatting import format_phone_number
from storefront.gateway.models import PaymentMethod

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Order in which shipping fields are checked (and reported)
SHIPPING_FIELDS = ("name", "email", "phone", "city", "address")

CARD_FIELDS = ("number", "expiry", "cvc", "cardholder")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value or ""))


def _clean(form: Mapping, name: str) -> str:
    value = form.get(name)
    return str(value).strip() if value is not None else ""


def validate_shipping(form: Mapping) -> ShippingInfo:
    values = {name: _clean(form, name) for name in SHIPPING_FIELDS}

    for name in SHIPPING_FIELDS:
        if not values[name]:
            raise CheckoutValidationError(
                f"{name} is required",
                field=name,
                message_key="checkout.field_required",
            )
        if name == "email" and not is_valid_email(values[name]):
            raise CheckoutValidationError(
                "email is not a valid email address",
                field="email",
                message_key="checkout.invalid_email",
            )

    values["phone"] = format_phone_number(values["phone"])
    return ShippingInfo(**values)


def _payment_method(value) -> PaymentMethod:
    """Accept a member, a wire code ("stripe") or a member name ("card")."""
    if isinstance(value, PaymentMethod):
        return value
    try:
        return PaymentMethod(value)
    except ValueError:
        pass
    try:
        return PaymentMethod[str(value).upper()]
    except KeyError as exc:
        raise CheckoutValidationError(
            f"unknown payment method {value!r}",
            field="payment_method",
            message_key="checkout.payment_required",
        ) from exc


def validate_payment(method: PaymentMethod | str | None, card: Mapping | CardDetails | None = None):
    """Return ``(payment_method, card_details)`` for a payment step submission."""
    if method is None or method == "":
        raise CheckoutValidationError(
            "payment method is required",
            field="payment_method",
            message_key="checkout.payment_required",
        )
    method = _payment_method(method)

    if method is not PaymentMethod.CARD:
        return method, None

    if isinstance(card, CardDetails):
        card = {name: getattr(card, name) for name in CARD_FIELDS}
    card = card or {}
    values = {name: _clean(card, name) for name in CARD_FIELDS}
    for name in CARD_FIELDS:
        if not values[name]:
            raise CheckoutValidationError(
                f"card {name} is required",
                field=f"card_{name}",
                message_key="checkout.card_required",
            )
    return method, CardDetails(**values)
