"""Checkout session state.

Each step stores its validated, immutable result on the session, so moving
back and forth between steps never loses what the customer already
entered.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum

from storefront.cart.item import CartItem
from storefront.gateway.models import PaymentMethod


class CheckoutStep(Enum):
    SHIPPING = "shipping"
    PAYMENT = "payment"
    REVIEW = "review"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


# Steps shown in the progress indicator, in order
VISIBLE_STEPS = (CheckoutStep.SHIPPING, CheckoutStep.PAYMENT, CheckoutStep.REVIEW)

TERMINAL_STEPS = {CheckoutStep.SUBMITTED, CheckoutStep.CANCELLED}


@dataclass(frozen=True)
class ShippingInfo:
    name: str
    email: str
    phone: str
    address: str
    city: str


@dataclass(frozen=True)
class CardDetails:
    """Card fields are only checked for presence; the card itself is
    charged by the payment provider, never here."""

    number: str
    expiry: str
    cvc: str
    cardholder: str


@dataclass(frozen=True)
class ReviewSummary:
    shipping_info: ShippingInfo
    payment_method: PaymentMethod
    payment_label: str
    line_items: tuple[CartItem, ...]
    total: float
    total_display: str = ""


@dataclass
class CheckoutSession:
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    idempotency_key: str = field(default_factory=lambda: str(uuid.uuid4()))
    current_step: CheckoutStep = CheckoutStep.SHIPPING
    shipping_info: ShippingInfo | None = None
    payment_method: PaymentMethod | None = None
    card_details: CardDetails | None = None
    review: ReviewSummary | None = None
    submitting: bool = False
    order_id: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.current_step in TERMINAL_STEPS
