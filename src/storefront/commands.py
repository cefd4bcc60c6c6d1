"""Typed UI commands.

UI adapters translate clicks and form submissions into these records and
hand them to ``StorefrontController.dispatch``. Nothing in here knows about
a particular UI toolkit.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from storefront.gateway.models import PaymentMethod


@dataclass(frozen=True)
class AddItem:
    product: Mapping
    quantity: int = 1


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class StartCheckout:
    pass


@dataclass(frozen=True)
class SubmitShipping:
    form: Mapping = field(default_factory=dict)


@dataclass(frozen=True)
class SubmitPayment:
    method: PaymentMethod | str | None
    card: Mapping | None = None


@dataclass(frozen=True)
class GoBack:
    pass


@dataclass(frozen=True)
class SubmitOrder:
    pass


@dataclass(frozen=True)
class CancelCheckout:
    pass


@dataclass(frozen=True)
class SwitchLanguage:
    language: str | None = None  # None toggles between English and Arabic


Command = (
    AddItem
    | RemoveItem
    | UpdateQuantity
    | StartCheckout
    | SubmitShipping
    | SubmitPayment
    | GoBack
    | SubmitOrder
    | CancelCheckout
    | SwitchLanguage
)
