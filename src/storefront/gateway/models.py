"""Data shapes exchanged through the storefront gateway.

Catalogue records mirror the backend's JSON (``_id`` plus bilingual
``*_en`` / ``*_ar`` fields). ``OrderRequest`` is the immutable snapshot the
checkout hands to the gateway; ``to_wire`` renders the body expected by
``POST /api/checkout``.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PaymentMethod(Enum):
    """Payment options offered at checkout. Values are the wire codes."""

    CARD = "stripe"
    CASH_VOUCHER = "fawry"


class FormKind(Enum):
    """Engagement forms. Values are the backend endpoint names."""

    CONTACT = "contact"
    DONATION = "donate"
    TEXTILE_DONATION = "textile-donation"
    VOLUNTEER = "volunteer"
    JOIN_ARTISAN = "join-artisan"
    NEWSLETTER = "newsletter"


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")


class Product(_Record):
    name_en: str
    name_ar: str = ""
    description_en: str = ""
    description_ar: str = ""
    price: float
    category: str | None = None
    images: list[str] = Field(default_factory=list)
    artisan_id: str | None = None
    materials_en: str = ""
    materials_ar: str = ""
    care_en: str = ""
    care_ar: str = ""
    stock: int = 0
    featured: bool = False

    def to_card(self, language: str = "en") -> dict:
        """Product card payload accepted by ``CartStore.add_item``."""
        name = self.name_ar if language == "ar" and self.name_ar else self.name_en
        return {
            "id": self.id,
            "name": name,
            "price": self.price,
            "image": self.images[0] if self.images else "",
        }


class Artisan(_Record):
    name_en: str
    name_ar: str = ""
    bio_en: str = ""
    bio_ar: str = ""
    image_url: str = ""


class BlogPost(_Record):
    title_en: str
    title_ar: str = ""
    content_en: str = ""
    content_ar: str = ""
    author: str = ""
    date: datetime | None = None
    image_url: str = ""


class CollectionPoint(_Record):
    name_en: str
    name_ar: str = ""
    address_en: str = ""
    address_ar: str = ""
    latitude: float | None = None
    longitude: float | None = None
    hours_en: str = ""
    hours_ar: str = ""
    contact_phone: str = ""


class ImpactMetrics(BaseModel):
    model_config = ConfigDict(extra="ignore")

    textiles_diverted_kg: float = 0
    women_trained: int = 0
    income_disbursed_egp: float = 0
    current_campaign_goal_egp: float = 0
    current_campaign_raised_egp: float = 0

    @property
    def campaign_progress(self) -> float:
        """Share of the current campaign goal raised, capped at 1.0."""
        if not self.current_campaign_goal_egp:
            return 0.0
        return min(self.current_campaign_raised_egp / self.current_campaign_goal_egp, 1.0)


class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int = Field(ge=1)
    unit_price: float = Field(gt=0)


class CustomerInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    phone: str
    address: str
    city: str


class OrderRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    line_items: tuple[LineItem, ...]
    customer: CustomerInfo
    total_amount: float
    payment_method: PaymentMethod
    idempotency_key: str

    def to_wire(self) -> dict:
        return {
            "items": [
                {"productId": item.product_id, "quantity": item.quantity, "price": item.unit_price}
                for item in self.line_items
            ],
            "customer_info": {
                "name": self.customer.name,
                "email": self.customer.email,
                "phone": self.customer.phone,
                "shippingAddress": {
                    "address": self.customer.address,
                    "city": self.customer.city,
                },
            },
            "total_amount": self.total_amount,
            "payment_method": self.payment_method.value,
            "idempotency_key": self.idempotency_key,
        }
