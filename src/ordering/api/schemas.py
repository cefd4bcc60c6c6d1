"""Pydantic request/response schemas for the Ordering API.

These are external contracts matching the storefront's checkout body,
separate from the internal Protean commands.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ShippingAddressSchema(BaseModel):
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)


class CustomerInfoSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    shipping_address: ShippingAddressSchema = Field(alias="shippingAddress")


class CheckoutItemSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    quantity: int = Field(ge=1)
    price: float = Field(gt=0)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class CheckoutRequest(BaseModel):
    items: list[CheckoutItemSchema] = Field(..., min_length=1)
    customer_info: CustomerInfoSchema
    total_amount: float = Field(gt=0)
    payment_method: Literal["stripe", "fawry"]
    idempotency_key: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"productId": "1", "quantity": 2, "price": 350.0}],
                    "customer_info": {
                        "name": "Fatma Hassan",
                        "email": "fatma@example.com",
                        "phone": "+20 100 123 4567",
                        "shippingAddress": {"address": "12 Pyramids Road", "city": "Giza"},
                    },
                    "total_amount": 700.0,
                    "payment_method": "fawry",
                    "idempotency_key": "0b6a3f5e-2c1d-4c8e-9a57-3f1e2d4c5b6a",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class CheckoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Order placed successfully"
    order_id: str = Field(serialization_alias="orderId")


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    quantity: int
    price: float


class OrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    items: list[OrderItemResponse]
    customer_info: CustomerInfoSchema
    total_amount: float
    payment_method: str
    status: str
    placed_at: str | None = None
