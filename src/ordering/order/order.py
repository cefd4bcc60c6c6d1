"""Order aggregate: a checkout accepted from the storefront.

Orders are created in their final state. Payment is mocked, so there is
no lifecycle beyond ``Completed``; the order is a record of what was sold,
to whom, and for how much.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import OrderPlaced

# Totals are client-computed floats; anything within a piastre is a match
_TOTAL_TOLERANCE = 0.01


class OrderStatus(Enum):
    COMPLETED = "Completed"


class PaymentMethod(Enum):
    CARD = "stripe"
    CASH_VOUCHER = "fawry"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class CustomerInfo:
    """Who the order ships to, captured at checkout time."""

    name = String(required=True, max_length=200)
    email = String(required=True, max_length=254)
    phone = String(required=True, max_length=30)
    address = String(required=True, max_length=500)
    city = String(required=True, max_length=100)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.01)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    items = HasMany(OrderItem)
    customer = ValueObject(CustomerInfo, required=True)
    total_amount = Float(required=True, min_value=0.01)
    payment_method = String(choices=PaymentMethod, required=True)
    status = String(choices=OrderStatus, default=OrderStatus.COMPLETED.value)
    idempotency_key = String(max_length=100)
    placed_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

    @invariant.post
    def total_must_match_items(self):
        if not self.items or self.total_amount is None:
            return
        expected = sum(item.line_total for item in self.items)
        if abs(expected - self.total_amount) > _TOTAL_TOLERANCE:
            raise ValidationError(
                {"total_amount": [f"Total {self.total_amount} does not match the items ({expected})"]}
            )

    @classmethod
    def place(cls, items_data, customer, total_amount, payment_method, idempotency_key=None):
        """Record a checkout as a completed order and raise OrderPlaced.

        Args:
            items_data: List of dicts with product_id, quantity, unit_price.
            customer: Dict with name, email, phone, address, city.
            total_amount: Order total as charged.
            payment_method: "stripe" or "fawry".
            idempotency_key: Checkout session key, used to spot resubmissions.
        """
        now = datetime.now(UTC)
        order = cls(
            items=[OrderItem(**item) for item in items_data],
            customer=CustomerInfo(**customer),
            total_amount=total_amount,
            payment_method=payment_method,
            idempotency_key=idempotency_key,
            placed_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                items=json.dumps(
                    [
                        {
                            "product_id": str(item.product_id),
                            "quantity": item.quantity,
                            "unit_price": item.unit_price,
                        }
                        for item in order.items
                    ]
                ),
                total_amount=order.total_amount,
                payment_method=order.payment_method,
                placed_at=now,
            )
        )
        return order

    def to_record(self) -> dict:
        return {
            "_id": str(self.id),
            "items": [
                {
                    "productId": str(item.product_id),
                    "quantity": item.quantity,
                    "price": item.unit_price,
                }
                for item in self.items
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
            "payment_method": self.payment_method,
            "status": self.status,
            "placed_at": self.placed_at.isoformat() if self.placed_at else None,
        }
