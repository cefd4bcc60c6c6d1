"""Order placement: command and handler.

Resubmitting a checkout with the same idempotency key returns the order
that was already recorded instead of creating a second one.
"""

import json

from protean import handle
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PlaceOrder:
    items = Text(required=True)  # JSON: list of {product_id, quantity, unit_price}
    customer = Text(required=True)  # JSON: {name, email, phone, address, city}
    total_amount = Float(required=True)
    payment_method = String(required=True, max_length=20)
    idempotency_key = String(max_length=100)


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        repo = current_domain.repository_for(Order)

        if command.idempotency_key:
            existing = repo._dao.query.filter(idempotency_key=command.idempotency_key).all().items
            if existing:
                logger.info(
                    "Duplicate checkout submission",
                    order_id=str(existing[0].id),
                    idempotency_key=command.idempotency_key,
                )
                return str(existing[0].id)

        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        customer = json.loads(command.customer) if isinstance(command.customer, str) else command.customer

        order = Order.place(
            items_data=items_data,
            customer=customer,
            total_amount=command.total_amount,
            payment_method=command.payment_method,
            idempotency_key=command.idempotency_key,
        )
        repo.add(order)
        logger.info("Order placed", order_id=str(order.id), total=order.total_amount, items=len(order.items))
        return str(order.id)
