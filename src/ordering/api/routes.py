"""FastAPI routes for the Ordering domain: checkout and order lookup."""

import json

from fastapi import APIRouter, Depends, Header
from protean.utils.globals import current_domain
from shared.auth import require_admin

from ordering.api.schemas import CheckoutRequest, CheckoutResponse, OrderResponse
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder

checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
admin_order_router = APIRouter(prefix="/admin/orders", tags=["admin"], dependencies=[Depends(require_admin)])


@checkout_router.post("", status_code=201, response_model=CheckoutResponse)
async def checkout(body: CheckoutRequest, idempotency_key: str | None = Header(default=None)) -> CheckoutResponse:
    # The header wins over the body field when both are sent
    key = idempotency_key or body.idempotency_key
    command = PlaceOrder(
        items=json.dumps(
            [{"product_id": item.product_id, "quantity": item.quantity, "unit_price": item.price} for item in body.items]
        ),
        customer=json.dumps(
            {
                "name": body.customer_info.name,
                "email": body.customer_info.email,
                "phone": body.customer_info.phone,
                "address": body.customer_info.shipping_address.address,
                "city": body.customer_info.shipping_address.city,
            }
        ),
        total_amount=body.total_amount,
        payment_method=body.payment_method,
        idempotency_key=key,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return CheckoutResponse(order_id=order_id)


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse.model_validate(order.to_record())


@admin_order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    orders = current_domain.repository_for(Order)._dao.query.all().items
    orders = sorted(orders, key=lambda order: order.placed_at, reverse=True)
    return [OrderResponse.model_validate(order.to_record()) for order in orders]
