"""Order Submission Client.

Packages the cart and the checkout session into an ``OrderRequest``,
sends it through the gateway and reconciles the cart once the backend has
accepted the order: the ordered quantities leave the cart, unless the
checkout was cancelled while the order was in flight.

There is no automatic retry. The session keeps its idempotency key, so a
manual retry of the same checkout is deduplicated by the backend.
"""

import structlog

from storefront.cart.store import CartStore
from storefront.checkout.session import CheckoutSession, CheckoutStep
from storefront.errors import CheckoutValidationError, EmptyCartError, ServerError
from storefront.gateway.models import CustomerInfo, LineItem, OrderRequest
from storefront.gateway.port import OrderAcknowledgement, StorefrontGateway

logger = structlog.get_logger(__name__)


class OrderSubmissionClient:
    def __init__(self, cart: CartStore, gateway: StorefrontGateway):
        self.cart = cart
        self.gateway = gateway

    def build_request(self, session: CheckoutSession) -> OrderRequest:
        """Snapshot the cart and the session's validated step data."""
        if self.cart.is_empty:
            raise EmptyCartError()
        if session.shipping_info is None:
            raise CheckoutValidationError("shipping information missing", field="shipping_info")
        if session.payment_method is None:
            raise CheckoutValidationError(
                "payment method missing",
                field="payment_method",
                message_key="checkout.payment_required",
            )

        shipping = session.shipping_info
        return OrderRequest(
            line_items=tuple(
                LineItem(product_id=item.product_id, quantity=item.quantity, unit_price=item.unit_price)
                for item in self.cart.items
            ),
            customer=CustomerInfo(
                name=shipping.name,
                email=shipping.email,
                phone=shipping.phone,
                address=shipping.address,
                city=shipping.city,
            ),
            total_amount=self.cart.get_total(),
            payment_method=session.payment_method,
            idempotency_key=session.idempotency_key,
        )

    async def submit(self, session: CheckoutSession) -> OrderAcknowledgement:
        """Send the order. ``NetworkError`` and ``ServerError`` propagate with
        the cart untouched."""
        request = self.build_request(session)
        logger.info(
            "Submitting order",
            session_id=session.session_id,
            idempotency_key=request.idempotency_key,
            total=request.total_amount,
            line_items=len(request.line_items),
        )

        acknowledgement = await self.gateway.submit_order(request)
        if not acknowledgement.success:
            raise ServerError(acknowledgement.message or "Order was not accepted")

        if session.current_step is CheckoutStep.CANCELLED:
            # Cancelling leaves the cart as the customer has it now
            logger.info(
                "Order placed for a cancelled checkout, cart left untouched",
                order_id=acknowledgement.order_id,
                session_id=session.session_id,
            )
            return acknowledgement

        self.cart.remove_ordered(request.line_items)
        logger.info("Order placed", order_id=acknowledgement.order_id, session_id=session.session_id)
        return acknowledgement
