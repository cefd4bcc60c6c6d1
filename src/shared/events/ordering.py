"""Cross-domain event contracts for Ordering domain events.

These classes define the event shape for consumption by other domains
(the Catalogue domain decrements product stock when an order is placed).
They are registered as external events via domain.register_external_event()
with matching __type__ strings so Protean's stream deserialization works
correctly.

The source-of-truth events are in src/ordering/order/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String, Text


class OrderPlaced(BaseEvent):
    """A storefront checkout was accepted and recorded as an order.

    Consumed by the Catalogue domain to decrement product stock.
    """

    __version__ = 1

    order_id = Identifier(required=True)
    items = Text(required=True)  # JSON list of {product_id, quantity, unit_price}
    total_amount = Float(required=True)
    payment_method = String(required=True)
    placed_at = DateTime(required=True)
