"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A storefront checkout was accepted and recorded as an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity, unit_price}
    total_amount = Float(required=True)
    payment_method = String(required=True)
    placed_at = DateTime(required=True)
