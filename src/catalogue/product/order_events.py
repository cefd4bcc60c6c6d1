"""Inbound cross-domain event handler: Catalogue reacts to Ordering events.

Listens for OrderPlaced and takes the sold quantities out of product
stock. Products missing from the catalogue are logged and skipped; the
order itself is already recorded by the time this runs.

Cross-domain events are imported from shared.events.ordering and registered
as external events via catalogue.register_external_event().
"""

import json

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.ordering import OrderPlaced

from catalogue.domain import catalogue
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)

# Register external event so Protean can deserialize it
catalogue.register_external_event(OrderPlaced, "Ordering.OrderPlaced.v1")


@catalogue.event_handler(part_of=Product, stream_category="ordering::order")
class OrderingStockEventHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        items = json.loads(event.items) if isinstance(event.items, str) else (event.items or [])
        repo = current_domain.repository_for(Product)

        for item in items:
            try:
                product = repo.get(item["product_id"])
            except ObjectNotFoundError:
                logger.warning(
                    "Ordered product not in catalogue",
                    order_id=str(event.order_id),
                    product_id=item["product_id"],
                )
                continue

            product.remove_from_stock(int(item["quantity"]))
            repo.add(product)
            logger.info(
                "Stock decremented for order",
                order_id=str(event.order_id),
                product_id=item["product_id"],
                remaining=product.stock,
            )
