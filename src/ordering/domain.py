"""Ordering bounded context: storefront checkouts recorded as orders.

Payment is mocked: an accepted checkout is recorded as a completed order
and announced with an OrderPlaced event so the catalogue can adjust stock.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
