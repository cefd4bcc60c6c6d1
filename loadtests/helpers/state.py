"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, nothing is shared
between users. State carries what earlier steps fetched or created so
follow-up requests can reference it.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a single simulated shopper from browsing to order lookup."""

    products: list[dict] = field(default_factory=list)
    viewed_product_id: str | None = None
    checkout_body: dict | None = None
    order_id: str | None = None


@dataclass
class SupporterState:
    """Tracks a supporter's view of the fundraising campaign."""

    raised_before: float | None = None
    donated: float = 0.0
