"""Storefront gateway port (abstract interface).

Defines the contract every data source must implement. The checkout and
the UI controllers depend only on this port, so the remote API, the
bundled static dataset, or a test double can be swapped without touching
them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.gateway.models import (
    Artisan,
    BlogPost,
    CollectionPoint,
    FormKind,
    ImpactMetrics,
    OrderRequest,
    Product,
)


@dataclass(frozen=True)
class OrderAcknowledgement:
    """Result of an accepted order submission."""

    success: bool
    order_id: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class FormAcknowledgement:
    """Result of an accepted engagement form submission."""

    success: bool
    message: str | None = None


class StorefrontGateway(ABC):
    """Abstract data access interface for the storefront."""

    @abstractmethod
    async def get_products(self, featured: bool | None = None, category: str | None = None) -> list[Product]:
        """List products, optionally only featured ones or one category."""
        ...

    @abstractmethod
    async def get_product(self, product_id: str) -> Product:
        """Return one product or raise ``NotFoundError``."""
        ...

    @abstractmethod
    async def get_artisans(self) -> list[Artisan]: ...

    @abstractmethod
    async def get_artisan(self, artisan_id: str) -> Artisan: ...

    @abstractmethod
    async def get_blog_posts(self) -> list[BlogPost]: ...

    @abstractmethod
    async def get_blog_post(self, post_id: str) -> BlogPost: ...

    @abstractmethod
    async def get_collection_points(self) -> list[CollectionPoint]: ...

    @abstractmethod
    async def get_impact_metrics(self) -> ImpactMetrics: ...

    @abstractmethod
    async def submit_order(self, request: OrderRequest) -> OrderAcknowledgement:
        """Send an order. Raises ``NetworkError`` or ``ServerError`` on failure."""
        ...

    @abstractmethod
    async def submit_form(self, kind: FormKind, payload: dict) -> FormAcknowledgement:
        """Send an engagement form (contact, donation, newsletter, ...)."""
        ...

    async def aclose(self) -> None:
        """Release any transport resources held by the adapter."""
        return None
