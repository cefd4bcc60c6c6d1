"""Storefront data access.

Adapters:
- ApiGateway for the REST backend
- StaticGateway for the bundled dataset
- FallbackGateway to serve static reads when the backend is down
- CachingGateway to memoize reads for a TTL
"""

from storefront.gateway.api_adapter import ApiGateway
from storefront.gateway.cache import CachingGateway, TTLCache
from storefront.gateway.fallback import FallbackGateway
from storefront.gateway.port import FormAcknowledgement, OrderAcknowledgement, StorefrontGateway
from storefront.gateway.static_adapter import StaticGateway

__all__ = [
    "ApiGateway",
    "CachingGateway",
    "FallbackGateway",
    "FormAcknowledgement",
    "OrderAcknowledgement",
    "StaticGateway",
    "StorefrontGateway",
    "TTLCache",
]
