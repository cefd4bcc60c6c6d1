"""Remote-first gateway with a static fallback for reads.

Catalogue reads that fail because the backend is unreachable or broken are
served from the fallback adapter instead. A 404 is an answer, not a
failure, and propagates. Submissions never fall back: an order or a form
silently accepted by the static adapter would be lost.
"""

import structlog

from storefront.errors import NetworkError, ServerError
from storefront.gateway.port import StorefrontGateway

logger = structlog.get_logger(__name__)


class FallbackGateway(StorefrontGateway):
    def __init__(self, primary: StorefrontGateway, fallback: StorefrontGateway):
        self.primary = primary
        self.fallback = fallback

    async def _read(self, operation: str, *args, **kwargs):
        try:
            return await getattr(self.primary, operation)(*args, **kwargs)
        except (NetworkError, ServerError) as exc:
            logger.warning("Primary gateway failed, serving fallback data", operation=operation, error=str(exc))
            return await getattr(self.fallback, operation)(*args, **kwargs)

    async def get_products(self, featured=None, category=None):
        return await self._read("get_products", featured=featured, category=category)

    async def get_product(self, product_id):
        return await self._read("get_product", product_id)

    async def get_artisans(self):
        return await self._read("get_artisans")

    async def get_artisan(self, artisan_id):
        return await self._read("get_artisan", artisan_id)

    async def get_blog_posts(self):
        return await self._read("get_blog_posts")

    async def get_blog_post(self, post_id):
        return await self._read("get_blog_post", post_id)

    async def get_collection_points(self):
        return await self._read("get_collection_points")

    async def get_impact_metrics(self):
        return await self._read("get_impact_metrics")

    async def submit_order(self, request):
        return await self.primary.submit_order(request)

    async def submit_form(self, kind, payload):
        return await self.primary.submit_form(kind, payload)

    async def aclose(self):
        await self.primary.aclose()
        await self.fallback.aclose()
