"""TTL memoization for gateway reads.

Results are kept per key for ``ttl`` seconds. Concurrent loads of the same
key share one in-flight task, so a burst of identical requests hits the
data source once. Failed loads are not cached.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from storefront.gateway.models import FormKind
from storefront.gateway.port import StorefrontGateway

logger = structlog.get_logger(__name__)

DEFAULT_TTL = 300.0


class TTLCache:
    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self._inflight: dict[str, asyncio.Future] = {}

    async def get_or_load(self, key: str, loader: Callable[[], Awaitable[Any]], ttl: float | None = None) -> Any:
        ttl = self.ttl if ttl is None else ttl
        now = self._clock()

        entry = self._entries.get(key)
        if entry is not None and now - entry[0] < ttl:
            return entry[1]

        pending = self._inflight.get(key)
        if pending is not None:
            return await asyncio.shield(pending)

        task = asyncio.ensure_future(loader())
        self._inflight[key] = task
        try:
            value = await asyncio.shield(task)
        finally:
            self._inflight.pop(key, None)

        self._entries[key] = (now, value)
        logger.debug("Cached gateway result", key=key)
        return value

    def invalidate(self, key: str | None = None) -> None:
        """Drop one key, or everything when ``key`` is None."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def __contains__(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and self._clock() - entry[0] < self.ttl


class CachingGateway(StorefrontGateway):
    """Memoize the read operations of another gateway. Submissions pass through."""

    def __init__(self, inner: StorefrontGateway, cache: TTLCache | None = None):
        self.inner = inner
        self.cache = cache or TTLCache()

    async def get_products(self, featured=None, category=None):
        return await self.cache.get_or_load(
            f"products:featured={featured}:category={category}",
            lambda: self.inner.get_products(featured=featured, category=category),
        )

    async def get_product(self, product_id):
        return await self.cache.get_or_load(f"product:{product_id}", lambda: self.inner.get_product(product_id))

    async def get_artisans(self):
        return await self.cache.get_or_load("artisans", self.inner.get_artisans)

    async def get_artisan(self, artisan_id):
        return await self.cache.get_or_load(f"artisan:{artisan_id}", lambda: self.inner.get_artisan(artisan_id))

    async def get_blog_posts(self):
        return await self.cache.get_or_load("blog_posts", self.inner.get_blog_posts)

    async def get_blog_post(self, post_id):
        return await self.cache.get_or_load(f"blog_post:{post_id}", lambda: self.inner.get_blog_post(post_id))

    async def get_collection_points(self):
        return await self.cache.get_or_load("collection_points", self.inner.get_collection_points)

    async def get_impact_metrics(self):
        return await self.cache.get_or_load("impact_metrics", self.inner.get_impact_metrics)

    async def submit_order(self, request):
        return await self.inner.submit_order(request)

    async def submit_form(self, kind, payload):
        acknowledgement = await self.inner.submit_form(kind, payload)
        if kind is FormKind.DONATION:
            # Donations move the campaign counter
            self.cache.invalidate("impact_metrics")
        return acknowledgement

    async def aclose(self):
        await self.inner.aclose()
