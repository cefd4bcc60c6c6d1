"""Catalogue domain API package."""

from catalogue.api.routes import (
    artisan_router,
    blog_router,
    collection_point_router,
    product_router,
)

__all__ = ["product_router", "artisan_router", "blog_router", "collection_point_router"]
