"""Handmade storefront FastAPI application.

Multi-domain web server backing the storefront's ``/api`` surface.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (handlers fire in the UoW)
#   - "production" → event_processing = "async" (handlers fire via Engine)
from uuid import uuid4

from backoffice.domain import backoffice
from catalogue.domain import catalogue
from engagement.domain import engagement
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering
from protean.integrations.fastapi import register_exception_handlers
from shared.logging import bind_request_context, clear_request_context, configure_logging

configure_logging()

backoffice.init()
catalogue.init()
engagement.init()
ordering.init()

API_PREFIX = "/api"

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
# Checked in order, so the admin sub-paths owned by other domains come first
_ROUTE_DOMAIN_MAP = {
    f"{API_PREFIX}/admin/orders": ordering,
    f"{API_PREFIX}/admin/donations": engagement,
    f"{API_PREFIX}/admin": backoffice,
    f"{API_PREFIX}/products": catalogue,
    f"{API_PREFIX}/artisans": catalogue,
    f"{API_PREFIX}/blog": catalogue,
    f"{API_PREFIX}/collection-points": catalogue,
    f"{API_PREFIX}/checkout": ordering,
    f"{API_PREFIX}/orders": ordering,
    f"{API_PREFIX}/contact": engagement,
    f"{API_PREFIX}/textile-donation": engagement,
    f"{API_PREFIX}/volunteer": engagement,
    f"{API_PREFIX}/join-artisan": engagement,
    f"{API_PREFIX}/donate": engagement,
    f"{API_PREFIX}/newsletter": engagement,
    f"{API_PREFIX}/impact": engagement,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Handmade Storefront API",
    description="Bilingual handmade-goods storefront: catalogue, ordering, engagement and backoffice",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    bind_request_context(
        request_id=request.headers.get("X-Request-ID") or uuid4().hex,
        method=request.method,
        path=request.url.path,
        domain=domain.name if domain is not None else None,
    )
    try:
        if domain is not None:
            with domain.domain_context():
                return await call_next(request)
        # No domain match: pass through (health check, docs, etc.)
        return await call_next(request)
    finally:
        clear_request_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from backoffice.api.routes import admin_router  # noqa: E402
from catalogue.api import (  # noqa: E402
    artisan_router,
    blog_router,
    collection_point_router,
    product_router,
)
from engagement.api.routes import admin_donation_router, form_router, impact_router  # noqa: E402
from ordering.api.routes import admin_order_router, checkout_router, order_router  # noqa: E402

for router in (
    product_router,
    artisan_router,
    blog_router,
    collection_point_router,
    checkout_router,
    order_router,
    admin_order_router,
    form_router,
    impact_router,
    admin_donation_router,
    admin_router,
):
    app.include_router(router, prefix=API_PREFIX)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "catalogue": {"name": catalogue.name},
                "ordering": {"name": ordering.name},
                "engagement": {"name": engagement.name},
                "backoffice": {"name": backoffice.name},
            },
        }
    )
