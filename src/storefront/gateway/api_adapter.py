"""Remote gateway adapter: talks to the storefront REST backend over httpx."""

from typing import Any

import httpx
import pydantic
import structlog

from storefront.errors import NetworkError, NotFoundError, ServerError
from storefront.gateway.models import (
    Artisan,
    BlogPost,
    CollectionPoint,
    FormKind,
    ImpactMetrics,
    OrderRequest,
    Product,
)
from storefront.gateway.port import FormAcknowledgement, OrderAcknowledgement, StorefrontGateway

logger = structlog.get_logger(__name__)


class ApiGateway(StorefrontGateway):
    """Gateway backed by the ``/api`` HTTP surface.

    Transport failures (connection refused, DNS, timeouts) raise
    ``NetworkError``; a 404 raises ``NotFoundError``; any other non-2xx
    status or an unparseable body raises ``ServerError``.

    ``transport`` is passed straight to ``httpx.AsyncClient`` so tests can
    plug in ``httpx.MockTransport`` or ``httpx.ASGITransport``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        language: str = "en",
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=f"{self.base_url}/api",
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "Accept-Language": language,
            },
        )

    def set_language(self, language: str) -> None:
        self.client.headers["Accept-Language"] = language

    async def aclose(self) -> None:
        await self.client.aclose()

    # -------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------
    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("Backend unreachable", method=method, path=path, error=str(exc))
            raise NetworkError(f"{method} {path} failed: {exc}") from exc

        if response.status_code == 404:
            raise NotFoundError(f"{path} not found")

        try:
            payload = response.json() if response.content else None
        except ValueError as exc:
            raise ServerError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from exc

        if response.is_error:
            logger.warning(
                "Backend rejected request",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ServerError(
                _error_message(payload) or f"{method} {path} failed with {response.status_code}",
                status_code=response.status_code,
                payload=payload,
            )
        return payload

    async def _get_list(self, path: str, model: type[pydantic.BaseModel], params: dict | None = None) -> list:
        payload = await self._request("GET", path, params=params)
        try:
            return [model.model_validate(entry) for entry in payload or []]
        except pydantic.ValidationError as exc:
            raise ServerError(f"GET {path} returned malformed records") from exc

    async def _get_one(self, path: str, model: type[pydantic.BaseModel]):
        payload = await self._request("GET", path)
        try:
            return model.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise ServerError(f"GET {path} returned a malformed record") from exc

    # -------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------
    async def get_products(self, featured=None, category=None):
        params = {}
        if featured is not None:
            params["featured"] = "true" if featured else "false"
        if category:
            params["category"] = category
        return await self._get_list("/products", Product, params=params or None)

    async def get_product(self, product_id):
        return await self._get_one(f"/products/{product_id}", Product)

    async def get_artisans(self):
        return await self._get_list("/artisans", Artisan)

    async def get_artisan(self, artisan_id):
        return await self._get_one(f"/artisans/{artisan_id}", Artisan)

    async def get_blog_posts(self):
        return await self._get_list("/blog", BlogPost)

    async def get_blog_post(self, post_id):
        return await self._get_one(f"/blog/{post_id}", BlogPost)

    async def get_collection_points(self):
        return await self._get_list("/collection-points", CollectionPoint)

    async def get_impact_metrics(self):
        return await self._get_one("/impact", ImpactMetrics)

    # -------------------------------------------------------------------
    # Submissions
    # -------------------------------------------------------------------
    async def submit_order(self, request: OrderRequest) -> OrderAcknowledgement:
        payload = await self._request(
            "POST",
            "/checkout",
            json=request.to_wire(),
            headers={"Idempotency-Key": request.idempotency_key},
        )
        payload = payload or {}
        logger.info("Order accepted", order_id=payload.get("orderId"))
        return OrderAcknowledgement(
            success=payload.get("success", True),
            order_id=payload.get("orderId"),
            message=payload.get("message"),
        )

    async def submit_form(self, kind: FormKind, payload: dict) -> FormAcknowledgement:
        body = await self._request("POST", f"/{kind.value}", json=payload)
        body = body or {}
        return FormAcknowledgement(success=body.get("success", True), message=body.get("message"))


def _error_message(payload) -> str | None:
    if isinstance(payload, dict):
        error = payload.get("error") or payload.get("detail") or payload.get("message")
        if isinstance(error, str):
            return error
        if isinstance(error, dict):
            return "; ".join(
                f"{field}: {', '.join(map(str, msgs)) if isinstance(msgs, list) else msgs}"
                for field, msgs in error.items()
            )
    return None
