"""Static gateway adapter: serves the bundled dataset without a backend.

Submissions are acknowledged locally and nothing is sent anywhere, which
makes this adapter suitable for demos, offline previews and tests.
"""

import uuid

import structlog

from shared import dataset
from storefront.errors import NotFoundError
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

_FORM_MESSAGES = {
    FormKind.CONTACT: "Contact form submitted successfully",
    FormKind.DONATION: "Donation processed successfully",
    FormKind.TEXTILE_DONATION: "Textile donation inquiry submitted successfully",
    FormKind.VOLUNTEER: "Volunteer application submitted successfully",
    FormKind.JOIN_ARTISAN: "Artisan application submitted successfully",
    FormKind.NEWSLETTER: "Newsletter subscription successful",
}


def _find(records, model, record_id, label):
    for record in records:
        if record["_id"] == str(record_id):
            return model.model_validate(record)
    raise NotFoundError(f"{label} {record_id} not found")


class StaticGateway(StorefrontGateway):
    def __init__(self):
        self.orders: dict[str, OrderRequest] = {}
        self._order_ids: dict[str, str] = {}
        self.forms: list[tuple[FormKind, dict]] = []

    async def get_products(self, featured=None, category=None):
        products = [Product.model_validate(p) for p in dataset.PRODUCTS]
        if featured is not None:
            products = [p for p in products if p.featured == featured]
        if category:
            products = [p for p in products if p.category == category]
        return products

    async def get_product(self, product_id):
        return _find(dataset.PRODUCTS, Product, product_id, "Product")

    async def get_artisans(self):
        return [Artisan.model_validate(a) for a in dataset.ARTISANS]

    async def get_artisan(self, artisan_id):
        return _find(dataset.ARTISANS, Artisan, artisan_id, "Artisan")

    async def get_blog_posts(self):
        return [BlogPost.model_validate(b) for b in dataset.BLOG_POSTS]

    async def get_blog_post(self, post_id):
        return _find(dataset.BLOG_POSTS, BlogPost, post_id, "Blog post")

    async def get_collection_points(self):
        return [CollectionPoint.model_validate(c) for c in dataset.COLLECTION_POINTS]

    async def get_impact_metrics(self):
        return ImpactMetrics.model_validate(dataset.IMPACT_METRICS)

    async def submit_order(self, request: OrderRequest) -> OrderAcknowledgement:
        order_id = self._order_ids.get(request.idempotency_key)
        if order_id is None:
            order_id = str(uuid.uuid4())
            self._order_ids[request.idempotency_key] = order_id
            self.orders[order_id] = request
            logger.info("Order recorded locally", order_id=order_id, total=request.total_amount)
        return OrderAcknowledgement(success=True, order_id=order_id, message="Order placed successfully")

    async def submit_form(self, kind: FormKind, payload: dict) -> FormAcknowledgement:
        self.forms.append((kind, dict(payload)))
        logger.info("Form recorded locally", kind=kind.value)
        return FormAcknowledgement(success=True, message=_FORM_MESSAGES[kind])
