"""FastAPI read endpoints for the Catalogue domain."""

from datetime import UTC, datetime

from fastapi import APIRouter
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    ArtisanResponse,
    BlogPostResponse,
    CollectionPointResponse,
    ProductResponse,
)
from catalogue.artisan.artisan import Artisan
from catalogue.content.blog_post import BlogPost
from catalogue.content.collection_point import CollectionPoint
from catalogue.product.product import Product

product_router = APIRouter(prefix="/products", tags=["products"])
artisan_router = APIRouter(prefix="/artisans", tags=["artisans"])
blog_router = APIRouter(prefix="/blog", tags=["blog"])
collection_point_router = APIRouter(prefix="/collection-points", tags=["collection-points"])


def _all(aggregate_cls, **filters):
    query = current_domain.repository_for(aggregate_cls)._dao.query
    if filters:
        query = query.filter(**filters)
    return query.all().items


# --- Products ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(featured: bool | None = None, category: str | None = None) -> list[ProductResponse]:
    filters = {}
    if featured is not None:
        filters["featured"] = featured
    if category:
        filters["category"] = category
    products = _all(Product, **filters)
    return [ProductResponse.model_validate(product.to_record()) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.model_validate(product.to_record())


# --- Artisans ---


@artisan_router.get("", response_model=list[ArtisanResponse])
async def list_artisans() -> list[ArtisanResponse]:
    return [ArtisanResponse.model_validate(artisan.to_record()) for artisan in _all(Artisan)]


@artisan_router.get("/{artisan_id}", response_model=ArtisanResponse)
async def get_artisan(artisan_id: str) -> ArtisanResponse:
    artisan = current_domain.repository_for(Artisan).get(artisan_id)
    return ArtisanResponse.model_validate(artisan.to_record())


# --- Blog ---

_EPOCH = datetime.min.replace(tzinfo=UTC)


def _published(post):
    if post.date is None:
        return _EPOCH
    return post.date if post.date.tzinfo else post.date.replace(tzinfo=UTC)


@blog_router.get("", response_model=list[BlogPostResponse])
async def list_blog_posts() -> list[BlogPostResponse]:
    posts = sorted(_all(BlogPost), key=_published, reverse=True)
    return [BlogPostResponse.model_validate(post.to_record()) for post in posts]


@blog_router.get("/{post_id}", response_model=BlogPostResponse)
async def get_blog_post(post_id: str) -> BlogPostResponse:
    post = current_domain.repository_for(BlogPost).get(post_id)
    return BlogPostResponse.model_validate(post.to_record())


# --- Collection points ---


@collection_point_router.get("", response_model=list[CollectionPointResponse])
async def list_collection_points() -> list[CollectionPointResponse]:
    return [CollectionPointResponse.model_validate(point.to_record()) for point in _all(CollectionPoint)]
