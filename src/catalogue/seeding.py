"""Load the bundled storefront dataset into the catalogue.

Seeding is idempotent: records whose id already exists are left alone, so
``manage.py seed`` can run on every deploy.
"""

import json
from datetime import datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from shared import dataset

from catalogue.artisan.artisan import Artisan
from catalogue.artisan.registration import RegisterArtisan
from catalogue.content.blog_post import BlogPost
from catalogue.content.collection_point import CollectionPoint
from catalogue.domain import logger
from catalogue.product.listing import ListProduct
from catalogue.product.product import Product


def _exists(aggregate_cls, identifier) -> bool:
    try:
        current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return False
    return True


def _fields(record: dict) -> dict:
    return {key: value for key, value in record.items() if key != "_id"}


def seed_catalogue() -> dict:
    """Create missing artisans, products, blog posts and collection points.

    Must run inside a catalogue domain context. Returns the number of
    records created per kind.
    """
    created = {"artisans": 0, "products": 0, "blog_posts": 0, "collection_points": 0}

    for record in dataset.ARTISANS:
        if _exists(Artisan, record["_id"]):
            continue
        current_domain.process(RegisterArtisan(artisan_id=record["_id"], **_fields(record)), asynchronous=False)
        created["artisans"] += 1

    for record in dataset.PRODUCTS:
        if _exists(Product, record["_id"]):
            continue
        fields = _fields(record)
        fields["images"] = json.dumps(fields.get("images") or [])
        current_domain.process(ListProduct(product_id=record["_id"], **fields), asynchronous=False)
        created["products"] += 1

    posts = current_domain.repository_for(BlogPost)
    for record in dataset.BLOG_POSTS:
        if _exists(BlogPost, record["_id"]):
            continue
        fields = _fields(record)
        fields["date"] = datetime.fromisoformat(fields["date"])
        posts.add(BlogPost(id=record["_id"], **fields))
        created["blog_posts"] += 1

    points = current_domain.repository_for(CollectionPoint)
    for record in dataset.COLLECTION_POINTS:
        if _exists(CollectionPoint, record["_id"]):
            continue
        points.add(CollectionPoint(id=record["_id"], **_fields(record)))
        created["collection_points"] += 1

    logger.info("Catalogue seeded", **created)
    return created
