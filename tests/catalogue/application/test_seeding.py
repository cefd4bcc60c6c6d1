"""Application tests for loading the bundled dataset."""

from catalogue.artisan.artisan import Artisan
from catalogue.content.blog_post import BlogPost
from catalogue.product.product import Product
from catalogue.seeding import seed_catalogue
from protean import current_domain
from shared import dataset


def test_seed_creates_every_record():
    created = seed_catalogue()

    assert created == {
        "artisans": len(dataset.ARTISANS),
        "products": len(dataset.PRODUCTS),
        "blog_posts": len(dataset.BLOG_POSTS),
        "collection_points": len(dataset.COLLECTION_POINTS),
    }


def test_seeded_records_keep_dataset_ids():
    seed_catalogue()

    product = current_domain.repository_for(Product).get("1")
    assert product.name_en == dataset.PRODUCTS[0]["name_en"]
    assert product.image_urls == dataset.PRODUCTS[0]["images"]
    assert current_domain.repository_for(Artisan).get("3").name_ar == dataset.ARTISANS[2]["name_ar"]
    assert current_domain.repository_for(BlogPost).get("1").date.year == 2024


def test_seeding_twice_adds_nothing():
    seed_catalogue()
    second = seed_catalogue()

    assert second == {"artisans": 0, "products": 0, "blog_posts": 0, "collection_points": 0}
