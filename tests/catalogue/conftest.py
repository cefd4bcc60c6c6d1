import json

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def catalogue_bed():
    from catalogue.domain import catalogue

    bed = DomainFixture(catalogue)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(catalogue_bed):
    with catalogue_bed.domain_context():
        yield


@pytest.fixture()
def tote_bag():
    """Keyword arguments for a valid listing."""
    return {
        "name_en": "Handwoven Tote Bag",
        "name_ar": "حقيبة يد منسوجة يدوياً",
        "price": 350.0,
        "category": "Bags",
        "images": json.dumps(["https://example.com/tote.jpg"]),
        "artisan_id": "1",
        "stock": 15,
        "featured": True,
    }
