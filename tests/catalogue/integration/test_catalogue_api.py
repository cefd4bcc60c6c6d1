"""Integration tests for the catalogue read endpoints."""

import pytest
from catalogue.api import artisan_router, blog_router, collection_point_router, product_router
from catalogue.seeding import seed_catalogue
from fastapi import FastAPI
from fastapi.testclient import TestClient
from shared import dataset
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    for router in (product_router, artisan_router, blog_router, collection_point_router):
        app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture(autouse=True)
def seeded():
    seed_catalogue()


class TestProducts:
    def test_list_products(self, client):
        response = client.get("/products")
        assert response.status_code == 200
        assert {p["_id"] for p in response.json()} == {p["_id"] for p in dataset.PRODUCTS}

    def test_featured_filter(self, client):
        response = client.get("/products", params={"featured": "true"})
        assert {p["_id"] for p in response.json()} == {"1", "2", "3", "6"}

    def test_category_filter(self, client):
        response = client.get("/products", params={"category": "Home Décor"})
        assert {p["_id"] for p in response.json()} == {"2", "4", "5"}

    def test_get_product(self, client):
        response = client.get("/products/1")
        assert response.status_code == 200
        body = response.json()
        assert body["name_en"] == dataset.PRODUCTS[0]["name_en"]
        assert body["images"] == dataset.PRODUCTS[0]["images"]

    def test_unknown_product(self, client):
        response = client.get("/products/999")
        assert response.status_code == 404


class TestArtisansAndContent:
    def test_list_artisans(self, client):
        assert len(client.get("/artisans").json()) == len(dataset.ARTISANS)

    def test_get_artisan(self, client):
        assert client.get("/artisans/2").json()["name_ar"] == dataset.ARTISANS[1]["name_ar"]

    def test_blog_newest_first(self, client):
        dates = [post["date"] for post in client.get("/blog").json()]
        assert dates == sorted(dates, reverse=True)

    def test_collection_points(self, client):
        points = client.get("/collection-points").json()
        assert len(points) == len(dataset.COLLECTION_POINTS)
        assert all(-90 <= p["latitude"] <= 90 for p in points)
