"""Shopping load test scenarios.

Three stateful SequentialTaskSet journeys: browsing the catalogue,
checking out a cart built from it, and retrying a checkout with the same
idempotency key. Steps execute in order, each depends on the previous
step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import checkout_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class _CatalogueLoader(SequentialTaskSet):
    def on_start(self):
        self.state = ShopperState()

    def load_products(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200 and resp.json():
                self.state.products = resp.json()
            else:
                resp.failure(f"Product list failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()


class BrowseCatalogueJourney(_CatalogueLoader):
    """Home page -> Category -> Product detail -> Artisan -> Blog.

    Read-only traffic, the bulk of what the storefront serves.
    """

    @task
    def featured(self):
        self.client.get("/api/products?featured=true", name="GET /api/products?featured")

    @task
    def products(self):
        self.load_products()

    @task
    def category(self):
        category = random.choice(self.state.products)["category"]
        self.client.get(f"/api/products?category={category}", name="GET /api/products?category")

    @task
    def product_detail(self):
        product = random.choice(self.state.products)
        self.state.viewed_product_id = product["_id"]
        self.client.get(f"/api/products/{product['_id']}", name="GET /api/products/{id}")

    @task
    def artisans(self):
        self.client.get("/api/artisans", name="GET /api/artisans")

    @task
    def blog(self):
        self.client.get("/api/blog", name="GET /api/blog")

    @task
    def done(self):
        self.interrupt()


class CheckoutJourney(_CatalogueLoader):
    """Load products -> Checkout -> Look up the placed order."""

    @task
    def products(self):
        self.load_products()

    @task
    def checkout(self):
        self.state.checkout_body = checkout_data(self.state.products)
        with self.client.post(
            "/api/checkout",
            json=self.state.checkout_body,
            catch_response=True,
            name="POST /api/checkout",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["orderId"]
            else:
                resp.failure(f"Checkout failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def fetch_order(self):
        self.client.get(f"/api/orders/{self.state.order_id}", name="GET /api/orders/{id}")

    @task
    def done(self):
        self.interrupt()


class RetriedCheckoutJourney(_CatalogueLoader):
    """Checkout -> Same checkout again, as after a dropped response.

    The second request carries the same Idempotency-Key header and must
    come back with the first order's id.
    """

    @task
    def products(self):
        self.load_products()

    @task
    def first_attempt(self):
        self.state.checkout_body = checkout_data(self.state.products)
        self._submit("POST /api/checkout (first)")

    @task
    def retry(self):
        first_order_id = self.state.order_id
        self._submit("POST /api/checkout (retry)", expected_order_id=first_order_id)

    @task
    def done(self):
        self.interrupt()

    def _submit(self, name, expected_order_id=None):
        headers = {"Idempotency-Key": self.state.checkout_body["idempotency_key"]}
        with self.client.post(
            "/api/checkout",
            json=self.state.checkout_body,
            headers=headers,
            catch_response=True,
            name=name,
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Checkout failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()
            order_id = resp.json()["orderId"]
            if expected_order_id is not None and order_id != expected_order_id:
                resp.failure(f"Retry created a second order: {order_id} != {expected_order_id}")
            self.state.order_id = order_id


class ShopperUser(HttpUser):
    """Standalone shopper traffic: mostly browsing, some checkouts."""

    wait_time = between(1.0, 4.0)
    tasks = {
        BrowseCatalogueJourney: 6,
        CheckoutJourney: 3,
        RetriedCheckoutJourney: 1,
    }
