"""Integration tests for checkout, order lookup and the admin order listing."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api.routes import admin_order_router, checkout_router, order_router
from ordering.order.order import Order
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain
from shared.auth import issue_token


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(checkout_router)
    app.include_router(order_router)
    app.include_router(admin_order_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def admin_headers():
    return {"Authorization": f"Bearer {issue_token('admin-1', 'admin')}"}


class TestCheckoutEndpoint:
    def test_checkout(self, client, checkout_body):
        response = client.post("/checkout", json=checkout_body)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Order placed successfully"

        order = current_domain.repository_for(Order).get(body["orderId"])
        assert order.payment_method == "stripe"
        assert order.idempotency_key == "body-key"

    def test_header_key_wins_over_body(self, client, checkout_body):
        response = client.post("/checkout", json=checkout_body, headers={"Idempotency-Key": "header-key"})

        order = current_domain.repository_for(Order).get(response.json()["orderId"])
        assert order.idempotency_key == "header-key"

    def test_resubmission_returns_same_order(self, client, checkout_body):
        first = client.post("/checkout", json=checkout_body).json()["orderId"]
        second = client.post("/checkout", json=checkout_body).json()["orderId"]

        assert first == second

    def test_empty_items_rejected_by_schema(self, client, checkout_body):
        response = client.post("/checkout", json={**checkout_body, "items": []})
        assert response.status_code == 422

    def test_unknown_payment_method_rejected(self, client, checkout_body):
        response = client.post("/checkout", json={**checkout_body, "payment_method": "paypal"})
        assert response.status_code == 422

    def test_total_mismatch_is_a_domain_error(self, client, checkout_body):
        response = client.post("/checkout", json={**checkout_body, "total_amount": 10.0})

        assert response.status_code == 400


class TestOrderLookup:
    def test_get_order(self, client, checkout_body):
        order_id = client.post("/checkout", json=checkout_body).json()["orderId"]

        response = client.get(f"/orders/{order_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["_id"] == order_id
        assert body["items"][0] == {"productId": "1", "quantity": 2, "price": 350.0}
        assert body["customer_info"]["shippingAddress"]["city"] == "Giza"

    def test_unknown_order(self, client):
        assert client.get("/orders/nope").status_code == 404


class TestAdminOrders:
    def test_requires_token(self, client):
        response = client.get("/admin/orders")
        assert response.status_code == 401
        assert response.json()["detail"] == "Access token required"

    def test_rejects_bad_token(self, client):
        response = client.get("/admin/orders", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid token"

    def test_lists_orders(self, client, checkout_body, admin_headers):
        client.post("/checkout", json=checkout_body)
        client.post("/checkout", json={**checkout_body, "idempotency_key": "second"})

        response = client.get("/admin/orders", headers=admin_headers)

        assert response.status_code == 200
        assert len(response.json()) == 2
