"""Integration tests for the engagement form endpoints and impact figures."""

import pytest
from engagement.api.routes import admin_donation_router, form_router, impact_router
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from shared.auth import issue_token


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(form_router)
    app.include_router(impact_router)
    app.include_router(admin_donation_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.mark.parametrize(
    "path, payload, message",
    [
        (
            "/contact",
            {"name": "Layla", "email": "layla@example.com", "message": "Do you ship to Alexandria?"},
            "Contact form submitted successfully",
        ),
        (
            "/textile-donation",
            {"name": "Cotton Co", "email": "ops@cotton.example", "company": "Cotton Co"},
            "Textile donation inquiry submitted successfully",
        ),
        (
            "/volunteer",
            {"name": "Omar", "email": "omar@example.com"},
            "Volunteer application submitted successfully",
        ),
        (
            "/join-artisan",
            {"name": "Hoda Ali", "phone": "01001234567", "location": "Fayoum", "skills": "Embroidery"},
            "Artisan application submitted successfully",
        ),
        (
            "/donate",
            {"amount": 500, "email": "layla@example.com", "type": "monthly"},
            "Donation processed successfully",
        ),
        ("/newsletter", {"email": "layla@example.com", "language": "ar"}, "Newsletter subscription successful"),
    ],
)
def test_form_accepted(client, path, payload, message):
    response = client.post(path, json=payload)

    assert response.status_code == 201
    assert response.json() == {"success": True, "message": message}


class TestRejections:
    def test_missing_field_is_rejected_by_schema(self, client):
        response = client.post("/contact", json={"name": "Layla", "email": "layla@example.com"})
        assert response.status_code == 422

    def test_short_message_is_a_domain_error(self, client):
        response = client.post("/contact", json={"name": "Layla", "email": "layla@example.com", "message": "Hi"})

        assert response.status_code == 400

    def test_non_positive_donation(self, client):
        response = client.post("/donate", json={"amount": 0, "email": "layla@example.com"})
        assert response.status_code == 422


class TestImpact:
    def test_first_read_returns_defaults(self, client):
        response = client.get("/impact")

        assert response.status_code == 200
        body = response.json()
        assert body["_id"] == "impact"
        assert body["current_campaign_goal_egp"] == 50000.0

    def test_donation_shows_up_in_campaign_total(self, client):
        before = client.get("/impact").json()["current_campaign_raised_egp"]
        client.post("/donate", json={"amount": 500, "email": "layla@example.com"})

        after = client.get("/impact").json()["current_campaign_raised_egp"]
        assert after == before + 500


class TestAdminDonations:
    def test_requires_token(self, client):
        assert client.get("/admin/donations").status_code == 401

    def test_lists_donations(self, client):
        client.post("/donate", json={"amount": 500, "email": "layla@example.com", "type": "monthly"})
        headers = {"Authorization": f"Bearer {issue_token('admin-1', 'admin')}"}

        response = client.get("/admin/donations", headers=headers)

        assert response.status_code == 200
        assert response.json()[0]["type"] == "monthly"
