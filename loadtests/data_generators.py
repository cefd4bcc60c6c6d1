"""Faker-based data generators for Locust load test scenarios.

Each generator produces a payload that passes the backend's validation
rules (email shape, minimum lengths, positive amounts) and matches the
field names the API's Pydantic request schemas expect.
"""

import random
import uuid

from faker import Faker

fake = Faker()
arabic = Faker("ar_EG")

CITIES = ["Cairo", "Giza", "Alexandria", "Luxor", "Aswan", "Mansoura"]


def valid_email() -> str:
    """Unique per call so newsletter and admin lookups never collide."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def egyptian_phone() -> str:
    return f"+20 1{random.choice('0125')}{random.randint(0, 9)} {random.randint(100, 999)} {random.randint(1000, 9999)}"


# ---------- Ordering ----------


def customer_info() -> dict:
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "phone": egyptian_phone(),
        "shippingAddress": {
            "address": fake.street_address()[:200],
            "city": random.choice(CITIES),
        },
    }


def checkout_data(products: list[dict], max_lines: int = 3) -> dict:
    """Build a checkout body from catalogue records.

    Prices are copied from the catalogue and the total is computed from
    the lines, so the backend's total check passes.
    """
    chosen = random.sample(products, k=min(len(products), random.randint(1, max_lines)))
    items = [
        {"productId": product["_id"], "quantity": random.randint(1, 3), "price": product["price"]}
        for product in chosen
    ]
    return {
        "items": items,
        "customer_info": customer_info(),
        "total_amount": round(sum(item["price"] * item["quantity"] for item in items), 2),
        "payment_method": random.choice(["stripe", "fawry"]),
        "idempotency_key": str(uuid.uuid4()),
    }


# ---------- Engagement ----------


def contact_data() -> dict:
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "message": fake.paragraph(nb_sentences=3),
    }


def textile_donation_data() -> dict:
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "phone": egyptian_phone(),
        "company": fake.company()[:100],
        "message": fake.sentence(nb_words=12),
    }


def volunteer_data() -> dict:
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "phone": egyptian_phone(),
        "skills": random.choice(["Sewing", "Photography", "Translation", "Logistics"]),
        "availability": random.choice(["Weekends", "Evenings", "Full-time"]),
    }


def join_artisan_data() -> dict:
    return {
        "name": arabic.name()[:100],
        "phone": egyptian_phone(),
        "location": random.choice(CITIES),
        "skills": random.choice(["Embroidery", "Weaving", "Patchwork", "Crochet"]),
        "experience": f"{random.randint(1, 20)} years",
    }


def donation_data() -> dict:
    return {
        "amount": random.choice([100, 250, 500, 1000, 2500]),
        "email": valid_email(),
        "donor_name": fake.first_name()[:100],
        "type": random.choice(["one-time", "monthly"]),
    }


def newsletter_data() -> dict:
    return {"email": valid_email(), "language": random.choice(["en", "ar"])}
