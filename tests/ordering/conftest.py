import json

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def customer():
    return {
        "name": "Fatma Hassan",
        "email": "fatma@example.com",
        "phone": "+20 100 123 4567",
        "address": "12 Pyramids Road",
        "city": "Giza",
    }


@pytest.fixture()
def items():
    return [
        {"product_id": "1", "quantity": 2, "unit_price": 350.0},
        {"product_id": "6", "quantity": 1, "unit_price": 150.0},
    ]


@pytest.fixture()
def place_order_kwargs(items, customer):
    return {
        "items": json.dumps(items),
        "customer": json.dumps(customer),
        "total_amount": 850.0,
        "payment_method": "fawry",
        "idempotency_key": "key-001",
    }


@pytest.fixture()
def checkout_body():
    return {
        "items": [
            {"productId": "1", "quantity": 2, "price": 350.0},
            {"productId": "6", "quantity": 1, "price": 150.0},
        ],
        "customer_info": {
            "name": "Fatma Hassan",
            "email": "fatma@example.com",
            "phone": "+20 100 123 4567",
            "shippingAddress": {"address": "12 Pyramids Road", "city": "Giza"},
        },
        "total_amount": 850.0,
        "payment_method": "stripe",
        "idempotency_key": "body-key",
    }
