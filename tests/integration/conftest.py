"""Fixtures for end-to-end tests of the storefront client against the API.

The full ASGI application is mounted behind ``httpx.ASGITransport`` so the
storefront's HTTP gateway talks to the real routers, middleware and
domains without a network.
"""

import os

import httpx
import pytest


@pytest.fixture(scope="session")
def asgi_app(request):
    """Import the application, which initializes every domain."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from app import app

    return app


def _reset(domain):
    with domain.domain_context():
        for _, provider in domain.providers.items():
            provider._data_reset()

        for _, broker in domain.brokers.items():
            broker._data_reset()

        domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def clean_domains(asgi_app):
    """Seed the catalogue before each test and wipe every domain after."""
    from backoffice.domain import backoffice
    from catalogue.domain import catalogue
    from catalogue.seeding import seed_catalogue
    from engagement.domain import engagement
    from ordering.domain import ordering

    with catalogue.domain_context():
        seed_catalogue()

    yield

    for domain in (catalogue, ordering, engagement, backoffice):
        _reset(domain)


@pytest.fixture()
def transport(asgi_app):
    return httpx.ASGITransport(app=asgi_app)
