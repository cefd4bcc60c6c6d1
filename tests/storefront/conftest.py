"""Shared fixtures for the storefront client core.

Services are built from the same constructors the bootstrap uses, over
in-memory storage and a scripted gateway.
"""

import asyncio

import pytest
from storefront.cart.store import CartStore
from storefront.checkout.machine import CheckoutStateMachine
from storefront.checkout.submission import OrderSubmissionClient
from storefront.gateway.static_adapter import StaticGateway
from storefront.i18n import LanguageManager
from storefront.notifier import Notifier
from storefront.storage import MemoryStorage


class ScriptedGateway(StaticGateway):
    """Static gateway whose order submissions can be delayed or made to fail.

    - ``failures``: exceptions raised, in order, by the next submissions
    - ``hold()``: submissions wait until ``release()`` is called
    """

    def __init__(self):
        super().__init__()
        self.failures: list[Exception] = []
        self.requests = []
        self._gate: asyncio.Event | None = None

    def hold(self):
        self._gate = asyncio.Event()

    def release(self):
        self._gate.set()

    async def submit_order(self, request):
        self.requests.append(request)
        if self._gate is not None:
            await self._gate.wait()
        if self.failures:
            raise self.failures.pop(0)
        return await super().submit_order(request)


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def language(storage):
    return LanguageManager(storage)


@pytest.fixture()
def notifier(language):
    return Notifier(language)


@pytest.fixture()
def cart(storage, notifier):
    return CartStore(storage, notifier)


@pytest.fixture()
def gateway():
    return ScriptedGateway()


@pytest.fixture()
def submission(cart, gateway):
    return OrderSubmissionClient(cart, gateway)


@pytest.fixture()
def machine(cart, submission, notifier, language):
    return CheckoutStateMachine(cart, submission, notifier, language)


@pytest.fixture()
def product_a():
    return {"id": "A", "name": "Handwoven Tote Bag", "price": 100.0, "image": "a.jpg"}


@pytest.fixture()
def product_b():
    return {"id": "B", "name": "Embroidered Table Runner", "price": 50.0, "image": "b.jpg"}


@pytest.fixture()
def shipping_form():
    return {
        "name": "Fatma Hassan",
        "email": "fatma@example.com",
        "phone": "+20 100 123 4567",
        "city": "Giza",
        "address": "12 Pyramids Road",
    }


@pytest.fixture()
def card():
    return {"number": "4242424242424242", "expiry": "12/30", "cvc": "123", "cardholder": "Fatma Hassan"}


@pytest.fixture()
def filled_cart(cart, product_a, product_b):
    cart.add_item(product_a, 2)
    cart.add_item(product_b, 1)
    return cart


@pytest.fixture()
def at_review(machine, filled_cart, shipping_form, card):
    """Checkout advanced to the Review step."""
    machine.start()
    machine.submit_shipping(shipping_form)
    machine.submit_payment("card", card)
    return machine
