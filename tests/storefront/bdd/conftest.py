"""Shared BDD fixtures and step definitions for the storefront client."""

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.cart.store import CartStore
from storefront.errors import CartValidationError
from storefront.i18n import LanguageManager
from storefront.notifier import Notifier


@pytest.fixture()
def catalogue():
    """Product cards by id, as the UI would pass them to the cart."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue has a product "{product_id}" priced {price:g}'))
def catalogue_product(catalogue, product_id, price):
    catalogue[product_id] = {"id": product_id, "name": f"Product {product_id}", "price": price}


@given(parsers.cfparse('the customer adds {quantity:d} of product "{product_id}"'))
@when(parsers.cfparse('the customer adds {quantity:d} of product "{product_id}"'))
def add_product(cart, catalogue, notifier, product_id, quantity):
    try:
        cart.add_item(catalogue[product_id], quantity)
    except CartValidationError as exc:
        notifier.error(exc.message_key)


@given("the customer switched to Arabic")
def switch_to_arabic(language):
    language.switch_language("ar")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the cart holds {quantity:d} of product "{product_id}"'))
def cart_holds(cart, product_id, quantity):
    assert cart.get_item(product_id).quantity == quantity


@then("the cart is empty")
def cart_is_empty(cart):
    assert cart.is_empty


@then(parsers.cfparse('the customer is told "{message}"'))
def customer_is_told(notifier, message):
    assert notifier.last.message == message


@pytest.fixture()
def reopen(storage):
    """Build a fresh cart over the same storage, as a restarted storefront would."""

    def _reopen():
        language = LanguageManager(storage)
        return CartStore(storage, Notifier(language))

    return _reopen
