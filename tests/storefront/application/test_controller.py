"""Tests for command dispatch through the Storefront Controller."""

import asyncio

import pytest
from storefront.checkout.session import CheckoutStep
from storefront.commands import (
    AddItem,
    CancelCheckout,
    GoBack,
    RemoveItem,
    StartCheckout,
    SubmitOrder,
    SubmitPayment,
    SubmitShipping,
    SwitchLanguage,
    UpdateQuantity,
)
from storefront.controller import StorefrontController
from storefront.errors import CartValidationError, CheckoutValidationError, EmptyCartError, InvalidTransitionError


@pytest.fixture()
def controller(cart, machine, language, notifier):
    return StorefrontController(cart, machine, language, notifier)


def dispatch(controller, command):
    return asyncio.run(controller.dispatch(command))


class TestCartCommands:
    def test_add_update_remove(self, controller, cart, product_a):
        result = dispatch(controller, AddItem(product_a, 2))
        assert result.ok
        assert result.value.quantity == 2

        dispatch(controller, UpdateQuantity("A", 5))
        assert cart.get_item_count() == 5

        dispatch(controller, RemoveItem("A"))
        assert cart.is_empty

    def test_invalid_quantity_is_reported(self, controller, cart, notifier, product_a):
        result = dispatch(controller, AddItem(product_a, 0))

        assert not result.ok
        assert isinstance(result.error, CartValidationError)
        assert notifier.last.message_key == "cart.invalid_quantity"
        assert cart.is_empty


class TestCheckoutCommands:
    def test_full_flow(self, controller, cart, product_a, shipping_form, gateway):
        dispatch(controller, AddItem(product_a, 3))

        assert dispatch(controller, StartCheckout()).ok
        assert dispatch(controller, SubmitShipping(shipping_form)).ok
        review = dispatch(controller, SubmitPayment("cash_voucher")).value
        assert review.payment_label == "Fawry"
        assert review.total == 300

        result = dispatch(controller, SubmitOrder())

        assert result.ok
        assert result.value.order_id in gateway.orders
        assert controller.checkout.session is None
        assert controller.checkout.last_completed.order_id == result.value.order_id
        assert cart.is_empty

    def test_empty_cart_blocks_start(self, controller, notifier):
        result = dispatch(controller, StartCheckout())
        assert not result.ok
        assert isinstance(result.error, EmptyCartError)
        assert notifier.last.message_key == "cart.empty"

    def test_validation_failure_keeps_step(self, controller, filled_cart):
        dispatch(controller, StartCheckout())
        result = dispatch(controller, SubmitShipping({"name": "Fatma"}))

        assert not result.ok
        assert isinstance(result.error, CheckoutValidationError)
        assert controller.checkout.current_step is CheckoutStep.SHIPPING

    def test_back_without_session(self, controller):
        result = dispatch(controller, GoBack())
        assert isinstance(result.error, InvalidTransitionError)

    def test_failed_submission_is_not_ok(self, controller, at_review, gateway):
        from storefront.errors import NetworkError

        gateway.failures.append(NetworkError("offline"))
        result = dispatch(controller, SubmitOrder())

        assert not result.ok
        assert controller.checkout.current_step is CheckoutStep.REVIEW

    def test_cancel(self, controller, at_review, filled_cart):
        assert dispatch(controller, CancelCheckout()).ok
        assert controller.checkout.session is None
        assert filled_cart.get_item_count() == 3


class TestLanguageCommands:
    def test_toggle(self, controller, language):
        assert dispatch(controller, SwitchLanguage()).value == "ar"
        assert language.is_rtl

    def test_explicit(self, controller, language):
        assert dispatch(controller, SwitchLanguage("ar")).ok
        assert language.language == "ar"

    def test_unsupported(self, controller, language):
        result = dispatch(controller, SwitchLanguage("fr"))
        assert not result.ok
        assert result.value == "en"


def test_unknown_command(controller):
    with pytest.raises(TypeError):
        dispatch(controller, object())
