"""Tests for order submission from the Review step: success, failure and
retry, in-flight guard, and late results after the session is gone."""

import asyncio

import pytest
from storefront.cart.store import CART_STORAGE_KEY
from storefront.checkout.session import CheckoutStep
from storefront.errors import InvalidTransitionError, NetworkError, ServerError, SubmissionInProgressError


class TestSuccess:
    def test_successful_submission_empties_cart(self, at_review, filled_cart, storage, notifier):
        acknowledgement = asyncio.run(at_review.submit_order())

        assert acknowledgement.success
        assert at_review.session is None
        assert at_review.last_completed.current_step is CheckoutStep.SUBMITTED
        assert at_review.last_completed.order_id == acknowledgement.order_id
        assert filled_cart.is_empty
        assert storage.get(CART_STORAGE_KEY) == []
        assert notifier.last.message == "Your order has been placed successfully!"

    def test_submitted_session_is_closed(self, at_review):
        asyncio.run(at_review.submit_order())
        with pytest.raises(InvalidTransitionError):
            at_review.go_back()
        with pytest.raises(InvalidTransitionError):
            asyncio.run(at_review.submit_order())
        assert at_review.current_step is None
        assert all(state == "pending" for _, state in at_review.step_indicator())

    def test_submit_only_from_review(self, machine, filled_cart, shipping_form):
        machine.start()
        machine.submit_shipping(shipping_form)
        with pytest.raises(InvalidTransitionError):
            asyncio.run(machine.submit_order())


class TestFailure:
    @pytest.mark.parametrize(
        "failure, message_key",
        [(NetworkError("offline"), "error.network"), (ServerError("boom", status_code=500), "error.generic")],
    )
    def test_failure_stays_at_review(self, at_review, filled_cart, gateway, notifier, failure, message_key):
        gateway.failures.append(failure)

        result = asyncio.run(at_review.submit_order())

        assert result is None
        assert at_review.current_step is CheckoutStep.REVIEW
        assert not at_review.session.submitting
        assert filled_cart.get_item_count() == 3
        assert notifier.last.message_key == message_key

    def test_arabic_error_message(self, at_review, gateway, notifier, language):
        language.switch_language("ar")
        gateway.failures.append(ServerError("boom"))
        asyncio.run(at_review.submit_order())
        assert notifier.last.message == "حدث خطأ. يرجى المحاولة مرة أخرى."

    def test_retry_reuses_idempotency_key(self, at_review, gateway):
        gateway.failures.append(NetworkError("timeout"))

        asyncio.run(at_review.submit_order())
        acknowledgement = asyncio.run(at_review.submit_order())

        assert acknowledgement.success
        assert len(gateway.requests) == 2
        assert gateway.requests[0].idempotency_key == gateway.requests[1].idempotency_key
        assert at_review.last_completed.current_step is CheckoutStep.SUBMITTED


class TestInFlight:
    def test_second_submit_rejected_while_first_in_flight(self, at_review, gateway, notifier):
        async def scenario():
            gateway.hold()
            first = asyncio.create_task(at_review.submit_order())
            await asyncio.sleep(0)
            assert at_review.session.submitting

            with pytest.raises(SubmissionInProgressError):
                await at_review.submit_order()

            gateway.release()
            return await first

        acknowledgement = asyncio.run(scenario())

        assert acknowledgement.success
        assert len(gateway.requests) == 1
        assert notifier.history[-2].message_key == "checkout.submission_in_progress"

    def test_late_result_after_cancel_does_not_touch_ui_state(self, at_review, gateway, notifier):
        async def scenario():
            gateway.hold()
            pending = asyncio.create_task(at_review.submit_order())
            await asyncio.sleep(0)
            session = at_review.session

            at_review.cancel()
            published = len(notifier.history)

            gateway.release()
            acknowledgement = await pending
            return session, published, acknowledgement

        session, published, acknowledgement = asyncio.run(scenario())

        assert acknowledgement.success
        assert at_review.session is None
        assert session.current_step is CheckoutStep.CANCELLED
        assert at_review.last_completed is None
        assert len(notifier.history) == published

    def test_late_failure_after_restart_is_not_reported(self, at_review, gateway, notifier, filled_cart):
        async def scenario():
            gateway.hold()
            gateway.failures.append(NetworkError("offline"))
            pending = asyncio.create_task(at_review.submit_order())
            await asyncio.sleep(0)

            at_review.cancel()
            fresh = at_review.start()
            published = len(notifier.history)

            gateway.release()
            await pending
            return fresh, published

        fresh, published = asyncio.run(scenario())

        assert at_review.session is fresh
        assert fresh.current_step is CheckoutStep.SHIPPING
        assert len(notifier.history) == published

    def test_late_success_after_cancel_keeps_the_cart(self, at_review, gateway, cart, storage):
        async def scenario():
            gateway.hold()
            pending = asyncio.create_task(at_review.submit_order())
            await asyncio.sleep(0)

            at_review.cancel()
            cart.add_item({"id": "C", "name": "Beaded Coaster Set", "price": 30.0, "image": "c.jpg"})

            gateway.release()
            return await pending

        acknowledgement = asyncio.run(scenario())

        assert acknowledgement.success
        assert [(item.product_id, item.quantity) for item in cart.items] == [("A", 2), ("B", 1), ("C", 1)]
        assert [entry["id"] for entry in storage.get(CART_STORAGE_KEY)] == ["A", "B", "C"]

    def test_items_added_while_submitting_stay_in_the_cart(self, at_review, gateway, cart, product_a):
        async def scenario():
            gateway.hold()
            pending = asyncio.create_task(at_review.submit_order())
            await asyncio.sleep(0)

            cart.add_item(product_a)
            cart.add_item({"id": "C", "name": "Beaded Coaster Set", "price": 30.0, "image": "c.jpg"})

            gateway.release()
            return await pending

        asyncio.run(scenario())

        assert [(item.product_id, item.quantity) for item in cart.items] == [("A", 1), ("C", 1)]
        assert at_review.last_completed.current_step is CheckoutStep.SUBMITTED

    def test_go_back_rejected_while_submitting(self, at_review, gateway, notifier):
        async def scenario():
            gateway.hold()
            pending = asyncio.create_task(at_review.submit_order())
            await asyncio.sleep(0)

            with pytest.raises(SubmissionInProgressError):
                at_review.go_back()
            assert at_review.current_step is CheckoutStep.REVIEW

            gateway.release()
            return await pending

        acknowledgement = asyncio.run(scenario())

        assert acknowledgement.success
        assert notifier.history[-2].message_key == "checkout.submission_in_progress"
        assert at_review.last_completed.current_step is CheckoutStep.SUBMITTED

    def test_success_does_not_skip_the_transition_guard(self, at_review, gateway):
        async def scenario():
            gateway.hold()
            pending = asyncio.create_task(at_review.submit_order())
            await asyncio.sleep(0)

            # Moved off Review behind the machine's back
            at_review.session.current_step = CheckoutStep.PAYMENT

            gateway.release()
            await pending

        with pytest.raises(InvalidTransitionError):
            asyncio.run(scenario())

        assert at_review.current_step is CheckoutStep.PAYMENT
        assert at_review.session.order_id is None
        assert at_review.last_completed is None
