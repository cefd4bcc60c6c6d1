"""Checkout State Machine.

Linear three-step flow: Shipping -> Payment -> Review -> Submitted. Each
step validates its own input before advancing and stores the validated
result on the session. ``go_back`` moves one step back without losing
data, ``cancel`` discards the session from any non-terminal step.

The only suspension point is ``submit_order``. While it is awaiting the
backend the session is flagged ``submitting`` and further submissions are
rejected. If the session was cancelled or replaced by the time the
result arrives, the result is logged and otherwise ignored.

A completed session is discarded like a cancelled one; the confirmation
view reads it from ``last_completed``.
"""

from collections.abc import Mapping
from dataclasses import asdict

import structlog

from storefront.cart.store import CartStore
from storefront.checkout.session import (
    VISIBLE_STEPS,
    CardDetails,
    CheckoutSession,
    CheckoutStep,
    ReviewSummary,
    ShippingInfo,
)
from storefront.checkout.submission import OrderSubmissionClient
from storefront.checkout.validation import validate_payment, validate_shipping
from storefront.errors import (
    EmptyCartError,
    GatewayError,
    InvalidTransitionError,
    NetworkError,
    SubmissionInProgressError,
    ValidationError,
)
from storefront.formatting import format_currency
from storefront.gateway.models import PaymentMethod
from storefront.gateway.port import OrderAcknowledgement
from storefront.i18n import LanguageManager
from storefront.notifier import Notifier

logger = structlog.get_logger(__name__)

_VALID_TRANSITIONS = {
    CheckoutStep.SHIPPING: {CheckoutStep.PAYMENT, CheckoutStep.CANCELLED},
    CheckoutStep.PAYMENT: {CheckoutStep.REVIEW, CheckoutStep.SHIPPING, CheckoutStep.CANCELLED},
    CheckoutStep.REVIEW: {CheckoutStep.SUBMITTED, CheckoutStep.PAYMENT, CheckoutStep.CANCELLED},
    CheckoutStep.SUBMITTED: set(),  # Terminal
    CheckoutStep.CANCELLED: set(),  # Terminal
}

_PREVIOUS_STEP = {
    CheckoutStep.PAYMENT: CheckoutStep.SHIPPING,
    CheckoutStep.REVIEW: CheckoutStep.PAYMENT,
}

_PAYMENT_LABEL_KEYS = {
    PaymentMethod.CARD: "payment.card",
    PaymentMethod.CASH_VOUCHER: "payment.cash_voucher",
}


class CheckoutStateMachine:
    def __init__(
        self,
        cart: CartStore,
        submission: OrderSubmissionClient,
        notifier: Notifier,
        language: LanguageManager,
        currency: str = "EGP",
    ):
        self.cart = cart
        self.submission = submission
        self.notifier = notifier
        self.language = language
        self.currency = currency
        self._session: CheckoutSession | None = None
        self._completed: CheckoutSession | None = None

    @property
    def session(self) -> CheckoutSession | None:
        return self._session

    @property
    def last_completed(self) -> CheckoutSession | None:
        """The most recent submitted session, kept for the order confirmation."""
        return self._completed

    @property
    def current_step(self) -> CheckoutStep | None:
        return self._session.current_step if self._session else None

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target: CheckoutStep) -> CheckoutSession:
        session = self._session
        if session is None:
            raise InvalidTransitionError(None, target)
        if target not in _VALID_TRANSITIONS[session.current_step]:
            raise InvalidTransitionError(session.current_step, target)
        return session

    def _move(self, session: CheckoutSession, target: CheckoutStep) -> None:
        logger.debug(
            "Checkout step changed",
            session_id=session.session_id,
            from_step=session.current_step.value,
            to_step=target.value,
        )
        session.current_step = target

    def _reject(self, exc: ValidationError) -> None:
        if exc.message_key:
            self.notifier.error(exc.message_key)
        logger.info("Checkout input rejected", field=exc.field, reason=str(exc))

    # -------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------
    def start(self) -> CheckoutSession:
        """Open a fresh session at the Shipping step.

        An empty cart never gets a session.
        """
        if self.cart.is_empty:
            self.notifier.error("cart.empty")
            raise EmptyCartError()

        previous = self._session
        if previous is not None and not previous.is_terminal:
            logger.info("Replacing open checkout session", session_id=previous.session_id)
            self._move(previous, CheckoutStep.CANCELLED)

        self._session = CheckoutSession()
        logger.info("Checkout started", session_id=self._session.session_id, items=self.cart.get_item_count())
        return self._session

    def submit_shipping(self, form: Mapping) -> ShippingInfo:
        session = self._assert_can_transition(CheckoutStep.PAYMENT)
        try:
            shipping_info = validate_shipping(form)
        except ValidationError as exc:
            self._reject(exc)
            raise

        session.shipping_info = shipping_info
        self._move(session, CheckoutStep.PAYMENT)
        return shipping_info

    def submit_payment(
        self,
        method: PaymentMethod | str | None,
        card: Mapping | CardDetails | None = None,
    ) -> ReviewSummary:
        session = self._assert_can_transition(CheckoutStep.REVIEW)
        try:
            payment_method, card_details = validate_payment(method, card)
        except ValidationError as exc:
            self._reject(exc)
            raise

        session.payment_method = payment_method
        session.card_details = card_details
        total = self.cart.get_total()
        session.review = ReviewSummary(
            shipping_info=session.shipping_info,
            payment_method=payment_method,
            payment_label=self.language.translate(_PAYMENT_LABEL_KEYS[payment_method]),
            line_items=self.cart.items,
            total=total,
            total_display=format_currency(total, self.currency, self.language.language),
        )
        self._move(session, CheckoutStep.REVIEW)
        return session.review

    def go_back(self) -> CheckoutStep:
        session = self._session
        if session is not None and session.submitting:
            self.notifier.warning("checkout.submission_in_progress")
            raise SubmissionInProgressError(f"Session {session.session_id} is submitting")

        current = session.current_step if session else None
        target = _PREVIOUS_STEP.get(current)
        if target is None:
            raise InvalidTransitionError(current, CheckoutStep.SHIPPING if current is None else current)

        self._assert_can_transition(target)
        self._move(session, target)
        return target

    def shipping_form_defaults(self) -> dict:
        """Values to pre-fill the shipping form with when it is shown again."""
        if self._session is None or self._session.shipping_info is None:
            return {}
        return asdict(self._session.shipping_info)

    async def submit_order(self) -> OrderAcknowledgement | None:
        """Send the order from the Review step.

        Returns the acknowledgement on success. Gateway failures are
        reported through the notifier and return ``None`` with the session
        left at Review so the customer can retry.
        """
        session = self._session
        if session is not None and session.submitting:
            self.notifier.warning("checkout.submission_in_progress")
            raise SubmissionInProgressError(f"Session {session.session_id} is already submitting")

        session = self._assert_can_transition(CheckoutStep.SUBMITTED)
        session.submitting = True
        try:
            acknowledgement = await self.submission.submit(session)
        except EmptyCartError:
            if self._session is session:
                self.notifier.error("cart.empty")
            raise
        except GatewayError as exc:
            logger.warning(
                "Order submission failed",
                session_id=session.session_id,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            if self._session is session:
                self.notifier.error("error.network" if isinstance(exc, NetworkError) else "error.generic")
            return None
        finally:
            session.submitting = False

        if self._session is not session:
            logger.info(
                "Ignoring submission result for a closed session",
                session_id=session.session_id,
                order_id=acknowledgement.order_id,
            )
            return acknowledgement

        self._assert_can_transition(CheckoutStep.SUBMITTED)
        session.order_id = acknowledgement.order_id
        self._move(session, CheckoutStep.SUBMITTED)
        self._session = None
        self._completed = session
        self.notifier.success("order.success")
        return acknowledgement

    def cancel(self) -> None:
        """Discard the session. The cart is left as it is."""
        session = self._session
        if session is None:
            return
        if not session.is_terminal:
            self._assert_can_transition(CheckoutStep.CANCELLED)
            self._move(session, CheckoutStep.CANCELLED)
            logger.info("Checkout cancelled", session_id=session.session_id, submitting=session.submitting)
        self._session = None

    def step_indicator(self) -> list[tuple[CheckoutStep, str]]:
        """Progress indicator entries: ``(step, "active" | "completed" | "pending")``."""
        current = self.current_step
        if current not in VISIBLE_STEPS:
            return [(step, "pending") for step in VISIBLE_STEPS]

        position = VISIBLE_STEPS.index(current)
        indicator = []
        for index, step in enumerate(VISIBLE_STEPS):
            if index < position:
                state = "completed"
            elif index == position:
                state = "active"
            else:
                state = "pending"
            indicator.append((step, state))
        return indicator
