"""Storefront Controller: routes typed UI commands to the Cart Store, the
Checkout State Machine and the Language Manager."""

from dataclasses import dataclass
from typing import Any

import structlog

from storefront.cart.store import CartStore
from storefront.checkout.machine import CheckoutStateMachine
from storefront.commands import (
    AddItem,
    CancelCheckout,
    Command,
    GoBack,
    RemoveItem,
    StartCheckout,
    SubmitOrder,
    SubmitPayment,
    SubmitShipping,
    SwitchLanguage,
    UpdateQuantity,
)
from storefront.errors import CartValidationError, StorefrontError
from storefront.i18n import LanguageManager
from storefront.notifier import Notifier

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    value: Any = None
    error: StorefrontError | None = None


class StorefrontController:
    """Single entry point for UI events.

    ``dispatch`` never raises storefront errors: they are returned on the
    ``CommandResult`` after the responsible service has already told the
    customer what went wrong.
    """

    def __init__(
        self,
        cart: CartStore,
        checkout: CheckoutStateMachine,
        language: LanguageManager,
        notifier: Notifier,
    ):
        self.cart = cart
        self.checkout = checkout
        self.language = language
        self.notifier = notifier
        self._handlers = {
            AddItem: self._add_item,
            RemoveItem: self._remove_item,
            UpdateQuantity: self._update_quantity,
            StartCheckout: self._start_checkout,
            SubmitShipping: self._submit_shipping,
            SubmitPayment: self._submit_payment,
            GoBack: self._go_back,
            SubmitOrder: self._submit_order,
            CancelCheckout: self._cancel_checkout,
            SwitchLanguage: self._switch_language,
        }

    async def dispatch(self, command: Command) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"No handler registered for {type(command).__name__}")

        logger.debug("Dispatching command", command=type(command).__name__)
        try:
            value = handler(command)
            if hasattr(value, "__await__"):
                value = await value
        except CartValidationError as exc:
            if exc.message_key:
                self.notifier.error(exc.message_key)
            return CommandResult(ok=False, error=exc)
        except StorefrontError as exc:
            logger.info("Command rejected", command=type(command).__name__, error=str(exc))
            return CommandResult(ok=False, error=exc)
        if isinstance(value, CommandResult):
            return value
        return CommandResult(ok=True, value=value)

    # -------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------
    def _add_item(self, command: AddItem):
        return self.cart.add_item(command.product, command.quantity)

    def _remove_item(self, command: RemoveItem):
        self.cart.remove_item(command.product_id)

    def _update_quantity(self, command: UpdateQuantity):
        self.cart.update_quantity(command.product_id, command.quantity)

    def _start_checkout(self, command: StartCheckout):
        return self.checkout.start()

    def _submit_shipping(self, command: SubmitShipping):
        return self.checkout.submit_shipping(command.form)

    def _submit_payment(self, command: SubmitPayment):
        return self.checkout.submit_payment(command.method, command.card)

    def _go_back(self, command: GoBack):
        return self.checkout.go_back()

    async def _submit_order(self, command: SubmitOrder):
        acknowledgement = await self.checkout.submit_order()
        if acknowledgement is None:
            return CommandResult(ok=False)
        return acknowledgement

    def _cancel_checkout(self, command: CancelCheckout):
        self.checkout.cancel()

    def _switch_language(self, command: SwitchLanguage):
        if command.language is None:
            return self.language.toggle_language()
        if not self.language.switch_language(command.language):
            return CommandResult(ok=False, value=self.language.language)
        return command.language
