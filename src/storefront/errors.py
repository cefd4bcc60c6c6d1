"""Storefront client exception hierarchy.

Validation errors are raised before anything touches the gateway. Gateway
errors are raised by adapters and converted into localized messages at the
submission boundary. Storage errors are logged by the cart and never reach
the UI.
"""


class StorefrontError(Exception):
    """Base class for every storefront client error."""


class ValidationError(StorefrontError):
    """User input was rejected before any side effect took place.

    ``field`` names the first offending input (``None`` for whole-form
    problems) and ``message_key`` points into the message catalogue so the
    UI can render the reason in the current language.
    """

    def __init__(self, message: str, field: str | None = None, message_key: str | None = None):
        super().__init__(message)
        self.field = field
        self.message_key = message_key


class CheckoutValidationError(ValidationError):
    pass


class CartValidationError(ValidationError):
    pass


class EmptyCartError(ValidationError):
    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message, field=None, message_key="cart.empty")


class FormValidationError(ValidationError):
    pass


class GatewayError(StorefrontError):
    """A data source could not satisfy the request."""


class NetworkError(GatewayError):
    """The backend could not be reached (connection refused, timeout, DNS)."""


class ServerError(GatewayError):
    """The backend answered with a failure status."""

    def __init__(self, message: str, status_code: int | None = None, payload=None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class NotFoundError(GatewayError):
    """The requested resource does not exist."""


class StorageError(StorefrontError):
    """The key-value storage could not be read or written."""


class SubmissionInProgressError(StorefrontError):
    """An order submission for this checkout session is already in flight."""


class InvalidTransitionError(StorefrontError):
    """The checkout state machine was asked to make a move its current step does not allow."""

    def __init__(self, current_step, target_step):
        if current_step is None:
            message = f"Cannot move checkout to {target_step.value} without an active session"
        else:
            message = f"Cannot move checkout from {current_step.value} to {target_step.value}"
        super().__init__(message)
        self.current_step = current_step
        self.target_step = target_step
