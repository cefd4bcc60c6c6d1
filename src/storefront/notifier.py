"""User-facing message channel.

The client core never renders anything itself; it publishes
``Notification`` records here and the UI adapter subscribes to display
them (toast, banner, screen reader announcement, ...).
"""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import structlog

from storefront.i18n import LanguageManager

logger = structlog.get_logger(__name__)

HISTORY_SIZE = 50


class Severity(Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    severity: Severity
    message: str
    message_key: str | None = None


class Notifier:
    def __init__(self, language: LanguageManager, history_size: int = HISTORY_SIZE):
        self._language = language
        self._subscribers: list[Callable[[Notification], None]] = []
        # Most recent notifications, for UIs that render a message log
        self.history: deque[Notification] = deque(maxlen=history_size)

    def subscribe(self, subscriber: Callable[[Notification], None]) -> Callable[[], None]:
        self._subscribers.append(subscriber)
        return lambda: self._subscribers.remove(subscriber)

    def publish(self, severity: Severity, message_key: str, **params) -> Notification:
        notification = Notification(
            severity=severity,
            message=self._language.translate(message_key, **params),
            message_key=message_key,
        )
        self.history.append(notification)
        logger.debug("Notification published", severity=severity.value, key=message_key)
        for subscriber in list(self._subscribers):
            subscriber(notification)
        return notification

    def success(self, message_key: str, **params) -> Notification:
        return self.publish(Severity.SUCCESS, message_key, **params)

    def error(self, message_key: str, **params) -> Notification:
        return self.publish(Severity.ERROR, message_key, **params)

    def warning(self, message_key: str, **params) -> Notification:
        return self.publish(Severity.WARNING, message_key, **params)

    @property
    def language(self) -> str:
        return self._language.language

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None
