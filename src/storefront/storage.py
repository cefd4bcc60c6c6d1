"""Key-value storage backends for client-side persistence.

The cart and the language preference each own one key. Values are
JSON-serializable Python objects; backends raise ``StorageError`` on any
read or write failure and leave recovery to the caller.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import structlog

from storefront.errors import StorageError

logger = structlog.get_logger(__name__)


class KeyValueStorage(ABC):
    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value, or ``None`` when the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None: ...


class MemoryStorage(KeyValueStorage):
    """Process-local storage. Values are round-tripped through JSON so that
    callers observe the same copy semantics as the file backend."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key):
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as exc:
            raise StorageError(f"Stored value for {key!r} is not valid JSON") from exc

    def set(self, key, value):
        try:
            self._data[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Value for {key!r} is not serializable") from exc

    def delete(self, key):
        self._data.pop(key, None)

    def raw(self, key: str) -> str | None:
        """Serialized value as stored (test helper for corrupting data)."""
        return self._data.get(key)

    def put_raw(self, key: str, raw: str) -> None:
        self._data[key] = raw


class JsonFileStorage(KeyValueStorage):
    """All keys live in a single JSON document on disk.

    Writes go to a temporary file in the same directory that then replaces
    the document, so a crash mid-write never leaves a truncated file.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read storage file {self.path}") from exc
        if not isinstance(document, dict):
            raise StorageError(f"Storage file {self.path} does not hold a JSON object")
        return document

    def _dump(self, document: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(f"Cannot write storage file {self.path}") from exc

    def get(self, key):
        return self._load().get(key)

    def set(self, key, value):
        try:
            document = self._load()
        except StorageError:
            logger.warning("Discarding unreadable storage file", path=str(self.path))
            document = {}
        document[key] = value
        self._dump(document)

    def delete(self, key):
        document = self._load()
        if key in document:
            del document[key]
            self._dump(document)
