"""String-keyed, browser-session-scoped storage."""

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any


class SessionStorage(ABC):
    """Key/value storage holding plain strings, like the browser's sessionStorage."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""
        ...  # pragma: no cover

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key; removing a missing key is not an error."""
        ...  # pragma: no cover


class MappingStorage(SessionStorage):
    """
    Storage backed by a mutable mapping.

    Used over ``request.session`` (Starlette's signed session cookie) in the
    web app and over a plain dict in the CLI and tests.
    """

    def __init__(self, data: MutableMapping[str, Any] | None = None) -> None:
        self.data: MutableMapping[str, Any] = data if data is not None else {}

    def get_item(self, key: str) -> str | None:
        value = self.data.get(key)
        if value is None:
            return None
        return str(value)

    def set_item(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove_item(self, key: str) -> None:
        self.data.pop(key, None)
