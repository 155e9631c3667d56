"""Authenticated identity for the current browsing session."""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from app.services.storage import SessionStorage

logger = logging.getLogger(__name__)

IDENTITY_STORAGE_KEY = "user"


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


@dataclass(frozen=True)
class Identity:
    """An authenticated principal."""

    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def to_json(self) -> str:
        return json.dumps({"username": self.username, "role": self.role.value})

    @classmethod
    def from_json(cls, data: str) -> "Identity":
        """
        Parse a serialized identity.

        Raises:
            ValueError: If the value is not JSON or does not match the
                ``{"username": str, "role": "admin" | "user"}`` schema.
        """
        obj = json.loads(data)  # JSONDecodeError is a ValueError
        if not isinstance(obj, dict):
            raise ValueError("Identity must be a JSON object")
        username = obj.get("username")
        if not isinstance(username, str) or not username:
            raise ValueError("Identity has no username")
        return cls(username=username, role=Role(obj.get("role")))


class Authenticator(ABC):
    """Checks credentials and returns the matching identity."""

    @abstractmethod
    def verify(self, username: str, password: str) -> Identity | None:
        ...  # pragma: no cover


class DemoAuthenticator(Authenticator):
    """
    Fixed demo accounts: ``admin``/``admin`` and ``user``/``user``.

    This is a placeholder, not a credential backend. Passwords are plain text
    and nothing is rate limited. Swap in a real Authenticator before exposing
    the admin area.
    """

    ACCOUNTS: dict[str, tuple[str, Identity]] = {
        "admin": ("admin", Identity(username="Admin", role=Role.ADMIN)),
        "user": ("user", Identity(username="User", role=Role.USER)),
    }

    def verify(self, username: str, password: str) -> Identity | None:
        account = self.ACCOUNTS.get(username.lower())
        if account is None:
            return None
        expected_password, identity = account
        if password != expected_password:
            return None
        return identity


class IdentityStore:
    """
    Holds at most one identity and mirrors it into session storage.

    The persisted value is read once, when the store is created. Storage
    failures never reach the caller: they are logged and the in-memory
    state still changes.
    """

    def __init__(
        self,
        storage: SessionStorage,
        authenticator: Authenticator | None = None,
    ) -> None:
        self.storage = storage
        self.authenticator = authenticator or DemoAuthenticator()
        self._current = self._load()

    @property
    def current(self) -> Identity | None:
        return self._current

    def _load(self) -> Identity | None:
        try:
            raw = self.storage.get_item(IDENTITY_STORAGE_KEY)
        except Exception as e:
            logger.warning(f"Failed to read identity from session storage: {e}")
            return None
        if raw is None:
            return None
        try:
            return Identity.from_json(raw)
        except ValueError as e:
            logger.warning(f"Ignoring malformed identity in session storage: {e}")
            return None

    def authenticate(self, username: str, password: str) -> Identity | None:
        """
        Log in with the given credentials.

        On failure the storage and any previous identity are left as they were.
        """
        identity = self.authenticator.verify(username, password)
        if identity is None:
            logger.info(f"Failed login attempt for '{username}'")
            return None

        try:
            self.storage.set_item(IDENTITY_STORAGE_KEY, identity.to_json())
        except Exception as e:
            logger.error(f"Failed to save identity to session storage: {e}")
        self._current = identity
        logger.info(f"Logged in as {identity.username} ({identity.role.value})")
        return identity

    def clear(self) -> None:
        """Forget the identity. Safe to call when nobody is logged in."""
        try:
            self.storage.remove_item(IDENTITY_STORAGE_KEY)
        except Exception as e:
            logger.error(f"Failed to remove identity from session storage: {e}")
        self._current = None

    def logout(self) -> None:
        self.clear()
