"""Shared dependencies for routes."""

from fastapi import Depends, Request

from app.config import settings
from app.services.dictionary.base import DictionaryEntry
from app.services.identity import Authenticator, DemoAuthenticator, IdentityStore
from app.services.navigation import NavigationController
from app.services.storage import MappingStorage
from app.services.theme import ThemeStore


def get_authenticator() -> Authenticator:
    return DemoAuthenticator()


def get_dictionary(request: Request) -> list[DictionaryEntry]:
    """Entries loaded at startup."""
    entries: list[DictionaryEntry] = request.app.state.dictionary
    return entries


def get_storage(request: Request) -> MappingStorage:
    """Session storage over the signed session cookie."""
    return MappingStorage(request.session)


def get_identity_store(
    storage: MappingStorage = Depends(get_storage),
    authenticator: Authenticator = Depends(get_authenticator),
) -> IdentityStore:
    return IdentityStore(storage, authenticator)


def get_theme_store(storage: MappingStorage = Depends(get_storage)) -> ThemeStore:
    return ThemeStore(storage, default=settings.default_theme)


def get_navigation(
    identity_store: IdentityStore = Depends(get_identity_store),
) -> NavigationController:
    return NavigationController(identity_store)
