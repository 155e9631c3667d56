"""Services behind the Numèè site: dictionary search, identity and navigation."""

from app.services.identity import DemoAuthenticator, Identity, IdentityStore, Role
from app.services.navigation import NavigationController, NavigationState, View
from app.services.normalization import normalize
from app.services.speech import PronunciationPlayer
from app.services.theme import ThemeStore

__all__ = [
    "DemoAuthenticator",
    "Identity",
    "IdentityStore",
    "NavigationController",
    "NavigationState",
    "PronunciationPlayer",
    "Role",
    "ThemeStore",
    "View",
    "normalize",
]
