"""View navigation with role gating and one-shot seed parameters."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from app.services.identity import Identity, IdentityStore, Role

logger = logging.getLogger(__name__)


class View(str, Enum):
    HOME = "home"
    DICTIONARY = "dictionary"
    GUIDE = "guide"
    QUIZ = "quiz"
    GAMES = "games"
    MEMORY_GAME = "memory-game"
    FILL_IN_BLANK = "fill-in-blank"
    SCRABBLE_GAME = "scrabble-game"
    CERTIFICATION = "certification"
    LOGIN = "login"
    ADMIN = "admin"
    USER_DASHBOARD = "user-dashboard"
    CONTACT = "contact"

    @classmethod
    def parse(cls, name: str) -> "View":
        """
        Map a requested view name to a View.

        Older link names are accepted as aliases. Anything unrecognised goes
        to the home page.
        """
        name = name.strip().lower()
        if name in VIEW_ALIASES:
            return VIEW_ALIASES[name]
        try:
            return cls(name)
        except ValueError:
            logger.debug(f"Unknown view '{name}', falling back to home")
            return cls.HOME


VIEW_ALIASES: dict[str, View] = {
    "guide-touristique": View.GUIDE,
    "fill-in-the-blank": View.FILL_IN_BLANK,
}

# Views that take a seed parameter on arrival
SEEDED_VIEWS = frozenset({View.DICTIONARY})


@dataclass(frozen=True)
class NavigationState:
    """The resolved view and the seed it was opened with."""

    view: View = View.HOME
    seed: str = ""


def _is_admin(identity: Identity | None) -> bool:
    return identity is not None and identity.role is Role.ADMIN


def _is_user(identity: Identity | None) -> bool:
    return identity is not None and identity.role is Role.USER


def _is_logged_in(identity: Identity | None) -> bool:
    return identity is not None


def _anyone(identity: Identity | None) -> bool:
    return True


# Guard checked when a navigation is requested. Every View has an entry.
NAVIGATION_GUARDS: dict[View, Callable[[Identity | None], bool]] = {
    View.HOME: _anyone,
    View.DICTIONARY: _anyone,
    View.GUIDE: _anyone,
    View.QUIZ: _anyone,
    View.GAMES: _anyone,
    View.MEMORY_GAME: _anyone,
    View.FILL_IN_BLANK: _anyone,
    View.SCRABBLE_GAME: _anyone,
    View.CERTIFICATION: _anyone,
    View.LOGIN: _anyone,
    View.ADMIN: _is_admin,
    View.USER_DASHBOARD: _is_logged_in,
    View.CONTACT: _anyone,
}

# Checked again when the view is rendered
RENDER_GUARDS: dict[View, Callable[[Identity | None], bool]] = {
    View.ADMIN: _is_admin,
    View.USER_DASHBOARD: _is_user,
}

_missing_guards = set(View) - set(NAVIGATION_GUARDS)
if _missing_guards:  # pragma: no cover
    raise RuntimeError(f"No navigation guard for: {sorted(v.value for v in _missing_guards)}")


def can_access(view: View, identity: Identity | None) -> bool:
    return NAVIGATION_GUARDS[view](identity)


def resolve(requested: View, seed: str, identity: Identity | None) -> NavigationState:
    """Compute the state a navigation request leads to."""
    view = requested if can_access(requested, identity) else View.LOGIN
    if view is not requested:
        logger.info(f"Access to '{requested.value}' denied, redirecting to login")
    return NavigationState(view=view, seed=seed if requested in SEEDED_VIEWS else "")


def render_view(state: NavigationState, identity: Identity | None) -> View:
    """
    Re-check the identity when a gated view is about to be shown.

    The identity may have changed since the navigation was resolved (e.g. a
    logout), so the admin and user dashboards fall back to the login page
    unless the role still matches.
    """
    guard = RENDER_GUARDS.get(state.view)
    if guard is not None and not guard(identity):
        return View.LOGIN
    return state.view


class NavigationController:
    """
    Navigation state for one UI session.

    The identity comes from the IdentityStore handed in, never from a global.
    """

    def __init__(self, identity_store: IdentityStore) -> None:
        self.identity_store = identity_store
        self.state = NavigationState()

    @property
    def identity(self) -> Identity | None:
        return self.identity_store.current

    def navigate(self, requested: View | str, seed: str | None = "") -> NavigationState:
        """Resolve a navigation request and replace the current state with it."""
        view = requested if isinstance(requested, View) else View.parse(requested)
        self.state = resolve(view, seed or "", self.identity)
        return self.state

    @property
    def rendered_view(self) -> View:
        return render_view(self.state, self.identity)

    @property
    def seed(self) -> str:
        """Seed for the rendered view; empty unless that view consumes seeds."""
        if self.rendered_view is not self.state.view:
            return ""
        return self.state.seed
