"""Persisted visual theme preference."""

import logging
from typing import cast, get_args

from app.config import ThemeName
from app.services.storage import SessionStorage

logger = logging.getLogger(__name__)

THEME_STORAGE_KEY = "theme"
THEMES: tuple[str, ...] = get_args(ThemeName)


class ThemeStore:
    """Reads the stored theme once and writes it back on every change."""

    def __init__(self, storage: SessionStorage, default: ThemeName = "system") -> None:
        self.storage = storage
        self.default = default
        self._theme = self._load()

    @property
    def theme(self) -> ThemeName:
        return self._theme

    def _load(self) -> ThemeName:
        try:
            stored = self.storage.get_item(THEME_STORAGE_KEY)
        except Exception as e:
            logger.warning(f"Failed to read theme from session storage: {e}")
            return self.default
        if stored in THEMES:
            return cast(ThemeName, stored)
        if stored is not None:
            logger.warning(f"Ignoring unknown stored theme '{stored}'")
        return self.default

    def set_theme(self, theme: str) -> ThemeName:
        """
        Change the theme.

        Raises:
            ValueError: If ``theme`` is not one of THEMES.
        """
        if theme not in THEMES:
            raise ValueError(f"Unknown theme '{theme}'. Expected one of: {', '.join(THEMES)}")
        try:
            self.storage.set_item(THEME_STORAGE_KEY, theme)
        except Exception as e:
            logger.error(f"Failed to save theme to session storage: {e}")
        self._theme = cast(ThemeName, theme)
        return self._theme
