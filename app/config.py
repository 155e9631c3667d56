"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
ThemeName = Literal["system", "light", "dark", "classic"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")
    dictionary_path: Path | None = None

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/numee.log if not set."""
        return self.log_file_path or self.data_dir / "numee.log"

    @property
    def resolved_dictionary_path(self) -> Path:
        """Return dictionary dataset path, defaulting to data_dir/dictionary.json."""
        return self.dictionary_path or self.data_dir / "dictionary.json"

    # Session cookie (holds the persisted identity and theme)
    session_secret: str = "numee-dev-secret"  # noqa: S105
    session_cookie: str = "numee_session"

    # Pronunciation
    speech_lang: str = "fr-FR"
    speech_rate: float = 0.8

    # Theme
    default_theme: ThemeName = "system"


settings = Settings()
