"""Logging configuration for the web app and CLI."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from app.config import Settings, settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("httpx", "multipart", "python_multipart")


def setup_logging(config: Settings | None = None) -> None:
    """Configure the root logger.

    Console output always goes to stdout. When ``log_file_enabled`` is set a
    rotating file handler is added next to it.
    """
    config = config or settings
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level))

    # Reloads would otherwise stack handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if config.log_file_enabled:
        log_path = config.resolved_log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=config.log_file_max_bytes,
            backupCount=config.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
