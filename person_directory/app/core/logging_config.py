"""
Logging configuration for the service.

``setup_logging`` applies the ``LOG_LEVEL`` and ``LOG_FILE`` settings
to the root logger.  It can be called once per ``create_app``; repeated
calls never duplicate handlers.  When something else (uvicorn, the
test runner) has configured the root logger first, its handlers and
level are left alone, but a requested log file is still attached.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(app_settings: Settings) -> None:
    """Configure the root logger from ``app_settings``.

    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        root.setLevel(getattr(logging, app_settings.log_level.upper(), logging.INFO))
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        if not _has_file_handler(root, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
