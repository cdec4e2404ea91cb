"""
Logging configuration helpers.
Area loggers (`routing`, `backend`, `app_ui`) follow LOG_LEVEL; chatty third-party
loggers are held at WARNING or above so a debug run shows the app's own decisions.
"""

from __future__ import annotations

import logging

from roi_validator.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

APP_LOGGERS = ("routing", "backend", "app_ui")
# urllib3 logs every pooled connection; streamlit logs file watching and reruns.
NOISY_LOGGERS = ("urllib3", "streamlit")

_LOGGING_CONFIGURED = False


def resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = resolve_level(get_settings().LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _LOGGING_CONFIGURED = True
