"""Logging setup for the ``servicebox`` logger hierarchy."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from .config import LoggingSettings

LOGGER_NAME = "servicebox"


def _formatter(structured: bool) -> dict[str, Any]:
    if structured:
        return {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        }
    return {"format": "%(levelname)s %(name)s: %(message)s"}


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Attach a console handler to the ``servicebox`` logger only.

    The root logger and loggers of the host application are left alone.
    Calling this again replaces the handler instead of stacking a new one.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"servicebox": _formatter(settings.structured)},
            "handlers": {
                "servicebox_console": {
                    "class": "logging.StreamHandler",
                    "formatter": "servicebox",
                    "level": settings.level,
                },
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["servicebox_console"],
                    "level": settings.level,
                    "propagate": settings.propagate,
                },
            },
        }
    )
    return logging.getLogger(LOGGER_NAME)


__all__ = ["LOGGER_NAME", "configure_logging"]
