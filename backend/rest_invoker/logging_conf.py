"""Logging setup. The library itself only creates loggers; call setup_logging() from an app."""

from __future__ import annotations

import logging
import logging.config

from rest_invoker.config import settings

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "basic": {
            "format": "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "basic",
            "level": "DEBUG",
        },
    },
    "loggers": {
        "rest_invoker": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}


def setup_logging(verbose: bool = False) -> None:
    """Configure the rest_invoker logger.

    verbose=True lowers the level to DEBUG, which is where full HTML
    error bodies are written.
    """
    config = {**LOGGING_CONFIG, "loggers": {k: dict(v) for k, v in LOGGING_CONFIG["loggers"].items()}}
    config["loggers"]["rest_invoker"]["level"] = "DEBUG" if verbose else settings.log_level.upper()
    logging.config.dictConfig(config)
