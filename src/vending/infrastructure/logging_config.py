"""Logging setup for the CLI.

Log records go to stderr so the report printed on stdout stays clean.
The level comes from the caller, else the ``LOG_LEVEL`` environment
variable, else WARNING.
"""

from __future__ import annotations

import logging.config
import os
import sys
from typing import Any


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    log_level = (level or get_log_level()).upper()

    log_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "simple",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "vending": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(log_config)
