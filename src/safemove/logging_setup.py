from __future__ import annotations

import logging
from logging.config import dictConfig

LOGGER_NAME = "safemove"


def configure_logging(level: str = "WARNING") -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                    "level": level,
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                LOGGER_NAME: {"handlers": ["console"], "level": level, "propagate": False},
            },
        }
    )


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
