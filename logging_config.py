from __future__ import annotations

import logging
from logging.config import dictConfig

from settings import get_settings

_configured = False


class SensorContextFormatter(logging.Formatter):
    """Append subprocess and reading context passed through ``extra=``."""

    context_keys = ("tick", "command", "returncode", "label", "raw_value")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in self.context_keys
            if getattr(record, key, None) is not None
        )
        return f"{message} [{context}]" if context else message


def configure_logging(level: str | int | None = None) -> None:
    """Send log records to stderr so they stay out of the redrawn dashboard."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "sensor": {
                    "()": "logging_config.SensorContextFormatter",
                    "fmt": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                    "datefmt": "%H:%M:%S",
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "sensor",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
        }
    )

    _configured = True
