"""
Logging Setup

Library modules only create loggers; handlers are attached by the CLI
through configure_logging().
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

ROOT_LOGGER = "stripe_decline_codes"

# Extra record attributes copied into structured output when present.
_EXTRA_FIELDS = ("decline_code", "artifact", "path", "output_format", "error_code")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: str = "INFO", json_output: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling it again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    level_number = logging.getLevelName(str(level).upper())
    if not isinstance(level_number, int):
        level_number = logging.INFO
    logger.setLevel(level_number)

    for existing in list(logger.handlers):
        if getattr(existing, "_sdc_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler._sdc_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


__all__ = [
    "ROOT_LOGGER",
    "JSONFormatter",
    "configure_logging",
]
