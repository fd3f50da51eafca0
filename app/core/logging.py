"""Structured logging configuration for the KB Scoring Engine."""

import logging
import sys
from typing import Any

# Context keys emitted right after the message, in this order
CONTEXT_FIELDS = ("vertical", "scoring_version")


class StructuredFormatter(logging.Formatter):
    """Key=value log formatter with scoring-run context."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured output."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        # Run metrics (total_score, recommendations, ...)
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger writing structured lines to stdout; DEBUG when KB_SCORING_ENV is "dev"
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        try:
            from app.core.config import get_settings

            debug = get_settings().KB_SCORING_ENV == "dev"
        except Exception:
            # Settings unavailable (e.g. invalid env); fall back to INFO
            debug = False
        logger.setLevel(logging.DEBUG if debug else logging.INFO)

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log a scoring event with run context.

    Keys listed in CONTEXT_FIELDS become record attributes; the rest are
    grouped under `extra_data`.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Context (vertical, scoring_version) and run metrics
    """
    extra: dict[str, Any] = {key: kwargs.pop(key) for key in CONTEXT_FIELDS if key in kwargs}
    extra["extra_data"] = kwargs

    logger.log(level, msg, extra=extra)
