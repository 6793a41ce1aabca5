"""Structured logging configuration for the GradeIdea scoring service."""

import logging
import sys
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Formats records as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        """Render the record and its extra fields on one line."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if hasattr(record, "idea_id"):
            log_data["idea_id"] = record.idea_id

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
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        try:
            from gradeidea.core.config import get_settings

            settings = get_settings()
            if settings.GRADEIDEA_ENV == "dev":
                logger.setLevel(logging.DEBUG)
            else:
                logger.setLevel(logging.INFO)
        except Exception:
            # Default to INFO if settings not available
            logger.setLevel(logging.INFO)

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Additional context fields (e.g., idea_id)
    """
    extra: dict[str, Any] = {"extra_data": kwargs}
    if "idea_id" in kwargs:
        extra["idea_id"] = kwargs.pop("idea_id")
        extra["extra_data"] = kwargs

    logger.log(level, msg, extra=extra)
