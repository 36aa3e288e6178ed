"""Structured logging configuration for the Fifths Wheel web adapter.

Log lines are key=value pairs; request handlers attach the HTTP method,
path, wheel action and resulting key through ``extra``.
"""

import logging
import sys
from typing import Any

# Attributes a handler may pass via extra=...
CONTEXT_FIELDS = ("method", "path", "action", "root_index")


class StructuredFormatter(logging.Formatter):
    """key=value log formatter with request context."""

    def format(self, record: logging.LogRecord) -> str:
        """Render a record as one line of key=value pairs.

        Args:
            record: Log record to format

        Returns:
            Single-line log string
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return " ".join(f"{key}={value}" for key, value in log_data.items())


def setup_logging(level: str = "INFO") -> None:
    """Install the structured console handler.

    Args:
        level: Level name for the wheel loggers ("DEBUG", "INFO", ...)
    """
    level_value = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level_value)
    console_handler.setFormatter(StructuredFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    root_logger.addHandler(console_handler)

    # Core library and adapter share the level
    for name in ("fifths_wheel", "plat_web"):
        logging.getLogger(name).setLevel(level_value)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
