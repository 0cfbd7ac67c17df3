"""
Decision Scoring Engine - Logging Setup.

Installs a single stderr handler on the root logger, in either
json or text layout. Library modules only ever call
logging.getLogger(__name__); configuring handlers is left to
the entry points (CLI, API).
"""

import json
import logging
import sys

from .config import LOG_FORMATS

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, safe for quotes in messages."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the formatter for a log format name (json or text)."""
    if log_format.lower() not in LOG_FORMATS:
        raise ValueError(f"Unknown log format '{log_format}'")
    if log_format.lower() == "json":
        return JsonLineFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(level: str = "INFO", log_format: str = "text") -> logging.Logger:
    """
    Route all logging to stderr.

    stdout stays reserved for the CLI's report output.

    Args:
        level: Log level name
        log_format: json or text

    Returns:
        The package logger
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(log_format))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers = [handler]

    return logging.getLogger("decision_scoring")
