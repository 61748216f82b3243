# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Structured JSON formatting and the default engine configuration.

JSONFormatter can be referenced from any dictConfig mapping, JSON or YAML
file with the "()" factory key:

    formatters:
      json:
        (): logbridge.formatters.JSONFormatter
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict


class JSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record."""

    def __init__(self, logger_name: str | None = None):
        """Initialize JSON formatter.

        Args:
            logger_name: Fixed value for the logger field. Defaults to the
                record's logger name.
        """
        super().__init__()
        self.logger_name = logger_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": self.logger_name or record.name,
            "message": record.getMessage(),
        }

        if getattr(record, "extra", None):
            log_entry["extra"] = record.extra  # type: ignore[attr-defined]

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def create_default_log_config(level: str = "INFO", logger_name: str | None = None) -> Dict[str, Any]:
    """Create the default engine configuration: JSON records on stdout.

    Args:
        level: Root logger level (DEBUG, INFO, WARNING, ERROR)
        logger_name: Optional fixed value for the JSON logger field

    Returns:
        Mapping accepted by logging.config.dictConfig

    Example:
        >>> import logging.config
        >>> logging.config.dictConfig(create_default_log_config("DEBUG"))
    """
    formatter: Dict[str, Any] = {"()": JSONFormatter}
    if logger_name:
        formatter["logger_name"] = logger_name

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": formatter,
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }
