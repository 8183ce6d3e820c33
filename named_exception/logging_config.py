"""
Logging helpers for named exceptions.

The package only emits records; handlers and levels belong to the
application. Meta-error records carry ``exception_name`` and ``meta_name``
extras, which :class:`JSONFormatter` lifts into top-level JSON fields.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Extras attached by named_exception.core.named
NAMED_FIELDS = ("exception_name", "meta_name")


class JSONFormatter(logging.Formatter):
    """
    Render records as one JSON object per line.

    Fields:
    - timestamp, level, logger, message
    - exception: formatted traceback, when ``exc_info`` is set
    - exception_name / meta_name: when the record came from a meta-error
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in NAMED_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data, default=repr)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``)."""
    return logging.getLogger(name)
