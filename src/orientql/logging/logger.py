"""JSON logging for orientql.

Records emitted under the ``orientql`` logger are rendered as one JSON
object per line, carrying any ``extra`` fields (``command_id``,
``statement``, ``error_code`` ...) and, when a span is active, the
OpenTelemetry trace and span ids.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from opentelemetry import trace

from orientql.settings import get_settings

PACKAGE_LOGGER = "orientql"

# Attributes every LogRecord has; anything else on a record came from ``extra``
# or from a filter.
_STANDARD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class CustomJsonFormatter(logging.Formatter):
    """Render a record and its extra fields as a JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRIBUTES
        )
        payload.update(self._trace_fields())

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)

    @staticmethod
    def _trace_fields() -> Dict[str, str]:
        span_context = trace.get_current_span().get_span_context()
        if not span_context.is_valid:
            return {}
        return {
            "trace_id": format(span_context.trace_id, "032x"),
            "span_id": format(span_context.span_id, "016x"),
        }


def setup_logging(level: Optional[str] = None) -> None:
    """Send the package's log records to stdout as JSON.

    Only the ``orientql`` logger is configured; the application's own
    logging setup is left alone.

    Args:
        level: Log level name; defaults to ``ORIENTQL_LOG_LEVEL``
               (``QuerySettings.log_level``)
    """
    level = (level or get_settings().log_level).upper()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "orientql_json": {"()": CustomJsonFormatter},
        },
        "filters": {
            "orientql_context": {"()": "orientql.logging.filters.ContextFilter"},
        },
        "handlers": {
            "orientql_stdout": {
                "class": "logging.StreamHandler",
                "formatter": "orientql_json",
                "filters": ["orientql_context"],
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "level": level,
                "handlers": ["orientql_stdout"],
                "propagate": False,
            },
        },
    })
