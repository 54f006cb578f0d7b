"""
Structured JSON Logger
======================

Bounded Context: Observability Infrastructure

One JSON object per log line, so a render call can be followed from
render.started to render.completed (or to the error.* record that ended it).

Record fields:
    timestamp   UTC, ISO 8601
    level       DEBUG / INFO / WARNING / ERROR
    component   "pipeline", "cli", ...
    event       LogEvent value, e.g. "scale.computed"
    message     human readable summary
    metadata    optional, e.g. {"ratio": 4.7, "max_depth": 1}
    exception   optional, {"type": ..., "message": ...}

Records below the logger level are dropped before the JSON is built.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


Metadata = Optional[Dict[str, Any]]


class StructuredLogger:
    """
    Emits LogEvent records as JSON through a stdlib logger.

    The stdlib logger is named scoretrace.<component> unless logger_name is
    given, and gets a single stream handler the first time it is wrapped.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger_name = logger_name or f"scoretrace.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _emit(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Metadata = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            record['metadata'] = metadata
        if exc_info is not None:
            record['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        # default=str covers Path and datetime values in metadata
        self.logger.log(level, json.dumps(record, default=str))

    def debug(self, event: LogEvent, message: str, metadata: Metadata = None) -> None:
        self._emit(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Metadata = None) -> None:
        self._emit(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Metadata = None) -> None:
        self._emit(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Metadata = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """Log at ERROR; exc_info adds the exception type and message to the record."""
        self._emit(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter, StructuredLogger already emits JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    """Create a StructuredLogger for component at the given level."""
    return StructuredLogger(component=component, level=level)
