"""
Structured Logging for scoretrace
=================================

Bounded Context: Observability

JSON-structured logging for render calls.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from scoretrace.logging import create_logger, LogEvent
    >>> logger = create_logger("pipeline")
    >>> logger.info(
    ...     event=LogEvent.RENDER_STARTED,
    ...     message="Rendering 3 scores",
    ...     metadata={'score_count': 3}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
