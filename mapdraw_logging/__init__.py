"""
Structured Logging for mapdraw
==============================

Bounded Context: Observability

JSON-structured logging shared by the codec, layer and draw packages.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from mapdraw_logging import create_logger, LogEvent
    >>> logger = create_logger("scene")
    >>> logger.info(
    ...     event=LogEvent.SCENE_EXPORTED,
    ...     message="Exported 3 layers",
    ...     metadata={'layer_count': 3}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
