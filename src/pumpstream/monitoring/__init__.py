"""
Event delivery: context, filtering, handlers, dispatch and log processing.
"""

from .dispatcher import dispatch
from .handler import (
    EventContext,
    EventFilter,
    EventHandler,
    FilteredLoggingEventHandler,
    LoggingEventHandler,
)
from .log_processor import LogEventProcessor

__all__ = [
    "EventContext",
    "EventFilter",
    "EventHandler",
    "FilteredLoggingEventHandler",
    "LogEventProcessor",
    "LoggingEventHandler",
    "dispatch",
]
