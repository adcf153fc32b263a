"""
pumpstream: decode Pump / PumpAMM program events and build trade instructions.
"""

from pumpstream.config import StreamConfig, load_config_from_env
from pumpstream.core import EventKind, OptionBool
from pumpstream.events import decode, encode_event
from pumpstream.monitoring import (
    EventContext,
    EventFilter,
    EventHandler,
    LogEventProcessor,
    dispatch,
)
from pumpstream.trading import TradeClient

__version__ = "0.1.0"

__all__ = [
    "EventContext",
    "EventFilter",
    "EventHandler",
    "EventKind",
    "LogEventProcessor",
    "OptionBool",
    "StreamConfig",
    "TradeClient",
    "decode",
    "dispatch",
    "encode_event",
    "load_config_from_env",
]
