"""
Event decoding exports.

Typed event values, their wire layouts and the discriminator-driven decoder.
"""

from .decoder import decode, encode_event, iter_program_data
from .models import (
    BuyEvent,
    CompleteEvent,
    CreateEvent,
    CreatePoolEvent,
    CreateV2Event,
    Event,
    SellEvent,
    TradeEvent,
)

__all__ = [
    "BuyEvent",
    "CompleteEvent",
    "CreateEvent",
    "CreatePoolEvent",
    "CreateV2Event",
    "Event",
    "SellEvent",
    "TradeEvent",
    "decode",
    "encode_event",
    "iter_program_data",
]
