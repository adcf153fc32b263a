"""
Platform interfaces and trade request values.
"""

from .core import (
    AddressProvider,
    InstructionBuilder,
    Platform,
    PumpAmmTradeRequest,
    PumpTradeRequest,
)

__all__ = [
    "AddressProvider",
    "InstructionBuilder",
    "Platform",
    "PumpAmmTradeRequest",
    "PumpTradeRequest",
]
