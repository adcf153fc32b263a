"""
PumpSwap platform exports.

This module provides convenient imports for the AMM program implementations.
"""

from .address_provider import PumpSwapAddresses, PumpSwapAddressProvider
from .instruction_builder import PumpSwapInstructionBuilder

__all__ = [
    "PumpSwapAddresses",
    "PumpSwapAddressProvider",
    "PumpSwapInstructionBuilder",
]
