"""
Pump.Fun platform exports.

This module provides convenient imports for the bonding curve program implementations.
"""

from .address_provider import PumpFunAddresses, PumpFunAddressProvider
from .instruction_builder import PumpFunInstructionBuilder

__all__ = [
    "PumpFunAddresses",
    "PumpFunAddressProvider",
    "PumpFunInstructionBuilder",
]
