"""
Platform implementations and a small registry keyed by Platform.
"""

from pumpstream.interfaces.core import AddressProvider, InstructionBuilder, Platform

from .pumpfun import PumpFunAddressProvider, PumpFunInstructionBuilder
from .pumpswap import PumpSwapAddressProvider, PumpSwapInstructionBuilder

_ADDRESS_PROVIDERS: dict[Platform, type[AddressProvider]] = {
    Platform.PUMP_FUN: PumpFunAddressProvider,
    Platform.PUMP_SWAP: PumpSwapAddressProvider,
}

_INSTRUCTION_BUILDERS: dict[Platform, type[InstructionBuilder]] = {
    Platform.PUMP_FUN: PumpFunInstructionBuilder,
    Platform.PUMP_SWAP: PumpSwapInstructionBuilder,
}


def get_address_provider(platform: Platform) -> AddressProvider:
    """Create the address provider for a platform."""
    if platform not in _ADDRESS_PROVIDERS:
        raise ValueError(f"Unsupported platform: {platform}")
    return _ADDRESS_PROVIDERS[platform]()


def get_instruction_builder(platform: Platform) -> InstructionBuilder:
    """Create the instruction builder for a platform."""
    if platform not in _INSTRUCTION_BUILDERS:
        raise ValueError(f"Unsupported platform: {platform}")
    return _INSTRUCTION_BUILDERS[platform]()


__all__ = [
    "PumpFunAddressProvider",
    "PumpFunInstructionBuilder",
    "PumpSwapAddressProvider",
    "PumpSwapInstructionBuilder",
    "get_address_provider",
    "get_instruction_builder",
]
