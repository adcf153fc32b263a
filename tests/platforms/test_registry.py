"""
Platform registry and fixed address tables.
"""

from __future__ import annotations

import pytest

from pumpstream.core.pubkeys import SYSTEM_PROGRAM, TOKEN_PROGRAM
from pumpstream.interfaces.core import Platform
from pumpstream.platforms import (
    PumpFunAddressProvider,
    PumpFunInstructionBuilder,
    PumpSwapAddressProvider,
    PumpSwapInstructionBuilder,
    get_address_provider,
    get_instruction_builder,
)
from pumpstream.platforms.pumpfun.address_provider import PumpFunAddresses
from pumpstream.platforms.pumpswap.address_provider import PumpSwapAddresses


@pytest.mark.parametrize(
    ("platform", "provider_type", "builder_type"),
    [
        (Platform.PUMP_FUN, PumpFunAddressProvider, PumpFunInstructionBuilder),
        (Platform.PUMP_SWAP, PumpSwapAddressProvider, PumpSwapInstructionBuilder),
    ],
)
def test_registry_returns_platform_implementations(
    platform, provider_type, builder_type
) -> None:
    provider = get_address_provider(platform)
    builder = get_instruction_builder(platform)

    assert isinstance(provider, provider_type)
    assert isinstance(builder, builder_type)
    assert provider.platform == builder.platform == platform


def test_unknown_platform_is_rejected() -> None:
    with pytest.raises(ValueError):
        get_address_provider("letsbonk")  # type: ignore[arg-type]


def test_system_addresses() -> None:
    pump = PumpFunAddressProvider().get_system_addresses()
    amm = PumpSwapAddressProvider().get_system_addresses()

    assert pump["system_program"] == amm["system_program"] == SYSTEM_PROGRAM
    assert pump["token_program"] == TOKEN_PROGRAM
    assert pump["program"] == PumpFunAddresses.PROGRAM
    assert amm["program"] == PumpSwapAddresses.PROGRAM
    assert amm["global_config"] == PumpSwapAddresses.GLOBAL_CONFIG
