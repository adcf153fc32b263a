"""
Trade client facade over both instruction builders.
"""

from __future__ import annotations

import dataclasses

import pytest

from pumpstream.core.discriminators import (
    BUY_INSTRUCTION_DISCRIMINATOR,
    SELL_INSTRUCTION_DISCRIMINATOR,
)
from pumpstream.core.option_bool import OptionBool
from pumpstream.core.pubkeys import SOL_MINT
from pumpstream.platforms.pumpfun.address_provider import PumpFunAddresses
from pumpstream.platforms.pumpswap.address_provider import PumpSwapAddresses
from pumpstream.trading.trade_client import TradeClient


@pytest.fixture(scope="module")
def client() -> TradeClient:
    return TradeClient()


def test_buy_example(client, user, mint) -> None:
    ix = client.build_buy_instruction(
        user, mint, 1_000_000, 100_000_000, OptionBool.TRUE, False
    )

    assert ix.program_id == PumpFunAddresses.PROGRAM
    assert ix.data[:8] == BUY_INSTRUCTION_DISCRIMINATOR
    assert ix.accounts[0].pubkey == PumpFunAddresses.GLOBAL
    assert ix.data[-2:] == b"\x01\x01"


def test_plain_bool_track_volume_is_accepted(client, user, mint) -> None:
    tracked = client.build_buy_instruction(user, mint, 1, 2, True, False)
    untracked = client.build_buy_instruction(user, mint, 1, 2, None, False)

    assert tracked.data[-2:] == b"\x01\x01"
    assert untracked.data[-1:] == b"\x00"


def test_sell(client, user, mint, creator) -> None:
    ix = client.build_sell_instruction(user, mint, 10, 0, True, creator=creator)

    assert ix.data[:8] == SELL_INSTRUCTION_DISCRIMINATOR
    assert len(ix.data) == 24


def test_pump_amm_round_trip_of_shapes(
    client, user, pool, mint, creator, protocol_fee_recipient
) -> None:
    buy = client.build_pump_amm_buy_instruction(
        user, pool, mint, SOL_MINT, creator, protocol_fee_recipient,
        1_000, 2_000, OptionBool.UNSET, False,
    )
    sell = client.build_pump_amm_sell_instruction(
        user, pool, mint, SOL_MINT, creator, protocol_fee_recipient,
        1_000, 900, False,
    )

    assert buy.program_id == sell.program_id == PumpSwapAddresses.PROGRAM
    assert buy.data[:8] == BUY_INSTRUCTION_DISCRIMINATOR
    assert sell.data[:8] == SELL_INSTRUCTION_DISCRIMINATOR


def test_client_is_immutable(client) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        client.pump = None  # type: ignore[misc]
