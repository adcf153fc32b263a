"""
AMM buy/sell assembly: quote-class inversion, accumulators and mode selection.
"""

from __future__ import annotations

import struct

import pytest
from solders.pubkey import Pubkey

from pumpstream.core import pda
from pumpstream.core.discriminators import (
    BUY_INSTRUCTION_DISCRIMINATOR,
    SELL_INSTRUCTION_DISCRIMINATOR,
)
from pumpstream.core.errors import InvalidAccount
from pumpstream.core.option_bool import OptionBool
from pumpstream.core.pubkeys import (
    ASSOCIATED_TOKEN_PROGRAM,
    FEE_RECIPIENT,
    MAYHEM_FEE_RECIPIENT,
    SOL_MINT,
    SYSTEM_PROGRAM,
    TOKEN_2022_PROGRAM,
    TOKEN_PROGRAM,
    USDC_MINT,
)
from pumpstream.interfaces.core import Platform, PumpAmmTradeRequest
from pumpstream.platforms.pumpswap.address_provider import PumpSwapAddresses
from pumpstream.platforms.pumpswap.instruction_builder import PumpSwapInstructionBuilder

PROGRAM = PumpSwapAddresses.PROGRAM
INDICES = PumpSwapAddresses.ACCOUNT_INDICES
OTHER_QUOTE = Pubkey.from_bytes(bytes([42]) * 32)


@pytest.fixture
def builder() -> PumpSwapInstructionBuilder:
    return PumpSwapInstructionBuilder()


@pytest.fixture
def make_request(user, pool, mint, creator, protocol_fee_recipient):
    def _make(**overrides) -> PumpAmmTradeRequest:
        values = {
            "user": user,
            "pool": pool,
            "base_mint": mint,
            "quote_mint": SOL_MINT,
            "coin_creator": creator,
            "protocol_fee_recipient": protocol_fee_recipient,
            "base_amount": 1_000,
            "quote_limit": 2_000,
            "is_mayhem_mode": False,
            "track_volume": OptionBool.TRUE,
        }
        values.update(overrides)
        return PumpAmmTradeRequest(**values)

    return _make


def _u64s(data: bytes) -> tuple[int, int]:
    return struct.unpack_from("<QQ", data, 8)


def test_quote_class_buy_keeps_buy_shape(builder, make_request, user) -> None:
    ix = builder.build_buy_instruction(make_request())

    assert ix.program_id == PROGRAM
    assert ix.data[:8] == BUY_INSTRUCTION_DISCRIMINATOR
    assert _u64s(ix.data) == (1_000, 2_000)
    assert ix.data[24:] == b"\x01\x01"
    assert len(ix.accounts) == 23
    assert ix.accounts[INDICES["global_volume_accumulator"]].pubkey == (
        pda.derive_global_volume_accumulator(PROGRAM).address
    )
    assert ix.accounts[INDICES["user_volume_accumulator"]].pubkey == (
        pda.derive_user_volume_accumulator(user, PROGRAM).address
    )


def test_quote_class_buy_without_tracking(builder, make_request) -> None:
    ix = builder.build_buy_instruction(make_request(track_volume=OptionBool.UNSET))

    assert ix.data[24:] == b"\x00"
    assert len(ix.accounts) == 21
    assert ix.accounts[-2].pubkey == pda.derive_fee_config(PROGRAM).address
    assert ix.accounts[-1].pubkey == PumpSwapAddresses.FEE_PROGRAM


def test_usdc_is_quote_class(builder, make_request) -> None:
    ix = builder.build_buy_instruction(make_request(quote_mint=USDC_MINT))
    assert ix.data[:8] == BUY_INSTRUCTION_DISCRIMINATOR


def test_quote_class_sell_keeps_sell_shape(builder, make_request) -> None:
    ix = builder.build_sell_instruction(make_request(base_amount=500, quote_limit=7))

    assert ix.data == SELL_INSTRUCTION_DISCRIMINATOR + struct.pack("<QQ", 500, 7)
    assert len(ix.accounts) == 21


def test_non_quote_buy_is_sent_as_sell(builder, make_request) -> None:
    ix = builder.build_buy_instruction(make_request(quote_mint=OTHER_QUOTE))

    assert ix.data[:8] == SELL_INSTRUCTION_DISCRIMINATOR
    # max_quote_amount_in first, base_amount_out second
    assert _u64s(ix.data) == (2_000, 1_000)
    assert len(ix.data) == 24
    assert len(ix.accounts) == 21


def test_non_quote_sell_is_sent_as_untracked_buy(builder, make_request) -> None:
    ix = builder.build_sell_instruction(make_request(quote_mint=OTHER_QUOTE))

    assert ix.data[:8] == BUY_INSTRUCTION_DISCRIMINATOR
    # min_quote_amount_out first, base_amount_in second, then an unset flag
    assert _u64s(ix.data) == (2_000, 1_000)
    assert ix.data[24:] == b"\x00"
    assert len(ix.accounts) == 21


def test_account_order(
    builder, make_request, user, pool, mint, creator, protocol_fee_recipient
) -> None:
    ix = builder.build_buy_instruction(make_request())
    vault_authority = pda.derive_coin_creator_vault_authority(creator, PROGRAM).address

    def ata(owner: Pubkey, token_mint: Pubkey) -> Pubkey:
        return pda.derive_associated_token_account(owner, token_mint, TOKEN_PROGRAM).address

    expected = [
        pool,
        user,
        PumpSwapAddresses.GLOBAL_CONFIG,
        mint,
        SOL_MINT,
        ata(user, mint),
        ata(user, SOL_MINT),
        ata(pool, mint),
        ata(pool, SOL_MINT),
        FEE_RECIPIENT,
        ata(protocol_fee_recipient, SOL_MINT),
        TOKEN_PROGRAM,
        TOKEN_PROGRAM,
        SYSTEM_PROGRAM,
        ASSOCIATED_TOKEN_PROGRAM,
        PumpSwapAddresses.EVENT_AUTHORITY,
        PROGRAM,
        ata(vault_authority, SOL_MINT),
        vault_authority,
        pda.derive_global_volume_accumulator(PROGRAM).address,
        pda.derive_user_volume_accumulator(user, PROGRAM).address,
        pda.derive_fee_config(PROGRAM).address,
        PumpSwapAddresses.FEE_PROGRAM,
    ]
    assert [meta.pubkey for meta in ix.accounts] == expected

    assert [meta.pubkey for meta in ix.accounts if meta.is_signer] == [user]
    writable = {i for i, meta in enumerate(ix.accounts) if meta.is_writable}
    assert writable == {0, 1, 5, 6, 7, 8, 10, 17, 20}


def test_mayhem_mode_splits_base_and_quote_token_programs(
    builder, make_request, user, mint
) -> None:
    ix = builder.build_sell_instruction(make_request(is_mayhem_mode=True))

    assert ix.accounts[INDICES["protocol_fee_recipient"]].pubkey == MAYHEM_FEE_RECIPIENT
    assert ix.accounts[INDICES["base_token_program"]].pubkey == TOKEN_2022_PROGRAM
    assert ix.accounts[INDICES["quote_token_program"]].pubkey == TOKEN_PROGRAM
    assert ix.accounts[INDICES["user_base_token_account"]].pubkey == (
        pda.derive_associated_token_account(user, mint, TOKEN_2022_PROGRAM).address
    )
    assert ix.accounts[INDICES["user_quote_token_account"]].pubkey == (
        pda.derive_associated_token_account(user, SOL_MINT, TOKEN_PROGRAM).address
    )


@pytest.mark.parametrize(
    "field_name",
    ["user", "pool", "base_mint", "quote_mint", "coin_creator", "protocol_fee_recipient"],
)
def test_default_addresses_are_rejected(builder, make_request, field_name) -> None:
    with pytest.raises(InvalidAccount) as excinfo:
        builder.build_buy_instruction(make_request(**{field_name: Pubkey.default()}))
    assert excinfo.value.account_name == field_name


def test_platform(builder) -> None:
    assert builder.platform is Platform.PUMP_SWAP


@pytest.mark.parametrize("side", ["buy", "sell"])
@pytest.mark.parametrize("quote_mint", [SOL_MINT, OTHER_QUOTE])
@pytest.mark.parametrize(
    ("is_mayhem_mode", "fee_recipient", "base_token_program"),
    [
        (True, MAYHEM_FEE_RECIPIENT, TOKEN_2022_PROGRAM),
        (False, FEE_RECIPIENT, TOKEN_PROGRAM),
    ],
)
def test_mode_selects_fee_recipient_and_token_program_for_every_shape(
    builder,
    make_request,
    side,
    quote_mint,
    is_mayhem_mode,
    fee_recipient,
    base_token_program,
) -> None:
    request = make_request(quote_mint=quote_mint, is_mayhem_mode=is_mayhem_mode)
    build = getattr(builder, f"build_{side}_instruction")
    ix = build(request)

    assert ix.accounts[INDICES["protocol_fee_recipient"]].pubkey == fee_recipient
    assert ix.accounts[INDICES["base_token_program"]].pubkey == base_token_program
    assert ix.accounts[INDICES["quote_token_program"]].pubkey == TOKEN_PROGRAM


def test_required_accounts_follow_instruction_order(builder, make_request) -> None:
    request = make_request()

    assert builder.get_required_accounts_for_buy(request) == [
        meta.pubkey for meta in builder.build_buy_instruction(request).accounts
    ]
    assert builder.get_required_accounts_for_sell(request) == [
        meta.pubkey for meta in builder.build_sell_instruction(request).accounts
    ]
