"""
Shared fixtures: deterministic addresses and one sample event per kind.
"""

from __future__ import annotations

import pytest
from solders.pubkey import Pubkey

from pumpstream.core.discriminators import EventKind
from pumpstream.events.models import (
    BuyEvent,
    CompleteEvent,
    CreateEvent,
    CreatePoolEvent,
    CreateV2Event,
    SellEvent,
    TradeEvent,
)


def make_pubkey(seed: int) -> Pubkey:
    return Pubkey.from_bytes(bytes([seed]) * 32)


@pytest.fixture
def user() -> Pubkey:
    return make_pubkey(1)


@pytest.fixture
def mint() -> Pubkey:
    return make_pubkey(2)


@pytest.fixture
def creator() -> Pubkey:
    return make_pubkey(3)


@pytest.fixture
def pool() -> Pubkey:
    return make_pubkey(4)


@pytest.fixture
def protocol_fee_recipient() -> Pubkey:
    return make_pubkey(5)


def _sample_events() -> dict[EventKind, object]:
    a, b, c, d, e, f, g = (make_pubkey(i) for i in range(10, 17))
    return {
        EventKind.CREATE: CreateEvent(
            name="Doge Moon",
            symbol="DMOON",
            uri="https://ipfs.io/ipfs/QmExample",
            mint=a,
            bonding_curve=b,
            user=c,
            creator=d,
            timestamp=1_730_000_000,
            virtual_token_reserves=1_073_000_000_000_000,
            virtual_sol_reserves=30_000_000_000,
            real_token_reserves=793_100_000_000_000,
            token_total_supply=1_000_000_000_000_000,
        ),
        EventKind.CREATE_V2: CreateV2Event(
            name="Mayhem",
            symbol="MAY",
            uri="",
            mint=a,
            bonding_curve=b,
            user=c,
            creator=d,
            timestamp=-1,
            virtual_token_reserves=1,
            virtual_sol_reserves=2,
            real_token_reserves=3,
            token_total_supply=4,
            token_program=e,
            is_mayhem_mode=True,
        ),
        EventKind.COMPLETE: CompleteEvent(
            user=a, mint=b, bonding_curve=c, timestamp=1_730_000_123
        ),
        EventKind.TRADE: TradeEvent(
            mint=a,
            sol_amount=50_000_000,
            token_amount=1_234_567_890,
            is_buy=True,
            user=b,
            timestamp=1_730_000_200,
            virtual_sol_reserves=30_050_000_000,
            virtual_token_reserves=1_071_000_000_000_000,
            real_sol_reserves=50_000_000,
            real_token_reserves=791_000_000_000_000,
            fee_recipient=c,
            fee_basis_points=95,
            fee=475_000,
            creator=d,
            creator_fee_basis_points=5,
            creator_fee=25_000,
            track_volume=False,
            total_unclaimed_tokens=0,
            total_claimed_tokens=7,
            current_sol_volume=2**64 - 1,
            last_update_timestamp=1_730_000_199,
        ),
        EventKind.BUY: BuyEvent(
            timestamp=1_730_000_300,
            base_amount_out=1_000,
            max_quote_amount_in=2_000,
            user_base_token_reserves=3,
            user_quote_token_reserves=4,
            pool_base_token_reserves=5,
            pool_quote_token_reserves=6,
            quote_amount_in=7,
            lp_fee_basis_points=20,
            lp_fee=8,
            protocol_fee_basis_points=5,
            protocol_fee=9,
            quote_amount_in_with_lp_fee=10,
            user_quote_amount_in=11,
            pool=a,
            user=b,
            user_base_token_account=c,
            user_quote_token_account=d,
            protocol_fee_recipient=e,
            protocol_fee_recipient_token_account=f,
            coin_creator=g,
            coin_creator_fee_basis_points=5,
            coin_creator_fee=12,
        ),
        EventKind.SELL: SellEvent(
            timestamp=1_730_000_400,
            base_amount_in=1_000,
            min_quote_amount_out=900,
            user_base_token_reserves=3,
            user_quote_token_reserves=4,
            pool_base_token_reserves=5,
            pool_quote_token_reserves=6,
            quote_amount_out=7,
            lp_fee_basis_points=20,
            lp_fee=8,
            protocol_fee_basis_points=5,
            protocol_fee=9,
            quote_amount_out_without_lp_fee=10,
            user_quote_amount_out=11,
            pool=a,
            user=b,
            user_base_token_account=c,
            user_quote_token_account=d,
            protocol_fee_recipient=e,
            protocol_fee_recipient_token_account=f,
            coin_creator=g,
            coin_creator_fee_basis_points=5,
            coin_creator_fee=12,
        ),
        EventKind.CREATE_POOL: CreatePoolEvent(
            timestamp=1_730_000_500,
            index=65_535,
            creator=a,
            base_mint=b,
            quote_mint=c,
            base_mint_decimals=6,
            quote_mint_decimals=9,
            base_amount_in=206_900_000_000_000,
            quote_amount_in=84_990_359_038,
            pool_base_amount=206_900_000_000_000,
            pool_quote_amount=84_990_359_038,
            minimum_liquidity=100,
            initial_liquidity=4_193_388_000_000,
            lp_token_amount_out=4_193_387_999_900,
            pool_bump=254,
            pool=d,
            lp_mint=e,
            user_base_token_account=f,
            user_quote_token_account=g,
            coin_creator=a,
        ),
    }


@pytest.fixture
def sample_events() -> dict[EventKind, object]:
    return _sample_events()
