"""
Typed event values emitted by the Pump and PumpAMM programs.

Each class mirrors the on-chain event struct field for field, in wire order.
Amounts are raw u64 integers (lamports or token base units), timestamps are
signed unix seconds.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from solders.pubkey import Pubkey

from pumpstream.core.discriminators import (
    BUY_EVENT_DISCRIMINATOR,
    COMPLETE_DISCRIMINATOR,
    CREATE_DISCRIMINATOR,
    CREATE_POOL_DISCRIMINATOR,
    CREATE_V2_DISCRIMINATOR,
    SELL_EVENT_DISCRIMINATOR,
    TRADE_DISCRIMINATOR,
    EventKind,
)


@dataclass(frozen=True)
class CreateEvent:
    """New token launched on a bonding curve."""

    kind: ClassVar[EventKind] = EventKind.CREATE
    discriminator: ClassVar[bytes] = CREATE_DISCRIMINATOR

    name: str
    symbol: str
    uri: str
    mint: Pubkey
    bonding_curve: Pubkey
    user: Pubkey
    creator: Pubkey
    timestamp: int
    virtual_token_reserves: int
    virtual_sol_reserves: int
    real_token_reserves: int
    token_total_supply: int


@dataclass(frozen=True)
class CreateV2Event:
    """New token launched through create_v2 (Token-2022 aware)."""

    kind: ClassVar[EventKind] = EventKind.CREATE_V2
    discriminator: ClassVar[bytes] = CREATE_V2_DISCRIMINATOR

    name: str
    symbol: str
    uri: str
    mint: Pubkey
    bonding_curve: Pubkey
    user: Pubkey
    creator: Pubkey
    timestamp: int
    virtual_token_reserves: int
    virtual_sol_reserves: int
    real_token_reserves: int
    token_total_supply: int
    token_program: Pubkey
    is_mayhem_mode: bool


@dataclass(frozen=True)
class CompleteEvent:
    """Bonding curve reached completion and is ready for migration."""

    kind: ClassVar[EventKind] = EventKind.COMPLETE
    discriminator: ClassVar[bytes] = COMPLETE_DISCRIMINATOR

    user: Pubkey
    mint: Pubkey
    bonding_curve: Pubkey
    timestamp: int


@dataclass(frozen=True)
class TradeEvent:
    """Buy or sell against a bonding curve."""

    kind: ClassVar[EventKind] = EventKind.TRADE
    discriminator: ClassVar[bytes] = TRADE_DISCRIMINATOR

    mint: Pubkey
    sol_amount: int
    token_amount: int
    is_buy: bool
    user: Pubkey
    timestamp: int
    virtual_sol_reserves: int
    virtual_token_reserves: int
    real_sol_reserves: int
    real_token_reserves: int
    fee_recipient: Pubkey
    fee_basis_points: int
    fee: int
    creator: Pubkey
    creator_fee_basis_points: int
    creator_fee: int
    track_volume: bool
    total_unclaimed_tokens: int
    total_claimed_tokens: int
    current_sol_volume: int
    last_update_timestamp: int


@dataclass(frozen=True)
class BuyEvent:
    """Buy on a PumpAMM pool."""

    kind: ClassVar[EventKind] = EventKind.BUY
    discriminator: ClassVar[bytes] = BUY_EVENT_DISCRIMINATOR

    timestamp: int
    base_amount_out: int
    max_quote_amount_in: int
    user_base_token_reserves: int
    user_quote_token_reserves: int
    pool_base_token_reserves: int
    pool_quote_token_reserves: int
    quote_amount_in: int
    lp_fee_basis_points: int
    lp_fee: int
    protocol_fee_basis_points: int
    protocol_fee: int
    quote_amount_in_with_lp_fee: int
    user_quote_amount_in: int
    pool: Pubkey
    user: Pubkey
    user_base_token_account: Pubkey
    user_quote_token_account: Pubkey
    protocol_fee_recipient: Pubkey
    protocol_fee_recipient_token_account: Pubkey
    coin_creator: Pubkey
    coin_creator_fee_basis_points: int
    coin_creator_fee: int


@dataclass(frozen=True)
class SellEvent:
    """Sell on a PumpAMM pool."""

    kind: ClassVar[EventKind] = EventKind.SELL
    discriminator: ClassVar[bytes] = SELL_EVENT_DISCRIMINATOR

    timestamp: int
    base_amount_in: int
    min_quote_amount_out: int
    user_base_token_reserves: int
    user_quote_token_reserves: int
    pool_base_token_reserves: int
    pool_quote_token_reserves: int
    quote_amount_out: int
    lp_fee_basis_points: int
    lp_fee: int
    protocol_fee_basis_points: int
    protocol_fee: int
    quote_amount_out_without_lp_fee: int
    user_quote_amount_out: int
    pool: Pubkey
    user: Pubkey
    user_base_token_account: Pubkey
    user_quote_token_account: Pubkey
    protocol_fee_recipient: Pubkey
    protocol_fee_recipient_token_account: Pubkey
    coin_creator: Pubkey
    coin_creator_fee_basis_points: int
    coin_creator_fee: int


@dataclass(frozen=True)
class CreatePoolEvent:
    """New PumpAMM pool, usually a migrated bonding curve."""

    kind: ClassVar[EventKind] = EventKind.CREATE_POOL
    discriminator: ClassVar[bytes] = CREATE_POOL_DISCRIMINATOR

    timestamp: int
    index: int
    creator: Pubkey
    base_mint: Pubkey
    quote_mint: Pubkey
    base_mint_decimals: int
    quote_mint_decimals: int
    base_amount_in: int
    quote_amount_in: int
    pool_base_amount: int
    pool_quote_amount: int
    minimum_liquidity: int
    initial_liquidity: int
    lp_token_amount_out: int
    pool_bump: int
    pool: Pubkey
    lp_mint: Pubkey
    user_base_token_account: Pubkey
    user_quote_token_account: Pubkey
    coin_creator: Pubkey


Event = Union[
    CreateEvent,
    CreateV2Event,
    CompleteEvent,
    TradeEvent,
    BuyEvent,
    SellEvent,
    CreatePoolEvent,
]

EVENT_TYPES: dict[EventKind, type] = {
    cls.kind: cls
    for cls in (
        CreateEvent,
        CreateV2Event,
        CompleteEvent,
        TradeEvent,
        BuyEvent,
        SellEvent,
        CreatePoolEvent,
    )
}
