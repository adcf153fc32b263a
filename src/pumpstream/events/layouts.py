"""
Borsh wire layouts for the event payloads, after the 8-byte discriminator.

Field names match the dataclasses in pumpstream.events.models so a parsed
container maps straight onto the event constructor.
"""

from typing import Final

from construct import (
    Adapter,
    Bytes,
    Int8ul,
    Int16ul,
    Int32ul,
    Int64sl,
    Int64ul,
    PascalString,
    Struct,
    ValidationError,
)
from solders.pubkey import Pubkey

from pumpstream.core.discriminators import EventKind


class PubkeyAdapter(Adapter):
    """32 raw bytes <-> solders Pubkey."""

    def __init__(self):
        super().__init__(Bytes(32))

    def _decode(self, obj, context, path):
        return Pubkey.from_bytes(obj)

    def _encode(self, obj, context, path):
        return bytes(obj)


class StrictFlag(Adapter):
    """Borsh bool: exactly 0 or 1, anything else is rejected."""

    def __init__(self):
        super().__init__(Int8ul)

    def _decode(self, obj, context, path):
        if obj not in (0, 1):
            raise ValidationError(f"invalid bool byte {obj}", path=path)
        return obj == 1

    def _encode(self, obj, context, path):
        return 1 if obj else 0


PubkeyField = PubkeyAdapter()
Bool = StrictFlag()
BorshString = PascalString(Int32ul, "utf8")

_CREATE_FIELDS = (
    "name" / BorshString,
    "symbol" / BorshString,
    "uri" / BorshString,
    "mint" / PubkeyField,
    "bonding_curve" / PubkeyField,
    "user" / PubkeyField,
    "creator" / PubkeyField,
    "timestamp" / Int64sl,
    "virtual_token_reserves" / Int64ul,
    "virtual_sol_reserves" / Int64ul,
    "real_token_reserves" / Int64ul,
    "token_total_supply" / Int64ul,
)

CREATE_LAYOUT = Struct(*_CREATE_FIELDS)

CREATE_V2_LAYOUT = Struct(
    *_CREATE_FIELDS,
    "token_program" / PubkeyField,
    "is_mayhem_mode" / Bool,
)

COMPLETE_LAYOUT = Struct(
    "user" / PubkeyField,
    "mint" / PubkeyField,
    "bonding_curve" / PubkeyField,
    "timestamp" / Int64sl,
)

TRADE_LAYOUT = Struct(
    "mint" / PubkeyField,
    "sol_amount" / Int64ul,
    "token_amount" / Int64ul,
    "is_buy" / Bool,
    "user" / PubkeyField,
    "timestamp" / Int64sl,
    "virtual_sol_reserves" / Int64ul,
    "virtual_token_reserves" / Int64ul,
    "real_sol_reserves" / Int64ul,
    "real_token_reserves" / Int64ul,
    "fee_recipient" / PubkeyField,
    "fee_basis_points" / Int64ul,
    "fee" / Int64ul,
    "creator" / PubkeyField,
    "creator_fee_basis_points" / Int64ul,
    "creator_fee" / Int64ul,
    "track_volume" / Bool,
    "total_unclaimed_tokens" / Int64ul,
    "total_claimed_tokens" / Int64ul,
    "current_sol_volume" / Int64ul,
    "last_update_timestamp" / Int64sl,
)

# PumpAMM buy and sell events share everything except the amount fields
_AMM_TRADE_ACCOUNTS = (
    "pool" / PubkeyField,
    "user" / PubkeyField,
    "user_base_token_account" / PubkeyField,
    "user_quote_token_account" / PubkeyField,
    "protocol_fee_recipient" / PubkeyField,
    "protocol_fee_recipient_token_account" / PubkeyField,
    "coin_creator" / PubkeyField,
    "coin_creator_fee_basis_points" / Int64ul,
    "coin_creator_fee" / Int64ul,
)

BUY_LAYOUT = Struct(
    "timestamp" / Int64sl,
    "base_amount_out" / Int64ul,
    "max_quote_amount_in" / Int64ul,
    "user_base_token_reserves" / Int64ul,
    "user_quote_token_reserves" / Int64ul,
    "pool_base_token_reserves" / Int64ul,
    "pool_quote_token_reserves" / Int64ul,
    "quote_amount_in" / Int64ul,
    "lp_fee_basis_points" / Int64ul,
    "lp_fee" / Int64ul,
    "protocol_fee_basis_points" / Int64ul,
    "protocol_fee" / Int64ul,
    "quote_amount_in_with_lp_fee" / Int64ul,
    "user_quote_amount_in" / Int64ul,
    *_AMM_TRADE_ACCOUNTS,
)

SELL_LAYOUT = Struct(
    "timestamp" / Int64sl,
    "base_amount_in" / Int64ul,
    "min_quote_amount_out" / Int64ul,
    "user_base_token_reserves" / Int64ul,
    "user_quote_token_reserves" / Int64ul,
    "pool_base_token_reserves" / Int64ul,
    "pool_quote_token_reserves" / Int64ul,
    "quote_amount_out" / Int64ul,
    "lp_fee_basis_points" / Int64ul,
    "lp_fee" / Int64ul,
    "protocol_fee_basis_points" / Int64ul,
    "protocol_fee" / Int64ul,
    "quote_amount_out_without_lp_fee" / Int64ul,
    "user_quote_amount_out" / Int64ul,
    *_AMM_TRADE_ACCOUNTS,
)

CREATE_POOL_LAYOUT = Struct(
    "timestamp" / Int64sl,
    "index" / Int16ul,
    "creator" / PubkeyField,
    "base_mint" / PubkeyField,
    "quote_mint" / PubkeyField,
    "base_mint_decimals" / Int8ul,
    "quote_mint_decimals" / Int8ul,
    "base_amount_in" / Int64ul,
    "quote_amount_in" / Int64ul,
    "pool_base_amount" / Int64ul,
    "pool_quote_amount" / Int64ul,
    "minimum_liquidity" / Int64ul,
    "initial_liquidity" / Int64ul,
    "lp_token_amount_out" / Int64ul,
    "pool_bump" / Int8ul,
    "pool" / PubkeyField,
    "lp_mint" / PubkeyField,
    "user_base_token_account" / PubkeyField,
    "user_quote_token_account" / PubkeyField,
    "coin_creator" / PubkeyField,
)

EVENT_LAYOUTS: Final[dict[EventKind, Struct]] = {
    EventKind.CREATE: CREATE_LAYOUT,
    EventKind.CREATE_V2: CREATE_V2_LAYOUT,
    EventKind.COMPLETE: COMPLETE_LAYOUT,
    EventKind.TRADE: TRADE_LAYOUT,
    EventKind.BUY: BUY_LAYOUT,
    EventKind.SELL: SELL_LAYOUT,
    EventKind.CREATE_POOL: CREATE_POOL_LAYOUT,
}
