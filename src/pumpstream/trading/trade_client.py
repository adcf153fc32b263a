"""
Trade client: the four instruction-building operations behind one object.

The client holds no mutable state, so a single instance can be shared across
threads and asyncio tasks. It never signs or sends anything; the returned
Instruction goes to whatever submission layer the caller uses.
"""

from dataclasses import dataclass, field

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from pumpstream.core.option_bool import OptionBool
from pumpstream.interfaces.core import PumpAmmTradeRequest, PumpTradeRequest
from pumpstream.platforms.pumpfun.instruction_builder import PumpFunInstructionBuilder
from pumpstream.platforms.pumpswap.instruction_builder import PumpSwapInstructionBuilder


def _as_option_bool(track_volume: OptionBool | bool | None) -> OptionBool:
    if isinstance(track_volume, OptionBool):
        return track_volume
    return OptionBool.from_optional(track_volume)


@dataclass(frozen=True)
class TradeClient:
    """Builds buy and sell instructions for the bonding curve and the AMM."""

    pump: PumpFunInstructionBuilder = field(default_factory=PumpFunInstructionBuilder)
    pump_amm: PumpSwapInstructionBuilder = field(
        default_factory=PumpSwapInstructionBuilder
    )

    def build_buy_instruction(
        self,
        user: Pubkey,
        mint: Pubkey,
        amount: int,
        max_sol_cost: int,
        track_volume: OptionBool | bool | None,
        is_mayhem_mode: bool,
        *,
        creator: Pubkey | None = None,
    ) -> Instruction:
        """Build a bonding curve buy.

        Args:
            user: Buyer and signer
            mint: Token mint
            amount: Token amount to buy, in base units
            max_sol_cost: Maximum SOL to spend, in lamports
            track_volume: Volume tracking flag
            is_mayhem_mode: Selects Token-2022 and the mayhem fee recipient
            creator: Token creator, keys the creator vault

        Returns:
            Buy instruction
        """
        return self.pump.build_buy_instruction(
            PumpTradeRequest(
                user=user,
                mint=mint,
                amount=amount,
                sol_limit=max_sol_cost,
                is_mayhem_mode=is_mayhem_mode,
                track_volume=_as_option_bool(track_volume),
                creator=creator,
            )
        )

    def build_sell_instruction(
        self,
        user: Pubkey,
        mint: Pubkey,
        amount: int,
        min_sol_output: int,
        is_mayhem_mode: bool,
        *,
        creator: Pubkey | None = None,
    ) -> Instruction:
        """Build a bonding curve sell.

        Args:
            user: Seller and signer
            mint: Token mint
            amount: Token amount to sell, in base units
            min_sol_output: Minimum SOL to receive, in lamports
            is_mayhem_mode: Selects Token-2022 and the mayhem fee recipient
            creator: Token creator, keys the creator vault

        Returns:
            Sell instruction
        """
        return self.pump.build_sell_instruction(
            PumpTradeRequest(
                user=user,
                mint=mint,
                amount=amount,
                sol_limit=min_sol_output,
                is_mayhem_mode=is_mayhem_mode,
                creator=creator,
            )
        )

    def build_pump_amm_buy_instruction(
        self,
        user: Pubkey,
        pool: Pubkey,
        base_mint: Pubkey,
        quote_mint: Pubkey,
        coin_creator: Pubkey,
        protocol_fee_recipient: Pubkey,
        base_amount_out: int,
        max_quote_amount_in: int,
        track_volume: OptionBool | bool | None,
        is_mayhem_mode: bool,
    ) -> Instruction:
        """Build a pool buy (sent as a sell when the quote is not WSOL/USDC)."""
        return self.pump_amm.build_buy_instruction(
            PumpAmmTradeRequest(
                user=user,
                pool=pool,
                base_mint=base_mint,
                quote_mint=quote_mint,
                coin_creator=coin_creator,
                protocol_fee_recipient=protocol_fee_recipient,
                base_amount=base_amount_out,
                quote_limit=max_quote_amount_in,
                is_mayhem_mode=is_mayhem_mode,
                track_volume=_as_option_bool(track_volume),
            )
        )

    def build_pump_amm_sell_instruction(
        self,
        user: Pubkey,
        pool: Pubkey,
        base_mint: Pubkey,
        quote_mint: Pubkey,
        coin_creator: Pubkey,
        protocol_fee_recipient: Pubkey,
        base_amount_in: int,
        min_quote_amount_out: int,
        is_mayhem_mode: bool,
    ) -> Instruction:
        """Build a pool sell (sent as a buy when the quote is not WSOL/USDC)."""
        return self.pump_amm.build_sell_instruction(
            PumpAmmTradeRequest(
                user=user,
                pool=pool,
                base_mint=base_mint,
                quote_mint=quote_mint,
                coin_creator=coin_creator,
                protocol_fee_recipient=protocol_fee_recipient,
                base_amount=base_amount_in,
                quote_limit=min_quote_amount_out,
                is_mayhem_mode=is_mayhem_mode,
            )
        )
