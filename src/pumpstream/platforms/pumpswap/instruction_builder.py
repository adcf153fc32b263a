"""
PumpSwap (AMM) implementation of InstructionBuilder interface.

The AMM defines buy and sell relative to the pool's quote side. When the quote
mint is WSOL or USDC the requested direction maps straight onto the program's
instruction. For any other quote mint the shape is inverted: a buy is sent as
the program's sell with the two amounts swapped, and a sell as its buy.
"""

import struct

from solders.instruction import AccountMeta, Instruction

from pumpstream.core.discriminators import (
    BUY_INSTRUCTION_DISCRIMINATOR,
    SELL_INSTRUCTION_DISCRIMINATOR,
)
from pumpstream.core.option_bool import OptionBool
from pumpstream.core.pubkeys import is_quote_mint
from pumpstream.interfaces.core import InstructionBuilder, Platform, PumpAmmTradeRequest
from pumpstream.platforms.pumpswap.address_provider import (
    PumpSwapAddresses,
    PumpSwapAddressProvider,
)
from pumpstream.utils.logger import get_logger
from pumpstream.utils.validation import require_account, require_u64

logger = get_logger(__name__)

WRITABLE_ACCOUNTS = frozenset(
    {
        "pool",
        "user",
        "user_base_token_account",
        "user_quote_token_account",
        "pool_base_token_account",
        "pool_quote_token_account",
        "protocol_fee_recipient_token_account",
        "coin_creator_vault_ata",
        "user_volume_accumulator",
    }
)
SIGNER_ACCOUNTS = frozenset({"user"})


class PumpSwapInstructionBuilder(InstructionBuilder):
    """PumpSwap implementation of InstructionBuilder interface."""

    def __init__(self, address_provider: PumpSwapAddressProvider | None = None):
        self.address_provider = address_provider or PumpSwapAddressProvider()

    @property
    def platform(self) -> Platform:
        """Get the platform this builder serves."""
        return Platform.PUMP_SWAP

    @staticmethod
    def is_inverted(request: PumpAmmTradeRequest) -> bool:
        """Whether the request must be sent with the opposite instruction shape."""
        return not is_quote_mint(request.quote_mint)

    @staticmethod
    def _validate(request: PumpAmmTradeRequest, base_name: str, quote_name: str) -> None:
        require_account("user", request.user)
        require_account("pool", request.pool)
        require_account("base_mint", request.base_mint)
        require_account("quote_mint", request.quote_mint)
        require_account("coin_creator", request.coin_creator)
        require_account("protocol_fee_recipient", request.protocol_fee_recipient)
        require_u64(base_name, request.base_amount)
        require_u64(quote_name, request.quote_limit)

    def _buy_shape(
        self,
        request: PumpAmmTradeRequest,
        first: int,
        second: int,
        track_volume: OptionBool,
    ) -> Instruction:
        accounts = self.address_provider.get_trade_accounts(
            request, include_volume_accumulators=track_volume is OptionBool.TRUE
        )
        data = (
            BUY_INSTRUCTION_DISCRIMINATOR
            + struct.pack("<Q", first)
            + struct.pack("<Q", second)
            + track_volume.to_bytes()
        )
        return Instruction(PumpSwapAddresses.PROGRAM, data, self._to_account_metas(accounts))

    def _sell_shape(
        self, request: PumpAmmTradeRequest, first: int, second: int
    ) -> Instruction:
        accounts = self.address_provider.get_trade_accounts(request)
        data = (
            SELL_INSTRUCTION_DISCRIMINATOR
            + struct.pack("<Q", first)
            + struct.pack("<Q", second)
        )
        return Instruction(PumpSwapAddresses.PROGRAM, data, self._to_account_metas(accounts))

    @staticmethod
    def _to_account_metas(accounts: dict) -> list[AccountMeta]:
        indices = PumpSwapAddresses.ACCOUNT_INDICES
        return [
            AccountMeta(
                pubkey=accounts[name],
                is_signer=name in SIGNER_ACCOUNTS,
                is_writable=name in WRITABLE_ACCOUNTS,
            )
            for name in sorted(indices, key=indices.get)
            if name in accounts
        ]

    def build_buy_instruction(self, request: PumpAmmTradeRequest) -> Instruction:
        """Build a pool buy.

        Args:
            request: base_amount is base_amount_out, quote_limit is max_quote_amount_in

        Returns:
            Buy-shaped instruction for a WSOL/USDC quote, sell-shaped otherwise
        """
        self._validate(request, "base_amount_out", "max_quote_amount_in")

        if self.is_inverted(request):
            logger.debug(
                f"Quote mint {request.quote_mint} is not WSOL/USDC, sending buy as sell"
            )
            return self._sell_shape(request, request.quote_limit, request.base_amount)

        return self._buy_shape(
            request, request.base_amount, request.quote_limit, request.track_volume
        )

    def build_sell_instruction(self, request: PumpAmmTradeRequest) -> Instruction:
        """Build a pool sell.

        Args:
            request: base_amount is base_amount_in, quote_limit is min_quote_amount_out

        Returns:
            Sell-shaped instruction for a WSOL/USDC quote, buy-shaped otherwise
        """
        self._validate(request, "base_amount_in", "min_quote_amount_out")

        if self.is_inverted(request):
            logger.debug(
                f"Quote mint {request.quote_mint} is not WSOL/USDC, sending sell as buy"
            )
            # A sell never tracks volume
            return self._buy_shape(
                request, request.quote_limit, request.base_amount, OptionBool.UNSET
            )

        return self._sell_shape(request, request.base_amount, request.quote_limit)
