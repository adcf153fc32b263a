"""
Pump.Fun implementation of InstructionBuilder interface.

Builds bonding curve buy and sell instructions with the account order the
program's IDL expects.
"""

import struct

from solders.instruction import AccountMeta, Instruction

from pumpstream.core.discriminators import (
    BUY_INSTRUCTION_DISCRIMINATOR,
    SELL_INSTRUCTION_DISCRIMINATOR,
)
from pumpstream.core.option_bool import OptionBool
from pumpstream.interfaces.core import InstructionBuilder, Platform, PumpTradeRequest
from pumpstream.platforms.pumpfun.address_provider import (
    PumpFunAddresses,
    PumpFunAddressProvider,
)
from pumpstream.utils.logger import get_logger
from pumpstream.utils.validation import require_account, require_u64

logger = get_logger(__name__)

WRITABLE_ACCOUNTS = frozenset(
    {
        "fee",
        "bonding_curve",
        "associated_bonding_curve",
        "user_token_account",
        "user",
        "creator_vault",
        "user_volume_accumulator",
    }
)
SIGNER_ACCOUNTS = frozenset({"user"})


def _to_account_metas(
    accounts: dict[str, object], indices: dict[str, int]
) -> list[AccountMeta]:
    """Order named accounts by IDL index, skipping optional ones that are absent."""
    return [
        AccountMeta(
            pubkey=accounts[name],
            is_signer=name in SIGNER_ACCOUNTS,
            is_writable=name in WRITABLE_ACCOUNTS,
        )
        for name in sorted(indices, key=indices.get)
        if name in accounts
    ]


class PumpFunInstructionBuilder(InstructionBuilder):
    """Pump.Fun implementation of InstructionBuilder interface."""

    def __init__(self, address_provider: PumpFunAddressProvider | None = None):
        self.address_provider = address_provider or PumpFunAddressProvider()

    @property
    def platform(self) -> Platform:
        """Get the platform this builder serves."""
        return Platform.PUMP_FUN

    @staticmethod
    def _validate(request: PumpTradeRequest, limit_name: str) -> None:
        require_account("user", request.user)
        require_account("mint", request.mint)
        if request.creator is not None:
            require_account("creator", request.creator)
        require_u64("amount", request.amount)
        require_u64(limit_name, request.sol_limit)

    def build_buy_instruction(self, request: PumpTradeRequest) -> Instruction:
        """Build a bonding curve buy.

        Data layout: discriminator, u64 token amount, u64 max_sol_cost, OptionBool
        track_volume. The volume accumulators are appended to the account list
        only when tracking is requested.

        Args:
            request: Buy request, sol_limit is the max SOL cost in lamports

        Returns:
            Buy instruction
        """
        self._validate(request, "max_sol_cost")

        track_volume = request.track_volume
        accounts = self.address_provider.get_buy_instruction_accounts(
            request, include_volume_accumulators=track_volume is OptionBool.TRUE
        )

        instruction_data = (
            BUY_INSTRUCTION_DISCRIMINATOR
            + struct.pack("<Q", request.amount)
            + struct.pack("<Q", request.sol_limit)
            + track_volume.to_bytes()
        )

        logger.debug(
            f"Built pump.fun buy: mint={request.mint}, amount={request.amount}, "
            f"max_sol_cost={request.sol_limit}, mayhem={request.is_mayhem_mode}"
        )
        return Instruction(
            PumpFunAddresses.PROGRAM,
            instruction_data,
            _to_account_metas(accounts, PumpFunAddresses.BUY_ACCOUNT_INDICES),
        )

    def build_sell_instruction(self, request: PumpTradeRequest) -> Instruction:
        """Build a bonding curve sell.

        Data layout: discriminator, u64 token amount, u64 min_sol_output.

        Args:
            request: Sell request, sol_limit is the minimum SOL output in lamports

        Returns:
            Sell instruction
        """
        self._validate(request, "min_sol_output")

        accounts = self.address_provider.get_sell_instruction_accounts(request)

        instruction_data = (
            SELL_INSTRUCTION_DISCRIMINATOR
            + struct.pack("<Q", request.amount)
            + struct.pack("<Q", request.sol_limit)
        )

        logger.debug(
            f"Built pump.fun sell: mint={request.mint}, amount={request.amount}, "
            f"min_sol_output={request.sol_limit}, mayhem={request.is_mayhem_mode}"
        )
        return Instruction(
            PumpFunAddresses.PROGRAM,
            instruction_data,
            _to_account_metas(accounts, PumpFunAddresses.SELL_ACCOUNT_INDICES),
        )
