"""
Core interfaces for the two supported programs.

This module defines the trade request values and the abstract base classes
that each platform implements, so the trade client can build instructions for
the bonding curve and the AMM through one surface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from pumpstream.core.option_bool import OptionBool


class Platform(Enum):
    """Supported programs."""

    PUMP_FUN = "pump_fun"
    PUMP_SWAP = "pump_swap"


@dataclass(frozen=True)
class PumpTradeRequest:
    """Bonding curve buy or sell request.

    sol_limit is max_sol_cost for a buy and min_sol_output for a sell.
    """

    user: Pubkey
    mint: Pubkey
    amount: int
    sol_limit: int
    is_mayhem_mode: bool = False
    track_volume: OptionBool = OptionBool.UNSET  # buy only
    creator: Pubkey | None = None  # falls back to the fee recipient when unknown


@dataclass(frozen=True)
class PumpAmmTradeRequest:
    """AMM pool buy or sell request, from the caller's point of view.

    base_amount is base_amount_out for a buy and base_amount_in for a sell.
    quote_limit is max_quote_amount_in for a buy and min_quote_amount_out for a sell.
    """

    user: Pubkey
    pool: Pubkey
    base_mint: Pubkey
    quote_mint: Pubkey
    coin_creator: Pubkey
    protocol_fee_recipient: Pubkey
    base_amount: int
    quote_limit: int
    is_mayhem_mode: bool = False
    track_volume: OptionBool = OptionBool.UNSET  # buy only


class AddressProvider(ABC):
    """Abstract interface for platform-specific address management."""

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Get the platform this provider serves."""
        pass

    @property
    @abstractmethod
    def program_id(self) -> Pubkey:
        """Get the main program ID for this platform."""
        pass

    @abstractmethod
    def get_system_addresses(self) -> dict[str, Pubkey]:
        """Get all fixed addresses required for this platform.

        Returns:
            Dictionary mapping address names to Pubkey objects
        """
        pass

    @abstractmethod
    def derive_user_token_account(
        self, user: Pubkey, mint: Pubkey, token_program_id: Pubkey | None = None
    ) -> Pubkey:
        """Derive user's associated token account address.

        Args:
            user: User's wallet address
            mint: Token mint address
            token_program_id: Token program owning the mint

        Returns:
            User's token account address
        """
        pass


class InstructionBuilder(ABC):
    """Abstract interface for building platform-specific trading instructions."""

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Get the platform this builder serves."""
        pass

    @abstractmethod
    def build_buy_instruction(self, request) -> Instruction:
        """Build the buy instruction for a request.

        Raises:
            InvalidAccount: If a required address is missing or the default key
            InvalidAmount: If an amount does not fit in a u64
        """
        pass

    @abstractmethod
    def build_sell_instruction(self, request) -> Instruction:
        """Build the sell instruction for a request.

        Raises:
            InvalidAccount: If a required address is missing or the default key
            InvalidAmount: If an amount does not fit in a u64
        """
        pass

    def get_required_accounts_for_buy(self, request) -> list[Pubkey]:
        """Get the account keys of the built buy instruction, in order."""
        return [meta.pubkey for meta in self.build_buy_instruction(request).accounts]

    def get_required_accounts_for_sell(self, request) -> list[Pubkey]:
        """Get the account keys of the built sell instruction, in order."""
        return [meta.pubkey for meta in self.build_sell_instruction(request).accounts]
