"""
Pump.Fun implementation of AddressProvider interface.

This module provides all bonding curve program addresses and PDA derivations
by implementing the AddressProvider interface.
"""

from dataclasses import dataclass
from typing import Final

from solders.pubkey import Pubkey

from pumpstream.core import pda
from pumpstream.core.pubkeys import (
    FEE_PROGRAM,
    FEE_RECIPIENT,
    MAYHEM_FEE_RECIPIENT,
    SystemAddresses,
    get_fee_recipient,
    get_token_program,
)
from pumpstream.interfaces.core import AddressProvider, Platform, PumpTradeRequest


@dataclass
class PumpFunAddresses:
    """Pump.fun program addresses."""

    PROGRAM: Final[Pubkey] = Pubkey.from_string(
        "6EF8rrecthR5Dkzon8Nwu78hRvfCKubJ14M5uBEwF6P"
    )
    GLOBAL: Final[Pubkey] = Pubkey.from_string(
        "4wTV1YmiEkRvAtNtsSGPtUrqRYQMe5SKy2uB4Jjaxnjf"
    )
    EVENT_AUTHORITY: Final[Pubkey] = Pubkey.from_string(
        "Ce6TQqeHC9p8KetsN6JsjHK7UTZk7nasjjnr7XxXp9F1"
    )
    FEE: Final[Pubkey] = FEE_RECIPIENT
    # To check if this address is up-to-date, fetch Global account data at offset 483
    MAYHEM_FEE: Final[Pubkey] = MAYHEM_FEE_RECIPIENT
    FEE_PROGRAM: Final[Pubkey] = FEE_PROGRAM

    # Account index mappings for buy/sell instructions (from IDL)
    # Volume accumulators are only present in a buy that tracks volume
    BUY_ACCOUNT_INDICES = {
        "global": 0,
        "fee": 1,
        "mint": 2,
        "bonding_curve": 3,
        "associated_bonding_curve": 4,
        "user_token_account": 5,
        "user": 6,
        "system_program": 7,
        "token_program": 8,
        "creator_vault": 9,
        "event_authority": 10,
        "program": 11,
        "global_volume_accumulator": 12,
        "user_volume_accumulator": 13,
        "fee_config": 14,
        "fee_program": 15,
    }

    SELL_ACCOUNT_INDICES = {
        "global": 0,
        "fee": 1,
        "mint": 2,
        "bonding_curve": 3,
        "associated_bonding_curve": 4,
        "user_token_account": 5,
        "user": 6,
        "system_program": 7,
        "creator_vault": 8,
        "token_program": 9,
        "event_authority": 10,
        "program": 11,
        "fee_config": 12,
        "fee_program": 13,
    }

    @staticmethod
    def find_global_volume_accumulator() -> Pubkey:
        """Derive the PDA for the global volume accumulator."""
        return pda.derive_global_volume_accumulator(PumpFunAddresses.PROGRAM).address

    @staticmethod
    def find_user_volume_accumulator(user: Pubkey) -> Pubkey:
        """Derive the PDA for a user's volume accumulator.

        Args:
            user: Pubkey of the user account

        Returns:
            Pubkey of the derived user volume accumulator account
        """
        return pda.derive_user_volume_accumulator(user, PumpFunAddresses.PROGRAM).address

    @staticmethod
    def find_fee_config() -> Pubkey:
        """Derive the PDA for the fee config, owned by the fee program."""
        return pda.derive_fee_config(PumpFunAddresses.PROGRAM).address


class PumpFunAddressProvider(AddressProvider):
    """Pump.Fun implementation of AddressProvider interface."""

    @property
    def platform(self) -> Platform:
        """Get the platform this provider serves."""
        return Platform.PUMP_FUN

    @property
    def program_id(self) -> Pubkey:
        """Get the main program ID for this platform."""
        return PumpFunAddresses.PROGRAM

    def get_system_addresses(self) -> dict[str, Pubkey]:
        """Get all fixed addresses required for pump.fun.

        Returns:
            Dictionary mapping address names to Pubkey objects
        """
        system_addresses = SystemAddresses.get_all_system_addresses()

        pumpfun_addresses = {
            "program": PumpFunAddresses.PROGRAM,
            "global": PumpFunAddresses.GLOBAL,
            "event_authority": PumpFunAddresses.EVENT_AUTHORITY,
            "fee": PumpFunAddresses.FEE,
            "mayhem_fee": PumpFunAddresses.MAYHEM_FEE,
            "fee_program": PumpFunAddresses.FEE_PROGRAM,
        }

        return {**system_addresses, **pumpfun_addresses}

    def derive_bonding_curve(self, mint: Pubkey) -> Pubkey:
        """Derive the bonding curve address for a token."""
        return pda.derive_bonding_curve(mint, PumpFunAddresses.PROGRAM).address

    def derive_user_token_account(
        self, user: Pubkey, mint: Pubkey, token_program_id: Pubkey | None = None
    ) -> Pubkey:
        """Derive user's associated token account address.

        Args:
            user: User's wallet address
            mint: Token mint address
            token_program_id: Token program (TOKEN or TOKEN_2022). Defaults to TOKEN_PROGRAM

        Returns:
            User's associated token account address
        """
        if token_program_id is None:
            token_program_id = SystemAddresses.TOKEN_PROGRAM
        return pda.derive_associated_token_account(user, mint, token_program_id).address

    def derive_associated_bonding_curve(
        self, mint: Pubkey, bonding_curve: Pubkey, token_program_id: Pubkey | None = None
    ) -> Pubkey:
        """Derive the associated bonding curve (ATA of bonding curve for the token).

        Args:
            mint: Token mint address
            bonding_curve: Bonding curve address
            token_program_id: Token program (TOKEN or TOKEN_2022). Defaults to TOKEN_PROGRAM

        Returns:
            Associated bonding curve address
        """
        if token_program_id is None:
            token_program_id = SystemAddresses.TOKEN_PROGRAM
        return pda.derive_associated_token_account(
            bonding_curve, mint, token_program_id
        ).address

    def derive_creator_vault(self, creator: Pubkey) -> Pubkey:
        """Derive the creator vault address."""
        return pda.derive_creator_vault(creator, PumpFunAddresses.PROGRAM).address

    def derive_global_volume_accumulator(self) -> Pubkey:
        return PumpFunAddresses.find_global_volume_accumulator()

    def derive_user_volume_accumulator(self, user: Pubkey) -> Pubkey:
        return PumpFunAddresses.find_user_volume_accumulator(user)

    def derive_fee_config(self) -> Pubkey:
        return PumpFunAddresses.find_fee_config()

    def get_fee_recipient(self, is_mayhem_mode: bool) -> Pubkey:
        """Get the correct fee recipient based on mayhem mode."""
        return get_fee_recipient(is_mayhem_mode)

    def get_token_program(self, is_mayhem_mode: bool) -> Pubkey:
        """Get the token program based on mayhem mode."""
        return get_token_program(is_mayhem_mode)

    def _get_common_accounts(self, request: PumpTradeRequest) -> dict[str, Pubkey]:
        token_program_id = self.get_token_program(request.is_mayhem_mode)
        fee_recipient = self.get_fee_recipient(request.is_mayhem_mode)
        bonding_curve = self.derive_bonding_curve(request.mint)

        # Without a known creator the vault is keyed on the fee recipient
        creator = request.creator if request.creator is not None else fee_recipient

        return {
            "global": PumpFunAddresses.GLOBAL,
            "fee": fee_recipient,
            "mint": request.mint,
            "bonding_curve": bonding_curve,
            "associated_bonding_curve": self.derive_associated_bonding_curve(
                request.mint, bonding_curve, token_program_id
            ),
            "user_token_account": self.derive_user_token_account(
                request.user, request.mint, token_program_id
            ),
            "user": request.user,
            "system_program": SystemAddresses.SYSTEM_PROGRAM,
            "token_program": token_program_id,
            "creator_vault": self.derive_creator_vault(creator),
            "event_authority": PumpFunAddresses.EVENT_AUTHORITY,
            "program": PumpFunAddresses.PROGRAM,
            "fee_config": self.derive_fee_config(),
            "fee_program": PumpFunAddresses.FEE_PROGRAM,
        }

    def get_buy_instruction_accounts(
        self, request: PumpTradeRequest, include_volume_accumulators: bool = False
    ) -> dict[str, Pubkey]:
        """Get all accounts needed for a buy instruction.

        Args:
            request: Buy request
            include_volume_accumulators: Add the volume accumulator PDAs

        Returns:
            Dictionary of account addresses for buy instruction
        """
        accounts = self._get_common_accounts(request)
        if include_volume_accumulators:
            accounts["global_volume_accumulator"] = self.derive_global_volume_accumulator()
            accounts["user_volume_accumulator"] = self.derive_user_volume_accumulator(
                request.user
            )
        return accounts

    def get_sell_instruction_accounts(
        self, request: PumpTradeRequest
    ) -> dict[str, Pubkey]:
        """Get all accounts needed for a sell instruction."""
        return self._get_common_accounts(request)
