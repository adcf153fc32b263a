"""
PumpSwap (AMM) implementation of AddressProvider interface.

This module provides all AMM program addresses and PDA derivations
by implementing the AddressProvider interface.
"""

from dataclasses import dataclass
from typing import Final

from solders.pubkey import Pubkey

from pumpstream.core import pda
from pumpstream.core.pubkeys import (
    FEE_PROGRAM,
    SystemAddresses,
    get_fee_recipient,
    get_token_program,
)
from pumpstream.interfaces.core import AddressProvider, Platform, PumpAmmTradeRequest


@dataclass
class PumpSwapAddresses:
    """PumpSwap program addresses."""

    PROGRAM: Final[Pubkey] = Pubkey.from_string(
        "pAMMBay6oceH9fJKBRHGP5D4bD4sWpmSwMn52FMfXEA"
    )
    GLOBAL_CONFIG: Final[Pubkey] = Pubkey.from_string(
        "ADyA8hdefvWN2dbGGWFotbzWxrAvLW83WG6QCVXvJKqw"
    )
    EVENT_AUTHORITY: Final[Pubkey] = Pubkey.from_string(
        "GS4CU59F31iL7aR2Q8zVS8DRrcRnXX1yjQ66TqNVQnaR"
    )
    FEE_PROGRAM: Final[Pubkey] = FEE_PROGRAM

    # Buy and sell share one account layout; accumulators only appear in a
    # buy-shaped instruction that tracks volume
    ACCOUNT_INDICES = {
        "pool": 0,
        "user": 1,
        "global_config": 2,
        "base_mint": 3,
        "quote_mint": 4,
        "user_base_token_account": 5,
        "user_quote_token_account": 6,
        "pool_base_token_account": 7,
        "pool_quote_token_account": 8,
        "protocol_fee_recipient": 9,
        "protocol_fee_recipient_token_account": 10,
        "base_token_program": 11,
        "quote_token_program": 12,
        "system_program": 13,
        "associated_token_program": 14,
        "event_authority": 15,
        "program": 16,
        "coin_creator_vault_ata": 17,
        "coin_creator_vault_authority": 18,
        "global_volume_accumulator": 19,
        "user_volume_accumulator": 20,
        "fee_config": 21,
        "fee_program": 22,
    }

    @staticmethod
    def find_coin_creator_vault_authority(coin_creator: Pubkey) -> Pubkey:
        """Derive the vault authority PDA that collects a coin creator's fees."""
        return pda.derive_coin_creator_vault_authority(
            coin_creator, PumpSwapAddresses.PROGRAM
        ).address

    @staticmethod
    def find_global_volume_accumulator() -> Pubkey:
        return pda.derive_global_volume_accumulator(PumpSwapAddresses.PROGRAM).address

    @staticmethod
    def find_user_volume_accumulator(user: Pubkey) -> Pubkey:
        return pda.derive_user_volume_accumulator(user, PumpSwapAddresses.PROGRAM).address

    @staticmethod
    def find_fee_config() -> Pubkey:
        return pda.derive_fee_config(PumpSwapAddresses.PROGRAM).address


class PumpSwapAddressProvider(AddressProvider):
    """PumpSwap implementation of AddressProvider interface."""

    @property
    def platform(self) -> Platform:
        """Get the platform this provider serves."""
        return Platform.PUMP_SWAP

    @property
    def program_id(self) -> Pubkey:
        """Get the main program ID for this platform."""
        return PumpSwapAddresses.PROGRAM

    def get_system_addresses(self) -> dict[str, Pubkey]:
        """Get all fixed addresses required for the AMM.

        Returns:
            Dictionary mapping address names to Pubkey objects
        """
        system_addresses = SystemAddresses.get_all_system_addresses()

        pumpswap_addresses = {
            "program": PumpSwapAddresses.PROGRAM,
            "global_config": PumpSwapAddresses.GLOBAL_CONFIG,
            "event_authority": PumpSwapAddresses.EVENT_AUTHORITY,
            "fee_program": PumpSwapAddresses.FEE_PROGRAM,
        }

        return {**system_addresses, **pumpswap_addresses}

    def derive_pool_address(
        self,
        base_mint: Pubkey,
        quote_mint: Pubkey,
        creator: Pubkey,
        index: int = 0,
    ) -> Pubkey:
        """Derive a pool address.

        Args:
            base_mint: Base token mint address
            quote_mint: Quote token mint address
            creator: Pool creator (the migration authority for migrated curves)
            index: Pool index

        Returns:
            Pool address
        """
        return pda.derive_pool(
            index, creator, base_mint, quote_mint, PumpSwapAddresses.PROGRAM
        ).address

    def derive_user_token_account(
        self, user: Pubkey, mint: Pubkey, token_program_id: Pubkey | None = None
    ) -> Pubkey:
        """Derive an associated token account, defaulting to the SPL Token program."""
        if token_program_id is None:
            token_program_id = SystemAddresses.TOKEN_PROGRAM
        return pda.derive_associated_token_account(user, mint, token_program_id).address

    def get_trade_accounts(
        self, request: PumpAmmTradeRequest, include_volume_accumulators: bool = False
    ) -> dict[str, Pubkey]:
        """Get all accounts needed for a pool swap.

        Base side accounts use the mayhem-selected token program, quote side
        accounts always use the SPL Token program.

        Args:
            request: Pool trade request
            include_volume_accumulators: Add the volume accumulator PDAs

        Returns:
            Dictionary of account addresses keyed by IDL name
        """
        base_token_program = get_token_program(request.is_mayhem_mode)
        quote_token_program = SystemAddresses.TOKEN_PROGRAM
        coin_creator_vault_authority = PumpSwapAddresses.find_coin_creator_vault_authority(
            request.coin_creator
        )

        accounts = {
            "pool": request.pool,
            "user": request.user,
            "global_config": PumpSwapAddresses.GLOBAL_CONFIG,
            "base_mint": request.base_mint,
            "quote_mint": request.quote_mint,
            "user_base_token_account": self.derive_user_token_account(
                request.user, request.base_mint, base_token_program
            ),
            "user_quote_token_account": self.derive_user_token_account(
                request.user, request.quote_mint, quote_token_program
            ),
            "pool_base_token_account": self.derive_user_token_account(
                request.pool, request.base_mint, base_token_program
            ),
            "pool_quote_token_account": self.derive_user_token_account(
                request.pool, request.quote_mint, quote_token_program
            ),
            # Fixed recipient keyed on mayhem mode; the caller's recipient only owns the ATA
            "protocol_fee_recipient": get_fee_recipient(request.is_mayhem_mode),
            "protocol_fee_recipient_token_account": self.derive_user_token_account(
                request.protocol_fee_recipient, request.quote_mint, quote_token_program
            ),
            "base_token_program": base_token_program,
            "quote_token_program": quote_token_program,
            "system_program": SystemAddresses.SYSTEM_PROGRAM,
            "associated_token_program": SystemAddresses.ASSOCIATED_TOKEN_PROGRAM,
            "event_authority": PumpSwapAddresses.EVENT_AUTHORITY,
            "program": PumpSwapAddresses.PROGRAM,
            "coin_creator_vault_ata": self.derive_user_token_account(
                coin_creator_vault_authority, request.quote_mint, quote_token_program
            ),
            "coin_creator_vault_authority": coin_creator_vault_authority,
            "fee_config": PumpSwapAddresses.find_fee_config(),
            "fee_program": PumpSwapAddresses.FEE_PROGRAM,
        }

        if include_volume_accumulators:
            accounts["global_volume_accumulator"] = (
                PumpSwapAddresses.find_global_volume_accumulator()
            )
            accounts["user_volume_accumulator"] = (
                PumpSwapAddresses.find_user_volume_accumulator(request.user)
            )

        return accounts
