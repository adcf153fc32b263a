"""
System addresses and constants for Solana blockchain operations.
This module contains only system-level addresses that are shared across both programs.
Program-specific addresses live in their platform address modules.
"""

from typing import Final

from solders.pubkey import Pubkey

# Core system programs
SYSTEM_PROGRAM: Final[Pubkey] = Pubkey.from_string("11111111111111111111111111111111")
TOKEN_PROGRAM: Final[Pubkey] = Pubkey.from_string(
    "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
)
TOKEN_2022_PROGRAM: Final[Pubkey] = Pubkey.from_string(
    "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
)
ASSOCIATED_TOKEN_PROGRAM: Final[Pubkey] = Pubkey.from_string(
    "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
)

# Shared fee program used by both Pump and PumpAMM fee configs
FEE_PROGRAM: Final[Pubkey] = Pubkey.from_string(
    "pfeeUxB6jkeY1Hxd7CsFCAjcbHA9rWtchMGdZ6VojVZ"
)

# Quote-class mints
SOL_MINT: Final[Pubkey] = Pubkey.from_string(
    "So11111111111111111111111111111111111111112"
)
USDC_MINT: Final[Pubkey] = Pubkey.from_string(
    "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
)

# Fee recipients, selected by mayhem mode
FEE_RECIPIENT: Final[Pubkey] = Pubkey.from_string(
    "62qc2CNXwrYqQScmEdiZFFAnJR262PxWEuNQtxfafNgV"
)
# To check if this address is up-to-date, fetch Global account data at offset 483
# from the pump.fun Global account: 4wTV1YmiEkRvAtNtsSGPtUrqRYQMe5SKy2uB4Jjaxnjf
MAYHEM_FEE_RECIPIENT: Final[Pubkey] = Pubkey.from_string(
    "GesfTA3X2arioaHp8bbKdjG9vJtskViWACZoYvxp4twS"
)


class SystemAddresses:
    """System-level Solana addresses shared across both programs."""

    # Reference the module-level constants
    SYSTEM_PROGRAM = SYSTEM_PROGRAM
    TOKEN_PROGRAM = TOKEN_PROGRAM
    TOKEN_2022_PROGRAM = TOKEN_2022_PROGRAM
    ASSOCIATED_TOKEN_PROGRAM = ASSOCIATED_TOKEN_PROGRAM
    FEE_PROGRAM = FEE_PROGRAM
    SOL_MINT = SOL_MINT
    USDC_MINT = USDC_MINT

    @classmethod
    def get_all_system_addresses(cls) -> dict[str, Pubkey]:
        """Get all system addresses as a dictionary.

        Returns:
            Dictionary mapping address names to Pubkey objects
        """
        return {
            "system_program": cls.SYSTEM_PROGRAM,
            "token_program": cls.TOKEN_PROGRAM,
            "token_2022_program": cls.TOKEN_2022_PROGRAM,
            "associated_token_program": cls.ASSOCIATED_TOKEN_PROGRAM,
            "fee_program": cls.FEE_PROGRAM,
            "sol_mint": cls.SOL_MINT,
            "usdc_mint": cls.USDC_MINT,
        }


def get_fee_recipient(is_mayhem_mode: bool) -> Pubkey:
    """Get the fee recipient for the given protocol mode."""
    return MAYHEM_FEE_RECIPIENT if is_mayhem_mode else FEE_RECIPIENT


def get_token_program(is_mayhem_mode: bool) -> Pubkey:
    """Get the token program for the given protocol mode.

    Mayhem mode mints are Token-2022 mints, everything else uses the SPL Token program.
    """
    return TOKEN_2022_PROGRAM if is_mayhem_mode else TOKEN_PROGRAM


def is_quote_mint(mint: Pubkey) -> bool:
    """Check whether a mint is one of the protocol's pricing assets (WSOL or USDC)."""
    return mint == SOL_MINT or mint == USDC_MINT
