"""
Program Derived Address (PDA) derivation.

PDAs are deterministic addresses derived from seeds and a program ID. They let
programs own accounts without a private key. A candidate is
sha256(seeds || bump || program_id || "ProgramDerivedAddress"); the first bump,
counting down from 255, whose digest is not a valid ed25519 point wins.
"""

import hashlib
import struct
from collections.abc import Sequence
from typing import Final, NamedTuple

from solders.pubkey import Pubkey

from pumpstream.core.errors import DerivationExhausted, InvalidSeeds
from pumpstream.core.pubkeys import ASSOCIATED_TOKEN_PROGRAM, FEE_PROGRAM

MAX_SEEDS: Final[int] = 16
MAX_SEED_LEN: Final[int] = 32
PDA_MARKER: Final[bytes] = b"ProgramDerivedAddress"


class DerivedAddress(NamedTuple):
    """A program derived address and the bump seed that produced it."""

    address: Pubkey
    bump: int


def _validate_seeds(seeds: Sequence[bytes]) -> list[bytes]:
    # The bump is appended as one more seed, so callers get MAX_SEEDS - 1
    if len(seeds) >= MAX_SEEDS:
        raise InvalidSeeds(f"Too many seeds: {len(seeds)} (max {MAX_SEEDS - 1})")

    normalized = []
    for index, seed in enumerate(seeds):
        seed_bytes = bytes(seed)
        if len(seed_bytes) > MAX_SEED_LEN:
            raise InvalidSeeds(
                f"Seed {index} is {len(seed_bytes)} bytes (max {MAX_SEED_LEN})"
            )
        normalized.append(seed_bytes)
    return normalized


def derive(seeds: Sequence[bytes], owner_program: Pubkey) -> DerivedAddress:
    """Derive the canonical program address for seeds under a program.

    Args:
        seeds: Ordered seed byte strings (Pubkeys must be passed as bytes(pubkey))
        owner_program: Program that owns the derived address

    Returns:
        DerivedAddress with the address and its bump

    Raises:
        InvalidSeeds: If there are too many seeds or one is longer than 32 bytes
        DerivationExhausted: If no bump in [0, 255] yields an off-curve address
    """
    normalized = _validate_seeds(seeds)
    prefix = b"".join(normalized)
    suffix = bytes(owner_program) + PDA_MARKER

    for bump in range(255, -1, -1):
        digest = hashlib.sha256(prefix + bytes([bump]) + suffix).digest()
        candidate = Pubkey.from_bytes(digest)
        if not candidate.is_on_curve():
            return DerivedAddress(candidate, bump)

    raise DerivationExhausted(normalized, owner_program)


# Pump (bonding curve) program


def derive_global(program_id: Pubkey) -> DerivedAddress:
    """Derive the Pump global config PDA."""
    return derive([b"global"], program_id)


def derive_bonding_curve(mint: Pubkey, program_id: Pubkey) -> DerivedAddress:
    """Derive the bonding curve PDA for a mint."""
    return derive([b"bonding-curve", bytes(mint)], program_id)


def derive_creator_vault(creator: Pubkey, program_id: Pubkey) -> DerivedAddress:
    """Derive the Pump creator vault PDA for a creator."""
    return derive([b"creator-vault", bytes(creator)], program_id)


# PumpAMM program


def derive_global_config(program_id: Pubkey) -> DerivedAddress:
    """Derive the PumpAMM global config PDA."""
    return derive([b"global_config"], program_id)


def derive_pool(
    index: int,
    creator: Pubkey,
    base_mint: Pubkey,
    quote_mint: Pubkey,
    program_id: Pubkey,
) -> DerivedAddress:
    """Derive a PumpAMM pool PDA.

    Args:
        index: Pool index (u16, little-endian in the seeds)
        creator: Pool creator
        base_mint: Base token mint
        quote_mint: Quote token mint (usually WSOL)
        program_id: PumpAMM program ID
    """
    return derive(
        [
            b"pool",
            struct.pack("<H", index),
            bytes(creator),
            bytes(base_mint),
            bytes(quote_mint),
        ],
        program_id,
    )


def derive_coin_creator_vault_authority(
    coin_creator: Pubkey, program_id: Pubkey
) -> DerivedAddress:
    """Derive the PumpAMM coin creator vault authority PDA."""
    return derive([b"creator_vault", bytes(coin_creator)], program_id)


# Shared by both programs


def derive_event_authority(program_id: Pubkey) -> DerivedAddress:
    """Derive the Anchor event authority PDA."""
    return derive([b"__event_authority"], program_id)


def derive_global_volume_accumulator(program_id: Pubkey) -> DerivedAddress:
    """Derive the global volume accumulator PDA."""
    return derive([b"global_volume_accumulator"], program_id)


def derive_user_volume_accumulator(user: Pubkey, program_id: Pubkey) -> DerivedAddress:
    """Derive a user's volume accumulator PDA."""
    return derive([b"user_volume_accumulator", bytes(user)], program_id)


def derive_fee_config(program_id: Pubkey) -> DerivedAddress:
    """Derive the fee config PDA of a program, owned by the fee program."""
    return derive([b"fee_config", bytes(program_id)], FEE_PROGRAM)


def derive_associated_token_account(
    owner: Pubkey, mint: Pubkey, token_program: Pubkey
) -> DerivedAddress:
    """Derive the associated token account of an owner for a mint.

    Args:
        owner: Wallet or PDA owning the token account
        mint: Token mint address
        token_program: TOKEN or TOKEN_2022, must match the mint's owner program
    """
    return derive(
        [bytes(owner), bytes(token_program), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM,
    )
