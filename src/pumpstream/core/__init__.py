"""
Shared primitives: addresses, discriminators, PDA derivation, errors and codecs.
"""

from .discriminators import EventKind, anchor_discriminator
from .errors import (
    DecodeError,
    DerivationError,
    DerivationExhausted,
    InstructionError,
    InvalidAccount,
    InvalidAmount,
    InvalidSeeds,
    MalformedPayload,
    PumpStreamError,
    TruncatedPayload,
    UnknownDiscriminator,
)
from .option_bool import OptionBool, encode_option_bool
from .pda import DerivedAddress, derive

__all__ = [
    "DecodeError",
    "DerivationError",
    "DerivationExhausted",
    "DerivedAddress",
    "EventKind",
    "InstructionError",
    "InvalidAccount",
    "InvalidAmount",
    "InvalidSeeds",
    "MalformedPayload",
    "OptionBool",
    "PumpStreamError",
    "TruncatedPayload",
    "UnknownDiscriminator",
    "anchor_discriminator",
    "derive",
    "encode_option_bool",
]
