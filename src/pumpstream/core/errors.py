"""
Exception types raised by the decoding, derivation and assembly code.

Every error is local and recoverable: callers skip a malformed event or
reject a malformed request. Nothing here represents a network failure.
"""


class PumpStreamError(Exception):
    """Base class for all pumpstream errors."""


# Decoding


class DecodeError(PumpStreamError, ValueError):
    """Raised when an event payload cannot be decoded."""


class TruncatedPayload(DecodeError):
    """Payload is shorter than the 8-byte discriminator."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Payload too short to contain discriminator: {length} bytes")


class UnknownDiscriminator(DecodeError):
    """Payload starts with a tag that is not in the registry."""

    def __init__(self, discriminator: bytes):
        self.discriminator = bytes(discriminator)
        super().__init__(f"Unknown event discriminator: {self.discriminator.hex()}")


class MalformedPayload(DecodeError):
    """Payload body does not match the layout of its event kind."""

    def __init__(self, kind, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"Malformed {kind.value} payload: {reason}")


# Address derivation


class DerivationError(PumpStreamError, ValueError):
    """Raised when a program derived address cannot be computed."""


class InvalidSeeds(DerivationError):
    """Seeds exceed the ledger's count or length limits."""


class DerivationExhausted(DerivationError):
    """No bump in [0, 255] produced an off-curve address."""

    def __init__(self, seeds: list[bytes], owner_program):
        self.seeds = seeds
        self.owner_program = owner_program
        super().__init__(
            f"Unable to find a viable program address bump for {len(seeds)} seeds "
            f"under {owner_program}"
        )


# Instruction assembly


class InstructionError(PumpStreamError, ValueError):
    """Raised when an instruction request is invalid."""


class InvalidAccount(InstructionError):
    """A required address is missing, of the wrong type, or the all-zero key."""

    def __init__(self, account_name: str, value=None):
        self.account_name = account_name
        self.value = value
        super().__init__(f"Invalid account for '{account_name}': {value!r}")


class InvalidAmount(InstructionError):
    """An amount argument does not fit in an unsigned 64-bit integer."""

    def __init__(self, argument_name: str, value):
        self.argument_name = argument_name
        self.value = value
        super().__init__(f"Amount '{argument_name}' out of u64 range: {value!r}")
