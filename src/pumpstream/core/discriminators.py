"""
Discriminator registry for Pump and PumpAMM events and instructions.

Every event and instruction payload starts with an 8-byte Anchor discriminator,
the first 8 bytes of sha256("<namespace>:<Name>"). The values are hardcoded so
the hot decoding path never hashes anything.
"""

import hashlib
from enum import Enum
from typing import Final

DISCRIMINATOR_SIZE: Final[int] = 8


class EventKind(Enum):
    """The seven event kinds emitted by the two programs."""

    # Pump (bonding curve) program
    CREATE = "create"
    CREATE_V2 = "create_v2"
    COMPLETE = "complete"
    TRADE = "trade"
    # PumpAMM program
    BUY = "buy"
    SELL = "sell"
    CREATE_POOL = "create_pool"

    @property
    def is_pump(self) -> bool:
        return self in PUMP_EVENT_KINDS

    @property
    def is_pump_amm(self) -> bool:
        return self in PUMP_AMM_EVENT_KINDS


PUMP_EVENT_KINDS: Final[frozenset[EventKind]] = frozenset(
    {EventKind.CREATE, EventKind.CREATE_V2, EventKind.COMPLETE, EventKind.TRADE}
)
PUMP_AMM_EVENT_KINDS: Final[frozenset[EventKind]] = frozenset(
    {EventKind.BUY, EventKind.SELL, EventKind.CREATE_POOL}
)

# Event discriminators
CREATE_DISCRIMINATOR: Final[bytes] = bytes([27, 114, 169, 77, 222, 235, 99, 118])
CREATE_V2_DISCRIMINATOR: Final[bytes] = bytes([214, 144, 76, 236, 95, 139, 49, 180])
COMPLETE_DISCRIMINATOR: Final[bytes] = bytes([95, 114, 97, 156, 212, 46, 152, 8])
TRADE_DISCRIMINATOR: Final[bytes] = bytes([189, 219, 127, 211, 78, 230, 97, 238])
BUY_EVENT_DISCRIMINATOR: Final[bytes] = bytes([103, 244, 82, 31, 44, 245, 119, 119])
SELL_EVENT_DISCRIMINATOR: Final[bytes] = bytes([62, 47, 55, 10, 165, 3, 220, 42])
CREATE_POOL_DISCRIMINATOR: Final[bytes] = bytes([177, 49, 12, 210, 160, 118, 167, 116])

# Instruction discriminators, shared by Pump and PumpAMM (global:buy / global:sell)
BUY_INSTRUCTION_DISCRIMINATOR: Final[bytes] = bytes([102, 6, 61, 18, 1, 218, 235, 234])
SELL_INSTRUCTION_DISCRIMINATOR: Final[bytes] = bytes(
    [51, 230, 133, 164, 1, 127, 131, 173]
)

EVENT_DISCRIMINATORS: Final[dict[EventKind, bytes]] = {
    EventKind.CREATE: CREATE_DISCRIMINATOR,
    EventKind.CREATE_V2: CREATE_V2_DISCRIMINATOR,
    EventKind.COMPLETE: COMPLETE_DISCRIMINATOR,
    EventKind.TRADE: TRADE_DISCRIMINATOR,
    EventKind.BUY: BUY_EVENT_DISCRIMINATOR,
    EventKind.SELL: SELL_EVENT_DISCRIMINATOR,
    EventKind.CREATE_POOL: CREATE_POOL_DISCRIMINATOR,
}

# Reverse index used by the decoder
_KIND_BY_DISCRIMINATOR: Final[dict[bytes, EventKind]] = {
    tag: kind for kind, tag in EVENT_DISCRIMINATORS.items()
}


def anchor_discriminator(namespace: str, name: str) -> bytes:
    """Compute an Anchor discriminator.

    Args:
        namespace: "event", "global" (instructions) or "account"
        name: Event, instruction or account name as it appears in the IDL

    Returns:
        First 8 bytes of sha256("<namespace>:<name>")
    """
    return hashlib.sha256(f"{namespace}:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


def discriminator_for(kind: EventKind) -> bytes:
    """Get the discriminator registered for an event kind."""
    return EVENT_DISCRIMINATORS[kind]


def event_kind_for(discriminator: bytes) -> EventKind | None:
    """Look up the event kind for an exact 8-byte tag, None if unregistered."""
    return _KIND_BY_DISCRIMINATOR.get(bytes(discriminator))
