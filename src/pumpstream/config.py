"""
Subscription configuration.

StreamConfig describes how a transport should subscribe to the two programs.
It is plain data; nothing in this package opens a connection with it.
"""

import math
import os
from dataclasses import dataclass, field, replace

from dotenv import load_dotenv
from solders.pubkey import Pubkey

from pumpstream.core.discriminators import EventKind
from pumpstream.monitoring.handler import EventFilter
from pumpstream.platforms.pumpfun.address_provider import PumpFunAddresses
from pumpstream.platforms.pumpswap.address_provider import PumpSwapAddresses
from pumpstream.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ENDPOINT = "http://127.0.0.1:10000"
COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")


@dataclass(frozen=True)
class StreamConfig:
    """Connection and subscription settings for an event stream."""

    endpoint: str = DEFAULT_ENDPOINT
    connect_timeout: float = 10.0  # seconds
    timeout: float = 60.0  # seconds
    keep_alive_while_idle: bool = True
    commitment: str = "processed"
    program_ids: tuple[Pubkey, ...] = field(
        default=(PumpFunAddresses.PROGRAM, PumpSwapAddresses.PROGRAM)
    )
    event_filter: EventFilter = field(default_factory=EventFilter.all)

    def __post_init__(self):
        if self.commitment not in COMMITMENT_LEVELS:
            raise ValueError(
                f"Invalid commitment '{self.commitment}', expected one of {COMMITMENT_LEVELS}"
            )
        for timeout in (self.connect_timeout, self.timeout):
            if not math.isfinite(timeout) or timeout <= 0:
                raise ValueError(f"Timeouts must be positive and finite, got {timeout}")

    def with_endpoint(self, endpoint: str) -> "StreamConfig":
        return replace(self, endpoint=endpoint)

    def with_connect_timeout(self, seconds: float) -> "StreamConfig":
        return replace(self, connect_timeout=seconds)

    def with_timeout(self, seconds: float) -> "StreamConfig":
        return replace(self, timeout=seconds)

    def with_keep_alive(self, enabled: bool) -> "StreamConfig":
        return replace(self, keep_alive_while_idle=enabled)

    def with_commitment(self, commitment: str) -> "StreamConfig":
        return replace(self, commitment=commitment.lower())

    def with_program_ids(self, program_ids) -> "StreamConfig":
        return replace(self, program_ids=tuple(program_ids))

    def with_event_filter(self, event_filter: EventFilter) -> "StreamConfig":
        return replace(self, event_filter=event_filter)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


def _parse_float(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"Invalid number for {name}: {raw!r}") from e
    if not math.isfinite(value):
        raise ValueError(f"Invalid number for {name}: {raw!r}")
    return value


def parse_event_filter(raw: str) -> EventFilter:
    """Build a filter from a comma-separated list of kind names.

    "all" and "none" are accepted as presets, as are "pump" and "pumpamm".
    """
    value = raw.strip().lower()
    presets = {
        "all": EventFilter.all,
        "none": EventFilter.none,
        "pump": EventFilter.pump_only,
        "pumpamm": EventFilter.pumpamm_only,
    }
    if value in presets:
        return presets[value]()

    event_filter = EventFilter.none()
    for name in filter(None, (part.strip() for part in value.split(","))):
        try:
            kind = EventKind(name)
        except ValueError as e:
            raise ValueError(f"Unknown event kind: {name!r}") from e
        event_filter = event_filter.with_kind(kind, True)
    return event_filter


def load_config_from_env(dotenv_path: str | None = None) -> StreamConfig:
    """Load a StreamConfig from the environment (and a .env file if present).

    Variables: GEYSER_ENDPOINT, GEYSER_CONNECT_TIMEOUT, GEYSER_TIMEOUT,
    GEYSER_KEEP_ALIVE, GEYSER_COMMITMENT, PUMPSTREAM_EVENTS. Unset variables
    keep their defaults.

    Raises:
        ValueError: If a variable holds an invalid value
    """
    load_dotenv(dotenv_path)

    config = StreamConfig()

    endpoint = os.environ.get("GEYSER_ENDPOINT")
    if endpoint:
        config = config.with_endpoint(endpoint)

    connect_timeout = os.environ.get("GEYSER_CONNECT_TIMEOUT")
    if connect_timeout:
        config = config.with_connect_timeout(
            _parse_float("GEYSER_CONNECT_TIMEOUT", connect_timeout)
        )

    timeout = os.environ.get("GEYSER_TIMEOUT")
    if timeout:
        config = config.with_timeout(_parse_float("GEYSER_TIMEOUT", timeout))

    keep_alive = os.environ.get("GEYSER_KEEP_ALIVE")
    if keep_alive:
        config = config.with_keep_alive(_parse_bool("GEYSER_KEEP_ALIVE", keep_alive))

    commitment = os.environ.get("GEYSER_COMMITMENT")
    if commitment:
        config = config.with_commitment(commitment)

    events = os.environ.get("PUMPSTREAM_EVENTS")
    if events:
        config = config.with_event_filter(parse_event_filter(events))

    logger.info(
        f"Stream config: endpoint={config.endpoint}, commitment={config.commitment}, "
        f"events={sorted(kind.value for kind in config.event_filter.enabled_kinds())}"
    )
    return config
