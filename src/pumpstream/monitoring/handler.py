"""
Event handler surface: per-event context, kind filter and handler base class.
"""

from dataclasses import dataclass, replace

from pumpstream.core.discriminators import EventKind
from pumpstream.events.models import (
    BuyEvent,
    CompleteEvent,
    CreateEvent,
    CreatePoolEvent,
    CreateV2Event,
    Event,
    SellEvent,
    TradeEvent,
)
from pumpstream.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EventContext:
    """Where and when an event was observed.

    timestamp is a time.perf_counter() reading taken when processing of the
    surrounding transaction began. elapsed is filled in by the dispatcher
    right before the handler runs.
    """

    slot: int
    tx_index: int
    signature: str
    timestamp: float
    elapsed: float = 0.0


@dataclass(frozen=True)
class EventFilter:
    """Which event kinds should reach the handler. Everything is on by default."""

    create: bool = True
    create_v2: bool = True
    complete: bool = True
    trade: bool = True
    buy: bool = True
    sell: bool = True
    create_pool: bool = True

    @classmethod
    def all(cls) -> "EventFilter":
        return cls()

    @classmethod
    def none(cls) -> "EventFilter":
        return cls(**{kind.value: False for kind in EventKind})

    @classmethod
    def pump_only(cls) -> "EventFilter":
        """Bonding curve events only."""
        return cls(**{kind.value: kind.is_pump for kind in EventKind})

    @classmethod
    def pumpamm_only(cls) -> "EventFilter":
        """AMM pool events only."""
        return cls(**{kind.value: kind.is_pump_amm for kind in EventKind})

    def is_enabled(self, kind: EventKind) -> bool:
        return getattr(self, kind.value)

    def with_kind(self, kind: EventKind, enabled: bool = True) -> "EventFilter":
        """Return a copy with one kind switched on or off."""
        return replace(self, **{kind.value: enabled})

    def enabled_kinds(self) -> frozenset[EventKind]:
        return frozenset(kind for kind in EventKind if self.is_enabled(kind))


class EventHandler:
    """Base class for event consumers.

    Every hook is a no-op, override only the ones you need. Handlers must be
    safe to call from whichever thread or task delivers events.
    """

    def on_create_event(self, event: CreateEvent, ctx: EventContext) -> None:
        pass

    def on_create_v2_event(self, event: CreateV2Event, ctx: EventContext) -> None:
        pass

    def on_complete_event(self, event: CompleteEvent, ctx: EventContext) -> None:
        pass

    def on_trade_event(self, event: TradeEvent, ctx: EventContext) -> None:
        pass

    def on_buy_event(self, event: BuyEvent, ctx: EventContext) -> None:
        pass

    def on_sell_event(self, event: SellEvent, ctx: EventContext) -> None:
        pass

    def on_create_pool_event(self, event: CreatePoolEvent, ctx: EventContext) -> None:
        pass


def format_event_log(event: Event, ctx: EventContext) -> str:
    """Render an event and its context as a single log line."""
    return (
        f"{type(event).__name__} {{elapsed: {ctx.elapsed:.6f}s, slot: {ctx.slot}, "
        f"tx_index: {ctx.tx_index}, signature: {ctx.signature}, event: {event}}}"
    )


class LoggingEventHandler(EventHandler):
    """Logs every event it receives."""

    def _log(self, event: Event, ctx: EventContext) -> None:
        logger.info(format_event_log(event, ctx))

    def on_create_event(self, event: CreateEvent, ctx: EventContext) -> None:
        self._log(event, ctx)

    def on_create_v2_event(self, event: CreateV2Event, ctx: EventContext) -> None:
        self._log(event, ctx)

    def on_complete_event(self, event: CompleteEvent, ctx: EventContext) -> None:
        self._log(event, ctx)

    def on_trade_event(self, event: TradeEvent, ctx: EventContext) -> None:
        self._log(event, ctx)

    def on_buy_event(self, event: BuyEvent, ctx: EventContext) -> None:
        self._log(event, ctx)

    def on_sell_event(self, event: SellEvent, ctx: EventContext) -> None:
        self._log(event, ctx)

    def on_create_pool_event(self, event: CreatePoolEvent, ctx: EventContext) -> None:
        self._log(event, ctx)


class FilteredLoggingEventHandler(LoggingEventHandler):
    """Logs only the event kinds enabled in its filter."""

    def __init__(self, event_filter: EventFilter):
        self.event_filter = event_filter

    def _log(self, event: Event, ctx: EventContext) -> None:
        if self.event_filter.is_enabled(event.kind):
            super()._log(event, ctx)
