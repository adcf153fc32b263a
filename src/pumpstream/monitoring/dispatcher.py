"""
Routes a decoded event to the matching handler hook.
"""

import time
from dataclasses import replace

from pumpstream.core.discriminators import EventKind
from pumpstream.events.models import Event
from pumpstream.monitoring.handler import EventContext, EventFilter, EventHandler

_HOOKS: dict[EventKind, str] = {
    EventKind.CREATE: "on_create_event",
    EventKind.CREATE_V2: "on_create_v2_event",
    EventKind.COMPLETE: "on_complete_event",
    EventKind.TRADE: "on_trade_event",
    EventKind.BUY: "on_buy_event",
    EventKind.SELL: "on_sell_event",
    EventKind.CREATE_POOL: "on_create_pool_event",
}


def dispatch(
    event: Event,
    ctx: EventContext,
    event_filter: EventFilter,
    handler: EventHandler,
) -> bool:
    """Deliver an event to exactly one handler hook unless the filter drops it.

    Args:
        event: Decoded event
        ctx: Context captured by the caller, elapsed is computed here
        event_filter: Kind filter
        handler: Consumer

    Returns:
        True if the handler was called, False if the kind is disabled
    """
    if not event_filter.is_enabled(event.kind):
        return False

    hook = getattr(handler, _HOOKS[event.kind])
    timed_ctx = replace(ctx, elapsed=time.perf_counter() - ctx.timestamp)
    hook(event, timed_ctx)
    return True
