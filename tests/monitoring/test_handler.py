"""
Event filter presets and the logging handlers.
"""

from __future__ import annotations

import logging

import pytest

from pumpstream.core.discriminators import PUMP_AMM_EVENT_KINDS, PUMP_EVENT_KINDS, EventKind
from pumpstream.monitoring.handler import (
    EventContext,
    EventFilter,
    EventHandler,
    FilteredLoggingEventHandler,
    LoggingEventHandler,
)

HANDLER_LOGGER = "pumpstream.monitoring.handler"


def _ctx() -> EventContext:
    return EventContext(slot=312_000_000, tx_index=7, signature="5sig", timestamp=0.0)


def test_default_filter_enables_everything() -> None:
    assert EventFilter() == EventFilter.all()
    assert EventFilter.all().enabled_kinds() == frozenset(EventKind)


def test_none_filter_disables_everything() -> None:
    assert EventFilter.none().enabled_kinds() == frozenset()


def test_program_presets() -> None:
    assert EventFilter.pump_only().enabled_kinds() == PUMP_EVENT_KINDS
    assert EventFilter.pumpamm_only().enabled_kinds() == PUMP_AMM_EVENT_KINDS


def test_with_kind_copies() -> None:
    base = EventFilter.none()
    trade_only = base.with_kind(EventKind.TRADE, True)

    assert trade_only.is_enabled(EventKind.TRADE)
    assert not base.is_enabled(EventKind.TRADE)
    assert trade_only.enabled_kinds() == {EventKind.TRADE}
    assert not EventFilter.all().with_kind(EventKind.SELL, False).sell


def test_filter_is_immutable() -> None:
    with pytest.raises(AttributeError):
        EventFilter().trade = False  # type: ignore[misc]


def test_base_handler_hooks_are_no_ops(sample_events) -> None:
    handler = EventHandler()
    ctx = _ctx()
    handler.on_trade_event(sample_events[EventKind.TRADE], ctx)
    handler.on_create_pool_event(sample_events[EventKind.CREATE_POOL], ctx)


def test_logging_handler_logs_every_event(sample_events, caplog) -> None:
    handler = LoggingEventHandler()
    with caplog.at_level(logging.INFO, logger=HANDLER_LOGGER):
        handler.on_complete_event(sample_events[EventKind.COMPLETE], _ctx())
        handler.on_buy_event(sample_events[EventKind.BUY], _ctx())

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 2
    assert messages[0].startswith("CompleteEvent {elapsed: ")
    assert "slot: 312000000" in messages[0]
    assert "signature: 5sig" in messages[0]
    assert messages[1].startswith("BuyEvent ")


def test_filtered_logging_handler_skips_disabled_kinds(sample_events, caplog) -> None:
    handler = FilteredLoggingEventHandler(EventFilter.pumpamm_only())
    with caplog.at_level(logging.INFO, logger=HANDLER_LOGGER):
        handler.on_trade_event(sample_events[EventKind.TRADE], _ctx())
        handler.on_sell_event(sample_events[EventKind.SELL], _ctx())

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 1
    assert messages[0].startswith("SellEvent ")
