"""
Turns a transaction's program log lines into handler calls.

The transport (gRPC or websocket subscription) hands over the log messages of
each transaction; this processor finds the event payloads, decodes them and
dispatches at most one event of each kind per transaction.
"""

import time
from collections.abc import Iterable

import base58

from pumpstream.core.discriminators import DISCRIMINATOR_SIZE, event_kind_for
from pumpstream.core.errors import DecodeError
from pumpstream.events.decoder import decode, iter_program_data
from pumpstream.monitoring.dispatcher import dispatch
from pumpstream.monitoring.handler import EventContext, EventFilter, EventHandler
from pumpstream.utils.logger import get_logger

logger = get_logger(__name__)


def format_signature(signature: str | bytes) -> str:
    """Render a transaction signature as base58, accepting raw 64-byte signatures."""
    if isinstance(signature, str):
        return signature
    return base58.b58encode(bytes(signature)).decode("utf-8")


class LogEventProcessor:
    """Decodes and dispatches events found in transaction logs."""

    def __init__(self, handler: EventHandler, event_filter: EventFilter | None = None):
        """Initialize the processor.

        Args:
            handler: Consumer receiving decoded events
            event_filter: Kind filter, defaults to all kinds
        """
        self.handler = handler
        self.event_filter = event_filter or EventFilter.all()
        self._wanted = self.event_filter.enabled_kinds()

    def process_logs(
        self,
        logs: Iterable[str],
        slot: int,
        tx_index: int,
        signature: str | bytes,
        start: float | None = None,
    ) -> int:
        """Process the log messages of one transaction.

        Args:
            logs: Log lines in emission order
            slot: Slot the transaction landed in
            tx_index: Index of the transaction within the slot
            signature: Transaction signature, base58 string or raw bytes
            start: perf_counter() reading when the transaction arrived

        Returns:
            Number of handler calls made
        """
        ctx = EventContext(
            slot=slot,
            tx_index=tx_index,
            signature=format_signature(signature),
            timestamp=time.perf_counter() if start is None else start,
        )
        if not self._wanted:
            return 0

        seen = set()
        delivered = 0
        for payload in iter_program_data(logs):
            kind = event_kind_for(payload[:DISCRIMINATOR_SIZE])
            # Skip unknown tags and disabled kinds before paying for a decode
            if kind is None or kind not in self._wanted or kind in seen:
                continue

            try:
                event = decode(payload)
            except DecodeError as e:
                logger.debug(
                    f"Skipping undecodable {kind.value} payload in {ctx.signature}: {e}"
                )
                continue

            seen.add(kind)
            if dispatch(event, ctx, self.event_filter, self.handler):
                delivered += 1

            if seen == self._wanted:
                break

        return delivered
