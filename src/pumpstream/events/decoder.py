"""
Discriminator-driven event decoder.

decode() turns one raw event payload into a typed event value. The payload is
an 8-byte discriminator followed by the Borsh-serialized event struct. Bytes
past the end of the known layout are ignored so payloads from newer program
versions that append fields keep decoding.
"""

import base64
import binascii
from collections.abc import Iterable, Iterator
from dataclasses import fields

from construct import ConstructError

from pumpstream.core.discriminators import DISCRIMINATOR_SIZE, event_kind_for
from pumpstream.core.errors import MalformedPayload, TruncatedPayload, UnknownDiscriminator
from pumpstream.events.layouts import EVENT_LAYOUTS
from pumpstream.events.models import EVENT_TYPES, Event

PROGRAM_DATA_PREFIX = "Program data: "


def decode(buffer: bytes) -> Event:
    """Decode a raw event payload.

    Args:
        buffer: Discriminator followed by the event body

    Returns:
        The typed event matching the discriminator

    Raises:
        TruncatedPayload: If the buffer is shorter than 8 bytes
        UnknownDiscriminator: If the tag is not one of the seven event kinds
        MalformedPayload: If the body does not fit the layout of its kind
    """
    if len(buffer) < DISCRIMINATOR_SIZE:
        raise TruncatedPayload(len(buffer))

    tag = bytes(buffer[:DISCRIMINATOR_SIZE])
    kind = event_kind_for(tag)
    if kind is None:
        raise UnknownDiscriminator(tag)

    try:
        parsed = EVENT_LAYOUTS[kind].parse(bytes(buffer[DISCRIMINATOR_SIZE:]))
    except (ConstructError, UnicodeDecodeError) as e:
        raise MalformedPayload(kind, str(e)) from e

    event_type = EVENT_TYPES[kind]
    return event_type(**{f.name: parsed[f.name] for f in fields(event_type)})


def encode_event(event: Event) -> bytes:
    """Serialize an event to its wire form (discriminator + body).

    Raises:
        MalformedPayload: If a field does not fit its wire type
    """
    values = {f.name: getattr(event, f.name) for f in fields(event)}
    try:
        body = EVENT_LAYOUTS[event.kind].build(values)
    except (ConstructError, UnicodeEncodeError) as e:
        raise MalformedPayload(event.kind, str(e)) from e
    return event.discriminator + body


def iter_program_data(logs: Iterable[str]) -> Iterator[bytes]:
    """Yield event payloads found in a transaction's log lines.

    Lines are visited last to first. Lines that are not program data, are not
    valid base64 or are too short to hold a discriminator are skipped.
    """
    for log in reversed(list(logs)):
        if not log.startswith(PROGRAM_DATA_PREFIX):
            continue
        try:
            encoded = log[len(PROGRAM_DATA_PREFIX) :].strip()
            payload = base64.b64decode(encoded, validate=True)
        except binascii.Error:
            continue
        if len(payload) < DISCRIMINATOR_SIZE:
            continue
        yield payload
