"""
Tri-state optional boolean in the exact wire shape the programs expect.

The programs take `Option<bool>`: a tag byte, followed by the payload byte only
when the tag is 1. This is not a generic nullable encoding.
"""

from enum import Enum


class OptionBool(Enum):
    """Optional boolean argument (used for track_volume)."""

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_optional(cls, value: bool | None) -> "OptionBool":
        """Build an OptionBool from a Python optional bool."""
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE

    @property
    def is_set(self) -> bool:
        return self is not OptionBool.UNSET

    def to_bytes(self) -> bytes:
        """Serialize to the program's Option<bool> layout."""
        if self is OptionBool.UNSET:
            return bytes([0])
        if self is OptionBool.TRUE:
            return bytes([1, 1])
        return bytes([1, 0])


def encode_option_bool(value: OptionBool) -> bytes:
    """Encode an OptionBool: UNSET -> 00, TRUE -> 01 01, FALSE -> 01 00."""
    return value.to_bytes()
