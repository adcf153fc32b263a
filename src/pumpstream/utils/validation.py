"""
Argument checks shared by the instruction builders.
"""

from solders.pubkey import Pubkey

from pumpstream.core.errors import InvalidAccount, InvalidAmount

U64_MAX = 2**64 - 1

_DEFAULT_PUBKEY = Pubkey.default()


def require_account(name: str, value) -> Pubkey:
    """Return value if it is a usable address, raise InvalidAccount otherwise."""
    if not isinstance(value, Pubkey) or value == _DEFAULT_PUBKEY:
        raise InvalidAccount(name, value)
    return value


def require_u64(name: str, value) -> int:
    """Return value if it is an int in the u64 range, raise InvalidAmount otherwise."""
    # bool is an int subclass, but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(name, value)
    if not 0 <= value <= U64_MAX:
        raise InvalidAmount(name, value)
    return value
