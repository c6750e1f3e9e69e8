"""Alphabets and the default timestamp length table."""

from datetime import datetime, timezone

from utils.timestamp import to_millis

BASE_10 = "0123456789"
BASE_16 = "0123456789abcdef"
BASE_36 = "0123456789abcdefghijklmnopqrstuvwxyz"
# Alphanumerics without the look-alikes 0, O, I and l
BASE_58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE_62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE_64 = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"

# Default timestamp segments must reach at least this instant
TIMESTAMP_HORIZON = datetime(2200, 1, 1, tzinfo=timezone.utc)
TIMESTAMP_HORIZON_MS = to_millis(TIMESTAMP_HORIZON)


def default_timestamp_length(base):
    """Fewest base-`base` digits that can hold every ms instant up to the horizon."""
    if base < 2:
        raise ValueError("base must be at least 2")
    length, capacity = 1, base
    while capacity <= TIMESTAMP_HORIZON_MS:
        length += 1
        capacity *= base
    return length


TIMESTAMP_DEFAULTS = {base: default_timestamp_length(base) for base in range(2, 257)}


def timestamp_length_for(base):
    """Table lookup, computed for bases beyond the table."""
    length = TIMESTAMP_DEFAULTS.get(base)
    if length is None:
        length = default_timestamp_length(base)
    return length


def sort_alphabet(alphabet):
    return "".join(sorted(alphabet))
