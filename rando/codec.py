"""Arbitrary-base timestamp encoding."""

from core.errors import DecodingError, UsageError
from rando.obfuscation import generate_offset, obfuscate
from rando.settings import require_timestamp


def encode_timestamp(settings, epoch_ms, random_segment=""):
    """Encode epoch milliseconds as `timestamp_alphabet` digits.

    The result is left-padded with the zero digit to `timestamp_length`.
    Instants past the nominal capacity yield a longer segment, never a
    truncated one. With `obfuscate_timestamp` the digits are rotated by the
    offset of `random_segment`.
    """
    require_timestamp(settings, "encode_timestamp")
    if epoch_ms < 0:
        raise UsageError("timestamps before the epoch cannot be encoded", operation="encode_timestamp")

    alphabet, base = settings.timestamp_alphabet, settings.timestamp_base
    digits = []
    remaining = epoch_ms
    while remaining > 0 or len(digits) < settings.timestamp_length:
        remaining, index = divmod(remaining, base)
        digits.append(alphabet[index])
    segment = "".join(reversed(digits))

    if settings.obfuscate_timestamp:
        segment = obfuscate(settings, segment, generate_offset(settings, random_segment))
    return segment


def decode_timestamp(settings, segment):
    """Fold plain (already deobfuscated) digits back into epoch milliseconds."""
    require_timestamp(settings, "decode_timestamp")
    alphabet, base = settings.timestamp_alphabet, settings.timestamp_base
    value = 0
    for position, char in enumerate(segment):
        index = alphabet.find(char)
        if index < 0:
            raise DecodingError(
                f"{char!r} is not in the timestamp alphabet",
                char=char,
                position=position,
            )
        value = value * base + index
    return value
