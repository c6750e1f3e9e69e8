"""Offset-based timestamp obfuscation.

The random segment doubles as the key: its characters' positions in the
primary alphabet are summed into an offset that rotates every timestamp
digit within the timestamp alphabet. The offset is deliberately computed
against `alphabet` rather than `timestamp_alphabet`; identifiers produced
elsewhere with the same options depend on it.
"""

from core.errors import DecodingError
from rando.settings import require_timestamp


def generate_offset(settings, random_segment):
    require_timestamp(settings, "generate_offset")
    # str.find yields -1 for characters outside the primary alphabet
    total = sum(settings.alphabet.find(char) for char in random_segment)
    return total % settings.timestamp_base


def _shift(settings, segment, shift):
    alphabet, base = settings.timestamp_alphabet, settings.timestamp_base
    shifted = []
    for position, char in enumerate(segment):
        index = alphabet.find(char)
        if index < 0:
            raise DecodingError(
                f"{char!r} is not in the timestamp alphabet",
                char=char,
                position=position,
            )
        shifted.append(alphabet[(index + shift) % base])
    return "".join(shifted)


def obfuscate(settings, segment, offset):
    require_timestamp(settings, "obfuscate")
    return _shift(settings, segment, offset)


def deobfuscate(settings, segment, offset):
    require_timestamp(settings, "deobfuscate")
    return _shift(settings, segment, settings.timestamp_base - offset)
