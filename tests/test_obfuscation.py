"""Unit tests for timestamp obfuscation."""

import pytest
from core.errors import DecodingError, UsageError
from rando.alphabets import BASE_10, BASE_58
from rando.obfuscation import deobfuscate, generate_offset, obfuscate
from rando.settings import Settings


@pytest.fixture
def decimal():
    return Settings(include_timestamp=True, timestamp_alphabet=BASE_10)


class TestOffset:
    """Tests for generate_offset."""

    def test_sum_of_primary_indices(self, decimal):
        """Offsets sum primary-alphabet indices modulo the timestamp base."""
        assert generate_offset(decimal, "2222") == 4
        # "z" is index 57 of BASE_58 but absent from the timestamp alphabet
        assert generate_offset(decimal, "zzz") == 171 % 10

    def test_offset_in_range(self):
        """Offsets always land in [0, timestamp_base)."""
        settings = Settings(include_timestamp=True)
        for segment in ("", "1", "zzzzzzzz", BASE_58):
            assert 0 <= generate_offset(settings, segment) < 58

    def test_characters_outside_primary_alphabet(self):
        """Characters missing from the primary alphabet count as -1."""
        settings = Settings(include_timestamp=True, random_alphabet="!@", timestamp_alphabet=BASE_10)
        assert generate_offset(settings, "!!") == -2 % 10

    def test_requires_timestamp(self):
        """Offsets need include_timestamp."""
        with pytest.raises(UsageError):
            generate_offset(Settings(), "abc")


class TestObfuscate:
    """Tests for obfuscate and deobfuscate."""

    def test_rotates_digits(self, decimal):
        """Each digit shifts by the offset within the timestamp alphabet."""
        assert obfuscate(decimal, "0000000012345", 4) == "4444444456789"
        assert obfuscate(decimal, "789", 4) == "123"

    def test_deobfuscate_reverses(self, decimal):
        """deobfuscate undoes obfuscate."""
        assert deobfuscate(decimal, "4444444456789", 4) == "0000000012345"

    def test_zero_offset_is_identity(self, decimal):
        """A zero offset leaves the digits alone."""
        assert obfuscate(decimal, "0123456789", 0) == "0123456789"
        assert deobfuscate(decimal, "0123456789", 0) == "0123456789"

    def test_bijection_for_every_offset(self):
        """deobfuscate(obfuscate(x, k), k) == x for all k."""
        settings = Settings(include_timestamp=True, timestamp_alphabet="abcdefg")
        digits = "gfedcbaabcdefg"
        for offset in range(settings.timestamp_base):
            assert deobfuscate(settings, obfuscate(settings, digits, offset), offset) == digits

    def test_roundtrip_with_random_segment_offsets(self):
        """Offsets derived from any random segment round-trip."""
        settings = Settings(include_timestamp=True)
        digits = "1A2b3C4d"
        for random_segment in ("", "z", "Zz9", BASE_58):
            offset = generate_offset(settings, random_segment)
            assert deobfuscate(settings, obfuscate(settings, digits, offset), offset) == digits

    def test_foreign_character(self, decimal):
        """Characters outside the timestamp alphabet raise DecodingError."""
        with pytest.raises(DecodingError) as exc_info:
            deobfuscate(decimal, "12a4", 3)
        assert exc_info.value.char == "a"
        assert exc_info.value.position == 2

    def test_requires_timestamp(self):
        """Both directions need include_timestamp."""
        with pytest.raises(UsageError):
            obfuscate(Settings(), "11", 1)
        with pytest.raises(UsageError):
            deobfuscate(Settings(), "11", 1)
