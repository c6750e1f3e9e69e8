"""Unit tests for the error taxonomy."""

import pytest
from core.errors import (
    ClassRequirementUnsatisfiable,
    ConfigurationError,
    DecodingError,
    RandoError,
    UsageError,
    tracking_id,
)
from rando.alphabets import BASE_58


class TestRandoError:
    """Tests for the base error."""

    def test_tracking_fields(self):
        """Errors carry an id, a timestamp and context."""
        error = RandoError("boom", context={"k": "v"})
        assert len(error.error_id) == 24
        assert error.timestamp.endswith("Z")
        assert error.context == {"k": "v"}
        assert str(error) == f"[{error.error_id}] boom"

    def test_ids_are_unique(self):
        """Every error gets its own id."""
        assert RandoError("a").error_id != RandoError("b").error_id

    def test_tracking_id_shape(self):
        """Tracking ids are a timestamp segment plus 16 random characters."""
        identifier = tracking_id()
        assert len(identifier) == 24
        assert set(identifier) <= set(BASE_58)

    def test_to_dict(self):
        """to_dict exposes the tracking fields."""
        data = UsageError("no timestamp", operation="get_date").to_dict()
        assert data["type"] == "UsageError"
        assert data["msg"] == "no timestamp"
        assert data["context"] == {"operation": "get_date"}


class TestSubclasses:
    """Tests for context-carrying subclasses."""

    def test_hierarchy(self):
        """All errors derive from RandoError."""
        for cls in (ConfigurationError, UsageError, DecodingError, ClassRequirementUnsatisfiable):
            assert issubclass(cls, RandoError)

    def test_configuration_error_field(self):
        """ConfigurationError names the field."""
        error = ConfigurationError("bad", field="alphabet")
        assert error.field == "alphabet"
        assert error.context["field"] == "alphabet"

    def test_decoding_error_position(self):
        """DecodingError keeps the character and position, even position zero."""
        error = DecodingError("bad", char="!", position=0)
        assert error.context == {"char": "!", "position": 0}

    def test_class_requirement_attempts(self):
        """ClassRequirementUnsatisfiable records attempts."""
        error = ClassRequirementUnsatisfiable("gave up", attempts=3)
        assert error.attempts == 3
        assert error.context["attempts"] == 3

    def test_cause(self):
        """The underlying cause is retained."""
        cause = OverflowError("too big")
        error = DecodingError("out of range", cause=cause)
        assert error.cause is cause

    def test_raises_as_exception(self):
        """Errors propagate like any exception."""
        with pytest.raises(RandoError):
            raise UsageError("nope")
