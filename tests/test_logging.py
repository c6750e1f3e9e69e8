"""Unit tests for structured logging."""

import io
import json

import pytest
from core.errors import UsageError
from internal.logging import BoundLogger, LogLevel, StructuredLogger, get_logger


@pytest.fixture
def stream():
    """Capture log lines; restore a quiet logger afterwards."""
    buffer = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=buffer)
    yield buffer
    StructuredLogger.configure(min_level=LogLevel.ERROR)


def records(buffer):
    return [json.loads(line) for line in buffer.getvalue().splitlines()]


class TestLogLevel:
    """Tests for LogLevel parsing."""

    def test_parse_names(self):
        """Level names parse case-insensitively."""
        assert LogLevel.parse("debug") is LogLevel.DEBUG
        assert LogLevel.parse("ERROR") is LogLevel.ERROR

    def test_parse_warning_alias(self):
        """WARNING is accepted for WARN."""
        assert LogLevel.parse("warning") is LogLevel.WARN

    def test_parse_fallback(self):
        """Unknown or missing names fall back to the default."""
        assert LogLevel.parse("verbose") is LogLevel.INFO
        assert LogLevel.parse(None, default=LogLevel.ERROR) is LogLevel.ERROR


class TestStructuredLogger:
    """Tests for the process-wide logger."""

    def test_record_shape(self, stream):
        """Each record is one JSON line with level, msg and fields."""
        get_logger().info("started", port=8080)
        (record,) = records(stream)
        assert record["level"] == "INFO"
        assert record["msg"] == "started"
        assert record["port"] == 8080
        assert "timestamp" in record

    def test_level_filtering(self):
        """Records below the configured level are dropped."""
        buffer = io.StringIO()
        logger = StructuredLogger(LogLevel.WARN, buffer)
        logger.info("ignored")
        logger.warn("kept")
        assert [r["msg"] for r in records(buffer)] == ["kept"]
        assert not logger.enabled(LogLevel.DEBUG)
        assert logger.enabled(LogLevel.ERROR)

    def test_error_field(self, stream):
        """Errors are logged as text, with the tracking id of rando errors."""
        exc = UsageError("no timestamp", operation="get_date")
        get_logger().error("failed", error=exc)
        (record,) = records(stream)
        assert record["err"] == str(exc)
        assert record["error_id"] == exc.error_id

    def test_plain_error_has_no_tracking_id(self, stream):
        """Non-rando errors are logged without an error_id."""
        get_logger().warn("odd", error=ValueError("bad"))
        (record,) = records(stream)
        assert record["err"] == "bad"
        assert "error_id" not in record

    def test_unserialisable_fields(self, stream):
        """Fields that are not JSON types are stringified."""
        get_logger().info("classes", value=LogLevel)
        (record,) = records(stream)
        assert "LogLevel" in record["value"]


class TestBoundLogger:
    """Tests for loggers carrying fixed fields."""

    def test_bound_fields(self, stream):
        """Bound fields appear on every record; call fields win."""
        log = get_logger().bind(component="api", route="ids")
        log.info("one")
        log.info("two", route="info")
        first, second = records(stream)
        assert first["component"] == "api"
        assert first["route"] == "ids"
        assert second["route"] == "info"

    def test_nested_bind(self, stream):
        """bind on a bound logger extends its fields."""
        log = get_logger().bind(component="rando").bind(attempt=3)
        assert isinstance(log, BoundLogger)
        log.debug("redraw")
        (record,) = records(stream)
        assert record["component"] == "rando"
        assert record["attempt"] == 3

    def test_follows_reconfiguration(self):
        """A logger bound before configure() writes to the new sink."""
        log = get_logger().bind(component="early")
        buffer = io.StringIO()
        StructuredLogger.configure(min_level=LogLevel.INFO, stream=buffer)
        try:
            log.debug("filtered")
            log.info("kept")
        finally:
            StructuredLogger.configure(min_level=LogLevel.ERROR)
        (record,) = records(buffer)
        assert record["msg"] == "kept"
        assert record["component"] == "early"
