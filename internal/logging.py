"""JSON-lines logging for the generator and the service.

Every record is one JSON object on stderr (or a configured stream) with
`timestamp`, `level`, `msg` and any bound or per-call fields.
"""

import json
import sys
import threading
from enum import IntEnum
from utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name, default=None):
        """Level from a config string; WARNING is accepted for WARN."""
        name = (name or "").upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            return default if default is not None else cls.INFO


_root = None
_root_lock = threading.Lock()


def _record(level, message, error, fields):
    record = {"timestamp": format_timestamp(), "level": level.name, "msg": message}
    record.update(fields)
    if error is not None:
        record["err"] = str(error)
        # rando errors carry their tracking id
        error_id = getattr(error, "error_id", None)
        if error_id:
            record.setdefault("error_id", error_id)
    return record


class StructuredLogger:
    """Process-wide sink; filters by level and writes one JSON line per record."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream
        self._write_lock = threading.Lock()

    def enabled(self, level):
        return level >= self.level

    def log(self, level, message, error=None, **fields):
        if not self.enabled(level):
            return
        try:
            line = json.dumps(_record(level, message, error, fields), default=str)
            with self._write_lock:
                print(line, file=self.stream or sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, **fields):
        self.log(LogLevel.DEBUG, message, **fields)

    def info(self, message, **fields):
        self.log(LogLevel.INFO, message, **fields)

    def warn(self, message, error=None, **fields):
        self.log(LogLevel.WARN, message, error, **fields)

    def error(self, message, error=None, **fields):
        self.log(LogLevel.ERROR, message, error, **fields)

    def bind(self, **fields):
        return BoundLogger(fields)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        """Replace the process-wide logger; bound loggers follow automatically."""
        global _root
        with _root_lock:
            _root = cls(min_level, stream)
        return _root


class BoundLogger:
    """Adds fixed fields (e.g. component="api") to every record.

    Resolves the process-wide logger on each call, so loggers bound at import
    or construction time honour a later configure().
    """

    def __init__(self, fields):
        self.fields = dict(fields)

    def log(self, level, message, error=None, **fields):
        get_logger().log(level, message, error, **{**self.fields, **fields})

    def debug(self, message, **fields):
        self.log(LogLevel.DEBUG, message, **fields)

    def info(self, message, **fields):
        self.log(LogLevel.INFO, message, **fields)

    def warn(self, message, error=None, **fields):
        self.log(LogLevel.WARN, message, error, **fields)

    def error(self, message, error=None, **fields):
        self.log(LogLevel.ERROR, message, error, **fields)

    def bind(self, **fields):
        return BoundLogger({**self.fields, **fields})


def get_logger():
    global _root
    if _root is None:
        with _root_lock:
            if _root is None:
                _root = StructuredLogger()
    return _root
