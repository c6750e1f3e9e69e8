from internal.logging import BoundLogger, get_logger, LogLevel, StructuredLogger

__all__ = [
    "BoundLogger",
    "get_logger",
    "LogLevel",
    "StructuredLogger",
]
