"""Custom errors with tracking IDs."""

from utils.timestamp import format_timestamp

_tracker = None


def tracking_id():
    """Time-sortable id for an error, produced by rando itself."""
    global _tracker
    if _tracker is None:
        from rando.generator import Rando
        _tracker = Rando(include_timestamp=True, random_length=16)
    return _tracker.generate()


class RandoError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = tracking_id()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "type": type(self).__name__,
            "msg": self.args[0] if self.args else "",
            "context": self.context,
        }


class ConfigurationError(RandoError):
    """Invalid generator options, raised at construction time."""

    def __init__(self, message, field=None, **kwargs):
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        self.field = field
        super().__init__(message, context=context, **kwargs)


class UsageError(RandoError):
    """Operation not valid for this configuration (e.g. no timestamp)."""

    def __init__(self, message, operation=None, **kwargs):
        context = kwargs.pop("context", {})
        if operation:
            context["operation"] = operation
        self.operation = operation
        super().__init__(message, context=context, **kwargs)


class DecodingError(RandoError):
    """A segment could not be decoded against its alphabet."""

    def __init__(self, message, char=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if char is not None:
            context["char"] = char
        if position is not None:
            context["position"] = position
        self.char = char
        self.position = position
        super().__init__(message, context=context, **kwargs)


class ClassRequirementUnsatisfiable(RandoError):
    """Random segment never covered every character class within the retry bound."""

    def __init__(self, message, attempts=None, **kwargs):
        context = kwargs.pop("context", {})
        if attempts is not None:
            context["attempts"] = attempts
        self.attempts = attempts
        super().__init__(message, context=context, **kwargs)
