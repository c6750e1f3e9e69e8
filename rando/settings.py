"""Option validation and the immutable settings a generator runs on."""

from core.errors import ConfigurationError, UsageError
from rando.alphabets import BASE_58, timestamp_length_for
from rando.charclasses import get_classes
from utils.timestamp import from_millis

POSITIONS = ("start", "end")
DEFAULT_RANDOM_LENGTH = 21
DEFAULT_MAX_ATTEMPTS = 10_000

OPTION_NAMES = (
    "alphabet",
    "random_alphabet",
    "random_length",
    "require_all_classes",
    "include_timestamp",
    "obfuscate_timestamp",
    "timestamp_position",
    "timestamp_alphabet",
    "timestamp_length",
    "prefix",
    "separator",
    "suffix",
    "max_attempts",
)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _check_alphabet(field, alphabet):
    if not isinstance(alphabet, str) or len(alphabet) < 2:
        raise ConfigurationError(f"{field} must be a string of at least two characters.", field=field)
    if len(set(alphabet)) != len(alphabet):
        raise ConfigurationError(f"{field} must have unique characters.", field=field)


def _check_bool(field, value):
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field} must be a boolean.", field=field)


def _check_str(field, value):
    if not isinstance(value, str):
        raise ConfigurationError(f"{field} must be a string.", field=field)


def _check_positive(field, value):
    if not _is_int(value) or value <= 0:
        raise ConfigurationError(f"{field} must be an integer greater than zero.", field=field)


class Settings:
    """Validated generator options plus the values derived from them.

    Instances are immutable: every field is fixed at construction and any
    attempt to assign raises AttributeError.
    """

    __slots__ = OPTION_NAMES + (
        "random_base",
        "random_entropy",
        "random_classes",
        "timestamp_base",
        "timestamp_max_ms",
        "total_length",
    )

    def __init__(self, alphabet=BASE_58, random_alphabet=None, random_length=DEFAULT_RANDOM_LENGTH,
                 require_all_classes=False, include_timestamp=False, obfuscate_timestamp=False,
                 timestamp_position="start", timestamp_alphabet=None, timestamp_length=None,
                 prefix="", separator="", suffix="", max_attempts=DEFAULT_MAX_ATTEMPTS):
        _check_alphabet("alphabet", alphabet)
        if random_alphabet is not None:
            _check_alphabet("random_alphabet", random_alphabet)
        if timestamp_alphabet is not None:
            _check_alphabet("timestamp_alphabet", timestamp_alphabet)
        _check_positive("random_length", random_length)
        _check_bool("require_all_classes", require_all_classes)
        _check_bool("include_timestamp", include_timestamp)
        _check_bool("obfuscate_timestamp", obfuscate_timestamp)
        if timestamp_position not in POSITIONS:
            raise ConfigurationError('timestamp_position must be "start" or "end".', field="timestamp_position")
        _check_str("prefix", prefix)
        _check_str("separator", separator)
        _check_str("suffix", suffix)
        _check_positive("max_attempts", max_attempts)

        random_alphabet = random_alphabet if random_alphabet is not None else alphabet
        timestamp_alphabet = timestamp_alphabet if timestamp_alphabet is not None else alphabet
        random_base = len(random_alphabet)
        timestamp_base = len(timestamp_alphabet)

        minimum = timestamp_length_for(timestamp_base)
        if timestamp_length is not None:
            _check_positive("timestamp_length", timestamp_length)
            if timestamp_length < minimum:
                raise ConfigurationError(
                    f"timestamp_length must be at least {minimum} for base {timestamp_base}.",
                    field="timestamp_length",
                )
        else:
            timestamp_length = minimum

        random_classes = get_classes(random_alphabet)
        if require_all_classes and random_length < len(random_classes.names()):
            raise ConfigurationError(
                f"random_length {random_length} cannot cover the classes {random_classes.names()}.",
                field="random_length",
            )

        total_length = len(prefix) + random_length + len(suffix)
        if include_timestamp:
            total_length += timestamp_length + len(separator)

        fields = {
            "alphabet": alphabet,
            "random_alphabet": random_alphabet,
            "random_length": random_length,
            "require_all_classes": require_all_classes,
            "include_timestamp": include_timestamp,
            "obfuscate_timestamp": obfuscate_timestamp,
            "timestamp_position": timestamp_position,
            "timestamp_alphabet": timestamp_alphabet,
            "timestamp_length": timestamp_length,
            "prefix": prefix,
            "separator": separator,
            "suffix": suffix,
            "max_attempts": max_attempts,
            "random_base": random_base,
            # floor(log2(base ** length)), exact for any size
            "random_entropy": (random_base ** random_length).bit_length() - 1,
            "random_classes": random_classes,
            "timestamp_base": timestamp_base,
            "timestamp_max_ms": timestamp_base ** timestamp_length - 1,
            "total_length": total_length,
        }
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"Settings are immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Settings are immutable, cannot delete {name!r}")

    def __repr__(self):
        options = ", ".join(f"{name}={getattr(self, name)!r}" for name in OPTION_NAMES)
        return f"Settings({options})"

    @property
    def timestamp_max(self):
        """Largest instant the nominal timestamp length holds, or None past datetime.max."""
        try:
            return from_millis(self.timestamp_max_ms)
        except OverflowError:
            return None

    def options(self):
        return {name: getattr(self, name) for name in OPTION_NAMES}


def validate(options=None, **kwargs):
    """Build Settings from a mapping and/or keyword options, rejecting unknown names."""
    options = dict(options or {}, **kwargs)
    unknown = sorted(set(options) - set(OPTION_NAMES))
    if unknown:
        raise ConfigurationError(f"unknown option(s): {', '.join(unknown)}", field=unknown[0])
    return Settings(**options)


def require_timestamp(settings, operation):
    if not settings.include_timestamp:
        raise UsageError(f"{operation} requires including a timestamp.", operation=operation)
