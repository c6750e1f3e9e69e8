import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GeneratorConfig:
    __slots__ = ("alphabet", "random_alphabet", "random_length", "require_all_classes",
                 "include_timestamp", "obfuscate_timestamp", "timestamp_position",
                 "timestamp_alphabet", "timestamp_length", "prefix", "separator", "suffix", "max_attempts")

    def __init__(self, alphabet=None, random_alphabet=None, random_length=21, require_all_classes=False,
                 include_timestamp=False, obfuscate_timestamp=False, timestamp_position="start",
                 timestamp_alphabet=None, timestamp_length=None, prefix="", separator="", suffix="",
                 max_attempts=None):
        self.alphabet = alphabet
        self.random_alphabet = random_alphabet
        self.random_length = random_length
        self.require_all_classes = require_all_classes
        self.include_timestamp = include_timestamp
        self.obfuscate_timestamp = obfuscate_timestamp
        self.timestamp_position = timestamp_position
        self.timestamp_alphabet = timestamp_alphabet
        self.timestamp_length = timestamp_length
        self.prefix = prefix
        self.separator = separator
        self.suffix = suffix
        self.max_attempts = max_attempts

    def to_options(self):
        """Keyword options for Rando; unset alphabet and retry bound fall back to its defaults."""
        options = {name: getattr(self, name) for name in self.__slots__}
        for name in ("alphabet", "max_attempts"):
            if options[name] is None:
                del options[name]
        return options


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("generator", "server", "logging")

    def __init__(self, generator=None, server=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
