from utils.timestamp import format_millis


class GeneratorInfo:
    """Read-only snapshot of resolved options and derived statistics."""

    __slots__ = ("alphabet", "random_alphabet", "random_length", "random_base", "random_entropy",
                 "random_classes", "require_all_classes", "include_timestamp", "obfuscate_timestamp",
                 "timestamp_position", "timestamp_alphabet", "timestamp_length", "timestamp_base",
                 "timestamp_max", "timestamp_max_ms", "prefix", "separator", "suffix", "total_length")

    def __init__(self, settings):
        for name in self.__slots__:
            setattr(self, name, getattr(settings, name))

    def to_dict(self):
        data = {name: getattr(self, name) for name in self.__slots__}
        data["random_classes"] = self.random_classes.names()
        data["timestamp_max"] = format_millis(self.timestamp_max) if self.timestamp_max else None
        return data
