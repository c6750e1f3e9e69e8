from core.errors import DecodingError
from internal.logging import get_logger
from rando import codec, layout, obfuscation
from rando.alphabets import sort_alphabet
from rando.charclasses import get_classes, has_all_classes
from rando.info import GeneratorInfo
from rando.random_segment import DEFAULT_SOURCE, generate_random_segment
from rando.settings import require_timestamp, validate
from utils.timestamp import from_millis, now_millis, to_millis

log = get_logger().bind(component="rando")


class Rando:
    """Configurable identifier generator.

    Options are validated once into immutable Settings; every call derives
    its output from those settings, the given instant and fresh randomness,
    so one instance can be shared across threads.
    """

    def __init__(self, random_source=None, **options):
        self.settings = validate(options)
        self.random_source = random_source or DEFAULT_SOURCE
        log.debug(
            "generator configured",
            total_length=self.settings.total_length,
            random_entropy=self.settings.random_entropy,
            include_timestamp=self.settings.include_timestamp,
        )

    def __getattr__(self, name):
        # Options and derived values read straight through, e.g. rando.timestamp_base
        if name == "settings":
            raise AttributeError(name)
        return getattr(self.settings, name)

    def __repr__(self):
        return f"Rando({self.settings!r})"

    def generate(self, date=None):
        """Return a new identifier; `date` (datetime or epoch ms) defaults to now."""
        random_segment = self.generate_random_segment()
        if not self.settings.include_timestamp:
            return layout.assemble(self.settings, random_segment)
        timestamp_segment = self.generate_timestamp_segment(date, random_segment)
        return layout.assemble(self.settings, random_segment, timestamp_segment)

    def generate_random_segment(self):
        return generate_random_segment(self.settings, self.random_source)

    def generate_timestamp_segment(self, date=None, random_segment=""):
        epoch_ms = now_millis() if date is None else to_millis(date)
        return codec.encode_timestamp(self.settings, epoch_ms, random_segment)

    def generate_offset(self, random_segment):
        return obfuscation.generate_offset(self.settings, random_segment)

    def obfuscate_timestamp_segment(self, random_segment, timestamp_segment):
        offset = self.generate_offset(random_segment)
        return obfuscation.obfuscate(self.settings, timestamp_segment, offset)

    def deobfuscate_timestamp_segment(self, random_segment, timestamp_segment):
        offset = self.generate_offset(random_segment)
        return obfuscation.deobfuscate(self.settings, timestamp_segment, offset)

    def get_random_segment(self, identifier):
        return layout.get_random_segment(self.settings, identifier)

    def get_timestamp_segment(self, identifier):
        return layout.get_timestamp_segment(self.settings, identifier)

    def get_millis(self, identifier):
        """Epoch milliseconds encoded in `identifier`."""
        require_timestamp(self.settings, "get_millis")
        timestamp_segment = self.get_timestamp_segment(identifier)
        if self.settings.obfuscate_timestamp:
            random_segment = self.get_random_segment(identifier)
            timestamp_segment = self.deobfuscate_timestamp_segment(random_segment, timestamp_segment)
        return codec.decode_timestamp(self.settings, timestamp_segment)

    def get_date(self, identifier):
        """UTC datetime encoded in `identifier`, exact to the millisecond."""
        require_timestamp(self.settings, "get_date")
        epoch_ms = self.get_millis(identifier)
        try:
            return from_millis(epoch_ms)
        except OverflowError as exc:
            raise DecodingError(f"decoded instant {epoch_ms} ms is out of range", cause=exc) from exc

    def get_info(self):
        return GeneratorInfo(self.settings)

    def get_classes(self, s=None):
        return get_classes(self.settings.random_alphabet if s is None else s)

    def has_all_classes(self, s):
        return has_all_classes(s, self.settings.random_classes)

    @staticmethod
    def sort_alphabet(alphabet):
        return sort_alphabet(alphabet)
