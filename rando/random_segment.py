"""Random segment generation on top of an injectable random source."""

import secrets

from core.errors import ClassRequirementUnsatisfiable
from internal.logging import get_logger
from rando.charclasses import has_all_classes

log = get_logger().bind(component="rando")


class SecureRandom:
    """Cryptographically secure source; randbelow is uniform without modulo bias."""

    def randbelow(self, n):
        return secrets.randbelow(n)


DEFAULT_SOURCE = SecureRandom()


def draw(alphabet, length, source):
    return "".join(alphabet[source.randbelow(len(alphabet))] for _ in range(length))


def generate_random_segment(settings, source=None):
    """Draw `random_length` characters from `random_alphabet`.

    With `require_all_classes` the segment is redrawn until it contains every
    character class present in the alphabet, giving up after `max_attempts`.
    """
    source = source or DEFAULT_SOURCE
    segment = draw(settings.random_alphabet, settings.random_length, source)
    if not settings.require_all_classes:
        return segment

    required = settings.random_classes
    attempts = 1
    while not has_all_classes(segment, required):
        if attempts >= settings.max_attempts:
            log.warn("class requirement unsatisfied", attempts=attempts, classes=required.names())
            raise ClassRequirementUnsatisfiable(
                f"no segment covered {required.names()} after {attempts} attempts",
                attempts=attempts,
            )
        log.debug("segment missing classes, redrawing", attempt=attempts)
        segment = draw(settings.random_alphabet, settings.random_length, source)
        attempts += 1
    return segment
