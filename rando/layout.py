"""Identifier assembly and positional segment extraction.

Extraction never searches for the separator or the affixes; it slices by
their lengths, so segment content that happens to contain those characters
is still split exactly.
"""

from rando.settings import require_timestamp


def assemble(settings, random_segment, timestamp_segment=None):
    if not settings.include_timestamp:
        return settings.prefix + random_segment + settings.suffix
    if settings.timestamp_position == "start":
        body = timestamp_segment + settings.separator + random_segment
    else:
        body = random_segment + settings.separator + timestamp_segment
    return settings.prefix + body + settings.suffix


def _strip_affixes(settings, identifier):
    if settings.prefix:
        identifier = identifier[len(settings.prefix):]
    if settings.suffix:
        identifier = identifier[:-len(settings.suffix)]
    return identifier


def get_random_segment(settings, identifier):
    require_timestamp(settings, "get_random_segment")
    body = _strip_affixes(settings, identifier)
    gap = settings.timestamp_length + len(settings.separator)
    if settings.timestamp_position == "start":
        return body[gap:]
    return body[:-gap]


def get_timestamp_segment(settings, identifier):
    require_timestamp(settings, "get_timestamp_segment")
    body = _strip_affixes(settings, identifier)
    if settings.timestamp_position == "start":
        return body[:settings.timestamp_length]
    return body[-settings.timestamp_length:]
