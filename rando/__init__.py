"""
Configurable random identifiers with optional (obfuscated) timestamps.
"""

from rando.alphabets import BASE_58, TIMESTAMP_DEFAULTS, default_timestamp_length, sort_alphabet
from rando.charclasses import CharClass, get_classes, has_all_classes
from rando.generator import Rando
from rando.info import GeneratorInfo
from rando.random_segment import SecureRandom
from rando.settings import Settings, validate

__all__ = [
    "BASE_58",
    "TIMESTAMP_DEFAULTS",
    "CharClass",
    "GeneratorInfo",
    "Rando",
    "SecureRandom",
    "Settings",
    "default_timestamp_length",
    "get_classes",
    "has_all_classes",
    "sort_alphabet",
    "validate",
]
