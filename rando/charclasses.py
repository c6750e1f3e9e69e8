"""Character class descriptors for alphabets and generated strings."""

from enum import IntFlag


class CharClass(IntFlag):
    NONE = 0
    LOWERCASE = 1
    UPPERCASE = 2
    NUMERIC = 4
    SPECIAL = 8

    def names(self):
        return [member.name.lower() for member in (CharClass.LOWERCASE, CharClass.UPPERCASE,
                                                   CharClass.NUMERIC, CharClass.SPECIAL)
                if self & member]


def classify(char):
    if "a" <= char <= "z":
        return CharClass.LOWERCASE
    if "A" <= char <= "Z":
        return CharClass.UPPERCASE
    if "0" <= char <= "9":
        return CharClass.NUMERIC
    return CharClass.SPECIAL


def get_classes(s):
    """Union of the classes of every character in `s`."""
    classes = CharClass.NONE
    for char in s:
        classes |= classify(char)
    return classes


def has_all_classes(s, required):
    """True if `s` contains at least one character of every class in `required`."""
    return get_classes(s) & required == required
