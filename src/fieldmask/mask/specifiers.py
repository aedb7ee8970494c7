"""Format specifier characters and their character classes."""

import string
from enum import Enum

SPECIFIERS = "#9A*"


class SegmentKind(Enum):
    """Kind of a compiled mask segment, keyed by its mask character."""

    ANY_CHAR = "*"
    ALPHANUMERIC = "#"
    ALPHA = "A"
    DIGIT = "9"
    LITERAL = "/"

    @classmethod
    def from_char(cls, char: str) -> "SegmentKind":
        """Map a mask character to its segment kind.

        Args:
            char: Single mask character

        Returns:
            The specifier kind, or LITERAL for any non-specifier character
        """
        if is_specifier(char):
            return cls(char)
        return cls.LITERAL


def is_specifier(char: str) -> bool:
    """Check if a character is a format specifier or a literal."""
    return len(char) == 1 and char in SPECIFIERS


def segments_equal(char_a: str, char_b: str) -> bool:
    """Check if two mask characters can be grouped into one segment.

    Any two literals group together, whatever their actual value. Specifiers
    only group with the identical specifier.
    """
    return (not is_specifier(char_a) and not is_specifier(char_b)) or char_a == char_b


def _is_letter(char: str) -> bool:
    return len(char) == 1 and char in string.ascii_letters


def _is_digit(char: str) -> bool:
    return len(char) == 1 and char in string.digits


def check_char(kind: SegmentKind, char: str) -> bool:
    """Check if a single character is accepted by a segment kind.

    Args:
        kind: Segment kind to check against
        char: Character to check

    Returns:
        True if the character matches the kind's class
    """
    if kind is SegmentKind.ALPHANUMERIC:
        return _is_digit(char) or _is_letter(char)
    if kind is SegmentKind.ALPHA:
        return _is_letter(char)
    if kind is SegmentKind.DIGIT:
        return _is_digit(char)
    return True


def check_string(kind: SegmentKind, value: str) -> bool:
    """Check if every character of a value is accepted by a segment kind."""
    return all(check_char(kind, char) for char in value)
