"""Segment validator for formatted values."""

from dataclasses import dataclass
from typing import Any

from fieldmask.mask.codec import split_value
from fieldmask.mask.compiler import Breakdown
from fieldmask.mask.specifiers import check_string


@dataclass
class FormatMismatch:
    """A fragment that does not match its segment's character class."""

    position: int
    expected: str
    value: str = ""
    field_name: str | None = None
    record: Any = None


@dataclass
class ValidationResult:
    """Formatted value validation result."""

    valid: bool
    error: FormatMismatch | None = None


class MaskValidator:
    """Validator for fragments of a compiled mask."""

    def __init__(self, breakdown: Breakdown):
        """Initialize validator.

        Args:
            breakdown: Compiled mask to validate against
        """
        self.breakdown = breakdown

    def validate(self, values: list[str]) -> ValidationResult:
        """Validate fragments against their segments.

        Checking stops at the first failing segment; later mismatches are
        not reported (known limitation).

        Args:
            values: One fragment per editable segment, in order

        Returns:
            Validation result carrying the first mismatch, if any
        """
        position = 0
        for segment in self.breakdown:
            if segment.is_literal:
                continue

            value = values[position] if position < len(values) else ""
            position += 1
            if not check_string(segment.kind, value):
                return ValidationResult(
                    valid=False,
                    error=FormatMismatch(
                        position=position,
                        expected=segment.expected_pattern,
                        value=value,
                    ),
                )

        return ValidationResult(valid=True)

    def validate_value(self, stored: str | None) -> ValidationResult:
        """Split a stored value and validate its fragments."""
        return self.validate(split_value(stored, self.breakdown))
