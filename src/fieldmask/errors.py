"""Error reporting sink and custom exceptions."""

from dataclasses import dataclass
from typing import Any, Protocol


class FieldMaskError(Exception):
    """Base exception for fieldmask errors."""

    pass


class UnknownAttributeTypeError(FieldMaskError):
    """Attribute type name is not registered."""

    def __init__(self, type_name: str, available: list[str]):
        super().__init__(
            f"Unknown attribute type: '{type_name}'. "
            f"Available: {', '.join(sorted(available))}\n\n"
            f"Suggestions:\n"
            f"1. Check the type name spelling\n"
            f"2. Register a custom type first:\n"
            f"   registry.register('{type_name}', YourAttribute)"
        )


class DuplicateAttributeError(FieldMaskError):
    """Attribute name is already used within a node."""

    def __init__(self, name: str, node: str):
        super().__init__(
            f"Attribute '{name}' already exists in node '{node}'.\n\n"
            f"Suggestions:\n"
            f"1. Use a unique attribute name per node\n"
            f"2. Remove the earlier definition before adding a replacement"
        )


class ErrorSink(Protocol):
    """Collaborator receiving validation errors."""

    def report(self, record: Any, field_name: str, error_code: str, message: str) -> None:
        ...


@dataclass
class FieldError:
    """A validation error reported for one field of a record."""

    field_name: str
    code: str
    message: str
    record: Any = None


class ErrorCollector:
    """Error sink that keeps reported errors in memory."""

    def __init__(self) -> None:
        """Initialize collector."""
        self._errors: list[FieldError] = []

    def report(self, record: Any, field_name: str, error_code: str, message: str) -> None:
        """Record a validation error.

        Args:
            record: Record being validated
            field_name: Field that failed
            error_code: Error code (e.g. 'err')
            message: Human-readable, translated message
        """
        self._errors.append(
            FieldError(field_name=field_name, code=error_code, message=message, record=record)
        )

    @property
    def errors(self) -> list[FieldError]:
        """All reported errors in reporting order."""
        return list(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def for_field(self, field_name: str) -> list[FieldError]:
        """Get errors reported for one field."""
        return [error for error in self._errors if error.field_name == field_name]

    def clear(self) -> None:
        """Clear collected errors."""
        self._errors.clear()
