"""Tests for ErrorCollector and custom exceptions."""

from fieldmask import ErrorCollector, FieldError, FieldMaskError
from fieldmask.errors import DuplicateAttributeError, UnknownAttributeTypeError


class TestErrorCollector:
    """Tests for ErrorCollector."""

    def test_init_empty(self) -> None:
        """Test that a new collector has no errors."""
        collector = ErrorCollector()

        assert collector.errors == []
        assert collector.has_errors is False

    def test_report(self) -> None:
        """Test that reported errors are kept in order."""
        collector = ErrorCollector()
        record = {"license": "1"}
        collector.report(record, "license", "err", "first")
        collector.report(record, "name", "err", "second")

        assert collector.has_errors is True
        assert collector.errors == [
            FieldError("license", "err", "first", record),
            FieldError("name", "err", "second", record),
        ]

    def test_for_field(self) -> None:
        """Test filtering errors by field name."""
        collector = ErrorCollector()
        collector.report({}, "license", "err", "bad")
        collector.report({}, "name", "err", "missing")

        assert [e.message for e in collector.for_field("name")] == ["missing"]

    def test_clear(self) -> None:
        """Test clearing the collector."""
        collector = ErrorCollector()
        collector.report({}, "license", "err", "bad")
        collector.clear()

        assert collector.has_errors is False


class TestExceptions:
    """Tests for custom exception messages."""

    def test_unknown_type_lists_available(self) -> None:
        """Test that the message lists registered types."""
        error = UnknownAttributeTypeError("phone", ["text", "format"])

        assert isinstance(error, FieldMaskError)
        assert "Unknown attribute type: 'phone'" in str(error)
        assert "format, text" in str(error)

    def test_duplicate_attribute(self) -> None:
        """Test duplicate attribute message."""
        error = DuplicateAttributeError("license", "fleet.vehicle")

        assert isinstance(error, FieldMaskError)
        assert "'license' already exists in node 'fleet.vehicle'" in str(error)
