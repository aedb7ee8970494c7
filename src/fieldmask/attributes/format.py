"""Formatted string attribute."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from html import escape
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fieldmask.errors import ErrorSink

from fieldmask.attributes.base import Attribute, AttributeFlag
from fieldmask.cache import BreakdownCache
from fieldmask.html import FieldRenderer
from fieldmask.i18n import TextLookup
from fieldmask.mask.codec import join_values, split_value
from fieldmask.mask.compiler import Breakdown
from fieldmask.validator import MaskValidator, ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiteralToken:
    """Fixed, non-editable text between input boxes."""

    text: str


@dataclass(frozen=True)
class InputField:
    """One editable input box of a formatted attribute."""

    html_id: str
    size: int
    maxlength: int
    value: str


@dataclass
class EditFields:
    """Ordered editor items plus the per-segment input hints."""

    items: list[LiteralToken | InputField] = field(default_factory=list)
    hints: list[str] = field(default_factory=list)

    @property
    def inputs(self) -> list[InputField]:
        """Only the editable items."""
        return [item for item in self.items if isinstance(item, InputField)]

    @property
    def hint_text(self) -> str:
        return " ".join(self.hints)


class FormatAttribute(Attribute):
    """Attribute for editing a string that follows a fixed format.

    Each character of the format mask defines what is expected at that
    position:

        * - any character
        # - letter or digit
        A - letter from the alphabet
        9 - digit

    Any other character is a literal; it is stored verbatim and shown as
    non-editable text in the editor.

    Example:
        >>> node.add(FormatAttribute("license", AttributeFlag.OBLIGATORY, "AAA/##/##"))
    """

    def __init__(
        self,
        name: str,
        flags: int = AttributeFlag.NONE,
        format_mask: str = "",
        *,
        translator: TextLookup | None = None,
        renderer: FieldRenderer | None = None,
        show_hints: bool = True,
    ):
        """Initialize formatted attribute.

        Args:
            name: Attribute name (record key)
            flags: Combination of AttributeFlag values
            format_mask: Format mask, e.g. "AAA/##/##"
            translator: Text lookup for error messages
            renderer: Renderer for the input boxes
            show_hints: Append the mask hint to the editor markup
        """
        super().__init__(name, flags, translator=translator, renderer=renderer)
        self._cache = BreakdownCache(format_mask)
        self.show_hints = show_hints
        self.set_attrib_size(len(format_mask))

    @property
    def format_mask(self) -> str:
        return self._cache.mask

    def breakdown(self) -> Breakdown:
        """Structural breakdown of the format mask (compiled once)."""
        return self._cache.get()

    def value_breakdown(self, value: str | None) -> list[str]:
        """Split a stored value into one fragment per editable segment."""
        return split_value(value, self.breakdown())

    def _stored_value(self, record: Mapping[str, Any] | None) -> str:
        value = self.value_from_record(record)
        return "" if value is None else str(value)

    def validate(self, record: Mapping[str, Any], mode: str, sink: ErrorSink) -> ValidationResult:
        """Validate that every fragment matches its format specifier.

        Only the first mismatching element is reported.

        Args:
            record: Record to validate
            mode: Insert or update mode (ignored by this attribute)
            sink: Collaborator receiving the error report

        Returns:
            Validation result
        """
        result = MaskValidator(self.breakdown()).validate_value(self._stored_value(record))

        if not result.valid and result.error is not None:
            result.error.field_name = self.field_name()
            result.error.record = record
            logger.debug(
                f"Format mismatch in '{self.field_name()}' at element "
                f"{result.error.position} (expected {result.error.expected})"
            )
            sink.report(
                record,
                self.field_name(),
                "err",
                self._format_error_string(result.error.position, result.error.expected),
            )

        return result

    def _format_error_string(self, pos: int, specifier: str) -> str:
        template = self.text("error_format_mismatch")
        try:
            return template % (pos, specifier)
        except (TypeError, ValueError):
            logger.warning(f"Malformed error_format_mismatch template: {template!r}")
            return f"{template} ({pos}: {specifier})"

    def build_edit_fields(self, record: Mapping[str, Any], field_prefix: str = "") -> EditFields:
        """Build the editor items for a record.

        Input ids are ``<html id>[<segment position>]``, so the posted
        fragments come back keyed by breakdown position.

        Args:
            record: Record holding the current value
            field_prefix: Prefix for the html element names

        Returns:
            Editor items and hints in segment order
        """
        values = self.value_breakdown(self._stored_value(record))
        html_id = self.get_html_id(field_prefix)
        fields = EditFields()
        typed_index = 0

        for position, segment in enumerate(self.breakdown()):
            if segment.is_literal:
                fields.items.append(LiteralToken(segment.display_mask))
            else:
                fields.items.append(
                    InputField(
                        html_id=f"{html_id}[{position}]",
                        size=segment.length,
                        maxlength=segment.length,
                        value=values[typed_index],
                    )
                )
                typed_index += 1
            fields.hints.append(segment.display_mask)

        return fields

    def edit(self, record: Mapping[str, Any], field_prefix: str = "", mode: str = "add") -> str:
        """Render the multi-box editor for this attribute."""
        fields = self.build_edit_fields(record, field_prefix)
        parts = [
            escape(item.text)
            if isinstance(item, LiteralToken)
            else self.renderer(item.html_id, item.size, item.maxlength, item.value)
            for item in fields.items
        ]
        markup = " ".join(parts)
        if self.show_hints:
            markup += f"  ({escape(fields.hint_text)})"
        return markup

    def fetch_value(self, postvars: Mapping[str, Any]) -> str:
        """Join posted fragments into the stored value."""
        return join_values(postvars.get(self.field_name()), self.breakdown())

    def is_empty(self, record: Mapping[str, Any]) -> bool:
        """Check if none of the editable elements have been filled in.

        Literals are ignored, so a mask without specifiers is always empty.
        """
        return all(value == "" for value in self.value_breakdown(self._stored_value(record)))
