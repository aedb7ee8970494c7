"""Base attribute interface and flags."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntFlag
from html import escape
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fieldmask.errors import ErrorSink
    from fieldmask.node import Node

from fieldmask.html import FieldRenderer, input_field
from fieldmask.i18n import TextLookup, Translator


class AttributeFlag(IntFlag):
    """Behaviour flags for attributes."""

    NONE = 0
    OBLIGATORY = 1
    READONLY = 2
    HIDE = 4


class Attribute:
    """A typed field of a node, stored under one record key.

    The base class behaves as a plain single-line text field. Subclasses
    override the operations whose semantics differ.
    """

    def __init__(
        self,
        name: str,
        flags: int = AttributeFlag.NONE,
        *,
        translator: TextLookup | None = None,
        renderer: FieldRenderer | None = None,
    ):
        """Initialize attribute.

        Args:
            name: Attribute name; unique within a node and equal to the
                record key holding its value
            flags: Combination of AttributeFlag values
            translator: Text lookup; falls back to the owner node's
            renderer: Renderer for editable input boxes
        """
        self.name = name
        self.flags = AttributeFlag(flags)
        self.owner: Node | None = None
        self.attrib_size = 0
        self._translator = translator
        self.renderer: FieldRenderer = renderer or input_field

    def field_name(self) -> str:
        """Record key for this attribute's value."""
        return self.name

    def has_flag(self, flag: AttributeFlag) -> bool:
        return bool(self.flags & flag)

    def set_attrib_size(self, size: int) -> None:
        self.attrib_size = size

    @property
    def translator(self) -> TextLookup:
        """Text lookup of the attribute, its owner, or the built-in default."""
        if self._translator is not None:
            return self._translator
        if self.owner is not None and self.owner.translator is not None:
            return self.owner.translator
        return _DEFAULT_TRANSLATOR

    def text(self, key: str) -> str:
        """Translate a key in the context of the owning node."""
        module = self.owner.module if self.owner is not None and self.owner.module else "atk"
        node = self.owner.name if self.owner is not None else None
        return self.translator.translate(key, module=module, node=node)

    def get_html_id(self, field_prefix: str = "") -> str:
        """Id of the html element for this attribute."""
        return f"{field_prefix}{self.field_name()}".replace(".", "_")

    def value_from_record(self, record: Mapping[str, Any] | None) -> Any:
        """Read this attribute's value; missing keys give None."""
        if record is None:
            return None
        return record.get(self.field_name())

    def is_empty(self, record: Mapping[str, Any]) -> bool:
        """Check if the record holds no value for this attribute."""
        value = self.value_from_record(record)
        return value is None or (isinstance(value, str) and value.strip() == "")

    def fetch_value(self, postvars: Mapping[str, Any]) -> Any:
        """Convert posted form values into the internal value."""
        return postvars.get(self.field_name())

    def validate(self, record: Mapping[str, Any], mode: str, sink: ErrorSink) -> Any:
        """Validate the record's value, reporting problems to the sink.

        Plain attributes accept any value.
        """
        return None

    def edit(self, record: Mapping[str, Any], field_prefix: str = "", mode: str = "add") -> str:
        """Render markup for editing this attribute's value."""
        value = self.value_from_record(record)
        size = self.attrib_size or 40
        return self.renderer(
            self.get_html_id(field_prefix),
            size,
            size,
            "" if value is None else str(value),
        )

    def display(self, record: Mapping[str, Any], mode: str = "view") -> str:
        """Render the value for read-only display."""
        value = self.value_from_record(record)
        return "" if value is None else escape(str(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


_DEFAULT_TRANSLATOR = Translator()
