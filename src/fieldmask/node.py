"""
Nodes: named entities holding attributes and action listeners.

A node validates records, renders edit markup for each attribute, rebuilds
records from posted form values and notifies listeners around actions.
Records are plain mappings of field name to stored value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from fieldmask.attributes.base import Attribute, AttributeFlag
from fieldmask.attributes.registry import AttributeRegistry
from fieldmask.errors import DuplicateAttributeError, ErrorSink
from fieldmask.i18n import TextLookup
from fieldmask.listeners import ActionListener

logger = logging.getLogger(__name__)


class Node:
    """An entity made of attributes."""

    def __init__(
        self,
        name: str,
        module: str = "",
        primary_key: tuple[str, ...] = ("id",),
        translator: TextLookup | None = None,
    ):
        """
        Initialize node.

        Args:
            name: Node name
            module: Module the node belongs to
            primary_key: Field names making up the primary key
            translator: Text lookup shared by the node's attributes
        """
        self.name = name
        self.module = module
        self.primary_key_fields = primary_key
        self.translator = translator
        self._attributes: dict[str, Attribute] = {}
        self._listeners: list[ActionListener] = []

    def add(self, attribute: Attribute) -> Attribute:
        """
        Add an attribute to the node.

        Raises:
            DuplicateAttributeError: If the name is already in use
        """
        if attribute.name in self._attributes:
            raise DuplicateAttributeError(attribute.name, self.node_type())
        attribute.owner = self
        self._attributes[attribute.name] = attribute
        return attribute

    def get_attribute(self, name: str) -> Attribute | None:
        return self._attributes.get(name)

    @property
    def attributes(self) -> list[Attribute]:
        """Attributes in definition order."""
        return list(self._attributes.values())

    def node_type(self) -> str:
        """Qualified node type, e.g. 'fleet.vehicle'."""
        return f"{self.module}.{self.name}" if self.module else self.name

    def primary_key(self, record: Mapping[str, Any]) -> str:
        """Primary key condition for a record, e.g. "id='12'"."""
        return " AND ".join(
            f"{field}='{record.get(field, '')}'" for field in self.primary_key_fields
        )

    def add_listener(self, listener: ActionListener) -> None:
        """Register an action listener and make this node its owner."""
        listener.set_node(self)
        self._listeners.append(listener)

    def notify(self, action: str, record: dict[str, Any]) -> None:
        for listener in self._listeners:
            listener.notify(action, record)

    def pre_notify(self, action: str, record: dict[str, Any]) -> None:
        for listener in self._listeners:
            listener.pre_notify(action, record)

    def perform(
        self,
        action: str,
        record: dict[str, Any],
        handler: Callable[[dict[str, Any]], Any],
    ) -> Any:
        """
        Run an action on a record, notifying listeners around it.

        Args:
            action: Action name (e.g. 'save', 'update', 'delete')
            record: Record the action works on
            handler: Callable performing the action

        Returns:
            Whatever the handler returns
        """
        self.pre_notify(action, record)
        result = handler(record)
        self.notify(action, record)
        return result

    def validate(self, record: Mapping[str, Any], mode: str, sink: ErrorSink) -> bool:
        """
        Validate a record, reporting problems to the sink.

        Obligatory attributes without a value get a required-field error and
        are not validated further.

        Args:
            record: Record to validate
            mode: 'add' or 'update'
            sink: Collaborator receiving error reports

        Returns:
            True if no errors were reported
        """
        tracking = _TrackingSink(sink)

        for attribute in self._attributes.values():
            if attribute.has_flag(AttributeFlag.OBLIGATORY) and attribute.is_empty(record):
                tracking.report(
                    record,
                    attribute.field_name(),
                    "err",
                    attribute.text("error_obligatory_field"),
                )
                continue
            attribute.validate(record, mode, tracking)

        if tracking.reported:
            logger.debug(f"Record {self.primary_key(record)} of {self.node_type()} is invalid")
        return not tracking.reported

    def edit_fields(
        self, record: Mapping[str, Any], field_prefix: str = "", mode: str = "add"
    ) -> dict[str, str]:
        """Edit markup per visible attribute, keyed by attribute name."""
        return {
            attribute.name: attribute.edit(record, field_prefix, mode)
            for attribute in self._attributes.values()
            if not attribute.has_flag(AttributeFlag.HIDE)
        }

    def fetch_record(self, postvars: Mapping[str, Any]) -> dict[str, Any]:
        """Build a record from posted form values.

        Read-only attributes are skipped.
        """
        return {
            attribute.field_name(): attribute.fetch_value(postvars)
            for attribute in self._attributes.values()
            if not attribute.has_flag(AttributeFlag.READONLY)
        }

    @classmethod
    def from_definition(
        cls,
        definition: Mapping[str, Any],
        registry: AttributeRegistry | None = None,
        translator: TextLookup | None = None,
    ) -> Node:
        """
        Build a node from a plain definition.

        Example:
            >>> Node.from_definition({
            ...     "name": "vehicle",
            ...     "module": "fleet",
            ...     "attributes": [
            ...         {"type": "format", "name": "license",
            ...          "format_mask": "AAA/##/##", "flags": ["obligatory"]},
            ...     ],
            ... })

        Raises:
            UnknownAttributeTypeError: If an attribute type is not registered
            KeyError: If a flag name is unknown
        """
        registry = registry or AttributeRegistry()
        node = cls(
            definition["name"],
            module=definition.get("module", ""),
            primary_key=tuple(definition.get("primary_key", ("id",))),
            translator=translator,
        )

        for attr_def in definition.get("attributes", []):
            options = dict(attr_def)
            type_name = options.pop("type", "text")
            name = options.pop("name")
            flags = AttributeFlag.NONE
            for flag_name in options.pop("flags", []):
                flags |= AttributeFlag[flag_name.upper()]
            node.add(registry.load(type_name, name, flags=flags, **options))

        return node

    def __repr__(self) -> str:
        return f"Node({self.node_type()!r}, attributes={list(self._attributes)})"


class _TrackingSink:
    """Passes reports through while remembering that one was made."""

    def __init__(self, sink: ErrorSink):
        self.sink = sink
        self.reported = False

    def report(self, record: Any, field_name: str, error_code: str, message: str) -> None:
        self.reported = True
        self.sink.report(record, field_name, error_code, message)
