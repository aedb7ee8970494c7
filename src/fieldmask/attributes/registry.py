"""Attribute type registry."""

from typing import Any

from fieldmask.attributes.base import Attribute
from fieldmask.attributes.format import FormatAttribute
from fieldmask.errors import UnknownAttributeTypeError


class AttributeRegistry:
    """Registry for attribute types.

    Maps type names used in node definitions to attribute classes.
    """

    BUILTIN_TYPES: dict[str, type[Attribute]] = {
        "text": Attribute,
        "format": FormatAttribute,
    }

    def __init__(self) -> None:
        """Initialize registry with the built-in types."""
        self.types: dict[str, type[Attribute]] = dict(self.BUILTIN_TYPES)

    def register(self, type_name: str, attribute_class: type[Attribute]) -> None:
        """Register a custom attribute type.

        Args:
            type_name: Name used in node definitions
            attribute_class: Attribute subclass

        Raises:
            ValueError: If the class is not an Attribute subclass
        """
        if not (isinstance(attribute_class, type) and issubclass(attribute_class, Attribute)):
            raise ValueError(
                f"Attribute type must subclass Attribute. "
                f"Got {attribute_class!r} for '{type_name}'."
            )
        self.types[type_name] = attribute_class

    def load(self, type_name: str, name: str, **kwargs: Any) -> Attribute:
        """Build an attribute by type name.

        Args:
            type_name: Registered type name ('text', 'format', ...)
            name: Attribute name
            **kwargs: Constructor arguments (flags, format_mask, ...)

        Returns:
            Attribute instance

        Raises:
            UnknownAttributeTypeError: If the type name is not registered

        Example:
            >>> registry = AttributeRegistry()
            >>> attr = registry.load('format', 'license', format_mask='AAA/##/##')
        """
        if type_name not in self.types:
            raise UnknownAttributeTypeError(type_name, list(self.types))

        return self.types[type_name](name, **kwargs)

    def list_types(self) -> list[str]:
        """List registered type names."""
        return list(self.types.keys())
