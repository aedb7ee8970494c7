"""Attribute definitions and registry."""

from fieldmask.attributes.base import Attribute, AttributeFlag
from fieldmask.attributes.format import EditFields, FormatAttribute, InputField, LiteralToken
from fieldmask.attributes.registry import AttributeRegistry

__all__ = [
    "Attribute",
    "AttributeFlag",
    "AttributeRegistry",
    "EditFields",
    "FormatAttribute",
    "InputField",
    "LiteralToken",
]
