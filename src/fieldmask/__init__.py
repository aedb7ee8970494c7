"""
fieldmask - Formatted string attributes for record forms

Provides format masks (e.g. "AAA/##/##") compiled into typed segments, with
multi-box editor rendering, posted-value joining, per-segment validation and
action listeners for nodes.
"""

from fieldmask.attributes import (
    Attribute,
    AttributeFlag,
    AttributeRegistry,
    EditFields,
    FormatAttribute,
    InputField,
    LiteralToken,
)
from fieldmask.cache import BreakdownCache
from fieldmask.errors import ErrorCollector, FieldError, FieldMaskError
from fieldmask.i18n import Translator
from fieldmask.listeners import ActionListener
from fieldmask.mask import Segment, SegmentKind, compile_mask, join_values, split_value
from fieldmask.node import Node
from fieldmask.validator import FormatMismatch, MaskValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "ActionListener",
    "Attribute",
    "AttributeFlag",
    "AttributeRegistry",
    "BreakdownCache",
    "EditFields",
    "ErrorCollector",
    "FieldError",
    "FieldMaskError",
    "FormatAttribute",
    "FormatMismatch",
    "InputField",
    "LiteralToken",
    "MaskValidator",
    "Node",
    "Segment",
    "SegmentKind",
    "Translator",
    "ValidationResult",
    "compile_mask",
    "join_values",
    "split_value",
]
