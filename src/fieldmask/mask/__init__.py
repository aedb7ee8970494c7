"""Format mask compiler, codec and character classes."""

from fieldmask.mask.codec import join_values, pad, split_value
from fieldmask.mask.compiler import Breakdown, Segment, compile_mask, typed_segments
from fieldmask.mask.specifiers import (
    SPECIFIERS,
    SegmentKind,
    check_char,
    check_string,
    is_specifier,
    segments_equal,
)

__all__ = [
    "SPECIFIERS",
    "Breakdown",
    "Segment",
    "SegmentKind",
    "check_char",
    "check_string",
    "compile_mask",
    "is_specifier",
    "join_values",
    "pad",
    "segments_equal",
    "split_value",
    "typed_segments",
]
