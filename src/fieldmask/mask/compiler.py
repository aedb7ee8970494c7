"""Mask compiler: turns a format mask into a breakdown of segments."""

import logging
from dataclasses import dataclass

from fieldmask.mask.specifiers import SegmentKind, segments_equal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """One compiled unit of a format mask.

    Attributes:
        kind: Character class of the segment, or LITERAL
        length: Number of mask characters covered (always positive)
        display_mask: Literal text for literal segments, otherwise the
            specifier character repeated ``length`` times
    """

    kind: SegmentKind
    length: int
    display_mask: str

    @property
    def is_literal(self) -> bool:
        """True for fixed, non-editable text."""
        return self.kind is SegmentKind.LITERAL

    @property
    def specifier(self) -> str:
        """Specifier character of the segment ('/' for literals)."""
        return self.kind.value

    @property
    def expected_pattern(self) -> str:
        """Specifier repeated over the segment length, e.g. 'AAA'."""
        return self.specifier * self.length


Breakdown = tuple[Segment, ...]


def compile_mask(mask: str) -> Breakdown:
    """Compile a format mask into its structural breakdown.

    Consecutive characters share a segment when both are literals or both
    are the same specifier.

    Args:
        mask: Format mask, e.g. "AAA/##/##"

    Returns:
        Ordered tuple of segments; empty for an empty mask

    Example:
        >>> [s.display_mask for s in compile_mask("AAA/##/##")]
        ['AAA', '/', '##', '/', '##']
    """
    segments: list[Segment] = []
    start = 0
    last = ""

    for i, char in enumerate(mask):
        if i > 0 and not segments_equal(char, last):
            segments.append(_make_segment(mask[start:i]))
            start = i
        last = char

    # leftover
    if start < len(mask):
        segments.append(_make_segment(mask[start:]))

    logger.debug(f"Compiled mask {mask!r} into {len(segments)} segments")
    return tuple(segments)


def _make_segment(run: str) -> Segment:
    return Segment(kind=SegmentKind.from_char(run[0]), length=len(run), display_mask=run)


def typed_segments(breakdown: Breakdown) -> list[Segment]:
    """Return the editable (non-literal) segments in order."""
    return [segment for segment in breakdown if not segment.is_literal]
