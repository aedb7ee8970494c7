"""Value codec: split stored strings into fragments and join them back."""

from collections.abc import Mapping, Sequence
from typing import Any

from fieldmask.mask.compiler import Breakdown
from fieldmask.mask.specifiers import SegmentKind

PostedFragments = Mapping[Any, Any] | Sequence[Any] | str | int | None


def split_value(stored: str | None, breakdown: Breakdown) -> list[str]:
    """Convert a stored value into one fragment per editable segment.

    Literal segments only advance the cursor. Input shorter than the mask
    yields short or empty fragments, never an error.

    Args:
        stored: Stored value (None is treated as empty)
        breakdown: Compiled mask

    Returns:
        Trimmed fragments, one per non-literal segment
    """
    value = stored or ""
    fragments: list[str] = []
    pos = 0

    for segment in breakdown:
        if not segment.is_literal:
            fragments.append(value[pos : pos + segment.length].strip())
        pos += segment.length

    return fragments


def pad(kind: SegmentKind, size: int, value: Any) -> str:
    """Fit a fragment to its segment size.

    The kind is not used: every fragment is right-padded with spaces, so a
    short digit run is not zero-filled. Over-long fragments are cut to size.
    """
    return str(value if value is not None else "")[:size].ljust(size)


def join_values(posted: PostedFragments, breakdown: Breakdown) -> str:
    """Convert posted fragments into a single stored value.

    ``posted`` may be:

    - a mapping keyed by segment position (int or digit string), which is
      how the edit form names its inputs;
    - a sequence as long as the breakdown, read positionally;
    - any other sequence, read as one value per editable segment in order;
    - a plain string or any other scalar, used as the first fragment.

    Missing entries count as empty strings.

    Args:
        posted: Posted fragments
        breakdown: Compiled mask

    Returns:
        Canonical value, exactly as long as the mask
    """
    lookup = _fragment_lookup(posted, breakdown)
    parts: list[str] = []
    typed_index = 0

    for position, segment in enumerate(breakdown):
        if segment.is_literal:
            parts.append(segment.display_mask)
        else:
            parts.append(pad(segment.kind, segment.length, lookup(position, typed_index)))
            typed_index += 1

    return "".join(parts)


def _fragment_lookup(posted: PostedFragments, breakdown: Breakdown):
    if posted is None:
        return lambda position, typed_index: ""

    if isinstance(posted, str) or not isinstance(posted, (Mapping, Sequence)):
        posted = [posted]

    if isinstance(posted, Mapping):

        def by_key(position: int, typed_index: int) -> Any:
            if position in posted:
                return posted[position]
            return posted.get(str(position), "")

        return by_key

    if len(posted) == len(breakdown):
        return lambda position, typed_index: posted[position]

    return lambda position, typed_index: (
        posted[typed_index] if typed_index < len(posted) else ""
    )
