"""Compiled breakdown cache."""

import logging
import threading

from fieldmask.mask.compiler import Breakdown, compile_mask

logger = logging.getLogger(__name__)


class BreakdownCache:
    """Write-once cache for the compiled breakdown of one mask.

    The breakdown is compiled on first access and kept for the lifetime of
    the cache. Readers after the first population never take the lock.
    """

    def __init__(self, mask: str) -> None:
        """Initialize cache.

        Args:
            mask: Format mask to compile lazily
        """
        self._mask = mask
        self._breakdown: Breakdown | None = None
        self._lock = threading.Lock()

    @property
    def mask(self) -> str:
        """Mask this cache compiles."""
        return self._mask

    @property
    def is_populated(self) -> bool:
        """True once the breakdown has been compiled."""
        return self._breakdown is not None

    def get(self) -> Breakdown:
        """Get the compiled breakdown, compiling it on first use.

        Returns:
            Compiled breakdown
        """
        breakdown = self._breakdown
        if breakdown is not None:
            return breakdown

        with self._lock:
            if self._breakdown is None:
                logger.debug(f"Populating breakdown cache for mask {self._mask!r}")
                self._breakdown = compile_mask(self._mask)
            return self._breakdown
