"""
vector.py
~~~~~~~~~

Fixed-length, bounds-checked container of real numbers.

Entries live in a numpy float64 array that is allocated once and never
resized. Reads and writes outside ``[0, length)`` are not fatal: they are
logged and either return :data:`ABSENT` or leave the vector untouched.
"""

import logging
import math
from typing import Any, List, Optional

import numpy as np

logger = logging.getLogger(__name__)

# Marks "no value": out-of-bounds reads and cleared activations.
# Not a valid activation and never equal to 0.
ABSENT = float('nan')


def is_absent(value: Any) -> bool:
    """Return True if ``value`` is the :data:`ABSENT` sentinel."""
    try:
        return math.isnan(value)
    except TypeError:
        return False


def to_int(value: Any) -> Optional[int]:
    """
    Truncate ``value`` toward zero and wrap it into the signed 32-bit range.

    Args:
        value: Number (or numeric string) to truncate

    Returns:
        The truncated integer, or None if ``value`` has no integer form
    """
    try:
        integer = int(value)
    except (TypeError, ValueError, OverflowError):
        return None

    return (integer + 2 ** 31) % 2 ** 32 - 2 ** 31


class Vector:
    """
    Ordered sequence of real numbers with a fixed length.

    The requested length is truncated to an integer and clamped to a
    minimum of 0. Entries are unspecified until written.
    """

    def __init__(self, entry_count: Any):
        count = to_int(entry_count)
        if count is None or count < 0:
            count = 0

        self._entries = np.empty(count, dtype=np.float64)

    def _index(self, entry_index: Any) -> Optional[int]:
        index = to_int(entry_index)

        if index is None or index < 0 or index >= len(self._entries):
            logger.error(f"Vector index ({entry_index}) out of bounds")
            return None

        return index

    def get(self, entry_index: Any) -> float:
        """Return the entry at ``entry_index``, or ABSENT when out of bounds."""
        index = self._index(entry_index)
        if index is None:
            return ABSENT

        return float(self._entries[index])

    def set(self, entry_index: Any, value: float) -> bool:
        """
        Store ``value`` at ``entry_index``.

        Returns:
            bool: True if stored, False if the index was out of bounds
        """
        index = self._index(entry_index)
        if index is None:
            return False

        self._entries[index] = value
        return True

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def array(self) -> np.ndarray:
        """Backing storage, for bulk in-place arithmetic."""
        return self._entries

    def snapshot(self) -> List[float]:
        """Return an independent copy of all entries in index order."""
        return self._entries.tolist()

    def __repr__(self) -> str:
        return f"Vector({self.snapshot()})"
