"""
matrix.py
~~~~~~~~~

Fixed-size, bounds-checked 2-D container of real numbers.
"""

import logging
from typing import Any, Optional, Tuple

import numpy as np

from feedforward.vector import ABSENT, to_int

logger = logging.getLogger(__name__)


class Matrix:
    """
    Row-major ``rows x columns`` matrix.

    Both dimensions are truncated to integers and clamped to a minimum
    of 0. Entry ``(row, column)`` is stored at ``row * columns + column``.
    In a network, entry ``(r, c)`` is the weight from source node ``r`` to
    destination node ``c``.
    """

    def __init__(self, row_count: Any, column_count: Any):
        rows = to_int(row_count)
        columns = to_int(column_count)

        self._row_count = rows if rows is not None and rows > 0 else 0
        self._column_count = (
            columns if columns is not None and columns > 0 else 0
        )

        self._entries = np.empty(
            self._row_count * self._column_count, dtype=np.float64
        )

    def _index(self, row_index: Any, column_index: Any) -> Optional[int]:
        row = to_int(row_index)
        column = to_int(column_index)

        if (row is None or column is None
                or row < 0 or row >= self._row_count
                or column < 0 or column >= self._column_count):
            logger.error(
                f"Matrix index ({row_index},{column_index}) out of bounds"
            )
            return None

        return row * self._column_count + column

    def get(self, row_index: Any, column_index: Any) -> float:
        """Return the entry at ``(row, column)``, or ABSENT when out of bounds."""
        index = self._index(row_index, column_index)
        if index is None:
            return ABSENT

        return float(self._entries[index])

    def set(self, row_index: Any, column_index: Any, value: float) -> bool:
        """
        Store ``value`` at ``(row, column)``.

        Returns:
            bool: True if stored, False if the index was out of bounds
        """
        index = self._index(row_index, column_index)
        if index is None:
            return False

        self._entries[index] = value
        return True

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def array(self) -> np.ndarray:
        """Backing storage as a writable ``(rows, columns)`` view."""
        return self._entries.reshape(self._row_count, self._column_count)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._row_count, self._column_count)

    def __repr__(self) -> str:
        return f"Matrix({self._row_count}, {self._column_count})"
