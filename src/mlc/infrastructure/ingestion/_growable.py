"""
Amortized-doubling float storage used by CSV ingestion.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .._array import DTYPE


class GrowableBuffer:
    """
    Append-only float32 buffer that doubles its capacity when full.

    Parameters
    ----------
    initial_capacity : int
        Number of elements allocated up front. Must be positive.

    Raises
    ------
    ValueError
        If ``initial_capacity`` is not positive.
    MemoryError
        If the initial allocation or a later doubling fails.
    """

    __slots__ = ("_buf", "_len")

    def __init__(self, initial_capacity: int) -> None:
        if int(initial_capacity) <= 0:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        self._buf = np.empty(int(initial_capacity), dtype=DTYPE)
        self._len = 0

    @property
    def capacity(self) -> int:
        return int(self._buf.size)

    def __len__(self) -> int:
        return self._len

    def _grow(self, needed: int) -> None:
        cap = self.capacity
        while cap < needed:
            cap *= 2
        grown = np.empty(cap, dtype=DTYPE)
        grown[: self._len] = self._buf[: self._len]
        self._buf = grown

    def append_row(self, values: Sequence[float]) -> None:
        """
        Append ``values`` at the end of the buffer, growing it if needed.
        """
        n = len(values)
        end = self._len + n
        if end > self.capacity:
            self._grow(end)
        self._buf[self._len : end] = values
        self._len = end

    def trimmed(self) -> np.ndarray:
        """
        Return an owned copy holding exactly ``len(self)`` elements.
        """
        return self._buf[: self._len].copy()
