"""
NumPy-backed numeric array.

This module provides `NumericArray`, the concrete implementation of the
domain-level `INumericArray` protocol, `validate_shape`, the shape check
shared with ingestion, and `is_usable`, the validation predicate every
operation runs before touching an array.

Design notes
------------
- Storage is a flat, C-contiguous ``float32`` ndarray owned by the array.
  The constructor copies its input, so in-place operations never reach the
  caller's buffer. Multi-dimensional copies are produced on demand via
  `to_numpy`.
- The constructor is the only place where the shape/size invariants are
  established. Everything afterwards goes through read-only properties, so
  the element count can never drift from the shape.
- `release` drops both buffers and turns the array into the invalid
  sentinel. Releasing twice is harmless.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np
from typing_extensions import Self

from ..domain._array import INumericArray
from ..domain._errors import InvalidArgumentError

DTYPE = np.dtype(np.float32)
"""Internal element type of every NumericArray."""


def validate_shape(shape: Any) -> tuple[int, ...]:
    """
    Check per-axis extents and return them as a tuple of Python ints.

    Parameters
    ----------
    shape : Any
        Sequence of extents. Entries must be ``int`` or NumPy integers;
        booleans and floats are rejected rather than truncated.

    Returns
    -------
    tuple[int, ...]
        The validated extents.

    Raises
    ------
    InvalidArgumentError
        If ``shape`` is missing, empty, not iterable, or holds a non-integer,
        zero or negative entry.
    """
    if shape is None:
        raise InvalidArgumentError("Shape is missing")
    try:
        entries = tuple(shape)
    except TypeError as exc:
        raise InvalidArgumentError(f"Shape is not a sequence: {exc}") from exc
    if len(entries) == 0:
        raise InvalidArgumentError("Shape must have at least one axis")

    dims = []
    for d in entries:
        if isinstance(d, (bool, np.bool_)) or not isinstance(d, (int, np.integer)):
            raise InvalidArgumentError(f"Shape entries must be integers, got {d!r}")
        if d == 0:
            raise InvalidArgumentError("Zero dimension in shape")
        if d < 0:
            raise InvalidArgumentError(f"Negative dimension {d} in shape")
        dims.append(int(d))
    return tuple(dims)


class NumericArray(INumericArray):
    """
    Owned, shape-tagged, single-precision array.

    Parameters
    ----------
    data : np.ndarray
        Element buffer. It is flattened and copied into a new contiguous
        ``float32`` buffer that the array owns.
    shape : Sequence[int]
        Per-axis extents. Every entry must be a positive integer and their
        product must equal the number of elements in ``data``.
    copy : bool, default=True
        When False, a buffer that is already flat, contiguous ``float32`` is
        adopted without copying. Only pass False for a buffer nobody else
        holds, such as one just allocated by ingestion.

    Raises
    ------
    InvalidArgumentError
        If ``shape`` is invalid (see `validate_shape`) or disagrees with the
        number of elements in ``data``.

    Notes
    -----
    Arrays are normally produced by ingestion (`array_from_buffer`,
    `read_csv`) rather than built directly.
    """

    __slots__ = ("_data", "_shape", "_size")

    def __init__(
        self, data: np.ndarray, shape: Sequence[int], *, copy: bool = True
    ) -> None:
        dims = validate_shape(shape)

        if copy:
            flat = np.array(data, dtype=DTYPE, order="C").reshape(-1)
        else:
            flat = np.ascontiguousarray(data, dtype=DTYPE).reshape(-1)
        size = int(np.prod(dims, dtype=np.int64))
        if flat.size != size:
            raise InvalidArgumentError(
                f"Data holds {flat.size} elements but shape {dims} requires {size}"
            )

        self._data: Optional[np.ndarray] = flat
        self._shape: tuple[int, ...] = dims
        self._size: int = size

    @classmethod
    def invalid(cls) -> Self:
        """
        Return the invalid/empty sentinel array.

        Returns
        -------
        NumericArray
            An array with no data, rank 0 and size 0.
        """
        arr = cls.__new__(cls)
        arr._data = None
        arr._shape = ()
        arr._size = 0
        return arr

    @property
    def data(self) -> Optional[np.ndarray]:
        """
        Flat element buffer.

        Returns
        -------
        Optional[np.ndarray]
            The owned 1-D ``float32`` buffer, or None once released. Values may
            be modified in place; the length is fixed.
        """
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return self._size

    def release(self) -> None:
        """
        Free the data and shape buffers and reset to the invalid sentinel.
        """
        self._data = None
        self._shape = ()
        self._size = 0

    def is_usable(self) -> bool:
        """Return True if this array holds data and is non-empty."""
        return is_usable(self)

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the elements laid out in ``shape``.

        Raises
        ------
        InvalidArgumentError
            If the array has been released or is the invalid sentinel.
        """
        if not is_usable(self):
            raise InvalidArgumentError("Cannot read an invalid or released array")
        assert self._data is not None
        return self._data.reshape(self._shape).copy()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        if self._data is None:
            return "NumericArray(<invalid>)"
        return f"NumericArray(shape={self._shape}, size={self._size})"


def is_usable(array: Optional[INumericArray]) -> bool:
    """
    Validation predicate shared by every operation.

    Parameters
    ----------
    array : Optional[INumericArray]
        Array to check.

    Returns
    -------
    bool
        True iff ``array`` is not None, its data is not None, and its size is
        nonzero.
    """
    return array is not None and array.data is not None and array.size != 0
