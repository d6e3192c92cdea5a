"""
Typed buffer ingestion.

Converts a caller-supplied buffer of 32-bit integers, 32-bit floats or
64-bit floats, plus a rank and shape, into a freshly allocated
`NumericArray`.

Buffer handling
---------------
- Bytes-like objects (``bytes``, ``bytearray``, ``memoryview``,
  ``array.array``) are treated as untyped memory and reinterpreted as the
  declared `DataType`.
- NumPy arrays and Python sequences (lists, tuples) are converted value by
  value through the declared `DataType`.

In both cases only the first ``prod(shape)`` elements are read; the buffer
must hold at least that many. The cast to float32 performs no range checks.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from ...domain._data_type import DataType
from ...domain._diagnostics import DiagnosticSink
from ...domain._errors import (
    InvalidArgumentError,
    MlcError,
    ResourceExhaustedError,
)
from ...domain._result import Result
from .._array import DTYPE, NumericArray, validate_shape
from .._diagnostics import fail

_OP = "array_from_buffer"


def _validate_shape(rank: int, shape: Optional[Sequence[int]]) -> tuple[int, ...]:
    if not isinstance(rank, (int, np.integer)) or isinstance(rank, bool):
        raise InvalidArgumentError(f"Rank must be an integer, got {rank!r}")
    if rank == 0:
        raise InvalidArgumentError("Rank must be at least 1")

    dims = validate_shape(shape)
    if len(dims) != int(rank):
        raise InvalidArgumentError(f"Shape {dims} does not have rank {rank}")
    return dims


def _source_elements(buffer: Any, dtype: np.dtype, count: int) -> np.ndarray:
    """
    View the first ``count`` elements of ``buffer`` as ``dtype``.

    Raises
    ------
    InvalidArgumentError
        If the buffer is not readable as ``dtype`` or is too short.
    """
    if isinstance(buffer, (np.ndarray, list, tuple)):
        try:
            src = np.asarray(buffer, dtype=dtype).reshape(-1)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidArgumentError(
                f"Buffer is not convertible to {dtype}: {exc}"
            ) from exc
        available = src.size
    else:
        try:
            raw = memoryview(buffer).cast("B")
        except TypeError as exc:
            raise InvalidArgumentError(f"Object is not a readable buffer: {exc}") from exc
        available = raw.nbytes // dtype.itemsize
        src = None

    if available < count:
        raise InvalidArgumentError(
            f"Buffer holds {available} elements, shape requires {count}"
        )

    if src is None:
        return np.frombuffer(raw, dtype=dtype, count=count)
    return src[:count]


def array_from_buffer(
    buffer: Any,
    rank: int,
    shape: Optional[Sequence[int]],
    dtype: DataType,
    *,
    sink: Optional[DiagnosticSink] = None,
) -> Result[NumericArray]:
    """
    Convert a typed buffer into a `NumericArray`.

    Parameters
    ----------
    buffer : Any
        Source elements (see module notes). None is rejected.
    rank : int
        Number of axes; must be at least 1 and equal ``len(shape)``.
    shape : Optional[Sequence[int]]
        Per-axis extents; every entry must be positive.
    dtype : DataType
        Element type of ``buffer``.
    sink : Optional[DiagnosticSink]
        Diagnostic sink for failures.

    Returns
    -------
    Result[NumericArray]
        The new array on success. On failure the result carries an
        INVALID_ARGUMENT or RESOURCE_EXHAUSTED error and the invalid sentinel.
    """
    try:
        if buffer is None:
            raise InvalidArgumentError("Input buffer is missing")
        if not isinstance(dtype, DataType):
            raise InvalidArgumentError(f"Unsupported input type {dtype!r}")

        dims = _validate_shape(rank, shape)
        size = int(np.prod(dims, dtype=np.int64))
        src = _source_elements(buffer, np.dtype(dtype.value), size)

        try:
            data = np.empty(size, dtype=DTYPE)
        except (MemoryError, ValueError) as exc:
            raise ResourceExhaustedError(f"Cannot allocate {size} elements") from exc

        # out-of-range float64 values saturate to inf, no range checks
        with np.errstate(over="ignore"):
            data[...] = src
        return Result.success(NumericArray(data, dims, copy=False))
    except MlcError as exc:
        return fail(sink, _OP, exc, NumericArray.invalid())


def array_from_numpy(
    arr: np.ndarray, *, sink: Optional[DiagnosticSink] = None
) -> Result[NumericArray]:
    """
    Convert a NumPy array into a `NumericArray`, inferring shape and type.

    Integer and boolean arrays are ingested as `DataType.INT`, float32 arrays
    as `DataType.FLOAT`, and any other floating array as `DataType.DOUBLE`.
    A 0-d array is treated as shape ``(1,)``.
    """
    if arr is None:
        return array_from_buffer(None, 1, (1,), DataType.FLOAT, sink=sink)

    a = np.asarray(arr)
    if a.dtype.kind in "biu":
        dt = DataType.INT
    elif a.dtype == np.float32:
        dt = DataType.FLOAT
    else:
        dt = DataType.DOUBLE

    shape = a.shape if a.ndim > 0 else (1,)
    return array_from_buffer(a, len(shape), shape, dt, sink=sink)
