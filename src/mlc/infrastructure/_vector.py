"""
Vector algebra over NumericArrays.

These operations treat arrays as flat vectors: only the element count has to
agree, the shapes themselves are not compared. Results are written into a
caller-supplied destination array of the same size; nothing is allocated.

Every operand is validated before any write, so a failed call leaves the
destination exactly as it was.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..domain._diagnostics import DiagnosticSink
from ..domain._errors import InvalidArgumentError, MlcError, ShapeMismatchError
from ..domain._result import Result
from ._array import NumericArray, is_usable
from ._diagnostics import fail


def _check_operands(*arrays: Optional[NumericArray]) -> Optional[MlcError]:
    """
    Validate that all operands are usable and share one element count.

    Returns
    -------
    Optional[MlcError]
        None if the operands are valid, otherwise the first problem found.
    """
    for arr in arrays:
        if not is_usable(arr):
            return InvalidArgumentError("Vectors are None or size of vectors is 0")

    size = arrays[0].size
    for arr in arrays[1:]:
        if arr.size != size:
            return ShapeMismatchError(size, arr.size)
    return None


def vector_add(
    a: Optional[NumericArray],
    b: Optional[NumericArray],
    result: Optional[NumericArray],
    *,
    sink: Optional[DiagnosticSink] = None,
) -> Result[None]:
    """
    Elementwise addition.

        result[i] = a[i] + b[i]
    """
    err = _check_operands(a, b, result)
    if err is not None:
        return fail(sink, "vector_add", err)
    np.add(a.data, b.data, out=result.data)
    return Result.success()


def vector_sub(
    a: Optional[NumericArray],
    b: Optional[NumericArray],
    result: Optional[NumericArray],
    *,
    sink: Optional[DiagnosticSink] = None,
) -> Result[None]:
    """
    Elementwise subtraction.

        result[i] = a[i] - b[i]
    """
    err = _check_operands(a, b, result)
    if err is not None:
        return fail(sink, "vector_sub", err)
    np.subtract(a.data, b.data, out=result.data)
    return Result.success()


def vector_dot(
    a: Optional[NumericArray],
    b: Optional[NumericArray],
    *,
    sink: Optional[DiagnosticSink] = None,
) -> Result[float]:
    """
    Dot product.

        dot(a, b) = sum(a[i] * b[i])

    The sum is accumulated in float64.

    Returns
    -------
    Result[float]
        The scalar on success. Failures are reported through the result's
        error, so a legitimate value of -1.0 is never ambiguous.
    """
    err = _check_operands(a, b)
    if err is not None:
        return fail(sink, "vector_dot", err)
    value = np.dot(a.data.astype(np.float64), b.data.astype(np.float64))
    return Result.success(float(value))


def vector_scale(
    a: Optional[NumericArray],
    k: float,
    result: Optional[NumericArray],
    *,
    sink: Optional[DiagnosticSink] = None,
) -> Result[None]:
    """
    Scalar multiplication.

        result[i] = k * a[i]
    """
    err = _check_operands(a, result)
    if err is not None:
        return fail(sink, "vector_scale", err)
    np.multiply(a.data, np.float32(k), out=result.data)
    return Result.success()
