"""
In-place elementwise activation functions.

Every function in this module takes a `NumericArray`, overwrites its values
with the activated values, and returns a `Result[None]`. No new array is
allocated; the shape and size are left untouched.

All functions operate on the flat element stream, except `softmax`, which
normalizes contiguous groups along the last axis.

Notes
-----
- Each function validates its input with `is_usable` first. An invalid
  array produces an INVALID_ARGUMENT result and is never read or written.
- Overflow in intermediate exponentials is expected for large-magnitude
  inputs and saturates cleanly, so NumPy's overflow warnings are silenced
  where it occurs.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..domain._diagnostics import DiagnosticSink
from ..domain._errors import InvalidArgumentError
from ..domain._result import Result
from ._array import NumericArray, is_usable
from ._diagnostics import fail


def _reject(op: str, sink: Optional[DiagnosticSink]) -> Result[None]:
    return fail(sink, op, InvalidArgumentError("`array` is None or empty"))


def _sigmoid_np(x: np.ndarray) -> np.ndarray:
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp(-x))


def relu(
    array: Optional[NumericArray], *, sink: Optional[DiagnosticSink] = None
) -> Result[None]:
    """
    Rectified linear unit, in place.

        relu(x) = x if x > 0 else 0

    Returns
    -------
    Result[None]
        Success, or INVALID_ARGUMENT for an unusable array.
    """
    if not is_usable(array):
        return _reject("relu", sink)
    x = array.data
    x[...] = np.where(x > 0, x, np.float32(0.0))
    return Result.success()


def sigmoid(
    array: Optional[NumericArray], *, sink: Optional[DiagnosticSink] = None
) -> Result[None]:
    """
    Logistic sigmoid, in place.

        sigmoid(x) = 1 / (1 + exp(-x))
    """
    if not is_usable(array):
        return _reject("sigmoid", sink)
    x = array.data
    x[...] = _sigmoid_np(x)
    return Result.success()


def tanh(
    array: Optional[NumericArray], *, sink: Optional[DiagnosticSink] = None
) -> Result[None]:
    """
    Hyperbolic tangent, in place.

        tanh(x) = (exp(x) - exp(-x)) / (exp(x) + exp(-x))

    Evaluated with ``np.tanh``, which stays finite where the quotient above
    would become inf / inf.
    """
    if not is_usable(array):
        return _reject("tanh", sink)
    np.tanh(array.data, out=array.data)
    return Result.success()


def leaky_relu(
    array: Optional[NumericArray],
    alpha: float = 0.01,
    *,
    sink: Optional[DiagnosticSink] = None,
) -> Result[None]:
    """
    Leaky rectified linear unit, in place.

        f(x) = x          if x > 0
             = alpha * x  otherwise

    Parameters
    ----------
    array : Optional[NumericArray]
        Array to activate.
    alpha : float, default=0.01
        Slope applied to non-positive inputs.
    """
    if not is_usable(array):
        return _reject("leaky_relu", sink)
    x = array.data
    x[...] = np.where(x > 0, x, np.float32(alpha) * x)
    return Result.success()


def swish(
    array: Optional[NumericArray], *, sink: Optional[DiagnosticSink] = None
) -> Result[None]:
    """
    Swish (SiLU), in place.

        swish(x) = x * sigmoid(x)
    """
    if not is_usable(array):
        return _reject("swish", sink)
    x = array.data
    x[...] = x * _sigmoid_np(x)
    return Result.success()


def softmax(
    array: Optional[NumericArray], *, sink: Optional[DiagnosticSink] = None
) -> Result[None]:
    """
    Numerically stable softmax along the last axis, in place.

    The flat buffer is split into ``size / shape[-1]`` contiguous groups of
    ``shape[-1]`` elements (a rank-1 array is a single group). Each group is
    normalized on its own:

    1. subtract the group maximum,
    2. exponentiate and sum,
    3. divide by the sum.

    Step 1 keeps ``exp`` from overflowing for large inputs and makes the
    result invariant to adding a constant to every element of a group.

    Returns
    -------
    Result[None]
        Success, or INVALID_ARGUMENT for an unusable array.
    """
    if not is_usable(array):
        return _reject("softmax", sink)

    groups = array.data.reshape(-1, array.shape[-1])
    groups -= groups.max(axis=1, keepdims=True)
    np.exp(groups, out=groups)
    groups /= groups.sum(axis=1, keepdims=True, dtype=np.float64).astype(np.float32)
    return Result.success()
