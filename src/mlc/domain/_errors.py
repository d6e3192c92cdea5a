"""
Error taxonomy for MLC.

This module defines the four failure categories recognized by the array
runtime and one exception class per category. Core operations do not raise
these exceptions directly; they are stored inside a :class:`Result` and only
raised when the caller asks for it via ``Result.unwrap()``.

Categories
----------
- ``INVALID_ARGUMENT``   : absent inputs, zero rank, zero-sized dimensions.
- ``SHAPE_MISMATCH``     : operand sizes disagree in a binary operation.
- ``RESOURCE_EXHAUSTED`` : allocation or growth failed.
- ``MALFORMED_SOURCE``   : unreadable file, empty file, ragged CSV rows.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """
    Enumeration of failure categories.

    Callers branch on this value instead of on a single opaque status code.
    """

    INVALID_ARGUMENT = "invalid_argument"
    SHAPE_MISMATCH = "shape_mismatch"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    MALFORMED_SOURCE = "malformed_source"


class MlcError(RuntimeError):
    """
    Base class for all MLC runtime errors.

    Attributes
    ----------
    kind : ErrorKind
        Failure category of this error.
    """

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(MlcError):
    """
    Raised (or reported) when an input is absent or structurally invalid.

    Examples include a ``None`` buffer, ``rank == 0``, a zero shape entry,
    or an array that has already been released.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class ShapeMismatchError(MlcError):
    """
    Raised (or reported) when operands of a binary operation disagree in size.

    Attributes
    ----------
    size_a : int
        Element count of the first operand.
    size_b : int
        Element count of the disagreeing operand.
    """

    kind = ErrorKind.SHAPE_MISMATCH

    def __init__(self, size_a: int, size_b: int) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        size_a : int
            Element count of the first operand.
        size_b : int
            Element count of the operand that does not match.
        """
        super().__init__(f"Size mismatch: {size_a} vs {size_b}.")
        self.size_a = size_a
        self.size_b = size_b


class ResourceExhaustedError(MlcError):
    """
    Raised (or reported) when storage for an array could not be allocated.
    """

    kind = ErrorKind.RESOURCE_EXHAUSTED


class MalformedSourceError(MlcError):
    """
    Raised (or reported) when tabular source data cannot be turned into an array.

    Attributes
    ----------
    source : str
        Path (or other description) of the offending source.
    line : Optional[int]
        1-based line number of the offending record, when known.
    """

    kind = ErrorKind.MALFORMED_SOURCE

    def __init__(self, message: str, source: str = "", line: Optional[int] = None):
        where = source if line is None else f"{source}:{line}"
        super().__init__(f"{where}: {message}" if where else message)
        self.source = source
        self.line = line
