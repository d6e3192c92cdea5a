"""
Backend-agnostic contracts for MLC.

Nothing in this package imports NumPy; concrete implementations live in
``mlc.infrastructure``.
"""

from ._errors import (
    ErrorKind,
    MlcError,
    InvalidArgumentError,
    ShapeMismatchError,
    ResourceExhaustedError,
    MalformedSourceError,
)
from ._result import Result
from ._data_type import DataType
from ._array import INumericArray
from ._diagnostics import Diagnostic, DiagnosticSink

__all__ = [
    ErrorKind.__name__,
    MlcError.__name__,
    InvalidArgumentError.__name__,
    ShapeMismatchError.__name__,
    ResourceExhaustedError.__name__,
    MalformedSourceError.__name__,
    Result.__name__,
    DataType.__name__,
    INumericArray.__name__,
    Diagnostic.__name__,
    DiagnosticSink.__name__,
]
