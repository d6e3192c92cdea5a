"""
MLC: a minimal numeric-array runtime for elementwise ML primitives.

Typical use
-----------
    import mlc

    x = mlc.array_from_buffer([1, -2, 3], 1, (3,), mlc.DataType.INT).unwrap()
    mlc.relu(x)
    y = mlc.read_csv("data.csv").unwrap()
    mlc.softmax(y)
    y.release()
"""

from .domain import (
    DataType,
    Diagnostic,
    DiagnosticSink,
    ErrorKind,
    INumericArray,
    InvalidArgumentError,
    MalformedSourceError,
    MlcError,
    ResourceExhaustedError,
    Result,
    ShapeMismatchError,
)
from .infrastructure._array import NumericArray, is_usable
from .infrastructure._config import RuntimeConfig, configure_logging
from .infrastructure._function import (
    leaky_relu,
    relu,
    sigmoid,
    softmax,
    swish,
    tanh,
)
from .infrastructure._vector import vector_add, vector_dot, vector_scale, vector_sub
from .infrastructure.ingestion import (
    GrowableBuffer,
    array_from_buffer,
    array_from_numpy,
    parse_rows,
    read_csv,
)

__version__ = "0.1.0"

__all__ = [
    "DataType",
    "Diagnostic",
    "DiagnosticSink",
    "ErrorKind",
    "INumericArray",
    "InvalidArgumentError",
    "MalformedSourceError",
    "MlcError",
    "ResourceExhaustedError",
    "Result",
    "ShapeMismatchError",
    "NumericArray",
    "is_usable",
    "RuntimeConfig",
    "configure_logging",
    "relu",
    "sigmoid",
    "tanh",
    "leaky_relu",
    "swish",
    "softmax",
    "vector_add",
    "vector_sub",
    "vector_dot",
    "vector_scale",
    "GrowableBuffer",
    "array_from_buffer",
    "array_from_numpy",
    "parse_rows",
    "read_csv",
]
