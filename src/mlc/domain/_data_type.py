"""
Source element types accepted by typed buffer ingestion.

The enum values are the canonical little-endian dtype names so that the
infrastructure layer can map them to a backend dtype without the domain
layer importing NumPy.
"""

from enum import Enum


class DataType(Enum):
    """
    Element type of a caller-supplied buffer.

    Attributes
    ----------
    INT : DataType
        32-bit signed integer.
    FLOAT : DataType
        32-bit IEEE-754 float.
    DOUBLE : DataType
        64-bit IEEE-754 float.
    """

    INT = "int32"
    FLOAT = "float32"
    DOUBLE = "float64"
