from ._typed_buffer import array_from_buffer, array_from_numpy
from ._growable import GrowableBuffer
from ._csv import parse_rows, read_csv

__all__ = [
    array_from_buffer.__name__,
    array_from_numpy.__name__,
    GrowableBuffer.__name__,
    parse_rows.__name__,
    read_csv.__name__,
]
