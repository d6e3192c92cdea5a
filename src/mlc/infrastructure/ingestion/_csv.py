"""
Tabular (CSV) ingestion.

`read_csv` streams a delimited text file into a 2-D `NumericArray` in a
single pass. The parsing itself lives in `parse_rows`, a generator from
lines to row vectors that knows nothing about storage. Rows are appended to
a `GrowableBuffer` that starts at a configurable capacity and doubles when
full, and is trimmed to exactly ``rows * cols`` elements at the end.

Rules
-----
- The column count is fixed by the first non-empty line.
- Blank lines (empty, whitespace only, or a bare line terminator) are
  skipped and are not counted as rows.
- Every field must be a plain decimal number: optional sign, digits with an
  optional fraction, and an optional exponent (``-1.5``, ``.5``, ``2e-3``).
  Surrounding spaces are allowed. ``nan``, ``inf``, hexadecimal and
  underscore-grouped digits are rejected.
- A UTF-8 byte order mark at the start of the file is ignored.
- Any failure discards everything read so far; callers receive the invalid
  sentinel and never a partial array.
"""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, List, Optional, Union

from ...domain._diagnostics import DiagnosticSink
from ...domain._errors import (
    InvalidArgumentError,
    MalformedSourceError,
    MlcError,
    ResourceExhaustedError,
)
from ...domain._result import Result
from .._array import NumericArray
from .._config import RuntimeConfig
from .._diagnostics import fail, logger
from ._growable import GrowableBuffer

_OP = "read_csv"

_DECIMAL = re.compile(
    r"[ \t]*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[ \t]*", re.ASCII
)

PathLike = Union[str, "os.PathLike[str]"]


def _parse_field(field: str) -> float:
    if _DECIMAL.fullmatch(field) is None:
        raise ValueError(f"not a decimal number: {field!r}")
    return float(field)


def parse_rows(
    lines: Iterable[str], delimiter: str = ",", *, source: str = "<lines>"
) -> Iterator[List[float]]:
    """
    Parse delimited lines into rows of floats.

    Parameters
    ----------
    lines : Iterable[str]
        Input lines, with or without trailing line terminators.
    delimiter : str, default=","
        Field separator.
    source : str
        Description of the input used in error messages.

    Yields
    ------
    List[float]
        One list per non-empty line, all of the same length.

    Raises
    ------
    MalformedSourceError
        If a field is not a decimal float, or a row's column count differs
        from the first row's.
    """
    cols: Optional[int] = None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        fields = line.split(delimiter)
        try:
            row = [_parse_field(f) for f in fields]
        except ValueError as exc:
            raise MalformedSourceError(
                f"Non-numeric field ({exc})", source=source, line=lineno
            ) from exc

        if cols is None:
            cols = len(row)
        elif len(row) != cols:
            raise MalformedSourceError(
                f"Expected {cols} columns, found {len(row)}",
                source=source,
                line=lineno,
            )
        yield row


def read_csv(
    path: PathLike,
    *,
    delimiter: Optional[str] = None,
    config: Optional[RuntimeConfig] = None,
    sink: Optional[DiagnosticSink] = None,
) -> Result[NumericArray]:
    """
    Read a delimited text file into a 2-D `NumericArray` (rows x cols).

    Parameters
    ----------
    path : PathLike
        File to read.
    delimiter : Optional[str]
        Field separator. Defaults to ``config.csv_delimiter``.
    config : Optional[RuntimeConfig]
        Runtime configuration; defaults to ``RuntimeConfig()``.
    sink : Optional[DiagnosticSink]
        Diagnostic sink for failures.

    Returns
    -------
    Result[NumericArray]
        The array on success. On failure the result carries a
        MALFORMED_SOURCE or RESOURCE_EXHAUSTED error (INVALID_ARGUMENT for a
        missing path or a bad delimiter) and the invalid sentinel.
    """
    cfg = config or RuntimeConfig()
    sep = cfg.csv_delimiter if delimiter is None else delimiter
    source = "<none>" if path is None else str(path)

    try:
        if path is None:
            raise InvalidArgumentError("Path is missing")
        source = os.fspath(path)
        if not isinstance(sep, str) or len(sep) != 1 or sep in "\r\n":
            raise InvalidArgumentError(f"Invalid delimiter {sep!r}")

        try:
            fh = open(source, "r", encoding="utf-8-sig", newline="")
        except OSError as exc:
            raise MalformedSourceError(
                f"Cannot open file ({exc.strerror or exc})", source=source
            ) from exc

        rows = 0
        cols = 0
        with fh:
            try:
                buf = GrowableBuffer(cfg.csv_initial_capacity)
                for row in parse_rows(fh, sep, source=source):
                    buf.append_row(row)
                    rows += 1
                    cols = len(row)
            except MemoryError as exc:
                raise ResourceExhaustedError(
                    f"Out of memory after {rows} rows of {source}"
                ) from exc
            except (OSError, UnicodeDecodeError) as exc:
                raise MalformedSourceError(
                    f"Cannot read file ({exc})", source=source
                ) from exc

        if rows == 0 or cols == 0:
            raise MalformedSourceError("No data rows", source=source)

        logger.debug(
            "read_csv %s: %d x %d (capacity %d)", source, rows, cols, buf.capacity
        )
        return Result.success(NumericArray(buf.trimmed(), (rows, cols), copy=False))
    except MlcError as exc:
        return fail(sink, _OP, exc, NumericArray.invalid())
