"""
Diagnostic emission helpers.

Operations report each failure to a `DiagnosticSink`. When the caller does
not inject one, the failure goes to the ``mlc`` logger at DEBUG level, which
is silent unless the application (or `configure_logging`) enables it.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from ..domain._diagnostics import Diagnostic, DiagnosticSink
from ..domain._errors import MlcError
from ..domain._result import Result

LOGGER_NAME = "mlc"

logger = logging.getLogger(LOGGER_NAME)

T = TypeVar("T")


def logging_sink(diagnostic: Diagnostic) -> None:
    """Default sink: forward the diagnostic to the ``mlc`` logger."""
    logger.debug("%s", diagnostic)


def emit(
    sink: Optional[DiagnosticSink], operation: str, error: MlcError
) -> Diagnostic:
    """
    Build a `Diagnostic` for ``error`` and hand it to ``sink``.

    Parameters
    ----------
    sink : Optional[DiagnosticSink]
        Injected sink, or None to use `logging_sink`.
    operation : str
        Name of the failing operation.
    error : MlcError
        The failure being reported.

    Returns
    -------
    Diagnostic
        The emitted record.
    """
    diagnostic = Diagnostic(kind=error.kind, operation=operation, message=str(error))
    (sink or logging_sink)(diagnostic)
    return diagnostic


def fail(
    sink: Optional[DiagnosticSink],
    operation: str,
    error: MlcError,
    value: Optional[T] = None,
) -> Result[T]:
    """Emit ``error`` and wrap it in a failed `Result`."""
    emit(sink, operation, error)
    return Result.failure(error, value=value)
