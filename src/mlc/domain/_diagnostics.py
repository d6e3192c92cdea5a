"""
Diagnostic side channel contracts.

Failures inside the runtime are reported twice: once to the caller through
the returned :class:`Result`, and once to an optional diagnostic sink. The
sink is injected per call so tests can capture exactly what was emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ._errors import ErrorKind


@dataclass(frozen=True)
class Diagnostic:
    """
    A single diagnostic record.

    Attributes
    ----------
    kind : ErrorKind
        Failure category that triggered the record.
    operation : str
        Name of the operation that failed (e.g. ``"vector_add"``).
    message : str
        Human-readable description.
    """

    kind: ErrorKind
    operation: str
    message: str

    def __str__(self) -> str:
        return f"{self.operation}: {self.message}"


@runtime_checkable
class DiagnosticSink(Protocol):
    """
    Callable receiving diagnostics.

    Any callable accepting a single :class:`Diagnostic` satisfies this
    protocol, e.g. ``records.append``.
    """

    def __call__(self, diagnostic: Diagnostic) -> None: ...
