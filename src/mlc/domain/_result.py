"""
Explicit result type for fallible MLC operations.

Every operation in the runtime returns a :class:`Result` instead of a magic
status code or an in-band sentinel value. A result either carries a value
(success) or an :class:`MlcError` (failure). On failure, ingestion results
still carry the invalid array sentinel as their value so that callers which
only inspect the array keep working.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ._errors import ErrorKind, MlcError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a fallible operation.

    Attributes
    ----------
    value : Optional[T]
        Payload of the operation. ``None`` for operations that only report
        status, or the invalid sentinel for failed ingestion.
    error : Optional[MlcError]
        The failure, or ``None`` on success.
    """

    value: Optional[T] = None
    error: Optional[MlcError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: MlcError, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value, error=error)

    @property
    def ok(self) -> bool:
        """True when the operation succeeded."""
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Failure category, or ``None`` on success."""
        return None if self.error is None else self.error.kind

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises
        ------
        MlcError
            The stored error, if the operation failed.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
