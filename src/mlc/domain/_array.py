"""
Numeric array interface definitions.

This module defines the domain-level interface for the runtime's single
entity, the shape-tagged numeric array, using structural typing. It allows
operations and tests to reason about arrays without depending on the
NumPy-backed implementation.

Notes
-----
- ``data`` is typed loosely (``Any``) to keep the domain layer free of
  backend imports; in the current backend it is a 1-D ``np.ndarray``.
- An array whose ``data`` is ``None`` or whose ``size`` is 0 is the invalid
  sentinel.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class INumericArray(Protocol):
    """
    Shape-tagged numeric array interface.

    Invariants
    ----------
    - ``len(shape) == rank``
    - every entry of ``shape`` is strictly positive
    - ``size`` is the product of ``shape``
    - ``len(data) == size`` whenever the array is valid
    """

    @property
    def data(self) -> Optional[Any]:
        """
        Return the flat element buffer, or ``None`` once released.

        Returns
        -------
        Optional[Any]
            Contiguous, mutable single-precision buffer of length ``size``.
        """
        ...

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the per-axis extents.

        Returns
        -------
        tuple[int, ...]
            Ordered extents, one per axis.
        """
        ...

    @property
    def rank(self) -> int:
        """Return the number of axes."""
        ...

    @property
    def size(self) -> int:
        """Return the total element count."""
        ...

    def release(self) -> None:
        """
        Drop the owned buffers and reset to the invalid sentinel.

        Calling this on an already released or invalid array is a no-op.
        """
        ...
