"""
Runtime configuration for MLC.

`RuntimeConfig` gathers the few knobs the runtime exposes: whether
diagnostics are printed, and how CSV ingestion splits and grows its storage.
It exposes `get_config` / `from_config` so it can be stored or passed around
as plain JSON.

Environment variables
---------------------
- ``MLC_DEBUG``                : "1", "true", "yes" or "on" enables diagnostics.
- ``MLC_CSV_DELIMITER``        : single field delimiter character.
- ``MLC_CSV_INITIAL_CAPACITY`` : initial CSV storage capacity in elements.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from typing_extensions import Self

from ._diagnostics import LOGGER_NAME

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Immutable runtime configuration.

    Parameters
    ----------
    debug : bool, default=False
        When True, `configure_logging` routes diagnostics to stderr.
    csv_delimiter : str, default=","
        Field separator used by `read_csv`. Must be exactly one character.
    csv_initial_capacity : int, default=64
        Number of elements preallocated by `read_csv` before the first doubling.

    Raises
    ------
    ValueError
        If the delimiter is not a single character or the capacity is not
        positive.
    """

    debug: bool = False
    csv_delimiter: str = ","
    csv_initial_capacity: int = 64

    def __post_init__(self) -> None:
        if not isinstance(self.csv_delimiter, str) or len(self.csv_delimiter) != 1:
            raise ValueError(
                f"csv_delimiter must be a single character, got {self.csv_delimiter!r}"
            )
        if self.csv_delimiter in "\r\n":
            raise ValueError("csv_delimiter cannot be a line terminator")
        if int(self.csv_initial_capacity) <= 0:
            raise ValueError(
                f"csv_initial_capacity must be positive, got {self.csv_initial_capacity}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """
        Build a configuration from environment variables.

        Parameters
        ----------
        environ : Optional[Mapping[str, str]]
            Mapping to read from. Defaults to ``os.environ``.

        Returns
        -------
        RuntimeConfig
            Configuration with unset variables left at their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}
        if "MLC_DEBUG" in env:
            kwargs["debug"] = env["MLC_DEBUG"].strip().lower() in _TRUTHY
        if "MLC_CSV_DELIMITER" in env:
            kwargs["csv_delimiter"] = env["MLC_CSV_DELIMITER"]
        if "MLC_CSV_INITIAL_CAPACITY" in env:
            kwargs["csv_initial_capacity"] = int(env["MLC_CSV_INITIAL_CAPACITY"])
        return cls(**kwargs)

    def get_config(self) -> Dict[str, Any]:
        return {
            "debug": bool(self.debug),
            "csv_delimiter": self.csv_delimiter,
            "csv_initial_capacity": int(self.csv_initial_capacity),
        }

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> Self:
        return cls(
            debug=bool(cfg.get("debug", False)),
            csv_delimiter=str(cfg.get("csv_delimiter", ",")),
            csv_initial_capacity=int(cfg.get("csv_initial_capacity", 64)),
        )


def configure_logging(config: RuntimeConfig) -> logging.Logger:
    """
    Attach a stderr handler to the ``mlc`` logger when debugging is enabled.

    The handler prints each diagnostic as ``Error: <message>``. Calling this
    more than once does not stack handlers.

    Parameters
    ----------
    config : RuntimeConfig
        Active configuration.

    Returns
    -------
    logging.Logger
        The ``mlc`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    existing = [h for h in logger.handlers if getattr(h, "_mlc_handler", False)]

    if not config.debug:
        for h in existing:
            logger.removeHandler(h)
        return logger

    if not existing:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("Error: %(message)s"))
        handler._mlc_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
