"""Logging helpers for AstroResonance entry points."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging"]

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: str | int | None, default: int) -> int:
    """Return a logging level derived from ``value``.

    Accepts standard level names (case insensitive) or numeric levels.
    Anything unrecognised resolves to ``default``.
    """

    if value is None:
        return default

    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        return default

    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    if isinstance(resolved, int):
        return resolved

    return default


def configure_logging(
    *, level: str | int | None = None, default: int = logging.WARNING, **kwargs: Any
) -> int:
    """Configure the root logger for the command line interface.

    Parameters
    ----------
    level:
        Optional level override. When omitted the ``LOG_LEVEL`` environment
        variable is consulted, then ``default``. Reports go to stdout, so the
        default keeps diagnostic chatter out of them.
    kwargs:
        Forwarded to :func:`logging.basicConfig`.

    Returns
    -------
    int
        The effective level applied to the root logger.
    """

    raw = os.environ.get("LOG_LEVEL") if level is None else level
    effective_level = _coerce_level(raw, default)

    logging.basicConfig(
        level=effective_level,
        format=kwargs.pop("format", _DEFAULT_FORMAT),
        datefmt=kwargs.pop("datefmt", _DEFAULT_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )

    return effective_level
