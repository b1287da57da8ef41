"""Exception hierarchy shared across AstroResonance modules."""

from __future__ import annotations

__all__ = [
    "AstroResonanceError",
    "InvalidInputError",
    "NotFoundError",
    "InvariantViolationError",
]


class AstroResonanceError(Exception):
    """Base class for errors raised by :mod:`astroresonance`."""


class InvalidInputError(AstroResonanceError, ValueError):
    """Raised when an argument cannot be used for the requested operation."""


class NotFoundError(AstroResonanceError, LookupError):
    """Raised when a point or chart is absent from the analysed set."""


class InvariantViolationError(AstroResonanceError, RuntimeError):
    """Raised when aggregation bookkeeping is inconsistent.

    This signals a programming error rather than bad input; results of the
    analysis that raised it must not be trusted.
    """
