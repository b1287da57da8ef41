"""Harmonic arithmetic: arcs, harmonic frames and factorisation.

A harmonic ``h`` divides the circle into ``h`` equal unit arcs of ``360 / h``
degrees. Two positions resonate in harmonic ``h`` when their separation lies
close to a whole number of such unit arcs. Multiplying every position by ``h``
(the "harmonic chart") turns that condition into a plain conjunction, which is
why orbs and clearances below are measured in the harmonic frame.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, Union

from ..exceptions import InvalidInputError
from ..utils.angles import CIRCLE, separation

__all__ = [
    "Positioned",
    "arc",
    "arc_in_harmonic",
    "harmonic_arc",
    "unit_arc",
    "prime_factors",
    "factor_sum",
    "complexity",
    "is_prime_harmonic",
    "format_factors",
    "find_multiplicity",
    "calculate_strength",
]


class Positioned(Protocol):
    """Anything carrying an angular ``position`` in degrees."""

    @property
    def position(self) -> float: ...


Angle = Union[float, int, Positioned]


def _degrees(value: Angle) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return float(value.position)


def _check_harmonic(harmonic: int) -> int:
    h = int(harmonic)
    if h < 1:
        raise InvalidInputError(f"harmonic must be a positive integer, got {harmonic!r}")
    return h


def unit_arc(harmonic: int) -> float:
    """Return the unit resonance arc ``360 / harmonic``."""

    return CIRCLE / _check_harmonic(harmonic)


def arc(p1: Angle, p2: Angle) -> float:
    """Return the shortest undirected separation between two positions, 0..180."""

    return separation(_degrees(p1), _degrees(p2))


def arc_in_harmonic(p1: Angle, p2: Angle, harmonic: int) -> float:
    """Return the distance of the arc from the nearest multiple of ``360 / h``.

    The result lies in ``[0, 180 / h]`` and is expressed in ordinary degrees.
    """

    single = unit_arc(harmonic)
    remainder = arc(p1, p2) % single
    return min(remainder, single - remainder)


def harmonic_arc(p1: Angle, p2: Angle, harmonic: int) -> float:
    """Return the separation of both positions inside the ``h``-th harmonic chart.

    Equals ``arc_in_harmonic * h`` and lies in ``[0, 180]``. This is the
    quantity compared with the orb when searching for aspects.
    """

    h = _check_harmonic(harmonic)
    return min(arc_in_harmonic(p1, p2, h) * h, CIRCLE / 2)


def prime_factors(number: int) -> list[int]:
    """Return the prime factors of ``number`` from largest to smallest.

    ``0`` yields ``[0]`` and ``1`` yields ``[1]``; negative numbers raise
    :class:`~astroresonance.exceptions.InvalidInputError`.
    """

    n = int(number)
    if n < 0:
        raise InvalidInputError("prime factorisation works with non-negative numbers")
    if n in (0, 1):
        return [n]

    factors: list[int] = []
    divider = 2
    while n > 1:
        if divider > n // divider:
            factors.append(n)
            break
        if n % divider == 0:
            factors.append(divider)
            n //= divider
        else:
            divider += 1
    factors.sort(reverse=True)
    return factors


def factor_sum(number: int) -> int:
    """Return the sum of the prime factors (the "harmonic root") of ``number``."""

    return sum(prime_factors(number))


def complexity(number: int) -> int:
    """Return how many prime factors make up ``number``."""

    return len(prime_factors(number))


def is_prime_harmonic(number: int) -> bool:
    return number > 1 and complexity(number) == 1


def format_factors(factors: Sequence[int] | Iterable[int]) -> str:
    """Render factors as ``<3x2x2>``."""

    return "<%s>" % "x".join(str(f) for f in factors)


def find_multiplicity(harmonic: int, arc_deg: float, orb: float) -> int:
    """Return how many unit arcs of ``harmonic`` the real arc spans.

    Searches ``m`` with ``1 <= m < h / 2`` for the first value satisfying
    ``|m * 360 / h - arc| < orb / h``. Falls back to ``1`` when nothing in that
    range matches, which includes harmonics 1 and 2.
    """

    h = _check_harmonic(harmonic)
    single = CIRCLE / h
    tolerance = orb / h
    m = 1
    while 2 * m < h:
        if abs(m * single - arc_deg) < tolerance:
            return m
        m += 1
    return 1


def calculate_strength(orb: float, clearance: float) -> float:
    """Return the strength (%) of a match with ``clearance`` inside ``orb``.

    100 at an exact match, 0 at the orb edge, clamped to ``[0, 100]``.
    """

    if orb <= 0:
        return 0.0
    strength = 100.0 * (1.0 - clearance / orb)
    return max(0.0, min(100.0, strength))
