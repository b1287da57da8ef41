"""Pairwise harmonic analysis of two points."""

from __future__ import annotations

from ..chart.models import Chart, Point
from ..core.harmonics import arc as arc_between
from ..core.harmonics import find_multiplicity, harmonic_arc
from ..exceptions import InvalidInputError
from .aspect import Aspect

__all__ = ["ResonanceBatch"]


class ResonanceBatch:
    """Every distinct aspect found for the arc between two points.

    Harmonics ``1..edge_harmonic`` are scanned in increasing order; a
    harmonic is recorded when the pair's separation in that harmonic chart is
    inside the orb and the harmonic is not a mere repetition of one already
    recorded (see :meth:`_is_new_simple`). The list may be empty.
    """

    def __init__(
        self,
        point_a: Point,
        point_b: Point,
        primal_orb: float,
        edge_harmonic: int,
        *,
        half_orbs_for_doubles: bool = True,
    ) -> None:
        if point_a == point_b:
            raise InvalidInputError(
                f"point {point_a.label!r} cannot resonate with itself"
            )
        if edge_harmonic < 1:
            raise InvalidInputError("edge harmonic must be at least 1")
        if primal_orb <= 0:
            raise InvalidInputError("orb must be positive")
        self.point_a = point_a
        self.point_b = point_b
        self.arc = arc_between(point_a, point_b)
        self.edge_harmonic = int(edge_harmonic)
        self.orb = (
            primal_orb / 2
            if self.is_synastric and half_orbs_for_doubles
            else primal_orb
        )
        self.aspects: list[Aspect] = []

        for h in range(1, self.edge_harmonic + 1):
            clearance = harmonic_arc(point_a, point_b, h)
            if clearance < self.orb and self._is_new_simple(h):
                self.aspects.append(Aspect.from_match(h, clearance, self.arc, self.orb))

    def __repr__(self) -> str:
        return (
            f"ResonanceBatch({self.point_a.label!r}, {self.point_b.label!r}, "
            f"arc={self.arc:.4f}, harmonics={self.harmonics})"
        )

    def _is_new_simple(self, candidate: int) -> bool:
        """Return ``True`` when ``candidate`` is a resonance not yet covered.

        A multiple of an accepted harmonic is only a new resonance when the
        pair already holds a conjunction, the arc is wider than the orb of the
        candidate, and the candidate still reads as a first-order match.
        """

        conjunction = False
        for aspect in self.aspects:
            previous = aspect.harmonic
            if previous == 1:
                conjunction = True
            if candidate % previous != 0:
                continue
            if (
                conjunction
                and self.arc > self.orb / candidate
                and find_multiplicity(candidate, self.arc, self.orb) == 1
            ):
                continue
            return False
        return True

    @property
    def charts(self) -> frozenset[Chart]:
        return frozenset((self.point_a.chart, self.point_b.chart))

    @property
    def is_synastric(self) -> bool:
        """True when the points belong to two different charts."""

        return self.point_a.chart is not self.point_b.chart

    @property
    def harmonics(self) -> list[int]:
        return [aspect.harmonic for aspect in self.aspects]

    def aspects_by_strength(self) -> list[Aspect]:
        return sorted(self.aspects, key=lambda a: a.strength, reverse=True)

    def aspect_for(self, harmonic: int) -> Aspect | None:
        return next((a for a in self.aspects if a.harmonic == harmonic), None)

    def has_given_harmonic(self, harmonic: int) -> bool:
        """True when an aspect of exactly ``harmonic`` was recorded.

        A trine shows up as a conjunction in the 6th harmonic chart, yet this
        still answers ``False`` for 6.
        """

        return any(a.harmonic == harmonic for a in self.aspects)

    def has_harmonic_pattern(self, harmonic: int) -> bool:
        """True when some aspect stays a conjunction in ``harmonic``."""

        return any(a.has_resonance(harmonic) for a in self.aspects)

    def has_resonance_element(self, factor: int) -> bool:
        """True when ``factor`` is a prime factor of some recorded harmonic."""

        return any(factor in a.multipliers for a in self.aspects)

    def counterpart(self, taken: Point) -> Point | None:
        """Return the other point of the pair, ``None`` for a foreign point."""

        if self.point_a == taken:
            return self.point_b
        if self.point_b == taken:
            return self.point_a
        return None

    def involves(self, point: Point) -> bool:
        return point == self.point_a or point == self.point_b
