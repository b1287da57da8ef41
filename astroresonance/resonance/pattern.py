"""Connected clusters of points resonating in one harmonic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import combinations
from typing import TYPE_CHECKING

from ..chart.models import Chart, Point
from ..core.harmonics import calculate_strength, harmonic_arc

if TYPE_CHECKING:
    from .matrix import ResonanceMatrix

__all__ = ["Pattern"]


class Pattern:
    """Points of one harmonic linked by resonance, with clearance bookkeeping.

    Every member carries the sum of its clearances to all other members;
    ``total_clearance`` holds the sum over every member pair.
    """

    def __init__(
        self,
        harmonic: int,
        matrix: ResonanceMatrix,
        points: Iterable[Point] = (),
    ) -> None:
        self.harmonic = harmonic
        self.matrix = matrix
        self._elements: dict[Point, float] = {}
        self._charts: list[Chart] = []
        self.total_clearance = 0.0
        for point in points:
            self.add_point(point)

    def __repr__(self) -> str:
        names = ", ".join(p.label for p in self._elements)
        return f"Pattern(harmonic={self.harmonic}, points=[{names}])"

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._elements)

    def __contains__(self, point: object) -> bool:
        return point in self._elements

    def add_point(self, point: Point) -> None:
        """Add ``point`` unless present, updating every clearance sum."""

        if point in self._elements:
            return
        if not any(point.chart is chart for chart in self._charts):
            self._charts.append(point.chart)
        own_sum = 0.0
        for member in self._elements:
            clearance = harmonic_arc(point, member, self.harmonic)
            own_sum += clearance
            self._elements[member] += clearance
            self.total_clearance += clearance
        self._elements[point] = own_sum

    def add_all(self, other: Pattern) -> None:
        for point in other:
            self.add_point(point)

    @property
    def size(self) -> int:
        return len(self._elements)

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._elements)

    @property
    def charts(self) -> frozenset[Chart]:
        return frozenset(self._charts)

    @property
    def chart_names(self) -> list[str]:
        return [chart.name for chart in self._charts]

    @property
    def dimension(self) -> int:
        return len(self._charts)

    @property
    def pair_count(self) -> int:
        return self.size * (self.size - 1) // 2

    @property
    def orb(self) -> float:
        return self.matrix.config.orb_for(self.dimension)

    def clearance_sum(self, point: Point) -> float:
        return self._elements[point]

    @property
    def average_strength(self) -> float:
        if self.size < 2:
            return 0.0
        return calculate_strength(self.orb, self.total_clearance / self.pair_count)

    def point_strength(self, point: Point) -> float:
        """Average strength of ``point``'s links to the rest of the pattern."""

        if self.size < 2:
            return 0.0
        return calculate_strength(self.orb, self._elements[point] / (self.size - 1))

    def points_by_connectivity(self) -> list[Point]:
        """Members ordered from the tightest connected to the loosest."""

        return sorted(self._elements, key=self._elements.__getitem__)

    def is_valid(self) -> bool:
        """At least two members and one pair with an aspect of exactly this harmonic."""

        if self.size < 2:
            return False
        return any(
            self.matrix.in_resonance(a, b, self.harmonic)
            for a, b in combinations(self._elements, 2)
        )
