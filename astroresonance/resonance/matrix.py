"""Resonance matrix over every point of one or more charts."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import combinations

from ..chart.models import Chart, ChartObject, Point, flatten_charts
from ..config.settings import AnalysisConfig
from ..exceptions import InvalidInputError, NotFoundError
from .batch import ResonanceBatch
from .pattern import Pattern
from .tables import AspectTable, PatternTable

__all__ = ["ResonanceMatrix"]

LOG = logging.getLogger(__name__)


class ResonanceMatrix:
    """Triangular table of :class:`ResonanceBatch` for every pair of points.

    Points of all charts are flattened in chart order, then in point order
    within each chart. Row ``i`` stores the batches of point ``i`` with every
    later point, so the pair ``(i, j)`` lives in exactly one cell whichever
    order it is asked for.
    """

    def __init__(self, *charts: ChartObject, config: AnalysisConfig | None = None) -> None:
        self.config = config or AnalysisConfig()
        self.charts: tuple[Chart, ...] = flatten_charts(charts)
        if not self.charts:
            raise InvalidInputError("resonance matrix needs at least one chart")
        self.points: tuple[Point, ...] = tuple(p for chart in self.charts for p in chart)
        self._index: dict[Point, int] = {}
        for idx, point in enumerate(self.points):
            self._index[point] = idx
        self._rows: list[list[ResonanceBatch]] = [
            [
                ResonanceBatch(
                    self.points[i],
                    self.points[j],
                    self.config.primal_orb,
                    self.config.edge_harmonic,
                    half_orbs_for_doubles=self.config.half_orbs_for_doubles,
                )
                for j in range(i + 1, len(self.points))
            ]
            for i in range(len(self.points))
        ]
        LOG.debug(
            "Built resonance matrix: %d chart(s), %d point(s), %d pair(s), edge harmonic %d",
            len(self.charts),
            len(self.points),
            self.pair_count,
            self.config.edge_harmonic,
        )

    def __repr__(self) -> str:
        names = [chart.name for chart in self.charts]
        return f"ResonanceMatrix(charts={names}, points={len(self.points)})"

    @property
    def pair_count(self) -> int:
        n = len(self.points)
        return n * (n - 1) // 2

    @property
    def dimension(self) -> int:
        return len(self.charts)

    # -------------------- lookups --------------------

    def index_of(self, point: Point) -> int:
        try:
            return self._index[point]
        except KeyError:
            raise NotFoundError(f"point {point.label!r} is not part of this analysis") from None

    def find_point(self, name: str, chart_name: str | None = None) -> Point:
        """Look a point up by name, optionally restricted to one chart."""

        if not name or not name.strip():
            raise InvalidInputError("point name must not be blank")
        key = name.strip()
        for point in self.points:
            if point.name == key and (chart_name is None or point.chart.name == chart_name):
                return point
        where = f" in chart {chart_name!r}" if chart_name else ""
        raise NotFoundError(f"no point {key!r}{where}")

    def _cell(self, i: int, j: int) -> ResonanceBatch:
        if i > j:
            i, j = j, i
        return self._rows[i][j - i - 1]

    def _adjacent(self, i: int) -> Iterator[tuple[int, ResonanceBatch]]:
        for j in range(len(self.points)):
            if j != i:
                yield j, self._cell(i, j)

    # -------------------- queries --------------------

    def resonance_between(self, a: Point, b: Point) -> ResonanceBatch:
        """Return the batch of the pair ``a``/``b`` in either order."""

        if a == b:
            raise InvalidInputError(f"point {a.label!r} has no resonance with itself")
        return self._cell(self.index_of(a), self.index_of(b))

    def resonances_involving(self, point: Point) -> list[ResonanceBatch]:
        """Every batch pairing ``point`` with another point, in index order."""

        return [batch for _, batch in self._adjacent(self.index_of(point))]

    def connected_points(self, point: Point, harmonic: int) -> list[Point]:
        """Points that still form a conjunction with ``point`` in ``harmonic``."""

        i = self.index_of(point)
        return [self.points[j] for j in self._neighbours(i, harmonic)]

    def _neighbours(self, i: int, harmonic: int) -> list[int]:
        return [j for j, batch in self._adjacent(i) if batch.has_harmonic_pattern(harmonic)]

    def in_resonance(self, a: Point, b: Point, harmonic: int) -> bool:
        """True when the pair holds an aspect of exactly ``harmonic``."""

        return self.resonance_between(a, b).has_given_harmonic(harmonic)

    def batches(self) -> list[ResonanceBatch]:
        """All batches, row by row."""

        return [batch for row in self._rows for batch in row]

    def __iter__(self) -> Iterator[ResonanceBatch]:
        return iter(self.batches())

    # -------------------- patterns --------------------

    def find_patterns(self, harmonic: int) -> list[Pattern]:
        """Split all points into connected patterns of ``harmonic``.

        Returns only valid patterns, strongest first.
        """

        if harmonic < 1:
            raise InvalidInputError("harmonic must be at least 1")
        visited: set[int] = set()
        patterns: list[Pattern] = []
        for start in range(len(self.points)):
            if start in visited:
                continue
            visited.add(start)
            pattern = Pattern(harmonic, self, [self.points[start]])
            stack = [start]
            while stack:
                current = stack.pop()
                for j in self._neighbours(current, harmonic):
                    if j not in visited:
                        visited.add(j)
                        pattern.add_point(self.points[j])
                        stack.append(j)
            patterns.append(pattern)

        valid = [p for p in patterns if p.is_valid()]
        valid.sort(key=lambda p: p.average_strength, reverse=True)
        return valid

    # -------------------- aggregation --------------------

    def chart_combinations(self, max_size: int | None = None) -> list[tuple[Chart, ...]]:
        """Non-empty subsets of the charts, smallest first."""

        top = len(self.charts) if max_size is None else min(max_size, len(self.charts))
        out: list[tuple[Chart, ...]] = []
        for size in range(1, top + 1):
            out.extend(combinations(self.charts, size))
        return out

    def pattern_table(self) -> PatternTable:
        return PatternTable(self)

    def aspect_table(self) -> AspectTable:
        return AspectTable(self)
