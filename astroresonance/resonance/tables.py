"""Aggregation of patterns and batches by the charts they span."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ..chart.models import Chart
from ..exceptions import InvariantViolationError, NotFoundError
from .batch import ResonanceBatch
from .pattern import Pattern

if TYPE_CHECKING:
    from .matrix import ResonanceMatrix

__all__ = ["Scope", "PatternAnalysis", "PatternTable", "AspectTable"]

LOG = logging.getLogger(__name__)

Scope = tuple[Chart, ...]


def _scope_key(charts: Iterable[Chart]) -> frozenset[int]:
    return frozenset(id(chart) for chart in charts)


class _ScopedTable:
    """Buckets keyed by chart subsets, looked up regardless of chart order."""

    kind = "item"

    def __init__(self, matrix: ResonanceMatrix, scopes: list[Scope]) -> None:
        self.charts: tuple[Chart, ...] = matrix.charts
        self.scopes: list[Scope] = scopes
        self._keys: dict[frozenset[int], Scope] = {_scope_key(s): s for s in scopes}

    def _route(self, charts: Iterable[Chart]) -> Scope:
        charts = list(charts)
        scope = self._keys.get(_scope_key(charts))
        if scope is None:
            names = ", ".join(sorted(c.name for c in charts))
            raise InvariantViolationError(
                f"no {self.kind} bucket for chart set [{names}]"
            )
        return scope

    def scope_for(self, *charts: Chart) -> Scope:
        scope = self._keys.get(_scope_key(charts))
        if scope is None:
            names = ", ".join(c.name for c in charts)
            raise NotFoundError(f"no {self.kind} bucket for charts [{names}]")
        return scope


class PatternAnalysis:
    """Patterns of one chart subset, grouped by harmonic."""

    def __init__(self) -> None:
        self._by_harmonic: dict[int, list[Pattern]] = {}

    def __len__(self) -> int:
        return len(self._by_harmonic)

    def __iter__(self) -> Iterator[tuple[int, list[Pattern]]]:
        for harmonic in sorted(self._by_harmonic):
            yield harmonic, self._by_harmonic[harmonic]

    def add_pattern(self, pattern: Pattern) -> None:
        self._by_harmonic.setdefault(pattern.harmonic, []).append(pattern)

    @property
    def harmonics(self) -> list[int]:
        return sorted(self._by_harmonic)

    def patterns_for(self, harmonic: int) -> list[Pattern]:
        return list(self._by_harmonic.get(harmonic, ()))

    def pattern_count(self) -> int:
        return sum(len(patterns) for patterns in self._by_harmonic.values())

    def average_strength_for(self, harmonic: int) -> float:
        patterns = self._by_harmonic.get(harmonic)
        if not patterns:
            return 0.0
        return sum(p.average_strength for p in patterns) / len(patterns)

    def point_count_for(self, harmonic: int) -> int:
        return sum(p.size for p in self._by_harmonic.get(harmonic, ()))


class PatternTable(_ScopedTable):
    """Patterns of every harmonic up to the edge, bucketed by chart subset."""

    kind = "pattern"

    def __init__(self, matrix: ResonanceMatrix) -> None:
        super().__init__(matrix, matrix.chart_combinations())
        self.edge_harmonic = matrix.config.edge_harmonic
        self.tables: dict[Scope, PatternAnalysis] = {s: PatternAnalysis() for s in self.scopes}
        for harmonic in range(1, self.edge_harmonic + 1):
            for pattern in matrix.find_patterns(harmonic):
                self.add_pattern(pattern)
        LOG.debug(
            "Pattern table: %d scope(s), %d pattern(s)",
            len(self.scopes),
            sum(t.pattern_count() for t in self.tables.values()),
        )

    def __iter__(self) -> Iterator[tuple[Scope, PatternAnalysis]]:
        return iter(self.tables.items())

    def add_pattern(self, pattern: Pattern) -> None:
        self.tables[self._route(pattern.charts)].add_pattern(pattern)

    def analysis_for(self, *charts: Chart) -> PatternAnalysis:
        return self.tables[self.scope_for(*charts)]


class AspectTable(_ScopedTable):
    """Batches bucketed by the one or two charts their points come from."""

    kind = "aspect"

    def __init__(self, matrix: ResonanceMatrix) -> None:
        super().__init__(matrix, matrix.chart_combinations(max_size=2))
        self.tables: dict[Scope, list[ResonanceBatch]] = {s: [] for s in self.scopes}
        for batch in matrix.batches():
            self.add_resonance(batch)
        LOG.debug("Aspect table: %d scope(s)", len(self.scopes))

    def __iter__(self) -> Iterator[tuple[Scope, list[ResonanceBatch]]]:
        return iter(self.tables.items())

    def add_resonance(self, batch: ResonanceBatch) -> None:
        self.tables[self._route(batch.charts)].append(batch)

    def resonances_for(self, *charts: Chart, only_resonant: bool = False) -> list[ResonanceBatch]:
        batches = self.tables[self.scope_for(*charts)]
        if only_resonant:
            return [b for b in batches if b.aspects]
        return list(batches)
