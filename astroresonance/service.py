"""Harmonic analysis service with per-chart matrix caching."""

from __future__ import annotations

import logging
from collections import OrderedDict

from .chart.models import ChartObject, Point
from .config.settings import AnalysisConfig, Settings
from .exceptions import InvalidInputError
from .resonance.batch import ResonanceBatch
from .resonance.matrix import ResonanceMatrix
from .resonance.tables import AspectTable, PatternTable

__all__ = ["DEFAULT_CACHE_SIZE", "HarmonicService"]

LOG = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 16


class HarmonicService:
    """Builds resonance matrices once per chart object and reuses them.

    The cache is keyed by object identity and holds at most ``cache_size``
    matrices; the least recently used one is evicted first. Charts edited
    after their first analysis must be dropped with :meth:`invalidate`.
    """

    def __init__(
        self, config: AnalysisConfig | None = None, *, cache_size: int = DEFAULT_CACHE_SIZE
    ) -> None:
        if cache_size < 1:
            raise InvalidInputError("cache size must be at least 1")
        self.config = config or AnalysisConfig()
        self.cache_size = cache_size
        self._matrices: OrderedDict[int, tuple[ChartObject, ResonanceMatrix]] = OrderedDict()

    @classmethod
    def from_settings(cls, settings: Settings) -> HarmonicService:
        return cls(settings.analysis_config())

    def __len__(self) -> int:
        return len(self._matrices)

    def matrix(self, chart_object: ChartObject) -> ResonanceMatrix:
        key = id(chart_object)
        cached = self._matrices.get(key)
        if cached is not None and cached[0] is chart_object:
            self._matrices.move_to_end(key)
            return cached[1]
        LOG.debug("Computing resonance matrix for %s", chart_object.name)
        matrix = ResonanceMatrix(chart_object, config=self.config)
        self._matrices[key] = (chart_object, matrix)
        self._matrices.move_to_end(key)
        while len(self._matrices) > self.cache_size:
            _, (evicted, _) = self._matrices.popitem(last=False)
            LOG.debug("Evicted resonance matrix for %s", evicted.name)
        return matrix

    def invalidate(self, chart_object: ChartObject | None = None) -> None:
        """Forget the matrix of ``chart_object``, or every cached matrix."""

        if chart_object is None:
            self._matrices.clear()
        else:
            self._matrices.pop(id(chart_object), None)

    def pattern_table(self, chart_object: ChartObject) -> PatternTable:
        return self.matrix(chart_object).pattern_table()

    def aspect_table(self, chart_object: ChartObject) -> AspectTable:
        return self.matrix(chart_object).aspect_table()

    def resonance(self, chart_object: ChartObject, a: Point, b: Point) -> ResonanceBatch:
        return self.matrix(chart_object).resonance_between(a, b)
