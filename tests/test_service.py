"""Harmonic service caching."""

import pytest

from astroresonance.chart.models import Chart, MultiChart
from astroresonance.config.settings import Settings
from astroresonance.exceptions import InvalidInputError
from astroresonance.service import HarmonicService


def test_matrix_is_cached_per_chart_object(triad, edge4):
    service = HarmonicService(edge4)
    first = service.matrix(triad)
    assert service.matrix(triad) is first
    service.invalidate(triad)
    assert service.matrix(triad) is not first


def test_invalidate_everything(triad, alice, edge4):
    service = HarmonicService(edge4)
    cached = service.matrix(alice)
    service.matrix(triad)
    service.invalidate()
    assert service.matrix(alice) is not cached


def test_tables_and_resonance(alice, bob):
    service = HarmonicService()
    pair = MultiChart(alice, bob)
    assert len(service.pattern_table(pair).scopes) == 3
    assert len(service.aspect_table(pair).scopes) == 3
    batch = service.resonance(pair, bob.point("Sun"), alice.point("Sun"))
    assert batch.harmonics == [1]
    assert batch.orb == 6.0


def test_from_settings():
    settings = Settings()
    settings.harmonics.edge_harmonic = 24
    service = HarmonicService.from_settings(settings)
    assert service.config.edge_harmonic == 24


def test_cache_is_bounded_by_least_recent_use(edge4):
    charts = [Chart(f"C{idx}", [("Sun", 0.0), ("Moon", 10.0 * idx + 5)]) for idx in range(3)]
    service = HarmonicService(edge4, cache_size=2)
    first = service.matrix(charts[0])
    second = service.matrix(charts[1])
    assert service.matrix(charts[0]) is first
    service.matrix(charts[2])
    assert len(service) == 2
    assert service.matrix(charts[0]) is first
    # charts[1] was the least recently used and has to be rebuilt
    assert service.matrix(charts[1]) is not second
    assert len(service) == 2


def test_cache_size_must_be_positive():
    with pytest.raises(InvalidInputError):
        HarmonicService(cache_size=0)
