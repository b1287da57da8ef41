"""Routing of patterns and batches into chart-subset buckets."""

import pytest

from astroresonance.chart.models import Chart, MultiChart
from astroresonance.config.settings import AnalysisConfig
from astroresonance.exceptions import InvariantViolationError, NotFoundError
from astroresonance.resonance.matrix import ResonanceMatrix


def test_single_chart_has_one_bucket(triad, edge4):
    matrix = ResonanceMatrix(triad, config=edge4)
    patterns = matrix.pattern_table()
    aspects = matrix.aspect_table()
    assert patterns.scopes == [(triad,)]
    assert aspects.scopes == [(triad,)]
    assert len(aspects.resonances_for(triad)) == 3


def test_pattern_analysis_groups_by_harmonic(triad, edge4):
    analysis = ResonanceMatrix(triad, config=edge4).pattern_table().analysis_for(triad)
    assert analysis.harmonics == [1, 3]
    assert len(analysis) == 2
    assert analysis.pattern_count() == 2
    assert analysis.point_count_for(3) == 3
    assert analysis.patterns_for(2) == []
    assert analysis.average_strength_for(2) == 0.0
    assert analysis.average_strength_for(3) == pytest.approx(100.0 * (1 - 4.0 / 12.0))


def test_three_charts_yield_every_subset():
    charts = [
        Chart(name, [("Sun", 40.0 * idx), ("Moon", 40.0 * idx + 3)])
        for idx, name in enumerate("XYZ")
    ]
    matrix = ResonanceMatrix(*charts, config=AnalysisConfig(edge_harmonic=6))
    assert len(matrix.pattern_table().scopes) == 7
    aspect_scopes = matrix.aspect_table().scopes
    assert len(aspect_scopes) == 6
    assert max(len(scope) for scope in aspect_scopes) == 2


def test_patterns_land_in_the_bucket_of_their_charts(alice, bob):
    table = ResonanceMatrix(MultiChart(alice, bob)).pattern_table()
    synastric = table.analysis_for(alice, bob)
    assert synastric is table.analysis_for(bob, alice)
    assert len(synastric.patterns_for(1)) == 1
    assert table.analysis_for(alice).patterns_for(1) == []
    (square,) = table.analysis_for(alice).patterns_for(4)
    assert set(square.points) == set(alice.points)


def test_aspect_table_routes_by_pair_charts(alice, bob):
    table = ResonanceMatrix(MultiChart(alice, bob)).aspect_table()
    assert len(table.resonances_for(alice)) == 1
    assert table.resonances_for(bob) == []
    assert len(table.resonances_for(bob, alice)) == 2
    resonant = table.resonances_for(alice, bob, only_resonant=True)
    assert all(batch.aspects for batch in resonant)


def test_unknown_scope_is_not_found(triad, edge4, alice):
    table = ResonanceMatrix(triad, config=edge4).pattern_table()
    with pytest.raises(NotFoundError):
        table.analysis_for(alice)


def test_foreign_items_break_the_table(triad, edge4, alice, bob):
    patterns = ResonanceMatrix(triad, config=edge4).pattern_table()
    aspects = ResonanceMatrix(triad, config=edge4).aspect_table()
    other = ResonanceMatrix(MultiChart(alice, bob))
    with pytest.raises(InvariantViolationError):
        patterns.add_pattern(other.find_patterns(1)[0])
    with pytest.raises(InvariantViolationError):
        aspects.add_resonance(other.batches()[0])
