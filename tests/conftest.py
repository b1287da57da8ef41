from __future__ import annotations

import pytest

from astroresonance.chart.models import Chart
from astroresonance.config.settings import AnalysisConfig


@pytest.fixture()
def triad() -> Chart:
    """Three points: a tight conjunction and a trine to both of them."""

    return Chart("Triad", [("A", 0.0), ("B", 2.0), ("C", 121.0)])


@pytest.fixture()
def edge4() -> AnalysisConfig:
    return AnalysisConfig(edge_harmonic=4, primal_orb=12.0)


@pytest.fixture()
def alice() -> Chart:
    return Chart("Alice", [("Sun", 0.0), ("Moon", 90.0)])


@pytest.fixture()
def bob() -> Chart:
    return Chart("Bob", [("Sun", 2.0)])
