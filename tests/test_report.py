"""Plain-text reports."""

from astroresonance.chart.models import Chart, MultiChart
from astroresonance.report.text import (
    format_degrees,
    format_zodiac,
    render_aspect_table,
    render_batch,
    render_factors,
    render_pattern,
    render_pattern_table,
    render_short_analysis,
)
from astroresonance.resonance.batch import ResonanceBatch
from astroresonance.resonance.matrix import ResonanceMatrix


def test_format_degrees():
    assert format_degrees(12.5) == "12°30'00\""
    assert format_degrees(12.5, seconds=False) == "12°30'"
    assert format_degrees(-0.25) == "-0°15'00\""


def test_batch_report_lists_aspects(alice):
    batch = ResonanceBatch(alice.point("Sun"), alice.point("Moon"), 12.0, 12)
    text = render_batch(batch)
    assert text.startswith("Arc between Sun@Alice 0♈00' and Moon@Alice 0♋00': 90°00'00\"")
    assert "Resonance 1/4" in text
    assert "(100%)" in text


def test_batch_report_without_aspects():
    chart = Chart("Alice", [("Sun", 0.0), ("Moon", 50.0)])
    batch = ResonanceBatch(chart.point("Sun"), chart.point("Moon"), 1.0, 1)
    assert "No resonance up to 1 at orb 1" in render_batch(batch)


def test_pattern_report_orders_by_connectivity(triad, edge4):
    (pattern,) = ResonanceMatrix(triad, config=edge4).find_patterns(3)
    lines = render_pattern(pattern).splitlines()
    assert lines[0] == "\t67% (3):"
    assert lines[1].strip() == "C 1♌00' (75%)"


def test_short_analysis_lists_harmonics(triad, edge4):
    table = ResonanceMatrix(triad, config=edge4).pattern_table()
    assert render_short_analysis(table.analysis_for(triad)) == "1: A B\n3: C A B\n"


def test_single_chart_table_has_no_scope_frames(triad, edge4):
    table = ResonanceMatrix(triad, config=edge4).pattern_table()
    text = render_pattern_table(table)
    assert "Pattern analysis for: Triad" in text
    assert "Pattern table for" not in text
    detailed = render_pattern_table(table, detailed=True)
    assert "Patterns for harmonic 3" in detailed


def test_multi_chart_tables_frame_every_scope(alice, bob):
    matrix = ResonanceMatrix(MultiChart(alice, bob))
    patterns = render_pattern_table(matrix.pattern_table())
    assert "Pattern table for Alice and Bob:" in patterns
    aspects = render_aspect_table(matrix.aspect_table(), only_resonant=True)
    assert "Aspects for Alice:" in aspects
    assert "Aspects for Bob:" in aspects
    assert "No resonance" not in aspects


def test_factor_listing():
    assert render_factors([12, 7]) == "12 <3x2x2> sum 7\n7 <7> sum 7\n"


def test_format_zodiac_is_relative_to_the_sign():
    assert format_zodiac(42.5) == "12♉30'"
    assert format_zodiac(359.5) == "29♓30'"
    # rounding up to a full sign moves into the next one
    assert format_zodiac(29.9999) == "0♉00'"
    assert format_zodiac(359.9999) == "0♈00'"
