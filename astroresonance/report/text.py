"""Text reports for batches, patterns and scoped tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..chart.models import Chart, Point
from ..core.harmonics import format_factors, prime_factors
from ..resonance.aspect import Aspect
from ..resonance.batch import ResonanceBatch
from ..resonance.pattern import Pattern
from ..resonance.tables import AspectTable, PatternAnalysis, PatternTable
from ..utils.angles import ZODIAC_SIGNS, split_degrees, zodiac_position

__all__ = [
    "format_degrees",
    "format_zodiac",
    "render_aspect",
    "render_batch",
    "render_pattern",
    "render_pattern_analysis",
    "render_short_analysis",
    "render_pattern_table",
    "render_aspect_table",
    "render_factors",
]

_RULE_WIDTH = 60
_CHART_TAG_LENGTH = 3


# -------------------- frames --------------------


def _double_frame(text: str) -> str:
    rule = "=" * _RULE_WIDTH
    return f"{rule}\n{text}\n{rule}\n"


def _asterisk_frame(text: str) -> str:
    rule = "*" * _RULE_WIDTH
    return f"{rule}\n* {text}\n{rule}\n"


def _single_frame(text: str) -> str:
    rule = "-" * _RULE_WIDTH
    return f"{rule}\n{text}\n{rule}\n"


def _chart_names(charts: Iterable[Chart]) -> str:
    return " and ".join(chart.name for chart in charts)


# -------------------- primitives --------------------


def format_degrees(value: float, *, seconds: bool = True) -> str:
    """Render decimal degrees as ``D°M'S"`` (``D°M'`` when ``seconds`` is false)."""

    sign = "-" if value < 0 else ""
    degrees, minutes, secs = split_degrees(value)
    if not seconds:
        if secs >= 30:
            minutes += 1
        if minutes == 60:
            degrees, minutes = degrees + 1, 0
        return f"{sign}{degrees}°{minutes:02d}'"
    return f"{sign}{degrees}°{minutes:02d}'{secs:02d}\""


def format_zodiac(position: float) -> str:
    """Render a longitude relative to its sign, e.g. ``12♉30'`` for 42.5."""

    sign, degrees, minutes = zodiac_position(position)
    return f"{degrees}{ZODIAC_SIGNS[sign][1]}{minutes:02d}'"


def _point_with_degree(point: Point) -> str:
    return f"{point.name} {format_zodiac(point.position)}"


def render_aspect(aspect: Aspect) -> str:
    depth = "exact" if aspect.is_exact else str(aspect.depth)
    return (
        f"Resonance {aspect.multiplicity}/{aspect.harmonic} {aspect.strength_rating} "
        f"({aspect.strength:.0f}%) - {aspect.strength_level} to depth {depth}, "
        f"clearance {format_degrees(aspect.clearance)}, "
        f"weighted {aspect.weighted_strength:.2f}\n"
    )


def render_batch(batch: ResonanceBatch) -> str:
    """Title line for the pair followed by its aspects, strongest first."""

    lines = [
        f"Arc between {batch.point_a.label} {format_zodiac(batch.point_a.position)} and "
        f"{batch.point_b.label} {format_zodiac(batch.point_b.position)}: "
        f"{format_degrees(batch.arc)}\n"
    ]
    if not batch.aspects:
        lines.append(
            f"No resonance up to {batch.edge_harmonic} at orb {batch.orb:g}\n"
        )
    lines.extend(render_aspect(aspect) for aspect in batch.aspects_by_strength())
    return "".join(lines)


# -------------------- patterns --------------------


def _pattern_symbols(pattern: Pattern) -> str:
    return " ".join(point.name for point in pattern.points_by_connectivity())


def render_pattern(pattern: Pattern) -> str:
    """Members of ``pattern`` from the tightest linked, with their strengths."""

    if pattern.size == 1:
        return f"{_pattern_symbols(pattern)} (-)\n"
    lines = [f"\t{pattern.average_strength:.0f}% ({pattern.size}):\n"]
    for point in pattern.points_by_connectivity():
        tag = ""
        if pattern.dimension > 1:
            tag = f"<{point.chart.shortened_name(_CHART_TAG_LENGTH)}>"
        lines.append(
            f"\t\t{_point_with_degree(point)}{tag} ({pattern.point_strength(point):.0f}%)\n"
        )
    return "".join(lines)


def render_pattern_analysis(analysis: PatternAnalysis, harmonics: Sequence[int]) -> str:
    """Detailed block per harmonic in ``harmonics``."""

    blocks: list[str] = []
    for harmonic in harmonics:
        patterns = analysis.patterns_for(harmonic)
        if not patterns:
            blocks.append(_single_frame(f"No patterns for harmonic {harmonic}"))
            continue
        header = _single_frame(
            f"Patterns for harmonic {harmonic}\n"
            f"    <{analysis.point_count_for(harmonic)} points, "
            f"average strength {analysis.average_strength_for(harmonic):.0f}%>"
        )
        body = "_______\n".join(f"\t\t{render_pattern(p)}_______\n" for p in patterns)
        blocks.append(header + body + "\n")
    return "".join(blocks)


def render_short_analysis(analysis: PatternAnalysis) -> str:
    """One line per harmonic holding patterns: ``h: ABC | DE``."""

    lines = []
    for harmonic, patterns in analysis:
        listed = " | ".join(_pattern_symbols(p) for p in patterns) or "-"
        lines.append(f"{harmonic}: {listed}\n")
    return "".join(lines)


# -------------------- tables --------------------


def render_pattern_table(table: PatternTable, *, detailed: bool = False) -> str:
    out = [_double_frame("Pattern analysis for: " + _chart_names(table.charts))]
    for scope, analysis in table:
        if len(table.charts) > 1:
            out.append(_asterisk_frame(f"Pattern table for {_chart_names(scope)}:"))
        if detailed:
            out.append(render_pattern_analysis(analysis, analysis.harmonics))
        else:
            out.append(render_short_analysis(analysis))
    return "".join(out)


def render_aspect_table(table: AspectTable, *, only_resonant: bool = False) -> str:
    out = [_double_frame("Resonance analysis for: " + _chart_names(table.charts))]
    for scope, batches in table:
        if len(table.charts) > 1:
            out.append(_asterisk_frame(f"Aspects for {_chart_names(scope)}:"))
        for batch in batches:
            if only_resonant and not batch.aspects:
                continue
            out.append(render_batch(batch))
    return "".join(out)


def render_factors(numbers: Iterable[int]) -> str:
    """One line per number: ``12 <3x2x2> sum 7``."""

    lines = []
    for number in numbers:
        factors = prime_factors(number)
        lines.append(f"{number} {format_factors(factors)} sum {sum(factors)}\n")
    return "".join(lines)
