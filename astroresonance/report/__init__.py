"""Plain-text rendering of resonance analysis results."""

from .text import (
    format_degrees,
    format_zodiac,
    render_aspect,
    render_aspect_table,
    render_batch,
    render_factors,
    render_pattern,
    render_pattern_analysis,
    render_pattern_table,
    render_short_analysis,
)

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
