"""Plain-text chart and album format.

A chart is written as its name on the first line followed by one point per
line::

    Alice
    Sun 12.5
    Moon 204 30 15

Positions are decimal degrees or ``D M S``. Blank lines and lines starting
with ``//`` are ignored. An album is a sequence of charts, each introduced by
``#``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..exceptions import InvalidInputError, NotFoundError
from ..utils.angles import parse_degrees, split_degrees
from .models import Chart

__all__ = [
    "ALBUM_SUFFIXES",
    "parse_chart",
    "parse_album",
    "dump_chart",
    "dump_album",
    "album_path",
    "load_album",
    "save_album",
    "select_charts",
]

LOG = logging.getLogger(__name__)

ALBUM_SUFFIXES = (".awb", ".awc")
_COMMENT = "//"
_SEPARATOR = "#"


def _is_skipped(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(_COMMENT)


def _parse_point_line(line: str, chart_name: str) -> tuple[str, float]:
    # the name is the first token; everything after it is the position
    parts = line.split(maxsplit=1)
    if len(parts) < 2:
        raise InvalidInputError(f"malformed point line in {chart_name!r}: {line!r}")
    name, rest = parts
    try:
        return name, parse_degrees(rest)
    except ValueError as exc:
        raise InvalidInputError(
            f"malformed position in {chart_name!r}: {line!r}"
        ) from exc


def parse_chart(text: str) -> Chart:
    """Read a single chart from ``text``."""

    lines = [line for line in text.splitlines() if not _is_skipped(line)]
    if not lines:
        raise InvalidInputError("chart text contains no lines")
    chart = Chart(lines[0])
    for line in lines[1:]:
        name, degrees = _parse_point_line(line, chart.name)
        chart.add_point(name, degrees)
    return chart


def parse_album(text: str) -> list[Chart]:
    """Read every chart from album ``text``; later duplicates are dropped."""

    charts: list[Chart] = []
    for block in text.split(_SEPARATOR):
        if not block.strip() or block.lstrip().startswith(_COMMENT):
            continue
        chart = parse_chart(block)
        if any(existing.name == chart.name for existing in charts):
            LOG.warning("Skipping duplicate chart %r in album", chart.name)
            continue
        charts.append(chart)
    return charts


def _format_position(position: float) -> str:
    degrees, minutes, seconds = split_degrees(position)
    if degrees >= 360:
        degrees -= 360
    return f"{degrees} {minutes} {seconds}"


def dump_chart(chart: Chart) -> str:
    lines = [f"{_SEPARATOR}{chart.name}"]
    lines.extend(f"{point.name} {_format_position(point.position)}" for point in chart)
    return "\n".join(lines) + "\n"


def dump_album(charts: Iterable[Chart]) -> str:
    return "".join(dump_chart(chart) for chart in charts)


def album_path(name: str | Path, base_dir: str | Path | None = None) -> Path:
    """Resolve an album file name, appending ``.awb`` when no suffix is given."""

    path = Path(name)
    if path.suffix not in ALBUM_SUFFIXES:
        path = path.with_name(path.name + ALBUM_SUFFIXES[0])
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path
    return path


def load_album(name: str | Path, base_dir: str | Path | None = None) -> list[Chart]:
    path = album_path(name, base_dir)
    if not path.exists():
        raise NotFoundError(f"album file not found: {path}")
    charts = parse_album(path.read_text(encoding="utf-8"))
    LOG.debug("Loaded %d chart(s) from %s", len(charts), path)
    return charts


def save_album(
    charts: Iterable[Chart], name: str | Path, base_dir: str | Path | None = None
) -> Path:
    path = album_path(name, base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_album(charts), encoding="utf-8")
    return path


def select_charts(charts: Iterable[Chart], names: Iterable[str] | None) -> list[Chart]:
    """Return the charts called ``names`` in the requested order (all when empty)."""

    available = list(charts)
    wanted = [name for name in names or () if name]
    if not wanted:
        return available
    selected: list[Chart] = []
    for name in wanted:
        match = next((chart for chart in available if chart.name == name), None)
        if match is None:
            raise NotFoundError(f"no chart named {name!r}")
        selected.append(match)
    return selected
