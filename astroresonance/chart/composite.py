"""Composite (midpoint) chart helpers."""

from __future__ import annotations

from collections.abc import Sequence

from ..exceptions import InvalidInputError, NotFoundError
from ..utils.angles import HALF_CIRCLE, midpoint, norm360, separation
from .models import Chart

__all__ = ["INNER_PLANET_ELONGATION", "compute_composite_chart"]

# Largest plausible elongation from the Sun; a composite point further away
# sits on the wrong side of the circle and is flipped to the other midpoint.
INNER_PLANET_ELONGATION: dict[str, float] = {
    "mercury": 30.0,
    "venus": 60.0,
}

_SUN_NAMES = {"sun", "sol"}


def _shared_point_names(
    chart_a: Chart,
    chart_b: Chart,
    include: Sequence[str] | None,
) -> tuple[str, ...]:
    if include is None:
        ordered = [point.name for point in chart_a if point.name in chart_b]
    else:
        ordered = [name for name in include if name in chart_a and name in chart_b]
    return tuple(ordered)


def compute_composite_chart(
    chart_a: Chart | None,
    chart_b: Chart | None,
    *,
    include: Sequence[str] | None = None,
    name: str | None = None,
) -> Chart:
    """Build a chart whose points are the midpoints of the shared points."""

    if chart_a is None or chart_b is None:
        raise NotFoundError("composite chart needs two source charts")
    shared = _shared_point_names(chart_a, chart_b, include)
    if not shared:
        raise InvalidInputError(
            f"charts {chart_a.name!r} and {chart_b.name!r} share no points"
        )

    composite = Chart(name or f"Composite of {chart_a.name} and {chart_b.name}")
    for point_name in shared:
        composite.add_point(
            point_name,
            midpoint(chart_a.point(point_name).position, chart_b.point(point_name).position),
        )

    sun = next((p for p in composite if p.name.casefold() in _SUN_NAMES), None)
    if sun is None:
        return composite

    for point in composite.points:
        limit = INNER_PLANET_ELONGATION.get(point.name.casefold())
        if limit is not None and separation(sun.position, point.position) > limit:
            composite.add_point(point.name, norm360(point.position + HALF_CIRCLE))
    return composite
