"""Chart and point models consumed by the resonance analysis."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Union

from ..exceptions import InvalidInputError, NotFoundError
from ..utils.angles import norm360

__all__ = [
    "Point",
    "Chart",
    "MultiChart",
    "ChartObject",
    "flatten_charts",
]


@dataclass(frozen=True, eq=False)
class Point:
    """Angular position owned by exactly one :class:`Chart`.

    Two points are the same when they share a name and an owning chart; the
    position does not take part in identity.
    """

    name: str
    position: float
    chart: Chart = field(repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.name == other.name and self.chart is other.chart

    def __hash__(self) -> int:
        return hash((self.name, id(self.chart)))

    @property
    def label(self) -> str:
        """Name qualified with the owning chart, e.g. ``Sun@Alice``."""

        return f"{self.name}@{self.chart.name}"


class Chart:
    """Named, ordered collection of uniquely named points."""

    def __init__(
        self,
        name: str,
        points: Iterable[tuple[str, float]] | None = None,
    ) -> None:
        if not name or not name.strip():
            raise InvalidInputError("chart name must not be blank")
        self.name = name.strip()
        self._points: list[Point] = []
        for point_name, position in points or ():
            self.add_point(point_name, position)

    def __repr__(self) -> str:
        return f"Chart(name={self.name!r}, points={len(self._points)})"

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Point):
            return item.chart is self and any(p.name == item.name for p in self._points)
        if isinstance(item, str):
            return any(p.name == item for p in self._points)
        return False

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def charts(self) -> tuple[Chart, ...]:
        return (self,)

    @property
    def dimension(self) -> int:
        return 1

    def add_point(self, name: str, position: float) -> Point:
        """Place a point on the chart, replacing any point of the same name."""

        if not name or not name.strip():
            raise InvalidInputError("point name must not be blank")
        point = Point(name=name.strip(), position=norm360(float(position)), chart=self)
        for idx, existing in enumerate(self._points):
            if existing.name == point.name:
                self._points[idx] = point
                return point
        self._points.append(point)
        return point

    def point(self, name: str) -> Point:
        """Return the point called ``name``."""

        if not name or not name.strip():
            raise InvalidInputError("point name must not be blank")
        key = name.strip()
        for point in self._points:
            if point.name == key:
                return point
        raise NotFoundError(f"no point {key!r} in chart {self.name!r}")

    def get(self, name: str) -> Point | None:
        try:
            return self.point(name)
        except NotFoundError:
            return None

    def shortened_name(self, limit: int) -> str:
        if len(self.name) <= limit:
            return self.name
        return self.name[: max(limit - 1, 0)] + "…"


class MultiChart:
    """Tuple of charts analysed together (synastry and beyond).

    Nested multi-charts are flattened, so ``charts`` always holds plain
    :class:`Chart` objects.
    """

    def __init__(self, *charts: ChartObject, name: str | None = None) -> None:
        flat = flatten_charts(charts)
        if not flat:
            raise InvalidInputError("a multi-chart needs at least one chart")
        self._charts = flat
        self.name = name or "Synastry: " + " + ".join(c.name for c in flat)

    def __repr__(self) -> str:
        return f"MultiChart(name={self.name!r}, charts={[c.name for c in self._charts]})"

    def __iter__(self) -> Iterator[Point]:
        for chart in self._charts:
            yield from chart

    @property
    def charts(self) -> tuple[Chart, ...]:
        return self._charts

    @property
    def dimension(self) -> int:
        return len(self._charts)

    def chart(self, name: str) -> Chart:
        for chart in self._charts:
            if chart.name == name:
                return chart
        raise NotFoundError(f"no chart {name!r} in {self.name!r}")


ChartObject = Union[Chart, MultiChart]


def flatten_charts(objects: Sequence[ChartObject] | Iterable[ChartObject]) -> tuple[Chart, ...]:
    """Expand chart objects into their charts, dropping repeated charts."""

    out: list[Chart] = []
    for obj in objects:
        for chart in obj.charts:
            if not any(chart is seen for seen in out):
                out.append(chart)
    return tuple(out)
