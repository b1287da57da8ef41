"""Chart models, composite charts and the album text format."""

from .album import dump_album, load_album, parse_album, parse_chart, save_album
from .composite import compute_composite_chart
from .models import Chart, ChartObject, MultiChart, Point, flatten_charts

__all__ = [
    "Chart",
    "ChartObject",
    "MultiChart",
    "Point",
    "flatten_charts",
    "compute_composite_chart",
    "parse_chart",
    "parse_album",
    "dump_album",
    "load_album",
    "save_album",
]
