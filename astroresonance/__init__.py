"""AstroResonance: harmonic resonance analysis of astrological charts."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

from .chart import Chart, MultiChart, Point, compute_composite_chart
from .config import AnalysisConfig, Settings
from .exceptions import (
    AstroResonanceError,
    InvalidInputError,
    InvariantViolationError,
    NotFoundError,
)
from .resonance import (
    Aspect,
    AspectTable,
    Pattern,
    PatternAnalysis,
    PatternTable,
    ResonanceBatch,
    ResonanceMatrix,
)
from .service import HarmonicService

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("astroresonance")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved AstroResonance package version."""

    return __version__


__all__ = [
    "__version__",
    "get_version",
    "AnalysisConfig",
    "Settings",
    "Chart",
    "MultiChart",
    "Point",
    "compute_composite_chart",
    "Aspect",
    "ResonanceBatch",
    "ResonanceMatrix",
    "Pattern",
    "PatternAnalysis",
    "PatternTable",
    "AspectTable",
    "HarmonicService",
    "AstroResonanceError",
    "InvalidInputError",
    "NotFoundError",
    "InvariantViolationError",
]
