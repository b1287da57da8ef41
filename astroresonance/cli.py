"""Command line interface for AstroResonance."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from .boot.logging import configure_logging
from .chart.album import album_path, load_album, select_charts
from .chart.composite import compute_composite_chart
from .chart.models import Chart, ChartObject, MultiChart
from .config.settings import (
    AnalysisConfig,
    LibraryCfg,
    Settings,
    default_settings,
    load_settings,
)
from .exceptions import AstroResonanceError, InvalidInputError, InvariantViolationError
from .report.text import render_aspect_table, render_factors, render_pattern_table
from .service import HarmonicService

__all__ = ["build_parser", "main"]

LOG = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("value must be at least 1")
    return value


def _analysis_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "album",
        nargs="?",
        help="Album file (.awb appended when missing); defaults to the autoload album",
    )
    parent.add_argument(
        "--chart",
        action="append",
        default=[],
        metavar="NAME",
        help="Analyse only this chart (repeat to select several)",
    )
    parent.add_argument("--config", type=Path, help="Settings YAML file to read")
    parent.add_argument("--edge-harmonic", type=_positive_int, help="Highest harmonic to scan")
    parent.add_argument(
        "--orbs-divisor", type=_positive_int, help="Primal orb is 360 divided by this number"
    )
    parent.add_argument(
        "--no-half-orbs",
        action="store_true",
        help="Keep the full orb for pairs spanning two charts",
    )
    parent.add_argument(
        "--composite",
        action="store_true",
        help="Analyse the composite of exactly two selected charts",
    )
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astroresonance",
        description="Harmonic resonance analysis of astrological charts",
    )
    parser.add_argument("--log-level", help="Logging level (defaults to LOG_LEVEL or WARNING)")
    sub = parser.add_subparsers(dest="command")
    common = _analysis_options()

    aspects = sub.add_parser(
        "aspects", parents=[common], help="List the harmonic aspects of every point pair"
    )
    aspects.add_argument(
        "--only-resonant", action="store_true", help="Skip pairs without any aspect"
    )
    aspects.set_defaults(func=run_aspects)

    patterns = sub.add_parser(
        "patterns", parents=[common], help="Group points into harmonic patterns"
    )
    patterns.add_argument(
        "--detailed", action="store_true", help="Show every pattern with point strengths"
    )
    patterns.set_defaults(func=run_patterns)

    factors = sub.add_parser("factors", help="Print the prime factors of harmonic numbers")
    factors.add_argument("numbers", nargs="+", type=int, metavar="N")
    factors.set_defaults(func=run_factors)
    return parser


def _settings_for(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config) if args.config else default_settings()
    overrides: dict[str, object] = {}
    if args.edge_harmonic is not None:
        overrides["edge_harmonic"] = args.edge_harmonic
    if args.orbs_divisor is not None:
        overrides["orbs_divisor"] = args.orbs_divisor
    if args.no_half_orbs:
        overrides["half_orbs_for_doubles"] = False
    if overrides:
        harmonics = settings.harmonics.model_validate(
            {**settings.harmonics.model_dump(), **overrides}
        )
        settings = settings.model_copy(update={"harmonics": harmonics})
    return settings


def _resolve_album(name: str | None, library: LibraryCfg) -> Path:
    """Locate the album file, falling back to the library directory."""

    if name is None:
        if not library.autoload_enabled:
            raise InvalidInputError("no album given and autoload is disabled")
        return album_path(library.autoload_file, library.base_dir)
    path = album_path(name)
    if path.exists() or path.is_absolute():
        return path
    candidate = album_path(name, library.base_dir)
    if candidate.exists():
        LOG.debug("Using album %s from library %s", candidate, library.base_dir)
        return candidate
    return path


def _chart_object(charts: list[Chart], composite: bool) -> ChartObject:
    if composite:
        if len(charts) != 2:
            raise InvalidInputError("a composite needs exactly two charts")
        return compute_composite_chart(charts[0], charts[1])
    if len(charts) == 1:
        return charts[0]
    return MultiChart(*charts)


def _prepare(args: argparse.Namespace) -> tuple[HarmonicService, ChartObject]:
    settings = _settings_for(args)
    source = _resolve_album(args.album, settings.library)
    charts = select_charts(load_album(source), args.chart)
    if not charts:
        raise InvalidInputError(f"album {source} holds no charts")
    config: AnalysisConfig = settings.analysis_config()
    LOG.info(
        "Analysing %s with edge harmonic %d and orb %.2f",
        ", ".join(c.name for c in charts),
        config.edge_harmonic,
        config.primal_orb,
    )
    return HarmonicService(config), _chart_object(charts, args.composite)


def run_aspects(args: argparse.Namespace) -> int:
    service, chart_object = _prepare(args)
    table = service.aspect_table(chart_object)
    sys.stdout.write(render_aspect_table(table, only_resonant=args.only_resonant))
    return 0


def run_patterns(args: argparse.Namespace) -> int:
    service, chart_object = _prepare(args)
    table = service.pattern_table(chart_object)
    sys.stdout.write(render_pattern_table(table, detailed=args.detailed))
    return 0


def run_factors(args: argparse.Namespace) -> int:
    sys.stdout.write(render_factors(args.numbers))
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    namespace = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(level=namespace.log_level)

    func = getattr(namespace, "func", None)
    if func is None:
        parser.print_help()
        return 0
    try:
        return func(namespace)
    except InvariantViolationError:
        LOG.error("Analysis bookkeeping is inconsistent; results discarded")
        raise
    except (AstroResonanceError, ValidationError) as exc:
        LOG.debug("Command %s failed", namespace.command, exc_info=True)
        print(f"astroresonance: error: {exc}", file=sys.stderr)
        return 2
