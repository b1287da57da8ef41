"""Configuration helpers exposed at :mod:`astroresonance.config`."""

from __future__ import annotations

from .settings import (
    AnalysisConfig,
    HarmonicsCfg,
    LibraryCfg,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "AnalysisConfig",
    "HarmonicsCfg",
    "LibraryCfg",
    "Settings",
    "config_path",
    "get_config_home",
    "default_settings",
    "load_settings",
    "save_settings",
]
