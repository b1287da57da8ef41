"""Configuration models and helpers for AstroResonance settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.angles import CIRCLE

__all__ = [
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "CONFIG_FILENAME",
    "AnalysisConfig",
    "HarmonicsCfg",
    "LibraryCfg",
    "Settings",
    "get_config_home",
    "config_path",
    "default_settings",
    "load_settings",
    "save_settings",
]

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 1
CONFIG_FILENAME = "config.yaml"

# -------------------- Analysis snapshot --------------------


class AnalysisConfig(BaseModel):
    """Immutable parameters captured once per analysis."""

    model_config = ConfigDict(frozen=True)

    edge_harmonic: int = Field(default=108, ge=1)
    primal_orb: float = Field(default=CIRCLE / 30, gt=0.0, le=CIRCLE)
    half_orbs_for_doubles: bool = True

    def orb_for(self, chart_count: int) -> float:
        """Return the orb in force for points spread over ``chart_count`` charts."""

        if chart_count > 1 and self.half_orbs_for_doubles:
            return self.primal_orb / 2
        return self.primal_orb


# -------------------- Settings Schema --------------------


class HarmonicsCfg(BaseModel):
    """Harmonic analysis parameters."""

    edge_harmonic: int = 108
    orbs_divisor: int = 30
    half_orbs_for_doubles: bool = True

    @field_validator("edge_harmonic", "orbs_divisor", mode="before")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        numeric = int(value)
        if numeric < 1:
            raise ValueError("value must be a positive integer")
        return numeric

    @property
    def primal_orb(self) -> float:
        return CIRCLE / self.orbs_divisor


class LibraryCfg(BaseModel):
    """Where chart albums live and how they are loaded."""

    base_dir: str = "base"
    autoload_enabled: bool = True
    autoload_file: str = "autosave.awb"
    autosave: bool = False


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    harmonics: HarmonicsCfg = Field(default_factory=HarmonicsCfg)
    library: LibraryCfg = Field(default_factory=LibraryCfg)

    def analysis_config(self) -> AnalysisConfig:
        """Freeze the harmonic parameters for one analysis run."""

        return AnalysisConfig(
            edge_harmonic=self.harmonics.edge_harmonic,
            primal_orb=self.harmonics.primal_orb,
            half_orbs_for_doubles=self.harmonics.half_orbs_for_doubles,
        )


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    if os.name == "nt":
        base = Path(
            os.environ.get(
                "LOCALAPPDATA", str(Path.home() / "AppData" / "Local")
            )
        )
        return base / "AstroResonance"
    return Path(
        os.environ.get("ASTRORESONANCE_HOME", str(Path.home() / ".astroresonance"))
    )


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        LOG.info("No settings at %s; writing defaults", source_path)
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings file %s", source_path)
        raw = {}
    return Settings(**raw)
