from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from astroresonance.config import (
    AnalysisConfig,
    HarmonicsCfg,
    Settings,
    get_config_home,
    load_settings,
    save_settings,
)


def test_missing_file_is_created_with_defaults(tmp_path: Path) -> None:
    target = tmp_path / "config.yaml"
    settings = load_settings(target)
    assert target.exists()
    assert settings.harmonics.edge_harmonic == 108
    assert settings.harmonics.orbs_divisor == 30
    assert settings.library.autoload_file == "autosave.awb"


def test_save_roundtrip(tmp_path: Path) -> None:
    settings = Settings()
    settings.harmonics.edge_harmonic = 36
    settings.harmonics.half_orbs_for_doubles = False
    settings.library.base_dir = "albums"
    path = save_settings(settings, tmp_path / "config.yaml")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert raw["harmonics"]["edge_harmonic"] == 36

    loaded = load_settings(path)
    assert loaded.harmonics.edge_harmonic == 36
    assert not loaded.harmonics.half_orbs_for_doubles
    assert loaded.library.base_dir == "albums"


def test_malformed_file_falls_back_to_defaults(tmp_path: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_settings(target) == Settings()


def test_analysis_config_is_derived_from_settings() -> None:
    config = Settings(harmonics=HarmonicsCfg(orbs_divisor=20)).analysis_config()
    assert config.primal_orb == pytest.approx(18.0)
    assert config.edge_harmonic == 108
    assert Settings().analysis_config().primal_orb == pytest.approx(12.0)


def test_harmonic_parameters_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        HarmonicsCfg(edge_harmonic=0)
    with pytest.raises(ValidationError):
        HarmonicsCfg(orbs_divisor=-1)
    with pytest.raises(ValidationError):
        AnalysisConfig(primal_orb=0.0)


def test_analysis_config_is_frozen() -> None:
    config = AnalysisConfig()
    with pytest.raises(ValidationError):
        config.edge_harmonic = 12


def test_orb_for_halves_between_charts() -> None:
    config = AnalysisConfig(primal_orb=12.0)
    assert config.orb_for(1) == 12.0
    assert config.orb_for(2) == 6.0
    assert AnalysisConfig(primal_orb=12.0, half_orbs_for_doubles=False).orb_for(3) == 12.0


@pytest.mark.skipif(os.name == "nt", reason="Windows keeps settings under LOCALAPPDATA")
def test_config_home_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTRORESONANCE_HOME", str(tmp_path / "home"))
    assert get_config_home() == tmp_path / "home"
