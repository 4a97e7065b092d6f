from __future__ import annotations

import json
from pathlib import Path

import pytest

from taboo.paths import get_paths
from taboo.services.settings import SettingsError, SettingsService


def test_shipped_settings_validate() -> None:
    paths = get_paths()
    settings = SettingsService(paths.data_dir, paths.schema_dir).load()
    assert settings.width >= 800
    assert settings.game_config().human_name == settings.player_name


def _service_with(tmp_path: Path, raw: object) -> SettingsService:
    paths = get_paths()
    (tmp_path / "settings.json").write_text(json.dumps(raw), encoding="utf-8")
    return SettingsService(tmp_path, paths.schema_dir)


def test_seed_and_names_are_read(tmp_path: Path) -> None:
    svc = _service_with(
        tmp_path,
        {"window": {"width": 1024, "height": 768}, "seed": 11, "player_name": "Ada", "telemetry": False},
    )
    settings = svc.load()
    assert settings.seed == 11
    assert settings.player_name == "Ada"
    assert settings.computer_name == "Computer"
    assert not settings.telemetry


def test_invalid_settings_rejected(tmp_path: Path) -> None:
    svc = _service_with(tmp_path, {"window": {"width": 100, "height": 768}, "log_level": "LOUD"})
    with pytest.raises(SettingsError) as exc:
        svc.load()
    assert "Schema validation failed" in str(exc.value)


def test_missing_file(tmp_path: Path) -> None:
    paths = get_paths()
    with pytest.raises(SettingsError):
        SettingsService(tmp_path, paths.schema_dir).load()


def test_overrides_skip_none() -> None:
    paths = get_paths()
    base = SettingsService(paths.data_dir, paths.schema_dir).load()
    s = base.with_overrides(width=None, seed=3)
    assert s.width == base.width
    assert s.seed == 3
