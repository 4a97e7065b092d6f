from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from taboo.engine.state import GameConfig


class SettingsError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SettingsError(f"Missing settings file: {path}") from e
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: e.path)
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise SettingsError("\n".join(lines))


@dataclass(frozen=True)
class Settings:
    width: int = 1200
    height: int = 800
    seed: int | None = None
    player_name: str = "Human"
    computer_name: str = "Computer"
    telemetry: bool = True
    log_level: str = "INFO"

    def game_config(self) -> GameConfig:
        return GameConfig(human_name=self.player_name, computer_name=self.computer_name)

    def with_overrides(self, **overrides: object) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)  # type: ignore[arg-type]


def _parse(raw: Mapping[str, object]) -> Settings:
    # Schema has already checked types and ranges.
    defaults = Settings()
    window = raw.get("window", {})
    if not isinstance(window, dict):
        raise SettingsError("settings.window must be an object")
    seed = raw.get("seed")
    return Settings(
        width=int(window.get("width", defaults.width)),
        height=int(window.get("height", defaults.height)),
        seed=seed if isinstance(seed, int) else None,
        player_name=str(raw.get("player_name", defaults.player_name)),
        computer_name=str(raw.get("computer_name", defaults.computer_name)),
        telemetry=bool(raw.get("telemetry", defaults.telemetry)),
        log_level=str(raw.get("log_level", defaults.log_level)),
    )


class SettingsService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load(self) -> Settings:
        path = self._data_dir / "settings.json"
        raw = _load_json(path)
        schema = _load_json(self._schema_dir / "settings.schema.json")
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise SettingsError("settings.json must be an object")
        return _parse(raw)
