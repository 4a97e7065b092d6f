from __future__ import annotations

import argparse
import logging

import pygame  # type: ignore[import-not-found]

from taboo.logging_utils import setup_logging
from taboo.paths import get_paths
from taboo.services.settings import Settings, SettingsError, SettingsService
from taboo.services.telemetry import TelemetryService

from .app import App, GameContext
from .asset_manager import AssetManager
from .scenes.boot import BootScene

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(prog="taboo")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None, help="fixed shuffle seed")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    paths = get_paths()
    settings_service = SettingsService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    boot_error: str | None = None
    try:
        settings = settings_service.load()
    except SettingsError as e:
        settings = Settings()
        boot_error = str(e)
    settings = settings.with_overrides(
        width=args.width, height=args.height, seed=args.seed, log_level=args.log_level
    )

    setup_logging(settings.log_level)
    if boot_error is not None:
        logger.error("Could not load settings: %s", boot_error)

    pygame.init()
    screen = pygame.display.set_mode((settings.width, settings.height))
    pygame.display.set_caption("Taboo Card Game")

    clock = pygame.time.Clock()
    assets = AssetManager()
    telemetry = TelemetryService(paths.userdata_dir / "telemetry.jsonl", enabled=settings.telemetry)

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        assets=assets,
        settings=settings,
        telemetry=telemetry,
    )

    app = App(ctx, BootScene(ctx, error=boot_error))
    code = app.run()
    pygame.quit()
    return code


if __name__ == "__main__":
    raise SystemExit(main())
