from __future__ import annotations

import logging
import traceback

import pygame  # type: ignore[import-not-found]

from taboo.engine.game import new_game

from ..app import GameContext
from ..scene_base import SceneTransition
from ..ui import Button, draw_text
from .table import TableScene

logger = logging.getLogger(__name__)


class BootScene:
    def __init__(self, ctx: GameContext, error: str | None = None) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error = error
        self._quit_button: Button | None = None
        if error is not None:
            self._show_quit()

    def _show_quit(self) -> None:
        self._quit_button = Button(
            rect=pygame.Rect(20, self.ctx.settings.height - 80, 140, 44),
            text="Quit",
            on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
        )

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot or self._error is not None:
            return None
        self._did_boot = True
        try:
            settings = self.ctx.settings
            state = new_game(seed=settings.seed, config=settings.game_config())
            self.ctx.telemetry.log("boot", {"ok": True, "seed": state.seed})
            return SceneTransition(TableScene(self.ctx, state))
        except Exception as e:
            logger.exception("Boot failed")
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            self._show_quit()
            return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((10, 10, 10))
        fonts = self.ctx.assets.fonts
        draw_text(screen, fonts.big, "Taboo", (20, 20))

        if self._error is None:
            draw_text(screen, fonts.ui, "Shuffling and dealing...", (20, 80))
        else:
            draw_text(screen, fonts.ui, "BOOT ERROR", (20, 80), color=(240, 80, 80))
            y = 120
            for line in self._error.splitlines()[:22]:
                draw_text(screen, fonts.small, line[:120], (20, y), color=(230, 230, 230))
                y += 18
            if self._quit_button is not None:
                self._quit_button.draw(screen, fonts.ui)
