from __future__ import annotations

import logging

import pygame  # type: ignore[import-not-found]

from taboo.client.messages import log_lines
from taboo.engine.actions import HUMAN
from taboo.engine.game import (
    StepResult,
    current_state,
    draw_card,
    final_scores,
    is_game_over,
    new_game,
    place_forced,
    play_card,
)
from taboo.engine.state import GameState

from ..app import GameContext
from ..scene_base import SceneTransition
from ..ui import Button, draw_text

logger = logging.getLogger(__name__)

CARD_W, CARD_H = 90, 126
LOG_W = 320
MAX_LOG_LINES = 200


class TableScene:
    def __init__(self, ctx: GameContext, state: GameState) -> None:
        self.ctx = ctx
        self.state = state

        self._next: SceneTransition | None = None
        self._message: str = ""
        self._log: list[str] = log_lines(state, state.event_log)
        self._reported_game_over = False

        w, h = ctx.settings.width, ctx.settings.height
        self.btn_draw = Button(rect=pygame.Rect(20, 20, 160, 44), text="Draw Card", on_click=self._on_draw)
        self.btn_new = Button(rect=pygame.Rect(w - LOG_W - 180, 20, 160, 44), text="New Game", on_click=self._on_new_game)
        self.btn_quit = Button(
            rect=pygame.Rect(w - LOG_W - 180, h - 64, 160, 44),
            text="Quit",
            on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
        )

        self.ctx.telemetry.log("game_started", {"seed": state.seed})

    def _on_new_game(self) -> None:
        state = new_game(config=self.ctx.settings.game_config())
        self._next = SceneTransition(TableScene(self.ctx, state))

    def _apply(self, res: StepResult) -> None:
        if not res.ok:
            logger.debug("Rejected action (%s): %s", res.code, res.error)
            self._message = res.error or "Invalid action."
            return
        self._message = ""
        self._log.extend(log_lines(self.state, res.events))
        del self._log[:-MAX_LOG_LINES]
        if res.outcome == "drawn":
            self._message = "Click a card to place it in the center row."

    def _on_draw(self) -> None:
        self._apply(draw_card(self.state))

    def _on_hand_click(self, hand_index: int) -> None:
        if self.state.phase == "must_place":
            self._apply(place_forced(self.state, hand_index))
        else:
            self._apply(play_card(self.state, hand_index))

    def handle_event(self, event: pygame.event.Event) -> None:
        self.btn_new.handle_event(event)
        self.btn_quit.handle_event(event)
        if is_game_over(self.state):
            return

        self.btn_draw.handle_event(event)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            hit = self._hit_test_hand(event.pos)
            if hit is not None:
                self._on_hand_click(hit)

    def _row_rects(self, count: int, y: int) -> list[pygame.Rect]:
        avail = self.ctx.settings.width - LOG_W - 40
        stride = CARD_W + 10
        if count > 1 and count * stride > avail:
            stride = max(24, (avail - CARD_W) // (count - 1))
        return [pygame.Rect(20 + i * stride, y, CARD_W, CARD_H) for i in range(count)]

    def _hand_rects(self) -> list[pygame.Rect]:
        return self._row_rects(len(self.state.human.hand), self.ctx.settings.height - CARD_H - 90)

    def _hit_test_hand(self, pos: tuple[int, int]) -> int | None:
        # Later cards overlap earlier ones, so test from the top of the fan.
        rects = self._hand_rects()
        for i in range(len(rects) - 1, -1, -1):
            if rects[i].collidepoint(pos):
                return i
        return None

    def update(self, dt: float) -> SceneTransition | None:
        if is_game_over(self.state) and not self._reported_game_over:
            scores = final_scores(self.state)
            self.ctx.telemetry.log(
                "game_over",
                {
                    "seed": self.state.seed,
                    "human": scores.human,
                    "computer": scores.computer,
                    "winner": scores.winner,
                },
            )
            self._reported_game_over = True
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((16, 70, 40))
        fonts = self.ctx.assets.fonts
        view = current_state(self.state)

        self.btn_draw.enabled = view.phase == "idle" and view.current_player == HUMAN
        self.btn_draw.draw(screen, fonts.ui)
        self.btn_new.draw(screen, fonts.ui)
        self.btn_quit.draw(screen, fonts.ui)

        draw_text(screen, fonts.ui, f"Stock Pile: {view.stock_count}", (200, 22))
        draw_text(screen, fonts.ui, f"Discard: {view.discard_count}", (200, 46))
        draw_text(screen, fonts.ui, f"Opponent's Cards: {view.opponent_hand_count}", (380, 22))
        draw_text(
            screen,
            fonts.ui,
            f"Captured: you {view.score_pile_counts[0]}, opponent {view.score_pile_counts[1]}",
            (380, 46),
        )

        draw_text(screen, fonts.ui, "Center row", (20, 150))
        for card, rect in zip(view.center_row, self._row_rects(len(view.center_row), 180)):
            screen.blit(self.ctx.assets.card_face(card, (CARD_W, CARD_H)), rect.topleft)

        hand_y = self.ctx.settings.height - CARD_H - 90
        label = "Your hand (click a card to place it)" if view.phase == "must_place" else "Your hand"
        draw_text(screen, fonts.ui, label, (20, hand_y - 30))
        for card, rect in zip(view.hand, self._hand_rects()):
            screen.blit(self.ctx.assets.card_face(card, (CARD_W, CARD_H)), rect.topleft)
            if view.phase == "must_place":
                pygame.draw.rect(screen, (240, 240, 120), rect, width=3, border_radius=8)

        if self._message:
            draw_text(screen, fonts.ui, self._message, (20, hand_y + CARD_H + 20), color=(240, 200, 120))

        self._draw_log(screen)
        if is_game_over(self.state):
            self._draw_game_over(screen)

    def _draw_log(self, screen: pygame.Surface) -> None:
        w, h = self.ctx.settings.width, self.ctx.settings.height
        panel = pygame.Rect(w - LOG_W, 0, LOG_W, h)
        pygame.draw.rect(screen, (12, 12, 16), panel)
        fonts = self.ctx.assets.fonts
        line_h = 18
        visible = (h - 20) // line_h
        y = 10
        for line in self._log[-visible:]:
            draw_text(screen, fonts.small, line[:48], (panel.x + 10, y))
            y += line_h

    def _draw_game_over(self, screen: pygame.Surface) -> None:
        w, h = self.ctx.settings.width - LOG_W, self.ctx.settings.height
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        screen.blit(overlay, (0, 0))

        scores = final_scores(self.state)
        if scores.winner is None:
            title = "DRAW"
        else:
            title = "YOU WIN!" if scores.winner == HUMAN else "YOU LOSE"
        fonts = self.ctx.assets.fonts
        draw_text(screen, fonts.big, title, (w // 2 - 60, h // 2 - 80))
        draw_text(screen, fonts.ui, f"You: {scores.human}", (w // 2 - 60, h // 2 - 30))
        draw_text(screen, fonts.ui, f"{self.state.computer.name}: {scores.computer}", (w // 2 - 60, h // 2))
        self.btn_new.draw(screen, fonts.ui)
        self.btn_quit.draw(screen, fonts.ui)
