from __future__ import annotations

from dataclasses import dataclass

import pygame  # type: ignore[import-not-found]

from taboo.engine.types import Card

Color = tuple[int, int, int]

SUIT_COLORS: dict[str, Color] = {
    "Hearts": (200, 40, 40),
    "Diamonds": (200, 40, 40),
    "Clubs": (20, 20, 20),
    "Spades": (20, 20, 20),
    "": (120, 40, 160),
}


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font


class AssetManager:
    """Fonts plus cached card faces drawn procedurally."""

    def __init__(self) -> None:
        self._cache: dict[tuple[str, str, int, int], pygame.Surface] = {}

        pygame.font.init()
        self.fonts = Fonts(
            ui=pygame.font.SysFont(None, 24),
            small=pygame.font.SysFont(None, 18),
            big=pygame.font.SysFont(None, 34),
        )

    def card_face(self, card: Card, size: tuple[int, int]) -> pygame.Surface:
        w, h = size
        key = (card.rank, card.suit, w, h)
        if key in self._cache:
            return self._cache[key]

        surf = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.rect(surf, (245, 245, 235), surf.get_rect(), border_radius=8)
        pygame.draw.rect(surf, (0, 0, 0), surf.get_rect(), width=2, border_radius=8)
        color = SUIT_COLORS.get(card.suit, (20, 20, 20))
        rank = self.fonts.big.render(card.rank if card.rank != "Joker" else "JK", True, color)
        surf.blit(rank, rank.get_rect(center=(w // 2, h // 2 - 10)))
        if card.suit:
            suit = self.fonts.small.render(card.suit, True, color)
            surf.blit(suit, suit.get_rect(center=(w // 2, h // 2 + 20)))
        self._cache[key] = surf
        return surf
