"""Headless rules engine for Taboo.

IMPORTANT: This package must never import pygame.
"""

from .actions import COMPUTER, HUMAN, DrawAction, PlaceCardAction, PlayCardAction
from .game import (
    FinalScores,
    GameView,
    StepResult,
    current_state,
    draw_card,
    final_scores,
    is_game_over,
    new_game,
    place_forced,
    play_card,
    replay,
    step,
)
from .state import GameConfig, GameState, card_total
from .types import Card

__all__ = [
    "COMPUTER",
    "Card",
    "DrawAction",
    "FinalScores",
    "GameConfig",
    "GameState",
    "GameView",
    "HUMAN",
    "PlaceCardAction",
    "PlayCardAction",
    "StepResult",
    "card_total",
    "current_state",
    "draw_card",
    "final_scores",
    "is_game_over",
    "new_game",
    "place_forced",
    "play_card",
    "replay",
    "step",
]
