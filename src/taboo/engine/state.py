from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Literal

from .actions import COMPUTER, HUMAN, Action
from .types import Card

Event = dict[str, object]
Phase = Literal["idle", "must_place", "game_over"]

HAND_SIZE = 5
CENTER_ROW_SIZE = 4


@dataclass(frozen=True)
class GameConfig:
    human_name: str = "Human"
    computer_name: str = "Computer"


@dataclass
class PlayerState:
    name: str
    is_computer: bool
    hand: list[Card] = field(default_factory=list)
    score_pile: list[Card] = field(default_factory=list)
    score: int = 0


@dataclass
class GameState:
    config: GameConfig
    seed: int
    rng: random.Random
    players: list[PlayerState]
    stock: list[Card] = field(default_factory=list)
    discard: list[Card] = field(default_factory=list)
    center_row: list[Card] = field(default_factory=list)
    current_player: int = HUMAN
    phase: Phase = "idle"
    has_drawn: bool = False
    finisher: int | None = None
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    @property
    def human(self) -> PlayerState:
        return self.players[HUMAN]

    @property
    def computer(self) -> PlayerState:
        return self.players[COMPUTER]

    def opponent(self, player: int) -> int:
        return 1 - player

    def emit(self, event_type: str, **payload: object) -> Event:
        ev: Event = {"type": event_type, **payload}
        self.event_log.append(ev)
        return ev


def card_total(state: GameState) -> int:
    """Count every card in play; always equals the deck size."""
    total = len(state.stock) + len(state.discard) + len(state.center_row)
    for ps in state.players:
        total += len(ps.hand) + len(ps.score_pile)
    return total
