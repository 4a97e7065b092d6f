from __future__ import annotations

from dataclasses import dataclass

HUMAN = 0
COMPUTER = 1


@dataclass(frozen=True)
class DrawAction:
    player: int = HUMAN


@dataclass(frozen=True)
class PlayCardAction:
    """Play a hand card against the center row (or trigger a Jack/Joker)."""

    hand_index: int
    player: int = HUMAN


@dataclass(frozen=True)
class PlaceCardAction:
    """Put any hand card face-up into the center row after drawing."""

    hand_index: int
    player: int = HUMAN


Action = DrawAction | PlayCardAction | PlaceCardAction
