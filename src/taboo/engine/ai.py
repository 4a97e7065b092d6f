from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from .matching import attempt_match
from .piles import draw
from .state import GameState
from .types import Card

logger = logging.getLogger(__name__)

AIMoveKind = Literal["matched", "drew_and_matched", "drew_and_placed"]


@dataclass(frozen=True)
class AIMove:
    kind: AIMoveKind
    card: Card
    captured: int = 0


def play_automated_move(state: GameState, player: int) -> AIMove | None:
    """Greedy move for the automated player.

    Plays the first hand card that matches the center row. Otherwise draws one
    card from the stock (never reshuffling) and either plays it or places it
    face-up in the row. Returns None when nothing could be done, which only
    happens with an empty stock and no match in hand.

    Jacks and Jokers are never played, so a hand holding one cannot be emptied
    by this strategy; a drawn special is simply placed in the row.
    """
    ps = state.players[player]

    for card in list(ps.hand):
        result = attempt_match(state, player, card)
        if result.matched:
            return AIMove(kind="matched", card=card, captured=result.captured)

    drawn = draw(state.stock)
    if drawn is None:
        logger.debug("%s has no match and the stock is empty", ps.name)
        return None

    ps.hand.append(drawn)
    state.emit("CARD_DRAWN", player=player, card=str(drawn))

    result = attempt_match(state, player, drawn)
    if result.matched:
        return AIMove(kind="drew_and_matched", card=drawn, captured=result.captured)

    ps.hand.remove(drawn)
    state.center_row.append(drawn)
    state.emit("CARD_PLACED", player=player, card=str(drawn))
    logger.debug("%s placed %s in the center row", ps.name, drawn)
    return AIMove(kind="drew_and_placed", card=drawn)
