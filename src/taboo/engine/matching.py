"""Match resolution and the Jack/Joker effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .piles import draw, draw_with_reshuffle
from .state import CENTER_ROW_SIZE, GameState
from .types import JACK, JOKER, Card

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    matched: bool
    captured: int = 0
    cleared: bool = False


def find_matches(center_row: list[Card], card: Card) -> list[Card]:
    # Jack and Joker are never matched by value, in either direction.
    if card.is_special:
        return []
    return [c for c in center_row if not c.is_special and c.value == card.value]


def attempt_match(state: GameState, player: int, card: Card) -> MatchResult:
    """Capture every center-row card with the same value as `card`.

    Leaves the state untouched when nothing matches. If the capture empties the
    row, the captured cards and `card` go to the player's score pile, otherwise
    to the discard pile.
    """
    matches = find_matches(state.center_row, card)
    if not matches:
        return MatchResult(matched=False)

    ps = state.players[player]
    state.center_row[:] = [c for c in state.center_row if c not in matches]
    ps.hand.remove(card)

    captured = matches + [card]
    cleared = not state.center_row
    if cleared:
        ps.score_pile.extend(captured)
    else:
        state.discard.extend(captured)

    state.emit(
        "CARD_MATCHED",
        player=player,
        card=str(card),
        captured=[str(c) for c in captured],
        cleared=cleared,
    )
    logger.debug("%s matched %s, captured %d (cleared=%s)", ps.name, card, len(captured), cleared)
    return MatchResult(matched=True, captured=len(captured), cleared=cleared)


def force_draw(state: GameState, player: int) -> Card | None:
    """Make `player` draw one card, reshuffling the discard pile if needed."""
    card = draw_with_reshuffle(state.rng, state.stock, state.discard)
    if card is None:
        state.emit("STOCK_EXHAUSTED", player=player)
        return None
    state.players[player].hand.append(card)
    state.emit("CARD_DRAWN", player=player, card=str(card))
    return card


def apply_jack(state: GameState, player: int, card: Card) -> None:
    ps = state.players[player]
    state.discard.extend(state.center_row)
    state.center_row.clear()
    ps.hand.remove(card)
    state.discard.append(card)

    # Refill straight from the stock: no reshuffle and no rank filter.
    while len(state.center_row) < CENTER_ROW_SIZE:
        nxt = draw(state.stock)
        if nxt is None:
            break
        state.center_row.append(nxt)

    state.emit("JACK_PLAYED", player=player, card=str(card), refilled=len(state.center_row))
    logger.debug("%s played %s; center row refilled with %d cards", ps.name, card, len(state.center_row))
    force_draw(state, state.opponent(player))


def apply_joker(state: GameState, player: int, card: Card) -> None:
    ps = state.players[player]
    ps.hand.remove(card)
    state.discard.append(card)
    state.emit("JOKER_PLAYED", player=player, card=str(card))
    logger.debug("%s played a Joker", ps.name)
    force_draw(state, state.opponent(player))


def apply_special(state: GameState, player: int, card: Card) -> str:
    if card.rank == JACK:
        apply_jack(state, player, card)
    elif card.rank == JOKER:
        apply_joker(state, player, card)
    else:
        raise ValueError(f"{card} is not a special card.")
    return card.rank
