from __future__ import annotations

from .actions import Action, DrawAction, PlaceCardAction, PlayCardAction
from .state import GameState, PlayerState
from .types import Card


def card_to_dict(c: Card) -> dict[str, object]:
    return {"rank": c.rank, "suit": c.suit, "uid": c.uid}


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, PlayCardAction):
        return {"type": "play", "player": a.player, "hand_index": a.hand_index}
    if isinstance(a, PlaceCardAction):
        return {"type": "place", "player": a.player, "hand_index": a.hand_index}
    if isinstance(a, DrawAction):
        return {"type": "draw", "player": a.player}
    # should be unreachable
    return {"type": "unknown"}


def _cards(cards: list[Card]) -> list[dict[str, object]]:
    return [card_to_dict(c) for c in cards]


def _player_to_dict(p: PlayerState) -> dict[str, object]:
    return {
        "name": p.name,
        "is_computer": p.is_computer,
        "hand": _cards(p.hand),
        "score_pile": _cards(p.score_pile),
        "score": p.score,
    }


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    return {
        "seed": state.seed,
        "current_player": state.current_player,
        "phase": state.phase,
        "has_drawn": state.has_drawn,
        "finisher": state.finisher,
        "stock": _cards(state.stock),
        "discard": _cards(state.discard),
        "center_row": _cards(state.center_row),
        "players": [_player_to_dict(p) for p in state.players],
        "action_log": [action_to_dict(a) for a in state.action_log],
    }
