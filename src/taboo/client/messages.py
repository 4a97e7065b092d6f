"""Turn engine events into the lines shown in the game log."""

from __future__ import annotations

from taboo.engine.actions import HUMAN
from taboo.engine.state import Event, GameState


def _who(state: GameState, player: object) -> str:
    if player == HUMAN:
        return "You"
    if isinstance(player, int):
        return state.players[player].name
    return "?"


def describe_event(state: GameState, ev: Event) -> str | None:
    t = ev.get("type")
    p = ev.get("player")
    who = _who(state, p)
    card = ev.get("card", "")

    if t == "GAME_STARTED":
        return "Game started! It's your turn."
    if t == "TURN_STARTED":
        return "It's your turn!" if p == HUMAN else f"{who}'s turn."
    if t == "CARD_DRAWN":
        # The computer's draws stay hidden.
        return f"You drew {card}." if p == HUMAN else f"{who} drew a card."
    if t == "CARD_MATCHED":
        captured = ev.get("captured", [])
        n = len(captured) if isinstance(captured, list) else 0
        line = f"{who} played {card}, capturing {n} cards."
        if ev.get("cleared"):
            line += " Cleared the center row!"
        return line
    if t == "CARD_PLACED":
        return f"{who} placed {card} in the center."
    if t == "JACK_PLAYED":
        return f"{who} played a Jack! Clearing all face-up cards."
    if t == "JOKER_PLAYED":
        return f"{who} played a Joker! Opponent draws a card."
    if t == "STOCK_EXHAUSTED":
        return "Stock and discard pile are empty; nothing to draw."
    if t == "TURN_PASSED":
        return f"{who} passed."
    if t == "GAME_OVER":
        finisher = ev.get("finisher")
        done = "You have" if finisher == HUMAN else f"{_who(state, finisher)} has"
        lines = [
            f"{done} finished all cards!",
            f"Final scores: You {ev.get('human')}, {state.computer.name} {ev.get('computer')}.",
        ]
        winner = ev.get("winner")
        if winner is None:
            lines.append("It's a draw!")
        else:
            lines.append("You win!" if winner == HUMAN else f"{state.computer.name} wins!")
        return "\n".join(lines)
    return None


def log_lines(state: GameState, events: list[Event]) -> list[str]:
    out: list[str] = []
    for ev in events:
        msg = describe_event(state, ev)
        if msg:
            out.extend(msg.splitlines())
    return out
