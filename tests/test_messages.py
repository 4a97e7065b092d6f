from __future__ import annotations

from taboo.client.messages import describe_event, log_lines
from taboo.engine.game import play_card


def test_computer_draws_are_hidden(rig) -> None:
    state = rig(hand=["4D"])
    assert describe_event(state, {"type": "CARD_DRAWN", "player": 1, "card": "9 of Spades"}) == "Computer drew a card."
    assert describe_event(state, {"type": "CARD_DRAWN", "player": 0, "card": "9 of Spades"}) == "You drew 9 of Spades."


def test_game_over_lines(rig) -> None:
    state = rig(hand=["7D"], computer_hand=["2H"], row=["7H"])
    res = play_card(state, 0)
    lines = log_lines(state, res.events)
    assert "Cleared the center row!" in lines[0]
    assert "You have finished all cards!" in lines
    assert "You win!" in lines
