from __future__ import annotations

from taboo.engine.actions import COMPUTER
from taboo.engine.ai import play_automated_move
from taboo.engine.state import card_total


def test_plays_first_matching_card_in_hand_order(rig) -> None:
    state = rig(computer_hand=["3H", "5D", "8C"], row=["8S", "5H", "2C"])
    move = play_automated_move(state, COMPUTER)
    assert move is not None
    assert move.kind == "matched"
    assert str(move.card) == "5 of Diamonds"
    assert [str(c) for c in state.computer.hand] == ["3 of Hearts", "8 of Clubs"]


def test_draws_and_places_when_nothing_matches(rig) -> None:
    state = rig(computer_hand=["3H", "4D"], row=["8S", "QH"], stock=["6C", "9S"], discard=[])
    hand_before = len(state.computer.hand)

    move = play_automated_move(state, COMPUTER)

    assert move is not None and move.kind == "drew_and_placed"
    assert str(move.card) == "9 of Spades"
    assert len(state.stock) == 1
    assert len(state.computer.hand) == hand_before
    assert str(state.center_row[-1]) == "9 of Spades"


def test_draws_and_matches(rig) -> None:
    state = rig(computer_hand=["3H"], row=["9D", "QH"], stock=["6C", "9S"], discard=[])

    move = play_automated_move(state, COMPUTER)

    assert move is not None and move.kind == "drew_and_matched"
    assert move.captured == 2
    assert [str(c) for c in state.computer.hand] == ["3 of Hearts"]
    assert [str(c) for c in state.center_row] == ["Queen of Hearts"]


def test_hand_never_shrinks_by_more_than_drawn_card(rig) -> None:
    for seed in range(10):
        state = rig(computer_hand=["3H", "4D", "6S"], row=["8S", "QH", "KD"], seed=seed)
        stock_before = len(state.stock)
        hand_before = len(state.computer.hand)
        play_automated_move(state, COMPUTER)
        assert len(state.stock) == stock_before - 1
        assert len(state.computer.hand) >= hand_before - 1
        assert card_total(state) == 54


def test_no_action_with_empty_stock(rig) -> None:
    state = rig(computer_hand=["3H"], row=["8S"], stock=[], discard=["9D"])
    assert play_automated_move(state, COMPUTER) is None
    assert [str(c) for c in state.computer.hand] == ["3 of Hearts"]
    assert len(state.discard) == 1


def test_never_plays_specials(rig) -> None:
    state = rig(computer_hand=["JH", "JK"], row=["JD", "JK"], stock=["5C"], discard=[])
    move = play_automated_move(state, COMPUTER)
    assert move is not None and move.kind == "drew_and_placed"
    assert sorted(c.rank for c in state.computer.hand) == ["Jack", "Joker"]
