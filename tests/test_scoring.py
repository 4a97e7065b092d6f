from __future__ import annotations

from taboo.engine.game import raw_score, score_player
from taboo.engine.state import PlayerState
from taboo.engine.types import Card


def _player(score_pile: list[tuple[str, str]], hand: list[tuple[str, str]]) -> PlayerState:
    uid = iter(range(100))
    return PlayerState(
        name="P",
        is_computer=False,
        hand=[Card(r, s, uid=next(uid)) for r, s in hand],
        score_pile=[Card(r, s, uid=next(uid)) for r, s in score_pile],
    )


def test_final_scorer_keeps_whole_pile() -> None:
    ps = _player([("King", "Hearts"), ("King", "Spades"), ("Ace", "Clubs")], [("9", "Hearts")])
    assert score_player(ps, is_final_scorer=True) == 25


def test_other_player_subtracts_hand() -> None:
    ps = _player([("Queen", "Hearts"), ("Queen", "Spades")], [("9", "Hearts"), ("Jack", "Clubs")])
    assert raw_score(ps, is_final_scorer=False) == 13
    assert score_player(ps, is_final_scorer=False) == 13


def test_negative_scores_clamp_to_zero() -> None:
    ps = _player([("2", "Hearts")], [("King", "Hearts"), ("Joker", "")])
    assert raw_score(ps, is_final_scorer=False) == -10
    assert score_player(ps, is_final_scorer=False) == 0


def test_scoring_is_deterministic() -> None:
    pile = [("7", "Hearts"), ("7", "Clubs"), ("10", "Spades")]
    hand = [("3", "Diamonds")]
    scores = {score_player(_player(pile, hand), is_final_scorer=False) for _ in range(5)}
    assert scores == {max(24 - 3, 0)}
