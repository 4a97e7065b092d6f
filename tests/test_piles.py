from __future__ import annotations

import random

from taboo.engine.piles import DECK_SIZE, build_deck, draw, draw_with_reshuffle, reshuffle, shuffle
from taboo.engine.types import Card, card_value


def test_deck_composition() -> None:
    deck = build_deck()
    assert len(deck) == DECK_SIZE == 54
    assert sum(1 for c in deck if c.rank == "Joker") == 2
    assert len({c.uid for c in deck}) == 54
    for suit in ("Hearts", "Diamonds", "Clubs", "Spades"):
        assert sum(1 for c in deck if c.suit == suit) == 13


def test_value_table() -> None:
    assert card_value("Ace") == 1
    assert card_value("Jack") == 0
    assert card_value("Joker") == 0
    assert card_value("Queen") == 11
    assert card_value("King") == 12
    assert card_value("7") == 7
    assert card_value("10") == 10
    assert card_value("Knight") == 0


def test_same_text_cards_are_distinct() -> None:
    a = Card("7", "Hearts", uid=1)
    b = Card("7", "Hearts", uid=2)
    assert str(a) == str(b) == "7 of Hearts"
    assert a != b
    pile = [a, b]
    pile.remove(b)
    assert pile == [a]
    assert str(Card("Joker", "", uid=3)) == "Joker"


def test_shuffle_is_seeded() -> None:
    d1 = build_deck()
    d2 = build_deck()
    shuffle(random.Random(99), d1)
    shuffle(random.Random(99), d2)
    assert d1 == d2
    assert sorted(c.uid for c in d1) == list(range(54))


def test_draw_takes_top_card() -> None:
    deck = build_deck()
    top = deck[-1]
    assert draw(deck) is top
    assert len(deck) == 53
    assert draw([]) is None


def test_reshuffle_moves_whole_discard_pile() -> None:
    deck: list[Card] = []
    discard = build_deck()[:10]
    moved = reshuffle(random.Random(1), discard, deck)
    assert moved == 10
    assert discard == []
    assert len(deck) == 10


def test_reshuffle_with_empty_discard_is_noop() -> None:
    deck: list[Card] = []
    assert reshuffle(random.Random(1), [], deck) == 0
    assert deck == []


def test_draw_with_reshuffle_refills_stock() -> None:
    deck: list[Card] = []
    discard = build_deck()[:6]
    card = draw_with_reshuffle(random.Random(3), deck, discard)
    assert card is not None
    assert len(deck) == 5
    assert discard == []


def test_draw_with_reshuffle_double_exhaustion() -> None:
    assert draw_with_reshuffle(random.Random(3), [], []) is None
