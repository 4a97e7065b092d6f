from __future__ import annotations

import random
from typing import Callable, Sequence

import pytest

from taboo.engine.piles import build_deck
from taboo.engine.state import GameConfig, GameState, PlayerState
from taboo.engine.types import Card

_SUITS = {"H": "Hearts", "D": "Diamonds", "C": "Clubs", "S": "Spades"}
_RANKS = {"J": "Jack", "Q": "Queen", "K": "King", "A": "Ace"}


def _take(pool: list[Card], code: str) -> Card:
    if code == "JK":
        rank, suit = "Joker", ""
    else:
        rank, suit = _RANKS.get(code[:-1], code[:-1]), _SUITS[code[-1]]
    for c in pool:
        if c.rank == rank and c.suit == suit:
            pool.remove(c)
            return c
    raise KeyError(code)


Rig = Callable[..., GameState]


@pytest.fixture
def rig() -> Rig:
    """Build a game with chosen cards, e.g. rig(hand=["7D"], row=["7H", "7S", "2C"]).

    Cards are written rank+suit letter ("10H", "QS", "JK" for a Joker). Unlisted
    cards go to the stock, or to the discard pile when only the stock is given,
    so the deck stays whole. When both piles are given, unlisted cards are left
    out of the game.
    """

    def build(
        hand: Sequence[str] = (),
        computer_hand: Sequence[str] = ("2H",),
        row: Sequence[str] = (),
        stock: Sequence[str] | None = None,
        discard: Sequence[str] | None = None,
        seed: int = 7,
    ) -> GameState:
        pool = build_deck()
        human = PlayerState(name="Human", is_computer=False, hand=[_take(pool, c) for c in hand])
        computer = PlayerState(
            name="Computer", is_computer=True, hand=[_take(pool, c) for c in computer_hand]
        )
        center = [_take(pool, c) for c in row]
        stock_cards = [_take(pool, c) for c in stock] if stock is not None else None
        discard_cards = [_take(pool, c) for c in discard] if discard is not None else None
        if stock_cards is None:
            stock_cards, pool = pool, []
        if discard_cards is None:
            discard_cards, pool = pool, []
        return GameState(
            config=GameConfig(),
            seed=seed,
            rng=random.Random(seed),
            players=[human, computer],
            stock=stock_cards,
            discard=discard_cards,
            center_row=center,
        )

    return build
