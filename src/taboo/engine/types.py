from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Rank = Literal["2", "3", "4", "5", "6", "7", "8", "9", "10", "Jack", "Queen", "King", "Ace", "Joker"]
Suit = Literal["Hearts", "Diamonds", "Clubs", "Spades", ""]

SUITS: tuple[Suit, ...] = ("Hearts", "Diamonds", "Clubs", "Spades")
RANKS: tuple[Rank, ...] = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "Jack", "Queen", "King", "Ace")
JOKER: Rank = "Joker"
JACK: Rank = "Jack"

_FACE_VALUES: dict[str, int] = {"Ace": 1, "Jack": 0, "Joker": 0, "Queen": 11, "King": 12}


@dataclass(frozen=True)
class Card:
    """A single physical card.

    `uid` is unique within one deck, so two cards never compare equal unless they
    are the same physical card.
    """

    rank: Rank
    suit: Suit
    uid: int = 0

    def __post_init__(self) -> None:
        if self.rank != JOKER and self.rank not in RANKS:
            raise ValueError(f"Unknown rank: {self.rank!r}")
        if self.rank == JOKER and self.suit != "":
            raise ValueError("Jokers have no suit.")
        if self.rank != JOKER and self.suit not in SUITS:
            raise ValueError(f"Unknown suit: {self.suit!r}")

    @property
    def value(self) -> int:
        return card_value(self.rank)

    @property
    def is_special(self) -> bool:
        return self.rank in (JACK, JOKER)

    def __str__(self) -> str:
        if not self.suit:
            return self.rank
        return f"{self.rank} of {self.suit}"


def card_value(rank: str) -> int:
    if rank in _FACE_VALUES:
        return _FACE_VALUES[rank]
    try:
        return int(rank)
    except ValueError:
        return 0


def total_value(cards: list[Card]) -> int:
    return sum(c.value for c in cards)
