from __future__ import annotations

import logging
import random

from .types import JOKER, RANKS, SUITS, Card

logger = logging.getLogger(__name__)

DECK_SIZE = 54


def build_deck() -> list[Card]:
    """Return the 52 standard cards plus two Jokers, unshuffled."""
    deck: list[Card] = []
    uid = 0
    for suit in SUITS:
        for rank in RANKS:
            deck.append(Card(rank=rank, suit=suit, uid=uid))
            uid += 1
    for _ in range(2):
        deck.append(Card(rank=JOKER, suit="", uid=uid))
        uid += 1
    return deck


def shuffle(rng: random.Random, deck: list[Card]) -> None:
    rng.shuffle(deck)


def draw(deck: list[Card]) -> Card | None:
    # Top of the stock is the end of the list.
    if not deck:
        return None
    return deck.pop()


def reshuffle(rng: random.Random, discard: list[Card], deck: list[Card]) -> int:
    """Move the whole discard pile into the stock and shuffle it.

    Returns the number of cards moved; 0 means both piles are now exhausted.
    """
    moved = 0
    while discard:
        deck.append(discard.pop())
        moved += 1
    if moved:
        shuffle(rng, deck)
        logger.debug("Reshuffled %d discarded cards into the stock", moved)
    return moved


def draw_with_reshuffle(rng: random.Random, deck: list[Card], discard: list[Card]) -> Card | None:
    card = draw(deck)
    if card is not None:
        return card
    if reshuffle(rng, discard, deck) == 0:
        logger.debug("Stock and discard pile are both empty")
        return None
    return draw(deck)
