from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional


class Suit(IntEnum):
    # Order only matters for deterministic sorting; suits carry no rank.
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


@dataclass(frozen=True, order=True)
class Card:
    rank: Rank
    suit: Suit


def play_value(card: Card) -> int:
    """Return the counting value used for fifteens (face cards count 10)."""
    return min(int(card.rank), 10)


def card_to_id(card: Card) -> int:
    """Return a stable [0, 51] card ID, suit-major in Suit order."""
    return int(card.suit) * 13 + int(card.rank) - 1


class Deck:
    """Mutable deck that supports drawing from the end in O(1)."""

    def __init__(self, rng: Optional[random.Random] = None, shuffle: bool = True):
        self.rng = rng if rng is not None else random.Random()
        self.cards: List[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]
        if shuffle:
            self.shuffle()

    @classmethod
    def ordered(cls) -> "Deck":
        """Return an unshuffled deck in the fixed base order."""
        return cls(shuffle=False)

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)

    def draw(self, n: int) -> List[Card]:
        """Draw exactly n cards or raise if the deck is exhausted."""
        if n == 0:
            return []
        if len(self.cards) < n:
            raise RuntimeError("Deck out of cards")
        drawn = self.cards[-n:]
        del self.cards[-n:]
        return drawn

    def __len__(self) -> int:
        return len(self.cards)
