from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .cards import Card, Deck

HAND_SIZE = 4


@dataclass(frozen=True)
class DealOutcome:
    hand: Tuple[Card, ...]
    starter: Card


def deal_hand(deck: Deck) -> Tuple[Card, ...]:
    """Remove a four-card hand from the end of the deck, keeping dealt order."""
    return tuple(deck.draw(HAND_SIZE))


def cut_starter(deck: Deck) -> Card:
    """Turn up the next card of the deck as the starter."""
    return deck.draw(1)[0]


def deal(deck: Deck) -> DealOutcome:
    """
    Deal one hand and its starter from the deck.

    The hand is taken first so the starter is always the card that follows it,
    matching the order a dealer would turn the cut.
    """
    hand = deal_hand(deck)
    starter = cut_starter(deck)
    return DealOutcome(hand=hand, starter=starter)
