import random

import pytest

from crib_logic import Card, Rank, Suit

_SUITS = {"S": Suit.SPADES, "H": Suit.HEARTS, "D": Suit.DIAMONDS, "C": Suit.CLUBS}
_RANKS = {"A": Rank.ACE, "J": Rank.JACK, "Q": Rank.QUEEN, "K": Rank.KING}


def parse_card(text):
    """Build a card from short text such as '10H', 'JS' or 'AC'."""
    rank_text, suit_text = text[:-1], text[-1]
    rank = _RANKS[rank_text] if rank_text in _RANKS else Rank(int(rank_text))
    return Card(rank, _SUITS[suit_text])


def parse_cards(text):
    return [parse_card(part) for part in text.split()]


@pytest.fixture()
def cards():
    return parse_cards


@pytest.fixture()
def card():
    return parse_card


@pytest.fixture()
def rng():
    return random.Random(1234)
