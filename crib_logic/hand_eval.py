from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from itertools import groupby
from typing import Iterator, List, Optional, Sequence, Tuple

from .cards import Card, Rank, play_value

FIFTEEN_TARGET = 15
MIN_RUN_LENGTH = 3


class Category(IntEnum):
    # Declaration order is the block order of a score report.
    FIFTEEN = 0
    PAIR = 1
    RUN = 2
    FLUSH = 3
    NOB = 4


@dataclass(frozen=True)
class ScoreEvent:
    category: Category
    cards: Tuple[Card, ...]

    @property
    def points(self) -> int:
        if self.category == Category.FIFTEEN:
            return 2
        if self.category == Category.PAIR:
            # 2, 6 or 12: two points for every couple within the group.
            n = len(self.cards)
            return n * (n - 1)
        if self.category == Category.NOB:
            return 1
        return len(self.cards)


def _subsets_summing_to(
    cards: Sequence[Card],
    target: int,
    chosen: Tuple[Card, ...] = (),
) -> Iterator[Tuple[Card, ...]]:
    """Yield subsets in include-before-exclude order, left to right."""
    if not cards or target < 0:
        return
    first, rest = cards[0], cards[1:]
    value = play_value(first)
    if value == target:
        yield chosen + (first,)
    yield from _subsets_summing_to(rest, target - value, chosen + (first,))
    yield from _subsets_summing_to(rest, target, chosen)


def fifteens(cards: Sequence[Card]) -> List[ScoreEvent]:
    """Return one event for every distinct subset whose play values total 15."""
    return [ScoreEvent(Category.FIFTEEN, subset) for subset in _subsets_summing_to(cards, FIFTEEN_TARGET)]


def pairs(cards: Sequence[Card]) -> List[ScoreEvent]:
    """Return one event per rank held two or more times, in ascending rank order."""
    events: List[ScoreEvent] = []
    for _, group in groupby(sorted(cards), key=lambda card: card.rank):
        same_rank = tuple(group)
        if len(same_rank) >= 2:
            events.append(ScoreEvent(Category.PAIR, same_rank))
    return events


def _is_run(subset: Sequence[Card]) -> bool:
    if len(subset) < MIN_RUN_LENGTH:
        return False
    return all(int(b.rank) - int(a.rank) == 1 for a, b in zip(subset, subset[1:]))


def _subsets(cards: Sequence[Card], chosen: Tuple[Card, ...] = ()) -> Iterator[Tuple[Card, ...]]:
    """Yield every subset, exclude branch before include branch."""
    if not cards:
        yield chosen
        return
    yield from _subsets(cards[1:], chosen)
    yield from _subsets(cards[1:], chosen + (cards[0],))


def runs(cards: Sequence[Card]) -> List[ScoreEvent]:
    """
    Return the longest runs of three or more consecutive ranks.

    Every subset of the sorted cards is tested; a repeated rank breaks the
    consecutive check, so a duplicated card inside a run produces several
    runs of equal length rather than one longer run. Shorter runs contained
    in a longer one are dropped.
    """
    candidates = [subset for subset in _subsets(sorted(cards)) if _is_run(subset)]
    if not candidates:
        return []
    longest = max(len(subset) for subset in candidates)
    return [ScoreEvent(Category.RUN, subset) for subset in candidates if len(subset) == longest]


def flush(hand: Sequence[Card], starter: Card, crib: bool = False) -> Optional[ScoreEvent]:
    """
    Return the flush event, if any.

    The hand alone must be one suit; the starter can only extend it to five.
    In the crib only a five-card flush counts.
    """
    suit = hand[0].suit
    if any(card.suit != suit for card in hand[1:]):
        return None
    if starter.suit == suit:
        return ScoreEvent(Category.FLUSH, tuple(hand) + (starter,))
    if crib:
        return None
    return ScoreEvent(Category.FLUSH, tuple(hand))


def nob(hand: Sequence[Card], starter: Card) -> Optional[ScoreEvent]:
    """Return the event for the Jack of the starter's suit held in hand."""
    jack = Card(Rank.JACK, starter.suit)
    if jack in hand:
        return ScoreEvent(Category.NOB, (jack,))
    return None
