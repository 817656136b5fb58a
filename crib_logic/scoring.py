from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import List, Sequence, Tuple

from .cards import Card
from .deal import HAND_SIZE, DealOutcome
from .hand_eval import ScoreEvent, fifteens, flush, nob, pairs, runs

# Totals no five-card combination can produce.
IMPOSSIBLE_TOTALS = frozenset({19, 25, 26, 27})
MAX_TOTAL = 29


@dataclass(frozen=True)
class ScoreReport:
    hand: Tuple[Card, ...]
    starter: Card
    events: Tuple[ScoreEvent, ...]

    @property
    def total(self) -> int:
        return sum(event.points for event in self.events)

    def running_totals(self) -> List[int]:
        """Return the cumulative score after each event."""
        return list(accumulate(event.points for event in self.events))


def compute_score(hand: Sequence[Card], starter: Card, crib: bool = False) -> ScoreReport:
    """
    Count a hand and its starter.

    Events come out in block order (fifteens, pairs, runs, flush, nob) and,
    within a block, in the order each count enumerates them. Inputs are never
    mutated, so repeated calls on the same cards return equal reports.
    """
    if len(hand) != HAND_SIZE:
        raise ValueError(f"A hand must hold exactly {HAND_SIZE} cards, got {len(hand)}")
    if starter in hand:
        raise ValueError(f"Starter {starter} duplicates a card in the hand")

    hand = tuple(hand)
    five_cards = hand + (starter,)

    events: List[ScoreEvent] = []
    events.extend(fifteens(five_cards))
    events.extend(pairs(five_cards))
    events.extend(runs(five_cards))

    flush_event = flush(hand, starter, crib=crib)
    if flush_event is not None:
        events.append(flush_event)

    nob_event = nob(hand, starter)
    if nob_event is not None:
        events.append(nob_event)

    return ScoreReport(hand=hand, starter=starter, events=tuple(events))


def score_deal(outcome: DealOutcome, crib: bool = False) -> ScoreReport:
    """Count a dealt hand against its cut starter."""
    return compute_score(outcome.hand, outcome.starter, crib=crib)
