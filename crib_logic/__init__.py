from .cards import Card, Deck, Rank, Suit, card_to_id, play_value
from .deal import DealOutcome, cut_starter, deal, deal_hand
from .hand_eval import Category, ScoreEvent, fifteens, flush, nob, pairs, runs
from .scoring import IMPOSSIBLE_TOTALS, MAX_TOTAL, ScoreReport, compute_score, score_deal

__all__ = [
    "Card",
    "Category",
    "DealOutcome",
    "Deck",
    "IMPOSSIBLE_TOTALS",
    "MAX_TOTAL",
    "Rank",
    "ScoreEvent",
    "ScoreReport",
    "Suit",
    "card_to_id",
    "compute_score",
    "cut_starter",
    "deal",
    "deal_hand",
    "fifteens",
    "flush",
    "nob",
    "pairs",
    "play_value",
    "runs",
    "score_deal",
]
