from __future__ import annotations

from typing import List, Sequence

from crib_logic import Card, Category, ScoreEvent, ScoreReport, Suit, card_to_id

# Compact card rendering used by the TUI and the survey printout.
RANK_TO_STR = {
    1: "A",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "J",
    12: "Q",
    13: "K",
}

SUIT_TO_STR = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

# Unicode playing cards, one row per suit in Suit order, ace to king.
# The knight (U+1F0AC and friends) is skipped.
CARD_GLYPHS = (
    "🂡🂢🂣🂤🂥🂦🂧🂨🂩🂪🂫🂭🂮"
    "🂱🂲🂳🂴🂵🂶🂷🂸🂹🂺🂻🂽🂾"
    "🃁🃂🃃🃄🃅🃆🃇🃈🃉🃊🃋🃍🃎"
    "🃑🃒🃓🃔🃕🃖🃗🃘🃙🃚🃛🃝🃞"
)

_GROUP_NAMES = {
    2: "a pair",
    3: "threes",
    4: "fours",
}


def card_str(card: Card) -> str:
    """Format a card as short rank+suit text (example: '10♥')."""
    return f"{RANK_TO_STR[int(card.rank)]}{SUIT_TO_STR[card.suit]}"


def card_glyph(card: Card) -> str:
    """Return the single Unicode playing-card character for a card."""
    return CARD_GLYPHS[card_to_id(card)]


def cards_str(cards: Sequence[Card]) -> str:
    return " ".join(card_str(card) for card in cards)


def category_name(cat: Category) -> str:
    """Return human-readable category labels for score logs."""
    names = {
        Category.FIFTEEN: "Fifteen",
        Category.PAIR: "Pair",
        Category.RUN: "Run",
        Category.FLUSH: "Flush",
        Category.NOB: "Nob",
    }
    return names[cat]


def event_line(event: ScoreEvent, running_total: int) -> str:
    """Describe one scoring event the way it is called out at the table."""
    cards = cards_str(event.cards)
    if event.category == Category.FIFTEEN:
        return f"Fifteen {running_total}: {cards}"
    if event.category == Category.PAIR:
        return f"{event.points} for {_GROUP_NAMES[len(event.cards)]} {cards}, {running_total}"
    if event.category == Category.RUN:
        return f"{event.points} for the run {cards}, {running_total}"
    if event.category == Category.FLUSH:
        return f"{event.points} for the flush {cards}, {running_total}"
    return f"One for his nob {cards}, {running_total}"


def report_lines(report: ScoreReport) -> List[str]:
    """Return one line per event followed by the final 'Total N' line."""
    lines = [
        event_line(event, running)
        for event, running in zip(report.events, report.running_totals())
    ]
    lines.append(f"Total {report.total}")
    return lines


def deal_line(report: ScoreReport) -> str:
    """Format the hand and starter on one line (example: '5♥ 5♣ 5♦ J♠ | 5♠')."""
    return f"{cards_str(report.hand)} | {card_str(report.starter)}"
