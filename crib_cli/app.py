from __future__ import annotations

import argparse
import random
from typing import Dict, List, Optional

from crib_logic import Category, DealOutcome, Deck, ScoreReport, deal, score_deal
from crib_cli.display import (
    card_glyph,
    card_str,
    category_name,
    deal_line,
    report_lines,
)
from crib_cli.styles import APP_CSS

try:
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Button, Footer, Header, RichLog, Static
except ImportError as exc:
    raise SystemExit(
        "Textual is required for this interface. Install it with: python3 -m pip install textual"
    ) from exc

# Hand plus starter.
SHOWN_CARDS = 5


class CribbageTUI(App[None]):
    """Textual app that deals cribbage hands and shows how each one counts."""

    CSS = APP_CSS

    BINDINGS = [("d", "deal", "Deal"), ("c", "toggle_crib", "Crib"), ("q", "quit", "Quit")]

    def __init__(self, args: argparse.Namespace) -> None:
        super().__init__()
        self.args = args

        if args.seed is None:
            self.seed = random.SystemRandom().randrange(0, 2**63)
        else:
            self.seed = args.seed
        self.rng = random.Random(self.seed)

        self.crib = bool(args.crib)
        self.deck: Optional[Deck] = None
        self.outcome: Optional[DealOutcome] = None
        self.report: Optional[ScoreReport] = None
        self.deals = 0
        self.best_total = 0

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="layout"):
            with Vertical(id="left_col"):
                yield Static(id="status")
                yield Static(id="tally")
                yield RichLog(id="log", highlight=False, markup=False, auto_scroll=True)
            with Vertical(id="center_col"):
                yield Static("Hand | Starter", id="hand_title")
                with Horizontal(id="hand_row"):
                    for i in range(SHOWN_CARDS):
                        classes = "card starter" if i == SHOWN_CARDS - 1 else "card"
                        yield Static("", id=f"card-{i}", classes=classes)
                yield Static("", id="center_spacer")
                with Horizontal(id="controls"):
                    yield Button("Deal", id="deal", classes="control")
                    yield Button("Crib: off", id="crib", classes="control")
        yield Footer()

    def on_mount(self) -> None:
        for button in self.query(Button):
            button.can_focus = False
        self._log(f"Run seed: {self.seed}")
        self.action_deal()

    def _log(self, message: str) -> None:
        self.query_one("#log", RichLog).write(message)

    def _refresh_all(self) -> None:
        """Redraw every visible panel from current in-memory state."""
        self._refresh_status()
        self._refresh_tally()
        self._refresh_cards()
        self.query_one("#crib", Button).label = "Crib: on" if self.crib else "Crib: off"

    def _refresh_status(self) -> None:
        mode = "crib" if self.crib else "hand"
        left = "-" if self.deck is None else str(len(self.deck))
        title = f"Deal {self.deals} | Counting as: {mode} | Cards left: {left}"
        if self.report is None:
            prompt = "Press d to deal."
        else:
            prompt = f"Total {self.report.total} (best this session: {self.best_total})"
        self.query_one("#status", Static).update(f"{title}\n{prompt}")

    def _refresh_tally(self) -> None:
        subtotals: Dict[Category, int] = {cat: 0 for cat in Category}
        if self.report is not None:
            for event in self.report.events:
                subtotals[event.category] += event.points
        lines = ["Count"]
        for cat in Category:
            lines.append(f"{category_name(cat):<8} {subtotals[cat]:>2}")
        total = 0 if self.report is None else self.report.total
        lines.append(f"{'Total':<8} {total:>2}")
        self.query_one("#tally", Static).update("\n".join(lines))

    def _refresh_cards(self) -> None:
        shown = [] if self.outcome is None else list(self.outcome.hand) + [self.outcome.starter]
        scoring = set()
        if self.report is not None:
            scoring = {card for event in self.report.events for card in event.cards}

        for i in range(SHOWN_CARDS):
            slot = self.query_one(f"#card-{i}", Static)
            slot.remove_class("scoring")
            if i < len(shown):
                card = shown[i]
                slot.update(f"{card_glyph(card)}\n{card_str(card)}")
                if card in scoring:
                    slot.add_class("scoring")
            else:
                slot.update("")

    def _score_current(self) -> None:
        if self.outcome is None:
            return
        self.report = score_deal(self.outcome, crib=self.crib)
        self.best_total = max(self.best_total, self.report.total)
        self._log(deal_line(self.report))
        lines: List[str] = report_lines(self.report)
        for line in lines:
            self._log(f"  {line}")

    def action_deal(self) -> None:
        if self.deck is None or len(self.deck) < SHOWN_CARDS:
            self.deck = Deck(self.rng)
            self._log("Shuffled a fresh deck.")
        self.outcome = deal(self.deck)
        self.deals += 1
        self._score_current()
        self._refresh_all()

    def action_toggle_crib(self) -> None:
        self.crib = not self.crib
        self._log(f"Counting as {'crib' if self.crib else 'hand'}.")
        self._score_current()
        self._refresh_all()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id is None:
            return

        if button_id == "deal":
            self.action_deal()
            return

        if button_id == "crib":
            self.action_toggle_crib()
