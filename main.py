from __future__ import annotations

import argparse
import random
import time
from collections import Counter
from typing import Callable, Dict, List

from crib_cli.display import deal_line, report_lines
from crib_logic import IMPOSSIBLE_TOTALS, MAX_TOTAL, Deck, deal, score_deal


def survey(
    hands: int,
    rng: random.Random,
    crib: bool = False,
    show_every: int = 0,
    emit: Callable[[str], None] = print,
) -> Counter:
    """
    Deal and count `hands` hands, each from a freshly shuffled deck.

    Returns a histogram of totals. Every `show_every`-th report is printed in
    full; 0 disables the per-hand output.
    """
    totals: Counter = Counter()
    for i in range(1, hands + 1):
        report = score_deal(deal(Deck(rng)), crib=crib)
        totals[report.total] += 1
        if show_every and i % show_every == 0:
            emit(f"hand {i:6d}  {deal_line(report)}")
            for line in report_lines(report):
                emit(f"    {line}")
    return totals


def impossible_totals(totals: Counter) -> List[int]:
    """Return the observed totals no cribbage hand can score."""
    return sorted(t for t in totals if t in IMPOSSIBLE_TOTALS or t < 0 or t > MAX_TOTAL)


def histogram_lines(totals: Counter, width: int = 50) -> List[str]:
    """Render a text bar chart of totals, scaled so the tallest bar is `width`."""
    if not totals:
        return []
    n = sum(totals.values())
    peak = max(totals.values())
    lines = []
    for total in range(0, max(totals) + 1):
        count = totals.get(total, 0)
        bar = "#" * (round(count * width / peak) if count else 0)
        lines.append(f"{total:2d} {count:8d} {100.0 * count / n:6.2f}%  {bar}")
    return lines


def summary(totals: Counter) -> Dict[str, float]:
    n = sum(totals.values())
    mean = sum(total * count for total, count in totals.items()) / max(1, n)
    return {"hands": n, "mean": mean, "max": max(totals, default=0)}


def run(args: argparse.Namespace) -> int:
    if args.seed is None:
        seed = random.SystemRandom().randrange(0, 2**63)
    else:
        seed = args.seed
    print(f"Run seed: {seed}")
    rng = random.Random(seed)

    start_time = time.time()
    totals = survey(args.hands, rng, crib=args.crib, show_every=args.show_every)
    elapsed = max(1e-9, time.time() - start_time)

    for line in histogram_lines(totals):
        print(line)
    stats = summary(totals)
    print(
        f"hands={stats['hands']}  mean={stats['mean']:.3f}  max={stats['max']}  "
        f"hands_per_sec={stats['hands'] / elapsed:.0f}"
    )

    bad = impossible_totals(totals)
    if bad:
        print(f"Impossible totals observed: {bad}")
        return 1
    return 0


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Deal many cribbage hands and tabulate their counts.")
    p.add_argument("--hands", type=int, default=10000)
    p.add_argument("--seed", type=int, default=None, help="Optional deterministic seed. Default: random each run.")
    p.add_argument("--crib", action="store_true", help="Count deals as cribs.")
    p.add_argument("--show-every", type=int, default=0, help="Print every Nth report in full; 0 prints none.")
    args = p.parse_args()
    if args.hands <= 0:
        raise SystemExit("--hands must be > 0.")
    if args.show_every < 0:
        raise SystemExit("--show-every must be >= 0.")
    return args


if __name__ == "__main__":
    raise SystemExit(run(parse_args()))
