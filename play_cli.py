from __future__ import annotations

import argparse

from crib_cli.app import CribbageTUI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Deal cribbage hands and count them in a Textual TUI.")
    p.add_argument("--seed", type=int, default=None, help="Optional deterministic seed. Default: random each run.")
    p.add_argument("--crib", action="store_true", help="Count deals as a crib (five-card flushes only).")
    args = p.parse_args()
    if args.seed is not None and args.seed < 0:
        raise SystemExit("--seed must be >= 0.")
    return args


if __name__ == "__main__":
    app = CribbageTUI(parse_args())
    app.run()
