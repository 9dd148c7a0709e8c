from __future__ import annotations

import argparse
import logging
from pathlib import Path

from gomoku.config import MATCH_GAMES, MINIMAX_DEPTH, RESULTS_DIR
from gomoku.scripts.match import ROSTER, export_csv, play_match, summarize


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play five-in-a-row matches between AI agents.")
    ap.add_argument("first", nargs="?", default="smart", choices=sorted(ROSTER), help="Agent playing X in the first game")
    ap.add_argument("second", nargs="?", default="dumb", choices=sorted(ROSTER), help="Agent playing O in the first game")
    ap.add_argument("--games", type=int, default=MATCH_GAMES, help="Number of games to play")
    ap.add_argument("--depth", type=int, default=MINIMAX_DEPTH, help="Search depth for minimax agents")
    ap.add_argument("--no-swap", action="store_true", help="Keep the same agent on X for every game")
    ap.add_argument("--show", action="store_true", help="Print the board after every move")
    ap.add_argument("--csv", action="store_true", help="Write per-game results to --results-dir")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Directory for match_results_*.csv")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for game results, -vv for search details")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.games < 1:
        print("--games must be at least 1")
        return 2

    df = play_match(
        args.first,
        args.second,
        games=args.games,
        depth=args.depth,
        swap_sides=not args.no_swap,
        show=args.show,
    )

    print("\n=== GAMES ===")
    print(df.to_string(index=False))
    print("\n=== SUMMARY ===")
    print(summarize(df).to_string(index=False))

    if args.csv:
        path = export_csv(df, Path(args.results_dir))
        print(f"\nSaved: {path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
