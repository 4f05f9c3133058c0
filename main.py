from __future__ import annotations

import argparse
import random
import sys

from game.ruleset import DEFAULT_RULES
from ui.cli import BANNER, ask_duplicates, ask_pegs, gameloop, log_print


def build_parser():
    ap = argparse.ArgumentParser(description="Play Mastermind on the terminal.")
    ap.add_argument("--pegs", type=int, default=None,
                    help="Number of pegs (2-6). Prompted for if omitted.")
    dup = ap.add_mutually_exclusive_group()
    dup.add_argument("--duplicates", dest="duplicates", action="store_true", default=None,
                     help="Allow repeated colors. Prompted for if neither flag is given.")
    dup.add_argument("--no-duplicates", dest="duplicates", action="store_false")
    ap.add_argument("--max-tries", type=int, default=DEFAULT_RULES["max_attempts"],
                    help="Tries per game (0 for unlimited).")
    ap.add_argument("--games", type=int, default=2, help="Number of games to play.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the secret generator.")
    ap.add_argument("--json", action="store_true", help="Print the game history as JSON.")
    ap.add_argument("--plot", default=None, help="Save a tries-per-game chart to this PNG.")
    return ap


def main(argv=None, read=input):
    args = build_parser().parse_args(argv)

    print(BANNER)
    # Config
    rules = dict(DEFAULT_RULES)
    rules["allow_duplicates"] = (
        args.duplicates if args.duplicates is not None else ask_duplicates(read)
    )
    rules["code_length"] = (
        args.pegs if args.pegs is not None
        else ask_pegs(read, max_pegs=len(rules["colors"]))
    )
    rules["max_attempts"] = args.max_tries or None

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        session = gameloop(
            rules,
            games=args.games,
            read=read,
            rng=rng,
            show_json=args.json,
            plot_path=args.plot,
        )
    except (EOFError, KeyboardInterrupt):
        log_print("\nExiting game.")
        return 1

    return 0 if session is not None else 2


if __name__ == "__main__":
    sys.exit(main())
