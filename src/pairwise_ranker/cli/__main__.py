"""Command line interface for pairwise_ranker.

The CLI replays a file of recorded judgements into a fresh session and
prints the resulting table.  It is meant for checking a set of outcomes
collected elsewhere; interactive collection belongs to the host
application.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import pandas as pd

from pairwise_ranker import __version__
from pairwise_ranker.api import load_outcomes
from pairwise_ranker.ranker import PairwiseRanker, RankerConfig
from pairwise_ranker.utils.logging import set_log_level


def _build_parser() -> argparse.ArgumentParser:
    defaults = RankerConfig()
    parser = argparse.ArgumentParser(
        prog="pairwise-ranker",
        description=(
            "Rank items from pairwise judgements. Supply the items and, "
            "optionally, a CSV of recorded winner/loser outcomes."
        ),
    )
    parser.add_argument("items", nargs="+", help="Identifiers of the items to rank.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show the installed pairwise-ranker version and exit.",
    )
    parser.add_argument(
        "--outcomes",
        metavar="FILE",
        help="CSV or Excel file with 'winner' and 'loser' columns.",
    )
    parser.add_argument("--winner-column", default="winner")
    parser.add_argument("--loser-column", default="loser")
    parser.add_argument(
        "--next",
        type=int,
        default=0,
        metavar="N",
        help="Also print the N most useful pairs to compare next.",
    )
    parser.add_argument(
        "--confidence-threshold",
        type=float,
        default=defaults.confidence_threshold,
    )
    parser.add_argument("--k-factor", type=float, default=defaults.k_factor)
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (debug, info, warning, ...).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        set_log_level(args.log_level)

    try:
        ranker = PairwiseRanker(
            args.items,
            confidence_threshold=args.confidence_threshold,
            k_factor=args.k_factor,
        )
        if args.outcomes:
            outcomes = load_outcomes(
                args.outcomes,
                winner_column=args.winner_column,
                loser_column=args.loser_column,
            )
            for winner, loser in outcomes:
                ranker.submit_comparison(winner, loser)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    table = ranker.rankings_df()[["rank", "item", "score", "confidence", "comparisons"]]
    with pd.option_context("display.float_format", "{:.3f}".format):
        print(table.to_string(index=False))

    if args.next > 0:
        matches = ranker.get_next_matches(args.next)
        if matches:
            print()
            print("Next comparisons:")
            for pair in matches:
                print(f"- {pair.item_a} vs {pair.item_b}")

    status = "complete" if ranker.is_session_complete() else "in progress"
    print()
    print(f"Session {status}: {len(ranker.history)}/{ranker.total_pairs} pairs compared.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
