"""
Command-line interface for match-day standings.

Reads one result per line and prints the leaders after every match day:
    topteam results.txt
    cat results.txt | topteam --top 5
    topteam results.txt --table
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from topteam import __version__
from topteam.model.ranking import NAME_ORDERS, format_ranking, format_table
from topteam.model.results import MalformedResultError
from topteam.model.season import Season, SeasonConfig
from topteam.utils.constants import DEFAULT_TOP_N
from topteam.utils.logging import setup_logging, print_section, print_error, print_info


def read_lines(source: str | None) -> list[str]:
    """Read result lines from a file (or stdin for None / "-"), dropping blank lines."""
    if source is None or source == "-":
        raw = sys.stdin.read().splitlines()
    else:
        raw = Path(source).read_text(encoding="utf-8").splitlines()
    return [line for line in raw if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="topteam",
        description="Rank league teams after every completed match day"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="File with one result per line (default: stdin)"
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_N,
        help=f"Number of teams to show per match day (default: {DEFAULT_TOP_N})"
    )
    parser.add_argument(
        "--name-order",
        choices=NAME_ORDERS,
        default="ascending",
        help="Tie-break order of team names level on points"
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the full league table after the match days"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress while results are processed"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = SeasonConfig.from_name_order(args.name_order, top_n=args.top)
    except ValueError as e:
        parser.error(str(e))

    try:
        lines = read_lines(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Cannot read {args.input}: {e}")
        return 1

    season = Season(config)

    def show(ranking, match_day):
        print(format_ranking(match_day, ranking, config.top_n))
        print()

    try:
        season.ingest(lines, show)
    except MalformedResultError as e:
        print_error(f"Malformed result: {e}")
        return 1

    if args.verbose:
        print_info(f"Processed {len(season.results)} results for {len(season.teams)} teams")
        if season.matches_per_day is None:
            print_info("Matches per match day could not be inferred")

    if args.table:
        print_section(f"League table after {len(season.results)} results")
        print(format_table(season.standings()))

    return 0


if __name__ == "__main__":
    sys.exit(main())
