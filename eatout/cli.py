"""Command-line interface for eatout."""

import argparse
import sys
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

import numpy as np

from eatout.candidates import compute_listing
from eatout.cycle import SuggestionCycle
from eatout.models import Day, Time, TimeParseError
from eatout.output import format_listing, format_view
from eatout.parser import CatalogLoadError, create_catalog_template, load_catalog

ADVANCE_COMMANDS = {"", "n", "next"}
TOGGLE_COMMANDS = {"l", "list"}
QUIT_COMMANDS = {"q", "quit", "exit"}

HELP_TEXT = "Commands: [Enter]/n = next suggestion, l = toggle list, q = quit"


def _day_arg(value: str) -> Day:
    try:
        return Day.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _time_arg(value: str) -> Time:
    try:
        time = Time.parse(value)
    except TimeParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    if time.hours > 23 or time.minutes > 59:
        raise argparse.ArgumentTypeError(f"Not a time of day: {value!r}")
    return time


def make_clock(day: Day | None, time: Time | None) -> Callable[[], datetime]:
    """Return a clock that reads now, with the day and/or time pinned."""

    def clock() -> datetime:
        moment = datetime.now()
        if day is not None:
            moment += timedelta(days=(day - Day.from_date(moment)) % 7)
        if time is not None:
            moment = moment.replace(hour=time.hours, minute=time.minutes)
        return moment

    return clock


def run_interactive(cycle: SuggestionCycle) -> None:
    """Read commands from stdin and drive the cycle until quit or EOF."""
    print(format_view(cycle.start()))
    print(HELP_TEXT)

    while True:
        try:
            command = input("> ").strip().lower()
        except EOFError:
            print()
            break

        if command in QUIT_COMMANDS:
            break
        if command in ADVANCE_COMMANDS:
            view = cycle.advance()
        elif command in TOGGLE_COMMANDS:
            view = cycle.toggle_tabulation()
        else:
            print(HELP_TEXT)
            continue

        print()
        print(format_view(view))


def main() -> int:
    """Main entry point for eatout CLI."""
    parser = argparse.ArgumentParser(
        description="Suggest somewhere to eat that's open right now.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  eatout food.json
  eatout food.yaml --day friday --time 21:15
  eatout food.json --list --viable-first
  eatout food.yaml --output-template food_template.yaml
""",
    )
    parser.add_argument(
        "catalog",
        type=Path,
        nargs="?",
        help="Path to the JSON or YAML restaurant catalog",
    )
    parser.add_argument(
        "--day",
        type=_day_arg,
        help="Day of the week to check (default: today)",
    )
    parser.add_argument(
        "--time",
        type=_time_arg,
        help="Time of day to check, as HH:MM (default: now)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible suggestion order",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print every restaurant with its hours and exit",
    )
    parser.add_argument(
        "--viable-first",
        action="store_true",
        help="List restaurants that are open now before closed ones",
    )
    parser.add_argument(
        "--output-template",
        type=Path,
        help="Write an example catalog to this path and exit",
    )

    args = parser.parse_args()

    if args.output_template:
        create_catalog_template(args.output_template)
        print(f"Created catalog template at: {args.output_template}")
        return 0

    if args.catalog is None:
        parser.error("the following arguments are required: catalog")

    # Validate catalog exists
    if not args.catalog.exists():
        print(f"Error: Catalog file not found: {args.catalog}", file=sys.stderr)
        return 1

    try:
        catalog = load_catalog(args.catalog)
    except CatalogLoadError as e:
        print(f"Error loading catalog: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(catalog)} restaurants")

    clock = make_clock(args.day, args.time)

    if args.list:
        moment = clock()
        rows = compute_listing(catalog, Day.from_date(moment), Time.now(moment), args.viable_first)
        print()
        print(format_listing(rows))
        return 0

    cycle = SuggestionCycle(
        catalog,
        clock=clock,
        rng=np.random.default_rng(args.seed),
        viable_first=args.viable_first,
    )
    print()
    run_interactive(cycle)

    return 0


if __name__ == "__main__":
    sys.exit(main())
