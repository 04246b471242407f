"""Command line entry point that runs one part of one puzzle day."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from advent25.days.day_01 import DayOne
from advent25.days.day_02 import DayTwo
from advent25.days.day_03 import DayThree
from advent25.days.day_04 import DayFour
from advent25.days.day_05 import DayFive
from advent25.days.day_06 import DaySix
from advent25.days.day_07 import DaySeven
from advent25.days.day_08 import DayEight
from advent25.days.day_09 import DayNine
from advent25.models import AdventDay, Day, Part

_DAYS: dict[Day, type[AdventDay]] = {
    Day.DAY1: DayOne,
    Day.DAY2: DayTwo,
    Day.DAY3: DayThree,
    Day.DAY4: DayFour,
    Day.DAY5: DayFive,
    Day.DAY6: DaySix,
    Day.DAY7: DaySeven,
    Day.DAY8: DayEight,
    Day.DAY9: DayNine,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="advent25", description="Run an Advent of Code puzzle.")
    parser.add_argument(
        "-d", "--day", type=Day.parse, required=True, help="The day to run (e.g., -d 1, --day 3)"
    )
    parser.add_argument(
        "-p", "--part", type=Part.parse, required=True, help="The part to run (e.g., -p 1, --part 2)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected day and part; return the process exit status."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = _build_parser().parse_args(argv)
    try:
        _DAYS[args.day]().run(args.part)
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())