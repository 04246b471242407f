"""Day 4: finding paper rolls that a forklift can reach."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from advent25.grid import Grid
from advent25.load import load_text
from advent25.models import AdventDay

logger = logging.getLogger(__name__)

_PAPER = "@"
_REMOVED = "x"


def _is_accessible(plan: Grid[str], x: int, y: int) -> bool:
    return plan.neighbours(x, y).count(_PAPER) < 4


def find_paper(plan: Grid[str]) -> int:
    """Count paper rolls with fewer than four neighbouring rolls."""
    return sum(
        1
        for y, row in enumerate(plan)
        for x, symbol in enumerate(row)
        if symbol == _PAPER and _is_accessible(plan, x, y)
    )


def find_and_remove_paper(plan: Grid[str]) -> int:
    """Repeatedly remove accessible rolls and count how many were removed."""
    work = Grid(plan.width, [list(row) for row in plan.values])
    removed = 0
    while True:
        before = removed
        snapshot = [list(row) for row in work.values]
        for y, row in enumerate(snapshot):
            for x, symbol in enumerate(row):
                if symbol == _PAPER and _is_accessible(work, x, y):
                    removed += 1
                    work.values[y][x] = _REMOVED
        if removed == before:
            return removed


@dataclass
class DayFour(AdventDay):
    """Printing department puzzle."""

    input_path: str = "inputs/day_4/part1.txt"

    def _plan(self) -> Grid[str]:
        return Grid.from_chars(load_text(self.input_path))

    def part_1(self) -> int:
        logger.info("Day 4: Part 1")
        count = find_paper(self._plan())
        logger.info("Found %d valid paper", count)
        return count

    def part_2(self) -> int:
        logger.info("Day 4: Part 2")
        count = find_and_remove_paper(self._plan())
        logger.info("Found %d valid paper", count)
        return count