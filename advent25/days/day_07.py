"""Day 7: tracing tachyon beams through a manifold of splitters."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from advent25.load import load_tokens
from advent25.models import AdventDay
from advent25.sets import inplace_intersection

logger = logging.getLogger(__name__)

_SPLITTER = "^"
_START = "S"


def get_new_beams(current: Sequence[int], overlap: Iterable[int], max_index: int) -> list[int]:
    """Replace every beam that hit a splitter with beams on either side of it."""
    beams = list(current)
    for index in overlap:
        beams = [beam for beam in beams if beam != index]
        if index != 0:
            beams.append(index - 1)
        if index != max_index:
            beams.append(index + 1)
    return beams


def count_beam_splits(lines: Iterable[str]) -> int:
    """Count how many times a beam meets a splitter on its way down."""
    count = 0
    beams: list[int] = []
    for line in lines:
        splitters = {index for index, char in enumerate(line) if char == _SPLITTER}
        beams.extend(index for index, char in enumerate(line) if char == _START)
        overlap = inplace_intersection(set(beams), splitters)
        count += len(overlap)
        beams = get_new_beams(beams, sorted(overlap), len(line))
    return count


def count_total_timelines(lines: Sequence[str]) -> int:
    """Count the distinct paths a single particle can take through the manifold."""
    if not lines:
        raise ValueError("No input lines")
    timelines: Counter[int] = Counter(
        index for index, char in enumerate(lines[0]) if char == _START
    )
    for line in lines[1:]:
        following: Counter[int] = Counter()
        for column, count in timelines.items():
            char = line[column] if column < len(line) else "."
            if char == _SPLITTER:
                if column == 0:
                    raise ValueError("Beam split off the left edge of the manifold")
                following[column - 1] += count
                following[column + 1] += count
            else:
                following[column] += count
        timelines = following
    return sum(timelines.values())


@dataclass
class DaySeven(AdventDay):
    """Laboratories puzzle."""

    input_path: str = "inputs/day_7/part1.txt"

    def part_1(self) -> int:
        logger.info("Day 7: Part 1")
        count = count_beam_splits(load_tokens(self.input_path))
        logger.info("Beam is split %d times", count)
        return count

    def part_2(self) -> int:
        logger.info("Day 7: Part 2")
        count = count_total_timelines(load_tokens(self.input_path))
        logger.info("Found %d total paths", count)
        return count