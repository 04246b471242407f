"""Day 5: checking ingredient ids against fresh ranges."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from advent25.load import load_text
from advent25.models import AdventDay

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _parse_i64(text: str, message: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"{message}: {text!r}")
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"{message}: {text!r}")
    return value


@dataclass
class RangeSet:
    """A collection of inclusive integer ranges."""

    ranges: list[tuple[int, int]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> RangeSet:
        """Parse one ``min-max`` range per line."""
        ranges = []
        for line in text.splitlines():
            low, sep, high = line.partition("-")
            if not sep:
                raise ValueError("Missing delimiter")
            ranges.append((_parse_i64(low, "Invalid number"), _parse_i64(high, "Invalid number")))
        return cls(ranges)

    def condense(self) -> list[tuple[int, int]]:
        """Sorted ranges with overlapping ones merged."""
        merged: list[tuple[int, int]] = []
        for low, high in sorted(self.ranges, key=lambda item: item[0]):
            if merged and low <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], high))
            else:
                merged.append((low, high))
        return merged


def _split_ingredients(text: str) -> tuple[str, str]:
    fresh, sep, available = text.partition("\n\n")
    if not sep:
        raise ValueError("Missing ingredient separator")
    return fresh, available


def _parse_available(text: str) -> list[int]:
    return [_parse_i64(line, "Invalid ingredient") for line in text.splitlines()]


def count_fresh(text: str) -> int:
    """Count available ingredients that fall in any fresh range."""
    raw_fresh, raw_available = _split_ingredients(text)
    fresh = RangeSet.parse(raw_fresh).condense()
    return sum(
        1
        for ingredient in _parse_available(raw_available)
        if any(low <= ingredient <= high for low, high in fresh)
    )


def count_all_possible_fresh(text: str) -> int:
    """Count every id covered by the fresh ranges."""
    raw_fresh, _ = _split_ingredients(text)
    return sum(high - low + 1 for low, high in RangeSet.parse(raw_fresh).condense())


@dataclass
class DayFive(AdventDay):
    """Cafeteria puzzle."""

    input_path: str = "inputs/day_5/part1.txt"

    def part_1(self) -> int:
        logger.info("Day 5: Part 1")
        count = count_fresh(load_text(self.input_path))
        logger.info("Found %d fresh ingredients", count)
        return count

    def part_2(self) -> int:
        logger.info("Day 5: Part 2")
        count = count_all_possible_fresh(load_text(self.input_path))
        logger.info("Found %d fresh ingredients", count)
        return count