"""Day and part selectors and the interface every puzzle day implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class Day(Enum):
    """A puzzle day."""

    DAY1 = 1
    DAY2 = 2
    DAY3 = 3
    DAY4 = 4
    DAY5 = 5
    DAY6 = 6
    DAY7 = 7
    DAY8 = 8
    DAY9 = 9

    @classmethod
    def parse(cls, value: Any) -> Day:
        """Accept ``day3`` or ``3``."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text in (f"day{member.value}", str(member.value)):
                return member
        raise ValueError(f"invalid day: {value!r}")


class Part(Enum):
    """A puzzle part."""

    PART1 = 1
    PART2 = 2

    @classmethod
    def parse(cls, value: Any) -> Part:
        """Accept ``part1`` or ``1``."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text in (f"part{member.value}", str(member.value)):
                return member
        raise ValueError(f"invalid part: {value!r}")


class AdventDay(ABC):
    """A puzzle day with two parts."""

    @abstractmethod
    def part_1(self) -> Any:
        """Solve the first part and return the answer."""

    @abstractmethod
    def part_2(self) -> Any:
        """Solve the second part and return the answer."""

    def run(self, part: Part | str | int) -> Any:
        """Solve the selected part and return its answer."""
        if Part.parse(part) is Part.PART1:
            return self.part_1()
        return self.part_2()