"""Day 2: finding product ids made of repeated digit patterns."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Sequence, TypeVar

from advent25.load import load_tokens
from advent25.models import AdventDay

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1


class ParseRangeError(ValueError):
    """Raised when a range holds values that are not positive integers."""

    def __init__(
        self, message: str = "Invalid range. Both values should be positive integers."
    ) -> None:
        super().__init__(message)


class ParseProductError(ValueError):
    """Raised when a product range cannot be parsed."""


def _parse_unsigned(text: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > _U64_MAX:
        raise ParseProductError(f"Step parsing failed: invalid number {text!r}")
    return int(text)


def all_match(values: Sequence[T]) -> bool:
    """True when there are at least two values and all are equal."""
    if len(values) <= 1:
        return False
    first = values[0]
    return all(item == first for item in values[1:])


def _split_evenly(text: str, length: int) -> list[str] | None:
    if length == 0 or len(text) % length != 0 or len(text) == length:
        return None
    return [text[start:start + length] for start in range(0, len(text), length)]


def into_matching_snippets(value: int, length: int) -> list[str] | None:
    """Split the digits of ``value`` into equal chunks of ``length`` if all chunks match."""
    chunks = _split_evenly(str(value), length)
    if chunks is None or not all_match(chunks):
        return None
    return chunks


@dataclass(frozen=True)
class ProductRange:
    """An inclusive range of product ids."""

    low: int
    high: int

    @classmethod
    def parse(cls, text: str) -> ProductRange:
        """Parse a range such as ``11-22``."""
        parts = text.strip().split("-")
        if len(parts) != 2:
            raise ParseProductError(
                "Each product must be two numbers separated by a hyphen, e.g., '1-5'"
            )
        return cls(_parse_unsigned(parts[0]), _parse_unsigned(parts[1]))

    def _candidates(self) -> range:
        return range(self.low, self.high + 1)

    def get_repeating_twice(self) -> list[int]:
        """Ids whose digits are one pattern written exactly twice."""
        result = []
        for candidate in self._candidates():
            digits = str(candidate)
            mid = len(digits) // 2
            if len(digits) % 2 == 0 and digits[:mid] == digits[mid:]:
                result.append(candidate)
        return result

    def get_repeating(self) -> list[int]:
        """Ids whose digits are one pattern repeated at least twice."""
        return [candidate for candidate in self._candidates() if self._is_repeating(candidate)]

    @staticmethod
    def _is_repeating(candidate: int) -> bool:
        return any(
            into_matching_snippets(candidate, length) is not None
            for length in range(1, candidate // 2)
        )


def get_products(path: str | os.PathLike[str]) -> list[ProductRange]:
    """Read the comma-separated product ranges on the first line of a file."""
    tokens = load_tokens(path)
    if not tokens:
        raise ParseProductError("No product ranges found")
    return [ProductRange.parse(part) for part in tokens[0].split(",")]


@dataclass
class DayTwo(AdventDay):
    """Gift shop puzzle."""

    input_path: str = "inputs/day_2/part1.txt"

    def part_1(self) -> int:
        logger.info("Day 2: Part 1")
        total = sum(
            invalid
            for product in get_products(self.input_path)
            for invalid in product.get_repeating_twice()
        )
        logger.info("The sum of invalid products is %d", total)
        return total

    def part_2(self) -> int:
        logger.info("Day 2: Part 2")
        total = sum(
            {
                invalid
                for product in get_products(self.input_path)
                for invalid in product.get_repeating()
            }
        )
        logger.info("The sum of invalid products is %d", total)
        return total