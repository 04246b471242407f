"""Day 6: solving a sheet of column-wise arithmetic problems."""

from __future__ import annotations

import logging
import operator
import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Sequence

from advent25.grid import Grid, ParseGridError
from advent25.load import load_text
from advent25.models import AdventDay

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_CHUNK = 4


class ParseMathColumnError(ValueError):
    """Raised when a column of the sheet cannot be read as a problem."""

    def __init__(
        self,
        message: str = (
            "Invalid MathColumn. should be a Vec of string numbers, "
            "with the final element being the operation"
        ),
    ) -> None:
        super().__init__(message)


def _parse_i64(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ParseMathColumnError()
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ParseMathColumnError()
    return value


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


@dataclass(frozen=True)
class MathColumn:
    """Numbers combined left to right with a single operation."""

    numbers: tuple[int, ...]
    operation: str

    def __post_init__(self) -> None:
        if len(self.numbers) <= 1:
            raise ParseMathColumnError("A problem needs at least two numbers")
        if self.operation not in _OPERATIONS:
            raise ParseMathColumnError(f"Unknown operation {self.operation!r}")

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> MathColumn:
        """Build from number tokens followed by an operation token."""
        if not tokens:
            raise ParseMathColumnError()
        *raw_numbers, operation = tokens
        if not operation:
            raise ParseMathColumnError()
        return cls(tuple(_parse_i64(token) for token in raw_numbers), operation[0])

    def calculate(self) -> int:
        """Apply the operation across the numbers."""
        return reduce(_OPERATIONS[self.operation], self.numbers)


def do_math_homework(sheet: str) -> int:
    """Sum of problems read one whitespace-separated column at a time."""
    transposed = Grid.from_words(sheet).transpose("")
    return sum(MathColumn.from_tokens(column).calculate() for column in transposed)


def _column_from_rows(rows: list[list[str]]) -> MathColumn:
    first = list(rows[0])
    if not first:
        raise ParseMathColumnError()
    operation = first[-1]
    first[-1] = " "
    numbers = []
    for row in [first, *rows[1:]]:
        text = "".join(row).strip()
        if text:
            numbers.append(_parse_i64(text))
    return MathColumn(tuple(numbers), operation)


def do_math_homework_pt2(sheet: str) -> int:
    """Sum of problems whose numbers are written top to bottom in character columns."""
    chars = [list(line) for line in sheet.splitlines()]
    if not chars:
        raise ParseGridError()
    transposed = Grid(len(chars[0]), chars).transpose(" ").values
    chunks = [transposed[start:start + _CHUNK] for start in range(0, len(transposed), _CHUNK)]
    return sum(_column_from_rows(chunk).calculate() for chunk in chunks)


@dataclass
class DaySix(AdventDay):
    """Trash compactor puzzle."""

    input_path: str = "inputs/day_6/part1.txt"

    def part_1(self) -> int:
        logger.info("Day 6: Part 1")
        total = do_math_homework(load_text(self.input_path))
        logger.info("Calculated homework sum as: %d", total)
        return total

    def part_2(self) -> int:
        logger.info("Day 6: Part 2")
        total = do_math_homework_pt2(load_text(self.input_path))
        logger.info("Calculated homework sum as: %d", total)
        return total