"""Day 1: counting how often a safe dial points at zero."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from advent25.load import load_tokens
from advent25.models import AdventDay

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ParseDirectionError(ValueError):
    """Raised when a direction is neither left nor right."""

    def __init__(self, message: str = "Invalid move specified. Must be either R or L.") -> None:
        super().__init__(message)


class ParseMoveError(ValueError):
    """Raised when a move cannot be parsed."""


class Direction(Enum):
    """Which way the dial turns."""

    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Accept ``l``, ``left``, ``r`` or ``right`` in any case."""
        value = text.strip().lower()
        if value in ("l", "left"):
            return cls.LEFT
        if value in ("r", "right"):
            return cls.RIGHT
        raise ParseDirectionError()


@dataclass(frozen=True)
class Move:
    """A single rotation of the dial."""

    direction: Direction
    steps: int

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse a move such as ``L5`` or ``R7``."""
        if not text:
            raise ParseMoveError("Direction parsing failed: empty move")
        char, number = text[:1], text[1:]
        try:
            direction = Direction.parse(char)
        except ParseDirectionError as error:
            raise ParseMoveError(f"Direction parsing failed: {error}") from error
        if not _INTEGER.fullmatch(number):
            raise ParseMoveError(f"Step parsing failed: invalid number {number!r}")
        steps = int(number)
        if not _I32_MIN <= steps <= _I32_MAX:
            raise ParseMoveError(f"Step parsing failed: number out of range {number!r}")
        return cls(direction, steps)

    @property
    def delta(self) -> int:
        """Signed change in dial position."""
        return -self.steps if self.direction is Direction.LEFT else self.steps


@dataclass
class SafeCracker:
    """Applies a sequence of moves to a circular dial."""

    start_position: int
    moves: list[Move] = field(default_factory=list)
    dial_size: int = 100

    @classmethod
    def from_raw_inputs(cls, start_position: int, moves, dial_size: int) -> SafeCracker:
        """Build from move strings, raising ParseMoveError on the first bad one."""
        return cls(start_position, [Move.parse(move) for move in moves], dial_size)

    def run(self) -> list[int]:
        """Dial positions, starting position first, after every move."""
        positions = [self.start_position]
        current = self.start_position
        for move in self.moves:
            current = (current + move.delta) % self.dial_size
            positions.append(current)
        return positions

    def run_with_passes(self) -> tuple[int, list[int]]:
        """Number of times zero is passed mid-move, and the dial positions."""
        positions = [self.start_position]
        current = self.start_position
        passes = 0
        for move in self.moves:
            initial = current
            current += move.delta
            bias = 1 if current < 0 and initial != 0 else 0
            new_passes = abs(current) // abs(self.dial_size) + bias
            current %= self.dial_size
            if current == 0 and new_passes > 0:
                new_passes -= 1
            passes += new_passes
            positions.append(current)
        return passes, positions

    def count_zeros(self) -> int:
        """How many times the dial rests at zero."""
        return sum(1 for position in self.run() if position == 0)

    def count_zero_incl_passes(self) -> int:
        """How many times the dial rests at or passes through zero."""
        passes, positions = self.run_with_passes()
        return passes + sum(1 for position in positions if position == 0)


@dataclass
class DayOne(AdventDay):
    """Secret entrance puzzle."""

    input_path: str = "inputs/day_1/part1.txt"

    def _cracker(self) -> SafeCracker:
        return SafeCracker.from_raw_inputs(50, load_tokens(self.input_path), 100)

    def part_1(self) -> int:
        logger.info("Day 1: Part 1")
        count = self._cracker().count_zeros()
        logger.info("The password is %d", count)
        return count

    def part_2(self) -> int:
        logger.info("Day 1: Part 2")
        count = self._cracker().count_zero_incl_passes()
        logger.info("The password is %d", count)
        return count