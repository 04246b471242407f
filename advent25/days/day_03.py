"""Day 3: picking the largest joltage from banks of batteries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from advent25.load import load_tokens
from advent25.models import AdventDay

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"
_U64_MAX = 2**64 - 1


class ParseBankError(ValueError):
    """Raised when a bank does not hold enough digits."""

    def __init__(
        self, message: str = "Invalid bank. should be a string of at least 2 positive integers"
    ) -> None:
        super().__init__(message)


def _max_digit(text: str) -> tuple[int, int]:
    """Largest digit in ``text`` and the index of its first occurrence."""
    digits = [(int(char), index) for index, char in enumerate(text) if char in _DIGITS]
    if not digits:
        raise ParseBankError()
    return max(digits, key=lambda pair: (pair[0], -pair[1]))


def maximise_joltage_n_times(bank: str, n: int) -> int:
    """Largest number formed by picking ``n`` digits of ``bank`` in order."""
    picked: list[int] = []
    start = 0
    for i in range(n):
        end = len(bank) - (n - i - 1)
        if end < start:
            raise ParseBankError()
        digit, index = _max_digit(bank[start:end])
        picked.append(digit)
        start += index + 1
    if not picked:
        raise ParseBankError()
    value = int("".join(str(digit) for digit in picked))
    if value > _U64_MAX:
        raise ParseBankError()
    return value


@dataclass
class DayThree(AdventDay):
    """Lobby puzzle."""

    input_path: str = "inputs/day_3/part1.txt"

    def _total(self, n: int) -> int:
        return sum(maximise_joltage_n_times(bank, n) for bank in load_tokens(self.input_path))

    def part_1(self) -> int:
        logger.info("Day 3: Part 1")
        total = self._total(2)
        logger.info("The sum of max joltages is %d", total)
        return total

    def part_2(self) -> int:
        logger.info("Day 3: Part 2")
        total = self._total(12)
        logger.info("The sum of max joltages is %d", total)
        return total