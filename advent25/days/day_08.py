"""Day 8: wiring junction boxes into circuits by shortest distance."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, Sequence

from advent25.coordinates import Coordinate3D
from advent25.load import load_tokens
from advent25.models import AdventDay

logger = logging.getLogger(__name__)


@dataclass
class Circuit:
    """A set of connected junction boxes."""

    coords: set[Coordinate3D] = field(default_factory=set)

    def includes(self, coord: Coordinate3D) -> bool:
        """True when the box is part of this circuit."""
        return coord in self.coords

    def add(self, coord: Coordinate3D) -> None:
        """Connect a box to this circuit."""
        self.coords.add(coord)

    def combine(self, other: Circuit) -> None:
        """Absorb every box of another circuit."""
        self.coords |= other.coords


def _parse(lines: Iterable[str]) -> list[Coordinate3D]:
    return [Coordinate3D.parse(line) for line in lines]


def _sorted_pairs(
    coords: Sequence[Coordinate3D],
) -> list[tuple[float, Coordinate3D, Coordinate3D]]:
    pairs = [(a.distance_to(b), a, b) for a, b in combinations(coords, 2) if a != b]
    return sorted(pairs, key=lambda pair: pair[0])


def _link(circuits: list[Circuit], a: Coordinate3D, b: Coordinate3D) -> bool:
    """Connect two boxes; return True when two circuits were merged."""
    linkable = [i for i, circuit in enumerate(circuits) if circuit.includes(a) or circuit.includes(b)]
    if not linkable:
        circuits.append(Circuit({a, b}))
        return False
    if len(linkable) == 1:
        circuits[linkable[0]].add(a)
        circuits[linkable[0]].add(b)
        return False
    if len(linkable) == 2:
        first, second = linkable
        circuits[first].combine(circuits[second])
        del circuits[second]
        return True
    raise ValueError("Invalid state")


def build_circuits(lines: Iterable[str], n: int) -> int:
    """Product of the three largest circuit sizes after the ``n`` shortest links."""
    coords = _parse(lines)
    circuits: list[Circuit] = []
    for _, a, b in _sorted_pairs(coords)[:n]:
        _link(circuits, a, b)
    sizes = sorted((len(circuit.coords) for circuit in circuits), reverse=True)
    return math.prod(sizes[:3])


def build_circuits_pt2(lines: Iterable[str]) -> int:
    """Product of the x values of the last pair that joins everything into one circuit."""
    coords = _parse(lines)
    circuits = [Circuit({coord}) for coord in coords]
    for _, a, b in _sorted_pairs(coords):
        if _link(circuits, a, b) and len(circuits) == 1:
            return a.x * b.x
    raise ValueError("no solution found")


@dataclass
class DayEight(AdventDay):
    """Playground puzzle."""

    input_path: str = "inputs/day_8/part1.txt"

    def part_1(self) -> int:
        logger.info("Day 8: Part 1")
        product = build_circuits(load_tokens(self.input_path), 1000)
        logger.info("Circuit product is: %d", product)
        return product

    def part_2(self) -> int:
        logger.info("Day 8: Part 2")
        product = build_circuits_pt2(load_tokens(self.input_path))
        logger.info("Product is %d", product)
        return product