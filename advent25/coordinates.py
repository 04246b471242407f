"""Integer coordinates in two and three dimensions."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ParseCoordinateError(ValueError):
    """Raised when a coordinate string cannot be parsed."""

    def __init__(
        self,
        message: str = (
            "Invalid coordinate. should be a string of 3 numbers "
            "separated by commas: 'x,y,z'"
        ),
    ) -> None:
        super().__init__(message)


def _coordinate_values(text: str, expected: int) -> list[int]:
    parts = text.split(",")
    if not all(_INTEGER.fullmatch(part) for part in parts):
        raise ParseCoordinateError()
    values = [int(part) for part in parts]
    if any(not _I64_MIN <= value <= _I64_MAX for value in values):
        raise ParseCoordinateError()
    if len(values) != expected:
        raise ParseCoordinateError()
    return values


@dataclass(frozen=True)
class Coordinate3D:
    """A point in three-dimensional integer space."""

    x: int
    y: int
    z: int

    @classmethod
    def parse(cls, text: str) -> Coordinate3D:
        """Parse a string of the form ``x,y,z``."""
        x, y, z = _coordinate_values(text, 3)
        return cls(x, y, z)

    def distance_to(self, other: Coordinate3D) -> float:
        """Euclidean distance to another point."""
        squared = (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        return math.sqrt(abs(squared))


@dataclass(frozen=True)
class Coordinate2D:
    """A point in two-dimensional integer space."""

    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> Coordinate2D:
        """Parse a string of the form ``x,y``."""
        x, y = _coordinate_values(text, 2)
        return cls(x, y)

    def distance_to(self, other: Coordinate2D) -> float:
        """Euclidean distance to another point."""
        squared = (self.x - other.x) ** 2 + (self.y - other.y) ** 2
        return math.sqrt(abs(squared))

    def area(self, other: Coordinate2D) -> int:
        """Area of the inclusive grid rectangle spanned by two corners."""
        return (abs(self.x - other.x) + 1) * (abs(self.y - other.y) + 1)

    def __add__(self, other: Coordinate2D) -> Coordinate2D:
        return Coordinate2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate2D) -> Coordinate2D:
        return Coordinate2D(self.x - other.x, self.y - other.y)