"""A rectangular grid of values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ParseGridError(ValueError):
    """Raised when text cannot be read as a grid."""

    def __init__(
        self, message: str = "Invalid Grid. should be a rectangular grid of values"
    ) -> None:
        super().__init__(message)


@dataclass
class Grid(Generic[T]):
    """Rows of values, addressed as ``(x, y)`` with ``y`` selecting the row."""

    width: int
    values: list[list[T]] = field(default_factory=list)

    @classmethod
    def from_chars(cls, text: str) -> Grid[str]:
        """Build a grid of characters from whitespace-separated rows."""
        rows = [list(token) for token in text.split()]
        if not rows:
            raise ParseGridError()
        return cls(len(rows[0]), rows)

    @classmethod
    def from_words(cls, text: str) -> Grid[str]:
        """Build a grid of words, one row per line."""
        rows = [line.split() for line in text.splitlines()]
        if not rows:
            raise ParseGridError()
        return cls(len(rows[0]), rows)

    def get(self, x: int, y: int) -> T:
        """Value at column ``x`` of row ``y``."""
        return self.values[y][x]

    def _neighbour_coords(self, x: int, y: int) -> list[tuple[int, int]]:
        height = len(self.values)
        return [
            (x + dx, y + dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if (dx, dy) != (0, 0)
            and 0 <= x + dx < self.width
            and 0 <= y + dy < height
        ]

    def neighbours(self, x: int, y: int) -> list[T]:
        """Values of the up to eight cells around ``(x, y)``."""
        return [self.get(nx, ny) for nx, ny in self._neighbour_coords(x, y)]

    def transpose(self, default: T) -> Grid[T]:
        """Swap rows and columns, padding short rows with ``default``."""
        if not self.values or not self.values[0]:
            return Grid(self.width, [list(row) for row in self.values])
        columns = len(self.values[0])
        transposed = [
            [row[i] if i < len(row) else default for row in self.values]
            for i in range(columns)
        ]
        return Grid(len(transposed[0]), transposed)

    def __iter__(self) -> Iterator[list[T]]:
        return iter(self.values)

    def __str__(self) -> str:
        lines = [f"Grid (Width: {self.width})"]
        lines.extend("[" + " ".join(str(item) for item in row) + "]" for row in self.values)
        return "\n".join(lines) + "\n"