"""Day 9: the largest rectangle spanned by red tiles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable

from shapely.geometry import LineString, Point, Polygon, box

from advent25.coordinates import Coordinate2D
from advent25.load import load_tokens
from advent25.models import AdventDay

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by two opposite corners."""

    point_1: Coordinate2D
    point_2: Coordinate2D

    def area(self) -> int:
        """Number of tiles the rectangle covers."""
        return self.point_1.area(self.point_2)

    def corners(self) -> list[Coordinate2D]:
        """The four corners, the given two first."""
        return [
            self.point_1,
            self.point_2,
            Coordinate2D(self.point_1.x, self.point_2.y),
            Coordinate2D(self.point_2.x, self.point_1.y),
        ]

    def _geometry(self):
        (x1, y1), (x2, y2) = (self.point_1.x, self.point_1.y), (self.point_2.x, self.point_2.y)
        if x1 == x2 and y1 == y2:
            return Point(x1, y1)
        if x1 == x2 or y1 == y2:
            return LineString([(x1, y1), (x2, y2)])
        return box(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


def _parse(lines: Iterable[str]) -> list[Coordinate2D]:
    return [Coordinate2D.parse(line) for line in lines]


def get_biggest_rectangle(lines: Iterable[str]) -> int:
    """Largest area spanned by any two tiles."""
    coords = _parse(lines)
    areas = [a.area(b) for a, b in combinations(coords, 2)]
    if not areas:
        raise ValueError("No max found.")
    return max(areas)


def get_biggest_rectangle_pt2(lines: Iterable[str]) -> int:
    """Largest area spanned by two tiles that lies wholly inside their polygon."""
    coords = _parse(lines)
    if len(set(coords)) < 3:
        raise ValueError("No valid rectangle found.")
    poly = Polygon([(c.x, c.y) for c in coords])
    min_x, min_y, max_x, max_y = poly.bounds

    rectangles = sorted(
        (Rectangle(a, b) for a, b in combinations(coords, 2)),
        key=Rectangle.area,
        reverse=True,
    )
    for rectangle in rectangles:
        if not all(poly.intersects(Point(c.x, c.y)) for c in rectangle.corners()):
            continue
        xs = (rectangle.point_1.x, rectangle.point_2.x)
        ys = (rectangle.point_1.y, rectangle.point_2.y)
        if not (min_x <= min(xs) and max(xs) <= max_x and min_y <= min(ys) and max(ys) <= max_y):
            continue
        if poly.contains(rectangle._geometry()):
            return rectangle.area()
    raise ValueError("No valid rectangle found.")


@dataclass
class DayNine(AdventDay):
    """Movie theater puzzle."""

    input_path: str = "inputs/day_9/part1.txt"

    def part_1(self) -> int:
        logger.info("Day 9: Part 1")
        area = get_biggest_rectangle(load_tokens(self.input_path))
        logger.info("Largest rectangle has area: %d", area)
        return area

    def part_2(self) -> int:
        logger.info("Day 9: Part 2")
        area = get_biggest_rectangle_pt2(load_tokens(self.input_path))
        logger.info("Largest rectangle has area: %d", area)
        return area