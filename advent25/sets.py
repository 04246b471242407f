"""Set helpers."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def inplace_intersection(a: set[T], b: set[T]) -> set[T]:
    """Move the common elements of ``a`` and ``b`` out of both and return them."""
    common = a & b
    a -= common
    b -= common
    return common