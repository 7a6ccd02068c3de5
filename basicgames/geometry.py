"""Axis-aligned rectangles and their overlap test."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and its size."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h


def aabb_collision(a: Rect, b: Rect) -> bool:
    """Return True if the rectangles overlap; touching edges count as overlap."""
    return not (a.x > b.right or a.right < b.x or a.y > b.bottom or a.bottom < b.y)