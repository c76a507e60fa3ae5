"""Plain 2D value types and rectangle collision."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2:
    """A mutable 2D vector or point."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def check_collision_recs(a: Rectangle, b: Rectangle) -> bool:
    """Return True when the two rectangles overlap; touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )