"""Two-component geometric value types.

Structurally all three are a pair of one element type; only the field names
differ. They convert freely into each other through their pairs.

Usage:
    size = Size(1.0, 2.0)
    size + size                           # Size(width=2.0, height=4.0)

    point = Point(1.5, 20.3)
    4 * point                             # Point(x=6.0, y=81.2)
    add_as(Point, point, size) * 3        # Point(x=7.5, y=66.9)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from pairmath.core.lifted import PairArithmetic


@dataclass(frozen=True, slots=True)
class Size[E](PairArithmetic):
    """Extent: (width, height)."""

    width: E
    height: E

    @classmethod
    def from_pair(cls, pair: tuple[E, E], /) -> Self:
        width, height = pair
        return cls(width=width, height=height)

    def to_pair(self) -> tuple[E, E]:
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class Point[E](PairArithmetic):
    """Position: (x, y)."""

    x: E
    y: E

    @classmethod
    def from_pair(cls, pair: tuple[E, E], /) -> Self:
        x, y = pair
        return cls(x=x, y=y)

    def to_pair(self) -> tuple[E, E]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Vector[E](PairArithmetic):
    """Displacement: (dx, dy)."""

    dx: E
    dy: E

    @classmethod
    def from_pair(cls, pair: tuple[E, E], /) -> Self:
        dx, dy = pair
        return cls(dx=dx, dy=dy)

    def to_pair(self) -> tuple[E, E]:
        return (self.dx, self.dy)
