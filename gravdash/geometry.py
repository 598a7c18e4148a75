"""Two-dimensional vectors, line segments and small numeric helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]

# The dimensions of a typical sprite, in world units.
SPRITE_DIM = 8
# The aspect ratio of the game window.
ASPECT_RATIO = (160, 90)


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Number) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    def __rmul__(self, factor: Number) -> Vec2:
        return self.__mul__(factor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y


ZERO = Vec2(0.0, 0.0)


@dataclass(frozen=True)
class LineSegment:
    """A straight segment between two points."""

    start: Vec2
    end: Vec2


def squared_distance_to_segment(point: Vec2, line: LineSegment) -> float:
    """Return the squared distance from ``point`` to the closest point of ``line``."""
    direction = line.end - line.start
    length_sq = direction.dot(direction)
    if length_sq == 0:
        offset = point - line.start
        return offset.dot(offset)
    t = (point - line.start).dot(direction) / length_sq
    t = min(max(t, 0.0), 1.0)
    closest = line.start + t * direction
    offset = point - closest
    return offset.dot(offset)


def sign(num: Number) -> int:
    """Return 1 for positive, -1 for negative and 0 for zero."""
    if num > 0:
        return 1
    if num < 0:
        return -1
    return 0