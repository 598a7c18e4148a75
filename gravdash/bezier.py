"""Bezier curves and timed transitions driven by them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Iterable, Tuple, Union

from .geometry import Vec2

PointLike = Union[Vec2, Tuple[float, float]]


def _as_vec(point: PointLike) -> Vec2:
    return point if isinstance(point, Vec2) else Vec2(float(point[0]), float(point[1]))


class Bezier:
    """A Bezier curve defined by its control points."""

    def __init__(self, points: Iterable[PointLike] = ()) -> None:
        self._points: Tuple[Vec2, ...] = tuple(_as_vec(p) for p in points)

    @property
    def points(self) -> Tuple[Vec2, ...]:
        return self._points

    def get_point(self, t: float) -> Vec2:
        """Return the point ``t`` of the way along the curve."""
        if not self._points:
            raise ValueError("a curve without control points has no value")
        pts = list(self._points)
        while len(pts) > 1:
            pts = [a + t * (b - a) for a, b in zip(pts, pts[1:])]
        return pts[0]

    def get_value(self, t: float) -> float:
        """Return the progress value (the curve's y) at ``t``."""
        return self.get_point(t).y


LINEAR_CURVE = Bezier([(0, 0), (1, 1)])
EASE_IN_CURVE = Bezier([(0, 0), (0, 1), (1, 1)])
EASE_OUT_CURVE = Bezier([(0, 0), (1, 0), (1, 1)])


@dataclass(frozen=True)
class Transition:
    """How a value moves from ``start`` to ``end`` over ``duration`` ms."""

    curve: Bezier
    duration: int
    start: Any
    end: Any


class BezierTransition:
    """A queue of transitions that drives ``value`` smoothly over time."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._transitions: Deque[Transition] = deque()
        self._timer = 0

    def __len__(self) -> int:
        return len(self._transitions)

    def update(self, delta: int) -> bool:
        """Advance by ``delta`` ms; return whether any transition was active."""
        if not self._transitions or self.value is None:
            return False
        self._timer += delta
        while self._timer >= self._transitions[0].duration:
            finished = self._transitions.popleft()
            self._timer -= finished.duration
            self.value = finished.end
            if not self._transitions:
                return True
        current = self._transitions[0]
        p = current.curve.get_value(self._timer / current.duration)
        self.value = current.start + p * (current.end - current.start)
        return True

    def clear(self) -> None:
        """Drop all transitions without applying them."""
        self._transitions.clear()

    def process_all(self) -> None:
        """Apply every queued transition at once, ending on the last end value."""
        if self._transitions:
            self.value = self._transitions[-1].end
        self._transitions.clear()

    def push(self, curve: Bezier, duration: int, start: Any, end: Any) -> None:
        """Queue a transition from ``start`` to ``end``."""
        self._transitions.append(Transition(curve, int(duration), start, end))
        if len(self._transitions) == 1:
            self._timer = 0

    def push_offset(self, curve: Bezier, duration: int, offset: Any) -> None:
        """Queue a transition from the current value to the value plus ``offset``."""
        self.push(curve, duration, self.value, self.value + offset)