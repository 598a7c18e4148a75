"""Game entities: a position, scale and rotation with animations and transitions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from typing import Deque, Optional

from .bezier import Bezier, BezierTransition
from .geometry import ZERO, Vec2, sign

# Loop count meaning an animation repeats forever.
ALWAYS = -1


@dataclass
class Animation:
    """One animation in an entity's queue."""

    index: int = 0
    frame_duration: int = 0
    loops: int = ALWAYS
    hold: int = 0


class _AnimationQueue:
    """Steps through queued animations frame by frame."""

    def __init__(self, num_frames: int) -> None:
        self._num_frames = num_frames
        self._animations: Deque[Animation] = deque()
        self.frame = 0
        self._timer = 0

    @property
    def current(self) -> Optional[Animation]:
        return self._animations[0] if self._animations else None

    def clear(self) -> None:
        self._animations.clear()

    def queue(self, animation: Animation) -> None:
        if animation.frame_duration <= 0:
            raise ValueError("an animation frame must last longer than 0 ms")
        self._animations.append(replace(animation))
        if len(self._animations) == 1:
            self._start(self._animations[0])

    def _start(self, animation: Animation) -> None:
        self.frame = 0
        self._timer = animation.hold + animation.frame_duration

    def update(self, delta: int) -> None:
        if not self._animations:
            return
        self._timer -= delta
        while self._animations and self._timer <= 0:
            self._advance()

    def _advance(self) -> None:
        current = self._animations[0]
        self.frame += 1
        if self.frame < self._num_frames:
            self._timer += current.frame_duration
            return
        self.frame = 0
        if current.loops == ALWAYS:
            self._timer += current.frame_duration
            return
        if current.loops > 0:
            current.loops -= 1
            self._timer += current.frame_duration
            return
        self._animations.popleft()
        if self._animations:
            nxt = self._animations[0]
            self._timer += nxt.hold + nxt.frame_duration
        else:
            self.frame = self._num_frames - 1


class Entity:
    """Position, scale and rotation of a game entity, with animation and motion."""

    FRAMES_PER_ANIMATION = 4

    def __init__(self, position: Vec2 = ZERO) -> None:
        self._anim = _AnimationQueue(self.FRAMES_PER_ANIMATION)
        self._position = BezierTransition(position)
        self._scale = BezierTransition(Vec2(1.0, 1.0))
        self._rotation = BezierTransition(0.0)

    @property
    def position(self) -> Vec2:
        return self._position.value

    @position.setter
    def position(self, value: Vec2) -> None:
        self._position.value = value

    @property
    def scale(self) -> Vec2:
        return self._scale.value

    @scale.setter
    def scale(self, value: Vec2) -> None:
        self._scale.value = value

    @property
    def rotation(self) -> float:
        return self._rotation.value

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation.value = value

    @property
    def current_animation(self) -> Optional[Animation]:
        """The animation now playing, or None when the queue is empty."""
        return self._anim.current

    @property
    def frame(self) -> int:
        """The frame of the current animation."""
        return self._anim.frame

    def update(self, delta: int) -> None:
        """Advance animation and transitions by ``delta`` ms."""
        self._anim.update(delta)
        self._position.update(delta)
        self._scale.update(delta)
        self._rotation.update(delta)

    def flip_x(self) -> None:
        """Mirror the entity horizontally."""
        self.scale = Vec2(-self.scale.x, self.scale.y)

    def flip_y(self) -> None:
        """Mirror the entity vertically."""
        self.scale = Vec2(self.scale.x, -self.scale.y)

    def set_x_dir(self, right: bool) -> None:
        """Face right when ``right`` is true, left otherwise."""
        if sign(1.0 if right else -1.0) != sign(self.scale.x):
            self.flip_x()

    def set_y_dir(self, up: bool) -> None:
        """Stand upright when ``up`` is true, upside down otherwise."""
        if sign(1.0 if up else -1.0) != sign(self.scale.y):
            self.flip_y()

    def push_animation(
        self, index: int, duration: int, loops: int = ALWAYS, hold: int = 0
    ) -> None:
        """Queue an animation after those already queued."""
        self._anim.queue(Animation(index, duration, loops, hold))

    def set_animation(
        self, index: int, duration: int, loops: int = ALWAYS, hold: int = 0
    ) -> None:
        """Replace the animation queue with a single animation."""
        self._anim.clear()
        self.push_animation(index, duration, loops, hold)

    def clear_animation(self) -> None:
        """Empty the animation queue."""
        self._anim.clear()

    def clear_transitions(self) -> None:
        """Drop every pending position, scale and rotation transition."""
        self._position.clear()
        self._scale.clear()
        self._rotation.clear()

    def push_position_transition(
        self, curve: Bezier, duration: float, start: Vec2, end: Vec2
    ) -> None:
        self._position.push(curve, duration, start, end)

    def push_position_offset(self, curve: Bezier, duration: float, offset: Vec2) -> None:
        self._position.push_offset(curve, duration, offset)

    def push_scale_transition(
        self, curve: Bezier, duration: float, start: Vec2, end: Vec2
    ) -> None:
        self._scale.push(curve, duration, start, end)

    def push_scale_offset(self, curve: Bezier, duration: float, offset: Vec2) -> None:
        self._scale.push_offset(curve, duration, offset)

    def push_rotation_transition(
        self, curve: Bezier, duration: float, start: float, end: float
    ) -> None:
        self._rotation.push(curve, duration, start, end)

    def push_rotation_offset(self, curve: Bezier, duration: float, offset: float) -> None:
        self._rotation.push_offset(curve, duration, offset)