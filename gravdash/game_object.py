"""Interactable objects that move through the world and are tagged by characters."""

from __future__ import annotations

import math
import random
from typing import Optional, Protocol

from .bezier import LINEAR_CURVE
from .character import CharacterState
from .entity import Entity
from .events import CollisionData, EventQueue, EventType
from .geometry import SPRITE_DIM, LineSegment, Vec2, squared_distance_to_segment

# Buffer between an object's centre and its edge.
_POS_BUFFER = SPRITE_DIM // 2


class Collider(Protocol):
    """What an object needs to know about a character to collide with it."""

    char_id: int

    @property
    def line_hitbox(self) -> LineSegment: ...

    @property
    def state(self) -> CharacterState: ...

    def is_invincible(self) -> bool: ...


class GameObject:
    """An object that sends out an event when a character collides with it."""

    TAG_EVENT = EventType.NULL

    def __init__(self, world_bounds: Vec2, events: EventQueue) -> None:
        self._world_bounds = world_bounds
        self._events = events
        self.entity = Entity()

        self._vel = 0.0
        self._activated = True
        self.destructable = True
        self._tombstone = False
        self._tombstone_timer = -1

        self._tag = -1
        self._tag_square_dist = 0.0

    @property
    def position(self) -> Vec2:
        """The object's world position."""
        return self.entity.position

    @position.setter
    def position(self, value: Vec2) -> None:
        self.entity.position = value

    @property
    def velocity(self) -> float:
        """Horizontal speed in world units per millisecond."""
        return self._vel

    @property
    def activated(self) -> bool:
        return self._activated

    @property
    def tag(self) -> int:
        """The id of the character that tagged this object, or -1."""
        return self._tag

    def update(self, delta: int, elapsed: int) -> None:
        """Move the object and tombstone it once it leaves the world."""
        pos = self.position
        limit = self._world_bounds.x + SPRITE_DIM
        if pos.x < -limit or pos.x > limit:
            self._tombstone = True

        self._tombstone_timer -= delta

        if self._tombstone and self._tombstone_timer <= 0:
            return

        if self._activated and not self._tombstone:
            self.position = Vec2(pos.x + delta * self._vel, pos.y)

        self.entity.update(delta)

    def handle_collision(self, character: Collider) -> None:
        """Tag the object if ``character`` passed close enough, closest first."""
        if self._tombstone:
            return

        line = character.line_hitbox
        pos = self.position
        threshold = SPRITE_DIM * SPRITE_DIM

        if pos.x + SPRITE_DIM < min(line.start.x, line.end.x) or pos.x - SPRITE_DIM > max(
            line.start.x, line.end.x
        ):
            return

        distance = squared_distance_to_segment(pos, line)
        if distance > threshold:
            return

        if self._tag != -1 and distance > self._tag_square_dist:
            return

        self._tag = character.char_id
        self._tag_square_dist = distance

    def process_tag(self) -> None:
        """Send the collision event if the object has been tagged."""
        if self._tag == -1 or self._tombstone:
            return
        pos = self.position
        self._events.push(self.TAG_EVENT, CollisionData(self._tag, pos.x, pos.y))

    def deactivate(self) -> None:
        """Stop the object moving."""
        self._activated = False

    def activate(self) -> None:
        """Let the object move again."""
        self._activated = True

    def is_tombstoned(self) -> bool:
        """Whether the object can now be deleted."""
        return self._tombstone and self._tombstone_timer <= 0


def _random_direction(rng: random.Random) -> bool:
    return rng.randint(0, 1) == 1


class Saw(GameObject):
    """Stuns characters on contact; runs along the top or bottom border."""

    TAG_EVENT = EventType.COLLISION_SAW

    def __init__(
        self, world_bounds: Vec2, events: EventQueue, rng: Optional[random.Random] = None
    ) -> None:
        super().__init__(world_bounds, events)
        rng = rng if rng is not None else random.Random()
        self.destructable = False
        self.entity.push_animation(0, 50)
        self._freeze_timer = -1

        on_top = _random_direction(rng)
        going_right = _random_direction(rng)

        self._vel = 0.0625 * (1.0 if going_right else -1.0)
        self.position = Vec2(
            (-1.0 if going_right else 1.0) * world_bounds.x + _POS_BUFFER,
            (-1.0 if on_top else 1.0) * world_bounds.y,
        )

    def update(self, delta: int, elapsed: int) -> None:
        """Move, and slide out of play once frozen long enough after a hit."""
        super().update(delta, elapsed)
        if self._freeze_timer == -1:
            return
        self._freeze_timer -= delta
        if self._freeze_timer <= 0:
            self.deactivate()
            self._freeze_timer = -1

    def handle_collision(self, character: Collider) -> None:
        if not character.is_invincible():
            super().handle_collision(character)

    def process_tag(self) -> None:
        super().process_tag()
        if self._tag == -1 or self._tombstone:
            return
        self._freeze_timer = 1000
        self._tombstone_timer = 1200
        self._tombstone = True
        self.entity.clear_animation()

    def deactivate(self) -> None:
        """Stop moving and slide out beyond the border."""
        outward = -1.0 if self.position.y < 0 else 1.0
        self.entity.push_position_offset(LINEAR_CURVE, 200, outward * Vec2(0.0, SPRITE_DIM))
        super().deactivate()


class MovingTarget(GameObject):
    """A target worth points; drifts across the middle of the world."""

    TAG_EVENT = EventType.COLLISION_TARGET

    def __init__(
        self, world_bounds: Vec2, events: EventQueue, rng: Optional[random.Random] = None
    ) -> None:
        super().__init__(world_bounds, events)
        rng = rng if rng is not None else random.Random()
        self.entity.push_animation(1, 50)

        going_right = _random_direction(rng)
        x = (-1.0 if going_right else 1.0) * (world_bounds.x + _POS_BUFFER)
        y = float(
            rng.randint(
                int(2 * SPRITE_DIM - world_bounds.y), int(world_bounds.y - 2 * SPRITE_DIM)
            )
        )
        self.position = Vec2(x, y)
        self._y_base = y

        self._vel = 0.0625 * rng.uniform(0.3, 1.0) * (1.0 if going_right else -1.0)
        self._oscillation_speed = 64.0 * self._vel

        if not going_right:
            self.entity.flip_x()

    def update(self, delta: int, elapsed: int) -> None:
        """Move and bob up and down around the spawn height."""
        super().update(delta, elapsed)
        if not self._activated or self._tombstone:
            return
        rad = 6.0 * elapsed / 1024.0 * self._oscillation_speed
        self.position = Vec2(self.position.x, self._y_base + 0.5 * math.sin(rad))

    def handle_collision(self, character: Collider) -> None:
        if character.state is CharacterState.AIRBORNE:
            super().handle_collision(character)

    def process_tag(self) -> None:
        super().process_tag()
        if self._tag == -1 or self._tombstone:
            return
        self._tombstone = True


class TimeBonus(GameObject):
    """A pickup that extends the game timer."""

    TAG_EVENT = EventType.COLLISION_TIME_BONUS

    def __init__(
        self, world_bounds: Vec2, events: EventQueue, rng: Optional[random.Random] = None
    ) -> None:
        super().__init__(world_bounds, events)
        rng = rng if rng is not None else random.Random()
        self.entity.push_animation(2, 50)

        going_right = _random_direction(rng)
        x = (-1.0 if going_right else 1.0) * (world_bounds.x + _POS_BUFFER)
        y = float(
            rng.randint(
                int(SPRITE_DIM - world_bounds.y) + _POS_BUFFER,
                int(world_bounds.y - SPRITE_DIM) - _POS_BUFFER,
            )
        )
        self.position = Vec2(x, y)
        self._vel = 1.5 * 0.0625 * rng.uniform(0.3, 1.0) * (1.0 if going_right else -1.0)

    def handle_collision(self, character: Collider) -> None:
        if character.state is CharacterState.AIRBORNE:
            super().handle_collision(character)

    def process_tag(self) -> None:
        super().process_tag()
        if self._tag == -1 or self._tombstone:
            return
        self._tombstone = True