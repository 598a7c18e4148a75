"""Characters: entities controlled by players or by the computer."""

from __future__ import annotations

import math
import random
from enum import IntEnum
from typing import Optional

from .controls import Action, Controls
from .entity import Entity
from .events import ComboData, EventQueue, EventType
from .geometry import SPRITE_DIM, ZERO, LineSegment, Vec2, sign

IDLE_ANIM = 0
WALK_ANIM = 1
JUMP_ANIM = 2
STUN_ANIM = 3
LAND_ANIM = 4
REST_ANIM = 5
NUM_ANIMS = 6

# Milliseconds between velocity steps.
_VELOCITY_STEP = 16
# Milliseconds between computer decisions.
_DECISION_STEP = 16


class CharacterState(IntEnum):
    """What a character is doing; from AIRBORNE on it cannot jump."""

    IDLE = 0
    MOVING = 1
    AIRBORNE = 2
    STUNNED = 3
    DEAD = 4


class Character:
    """A game character that walks, jumps between floor and ceiling and can be stunned."""

    def __init__(self, char_id: int, player_num: int, events: EventQueue) -> None:
        self.char_id = char_id
        self.player_num = player_num
        self._events = events

        self.entity = Entity()
        self.entity.push_animation(IDLE_ANIM, 150)
        self.reticle = Entity()

        self._state = CharacterState.IDLE
        self._prev_pos = ZERO
        self._vel = Vec2(0.0, 1000.0)
        self.hori_dir = 0
        self._acceleration = 0.2

        self._upright = True
        self._grounded = False

        self._queue_final_jump = False
        self._final_jump = False

        self._invincibility_timer = 0
        self._run_particle_timer = 0
        self._stun_timer = 0
        self._vel_timer = _VELOCITY_STEP

        self._can_super_jump = False
        self._super_bounces_left = -1
        self._reticle_angle = 0.0

    # --- read-only state -------------------------------------------------

    @property
    def state(self) -> CharacterState:
        """The current state of the character."""
        return self._state

    @property
    def position(self) -> Vec2:
        """The character's world position."""
        return self.entity.position

    @position.setter
    def position(self, value: Vec2) -> None:
        self.entity.position = value

    @property
    def velocity(self) -> Vec2:
        return self._vel

    @property
    def grounded(self) -> bool:
        return self._grounded

    @property
    def is_upright(self) -> bool:
        return self._upright

    @property
    def final_jump(self) -> bool:
        return self._final_jump

    @property
    def can_super_jump(self) -> bool:
        return self._can_super_jump

    @property
    def reticle_angle(self) -> float:
        return self._reticle_angle

    @property
    def line_hitbox(self) -> LineSegment:
        """The segment the character covered between the last two frames."""
        return LineSegment(self._prev_pos, self.position)

    def is_invincible(self) -> bool:
        """Whether the character cannot be hit right now."""
        return (
            self._invincibility_timer > 0
            or self._state >= CharacterState.STUNNED
            or self._super_bounces_left >= 0
        )

    # --- frame update ----------------------------------------------------

    def update(self, delta: int) -> None:
        """Advance state, animation and position by ``delta`` ms."""
        delta_t = delta // 2 if self._final_jump else delta

        self._run_particle_timer -= delta_t
        self._invincibility_timer -= delta_t
        self._vel_timer -= delta_t

        while self._vel_timer <= 0:
            self._update_velocity(self.hori_dir)

        if self._can_super_jump:
            self._update_reticle(delta)

        slow = 2 if self._final_jump else 1
        if self._state is CharacterState.IDLE:
            if self.hori_dir != 0:
                self._state = CharacterState.MOVING
                self.entity.set_animation(WALK_ANIM, slow * 100)
                self.entity.set_x_dir(self.hori_dir == 1)
        elif self._state is CharacterState.MOVING:
            if self._vel.x == 0.0 and self.hori_dir == 0:
                self._state = CharacterState.IDLE
                self.entity.set_animation(IDLE_ANIM, slow * 150)
            else:
                if self.hori_dir != 0:
                    self.entity.set_x_dir(self.hori_dir == 1)
                if self._run_particle_timer <= 0:
                    self._run_particle_timer = 150
        elif self._state is CharacterState.STUNNED:
            self._stun_timer -= delta_t
            if self._stun_timer <= 0:
                self._state = CharacterState.IDLE
                self.entity.set_animation(IDLE_ANIM, slow * 150)
                if not self._final_jump:
                    self._invincibility_timer = 3000

        self._prev_pos = self.position
        if self._state is not CharacterState.STUNNED:
            self.position = self.position + (delta_t / 16.0) * self._vel

        self.entity.update(delta)

    # --- collisions ------------------------------------------------------

    def floor_collision(self, correction: float) -> None:
        """Push the character back vertically; lands or bounces if airborne."""
        self.position = self.position + Vec2(0.0, correction)

        if self._state is not CharacterState.AIRBORNE:
            self._grounded = True
            self._vel = Vec2(self._vel.x, 0.0)
            return

        if self._super_bounces_left > 0:
            self.position = self.position + Vec2(0.0, correction)
            self._vel = Vec2(self._vel.x, -self._vel.y)
            self._super_bounces_left -= 1
            return

        self._events.push(
            EventType.PLAYER_COMBO,
            ComboData(self.char_id, self._super_bounces_left >= 0, 0),
        )

        if self._super_bounces_left == 0:
            self._invincibility_timer = 2000
            self._super_bounces_left = -1

        self._land()

    def wall_collision(self, correction: float) -> None:
        """Push the character back horizontally; bounces during a super jump."""
        self.position = self.position + Vec2(correction, 0.0)

        if self._super_bounces_left < 0:
            self._vel = Vec2(0.0, self._vel.y)
            return

        self.position = self.position + Vec2(correction, 0.0)
        self._vel = Vec2(-self._vel.x, self._vel.y)

    def hit(self, source: Vec2) -> bool:
        """Try to stun the character from ``source``; return whether it worked."""
        if (
            self._invincibility_timer > 0
            or self._state >= CharacterState.STUNNED
            or self._super_bounces_left >= 0
            or self._final_jump
        ):
            return False

        self._stun()
        self._grounded = False
        self.entity.set_animation(STUN_ANIM, 100)
        self._events.push(EventType.PLAYER_HIT, self.char_id)

        pos = self.position
        dx = pos.x - source.x
        height = math.sqrt(max(0.0, SPRITE_DIM * SPRITE_DIM - dx * dx))
        new_y = source.y + (-1.0 if self._upright else 1.0) * height
        self.position = Vec2(pos.x, new_y)

        self._vel = Vec2(
            -2.0 if pos.x < source.x else 2.0,
            -1.5 if self._upright else 1.5,
        )

        if self._queue_final_jump:
            self._queue_final_jump = False
            self._final_jump = True

        return True

    def make_final_jump(self) -> None:
        """Stun the character and leave it one last jump."""
        if self._state is CharacterState.AIRBORNE:
            self._queue_final_jump = True
            return
        self._stun()
        self._final_jump = True

    def enable_super_jump(self) -> None:
        """Allow one super jump."""
        self._can_super_jump = True

    # --- actions ---------------------------------------------------------

    def jump(self) -> None:
        """Jump to the opposite surface if standing on one."""
        if not self._grounded:
            return

        self._state = CharacterState.AIRBORNE
        self._grounded = False
        self._upright = not self._upright
        self.entity.flip_y()
        self.entity.set_animation(JUMP_ANIM, 20)

        self._vel = Vec2(0.0, self._acceleration * 80.0 * (1.0 if self._upright else -1.0))
        self._reticle_angle = 0.0

        self._events.push(EventType.PLAYER_JUMP, self.char_id)

    def super_jump(self) -> None:
        """Jump along the reticle's angle, bouncing off the world's edges."""
        if not self._can_super_jump or self._final_jump or not self._grounded:
            return

        self._state = CharacterState.AIRBORNE
        self._grounded = False
        self._upright = not self._upright
        self.entity.flip_y()

        self._can_super_jump = False
        self._super_bounces_left = 6

        self.entity.set_animation(JUMP_ANIM, 20)

        speed = self._acceleration * 80.0 * (1.0 if self._upright else -1.0)
        self._vel = Vec2(
            math.sin(self._reticle_angle) * speed,
            math.cos(self._reticle_angle) * speed,
        )
        self._reticle_angle = 0.0

        self._events.push(EventType.PLAYER_SUPER, self.char_id)

    # --- internals -------------------------------------------------------

    def _update_velocity(self, direction: int) -> None:
        self._vel_timer += _VELOCITY_STEP

        if self._state > CharacterState.MOVING:
            return

        vx = self._vel.x
        vy = self._vel.y + 0.8 * (1.0 if self._upright else -1.0)
        acc = self._acceleration

        if direction != 0 and self._grounded:
            max_vel = 8.0 * acc
            vx = min(max(vx + acc * direction, -max_vel), max_vel)
        elif abs(vx) < acc:
            vx = 0.0
        else:
            vx += acc * (1.0 if self._grounded else 0.2) * (-1.0 if vx > 0 else 1.0)

        self._vel = Vec2(vx, vy)

    def _update_reticle(self, delta: int) -> None:
        angle = self._reticle_angle
        if self.hori_dir:
            m = float(self.hori_dir) * (-1.0 if self._upright else 1.0)
            angle += m * (2.0 - m * angle) * delta / 500.0
            angle = min(max(angle, -1.2), 1.2)
        else:
            m = -float(sign(angle))
            angle += m * abs(angle) * delta / 200.0
            if sign(angle) == int(m):
                angle = 0.0
        self._reticle_angle = angle

        reach = (-3.0 if self._upright else 3.0) * SPRITE_DIM
        self.reticle.position = self.position + reach * Vec2(math.sin(angle), math.cos(angle))
        self.reticle.update(delta)

    def _land(self) -> None:
        self._state = CharacterState.DEAD if self._final_jump else CharacterState.IDLE
        self._grounded = True
        self._vel = ZERO
        self._super_bounces_left = -1

        self.entity.set_animation(LAND_ANIM, 100, 0, 300)
        self.entity.push_animation(REST_ANIM if self._final_jump else IDLE_ANIM, 150)

        if self._queue_final_jump:
            self._final_jump = True
            self._queue_final_jump = False
            self._stun()

    def _stun(self) -> None:
        if self._state is CharacterState.STUNNED:
            return
        self.entity.set_animation(STUN_ANIM, 100)
        self._state = CharacterState.STUNNED
        self._stun_timer = 1000
        self._grounded = False


class PlayableCharacter(Character):
    """A character driven by a player's controls."""

    def __init__(
        self, char_id: int, player_num: int, events: EventQueue, controls: Controls
    ) -> None:
        super().__init__(char_id, player_num, events)
        self.controls = controls

    def update(self, delta: int) -> None:
        if self.state is not CharacterState.DEAD:
            if self.controls.is_action_on_initial_click(Action.JUMP):
                self.jump()
            elif self.controls.is_action_on_initial_click(Action.SPECIAL):
                self.super_jump()
            self.hori_dir = int(self.controls.is_action_held(Action.RIGHT)) - int(
                self.controls.is_action_held(Action.LEFT)
            )
        super().update(delta)


class ComputerCharacter(Character):
    """A character driven by random decisions that favour its current movement."""

    def __init__(
        self,
        char_id: int,
        player_num: int,
        events: EventQueue,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(char_id, player_num, events)
        self._rng = rng if rng is not None else random.Random()
        self._decision_timer = _DECISION_STEP

    def update(self, delta: int) -> None:
        if self.state is not CharacterState.DEAD:
            self._decision_timer -= delta
            while self._decision_timer <= 0:
                self._decision_timer += _DECISION_STEP
                roll = self._rng.randint(0, 99)
                if roll == 99:
                    self.jump()
                elif roll // 3 < 3:
                    self.hori_dir = -1 + roll // 3
        super().update(delta)