import random
from dataclasses import dataclass

import pytest

from gravdash.character import CharacterState
from gravdash.events import CollisionData, Event, EventQueue, EventType
from gravdash.game_object import GameObject, MovingTarget, Saw, TimeBonus
from gravdash.geometry import SPRITE_DIM, LineSegment, Vec2
from gravdash.world import World

BOUNDS = World().bounds


@dataclass
class StubCharacter:
    char_id: int
    where: Vec2
    state: CharacterState = CharacterState.AIRBORNE
    invincible: bool = False

    @property
    def line_hitbox(self):
        return LineSegment(self.where, self.where)

    def is_invincible(self):
        return self.invincible


def drain(events):
    return list(events.drain())


@pytest.mark.parametrize("seed", range(10))
def test_saw_spawns_on_border(seed):
    saw = Saw(BOUNDS, EventQueue(), random.Random(seed))
    assert abs(saw.position.y) == BOUNDS.y
    assert abs(saw.velocity) == 0.0625
    if saw.velocity > 0:
        assert saw.position.x == -BOUNDS.x + SPRITE_DIM // 2
    else:
        assert saw.position.x == BOUNDS.x + SPRITE_DIM // 2


def test_same_seed_gives_same_saw():
    a = Saw(BOUNDS, EventQueue(), random.Random(7))
    b = Saw(BOUNDS, EventQueue(), random.Random(7))
    assert a.position == b.position
    assert a.velocity == b.velocity


@pytest.mark.parametrize("seed", range(10))
def test_moving_target_spawn(seed):
    target = MovingTarget(BOUNDS, EventQueue(), random.Random(seed))
    assert abs(target.position.x) == BOUNDS.x + SPRITE_DIM // 2
    assert 2 * SPRITE_DIM - BOUNDS.y <= target.position.y <= BOUNDS.y - 2 * SPRITE_DIM
    assert 0.3 * 0.0625 <= abs(target.velocity) <= 0.0625
    # Moves toward the centre and faces its direction.
    assert (target.velocity > 0) == (target.position.x < 0)
    assert (target.entity.scale.x > 0) == (target.velocity > 0)


@pytest.mark.parametrize("seed", range(10))
def test_time_bonus_spawn(seed):
    bonus = TimeBonus(BOUNDS, EventQueue(), random.Random(seed))
    buffer = SPRITE_DIM // 2
    assert SPRITE_DIM - BOUNDS.y + buffer <= bonus.position.y <= BOUNDS.y - SPRITE_DIM - buffer
    assert 1.5 * 0.3 * 0.0625 <= abs(bonus.velocity) <= 1.5 * 0.0625
    assert (bonus.velocity > 0) == (bonus.position.x < 0)


def test_object_moves_by_velocity():
    saw = Saw(BOUNDS, EventQueue(), random.Random(1))
    start = saw.position
    saw.update(16, 0)
    assert saw.position.x == pytest.approx(start.x + 16 * saw.velocity)
    assert saw.position.y == start.y


def test_deactivated_object_stays_put():
    target = MovingTarget(BOUNDS, EventQueue(), random.Random(2))
    target.deactivate()
    x = target.position.x
    target.update(100, 0)
    assert target.position.x == x
    target.activate()
    target.update(100, 0)
    assert target.position.x != x
    assert target.activated is True


def test_object_outside_world_is_tombstoned():
    obj = GameObject(BOUNDS, EventQueue())
    assert obj.is_tombstoned() is False
    obj.position = Vec2(BOUNDS.x + SPRITE_DIM + 1, 0.0)
    obj.update(16, 0)
    assert obj.is_tombstoned() is True


def test_moving_target_oscillation_is_small():
    target = MovingTarget(BOUNDS, EventQueue(), random.Random(3))
    base = target.position.y
    for elapsed in range(0, 5000, 250):
        target.update(1, elapsed)
        assert abs(target.position.y - base) <= 0.5


def test_target_tagged_by_airborne_character():
    events = EventQueue()
    target = MovingTarget(BOUNDS, events, random.Random(4))
    target.position = Vec2(0.0, 0.0)
    target.handle_collision(StubCharacter(2, Vec2(1.0, 1.0)))
    target.process_tag()
    assert drain(events) == [
        Event(EventType.COLLISION_TARGET, CollisionData(2, 0.0, 0.0))
    ]
    assert target.is_tombstoned() is True
    target.process_tag()
    assert len(events) == 0


def test_target_ignores_grounded_character():
    events = EventQueue()
    target = MovingTarget(BOUNDS, events, random.Random(4))
    target.position = Vec2(0.0, 0.0)
    target.handle_collision(StubCharacter(0, Vec2(0.0, 0.0), CharacterState.IDLE))
    target.process_tag()
    assert len(events) == 0
    assert target.tag == -1


def test_target_ignores_far_character():
    events = EventQueue()
    target = MovingTarget(BOUNDS, events, random.Random(4))
    target.position = Vec2(0.0, 0.0)
    target.handle_collision(StubCharacter(0, Vec2(0.0, SPRITE_DIM + 1.0)))
    target.process_tag()
    assert target.tag == -1
    assert len(events) == 0


def test_closest_character_wins_tag():
    target = MovingTarget(BOUNDS, EventQueue(), random.Random(5))
    target.position = Vec2(0.0, 0.0)
    target.handle_collision(StubCharacter(0, Vec2(3.0, 0.0)))
    target.handle_collision(StubCharacter(1, Vec2(1.0, 0.0)))
    target.handle_collision(StubCharacter(2, Vec2(5.0, 0.0)))
    assert target.tag == 1


def test_time_bonus_sends_its_event():
    events = EventQueue()
    bonus = TimeBonus(BOUNDS, events, random.Random(6))
    bonus.position = Vec2(0.0, 0.0)
    bonus.handle_collision(StubCharacter(3, Vec2(0.0, 0.0)))
    bonus.process_tag()
    (event,) = drain(events)
    assert event.type is EventType.COLLISION_TIME_BONUS
    assert event.data.char_id == 3
    assert bonus.is_tombstoned() is True


def test_saw_ignores_invincible_character():
    events = EventQueue()
    saw = Saw(BOUNDS, events, random.Random(0))
    saw.handle_collision(StubCharacter(0, saw.position, CharacterState.IDLE, invincible=True))
    saw.process_tag()
    assert saw.tag == -1
    assert len(events) == 0


def test_saw_hit_freezes_then_slides_out_and_expires():
    events = EventQueue()
    saw = Saw(BOUNDS, events, random.Random(0))
    saw.handle_collision(StubCharacter(1, saw.position, CharacterState.IDLE))
    saw.process_tag()
    (event,) = drain(events)
    assert event.type is EventType.COLLISION_SAW
    assert event.data.char_id == 1
    assert saw.is_tombstoned() is False

    start = saw.position
    saw.update(1000, 0)
    assert saw.activated is False
    assert saw.position.x == start.x
    saw.update(100, 0)
    assert abs(saw.position.y) > abs(start.y)
    assert saw.is_tombstoned() is False
    saw.update(100, 0)
    assert saw.is_tombstoned() is True