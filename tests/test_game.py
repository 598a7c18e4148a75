import random

import pytest

from gravdash.character import CharacterState, ComputerCharacter, PlayableCharacter
from gravdash.controls import KeyboardControls
from gravdash.events import CollisionData, ComboData, Event, EventQueue, EventType
from gravdash.game import Game
from gravdash.game_object import MovingTarget
from gravdash.geometry import SPRITE_DIM, Vec2
from gravdash.world import AttachPoint, World


class NoKeys:
    def is_key_held(self, key):
        return False

    def is_key_on_initial_click(self, key):
        return False

    def is_key_clicked(self, key):
        return False


def make_controls(count):
    return [KeyboardControls(NoKeys()) for _ in range(count)]


def make_game(humans=0, computers=1, seed=0):
    events = EventQueue()
    game = Game(humans, computers, events, random.Random(seed), make_controls(humans))
    return game, events


def test_character_kinds_and_count():
    game, _ = make_game(humans=2, computers=2)
    assert game.num_characters() == 4
    kinds = [type(c) for c in game.characters]
    assert kinds == [PlayableCharacter, PlayableCharacter, ComputerCharacter, ComputerCharacter]
    assert [c.char_id for c in game.characters] == [0, 1, 2, 3]
    assert [c.player_num for c in game.characters] == [1, 2, 0, 0]


def test_single_player_uses_first_colour():
    game, _ = make_game(humans=1, computers=0)
    assert game.characters[0].player_num == 0


@pytest.mark.parametrize("humans,computers", [(3, 0), (2, 3), (0, 5)])
def test_too_many_players(humans, computers):
    with pytest.raises(ValueError):
        Game(humans, computers, EventQueue(), random.Random(0), make_controls(humans))


def test_humans_need_controls():
    with pytest.raises(ValueError):
        Game(1, 0, EventQueue(), random.Random(0))


def test_world_bounds_match_default_world():
    game, _ = make_game()
    assert game.world_bounds == World().bounds


def test_attach_reports_border_position():
    game, _ = make_game()
    seen = []
    game.attach(AttachPoint.TOP, seen.append)
    game.update_attachment(AttachPoint.TOP)
    expected = World().attachment_position(AttachPoint.TOP)
    assert seen == [expected, expected]


def test_combo_count_accumulates_and_resets():
    game, _ = make_game()
    hit = Event(EventType.COLLISION_TARGET, CollisionData(0, 0.0, 0.0))
    bonus = Event(EventType.COLLISION_TIME_BONUS, CollisionData(0, 0.0, 0.0))
    game.process_event(hit)
    game.process_event(bonus)
    combo = Event(EventType.PLAYER_COMBO, ComboData(0, False, 0))
    game.process_event(combo)
    assert combo.data.count == 2

    game.process_event(Event(EventType.PLAYER_JUMP, 0))
    again = Event(EventType.PLAYER_COMBO, ComboData(0, False, 5))
    game.process_event(again)
    assert again.data.count == 0


def test_boost_full_enables_super_jump():
    game, _ = make_game()
    assert game.characters[0].can_super_jump is False
    game.process_event(Event(EventType.BOOST_FULL, 0))
    assert game.characters[0].can_super_jump is True


def test_saw_collision_hits_character_and_resets_combo():
    game, events = make_game()
    game.process_event(Event(EventType.COLLISION_TARGET, CollisionData(0, 0.0, 0.0)))
    character = game.characters[0]
    game.process_event(Event(EventType.COLLISION_SAW, CollisionData(0, 0.0, 0.0)))
    assert character.state is CharacterState.STUNNED
    assert [e.type for e in events.drain()] == [EventType.PLAYER_HIT]
    combo = Event(EventType.PLAYER_COMBO, ComboData(0, False, 0))
    game.process_event(combo)
    assert combo.data.count == 0


def test_first_update_lands_character_on_floor():
    game, _ = make_game()
    game.update(16, 16)
    character = game.characters[0]
    assert character.grounded is True
    assert character.position.y == pytest.approx(game.world_bounds.y - SPRITE_DIM / 2)


def test_characters_stay_inside_world():
    game, _ = make_game(computers=4, seed=11)
    limit_x = game.world_bounds.x - SPRITE_DIM / 2
    limit_y = game.world_bounds.y - SPRITE_DIM / 2
    for frame in range(400):
        game.update(16, frame * 16)
        for character in game.characters:
            assert abs(character.position.x) <= limit_x + 1e-6
            assert abs(character.position.y) <= limit_y + 1e-6


def test_tombstoned_objects_are_removed():
    game, events = make_game()
    target = MovingTarget(game.world_bounds, events, random.Random(1))
    game.spawn_object(target)
    assert game.objects == (target,)
    target.position = Vec2(game.world_bounds.x + 100.0, 0.0)
    game.update(16, 16)
    assert target.is_tombstoned() is True
    game.update(16, 32)
    assert game.objects == ()


def test_spawned_objects_are_newest_first():
    game, events = make_game()
    first = MovingTarget(game.world_bounds, events, random.Random(1))
    second = MovingTarget(game.world_bounds, events, random.Random(2))
    game.spawn_object(first)
    game.spawn_object(second)
    assert game.objects == (second, first)


def test_time_up_stops_spawning_and_freezes():
    game, events = make_game(computers=2)
    game.update(16, 16)
    target = MovingTarget(game.world_bounds, events, random.Random(3))
    game.spawn_object(target)
    game.process_event(Event(EventType.GAME_TIME_UP))
    assert target.activated is False
    for character in game.characters:
        assert character.final_jump is True
        assert character.state is CharacterState.STUNNED
    game.spawn_object(MovingTarget(game.world_bounds, events, random.Random(4)))
    assert game.objects == (target,)


def test_game_without_characters_is_over_at_once():
    game, events = make_game(computers=0)
    game.spawn_object(MovingTarget(game.world_bounds, events, random.Random(0)))
    game.update(16, 16)
    assert game.is_game_over() is True
    assert [e.type for e in events.drain()] == [EventType.GAME_DONE]
    assert game.objects == ()
    game.update(16, 32)
    assert len(events) == 0


def test_game_not_over_while_characters_live():
    game, _ = make_game(computers=2)
    game.update(16, 16)
    assert game.is_game_over() is False