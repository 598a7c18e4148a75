"""The main gameplay loop: world, characters and objects."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .attachment import UpdateFunction
from .character import Character, CharacterState, ComputerCharacter, PlayableCharacter
from .controls import Controls
from .events import Event, EventQueue, EventType
from .game_object import GameObject
from .geometry import SPRITE_DIM, Vec2, sign
from .world import AttachPoint, World

MAX_HUMANS = 2
MAX_PLAYERS = 4


class Game:
    """Holds the world, the characters and the objects they interact with."""

    def __init__(
        self,
        num_humans: int,
        num_computers: int,
        events: Optional[EventQueue] = None,
        rng: Optional[random.Random] = None,
        controls: Sequence[Controls] = (),
    ) -> None:
        if num_humans < 0 or num_computers < 0:
            raise ValueError("player counts cannot be negative")
        if num_humans > MAX_HUMANS:
            raise ValueError(f"at most {MAX_HUMANS} human players are supported")
        if num_humans + num_computers > MAX_PLAYERS:
            raise ValueError(f"at most {MAX_PLAYERS} players are supported")
        if len(controls) < num_humans:
            raise ValueError("every human player needs controls")

        self._events = events if events is not None else EventQueue()
        self._rng = rng if rng is not None else random.Random()
        self._world = World()

        self._characters: List[Character] = []
        for i in range(num_humans + num_computers):
            if i < num_humans:
                player_num = 0 if num_humans == 1 else i + 1
                self._characters.append(
                    PlayableCharacter(i, player_num, self._events, controls[i])
                )
            else:
                self._characters.append(ComputerCharacter(i, 0, self._events, self._rng))

        self._combo_count = [0] * len(self._characters)
        self._objects: List[GameObject] = []
        self._spawners_enabled = True
        self._game_over = False

    @property
    def events(self) -> EventQueue:
        return self._events

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def characters(self) -> tuple:
        return tuple(self._characters)

    @property
    def objects(self) -> tuple:
        """Live objects, most recently spawned first."""
        return tuple(self._objects)

    @property
    def world_bounds(self) -> Vec2:
        """The half-extents of the playable region."""
        return self._world.bounds

    def process_event(self, event: Event) -> None:
        """React to a gameplay event; combo events get their count filled in."""
        kind = event.type
        data = event.data
        if kind in (EventType.PLAYER_JUMP, EventType.PLAYER_SUPER, EventType.PLAYER_HIT):
            self._combo_count[data] = 0
        elif kind is EventType.BOOST_FULL:
            self._characters[data].enable_super_jump()
        elif kind is EventType.PLAYER_COMBO:
            data.count = self._combo_count[data.char_id]
        elif kind is EventType.COLLISION_SAW:
            if self._characters[data.char_id].hit(Vec2(data.x, data.y)):
                self._combo_count[data.char_id] = 0
        elif kind in (EventType.COLLISION_TARGET, EventType.COLLISION_TIME_BONUS):
            self._combo_count[data.char_id] += 1
        elif kind is EventType.GAME_TIME_UP:
            self._spawners_enabled = False
            for character in self._characters:
                character.make_final_jump()
            for obj in self._objects:
                obj.deactivate()

    def update(self, delta: int, elapsed: int) -> None:
        """Advance characters and objects, then resolve collisions with the world."""
        for character in self._characters:
            character.update(delta)

        self._objects = [obj for obj in self._objects if not obj.is_tombstoned()]
        for obj in self._objects:
            obj.update(delta, elapsed)
            for character in self._characters:
                obj.handle_collision(character)
            obj.process_tag()

        for character in self._characters:
            self._correct_character_pos(character)

        if self._game_over:
            return

        self._game_over = all(c.state is CharacterState.DEAD for c in self._characters)
        if self._game_over:
            self._events.push(EventType.GAME_DONE)
            self._objects.clear()

    def is_game_over(self) -> bool:
        """Whether every character has finished."""
        return self._game_over

    def spawn_object(self, new_object: GameObject) -> None:
        """Add an object unless spawning has been switched off."""
        if self._spawners_enabled:
            self._objects.insert(0, new_object)

    def num_characters(self) -> int:
        return len(self._characters)

    def attach(self, point: AttachPoint, function: UpdateFunction) -> None:
        """Attach ``function`` to a point on the world border."""
        self._world.attach(point, function)

    def update_attachment(self, point: AttachPoint) -> None:
        """Make the object attached at ``point`` update its position."""
        self._world.update_attachment(point)

    def _correct_character_pos(self, character: Character) -> None:
        pos = character.position
        buffer = 0.5 * SPRITE_DIM
        bounds = self._world.bounds

        hori_offset = abs(pos.x) + buffer - abs(bounds.x)
        if hori_offset > 0:
            character.wall_collision(-hori_offset * sign(pos.x))

        vert_offset = abs(pos.y) + buffer - abs(bounds.y)
        if vert_offset > 0:
            character.floor_collision(-vert_offset * sign(pos.y))