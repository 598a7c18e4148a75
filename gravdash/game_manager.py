"""Creates a Game from a preset and drives it together with its components."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import List, Optional, Sequence

from .components import (
    BoostComponent,
    GameComponent,
    ObjectSpawnComponent,
    ScoreComponent,
    TimerComponent,
)
from .controls import Controls
from .events import Event, EventQueue
from .game import Game
from .game_object import MovingTarget, Saw, TimeBonus


class Preset(IntEnum):
    """The kinds of game that can be created; each picks its components."""

    TITLE = 0
    MINUTE = 1
    RUSH = 2
    COOP = 3
    VS = 4
    NULL = 5


class GameManager:
    """Owns a Game and the components that extend it."""

    def __init__(
        self,
        preset: Preset,
        events: Optional[EventQueue] = None,
        rng: Optional[random.Random] = None,
        controls: Sequence[Controls] = (),
    ) -> None:
        self._preset = Preset(preset)
        self._events = events if events is not None else EventQueue()
        self._rng = rng if rng is not None else random.Random()
        self._controls = tuple(controls)
        # Components are kept most recently added first.
        self._components: List[GameComponent] = []

        loaders = {
            Preset.TITLE: self._load_title,
            Preset.MINUTE: self._load_minute,
            Preset.RUSH: self._load_rush,
            Preset.COOP: self._load_two_player,
            Preset.VS: self._load_two_player,
        }
        loader = loaders.get(self._preset)
        if loader is None:
            raise ValueError(f"no game can be built from preset {self._preset.name}")
        loader()

    @property
    def preset(self) -> Preset:
        """The preset the game was built from."""
        return self._preset

    @property
    def game(self) -> Game:
        return self._game

    @property
    def components(self) -> tuple:
        """The game's components, in the order they receive updates and events."""
        return tuple(self._components)

    def update(self, delta: int, elapsed: int) -> None:
        """Advance the game; components only run while it is not over."""
        self._game.update(delta, elapsed)
        if self._game.is_game_over():
            return
        for component in self._components:
            component.update(delta)

    def process_event(self, event: Event) -> None:
        """Hand a gameplay event to the game, then to every component."""
        self._game.process_event(event)
        for component in self._components:
            component.process_event(event)

    def _new_game(self, num_humans: int, num_computers: int) -> None:
        self._game = Game(num_humans, num_computers, self._events, self._rng, self._controls)

    def _add(self, component: GameComponent) -> None:
        self._components.insert(0, component)

    def _load_title(self) -> None:
        self._new_game(0, 4)
        self._add(ObjectSpawnComponent(self._game, MovingTarget, 200, 100, 0.9))

    def _load_minute(self) -> None:
        self._new_game(1, 0)
        self._add(TimerComponent(self._game, 60000))
        self._add(BoostComponent(self._game, 30000))
        self._add(ObjectSpawnComponent(self._game, MovingTarget, 150, 100, 0.9))
        self._add(ObjectSpawnComponent(self._game, Saw, 1500, 500))
        self._add(ScoreComponent(self._game))

    def _load_rush(self) -> None:
        self._load_minute()
        self._add(ObjectSpawnComponent(self._game, TimeBonus, 5000, 1000))

    def _load_two_player(self) -> None:
        self._new_game(2, 0)