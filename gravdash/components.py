"""Modular game features attached to a Game: spawners, boost meters, score and timer."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple

from .bezier import EASE_IN_CURVE, BezierTransition
from .events import Event, EventQueue, EventType
from .game import Game
from .game_object import GameObject
from .geometry import SPRITE_DIM, ZERO, Vec2
from .numbers import add_value
from .world import AttachPoint

ObjectFactory = Callable[[Vec2, EventQueue, random.Random], GameObject]

# Fill added to a boost meter by a regular combo of two or more targets.
BOOST_PER_COMBO = 2000
# Height of the timer gauge, in world units.
_GAUGE_HEIGHT = 61.0


class GameComponent(ABC):
    """Extends a Game with an optional, self-contained feature."""

    def __init__(self, game: Game) -> None:
        self.game = game

    def process_event(self, event: Event) -> None:
        """React to an event; by default nothing happens."""

    @abstractmethod
    def update(self, delta: int) -> None:
        """Advance the component by ``delta`` ms."""


class ObjectSpawnComponent(GameComponent):
    """Spawns objects made by ``factory`` at a randomised rate."""

    def __init__(
        self,
        game: Game,
        factory: ObjectFactory,
        cooldown: int,
        cooldown_var: int,
        probability: float = 1.0,
    ) -> None:
        super().__init__(game)
        if cooldown <= 0:
            raise ValueError("cooldown must be positive")
        if cooldown_var < 0:
            raise ValueError("cooldown variance cannot be negative")
        self._factory = factory
        self._timer = cooldown
        self._cooldown = cooldown
        self._cooldown_var = cooldown_var
        self._probability = probability

    @property
    def timer(self) -> int:
        """Milliseconds until the next spawn attempt."""
        return self._timer

    def update(self, delta: int) -> None:
        """Attempt a spawn each time the cooldown runs out."""
        self._timer -= delta
        rng = self.game.rng
        while self._timer < 0:
            self._timer += self._cooldown + rng.randint(
                -self._cooldown_var, self._cooldown_var
            )
            if rng.random() < self._probability:
                self.game.spawn_object(
                    self._factory(self.game.world_bounds, self.game.events, rng)
                )


class BoostMeter:
    """A player's boost meter; it drains over time until it is full."""

    def __init__(self, game: Game, meter_id: int, limit: int) -> None:
        if limit <= 0:
            raise ValueError("a boost meter needs a positive limit")
        self.meter_id = meter_id
        self.limit = limit
        self._events = game.events
        self._fill = 0
        self._position = ZERO
        # Meters at the top of the world are drawn upside down.
        self.flipped = meter_id < 2
        game.attach(AttachPoint(AttachPoint.TOP_LEFT + meter_id), self._move_to)

    def _move_to(self, pos: Vec2) -> None:
        self._position = pos

    @property
    def position(self) -> Vec2:
        return self._position

    @property
    def fill_amount(self) -> int:
        """How full the meter is, in milliseconds."""
        return self._fill

    @property
    def fill_fraction(self) -> float:
        return min(self._fill / self.limit, 1.0)

    def is_full(self) -> bool:
        return self._fill >= self.limit

    def update(self, delta: int) -> None:
        """Drain the meter unless it is full."""
        if self.is_full():
            return
        self._fill = max(self._fill - delta, 0)

    def increment(self, amount: int) -> None:
        """Add ``amount`` ms of fill; announces when the meter becomes full."""
        if self.is_full():
            return
        self._fill += amount
        if self.is_full():
            self._events.push(EventType.BOOST_FULL, self.meter_id)

    def clear(self) -> None:
        """Empty the meter."""
        self._fill = 0


class BoostComponent(GameComponent):
    """One boost meter per character, filled by combos, emptied by super jumps."""

    def __init__(self, game: Game, limit: int) -> None:
        super().__init__(game)
        self.meters: List[BoostMeter] = [
            BoostMeter(game, i, limit) for i in range(game.num_characters())
        ]

    def process_event(self, event: Event) -> None:
        if event.type is EventType.PLAYER_SUPER:
            self.meters[event.data].clear()
        elif event.type is EventType.PLAYER_COMBO:
            combo = event.data
            if combo.count >= 2 and not combo.was_super_jump:
                self.meters[combo.char_id].increment(BOOST_PER_COMBO)

    def update(self, delta: int) -> None:
        for meter in self.meters:
            meter.update(delta)


class ScoreComponent(GameComponent):
    """Keeps the score earned through combos and lost through hits."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self._digits: List[int] = [0]
        self.multiplier = 1.0
        self._anchor = ZERO
        self.layout_updates = 0
        game.attach(AttachPoint.TOP, self._move_to)

    def _move_to(self, pos: Vec2) -> None:
        self._anchor = pos
        self.layout_updates += 1

    @property
    def anchor(self) -> Vec2:
        """Where the digits are centred."""
        return self._anchor

    @property
    def digits(self) -> Tuple[int, ...]:
        """The score's digits, most significant first."""
        return tuple(self._digits)

    @property
    def score(self) -> int:
        return int("".join(str(d) for d in self._digits))

    def process_event(self, event: Event) -> None:
        kind = event.type
        if kind is EventType.TIMER_REFILL:
            self.multiplier += 0.1
        elif kind is EventType.PLAYER_COMBO:
            combo = event.data
            if combo.count == 0:
                return
            if combo.was_super_jump:
                # Every target of a super jump is worth 1000 points.
                self._add(int(1000 * self.multiplier * combo.count))
                return
            # Each target doubles the previous one's worth, up to ten targets.
            value = 2 ** min(combo.count, 10) - 1
            excess = combo.count - 10
            if excess > 0:
                value += excess * 2**10
            self._add(int(value * (50 * self.multiplier)))
        elif kind is EventType.PLAYER_HIT:
            self._add(int(-5000 * self.multiplier))

    def update(self, delta: int) -> None:
        """The score changes only through events."""

    def _add(self, amount: int) -> None:
        size = len(self._digits)
        add_value(self._digits, amount)
        if size != len(self._digits):
            self.game.update_attachment(AttachPoint.TOP)


class TimerComponent(GameComponent):
    """A countdown that time bonuses can refill once it runs out."""

    def __init__(self, game: Game, max_time: int) -> None:
        super().__init__(game)
        if max_time <= 0:
            raise ValueError("the timer needs a positive maximum time")
        self.max_time = max_time
        self._time_remaining = max_time
        self._time_refill = 0
        self._done = False
        self._boost_count = [0] * game.num_characters()

        self.show_arrow = False
        self._gauge_pos = ZERO
        self._arrow_x = 0.0
        self._arrow_y = BezierTransition(0.0)

        game.attach(AttachPoint.RIGHT, self._move_to)
        self._move_arrow()

    def _move_to(self, pos: Vec2) -> None:
        self._gauge_pos = pos
        self._arrow_x = pos.x + SPRITE_DIM

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def time_refill(self) -> int:
        """Time added once the timer runs out."""
        return self._time_refill

    @property
    def done(self) -> bool:
        return self._done

    @property
    def time_fraction(self) -> float:
        return self._time_remaining / self.max_time

    @property
    def arrow_position(self) -> Vec2:
        return Vec2(self._arrow_x, self._arrow_y.value)

    def process_event(self, event: Event) -> None:
        if event.type is EventType.COLLISION_TIME_BONUS:
            self._boost_count[event.data.char_id] += 1
        elif event.type is EventType.PLAYER_COMBO:
            combo = event.data
            bonuses = self._boost_count[combo.char_id]
            if combo.count >= 3 and bonuses != 0:
                self._time_refill = min(self._time_refill + 5000 * bonuses, self.max_time)
                self._move_arrow()
                self.show_arrow = True
            self._boost_count[combo.char_id] = 0

    def update(self, delta: int) -> None:
        """Count down; refill once if possible, otherwise announce time is up."""
        if self._done:
            return
        self._arrow_y.update(delta)
        self._time_remaining -= delta
        if self._time_remaining > 0:
            return
        if self._time_refill > 0:
            self._time_remaining = self._time_refill
            self._time_refill = 0
            self._move_arrow()
            self.game.events.push(EventType.TIMER_REFILL)
            return
        self._time_remaining = 0
        self._done = True
        self.game.events.push(EventType.GAME_TIME_UP)

    def _move_arrow(self) -> None:
        self._arrow_y.clear()
        target = self._gauge_pos.y + _GAUGE_HEIGHT * (
            0.5 - self._time_refill / self.max_time
        )
        self._arrow_y.push(EASE_IN_CURVE, 1000, self._arrow_y.value, target)