"""Events that carry information between game components, and their queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Deque, Iterator, Optional, Union


class EventType(Enum):
    """What an event signifies."""

    PROGRAM_CLOSE = auto()
    RELOAD_MENU = auto()
    PUSH_MENU = auto()
    MENU_RETURN = auto()
    GAME_NEW = auto()
    GAME_RESET = auto()
    GAME_TIME_UP = auto()
    GAME_DONE = auto()
    GAME_EXIT = auto()
    PAUSE = auto()
    RESUME = auto()
    COLLISION_SAW = auto()
    COLLISION_TARGET = auto()
    COLLISION_TIME_BONUS = auto()
    TIMER_REFILL = auto()
    BOOST_FULL = auto()
    PLAYER_JUMP = auto()
    PLAYER_SUPER = auto()
    PLAYER_HIT = auto()
    PLAYER_COMBO = auto()
    UPDATE_SETTINGS = auto()
    UPDATE_WINDOW = auto()
    NULL = auto()


@dataclass
class ComboData:
    """The number of targets a character hit in one jump."""

    char_id: int
    was_super_jump: bool
    count: int


@dataclass
class CollisionData:
    """A character colliding with an object at (x, y)."""

    char_id: int
    x: float
    y: float


@dataclass
class SettingsData:
    """A change of one setting."""

    setting: int
    value: int


EventData = Union[int, ComboData, CollisionData, SettingsData, None]


@dataclass
class Event:
    """An event type with its optional payload."""

    type: EventType = EventType.NULL
    data: EventData = None


class EventQueue:
    """A first-in, first-out queue of events."""

    def __init__(self) -> None:
        self._events: Deque[Event] = deque()

    def push(self, event_type: EventType, data: EventData = None) -> None:
        """Build an event and queue it."""
        self._events.append(Event(event_type, data))

    def push_event(self, event: Event) -> None:
        """Queue an existing event."""
        self._events.append(event)

    def poll(self) -> Optional[Event]:
        """Remove and return the oldest event, or None when empty."""
        return self._events.popleft() if self._events else None

    def drain(self) -> Iterator[Event]:
        """Yield events until the queue is empty, including ones queued meanwhile."""
        while self._events:
            yield self._events.popleft()

    def __len__(self) -> int:
        return len(self._events)