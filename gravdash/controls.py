"""Mapping of user actions to input bindings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Dict, Hashable, Mapping, Optional, Protocol


class Action(Enum):
    """Actions a binding can be assigned to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SELECT = auto()
    ESCAPE = auto()
    JUMP = auto()
    SPECIAL = auto()


class KeyState(Protocol):
    """Anything that reports the press state of keys."""

    def is_key_held(self, key: Hashable) -> bool: ...

    def is_key_on_initial_click(self, key: Hashable) -> bool: ...

    def is_key_clicked(self, key: Hashable) -> bool: ...


class Controls(ABC):
    """Maps bindings to actions."""

    @abstractmethod
    def is_action_held(self, action: Action) -> bool:
        """Whether the binding of ``action`` is held."""

    @abstractmethod
    def is_action_on_initial_click(self, action: Action) -> bool:
        """Whether the binding of ``action`` was pressed this frame."""

    @abstractmethod
    def is_action_clicked(self, action: Action) -> bool:
        """Whether the binding of ``action`` registers as a click."""

    @abstractmethod
    def get_action(self, action: Action) -> Optional[Hashable]:
        """Return the binding of ``action``, or None if unbound."""

    @abstractmethod
    def set_action(self, action: Action, binding: Hashable) -> None:
        """Bind ``action`` to ``binding``."""


class KeyboardControls(Controls):
    """Controls backed by keyboard key bindings."""

    def __init__(
        self,
        keyboard: KeyState,
        bindings: Optional[Mapping[Action, Hashable]] = None,
    ) -> None:
        self._keyboard = keyboard
        self._keys: Dict[Action, Hashable] = {}
        for action, key in (bindings or {}).items():
            self.set_action(action, key)

    def _key(self, action: Action) -> Optional[Hashable]:
        return self._keys.get(Action(action))

    def is_action_held(self, action: Action) -> bool:
        key = self._key(action)
        return key is not None and bool(self._keyboard.is_key_held(key))

    def is_action_on_initial_click(self, action: Action) -> bool:
        key = self._key(action)
        return key is not None and bool(self._keyboard.is_key_on_initial_click(key))

    def is_action_clicked(self, action: Action) -> bool:
        key = self._key(action)
        return key is not None and bool(self._keyboard.is_key_clicked(key))

    def get_action(self, action: Action) -> Optional[Hashable]:
        return self._key(action)

    def set_action(self, action: Action, binding: Hashable) -> None:
        self._keys[Action(action)] = binding