"""Reference points that move attached objects along with them."""

from __future__ import annotations

from typing import Callable, Optional

from .geometry import ZERO, Vec2

UpdateFunction = Callable[[Vec2], None]


class Attachment:
    """A reference position that informs an attached object when it changes."""

    def __init__(
        self, pos: Vec2 = ZERO, update_function: Optional[UpdateFunction] = None
    ) -> None:
        self._pos = pos
        self._update: Optional[UpdateFunction] = None
        if update_function is not None:
            self.attach(update_function)

    @property
    def pos(self) -> Vec2:
        return self._pos

    @property
    def is_attached(self) -> bool:
        return self._update is not None

    def attach(self, update_function: UpdateFunction) -> None:
        """Attach an object and place it at the reference position."""
        self._update = update_function
        update_function(self._pos)

    def update_pos(self, new_pos: Vec2) -> None:
        """Move the reference point to ``new_pos``."""
        self._pos = new_pos
        self.force_update()

    def move(self, offset: Vec2) -> None:
        """Shift the reference point by ``offset``."""
        self.update_pos(self._pos + offset)

    def force_update(self) -> None:
        """Tell the attached object the current position again."""
        if self._update is not None:
            self._update(self._pos)