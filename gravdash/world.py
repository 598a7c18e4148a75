"""The playable region of the game and the attachment points on its border."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from .attachment import Attachment, UpdateFunction
from .geometry import SPRITE_DIM, Vec2

# The default size of the world, in tiles.
DEFAULT_WORLD_SIZE = Vec2(16.0, 8.0)
# Distance between the world border and the attachment points on it.
OUTLINE = 1.0


class AttachPoint(IntEnum):
    """Positions on the world border that components can attach to."""

    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    TOP_LEFT = 4
    TOP_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_RIGHT = 7


class World:
    """The playable region of the game, centred at the origin."""

    def __init__(self, size: Vec2 = DEFAULT_WORLD_SIZE) -> None:
        self._bounds = (0.5 * SPRITE_DIM) * size
        bx, by = self._bounds.x, self._bounds.y
        self._attachments: Dict[AttachPoint, Attachment] = {
            AttachPoint.LEFT: Attachment(Vec2(-bx - OUTLINE, 0.0)),
            AttachPoint.RIGHT: Attachment(Vec2(bx + OUTLINE, 0.0)),
            AttachPoint.TOP: Attachment(Vec2(0.0, -by - OUTLINE)),
            AttachPoint.BOTTOM: Attachment(Vec2(0.0, by + OUTLINE)),
            AttachPoint.TOP_LEFT: Attachment(Vec2(-0.65 * bx, -by - OUTLINE)),
            AttachPoint.TOP_RIGHT: Attachment(Vec2(0.65 * bx, -by - OUTLINE)),
            AttachPoint.BOTTOM_LEFT: Attachment(Vec2(-0.65 * bx, by + OUTLINE)),
            AttachPoint.BOTTOM_RIGHT: Attachment(Vec2(0.65 * bx, by + OUTLINE)),
        }

    @property
    def bounds(self) -> Vec2:
        """The half-extents of the playable region."""
        return self._bounds

    def _attachment(self, point: AttachPoint) -> Attachment:
        return self._attachments[AttachPoint(point)]

    def attachment_position(self, point: AttachPoint) -> Vec2:
        """Return the reference position of an attachment point."""
        return self._attachment(point).pos

    def attach(self, point: AttachPoint, function: UpdateFunction) -> None:
        """Attach ``function`` to ``point``; it is called with the point's position."""
        self._attachment(point).attach(function)

    def update_attachment(self, point: AttachPoint) -> None:
        """Make the object attached at ``point`` update its position again."""
        self._attachment(point).force_update()