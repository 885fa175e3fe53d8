"""Base entity class for the simulation."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from aquarium.exceptions import EntityError
from aquarium.math_utils import Vector2

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas


class Entity:
    """Positional record shared by every simulated object (pure logic).

    An entity belongs to exactly one collection owned by the simulation
    engine. Setting the deletion flag is the only way an entity leaves the
    tank on its own: the engine culls flagged entities from their collection
    at the next filter pass. The flag is never cleared.

    Attributes:
        pos: Position in tank-pixel coordinates
    """

    def __init__(self, x: float, y: float) -> None:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise EntityError(f"{type(self).__name__} position must be finite, got ({x}, {y})")
        self.pos: Vector2 = Vector2(x, y)
        self._marked_for_deletion: bool = False

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def marked_for_deletion(self) -> bool:
        return self._marked_for_deletion

    def mark_for_deletion(self) -> None:
        """Flag the entity for culling. Idempotent and irreversible."""
        self._marked_for_deletion = True

    def render(self, canvas: "Canvas") -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.pos.x:.1f}, y={self.pos.y:.1f})"
