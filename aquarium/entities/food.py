"""Sinking food particles dropped by the user."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from aquarium.color import hex_to_rgb
from aquarium.config.food import (
    FOOD_COLOR,
    FOOD_DRIFT_RANGE,
    FOOD_MIN_SINK_SPEED,
    FOOD_SINK_SPEED_RANGE,
    FOOD_SIZE,
)
from aquarium.config.tank import SAND_LINE_OFFSET
from aquarium.entities.base import Entity
from aquarium.math_utils import Vector2

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas


class Food(Entity):
    """A food flake that sinks at a fixed velocity until it settles or is eaten.

    Attributes:
        size: Radius in pixels, fixed at creation
        vel: Per-frame velocity; y is always positive (sinking), x is a small drift
        color: RGB fill color
    """

    def __init__(
        self,
        x: float,
        y: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a food flake.

        Args:
            x: Initial x position
            y: Initial y position
            rng: Random number generator for the velocity draw
        """
        super().__init__(x, y)
        _rng = rng if rng is not None else random.Random()
        self.size: float = FOOD_SIZE
        self.vel: Vector2 = Vector2(
            (_rng.random() - 0.5) * FOOD_DRIFT_RANGE,
            FOOD_MIN_SINK_SPEED + _rng.random() * FOOD_SINK_SPEED_RANGE,
        )
        self.color = hex_to_rgb(FOOD_COLOR)

    def advance(self, tank_height: float) -> None:
        """Move one frame and expire once below the sand line.

        Flagged food no longer moves, so a flake eaten this frame is drawn
        where it was caught.
        """
        if self.marked_for_deletion:
            return
        self.pos.x += self.vel.x
        self.pos.y += self.vel.y
        if self.pos.y > tank_height - SAND_LINE_OFFSET:
            self.mark_for_deletion()

    def render(self, canvas: "Canvas") -> None:
        canvas.fill_circle(self.pos.as_tuple(), self.size, self.color)
