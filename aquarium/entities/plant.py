"""Static swaying plants."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from aquarium.color import RGB
from aquarium.config.plants import (
    PLANT_CURVE_SEGMENTS,
    PLANT_GREEN_MIN,
    PLANT_GREEN_RANGE,
    PLANT_HEIGHT_RANGE,
    PLANT_MIN_HEIGHT,
    PLANT_ROOT_OFFSET,
    PLANT_STROKE_WIDTH,
    PLANT_SWAY_AMPLITUDE,
)
from aquarium.math_utils import TWO_PI, Point, quadratic_bezier

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas


@dataclass(frozen=True)
class Plant:
    """A stem rooted near the floor, swaying with the global clock.

    Plants hold no per-frame state. Their shape is a pure function of the
    tank height and the simulation time, offset by a per-plant phase.

    Attributes:
        x: Root x position
        height: Stem height in pixels
        color: RGB stroke color
        offset: Sway phase offset in radians
    """

    x: float
    height: float
    color: RGB
    offset: float

    @classmethod
    def random(cls, tank_width: float, rng: Optional[random.Random] = None) -> "Plant":
        _rng = rng if rng is not None else random.Random()
        return cls(
            x=_rng.random() * tank_width,
            height=PLANT_MIN_HEIGHT + _rng.random() * PLANT_HEIGHT_RANGE,
            color=(0, int(PLANT_GREEN_MIN + _rng.random() * PLANT_GREEN_RANGE), 0),
            offset=_rng.random() * TWO_PI,
        )

    def sway(self, time: float) -> float:
        return math.sin(time + self.offset) * PLANT_SWAY_AMPLITUDE

    def stem_points(self, tank_height: float, time: float) -> list[Point]:
        """Sampled stem curve from the root to the swaying tip."""
        sway = self.sway(time)
        root_y = tank_height - PLANT_ROOT_OFFSET
        return quadratic_bezier(
            (self.x, root_y),
            (self.x + sway / 2, root_y - self.height / 2),
            (self.x + sway, root_y - self.height),
            PLANT_CURVE_SEGMENTS,
        )

    def render(self, canvas: "Canvas", tank_height: float, time: float) -> None:
        canvas.stroke_curve(self.stem_points(tank_height, time), self.color, PLANT_STROKE_WIDTH)
