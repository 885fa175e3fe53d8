"""Decorative bubbles rising from the tank floor."""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, Optional

from aquarium.color import with_alpha
from aquarium.config.bubbles import (
    BUBBLE_EXPIRY_Y,
    BUBBLE_FILL_ALPHA,
    BUBBLE_FILL_COLOR,
    BUBBLE_MIN_RISE_SPEED,
    BUBBLE_MIN_SIZE,
    BUBBLE_RISE_SPEED_RANGE,
    BUBBLE_SIZE_RANGE,
    BUBBLE_STROKE_ALPHA,
    BUBBLE_STROKE_COLOR,
    BUBBLE_WOBBLE_AMPLITUDE,
    BUBBLE_WOBBLE_STEP,
)
from aquarium.entities.base import Entity
from aquarium.math_utils import TWO_PI

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas

_STROKE = with_alpha(BUBBLE_STROKE_COLOR, BUBBLE_STROKE_ALPHA)
_FILL = with_alpha(BUBBLE_FILL_COLOR, BUBBLE_FILL_ALPHA)


class Bubble(Entity):
    """A translucent bubble that rises at constant speed with a sideways wobble."""

    def __init__(self, x: float, y: float, rng: Optional[random.Random] = None) -> None:
        super().__init__(x, y)
        _rng = rng if rng is not None else random.Random()
        self.size: float = _rng.random() * BUBBLE_SIZE_RANGE + BUBBLE_MIN_SIZE
        self.speed: float = _rng.random() * BUBBLE_RISE_SPEED_RANGE + BUBBLE_MIN_RISE_SPEED
        self.wobble: float = _rng.random() * TWO_PI

    def advance(self) -> None:
        self.pos.y -= self.speed
        self.wobble += BUBBLE_WOBBLE_STEP
        self.pos.x += math.sin(self.wobble) * BUBBLE_WOBBLE_AMPLITUDE
        if self.pos.y < BUBBLE_EXPIRY_Y:
            self.mark_for_deletion()

    def render(self, canvas: "Canvas") -> None:
        center = self.pos.as_tuple()
        canvas.fill_circle(center, self.size, _FILL)
        canvas.stroke_circle(center, self.size, _STROKE, 1)
