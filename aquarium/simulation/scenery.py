"""Static tank scenery: palettes, background, sand band, plant placement."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from aquarium.color import RGB, hex_to_rgb
from aquarium.config.tank import (
    SAND_BAND_HEIGHT,
    SAND_SAMPLE_STEP,
    SAND_WAVE_AMPLITUDE,
    SAND_WAVE_FREQUENCY,
    TANK_COLORS,
)
from aquarium.entities.plant import Plant
from aquarium.math_utils import Point

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas


@dataclass(frozen=True)
class TankPalette:
    """Three-color palette: water top, water bottom, sand."""

    top: RGB
    bottom: RGB
    sand: RGB

    @classmethod
    def from_hex(cls, colors: dict) -> "TankPalette":
        return cls(
            top=hex_to_rgb(colors["top"]),
            bottom=hex_to_rgb(colors["bottom"]),
            sand=hex_to_rgb(colors["sand"]),
        )


DAY_PALETTE = TankPalette.from_hex(TANK_COLORS["day"])
NIGHT_PALETTE = TankPalette.from_hex(TANK_COLORS["night"])


def palette_for(is_day: bool) -> TankPalette:
    return DAY_PALETTE if is_day else NIGHT_PALETTE


def sand_outline(width: float, height: float) -> list[Point]:
    """Closed outline of the sand band.

    The top edge follows a fixed spatial sine wave sampled every
    SAND_SAMPLE_STEP pixels across the tank.
    """
    top = height - SAND_BAND_HEIGHT
    points: list[Point] = [(0.0, height), (0.0, top)]
    x = 0
    while x <= width:
        points.append((float(x), top + math.sin(x * SAND_WAVE_FREQUENCY) * SAND_WAVE_AMPLITUDE))
        x += SAND_SAMPLE_STEP
    points.append((float(width), height))
    return points


def draw_background(canvas: "Canvas", width: float, height: float, palette: TankPalette) -> None:
    canvas.fill_vertical_gradient(width, height, palette.top, palette.bottom)


def draw_sand(canvas: "Canvas", width: float, height: float, palette: TankPalette) -> None:
    canvas.fill_polygon(sand_outline(width, height), palette.sand)


def place_plants(count: int, tank_width: float, rng: Optional[random.Random] = None) -> list[Plant]:
    """Scatter ``count`` plants across the tank floor."""
    _rng = rng if rng is not None else random.Random()
    return [Plant.random(tank_width, _rng) for _ in range(count)]
