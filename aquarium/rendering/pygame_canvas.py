"""Pygame implementation of the Canvas protocol.

Draws onto any ``pygame.Surface``. Opaque colors go straight to the target
surface; RGBA colors are drawn onto a small per-shape ``SRCALPHA`` surface
and blitted, since ``pygame.draw`` does not blend on its own.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Optional

import pygame

from aquarium.color import RGB, Color, lerp_color
from aquarium.exceptions import RenderError
from aquarium.math_utils import Point

logger = logging.getLogger(__name__)


class PygameCanvas:
    """Canvas that draws with ``pygame.draw`` onto a surface.

    Attributes:
        surface: Target surface (usually the display surface)
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._gradient_key: Optional[tuple] = None
        self._gradient: Optional[pygame.Surface] = None

    def set_surface(self, surface: pygame.Surface) -> None:
        """Retarget after the display surface was recreated (window resize)."""
        self.surface = surface
        self._gradient_key = None
        self._gradient = None

    def fill_vertical_gradient(self, width: float, height: float, top: RGB, bottom: RGB) -> None:
        w, h = max(1, int(width)), max(1, int(height))
        key = (w, h, top, bottom)
        if key != self._gradient_key:
            self._gradient = self._build_gradient(w, h, top, bottom)
            self._gradient_key = key
        try:
            self.surface.blit(self._gradient, (0, 0))
        except pygame.error as e:
            raise RenderError(f"Could not paint background: {e}") from e

    @staticmethod
    def _build_gradient(width: int, height: int, top: RGB, bottom: RGB) -> pygame.Surface:
        gradient = pygame.Surface((width, height))
        span = max(1, height - 1)
        for row in range(height):
            pygame.draw.line(gradient, lerp_color(top, bottom, row / span), (0, row), (width, row))
        return gradient

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None:
        if len(points) < 3:
            return
        self._draw(color, points, 0, lambda surf, c, offset: pygame.draw.polygon(
            surf, c, [(x - offset[0], y - offset[1]) for x, y in points]
        ))

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self._draw_circle(center, radius, color, 0)

    def stroke_circle(self, center: Point, radius: float, color: Color, width: int = 1) -> None:
        self._draw_circle(center, radius, color, width)

    def stroke_curve(self, points: Sequence[Point], color: Color, width: int) -> None:
        if len(points) < 2:
            return
        cap = width / 2

        def draw(surf, c, offset):
            shifted = [(x - offset[0], y - offset[1]) for x, y in points]
            pygame.draw.lines(surf, c, False, shifted, width)
            for point in shifted:
                pygame.draw.circle(surf, c, point, cap)

        self._draw(color, points, math.ceil(cap), draw)

    def _draw_circle(self, center: Point, radius: float, color: Color, width: int) -> None:
        if radius <= 0:
            return
        cx, cy = center
        bounds = [(cx - radius, cy - radius), (cx + radius, cy + radius)]
        self._draw(color, bounds, 1, lambda surf, c, offset: pygame.draw.circle(
            surf, c, (cx - offset[0], cy - offset[1]), radius, width
        ))

    def _draw(self, color: Color, points: Sequence[Point], pad: int, draw) -> None:
        try:
            if len(color) == 3 or color[3] >= 255:
                draw(self.surface, color[:3], (0, 0))
                return
            left = math.floor(min(x for x, _ in points)) - pad
            top = math.floor(min(y for _, y in points)) - pad
            right = math.ceil(max(x for x, _ in points)) + pad
            bottom = math.ceil(max(y for _, y in points)) + pad
            layer = pygame.Surface((max(1, right - left + 1), max(1, bottom - top + 1)), pygame.SRCALPHA)
            draw(layer, color, (left, top))
            self.surface.blit(layer, (left, top))
        except pygame.error as e:
            raise RenderError(f"Draw call failed: {e}") from e
