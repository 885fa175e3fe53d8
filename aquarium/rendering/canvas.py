"""Drawing surface abstraction shared by entities and scenery.

Entities never import pygame. They describe what to draw through the small
``Canvas`` protocol below, in tank-pixel coordinates. ``PygameCanvas``
implements it for the window; ``RecordingCanvas`` keeps the calls in memory
for headless runs and tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from aquarium.color import RGB, Color
from aquarium.math_utils import Point


@runtime_checkable
class Canvas(Protocol):
    """Minimal set of primitives the aquarium needs to draw a frame."""

    def fill_vertical_gradient(self, width: float, height: float, top: RGB, bottom: RGB) -> None:
        """Fill the rectangle (0, 0, width, height) blending top to bottom."""
        ...

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None:
        """Fill a closed polygon."""
        ...

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        """Fill a circle."""
        ...

    def stroke_circle(self, center: Point, radius: float, color: Color, width: int = 1) -> None:
        """Outline a circle."""
        ...

    def stroke_curve(self, points: Sequence[Point], color: Color, width: int) -> None:
        """Stroke an open polyline with round caps."""
        ...


@dataclass(frozen=True)
class DrawCall:
    """One recorded draw primitive.

    Attributes:
        kind: Primitive name (the Canvas method that was called)
        args: Positional arguments, with point sequences frozen to tuples
    """

    kind: str
    args: tuple[Any, ...]


class RecordingCanvas:
    """Canvas that stores every call instead of drawing.

    Used by tests and diagnostics that check what a frame draws
    and in which order.
    """

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []

    def _record(self, kind: str, *args: Any) -> None:
        self.calls.append(DrawCall(kind, args))

    def fill_vertical_gradient(self, width: float, height: float, top: RGB, bottom: RGB) -> None:
        self._record("fill_vertical_gradient", width, height, top, bottom)

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None:
        self._record("fill_polygon", tuple(points), color)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self._record("fill_circle", center, radius, color)

    def stroke_circle(self, center: Point, radius: float, color: Color, width: int = 1) -> None:
        self._record("stroke_circle", center, radius, color, width)

    def stroke_curve(self, points: Sequence[Point], color: Color, width: int) -> None:
        self._record("stroke_curve", tuple(points), color, width)

    def kinds(self) -> list[str]:
        """Primitive names in call order."""
        return [call.kind for call in self.calls]

    def clear(self) -> None:
        self.calls.clear()
