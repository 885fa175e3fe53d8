"""Geometry helpers shared by steering and shape drawing.

Positions and velocities are mutable ``Vector2`` values owned by their
entity; everything that only describes a shape uses plain ``(x, y)``
tuples so it can go straight to a canvas.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

Point = tuple[float, float]

TWO_PI = math.pi * 2


class Vector2:
    """Mutable 2D position or per-frame velocity in tank pixels."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance_to(self, other: "Vector2") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def angle_to(self, other: "Vector2") -> float:
        """Bearing from this point toward ``other`` in radians."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def update(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def as_tuple(self) -> Point:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        # Positions are accumulated from float steps; compare with a tolerance.
        if not isinstance(other, Vector2):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=1e-9) and math.isclose(
            self.y, other.y, abs_tol=1e-9
        )

    def __repr__(self) -> str:
        return f"Vector2({self.x:g}, {self.y:g})"


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the half-open interval (-pi, pi].

    Uses repeated full-turn adjustment, so the result is exact for the small
    differences produced by steering and never drifts.

    Args:
        angle: Angle in radians (any magnitude)

    Returns:
        Equivalent angle in (-pi, pi]
    """
    while angle <= -math.pi:
        angle += TWO_PI
    while angle > math.pi:
        angle -= TWO_PI
    return angle


def rotate_point(point: Point, angle: float) -> Point:
    """Rotate ``point`` about the origin by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    x, y = point
    return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)


def quadratic_bezier(start: Point, control: Point, end: Point, segments: int = 12) -> list[Point]:
    """Sample a quadratic Bezier curve into ``segments + 1`` points.

    Args:
        start: Curve start point
        control: Control point
        end: Curve end point
        segments: Number of straight segments to approximate the curve with

    Returns:
        Points along the curve, including both endpoints
    """
    points = []
    for i in range(segments + 1):
        t = i / segments
        inv = 1.0 - t
        x = inv * inv * start[0] + 2 * inv * t * control[0] + t * t * end[0]
        y = inv * inv * start[1] + 2 * inv * t * control[1] + t * t * end[1]
        points.append((x, y))
    return points


def ellipse_points(rx: float, ry: float, segments: int = 24) -> list[Point]:
    """Outline of an axis-aligned ellipse centred on the origin."""
    return [
        (rx * math.cos(TWO_PI * i / segments), ry * math.sin(TWO_PI * i / segments))
        for i in range(segments)
    ]


__all__ = [
    "Point",
    "TWO_PI",
    "Vector2",
    "ellipse_points",
    "normalize_angle",
    "quadratic_bezier",
    "rotate_point",
]
