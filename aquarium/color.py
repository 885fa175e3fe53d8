"""Color conversion utilities.

This module provides the color conversions used throughout the simulation.
Palette constants are written as CSS-style hex strings in the config modules
and converted once to pygame-friendly tuples here.

Design Note:
    These are pure functions with no simulation dependencies.
    They can be tested in isolation and used by any module.
"""

from typing import Union

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]
Color = Union[RGB, RGBA]


def hex_to_rgb(value: str) -> RGB:
    """Convert a ``#RRGGBB`` (or ``#RGB``) hex string to an RGB tuple.

    Args:
        value: Hex color string, with or without the leading ``#``

    Returns:
        Tuple of (R, G, B) values, each 0-255

    Example:
        >>> hex_to_rgb("#FFD700")
        (255, 215, 0)
    """
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Not a hex color: {value!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def with_alpha(color: RGB, alpha: float) -> RGBA:
    """Attach an opacity (0.0-1.0) to an RGB color."""
    return (color[0], color[1], color[2], max(0, min(255, round(alpha * 255))))


def lerp_color(start: RGB, end: RGB, t: float) -> RGB:
    """Linear interpolation between two RGB colors, ``t`` clamped to [0, 1]."""
    t = max(0.0, min(1.0, t))
    return (
        round(start[0] + (end[0] - start[0]) * t),
        round(start[1] + (end[1] - start[1]) * t),
        round(start[2] + (end[2] - start[2]) * t),
    )
