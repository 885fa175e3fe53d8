"""Rendering package.

``canvas`` is pygame-free and safe to import anywhere. ``pygame_canvas`` and
``ui_renderer`` import pygame and are only needed by the window driver.
"""

from aquarium.rendering.canvas import Canvas, DrawCall, RecordingCanvas

__all__ = ["Canvas", "DrawCall", "RecordingCanvas"]
