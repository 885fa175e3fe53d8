"""FrameContext - explicit per-frame state for pipeline phases.

A FrameContext is created at the start of each tick, handed to every phase,
and returned to the caller so drivers and tests can see what the frame did
without reaching into the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas
    from aquarium.simulation.scenery import TankPalette


@dataclass
class FrameContext:
    """State handed to every phase of one tick.

    Attributes:
        frame: Frame number (1 for the first tick)
        width: Tank width read at the start of the frame
        height: Tank height read at the start of the frame
        palette: Palette selected by the day/night flag
        canvas: Drawing surface, or None when running headless
        time: Global clock after the TIME phase
        bubble_roll: Random draw compared against the bubble spawn chance
        bubble_spawned: Whether this frame added a bubble
        food_culled: Flagged food removed at the start of the FOOD phase
        food_settled: Food that reached the sand line this frame
        food_eaten: Food captured by fish this frame
        bubbles_culled: Flagged bubbles removed this frame
    """

    frame: int
    width: float
    height: float
    palette: "TankPalette"
    canvas: Optional["Canvas"] = None
    time: float = 0.0
    bubble_roll: float = 1.0
    bubble_spawned: bool = False
    food_culled: int = 0
    food_settled: int = 0
    food_eaten: int = 0
    bubbles_culled: int = 0
    phases_run: list = field(default_factory=list)

    @property
    def rendering(self) -> bool:
        """Whether draw calls should be issued this frame."""
        return self.canvas is not None
