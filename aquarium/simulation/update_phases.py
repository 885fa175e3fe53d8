"""Update phase definitions for explicit execution ordering.

A frame runs every phase exactly once, in declaration order. The order is
also the back-to-front draw order: everything painted in a later phase
covers what earlier phases painted.

    1. TIME: advance the global clock that drives plant sway
    2. BACKGROUND: water gradient for the current palette
    3. SAND: undulating sand band along the floor
    4. PLANTS: swaying stems
    5. FOOD: cull flagged food, then advance and draw the survivors
    6. FISH: advance every fish against the food set, then draw it
    7. BUBBLES: maybe spawn one, cull flagged bubbles, advance and draw
"""

from enum import Enum

__all__ = ["UpdatePhase"]


class UpdatePhase(Enum):
    """Phases of a simulation tick, in execution order."""

    TIME = "time"
    BACKGROUND = "background"
    SAND = "sand"
    PLANTS = "plants"
    FOOD = "food"
    FISH = "fish"
    BUBBLES = "bubbles"
