"""Domain event definitions.

These events represent user-visible occurrences in the tank. They are
data-only (frozen dataclasses) and carry all context handlers need, so
consumers such as the sound board and the HUD never call back into the
simulation.

``name`` is the short notification name external consumers key on; the
two sound cues are ``feed`` and ``splash``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FoodDroppedEvent:
    """The user dropped a food flake.

    Attributes:
        x: Drop x position
        y: Drop y position
        frame: Simulation frame when this occurred
    """

    name: ClassVar[str] = "feed"

    x: float
    y: float
    frame: int


@dataclass(frozen=True)
class FishAddedEvent:
    """The user added a fish (silent startup spawns do not emit this).

    Attributes:
        species_name: Species display name
        x: Spawn x position
        y: Spawn y position
        frame: Simulation frame when this occurred
    """

    name: ClassVar[str] = "splash"

    species_name: str
    x: float
    y: float
    frame: int


@dataclass(frozen=True)
class TankResetEvent:
    """All fish and food were removed."""

    name: ClassVar[str] = "reset"

    fish_removed: int
    food_removed: int
    frame: int


@dataclass(frozen=True)
class DayNightToggledEvent:
    name: ClassVar[str] = "daynight"

    is_day: bool


@dataclass(frozen=True)
class CountersChangedEvent:
    """Fish or food count changed; carries the fresh values for display."""

    name: ClassVar[str] = "counters"

    fish_count: int
    food_count: int
