"""Event bus and domain events."""

from aquarium.events.domain_events import (
    CountersChangedEvent,
    DayNightToggledEvent,
    FishAddedEvent,
    FoodDroppedEvent,
    TankResetEvent,
)
from aquarium.events.event_bus import EventBus

__all__ = [
    "CountersChangedEvent",
    "DayNightToggledEvent",
    "EventBus",
    "FishAddedEvent",
    "FoodDroppedEvent",
    "TankResetEvent",
]
