"""HUD rendering for the aquarium window.

Draws the fish and food counters, the day/night and sound state, and the
key bindings. Counter values are refreshed from ``CountersChangedEvent``
instead of being polled, so the HUD only changes after a structural change
to the fish or food collections.
"""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from aquarium.config.display import (
    HUD_LINE_HEIGHT,
    HUD_MARGIN,
    HUD_PANEL_ALPHA,
    HUD_PANEL_COLOR,
    HUD_TEXT_COLOR,
)
from aquarium.entities.fish import SPECIES
from aquarium.events.domain_events import CountersChangedEvent
from aquarium.events.event_bus import EventBus


class UIRenderer:
    """Renders the HUD panel onto the window.

    Attributes:
        screen: Pygame surface to render to
        font: Font for HUD text
        fish_count: Last published fish count
        food_count: Last published food count
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        """Initialize the UI renderer.

        Args:
            screen: Pygame surface to render to
            font: Font for HUD text
        """
        self.screen = screen
        self.font = font
        self.fish_count: int = 0
        self.food_count: int = 0

    def attach(self, event_bus: EventBus) -> None:
        event_bus.subscribe(CountersChangedEvent, self.on_counters_changed)

    def on_counters_changed(self, event: CountersChangedEvent) -> None:
        self.fish_count = event.fish_count
        self.food_count = event.food_count

    def status_lines(self, is_day: bool, muted: bool) -> list[str]:
        species_keys = "  ".join(f"{i}:{s.name}" for i, s in enumerate(SPECIES, start=1))
        return [
            f"Fish: {self.fish_count}   Food: {self.food_count}",
            f"{'Day' if is_day else 'Night'}   Sound: {'off' if muted else 'on'}",
            "Click: feed   " + species_keys,
            "D: day/night   M: mute   R: reset   Esc: quit",
        ]

    def draw(self, is_day: bool, muted: bool) -> None:
        lines = self.status_lines(is_day, muted)
        self._draw_panel(lines)

    def _draw_panel(self, lines: Sequence[str]) -> None:
        rendered = [self.font.render(line, True, HUD_TEXT_COLOR) for line in lines]
        width = max(surface.get_width() for surface in rendered) + 2 * HUD_MARGIN
        height = len(rendered) * HUD_LINE_HEIGHT + HUD_MARGIN

        panel = pygame.Surface((width, height))
        panel.set_alpha(HUD_PANEL_ALPHA)
        panel.fill(HUD_PANEL_COLOR)
        self.screen.blit(panel, (HUD_MARGIN, HUD_MARGIN))

        y_offset = HUD_MARGIN + HUD_MARGIN // 2
        for surface in rendered:
            self.screen.blit(surface, (2 * HUD_MARGIN, y_offset))
            y_offset += HUD_LINE_HEIGHT
