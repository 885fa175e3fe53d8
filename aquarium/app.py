"""Pygame window driver for the aquarium.

Owns the display, turns input into engine actions, and calls
``SimulationEngine.tick`` once per display refresh.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from aquarium.audio import SoundBoard
from aquarium.config.display import HUD_FONT_SIZE, WINDOW_CAPTION
from aquarium.config.simulation_config import SimulationConfig
from aquarium.entities.fish import SPECIES
from aquarium.exceptions import RenderError
from aquarium.rendering.pygame_canvas import PygameCanvas
from aquarium.rendering.ui_renderer import UIRenderer
from aquarium.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

SPECIES_KEYS = {pygame.K_1 + i: species for i, species in enumerate(SPECIES)}


class AquariumApp:
    """An interactive aquarium window.

    Attributes:
        engine: The simulation being displayed
        sound_board: Feed/splash sound effects
        screen: Pygame display surface
        clock: Pygame clock for frame pacing
        running: False once the user asked to quit
    """

    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        """Initialize the application (no window is opened yet)."""
        self.config = config or SimulationConfig.production()
        self.engine = SimulationEngine(self.config)
        self.sound_board = SoundBoard(muted=self.config.muted)
        self.screen: Optional[pygame.Surface] = None
        self.canvas: Optional[PygameCanvas] = None
        self.ui_renderer: Optional[UIRenderer] = None
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.running: bool = False

    def setup(self) -> None:
        """Open the window, wire collaborators to the event bus, set up the tank."""
        size = (int(self.engine.width), int(self.engine.height))
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_CAPTION)

        self.canvas = PygameCanvas(self.screen)
        self.ui_renderer = UIRenderer(self.screen, pygame.font.Font(None, HUD_FONT_SIZE))
        self.ui_renderer.attach(self.engine.event_bus)

        self.sound_board.init()
        self.sound_board.attach(self.engine.event_bus)

        self.engine.setup()
        self.running = True

    def handle_events(self) -> bool:
        """Handle user input and window events.

        Returns:
            False when the application should quit
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.engine.drop_food(*event.pos)
            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                elif event.key in SPECIES_KEYS:
                    self.engine.spawn_fish(SPECIES_KEYS[event.key])
                elif event.key == pygame.K_d:
                    self.engine.toggle_day_night()
                elif event.key == pygame.K_m:
                    self.sound_board.toggle_mute()
                elif event.key == pygame.K_r:
                    self.engine.reset()
        return True

    def _resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.canvas.set_surface(self.screen)
        self.ui_renderer.screen = self.screen
        self.engine.resize(width, height)

    def render_frame(self) -> None:
        """Tick the engine onto the window and present it.

        A frame whose drawing fails is dropped; the next frame starts clean.
        """
        try:
            self.engine.tick(self.canvas)
            self.ui_renderer.draw(self.engine.is_day, self.sound_board.muted)
        except (RenderError, pygame.error):
            logger.exception("Frame %d failed to render, skipping", self.engine.frame_count)
            return
        pygame.display.flip()

    def run(self) -> None:
        """Run until the window is closed."""
        self.setup()
        logger.info("Aquarium running at up to %d fps", self.config.display.frame_rate)
        while self.running:
            self.running = self.handle_events()
            if self.running:
                self.render_frame()
                self.clock.tick(self.config.display.frame_rate)

        stats = self.engine.get_summary_stats()
        logger.info(
            "Aquarium closed after %d frames (%d food eaten)", stats["frame"], stats["food_eaten"]
        )


def run_window(config: SimulationConfig) -> None:
    """Entry point for windowed mode."""
    pygame.init()
    try:
        AquariumApp(config).run()
    finally:
        pygame.quit()
