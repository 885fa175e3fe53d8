"""Simulation engine - owns the tank state and runs one frame per tick.

The engine is driven from outside: a window loop, the headless runner or a
test calls ``tick()`` once per display refresh. Each tick runs the phases in
``UpdatePhase`` order to completion. External actions (spawn fish, drop
food, reset, day/night, resize) are plain method calls made between ticks on
the same thread, so no locking is needed.

Design Decisions:
-----------------
1. All mutable tank state (fish, food, bubbles, plants, clock, day/night
   flag, viewport) lives on the engine instead of module globals.

2. Entities flag themselves for deletion. The engine culls flagged food and
   bubbles at the start of their phase, so food eaten mid-frame is still
   drawn that frame and gone the next.

3. Rendering is optional. With no canvas the same phases run and only the
   draw calls are skipped, which keeps headless and windowed runs
   behaviorally identical for a given seed.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional, Union

from aquarium.config.simulation_config import SimulationConfig
from aquarium.entities.bubble import Bubble
from aquarium.entities.fish import Fish, FishSpecies, get_species
from aquarium.entities.food import Food
from aquarium.entities.plant import Plant
from aquarium.events.domain_events import (
    CountersChangedEvent,
    DayNightToggledEvent,
    FishAddedEvent,
    FoodDroppedEvent,
    TankResetEvent,
)
from aquarium.events.event_bus import EventBus
from aquarium.exceptions import SimulationError
from aquarium.simulation import scenery
from aquarium.simulation.frame_context import FrameContext
from aquarium.simulation.scenery import TankPalette
from aquarium.simulation.update_phases import UpdatePhase

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas

logger = logging.getLogger(__name__)


class SimulationEngine:
    """The aquarium simulation: entity collections plus the frame pipeline.

    Attributes:
        config: Simulation configuration
        event_bus: Bus the engine publishes domain events on
        rng: Shared random number generator
        width: Current tank width
        height: Current tank height
        time: Global clock driving plant sway
        frame_count: Total frames ticked
        is_day: Day/night flag selecting the palette
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """Initialize the simulation engine.

        Args:
            config: Aggregate simulation configuration
            rng: Shared random number generator for deterministic runs
            seed: Optional seed (used if rng is not provided; falls back to config.seed)
            event_bus: Bus for domain events (a private one is created if omitted)
        """
        self.config = config or SimulationConfig.production()
        self.config.validate()

        if seed is None:
            seed = self.config.seed
        if rng is not None:
            self.rng: random.Random = rng
            self.seed: Optional[int] = None
        else:
            self.rng = random.Random(seed)
            self.seed = seed

        self.event_bus: EventBus = event_bus if event_bus is not None else EventBus()

        self.width: float = float(self.config.display.screen_width)
        self.height: float = float(self.config.display.screen_height)
        self.time: float = 0.0
        self.frame_count: int = 0
        self.is_day: bool = self.config.start_in_day

        self._fish: list[Fish] = []
        self._foods: list[Food] = []
        self._bubbles: list[Bubble] = []
        self._plants: list[Plant] = []

        self.food_eaten_total: int = 0
        self.food_settled_total: int = 0
        self.bubbles_spawned_total: int = 0
        self._published_counters: tuple[int, int] = (0, 0)

        self._phase_handlers: dict[UpdatePhase, Callable[[FrameContext], None]] = {
            UpdatePhase.TIME: self._advance_time,
            UpdatePhase.BACKGROUND: self._paint_background,
            UpdatePhase.SAND: self._paint_sand,
            UpdatePhase.PLANTS: self._draw_plants,
            UpdatePhase.FOOD: self._update_food,
            UpdatePhase.FISH: self._update_fish,
            UpdatePhase.BUBBLES: self._update_bubbles,
        }

        logger.info(
            "SimulationEngine initialized (%dx%d, seed=%s)", self.width, self.height, self.seed
        )

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def setup(self) -> None:
        """Place the fixed plant set and add the startup fish silently."""
        self._plants = scenery.place_plants(self.config.tank.plant_count, self.width, self.rng)
        for name in self.config.tank.initial_species:
            self.spawn_fish(name, silent=True)
        logger.info(
            "Tank set up with %d plants and %d fish", len(self._plants), len(self._fish)
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def fish(self) -> tuple[Fish, ...]:
        return tuple(self._fish)

    @property
    def foods(self) -> tuple[Food, ...]:
        return tuple(self._foods)

    @property
    def bubbles(self) -> tuple[Bubble, ...]:
        return tuple(self._bubbles)

    @property
    def plants(self) -> tuple[Plant, ...]:
        return tuple(self._plants)

    @property
    def fish_count(self) -> int:
        return len(self._fish)

    @property
    def food_count(self) -> int:
        return len(self._foods)

    @property
    def palette(self) -> TankPalette:
        return scenery.palette_for(self.is_day)

    # ------------------------------------------------------------------
    # External actions
    # ------------------------------------------------------------------

    def spawn_fish(self, species: Union[FishSpecies, str], *, silent: bool = False) -> Fish:
        """Add a fish of ``species`` at a random in-bounds position.

        Args:
            species: Species descriptor or species name
            silent: Skip the ``splash`` notification (startup spawns)

        Returns:
            The new fish
        """
        if isinstance(species, str):
            species = get_species(species)
        fish = Fish.spawn(
            species,
            self.width,
            self.height,
            rng=self.rng,
            wander_chance=self.config.tank.wander_chance,
        )
        self._fish.append(fish)
        logger.debug("Spawned %s at (%.1f, %.1f)", species.name, fish.x, fish.y)
        if not silent:
            self.event_bus.emit(FishAddedEvent(species.name, fish.x, fish.y, self.frame_count))
        self._publish_counters()
        return fish

    def drop_food(self, x: float, y: float) -> Food:
        """Add a food flake at (x, y) and emit the ``feed`` notification."""
        food = Food(x, y, rng=self.rng)
        self._foods.append(food)
        logger.debug("Dropped food at (%.1f, %.1f)", x, y)
        self.event_bus.emit(FoodDroppedEvent(x, y, self.frame_count))
        self._publish_counters()
        return food

    def reset(self) -> None:
        """Remove every fish and food. Bubbles and plants are untouched."""
        fish_removed = len(self._fish)
        food_removed = len(self._foods)
        self._fish.clear()
        self._foods.clear()
        logger.info("Tank reset (%d fish, %d food removed)", fish_removed, food_removed)
        self.event_bus.emit(TankResetEvent(fish_removed, food_removed, self.frame_count))
        self._publish_counters(force=True)

    def set_day(self, is_day: bool) -> None:
        if is_day == self.is_day:
            return
        self.is_day = is_day
        logger.info("Switched to %s", "day" if is_day else "night")
        self.event_bus.emit(DayNightToggledEvent(is_day))

    def toggle_day_night(self) -> bool:
        """Flip the day/night flag and return the new value."""
        self.set_day(not self.is_day)
        return self.is_day

    def resize(self, width: float, height: float) -> None:
        """Change the viewport. Takes effect from the next tick."""
        if width <= 0 or height <= 0:
            raise SimulationError(f"Tank dimensions must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        logger.debug("Tank resized to %dx%d", width, height)

    # ------------------------------------------------------------------
    # Frame pipeline
    # ------------------------------------------------------------------

    def tick(self, canvas: Optional["Canvas"] = None) -> FrameContext:
        """Advance and draw one frame.

        Args:
            canvas: Surface to draw on; None runs the frame headless

        Returns:
            The frame's context, describing what happened
        """
        self.frame_count += 1
        ctx = FrameContext(
            frame=self.frame_count,
            width=self.width,
            height=self.height,
            palette=self.palette,
            canvas=canvas,
        )
        for phase in UpdatePhase:
            self._phase_handlers[phase](ctx)
            ctx.phases_run.append(phase)

        self.food_eaten_total += ctx.food_eaten
        self.food_settled_total += ctx.food_settled
        self._publish_counters()
        return ctx

    def _advance_time(self, ctx: FrameContext) -> None:
        self.time += self.config.tank.time_step
        ctx.time = self.time

    def _paint_background(self, ctx: FrameContext) -> None:
        if ctx.rendering:
            scenery.draw_background(ctx.canvas, ctx.width, ctx.height, ctx.palette)

    def _paint_sand(self, ctx: FrameContext) -> None:
        if ctx.rendering:
            scenery.draw_sand(ctx.canvas, ctx.width, ctx.height, ctx.palette)

    def _draw_plants(self, ctx: FrameContext) -> None:
        if not ctx.rendering:
            return
        for plant in self._plants:
            plant.render(ctx.canvas, ctx.height, ctx.time)

    def _update_food(self, ctx: FrameContext) -> None:
        before = len(self._foods)
        self._foods = [food for food in self._foods if not food.marked_for_deletion]
        ctx.food_culled = before - len(self._foods)

        for food in self._foods:
            food.advance(ctx.height)
            if food.marked_for_deletion:
                ctx.food_settled += 1
            if ctx.rendering:
                food.render(ctx.canvas)

    def _update_fish(self, ctx: FrameContext) -> None:
        for fish in self._fish:
            if fish.advance(ctx.width, ctx.height, self._foods) is not None:
                ctx.food_eaten += 1
            if ctx.rendering:
                fish.render(ctx.canvas)

    def _update_bubbles(self, ctx: FrameContext) -> None:
        ctx.bubble_roll = self.rng.random()
        if ctx.bubble_roll < self.config.tank.bubble_spawn_chance:
            self._bubbles.append(Bubble(self.rng.random() * ctx.width, ctx.height, rng=self.rng))
            ctx.bubble_spawned = True
            self.bubbles_spawned_total += 1

        before = len(self._bubbles)
        self._bubbles = [bubble for bubble in self._bubbles if not bubble.marked_for_deletion]
        ctx.bubbles_culled = before - len(self._bubbles)

        for bubble in self._bubbles:
            bubble.advance()
            if ctx.rendering:
                bubble.render(ctx.canvas)

    def _publish_counters(self, force: bool = False) -> None:
        counters = (len(self._fish), len(self._foods))
        if force or counters != self._published_counters:
            self._published_counters = counters
            self.event_bus.emit(CountersChangedEvent(*counters))

    # ------------------------------------------------------------------
    # Reporting and headless running
    # ------------------------------------------------------------------

    def get_summary_stats(self) -> dict[str, Any]:
        species = Counter(fish.species.name for fish in self._fish)
        return {
            "frame": self.frame_count,
            "fish_count": self.fish_count,
            "food_count": self.food_count,
            "bubble_count": len(self._bubbles),
            "plant_count": len(self._plants),
            "food_eaten": self.food_eaten_total,
            "food_settled": self.food_settled_total,
            "bubbles_spawned": self.bubbles_spawned_total,
            "species": dict(species),
            "is_day": self.is_day,
        }

    def run_headless(self, max_frames: int, stats_interval: int = 600) -> dict[str, Any]:
        """Tick ``max_frames`` times without rendering, logging periodic stats.

        Returns:
            Summary stats after the last frame
        """
        logger.info("Running %d headless frames", max_frames)
        for _ in range(max_frames):
            self.tick()
            if stats_interval > 0 and self.frame_count % stats_interval == 0:
                stats = self.get_summary_stats()
                logger.info(
                    "Frame %d: %d fish, %d food, %d bubbles, %d eaten",
                    stats["frame"],
                    stats["fish_count"],
                    stats["food_count"],
                    stats["bubble_count"],
                    stats["food_eaten"],
                )
        return self.get_summary_stats()
