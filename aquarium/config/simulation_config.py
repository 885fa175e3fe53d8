"""Lightweight simulation configuration helpers."""

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from aquarium.config.bubbles import BUBBLE_SPAWN_CHANCE
from aquarium.config.display import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH
from aquarium.config.fish import FISH_TYPES, INITIAL_SPECIES, WANDER_CHANCE
from aquarium.config.plants import PLANT_COUNT
from aquarium.config.tank import TIME_STEP
from aquarium.exceptions import ConfigurationError


@dataclass
class DisplayConfig:
    """Window and frame pacing configuration."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    frame_rate: int = FRAME_RATE


@dataclass
class TankConfig:
    """Tank population and ambient-effect configuration."""

    plant_count: int = PLANT_COUNT
    initial_species: tuple[str, ...] = INITIAL_SPECIES
    bubble_spawn_chance: float = BUBBLE_SPAWN_CHANCE
    wander_chance: float = WANDER_CHANCE
    time_step: float = TIME_STEP


@dataclass
class SimulationConfig:
    """Configuration toggles for simulation runtime behavior.

    Attributes:
        headless: Whether to run without a window (no rendering).
        seed: Optional seed for the shared random number generator.
        start_in_day: Initial value of the day/night flag.
        muted: Start with sound effects muted.
    """

    headless: bool = False
    seed: Optional[int] = None
    start_in_day: bool = True
    muted: bool = False
    display: DisplayConfig = field(default_factory=DisplayConfig)
    tank: TankConfig = field(default_factory=TankConfig)

    @classmethod
    def production(cls, **overrides: Any) -> "SimulationConfig":
        """Build the default configuration, optionally with top-level overrides."""
        config = cls(**overrides)
        config.validate()
        return config

    def with_overrides(self, **changes: Any) -> "SimulationConfig":
        """Return a validated copy with top-level fields replaced."""
        config = replace(self, **changes)
        config.validate()
        return config

    def validate(self) -> None:
        """Check the configuration for impossible values.

        Raises:
            ConfigurationError: If any value is out of range or a species is unknown
        """
        if self.display.screen_width <= 0 or self.display.screen_height <= 0:
            raise ConfigurationError(
                f"Screen dimensions must be positive, got "
                f"{self.display.screen_width}x{self.display.screen_height}"
            )
        if self.display.frame_rate <= 0:
            raise ConfigurationError(f"frame_rate must be positive, got {self.display.frame_rate}")
        if self.tank.plant_count < 0:
            raise ConfigurationError(f"plant_count cannot be negative, got {self.tank.plant_count}")
        for name, chance in (
            ("bubble_spawn_chance", self.tank.bubble_spawn_chance),
            ("wander_chance", self.tank.wander_chance),
        ):
            if not 0.0 <= chance <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {chance}")
        known = {entry["name"] for entry in FISH_TYPES}
        unknown = [name for name in self.tank.initial_species if name not in known]
        if unknown:
            raise ConfigurationError(f"Unknown initial species: {', '.join(unknown)}")
