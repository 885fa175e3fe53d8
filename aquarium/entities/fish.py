"""Fish entity: perception, IDLE/CHASING state machine, smooth steering.

Each frame a fish looks for the nearest live food inside its perception
radius. If it finds one it chases (faster, turning toward the food) and eats
the food once inside the capture radius. Otherwise it idles: it steers away
from walls it is too close to, occasionally picks a new wandering heading,
and otherwise keeps swimming straight.

Heading changes are never instantaneous. The heading closes a fixed fraction
(the species' turn rate) of the remaining angular gap every frame.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from aquarium.color import RGB, hex_to_rgb
from aquarium.config.fish import (
    CAPTURE_RADIUS,
    CHASE_SPEED_MULTIPLIER,
    FIN_PHASE_STEP,
    FISH_TYPES,
    PERCEPTION_RADIUS,
    SPAWN_VERTICAL_MARGIN,
    TAIL_HALF_WIDTH,
    TAIL_LENGTH,
    TAIL_PHASE_RATE,
    TAIL_WIGGLE_AMPLITUDE,
    WALL_MARGIN,
    WANDER_ANGLE_RANGE,
    WANDER_CHANCE,
)
from aquarium.config.tank import SAND_LINE_OFFSET
from aquarium.entities.base import Entity
from aquarium.entities.food import Food
from aquarium.exceptions import ConfigurationError
from aquarium.math_utils import TWO_PI, Point, ellipse_points, normalize_angle, rotate_point

if TYPE_CHECKING:
    from aquarium.rendering.canvas import Canvas

logger = logging.getLogger(__name__)

EYE_WHITE: RGB = (255, 255, 255)
EYE_PUPIL: RGB = (0, 0, 0)


class FishState(Enum):
    """Behavioral state of a fish."""

    IDLE = "idle"
    CHASING = "chasing"


@dataclass(frozen=True)
class FishSpecies:
    """Immutable species descriptor.

    Attributes:
        name: Display name
        color: Body color
        fin_color: Tail and fin color
        speed: Base cruising speed in pixels per frame
        size: Body half-length in pixels
        turn_speed: Fraction of the heading gap closed per frame
        tall: Tall (disc-shaped) body instead of a slender one
    """

    name: str
    color: RGB
    fin_color: RGB
    speed: float
    size: float
    turn_speed: float
    tall: bool = False

    @classmethod
    def from_config(cls, entry: dict) -> "FishSpecies":
        return cls(
            name=entry["name"],
            color=hex_to_rgb(entry["color"]),
            fin_color=hex_to_rgb(entry["fin_color"]),
            speed=float(entry["speed"]),
            size=float(entry["size"]),
            turn_speed=float(entry["turn_speed"]),
            tall=bool(entry.get("tall", False)),
        )


SPECIES: tuple[FishSpecies, ...] = tuple(FishSpecies.from_config(entry) for entry in FISH_TYPES)


def get_species(name: str) -> FishSpecies:
    """Look up a species by display name (case-insensitive).

    Raises:
        ConfigurationError: If no species has that name
    """
    wanted = name.strip().lower()
    for species in SPECIES:
        if species.name.lower() == wanted:
            return species
    raise ConfigurationError(f"Unknown fish species: {name!r}")


class Fish(Entity):
    """A steering fish (pure logic plus a draw routine).

    Attributes:
        species: Immutable species descriptor
        angle: Current heading in radians, kept within (-pi, pi]
        desired_angle: Heading the fish steered toward on its last advance
        speed: Current linear speed
        tail_phase: Tail wiggle phase accumulator
        fin_phase: Fin flutter phase accumulator
        state: IDLE or CHASING
        target: Food being pursued (non-owning); set iff state is CHASING
    """

    def __init__(
        self,
        species: FishSpecies,
        x: float,
        y: float,
        angle: float = 0.0,
        rng: Optional[random.Random] = None,
        wander_chance: float = WANDER_CHANCE,
    ) -> None:
        """Initialize a fish.

        Args:
            species: Species descriptor
            x: Initial x position
            y: Initial y position
            angle: Initial heading in radians
            rng: Random number generator for wandering decisions
            wander_chance: Per-frame probability of picking a new idle heading
        """
        super().__init__(x, y)
        self.species: FishSpecies = species
        self.angle: float = normalize_angle(angle)
        self.desired_angle: float = self.angle
        self.speed: float = species.speed
        self.tail_phase: float = 0.0
        self.fin_phase: float = 0.0
        self.state: FishState = FishState.IDLE
        self.target: Optional[Food] = None
        self._rng: random.Random = rng if rng is not None else random.Random()
        self._wander_chance = wander_chance

    @classmethod
    def spawn(
        cls,
        species: FishSpecies,
        tank_width: float,
        tank_height: float,
        rng: Optional[random.Random] = None,
        **kwargs,
    ) -> "Fish":
        """Create a fish at a random in-bounds position with a random heading."""
        _rng = rng if rng is not None else random.Random()
        x = _rng.random() * tank_width
        y = _rng.random() * (tank_height - 2 * SPAWN_VERTICAL_MARGIN) + SPAWN_VERTICAL_MARGIN
        angle = _rng.random() * TWO_PI
        return cls(species, x, y, angle=angle, rng=_rng, **kwargs)

    @property
    def base_speed(self) -> float:
        return self.species.speed

    @property
    def size(self) -> float:
        return self.species.size

    @property
    def facing_left(self) -> bool:
        return abs(self.angle) > math.pi / 2

    # ------------------------------------------------------------------
    # Perception and steering
    # ------------------------------------------------------------------

    def find_nearest_food(self, foods: Iterable[Food]) -> tuple[Optional[Food], float]:
        """Nearest live food strictly inside the perception radius.

        The first food at the minimum distance wins; a later food replaces
        the current pick only when strictly closer.

        Returns:
            (food, distance), or (None, inf) when nothing is in range
        """
        nearest: Optional[Food] = None
        min_dist = math.inf
        for food in foods:
            if food.marked_for_deletion:
                continue
            dist = self.pos.distance_to(food.pos)
            if dist < PERCEPTION_RADIUS and dist < min_dist:
                min_dist = dist
                nearest = food
        return nearest, min_dist

    def wall_avoidance_heading(self, tank_width: float, tank_height: float) -> Optional[float]:
        """Heading pointing away from any wall the fish is too close to.

        The floor margin also reserves the sand band. When only one axis
        needs correcting, the other axis keeps the matching component of the
        current heading instead of zero.

        Returns:
            The avoidance heading, or None when the fish is clear of all walls
        """
        avoid_x = 0
        avoid_y = 0
        if self.pos.x <= WALL_MARGIN:
            avoid_x = 1
        if self.pos.x >= tank_width - WALL_MARGIN:
            avoid_x = -1
        if self.pos.y <= WALL_MARGIN:
            avoid_y = 1
        if self.pos.y >= tank_height - WALL_MARGIN - SAND_LINE_OFFSET:
            avoid_y = -1

        if avoid_x == 0 and avoid_y == 0:
            return None
        return math.atan2(avoid_y or math.sin(self.angle), avoid_x or math.cos(self.angle))

    def _idle_heading(self, tank_width: float, tank_height: float) -> float:
        avoidance = self.wall_avoidance_heading(tank_width, tank_height)
        if avoidance is not None:
            return avoidance
        if self._rng.random() < self._wander_chance:
            return self.angle + (self._rng.random() - 0.5) * 2 * WANDER_ANGLE_RANGE
        return self.angle

    def turn_toward(self, desired_angle: float) -> None:
        """Close ``turn_speed`` of the normalized gap to ``desired_angle``."""
        diff = normalize_angle(desired_angle - self.angle)
        self.angle = normalize_angle(self.angle + diff * self.species.turn_speed)

    def advance(self, tank_width: float, tank_height: float, foods: Iterable[Food]) -> Optional[Food]:
        """Run one frame of perception, steering, motion and animation.

        Args:
            tank_width: Current tank width
            tank_height: Current tank height
            foods: The food collection as seen at the start of this update

        Returns:
            The food eaten this frame, if any
        """
        target, distance = self.find_nearest_food(foods)
        eaten: Optional[Food] = None

        if target is not None:
            self.state = FishState.CHASING
            self.target = target
            desired = self.pos.angle_to(target.pos)
            self.speed = self.base_speed * CHASE_SPEED_MULTIPLIER
            if distance < CAPTURE_RADIUS:
                target.mark_for_deletion()
                eaten = target
                self.state = FishState.IDLE
                self.target = None
                logger.debug("%s ate food at (%.1f, %.1f)", self.species.name, target.x, target.y)
        else:
            self.state = FishState.IDLE
            self.target = None
            self.speed = self.base_speed
            desired = self._idle_heading(tank_width, tank_height)

        self.desired_angle = desired
        self.turn_toward(desired)

        self.pos.x += math.cos(self.angle) * self.speed
        self.pos.y += math.sin(self.angle) * self.speed

        self.tail_phase += TAIL_PHASE_RATE * self.speed
        self.fin_phase += FIN_PHASE_STEP
        return eaten

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_tank(self, point: Point) -> Point:
        """Map a body-local point (x toward the head, -y dorsal) into the tank.

        Left-facing fish are mirrored across their own spine before rotating,
        so the head always leads and the dorsal side stays up.
        """
        x, y = point
        if self.facing_left:
            y = -y
        rx, ry = rotate_point((x, y), self.angle)
        return (self.pos.x + rx, self.pos.y + ry)

    def body_outline(self) -> list[Point]:
        s = self.size
        ry = s * 1.2 if self.species.tall else s * 0.6
        return [self.to_tank(p) for p in ellipse_points(s, ry)]

    def tail_outline(self) -> list[Point]:
        s = self.size
        wiggle = math.sin(self.tail_phase) * TAIL_WIGGLE_AMPLITUDE
        local = [
            (-s, 0.0),
            (-s - TAIL_LENGTH, -TAIL_HALF_WIDTH + wiggle),
            (-s - TAIL_LENGTH, TAIL_HALF_WIDTH + wiggle),
        ]
        return [self.to_tank(p) for p in local]

    def fin_outlines(self) -> list[list[Point]]:
        s = self.size
        if self.species.tall:
            fins = [
                [(0.0, -s / 2), (-5.0, -s * 1.8), (5.0, -s / 2)],
                [(0.0, s / 2), (-5.0, s * 1.8), (5.0, s / 2)],
            ]
        else:
            fins = [[(0.0, 0.0), (-5.0, -8.0), (5.0, 0.0)]]
        return [[self.to_tank(p) for p in fin] for fin in fins]

    def render(self, canvas: "Canvas") -> None:
        s = self.size
        canvas.fill_polygon(self.body_outline(), self.species.color)
        canvas.fill_polygon(self.tail_outline(), self.species.fin_color)
        for fin in self.fin_outlines():
            canvas.fill_polygon(fin, self.species.fin_color)
        canvas.fill_circle(self.to_tank((s * 0.5, -s * 0.2)), s * 0.2, EYE_WHITE)
        canvas.fill_circle(self.to_tank((s * 0.5 + 1, -s * 0.2)), s * 0.08, EYE_PUPIL)

    def __repr__(self) -> str:
        return (
            f"Fish({self.species.name!r}, x={self.pos.x:.1f}, y={self.pos.y:.1f}, "
            f"angle={self.angle:.2f}, state={self.state.name})"
        )
