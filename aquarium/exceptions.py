"""Aquarium exception hierarchy.

Centralised base classes so callers can catch narrow failure families
instead of bare ``except Exception`` blocks.
"""


class AquariumError(Exception):
    """Root of all aquarium domain exceptions."""


class SimulationError(AquariumError):
    """Errors during simulation execution (engine, entities)."""


class EntityError(SimulationError):
    """An entity-level failure (construction, lifecycle)."""


class RenderError(AquariumError):
    """A draw call failed on the rendering surface."""


class AudioError(AquariumError):
    """The audio device could not be opened or a sound could not be played."""


class ConfigurationError(AquariumError):
    """Invalid or missing configuration."""
