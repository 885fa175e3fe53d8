"""Configuration package.

Constants are grouped by concern in the sibling modules; the dataclasses in
``simulation_config`` aggregate the values a run can override.
"""

from aquarium.config.simulation_config import DisplayConfig, SimulationConfig, TankConfig

__all__ = ["DisplayConfig", "SimulationConfig", "TankConfig"]
