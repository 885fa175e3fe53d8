"""Simulation engine and frame pipeline."""

from aquarium.simulation.engine import SimulationEngine
from aquarium.simulation.frame_context import FrameContext
from aquarium.simulation.update_phases import UpdatePhase

__all__ = ["FrameContext", "SimulationEngine", "UpdatePhase"]
