"""Pytest configuration and fixtures for aquarium tests."""

import random

import pytest

from aquarium.config.simulation_config import SimulationConfig, TankConfig


class ScriptedRandom:
    """Stand-in RNG whose random() replays a fixed sequence, then repeats the last value."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    """Factory for RNGs that replay a fixed sequence of random() values."""
    return ScriptedRandom


@pytest.fixture
def simulation_engine():
    """A headless engine with plants and the startup fish, deterministic seed."""
    from aquarium.simulation.engine import SimulationEngine

    engine = SimulationEngine(SimulationConfig(headless=True), seed=42)
    engine.setup()
    return engine


@pytest.fixture
def empty_engine():
    """A headless 800x600 engine with no plants and no startup fish."""
    from aquarium.simulation.engine import SimulationEngine

    config = SimulationConfig(headless=True, tank=TankConfig(plant_count=0, initial_species=()))
    engine = SimulationEngine(config, seed=7)
    engine.setup()
    return engine


@pytest.fixture
def goldfish():
    from aquarium.entities.fish import get_species

    return get_species("Goldfish")
