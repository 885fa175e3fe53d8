"""Entity package exposing the simulated objects."""

from aquarium.entities.base import Entity
from aquarium.entities.bubble import Bubble
from aquarium.entities.fish import SPECIES, Fish, FishSpecies, FishState, get_species
from aquarium.entities.food import Food
from aquarium.entities.plant import Plant

__all__ = [
    "SPECIES",
    "Bubble",
    "Entity",
    "Fish",
    "FishSpecies",
    "FishState",
    "Food",
    "Plant",
    "get_species",
]
