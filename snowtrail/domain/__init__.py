"""Domain layer: grid model, traversal, triggers, particles, trail, and scenery."""

from snowtrail.domain.decorations import Decoration, DecorationKind, place_decorations
from snowtrail.domain.grid import ActivityGrid
from snowtrail.domain.particles import Particle, advance_particles, spawn_burst
from snowtrail.domain.path import Cell, generate_path
from snowtrail.domain.trail import Trail
from snowtrail.domain.triggers import Trigger, TriggerRegistry

__all__ = [
    "ActivityGrid",
    "Cell",
    "Decoration",
    "DecorationKind",
    "Particle",
    "Trail",
    "Trigger",
    "TriggerRegistry",
    "advance_particles",
    "generate_path",
    "place_decorations",
    "spawn_burst",
]
