"""Fire-once triggers for every active grid cell."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from random import Random

from snowtrail.config.types import SceneConfig
from snowtrail.domain.grid import ActivityGrid
from snowtrail.domain.particles import Particle, advance_particles, spawn_burst

logger = logging.getLogger(__name__)


@dataclass
class Trigger:
    """An active cell that fires exactly once when first visited."""

    row: int
    col: int
    hit: bool = False
    particles: list[Particle] = field(default_factory=list)

    @property
    def cell(self) -> tuple[int, int]:
        return self.row, self.col


class TriggerRegistry:
    """Owns every trigger and, through them, every burst particle."""

    def __init__(self, triggers: list[Trigger], config: SceneConfig, rng: Random) -> None:
        self._config = config
        self._rng = rng
        self._by_cell: dict[tuple[int, int], Trigger] = {}
        for trigger in triggers:
            if trigger.cell in self._by_cell:
                raise ValueError(f"duplicate trigger at cell {trigger.cell}")
            self._by_cell[trigger.cell] = trigger

    @classmethod
    def from_grid(cls, grid: ActivityGrid, config: SceneConfig, rng: Random) -> TriggerRegistry:
        """Create one unhit trigger per positive cell, in row-major order."""
        triggers = [Trigger(row=row, col=col) for row, col in grid.active_cells()]
        return cls(triggers, config, rng)

    def __len__(self) -> int:
        return len(self._by_cell)

    def __iter__(self) -> Iterator[Trigger]:
        return iter(self._by_cell.values())

    def get(self, row: int, col: int) -> Trigger | None:
        return self._by_cell.get((row, col))

    @property
    def hit_count(self) -> int:
        return sum(1 for trigger in self._by_cell.values() if trigger.hit)

    @property
    def live_particle_count(self) -> int:
        return sum(len(trigger.particles) for trigger in self._by_cell.values())

    def visit(self, row: int, col: int) -> bool:
        """Fire the trigger at ``(row, col)`` if it exists and is unhit.

        Returns True only on the visit that actually fires it.
        """
        trigger = self._by_cell.get((row, col))
        if trigger is None or trigger.hit:
            return False
        trigger.hit = True
        cell = self._config.cell_size
        trigger.particles.extend(
            spawn_burst(
                origin_x=col * cell + cell / 2,
                origin_y=row * cell,
                rng=self._rng,
                count=self._config.burst_size,
                particle_size=self._config.particle_size,
                jitter=self._config.spawn_jitter,
            )
        )
        logger.debug("Trigger fired at (%d, %d)", row, col)
        return True

    def advance(self) -> None:
        """Advance the particles of every trigger by one step."""
        for trigger in self._by_cell.values():
            if trigger.particles:
                trigger.particles = advance_particles(
                    trigger.particles,
                    gravity=self._config.gravity,
                    alpha_decay=self._config.alpha_decay,
                )
