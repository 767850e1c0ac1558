"""Mutable animation state advanced one traversal step at a time."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import InitVar, dataclass, field
from random import Random

from snowtrail.config.types import SceneConfig
from snowtrail.domain.decorations import Decoration, place_decorations
from snowtrail.domain.grid import ActivityGrid
from snowtrail.domain.path import Cell, generate_path
from snowtrail.domain.trail import Trail
from snowtrail.domain.triggers import TriggerRegistry


@dataclass
class AnimationClock:
    """Step counter plus the wall-clock origin for the elapsed-time overlay."""

    step: int = 0
    now: Callable[[], float] = time.monotonic
    start: InitVar[float | None] = None
    started_at: float = field(init=False)

    def __post_init__(self, start: float | None) -> None:
        self.started_at = self.now() if start is None else start

    def elapsed_seconds(self) -> int:
        return int(self.now() - self.started_at)

    def tick(self) -> None:
        self.step += 1


@dataclass(frozen=True)
class StepRecord:
    """Summary of the state mutation performed for one step."""

    step: int
    row: int
    col: int
    fired: bool
    hit_count: int
    live_particles: int
    trail_size: int


@dataclass
class AnimationState:
    """Everything the compositor reads, owned by the run loop."""

    grid: ActivityGrid
    path: tuple[Cell, ...]
    registry: TriggerRegistry
    trail: Trail
    decorations: tuple[Decoration, ...]
    clock: AnimationClock = field(default_factory=AnimationClock)

    @classmethod
    def create(
        cls,
        grid: ActivityGrid,
        config: SceneConfig = SceneConfig(),
        rng: Random | None = None,
        clock: AnimationClock | None = None,
    ) -> AnimationState:
        """Build path, triggers and scenery for ``grid``.

        ``rng`` drives decoration placement and, afterwards, particle bursts.
        """
        rng = rng if rng is not None else Random(config.seed)
        decorations = place_decorations(grid.rows, grid.cols, config, rng)
        return cls(
            grid=grid,
            path=generate_path(grid.rows, grid.cols),
            registry=TriggerRegistry.from_grid(grid, config, rng),
            trail=Trail(),
            decorations=decorations,
            clock=clock if clock is not None else AnimationClock(),
        )

    @property
    def total_steps(self) -> int:
        return len(self.path)

    @property
    def position(self) -> Cell:
        return self.path[self.clock.step]

    @property
    def done(self) -> bool:
        return self.clock.step >= len(self.path)

    def advance(self) -> StepRecord:
        """Apply the current step: fire trigger, advance particles, extend trail."""
        step = self.clock.step
        row, col = self.path[step]
        fired = self.registry.visit(row, col)
        self.registry.advance()
        self.trail.mark_visited(row, col)
        return StepRecord(
            step=step,
            row=row,
            col=col,
            fired=fired,
            hit_count=self.registry.hit_count,
            live_particles=self.registry.live_particle_count,
            trail_size=len(self.trail),
        )
