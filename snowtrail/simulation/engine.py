"""Run loop: mutate state, composite, emit, strictly one step at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from random import Random

import pyarrow.parquet as pq

from snowtrail.config.constants import FLUSH_THRESHOLD
from snowtrail.config.types import SceneConfig
from snowtrail.domain.grid import ActivityGrid
from snowtrail.render.compositor import FrameCompositor, SceneSprites
from snowtrail.render.sinks import FrameSink
from snowtrail.render.theme import DEFAULT_THEME, Theme
from snowtrail.simulation.persistence import flush_frame_columns, new_frame_columns
from snowtrail.simulation.state import AnimationClock, AnimationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Final counters for one completed animation run."""

    frames: int
    trigger_count: int
    hit_count: int
    trail_size: int
    width: int
    height: int


def run_animation(
    grid: ActivityGrid,
    sprites: SceneSprites,
    sink: FrameSink,
    config: SceneConfig = SceneConfig(),
    theme: Theme = DEFAULT_THEME,
    frame_log_path: Path | None = None,
    clock: AnimationClock | None = None,
) -> RunSummary:
    """Render one frame per path step into ``sink`` and finalize it.

    Per step the order is: trigger visit, particle advance, trail mark,
    composite, emit. Any exception aborts the run; the sink is not finalized
    and its output must be treated as invalid.
    """
    state = AnimationState.create(grid, config, clock=clock)
    snow_rng = Random(config.snow_seed)
    compositor = FrameCompositor(grid, sprites, config, theme)
    total = state.total_steps
    logger.info(
        "Rendering %dx%d grid: %d steps, %d triggers, %d decorations",
        grid.rows,
        grid.cols,
        total,
        len(state.registry),
        len(state.decorations),
    )

    frame_columns = new_frame_columns()
    frame_writer: pq.ParquetWriter | None = None
    sink.start(compositor.width, compositor.height)
    try:
        while not state.done:
            record = state.advance()
            frame = compositor.compose(
                step=record.step,
                position=(record.row, record.col),
                registry=state.registry,
                trail=state.trail,
                decorations=state.decorations,
                elapsed_seconds=state.clock.elapsed_seconds(),
                snow_rng=snow_rng,
            )
            sink.write_frame(frame)
            logger.debug("Frame %d/%d", record.step + 1, total)

            if frame_log_path is not None:
                frame_columns["step"].append(record.step)
                frame_columns["row"].append(record.row)
                frame_columns["col"].append(record.col)
                frame_columns["fired"].append(record.fired)
                frame_columns["hit_count"].append(record.hit_count)
                frame_columns["live_particles"].append(record.live_particles)
                frame_columns["trail_size"].append(record.trail_size)
                if len(frame_columns["step"]) >= FLUSH_THRESHOLD:
                    frame_writer = flush_frame_columns(frame_columns, frame_log_path, frame_writer)
            state.clock.tick()

        if frame_log_path is not None:
            frame_writer = flush_frame_columns(frame_columns, frame_log_path, frame_writer)
    finally:
        if frame_writer is not None:
            frame_writer.close()

    sink.finish()
    summary = RunSummary(
        frames=total,
        trigger_count=len(state.registry),
        hit_count=state.registry.hit_count,
        trail_size=len(state.trail),
        width=compositor.width,
        height=compositor.height,
    )
    logger.info(
        "Rendered %d frames; %d/%d triggers hit",
        summary.frames,
        summary.hit_count,
        summary.trigger_count,
    )
    return summary
