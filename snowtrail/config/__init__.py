"""Configuration layer: constants and typed config dataclasses."""

from snowtrail.config.constants import (
    ALPHA_DECAY,
    BURST_SIZE,
    CALENDAR_ROWS,
    CELL_SIZE,
    FLUSH_THRESHOLD,
    FRAME_DURATION_MS,
    GRAVITY,
    PARTICLE_SIZE,
    SHELTER_POSITIONS,
    SNOWFLAKE_COUNT,
    TREE_COUNT,
)
from snowtrail.config.types import AssetConfig, SceneConfig

__all__ = [
    "ALPHA_DECAY",
    "AssetConfig",
    "BURST_SIZE",
    "CALENDAR_ROWS",
    "CELL_SIZE",
    "FLUSH_THRESHOLD",
    "FRAME_DURATION_MS",
    "GRAVITY",
    "PARTICLE_SIZE",
    "SHELTER_POSITIONS",
    "SNOWFLAKE_COUNT",
    "SceneConfig",
    "TREE_COUNT",
]
