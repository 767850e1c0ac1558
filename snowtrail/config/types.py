"""Configuration dataclasses for animation runs.

All frozen dataclasses that parameterise scene physics, decoration layout,
and sprite-sheet geometry live here.
"""

from __future__ import annotations

from dataclasses import dataclass

from snowtrail.config.constants import (
    ALPHA_DECAY,
    BURST_SIZE,
    CELL_SIZE,
    CHARACTER_SHEET_COLUMNS,
    CHARACTER_SHEET_ROWS,
    FRAME_DURATION_MS,
    GRAVITY,
    PARTICLE_SIZE,
    REFERENCE_CELL_SIZE,
    SHELTER_POSITIONS,
    SNOW_FALL_SPEED,
    SNOWFLAKE_COUNT,
    SNOWFLAKE_SHEET_COLUMNS,
    SNOWFLAKE_SIZE,
    SNOWFLAKE_VARIANTS,
    TREE_COUNT,
)

__all__ = [
    "AssetConfig",
    "SceneConfig",
]


@dataclass(frozen=True)
class SceneConfig:
    """Core runtime knobs for one animation run."""

    cell_size: int = CELL_SIZE
    burst_size: int = BURST_SIZE
    gravity: float = GRAVITY
    alpha_decay: float = ALPHA_DECAY
    particle_size: int = PARTICLE_SIZE
    spawn_jitter: float = 0.0
    """Half-width of the uniform X jitter applied to burst spawn positions."""
    snowflake_count: int = SNOWFLAKE_COUNT
    snow_fall_speed: int = SNOW_FALL_SPEED
    tree_count: int = TREE_COUNT
    shelter_positions: tuple[tuple[int, int], ...] = SHELTER_POSITIONS
    frame_duration_ms: int = FRAME_DURATION_MS
    seed: int | None = None
    """Seed for decoration placement and particle bursts (None = OS entropy)."""
    snow_seed: int | None = None
    """Seed for the per-frame snow draw (None = OS entropy)."""

    def __post_init__(self) -> None:
        if self.cell_size < 1:
            raise ValueError("cell_size must be >= 1")
        if self.burst_size < 0:
            raise ValueError("burst_size must be >= 0")
        if self.alpha_decay <= 0.0:
            raise ValueError("alpha_decay must be > 0")
        if self.particle_size < 1:
            raise ValueError("particle_size must be >= 1")
        if self.spawn_jitter < 0.0:
            raise ValueError("spawn_jitter must be >= 0")
        if self.snowflake_count < 0:
            raise ValueError("snowflake_count must be >= 0")
        if self.tree_count < 0:
            raise ValueError("tree_count must be >= 0")
        if self.frame_duration_ms < 1:
            raise ValueError("frame_duration_ms must be >= 1")

    @property
    def sprite_scale(self) -> float:
        """Factor applied to sprite draw sizes tuned for 32 px cells."""
        return self.cell_size / REFERENCE_CELL_SIZE


@dataclass(frozen=True)
class AssetConfig:
    """Asset file names and sprite-sheet geometry."""

    character_file: str = "supertux.png"
    character_columns: int = CHARACTER_SHEET_COLUMNS
    character_rows: int = CHARACTER_SHEET_ROWS

    shelter_file: str = "igloo.png"
    shelter_region: tuple[int, int] = (192, 64)
    shelter_draw_size: tuple[int, int] = (96, 32)

    tree_file: str = "tree-sheet.png"
    tree_region: tuple[int, int] = (110, 110)
    tree_index: int = 0
    tree_draw_size: tuple[int, int] = (48, 48)

    snowflake_file: str = "snowflakes.png"
    snowflake_size: int = SNOWFLAKE_SIZE
    snowflake_columns: int = SNOWFLAKE_SHEET_COLUMNS
    snowflake_variants: int = SNOWFLAKE_VARIANTS

    block_file: str = "question-block.png"
    particle_file: str = "coin.png"

    def __post_init__(self) -> None:
        if self.character_columns < 1 or self.character_rows < 1:
            raise ValueError("character sheet dimensions must be >= 1")
        if self.snowflake_columns < 1:
            raise ValueError("snowflake_columns must be >= 1")
        if self.snowflake_variants < 1:
            raise ValueError("snowflake_variants must be >= 1")
        if self.snowflake_size < 1:
            raise ValueError("snowflake_size must be >= 1")
        if self.tree_index < 0:
            raise ValueError("tree_index must be >= 0")
        for name in ("shelter_region", "shelter_draw_size", "tree_region", "tree_draw_size"):
            width, height = getattr(self, name)
            if width < 1 or height < 1:
                raise ValueError(f"{name} dimensions must be >= 1")

    @property
    def files(self) -> dict[str, str]:
        """Map of asset name to file name for every required image."""
        return {
            "character": self.character_file,
            "shelter": self.shelter_file,
            "tree": self.tree_file,
            "snowflakes": self.snowflake_file,
            "block": self.block_file,
            "particle": self.particle_file,
        }
