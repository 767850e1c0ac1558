"""Centralized scene constants for contribution-grid animations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

CELL_SIZE = 32
"""Default edge length of one grid cell in pixels."""

REFERENCE_CELL_SIZE = 32
"""Cell size the sprite draw sizes below were tuned for."""

CALENDAR_ROWS = 7
"""Weekday rows in a contribution calendar."""

BURST_SIZE = 5
"""Particles spawned when a trigger fires."""

GRAVITY = 0.1
"""Downward acceleration added to particle ``vy`` every step."""

ALPHA_DECAY = 0.05
"""Linear opacity decrement applied to particles every step."""

PARTICLE_SIZE = 16
"""Drawn edge length of one particle sprite in pixels."""

SNOWFLAKE_COUNT = 15
"""Ambient snowflakes drawn on every frame."""

SNOW_FALL_SPEED = 2
"""Vertical snow drift in pixels per step."""

TREE_COUNT = 6
"""Randomly placed trees per run."""

SHELTER_POSITIONS: tuple[tuple[int, int], ...] = ((6, 0), (5, 50), (0, 25))
"""Fixed ``(row, col)`` shelter placements on a full-year calendar."""

FRAME_DURATION_MS = 400
"""Display duration of one GIF frame."""

CHARACTER_SHEET_COLUMNS = 8
CHARACTER_SHEET_ROWS = 11

SNOWFLAKE_SHEET_COLUMNS = 6
SNOWFLAKE_VARIANTS = 18
SNOWFLAKE_SIZE = 9

FLUSH_THRESHOLD = 8_192
"""Flush frame-log rows to Parquet once this in-memory row count is reached."""
