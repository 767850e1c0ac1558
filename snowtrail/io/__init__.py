"""I/O adapters: contribution data, image assets, paths, and log schemas."""

from snowtrail.io.assets import AssetLibrary
from snowtrail.io.contributions import (
    calendar_to_grid,
    fetch_contributions,
    load_grid_json,
    save_grid_json,
)
from snowtrail.io.paths import resolve_within_base
from snowtrail.io.schemas import FRAME_LOG_SCHEMA

__all__ = [
    "AssetLibrary",
    "FRAME_LOG_SCHEMA",
    "calendar_to_grid",
    "fetch_contributions",
    "load_grid_json",
    "resolve_within_base",
    "save_grid_json",
]
