"""Animated snowy traversal of a contribution-activity grid."""

from snowtrail.config.types import AssetConfig, SceneConfig
from snowtrail.domain.grid import ActivityGrid
from snowtrail.errors import AssetMissing, DataUnavailable, SinkWriteFailure, SnowtrailError
from snowtrail.simulation.engine import RunSummary, run_animation

__all__ = [
    "ActivityGrid",
    "AssetConfig",
    "AssetMissing",
    "DataUnavailable",
    "RunSummary",
    "SceneConfig",
    "SinkWriteFailure",
    "SnowtrailError",
    "run_animation",
]
