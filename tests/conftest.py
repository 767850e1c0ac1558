"""Shared fixtures: sprite assets on disk and in memory, plus a 3x3 activity grid."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from snowtrail.config.types import AssetConfig, SceneConfig
from snowtrail.domain.grid import ActivityGrid
from snowtrail.render.compositor import SceneSprites
from tests.sprite_assets import build_asset_images


@pytest.fixture
def asset_images() -> dict[str, Image.Image]:
    return build_asset_images()


@pytest.fixture
def sprites(asset_images: dict[str, Image.Image]) -> SceneSprites:
    return SceneSprites.from_images(asset_images, AssetConfig())


@pytest.fixture
def assets_dir(tmp_path: Path, asset_images: dict[str, Image.Image]) -> Path:
    root = tmp_path / "assets"
    root.mkdir()
    files = AssetConfig().files
    for name, image in asset_images.items():
        image.save(root / files[name])
    return root


@pytest.fixture
def diagonal_grid() -> ActivityGrid:
    return ActivityGrid.from_rows([[1, 0, 0], [0, 2, 0], [0, 0, 1]])


@pytest.fixture
def bare_config() -> SceneConfig:
    """Scene without scenery or snow so only grid layers are drawn."""
    return SceneConfig(tree_count=0, shelter_positions=(), snowflake_count=0, seed=0)
