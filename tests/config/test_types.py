"""Tests for snowtrail.config: defaults and validation of run configuration."""

from __future__ import annotations

import dataclasses

import pytest

from snowtrail.config import constants
from snowtrail.config.types import AssetConfig, SceneConfig


class TestSceneConfig:
    def test_defaults_match_constants(self) -> None:
        config = SceneConfig()
        assert config.cell_size == constants.CELL_SIZE == 32
        assert config.burst_size == 5
        assert config.gravity == pytest.approx(0.1)
        assert config.alpha_decay == pytest.approx(0.05)
        assert config.frame_duration_ms == 400
        assert config.shelter_positions == ((6, 0), (5, 50), (0, 25))
        assert config.seed is None and config.snow_seed is None

    def test_sprite_scale(self) -> None:
        assert SceneConfig().sprite_scale == 1.0
        assert SceneConfig(cell_size=16).sprite_scale == 0.5

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SceneConfig().cell_size = 8  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("cell_size", 0),
            ("burst_size", -1),
            ("alpha_decay", 0.0),
            ("particle_size", 0),
            ("spawn_jitter", -0.5),
            ("snowflake_count", -1),
            ("tree_count", -2),
            ("frame_duration_ms", 0),
        ],
    )
    def test_rejects_invalid_values(self, field: str, value: float) -> None:
        with pytest.raises(ValueError, match=field):
            SceneConfig(**{field: value})


class TestAssetConfig:
    def test_files_cover_every_sprite(self) -> None:
        assert AssetConfig().files == {
            "character": "supertux.png",
            "shelter": "igloo.png",
            "tree": "tree-sheet.png",
            "snowflakes": "snowflakes.png",
            "block": "question-block.png",
            "particle": "coin.png",
        }

    def test_sheet_geometry_defaults(self) -> None:
        assets = AssetConfig()
        assert (assets.character_columns, assets.character_rows) == (8, 11)
        assert assets.snowflake_variants == 18
        assert assets.tree_draw_size == (48, 48)

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            ({"character_columns": 0}, "character sheet"),
            ({"snowflake_variants": 0}, "snowflake_variants"),
            ({"tree_index": -1}, "tree_index"),
            ({"shelter_draw_size": (0, 32)}, "shelter_draw_size"),
        ],
    )
    def test_rejects_invalid_geometry(self, kwargs: dict[str, object], match: str) -> None:
        with pytest.raises(ValueError, match=match):
            AssetConfig(**kwargs)  # type: ignore[arg-type]
