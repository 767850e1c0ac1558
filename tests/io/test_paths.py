"""Tests for snowtrail.io.paths and the frame log schema."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pytest

from snowtrail.io.paths import asset_path, resolve_within_base
from snowtrail.io.schemas import FRAME_LOG_SCHEMA, FRAME_LOG_SCHEMA_VERSION


class TestResolveWithinBase:
    def test_relative_path_joined_to_base(self, tmp_path: Path) -> None:
        assert resolve_within_base(Path("out/snake.gif"), tmp_path) == (
            tmp_path.resolve() / "out" / "snake.gif"
        )

    def test_absolute_path_inside_base(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b.json"
        assert resolve_within_base(target, tmp_path) == target.resolve()

    def test_base_itself_allowed(self, tmp_path: Path) -> None:
        assert resolve_within_base(Path("."), tmp_path) == tmp_path.resolve()

    @pytest.mark.parametrize("path", [Path("../escape.gif"), Path("/etc/passwd")])
    def test_escape_rejected(self, tmp_path: Path, path: Path) -> None:
        with pytest.raises(ValueError, match="escapes base_dir"):
            resolve_within_base(path, tmp_path)


def test_asset_path_inside_assets_dir(tmp_path: Path) -> None:
    assert asset_path(tmp_path, "coin.png") == tmp_path.resolve() / "coin.png"


def test_frame_log_schema_fields() -> None:
    assert FRAME_LOG_SCHEMA.names == [
        "step",
        "row",
        "col",
        "fired",
        "hit_count",
        "live_particles",
        "trail_size",
    ]
    assert FRAME_LOG_SCHEMA.field("fired").type == pa.bool_()
    assert FRAME_LOG_SCHEMA.metadata[b"schema_version"] == str(FRAME_LOG_SCHEMA_VERSION).encode()
