"""One-time placement of non-interactive scenery."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Literal

from snowtrail.config.types import SceneConfig

DecorationKind = Literal["shelter", "tree"]


@dataclass(frozen=True)
class Decoration:
    """A scenery sprite anchored at a grid cell."""

    kind: DecorationKind
    row: int
    col: int


def place_decorations(
    rows: int, cols: int, config: SceneConfig, rng: Random
) -> tuple[Decoration, ...]:
    """Return shelters at their fixed positions followed by randomly placed trees.

    Fixed shelter positions that fall outside the grid are skipped so the
    defaults remain usable on grids smaller than a full-year calendar.
    Trees may share cells with each other or with shelters.
    """
    shelters = [
        Decoration(kind="shelter", row=row, col=col)
        for row, col in config.shelter_positions
        if 0 <= row < rows and 0 <= col < cols
    ]
    trees = [
        Decoration(kind="tree", row=rng.randrange(rows), col=rng.randrange(cols))
        for _ in range(config.tree_count)
    ]
    return tuple(shelters + trees)
