"""Full-coverage traversal order over the grid."""

from __future__ import annotations

Cell = tuple[int, int]


def generate_path(rows: int, cols: int) -> tuple[Cell, ...]:
    """Return the boustrophedon column-major sweep over a ``rows x cols`` grid.

    Even columns are walked top to bottom, odd columns bottom to top, so
    consecutive steps are always adjacent and every cell is visited once.
    """
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be >= 1")
    path: list[Cell] = []
    for col in range(cols):
        row_order = range(rows) if col % 2 == 0 else range(rows - 1, -1, -1)
        path.extend((row, col) for row in row_order)
    return tuple(path)
