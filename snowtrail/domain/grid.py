"""Immutable rectangular activity grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np


def _as_counts(values: object) -> np.ndarray:
    try:
        return np.array(values, dtype=np.int64, copy=True)
    except OverflowError as exc:
        raise ValueError(f"activity counts must fit in int64: {exc}") from exc


@dataclass(frozen=True, eq=False)
class ActivityGrid:
    """``rows x cols`` matrix of non-negative activity counts.

    The backing array is copied on construction and marked read-only.
    """

    counts: np.ndarray

    def __post_init__(self) -> None:
        counts = _as_counts(self.counts)
        if counts.ndim != 2:
            raise ValueError(f"activity grid must be 2-D, got shape {counts.shape}")
        if counts.shape[0] < 1 or counts.shape[1] < 1:
            raise ValueError("activity grid must have rows >= 1 and cols >= 1")
        if (counts < 0).any():
            raise ValueError("activity counts must be non-negative")
        counts.setflags(write=False)
        object.__setattr__(self, "counts", counts)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> ActivityGrid:
        """Build a grid from nested row sequences; rows must share one length."""
        if not rows:
            raise ValueError("activity grid must have rows >= 1 and cols >= 1")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"activity grid rows have differing lengths: {sorted(widths)}")
        return cls(_as_counts(rows))

    @property
    def rows(self) -> int:
        return int(self.counts.shape[0])

    @property
    def cols(self) -> int:
        return int(self.counts.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, cell: tuple[int, int]) -> int:
        row, col = cell
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell {cell} outside {self.rows}x{self.cols} grid")
        return int(self.counts[row, col])

    def active_cells(self) -> Iterator[tuple[int, int]]:
        """Yield ``(row, col)`` of every positive cell in row-major order."""
        for row, col in np.argwhere(self.counts > 0):
            yield int(row), int(col)

    def to_lists(self) -> list[list[int]]:
        return [[int(v) for v in row] for row in self.counts]
