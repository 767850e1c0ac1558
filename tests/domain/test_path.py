"""Tests for snowtrail.domain.path."""

from __future__ import annotations

import pytest

from snowtrail.domain.path import generate_path


class TestGeneratePath:
    def test_three_by_three_zigzag(self) -> None:
        assert generate_path(3, 3) == (
            (0, 0),
            (1, 0),
            (2, 0),
            (2, 1),
            (1, 1),
            (0, 1),
            (0, 2),
            (1, 2),
            (2, 2),
        )

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 5), (5, 1), (7, 53), (4, 6)])
    def test_full_coverage_without_repeats(self, rows: int, cols: int) -> None:
        path = generate_path(rows, cols)
        assert len(path) == rows * cols
        assert set(path) == {(r, c) for r in range(rows) for c in range(cols)}

    def test_consecutive_steps_are_adjacent(self) -> None:
        path = generate_path(7, 10)
        for (r1, c1), (r2, c2) in zip(path, path[1:]):
            assert abs(r1 - r2) + abs(c1 - c2) == 1

    def test_deterministic(self) -> None:
        assert generate_path(7, 53) == generate_path(7, 53)

    def test_odd_columns_walk_upward(self) -> None:
        path = generate_path(4, 2)
        assert path[4:] == ((3, 1), (2, 1), (1, 1), (0, 1))

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_rejects_empty_dimensions(self, rows: int, cols: int) -> None:
        with pytest.raises(ValueError, match="rows and cols must be >= 1"):
            generate_path(rows, cols)
