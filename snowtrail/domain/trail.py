"""Permanent record of visited cells."""

from __future__ import annotations

from collections.abc import Iterator


class Trail:
    """Set of visited ``(row, col)`` cells; grows monotonically."""

    def __init__(self) -> None:
        self._visited: set[tuple[int, int]] = set()

    def mark_visited(self, row: int, col: int) -> None:
        self._visited.add((row, col))

    def is_visited(self, row: int, col: int) -> bool:
        return (row, col) in self._visited

    def __contains__(self, cell: object) -> bool:
        return cell in self._visited

    def __len__(self) -> int:
        return len(self._visited)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(sorted(self._visited))
