"""A rectangular lattice of cells with periodic boundaries."""

from __future__ import annotations

from collections.abc import Iterator

from .cell import Cell


class Grid:
    """A ``cols`` x ``rows`` lattice whose edges wrap around."""

    def __init__(self, cols: int, rows: int) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError(f"grid dimensions must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        self._cells = [Cell() for _ in range(cols * rows)]

    @staticmethod
    def _wrap(value: int, limit: int) -> int:
        if value < 0:
            return limit - 1
        if value >= limit:
            return 0
        return value

    def at(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y), stepping over an edge onto the opposite one."""
        x = self._wrap(x, self.cols)
        y = self._wrap(y, self.rows)
        return self._cells[y * self.cols + x]

    def reset(self) -> None:
        """Empty every cell."""
        for cell in self._cells:
            cell.reset()

    def copy(self) -> Grid:
        """Return an independent copy of the grid."""
        other = Grid(self.cols, self.rows)
        other._cells = [Cell(c.state, c.grain_id, c.color) for c in self._cells]
        return other

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)