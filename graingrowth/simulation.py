"""Cellular-automaton grain growth with a von Neumann neighbourhood."""

from __future__ import annotations

import random

from .cell import Color, State
from .grid import Grid

_VON_NEUMANN = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Simulation:
    """Grows grains from seeds, one automaton step at a time."""

    def __init__(self, cols: int, rows: int, rng: random.Random | None = None) -> None:
        self._current = Grid(cols, rows)
        self._next = Grid(cols, rows)
        self._rng = rng if rng is not None else random.Random()
        self._next_grain_id = 1
        self._iteration = 0

    @property
    def grid(self) -> Grid:
        """The current state of the lattice."""
        return self._current

    @property
    def iteration(self) -> int:
        """Number of steps taken since the last reset."""
        return self._iteration

    def reset(self) -> None:
        """Clear the lattice and restart grain numbering and the step count."""
        self._current.reset()
        self._next.reset()
        self._next_grain_id = 1
        self._iteration = 0

    def _random_color(self) -> Color:
        return (
            self._rng.randrange(256),
            self._rng.randrange(256),
            self._rng.randrange(256),
        )

    def seed_manual(self, x: int, y: int) -> None:
        """Start a new grain at (x, y) if that cell is empty."""
        cell = self._current.at(x, y)
        if cell.state is State.EMPTY:
            cell.set_state(State.OCCUPIED, self._next_grain_id, self._random_color())
            self._next_grain_id += 1

    def seed_random(self, count: int) -> None:
        """Try ``count`` seeds at random positions; occupied picks are skipped."""
        for _ in range(count):
            x = self._rng.randrange(self._current.cols)
            y = self._rng.randrange(self._current.rows)
            self.seed_manual(x, y)

    def remove_at(self, x: int, y: int) -> None:
        """Erase the whole grain that covers (x, y)."""
        clicked = self._current.at(x, y)
        if clicked.state is not State.OCCUPIED:
            return
        target = clicked.grain_id
        for cell in self._current:
            if cell.state is State.OCCUPIED and cell.grain_id == target:
                cell.reset()

    def step(self) -> None:
        """Advance one step: each empty cell joins a random occupied neighbour."""
        current, nxt = self._current, self._next
        nxt.reset()
        for x in range(current.cols):
            for y in range(current.rows):
                cell = current.at(x, y)
                if cell.state is State.OCCUPIED:
                    nxt.at(x, y).set_state(State.OCCUPIED, cell.grain_id, cell.color_for_state())
                    continue
                neighbours = [
                    n
                    for n in (current.at(x + dx, y + dy) for dx, dy in _VON_NEUMANN)
                    if n.state is State.OCCUPIED
                ]
                if neighbours:
                    picked = neighbours[self._rng.randrange(len(neighbours))]
                    nxt.at(x, y).set_state(
                        State.OCCUPIED, picked.grain_id, picked.color_for_state()
                    )
        self._current, self._next = nxt, current
        self._iteration += 1