"""A single lattice site of the grain growth simulation."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)


class State(enum.Enum):
    """Occupation state of a cell."""

    EMPTY = "empty"
    OCCUPIED = "occupied"


@dataclass
class Cell:
    """A lattice site that is either empty or belongs to a grain."""

    state: State = State.EMPTY
    grain_id: int = 0
    color: Color = WHITE

    def color_for_state(self) -> Color:
        """Return the grain colour for occupied cells, white otherwise."""
        return self.color if self.state is State.OCCUPIED else WHITE

    def set_state(self, state: State, grain_id: int, color: Color) -> None:
        """Assign state, grain and colour in one go."""
        self.state = state
        self.grain_id = grain_id
        self.color = color

    def reset(self) -> None:
        """Return the cell to the empty state."""
        self.state = State.EMPTY
        self.grain_id = 0
        self.color = WHITE