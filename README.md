# graingrowth

A two-dimensional cellular automaton that simulates grain growth. You place
nuclei on a periodic grid. At each step, every empty cell that touches an
occupied cell in its von Neumann neighbourhood (up, down, left, right) joins
the grain of one of those neighbours, picked at random. Cells that are already
occupied keep their grain. The grid wraps at its edges.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. The graphical
viewer needs Tkinter. Most Python builds include it, but some Linux
distributions ship it as a separate system package.

## The viewer

```
graingrowth
```

This opens a fixed-size window. The grid is on the left, with 172 × 158 cells
of 5 pixels each. The controls are on the right:

- Click a cell to plant a new grain there. Each grain gets a random colour.
  Clicking a cell that is already occupied does nothing.
- **Erase mode**: while it is checked, clicking a grain removes every cell of
  that grain.
- **Start / Pause**: runs or stops the simulation at one step every 100 ms.
- **Reset**: stops the simulation, clears the grid and sets the counter back to 0.
- **Show grid**: draws or hides the cell lines.

The iteration counter is in the lower right corner.

The viewer has no command-line options, and it does not save or load grids.

## Using the library

```python
import random

from graingrowth.cell import State
from graingrowth.simulation import Simulation

sim = Simulation(50, 40, rng=random.Random(1))
sim.seed_manual(10, 10)
sim.seed_random(5)          # random positions; occupied picks are skipped

while any(cell.state is State.EMPTY for cell in sim.grid):
    sim.step()

print(sim.iteration)
sim.remove_at(10, 10)       # clears every cell of the grain at (10, 10)
sim.reset()                 # empty grid, grain ids restart at 1, iteration 0
```

If you pass a seeded `random.Random` as `rng`, grain colours, random seeding
and neighbour choices are reproducible.

The main names are:

- `graingrowth.cell`: the `State` enum (`EMPTY`, `OCCUPIED`) and the `Cell`
  dataclass (`state`, `grain_id`, `color` as an RGB tuple), with `set_state`,
  `reset` and `color_for_state`. `color_for_state` returns white for empty
  cells.
- `graingrowth.grid`: `Grid(cols, rows)`. Its `at(x, y)` wraps a coordinate
  that lies one step outside the grid onto the opposite edge. It also has
  `reset`, `copy`, iteration over its cells and `len`. Dimensions that are not
  positive raise `ValueError`.
- `graingrowth.simulation`: `Simulation(cols, rows, rng=None)`, with `step`,
  `reset`, `seed_manual`, `seed_random`, `remove_at`, and the read-only
  `grid` and `iteration` properties.
- `graingrowth.gui`: the Tkinter viewer (`GridWidget`, `MainWindow`, `main`)
  and the helpers `cell_at_pixel`, `grid_lines` and `iteration_label`.

## Tests

```
pip install .[test]
pytest
```