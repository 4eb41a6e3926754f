"""Tkinter front end: a clickable lattice view and a window with run controls."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .cell import Color, State
from .simulation import Simulation

CELL_SIZE = 5
GRID_COLS = math.ceil(860 / CELL_SIZE)
GRID_ROWS = math.ceil(790 / CELL_SIZE)
GRID_WIDTH = GRID_COLS * CELL_SIZE
GRID_HEIGHT = GRID_ROWS * CELL_SIZE

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 808

BUTTON_WIDTH = 50
BUTTON_HEIGHT = 20
MARGIN = 5

STEP_INTERVAL_MS = 100


def cell_at_pixel(px: float, py: float, cell_size: int) -> tuple[int, int]:
    """Map a pixel position on the lattice view to cell coordinates."""
    if cell_size <= 0:
        raise ValueError(f"cell size must be positive, got {cell_size}")
    return math.trunc(px / cell_size), math.trunc(py / cell_size)


def grid_lines(count: int, cell_size: int, limit: int) -> list[int]:
    """Positions of the ``count + 1`` grid lines, each clamped to ``limit``."""
    if cell_size <= 0:
        raise ValueError(f"cell size must be positive, got {cell_size}")
    return [min(i * cell_size, limit) for i in range(count + 1)]


def iteration_label(iteration: int) -> str:
    """Text shown for the current iteration count."""
    return f"Iteration: {iteration}"


def _hex_color(color: Color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


class GridWidget:
    """A canvas that draws the lattice and seeds or erases grains on click."""

    def __init__(self, master, simulation: Simulation | None = None) -> None:
        import tkinter as tk

        self.simulation = simulation
        self.show_grid = True
        self.erase_mode = False
        self.canvas = tk.Canvas(
            master,
            width=GRID_WIDTH,
            height=GRID_HEIGHT,
            background="white",
            highlightthickness=0,
        )
        self.canvas.bind("<Button-1>", self._on_click)
        self.redraw()

    def set_show_grid(self, value: bool) -> None:
        """Turn the grid lines on or off and repaint."""
        self.show_grid = bool(value)
        self.redraw()

    def set_erase_mode(self, value: bool) -> None:
        """Make clicks erase grains instead of seeding them."""
        self.erase_mode = bool(value)

    def redraw(self) -> None:
        """Repaint the lattice and, if enabled, the grid lines."""
        canvas = self.canvas
        canvas.delete("all")

        if self.simulation is not None:
            grid = self.simulation.grid
            for y in range(grid.rows):
                for x in range(grid.cols):
                    cell = grid.at(x, y)
                    if cell.state is not State.OCCUPIED:
                        continue
                    left, top = x * CELL_SIZE, y * CELL_SIZE
                    fill = _hex_color(cell.color_for_state())
                    canvas.create_rectangle(
                        left,
                        top,
                        left + CELL_SIZE,
                        top + CELL_SIZE,
                        fill=fill,
                        outline=fill,
                    )

        if self.show_grid:
            max_x = GRID_WIDTH - 1
            max_y = GRID_HEIGHT - 1
            for xx in grid_lines(GRID_COLS, CELL_SIZE, max_x):
                canvas.create_line(xx, 0, xx, max_y, fill="black")
            for yy in grid_lines(GRID_ROWS, CELL_SIZE, max_y):
                canvas.create_line(0, yy, max_x, yy, fill="black")
            canvas.create_rectangle(0, 0, max_x, max_y, outline="black")

    def _on_click(self, event) -> None:
        if self.simulation is None:
            return
        x, y = cell_at_pixel(event.x, event.y, CELL_SIZE)
        if self.erase_mode:
            self.simulation.remove_at(x, y)
        else:
            self.simulation.seed_manual(x, y)
        self.redraw()


class MainWindow:
    """The application window: lattice view on the left, controls on the right."""

    def __init__(self, root) -> None:
        import tkinter as tk

        self.root = root
        root.title("Grain growth")
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        root.resizable(False, False)

        self.simulation = Simulation(GRID_COLS, GRID_ROWS)
        self._timer_id: str | None = None

        left = tk.Frame(root)
        left.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=MARGIN, pady=MARGIN)
        self.grid_widget = GridWidget(left, self.simulation)
        self.grid_widget.canvas.pack(side=tk.TOP, anchor=tk.NW)

        right = tk.Frame(root)
        right.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True, padx=MARGIN, pady=MARGIN)

        buttons = tk.Frame(right)
        buttons.pack(side=tk.TOP, pady=MARGIN)
        self.start_button = tk.Button(buttons, text="Start", command=self.on_start_clicked)
        self.start_button.pack(side=tk.LEFT, padx=MARGIN)
        self.reset_button = tk.Button(buttons, text="Reset", command=self.on_reset_clicked)
        self.reset_button.pack(side=tk.LEFT, padx=MARGIN)

        self._show_grid = tk.BooleanVar(master=root, value=True)
        self.grid_toggle = tk.Checkbutton(
            right,
            text="Show grid",
            variable=self._show_grid,
            command=lambda: self.grid_widget.set_show_grid(self._show_grid.get()),
        )
        self.grid_toggle.pack(side=tk.TOP)

        self._erase_mode = tk.BooleanVar(master=root, value=False)
        self.erase_toggle = tk.Checkbutton(
            right,
            text="Erase mode",
            variable=self._erase_mode,
            command=lambda: self.grid_widget.set_erase_mode(self._erase_mode.get()),
        )
        self.erase_toggle.pack(side=tk.TOP)

        self.iteration_label = tk.Label(right, text=iteration_label(0))
        self.iteration_label.pack(side=tk.BOTTOM, anchor=tk.E)

    @property
    def running(self) -> bool:
        """Whether the step timer is active."""
        return self._timer_id is not None

    def _stop_timer(self) -> None:
        if self._timer_id is not None:
            self.root.after_cancel(self._timer_id)
            self._timer_id = None

    def _schedule(self) -> None:
        self._timer_id = self.root.after(STEP_INTERVAL_MS, self._tick)

    def _tick(self) -> None:
        self._timer_id = None
        self.on_step()
        self._schedule()

    def on_start_clicked(self) -> None:
        """Toggle between running and paused."""
        if self.running:
            self._stop_timer()
            self.start_button.config(text="Start")
        else:
            self._schedule()
            self.start_button.config(text="Pause")

    def on_reset_clicked(self) -> None:
        """Stop the timer and clear the simulation."""
        self._stop_timer()
        self.start_button.config(text="Start")
        self.simulation.reset()
        self.grid_widget.redraw()
        self._update_iteration_label()

    def on_step(self) -> None:
        """Advance the simulation by one step and refresh the view."""
        self.simulation.step()
        self.grid_widget.redraw()
        self._update_iteration_label()

    def _update_iteration_label(self) -> None:
        self.iteration_label.config(text=iteration_label(self.simulation.iteration))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the simulation window and run the event loop."""
    import tkinter as tk

    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0