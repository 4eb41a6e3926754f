"""Cellular automaton simulation of grain growth on a periodic grid, with a Tkinter viewer."""

__version__ = "0.1.0"
__all__ = ["cell", "grid", "simulation", "gui"]