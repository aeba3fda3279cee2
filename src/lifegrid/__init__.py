"""Conway's Game of Life on a bounded grid."""

__version__ = "0.1.0"

from .core.errors import MalformedGridError
from .core.grid import Grid
from .core.game import GameOfLife, SimulationState, advance, is_extinct
from .core.neighbors import count_neighbors
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "GameOfLife",
    "SimulationState",
    "advance",
    "is_extinct",
    "count_neighbors",
    "MalformedGridError",
    "Pattern",
    "PatternLibrary",
]
