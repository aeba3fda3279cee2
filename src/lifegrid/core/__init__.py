"""Core cellular automata logic."""

from .errors import MalformedGridError
from .grid import Grid
from .neighbors import count_neighbors
from .rules import next_state, apply_rule
from .game import GameOfLife, SimulationState, advance, is_extinct
from .patterns import Pattern, PatternLibrary

__all__ = [
    "MalformedGridError",
    "Grid",
    "count_neighbors",
    "next_state",
    "apply_rule",
    "GameOfLife",
    "SimulationState",
    "advance",
    "is_extinct",
    "Pattern",
    "PatternLibrary",
]
