"""Conway's Game of Life simulation engine."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .grid import Grid
from .neighbors import count_neighbors
from .rules import apply_rule

logger = logging.getLogger(__name__)

EXTINCTION = "extinction"
MAX_GENERATIONS = "max_generations"


@dataclass(frozen=True)
class SimulationState:
    """A grid snapshot and the generation it belongs to."""

    grid: Grid
    generation: int = 0

    @classmethod
    def initial(cls, grid: Grid) -> "SimulationState":
        """State at generation 0 for the given grid."""
        return cls(grid=grid, generation=0)


def advance(state: SimulationState) -> SimulationState:
    """Compute the next generation.

    Every cell of the new grid is derived from the old grid and neighbor
    counts taken from that same snapshot, so no cell ever sees a partially
    updated generation. The given state is left unchanged.

    Args:
        state: Current simulation state

    Returns:
        New state holding the next grid and ``generation + 1``
    """
    counts = count_neighbors(state.grid)
    next_grid = Grid(apply_rule(state.grid.cells, counts))
    logger.debug("Generation %d -> %d, population %d", state.generation, state.generation + 1, next_grid.population)
    return SimulationState(grid=next_grid, generation=state.generation + 1)


def is_extinct(state: SimulationState) -> bool:
    """Whether every cell of the state's grid is dead."""
    return state.grid.all_dead()


class GameOfLife:
    """Game of Life engine that owns the current simulation state.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a starting grid.

        Args:
            grid: Grid for generation 0
        """
        self._state = SimulationState.initial(grid)
        self._population_history: Deque[int] = deque(maxlen=100)
        self._population_history.append(grid.population)

    @property
    def state(self) -> SimulationState:
        """Current simulation state."""
        return self._state

    @property
    def grid(self) -> Grid:
        """Current grid."""
        return self._state.grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._state.generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._state.grid.population

    @property
    def population_history(self) -> List[int]:
        """Population of the most recent generations, oldest first."""
        return list(self._population_history)

    @property
    def is_extinct(self) -> bool:
        """Whether all cells are dead."""
        return is_extinct(self._state)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._state = advance(self._state)
        self._population_history.append(self.population)

    def run_until_extinct(self, max_generations: Optional[int] = None) -> Tuple[int, str]:
        """Run simulation until every cell is dead.

        Args:
            max_generations: Maximum number of steps to take (None for no limit)

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'extinction', 'max_generations'
        """
        steps = 0
        while not self.is_extinct:
            if max_generations is not None and steps >= max_generations:
                return self.generation, MAX_GENERATIONS
            self.step()
            steps += 1

        return self.generation, EXTINCTION

    def reset(self, grid: Grid) -> None:
        """Restart the simulation from a new grid at generation 0.

        Args:
            grid: New starting grid
        """
        self._state = SimulationState.initial(grid)
        self._population_history.clear()
        self._population_history.append(grid.population)
