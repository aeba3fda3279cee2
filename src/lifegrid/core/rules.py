"""Conway's Game of Life transition rule (B3/S23).

A live cell with 2 or 3 live neighbors survives, a dead cell with exactly
3 live neighbors is born, and every other cell is dead in the next
generation.
"""

import numpy as np

SURVIVAL = "survival"
UNDERPOPULATION = "underpopulation"
OVERPOPULATION = "overpopulation"
BIRTH = "birth"
STASIS = "stasis"


def next_state(alive: bool, count: int) -> bool:
    """Next-generation state of one cell.

    Args:
        alive: Current state of the cell
        count: Number of live neighbors in the current generation

    Returns:
        True if the cell is alive in the next generation
    """
    return count == 3 or (count == 2 and alive)


def classify(alive: bool, count: int) -> str:
    """Name the rule that decides a cell's next state."""
    if alive:
        if count < 2:
            return UNDERPOPULATION
        if count > 3:
            return OVERPOPULATION
        return SURVIVAL
    return BIRTH if count == 3 else STASIS


def apply_rule(cells: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Apply the rule to every cell at once.

    Args:
        cells: Boolean array of current cell states
        counts: Neighbor counts computed from ``cells``

    Returns:
        New boolean array of next-generation states; inputs are not modified

    Raises:
        ValueError: If the arrays have different shapes
    """
    if cells.shape != counts.shape:
        raise ValueError(f"Shape mismatch: cells {cells.shape} vs counts {counts.shape}")

    alive = cells.astype(bool)
    # Birth or survival at 3, survival only at 2
    return (counts == 3) | ((counts == 2) & alive)
