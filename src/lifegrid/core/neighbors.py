"""Live-neighbor counting on a bounded grid."""

from typing import List, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .grid import Grid

# Row/column offsets of the 8-connected neighborhood
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def count_neighbors(grid: Grid) -> np.ndarray:
    """Count live neighbors for all cells using a PyTorch convolution.

    Cells outside the grid do not exist, so the input is zero padded and
    edge and corner cells only see their in-bounds neighbors.

    Args:
        grid: Grid snapshot to count over (not modified)

    Returns:
        Integer array with the grid's shape, values in [0, 8]
    """
    # conv2d expects (batch, channel, height, width)
    source = torch.from_numpy(grid.cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
    counts = F.conv2d(source, _KERNEL, padding=1)
    return counts[0, 0].round().to(torch.int8).numpy()


def neighbor_positions(grid: Grid, row: int, col: int) -> List[Tuple[int, int]]:
    """List the in-bounds neighbor coordinates of a cell.

    A corner cell has 3 candidates, an edge cell 5 and an interior cell 8
    (fewer on grids only one row or column wide).
    """
    positions = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if grid.in_bounds(nr, nc):
            positions.append((nr, nc))
    return positions


def count_cell_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count living neighbors of a single cell.

    Args:
        grid: Grid snapshot
        row: Row index
        col: Column index

    Returns:
        Number of living neighbors (0-8)
    """
    return sum(1 for nr, nc in neighbor_positions(grid, row, col) if grid.is_alive(nr, nc))
