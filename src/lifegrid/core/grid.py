"""Grid data structure for the Game of Life."""

import logging
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np

from .errors import MalformedGridError

logger = logging.getLogger(__name__)


class Grid:
    """Represents a bounded 2D grid of live and dead cells.

    Cells are indexed as (row, col). A grid is immutable: the backing
    array is read-only and every change produces a new Grid.
    """

    def __init__(self, cells: np.ndarray) -> None:
        """Initialize a grid from a 2D array of cell states.

        Args:
            cells: Array-like of shape (rows, cols); truthy values are alive

        Raises:
            MalformedGridError: If the data is not a non-empty 2D array
        """
        try:
            arr = np.array(cells, dtype=bool)
        except ValueError as e:
            raise MalformedGridError(f"Grid data is not rectangular: {e}") from e
        if arr.ndim != 2:
            raise MalformedGridError(f"Grid data must be 2D, got {arr.ndim} dimension(s)")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise MalformedGridError(f"Grid must have at least one row and one column, got {arr.shape}")

        arr.setflags(write=False)
        self._cells = arr

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Grid":
        """Build a grid from a row-major table of cell states.

        Args:
            rows: Sequence of rows, each a sequence of cell states

        Returns:
            New Grid instance

        Raises:
            MalformedGridError: If there are no rows, the rows are empty,
                the rows have different lengths, or a row is a string
                (parse text with ``frontends.text.parse_row`` first)
        """
        table = []
        for index, row in enumerate(rows):
            if isinstance(row, (str, bytes)):
                raise MalformedGridError(f"Row {index} is a string, expected a sequence of cell states")
            table.append(list(row))
        if not table:
            raise MalformedGridError("Grid has no rows")

        column_count = len(table[0])
        for index, row in enumerate(table):
            if len(row) != column_count:
                raise MalformedGridError(
                    f"Row {index} has {len(row)} cells, expected {column_count}"
                )

        grid = cls(table)
        logger.debug("Built %dx%d grid from rows", grid.row_count, grid.column_count)
        return grid

    @classmethod
    def dead(cls, row_count: int, column_count: int) -> "Grid":
        """Create a grid where every cell is dead."""
        return cls(np.zeros((row_count, column_count), dtype=bool))

    @classmethod
    def random(
        cls,
        row_count: int,
        column_count: int,
        seed: int = 0,
        probability: float = 0.5,
    ) -> "Grid":
        """Create a randomly populated grid.

        The same seed always produces the same grid.

        Args:
            row_count: Number of rows
            column_count: Number of columns
            seed: Seed for the random generator
            probability: Chance each cell will be alive (0.0 to 1.0)

        Returns:
            New Grid instance
        """
        rng = np.random.default_rng(seed)
        return cls(rng.random((row_count, column_count)) < probability)

    @property
    def cells(self) -> np.ndarray:
        """Read-only array of cell states with shape (rows, cols)."""
        return self._cells

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)."""
        return (self.row_count, self.column_count)

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the grid."""
        return 0 <= row < self.row_count and 0 <= col < self.column_count

    def is_alive(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.row_count}x{self.column_count} grid")

        return bool(self._cells[row, col])

    def all_dead(self) -> bool:
        """Whether every cell in the grid is dead."""
        return not self._cells.any()

    def with_cells(self, updates: Dict[Tuple[int, int], bool]) -> "Grid":
        """Return a copy of this grid with some cells changed.

        Args:
            updates: Mapping of (row, col) to the new cell state

        Returns:
            New Grid instance; this grid is left unchanged

        Raises:
            IndexError: If any coordinate is out of bounds
        """
        cells = self._cells.copy()
        for (row, col), alive in updates.items():
            if not self.in_bounds(row, col):
                raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
            cells[row, col] = alive
        return Grid(cells)

    def living_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) of every living cell in row-major order."""
        for row, col in zip(*np.nonzero(self._cells)):
            yield (int(row), int(col))

    def to_rows(self) -> List[List[bool]]:
        """Convert grid to nested list of booleans.

        Returns:
            2D list representation of the grid
        """
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.row_count}x{self.column_count}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
