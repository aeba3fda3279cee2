"""Tests for the Grid class."""

import numpy as np
import pytest

from lifegrid.core.errors import MalformedGridError
from lifegrid.core.grid import Grid


class TestGrid:
    """Test cases for the Grid class."""

    def test_from_rows(self):
        """Test building a grid from a row-major table."""
        grid = Grid.from_rows([[True, False, True], [False, False, True]])
        assert grid.row_count == 2
        assert grid.column_count == 3
        assert grid.shape == (2, 3)
        assert grid.is_alive(0, 0) is True
        assert grid.is_alive(0, 1) is False
        assert grid.is_alive(1, 2) is True

    def test_from_rows_accepts_ints(self):
        """Test that truthy values count as alive."""
        grid = Grid.from_rows([[1, 0], [0, 1]])
        assert grid.is_alive(0, 0)
        assert not grid.is_alive(0, 1)
        assert grid.population == 2

    def test_from_rows_rejects_jagged_rows(self):
        """Test that rows of different lengths are rejected."""
        with pytest.raises(MalformedGridError):
            Grid.from_rows([[1, 0, 1], [0, 1, 0], [1, 1]])

    def test_from_rows_rejects_no_rows(self):
        """Test that an empty row list is rejected."""
        with pytest.raises(MalformedGridError):
            Grid.from_rows([])

    def test_from_rows_rejects_empty_rows(self):
        """Test that rows without cells are rejected."""
        with pytest.raises(MalformedGridError):
            Grid.from_rows([[], []])

    def test_malformed_grid_error_is_value_error(self):
        """Test that callers can catch malformed grids as ValueError."""
        with pytest.raises(ValueError):
            Grid.from_rows([[1], [1, 1]])

    def test_init_rejects_non_2d(self):
        """Test that only 2D data builds a grid."""
        with pytest.raises(MalformedGridError):
            Grid(np.zeros(5, dtype=bool))

    def test_init_rejects_jagged_rows(self):
        """Test that jagged nested lists raise MalformedGridError."""
        with pytest.raises(MalformedGridError):
            Grid([[1, 0, 1], [1, 0]])

    def test_from_rows_rejects_nested_rows(self):
        """Test that rows of rows are rejected as not 2D."""
        with pytest.raises(MalformedGridError):
            Grid.from_rows([[[1, 0]], [[0, 1]]])

    def test_from_rows_rejects_string_rows(self):
        """Test that raw text lines are not read as truthy cells."""
        with pytest.raises(MalformedGridError):
            Grid.from_rows(["10", "01"])

    def test_dead(self):
        """Test all-dead grid creation."""
        grid = Grid.dead(3, 4)
        assert grid.shape == (3, 4)
        assert grid.population == 0
        assert grid.all_dead()

    def test_random_is_reproducible(self):
        """Test that the same seed gives the same grid."""
        assert Grid.random(10, 12, seed=7) == Grid.random(10, 12, seed=7)
        assert Grid.random(10, 12, seed=7).shape == (10, 12)

    def test_random_probability_extremes(self):
        """Test random population at probability 0 and 1."""
        assert Grid.random(10, 10, probability=0.0).population == 0
        assert Grid.random(10, 10, probability=1.0).population == 100

    def test_random_intermediate_probability(self):
        """Test random population is roughly proportional to probability."""
        grid = Grid.random(20, 20, seed=3, probability=0.5)
        assert 120 <= grid.population <= 280

    def test_is_alive_out_of_bounds(self):
        """Test that out-of-range lookups raise and do not wrap."""
        grid = Grid.dead(3, 3)

        with pytest.raises(IndexError):
            grid.is_alive(-1, 0)

        with pytest.raises(IndexError):
            grid.is_alive(0, -1)

        with pytest.raises(IndexError):
            grid.is_alive(3, 0)

        with pytest.raises(IndexError):
            grid.is_alive(0, 3)

    def test_all_dead(self):
        """Test extinction check."""
        assert Grid.from_rows([[0, 0], [0, 0]]).all_dead()
        assert not Grid.from_rows([[0, 0], [0, 1]]).all_dead()

    def test_immutable(self):
        """Test that the cell array cannot be written to."""
        grid = Grid.from_rows([[1, 0], [0, 1]])
        with pytest.raises(ValueError):
            grid.cells[0, 0] = False
        assert grid.is_alive(0, 0)

    def test_source_array_is_copied(self):
        """Test that changing the source data does not change the grid."""
        data = np.zeros((2, 2), dtype=bool)
        grid = Grid(data)
        data[0, 0] = True
        assert not grid.is_alive(0, 0)

    def test_with_cells(self):
        """Test that updates produce a new grid."""
        grid = Grid.dead(3, 3)
        updated = grid.with_cells({(1, 1): True, (0, 2): True})

        assert updated.is_alive(1, 1)
        assert updated.is_alive(0, 2)
        assert updated.population == 2
        assert grid.population == 0

        with pytest.raises(IndexError):
            grid.with_cells({(3, 3): True})

    def test_living_cells(self):
        """Test listing living cell coordinates."""
        grid = Grid.from_rows([[0, 1], [1, 0]])
        assert list(grid.living_cells()) == [(0, 1), (1, 0)]

    def test_to_rows(self):
        """Test conversion to nested lists."""
        rows = [[True, False], [False, True]]
        assert Grid.from_rows(rows).to_rows() == rows

    def test_equality(self):
        """Test grid equality."""
        grid1 = Grid.from_rows([[1, 0], [0, 1]])
        grid2 = Grid.from_rows([[1, 0], [0, 1]])
        grid3 = Grid.from_rows([[1, 0], [0, 0]])
        grid4 = Grid.dead(2, 3)

        assert grid1 == grid2
        assert grid1 != grid3
        assert grid3 != grid4
        assert grid1 != "not a grid"

    def test_string_representation(self):
        """Test string representation."""
        grid = Grid.from_rows([[1, 0, 0], [0, 1, 0]])
        assert str(grid) == "*..\n.*."
        assert repr(grid) == "Grid(2x3, population=2)"
