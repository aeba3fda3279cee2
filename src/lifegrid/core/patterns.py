"""Common Conway's Game of Life seed patterns."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) offsets for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, cols)."""
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def to_grid(self, row_count: int, column_count: int, row_offset: int = 0, col_offset: int = 0) -> Grid:
        """Place this pattern on an otherwise dead grid.

        Cells that fall outside the grid are dropped.

        Args:
            row_count: Grid rows
            column_count: Grid columns
            row_offset: Vertical offset
            col_offset: Horizontal offset

        Returns:
            New Grid instance
        """
        grid = Grid.dead(row_count, column_count)
        updates = {}
        for row, col in self.cells:
            target = (row + row_offset, col + col_offset)
            if grid.in_bounds(*target):
                updates[target] = True
        return grid.with_cells(updates)

    def centered_offset(self, row_count: int, column_count: int) -> Tuple[int, int]:
        """Offset for ``to_grid`` that centers the pattern on a grid of the given size."""
        min_row, min_col, _, _ = self.get_bounding_box()
        rows, cols = self.get_size()
        return (
            max(0, (row_count - rows) // 2) - min_row,
            max(0, (column_count - cols) // 2) - min_col,
        )

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create pattern from a grid's living cells.

        Args:
            grid: Source grid
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        return cls(name, list(grid.living_cells()), description)


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Smallest spaceship, period-4")
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider"],
            "Custom": [],
        }

        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
