"""Plain-text grid files and console rendering."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..core.errors import MalformedGridError
from ..core.grid import Grid

logger = logging.getLogger(__name__)

ALIVE_CHAR = "1"
DEAD_CHAR = "0"


def parse_row(line: str) -> List[bool]:
    """Parse one line of a grid file.

    Only '0' and '1' count as cells; every other character is skipped.
    """
    return [char == ALIVE_CHAR for char in line if char in (ALIVE_CHAR, DEAD_CHAR)]


def parse_grid_lines(lines: Iterable[str]) -> Grid:
    """Build a grid from lines of '0'/'1' text, one line per row.

    A line without any '0' or '1' still becomes a row, which leaves the
    grid malformed unless every row is empty.

    Raises:
        MalformedGridError: If there are no rows or rows differ in length
    """
    return Grid.from_rows([parse_row(line) for line in lines])


def parse_grid_text(text: str) -> Grid:
    """Build a grid from the full contents of a grid file."""
    return parse_grid_lines(text.splitlines())


def read_grid_file(path: Union[str, Path]) -> Grid:
    """Read a grid from a text file.

    Args:
        path: Path of the grid file

    Returns:
        Parsed Grid

    Raises:
        OSError: If the file cannot be read
        MalformedGridError: If the file does not describe a rectangular grid
    """
    path = Path(path)
    with open(path, "r") as f:
        text = f.read()

    try:
        grid = parse_grid_text(text)
    except MalformedGridError as e:
        raise MalformedGridError(f"{path}: {e}") from e

    logger.debug("Read %dx%d grid from %s", grid.row_count, grid.column_count, path)
    return grid


def format_grid(grid: Grid, generation: int) -> str:
    """Render a grid for the console.

    Args:
        grid: Grid to render
        generation: Generation number shown in the label

    Returns:
        Label line, one line per row with cells as '1'/'0' separated by
        spaces, and a trailing blank line
    """
    lines = [f"Cells_grid at time step: {generation}"]
    for row in grid.cells:
        lines.append(" ".join(ALIVE_CHAR if cell else DEAD_CHAR for cell in row))
    lines.append("")
    return "\n".join(lines) + "\n"


def format_extinction(generation: int) -> str:
    """Message printed when every cell has died."""
    return f"All cells are dead at time step: {generation}"
