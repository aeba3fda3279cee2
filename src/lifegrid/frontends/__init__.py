"""Frontend interfaces for the simulation."""

from .cli import CLIGameOfLife
from .text import format_grid, parse_grid_text, read_grid_file

__all__ = ["CLIGameOfLife", "format_grid", "parse_grid_text", "read_grid_file"]
