"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.errors import MalformedGridError
from ..core.game import EXTINCTION, MAX_GENERATIONS, GameOfLife
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from .text import format_extinction, format_grid, read_grid_file

logger = logging.getLogger(__name__)

DEFAULT_GRID_FILE = "./cells_grid.txt"
DEFAULT_DELAY = 0.5
DEFAULT_PATTERN_SIZE = 20


@dataclass
class RunConfig:
    """Configuration for a simulation run."""

    grid_file: str = DEFAULT_GRID_FILE
    random_size: Optional[Tuple[int, int]] = None
    seed: int = 0
    population: float = 0.5
    pattern: Optional[str] = None
    rows: int = DEFAULT_PATTERN_SIZE
    cols: int = DEFAULT_PATTERN_SIZE
    delay: float = DEFAULT_DELAY
    max_generations: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunConfig":
        """Build a run configuration from parsed arguments."""
        random_size = None
        if args.random is not None:
            rows = args.random[0]
            cols = args.random[1] if len(args.random) > 1 else rows
            random_size = (rows, cols)

        return cls(
            grid_file=args.grid_file if args.grid_file is not None else DEFAULT_GRID_FILE,
            random_size=random_size,
            seed=args.seed,
            population=args.population,
            pattern=args.pattern,
            rows=args.rows if args.rows is not None else DEFAULT_PATTERN_SIZE,
            cols=args.cols if args.cols is not None else DEFAULT_PATTERN_SIZE,
            delay=args.delay,
            max_generations=args.max_generations,
            verbose=args.verbose,
        )


class CLIGameOfLife:
    """Command-line driver that animates a simulation in the console."""

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def load_grid(self, config: RunConfig) -> Grid:
        """Create the starting grid described by the configuration.

        Raises:
            OSError: If the grid file cannot be read
            MalformedGridError: If the grid file is not rectangular
            KeyError: If the named pattern does not exist
        """
        if config.pattern:
            pattern = self.pattern_library.get_pattern(config.pattern)
            if pattern is None:
                raise KeyError(config.pattern)
            row_offset, col_offset = pattern.centered_offset(config.rows, config.cols)
            logger.debug("Placing pattern %r at (%d, %d)", pattern.name, row_offset, col_offset)
            return pattern.to_grid(config.rows, config.cols, row_offset, col_offset)

        if config.random_size is not None:
            rows, cols = config.random_size
            logger.debug("Generating random %dx%d grid (seed %d)", rows, cols, config.seed)
            return Grid.random(rows, cols, seed=config.seed, probability=config.population)

        return read_grid_file(config.grid_file)

    def run_simulation(self, game: GameOfLife, delay: float, max_generations: Optional[int] = None) -> Tuple[int, str]:
        """Animate a simulation until extinction.

        Each iteration prints the current grid, advances one generation and
        stops once every cell is dead; otherwise it waits ``delay`` seconds.

        Args:
            game: Simulation to drive
            delay: Seconds to wait between generations
            max_generations: Stop after this many generations (None for no limit)

        Returns:
            Tuple of (final_generation, reason)
        """
        steps = 0
        while True:
            print(format_grid(game.grid, game.generation), end="")
            game.step()
            steps += 1

            if game.is_extinct:
                print(format_extinction(game.generation))
                return game.generation, EXTINCTION

            if max_generations is not None and steps >= max_generations:
                print(format_grid(game.grid, game.generation), end="")
                return game.generation, MAX_GENERATIONS

            time.sleep(delay)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    rows, cols = pattern.get_size()
                    print(f"  {pattern_name}: {rows}x{cols}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Animate Conway's Game of Life in the console until every cell dies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the grid stored in ./cells_grid.txt
  lifegrid

  # Run a grid file with a faster animation
  lifegrid patterns/glider.txt --delay 0.1

  # Run a random 10x10 grid
  lifegrid --random 10 --seed 42

  # Run a blinker on a 5x5 grid for 4 generations
  lifegrid --pattern Blinker --rows 5 --cols 5 -m 4
        """,
    )

    parser.add_argument(
        "grid_file",
        nargs="?",
        help=f"Grid file of '0'/'1' rows (default: {DEFAULT_GRID_FILE})",
    )

    # Alternative initial grids
    parser.add_argument(
        "--random",
        type=int,
        nargs="+",
        metavar="N",
        help="Use a random grid of ROWS [COLS] cells instead of a file",
    )

    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.5,
        help="Initial random population rate 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a named pattern instead of a grid file",
    )

    parser.add_argument("--rows", type=int, help=f"Rows for --pattern grids (default: {DEFAULT_PATTERN_SIZE})")

    parser.add_argument("--cols", type=int, help=f"Columns for --pattern grids (default: {DEFAULT_PATTERN_SIZE})")

    # Simulation configuration
    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Seconds between generations (default: {DEFAULT_DELAY})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations (default: run until extinction)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors: List[str] = []

    if args.random is not None:
        if len(args.random) > 2:
            errors.append("--random takes ROWS and an optional COLS")
        if any(size <= 0 for size in args.random):
            errors.append("Random grid dimensions must be positive")

    if args.random is not None and args.pattern:
        errors.append("Use either --random or --pattern, not both")

    if args.grid_file is not None and (args.random is not None or args.pattern):
        errors.append("A grid file cannot be combined with --random or --pattern")

    pattern_sizes = [size for size in (args.rows, args.cols) if size is not None]
    if pattern_sizes and not args.pattern:
        errors.append("--rows and --cols only apply to --pattern")
    if any(size <= 0 for size in pattern_sizes):
        errors.append("Rows and columns must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    config = RunConfig.from_args(args)

    try:
        grid = cli.load_grid(config)
    except KeyError:
        print(f"Error: Pattern '{config.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1
    except MalformedGridError as e:
        print(f"Error: Malformed grid: {e}")
        return 1
    except OSError as e:
        print(f"Error: Cannot read grid file: {e}")
        return 1

    logger.info("Starting %dx%d simulation, population %d", grid.row_count, grid.column_count, grid.population)

    try:
        final_generation, reason = cli.run_simulation(GameOfLife(grid), config.delay, config.max_generations)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    logger.info("Simulation finished at generation %d (%s)", final_generation, reason)
    return 0


if __name__ == "__main__":
    sys.exit(main())
