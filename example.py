#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GameOfLife, Grid, PatternLibrary
from lifegrid.frontends.text import format_extinction, format_grid


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # A glider on a bounded grid travels until it reaches the bottom-right corner
    game = GameOfLife(glider.to_grid(8, 8, 1, 1))
    final_generation, reason = game.run_until_extinct(max_generations=30)

    print(format_grid(game.grid, final_generation), end="")
    print(f"Stopped: {reason}")
    print(f"Population history: {game.population_history}")
    print()

    # A line of three cells in a single row shrinks and dies
    game.reset(Grid.from_rows([[1, 1, 1]]))
    final_generation, reason = game.run_until_extinct()
    print(format_extinction(final_generation))


if __name__ == "__main__":
    main()
