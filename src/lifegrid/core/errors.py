"""Exceptions raised by the core simulation."""


class MalformedGridError(ValueError):
    """Raised when a grid cannot be built from the given cell data.

    A grid must have at least one row and one column, and every row must
    have the same number of cells.
    """
