"""
Grid model: board dimensions and coordinate validity.
"""

from .constants import Cell, GRID_COLS, GRID_ROWS


class Grid:
    """
    A fixed-size board.

    Attributes:
        cols: number of columns (valid x is 0..cols-1)
        rows: number of rows (valid y is 0..rows-1)
    """

    def __init__(self, cols: int = GRID_COLS, rows: int = GRID_ROWS):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {cols}x{rows}.")
        self.cols = cols
        self.rows = rows

    @property
    def capacity(self) -> int:
        """Total number of cells on the board."""
        return self.cols * self.rows

    @property
    def center(self) -> Cell:
        return Cell(self.cols // 2, self.rows // 2)

    def is_in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def __repr__(self):
        return f"<Grid {self.cols}x{self.rows}>"
