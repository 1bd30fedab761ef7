"""Count byte warriors drawn with ones on a grid of digits."""

from __future__ import annotations

# Pixels painted from a point: itself, right, and the three below it.
_NEIGHBOURHOOD = ((0, 0), (0, 1), (1, -1), (1, 0), (1, 1))


def _paint(grid: list[list[int]], colour: int, row: int, column: int) -> None:
    for d_row, d_column in _NEIGHBOURHOOD:
        r, c = row + d_row, column + d_column
        if c >= 0 and r < len(grid) and c < len(grid[r]) and grid[r][c] == 1:
            grid[r][c] = colour


def count(image: str) -> int:
    """Return the number of warriors in ``image``, rows separated by newlines."""
    grid = [[ord(ch) - ord("0") for ch in line] for line in image.split("\n")]
    colour = 1
    for row, cells in enumerate(grid):
        for column, cell in enumerate(cells):
            if cell > 1:
                _paint(grid, cell, row, column)
            elif cell == 1:
                colour += 1
                _paint(grid, colour, row, column)
    return colour - 1