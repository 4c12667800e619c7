from typing import List, Tuple

from .types import COLORS, SHAPES, Cell, Color, Grid, Shape

# up, down, left, right
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def in_bounds(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def neighbors(grid: Grid, row: int, col: int) -> List[Cell]:
    """Orthogonal neighbors of (row, col) that exist on the grid."""
    found = []
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if in_bounds(grid, r, c):
            found.append(grid[r][c])
    return found


def is_legal(grid: Grid, row: int, col: int, shape: Shape, color: Color) -> bool:
    """True if no existing orthogonal neighbor shares ``shape`` or ``color``."""
    for neighbor in neighbors(grid, row, col):
        if neighbor.shape == shape or neighbor.color == color:
            return False
    return True


def legal_replacements(grid: Grid, row: int, col: int) -> List[Tuple[Shape, Color]]:
    """Every replacement for the cell that changes both axes and clears all neighbors.

    Order follows the shape and color enumerations, so the result is
    deterministic for a given grid.
    """
    current = grid[row][col]
    moves = []
    for shape in SHAPES:
        for color in COLORS:
            if shape == current.shape or color == current.color:
                continue
            if is_legal(grid, row, col, shape, color):
                moves.append((shape, color))
    return moves
