import logging
import random
from typing import Optional

from .types import COLORS, COLS, ROWS, SHAPES, Cell, Color, Grid, Shape

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 50


def _fits_top_left(grid: Grid, row: int, col: int, shape: Shape, color: Color) -> bool:
    # Only the already-filled neighbors exist while generating row-major.
    if row > 0:
        top = grid[row - 1][col]
        if top.shape == shape or top.color == color:
            return False
    if col > 0:
        left = grid[row][col - 1]
        if left.shape == shape or left.color == color:
            return False
    return True


def _try_fill(rows: int, cols: int, rng: random.Random, max_attempts: int) -> Optional[Grid]:
    """Fill one grid row-major; None if some cell ran out of attempts."""
    grid: Grid = []
    for r in range(rows):
        grid.append([])
        for c in range(cols):
            attempts = 0
            while True:
                shape = rng.choice(SHAPES)
                color = rng.choice(COLORS)
                attempts += 1
                if _fits_top_left(grid, r, c, shape, color):
                    break
                if attempts >= max_attempts:
                    logger.warning(
                        f"[grid-restart] cell=({r},{c}) no valid combination after {attempts} attempts"
                    )
                    return None
            grid[r].append(Cell(shape=shape, color=color, cooldown=0))
    return grid


def generate_grid(
    rows: int = ROWS,
    cols: int = COLS,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Grid:
    """Generate a grid where no cell shares a shape or color with the cell above or to its left.

    Each cell is drawn uniformly from the full shape x color product. If a cell
    cannot be placed within ``max_attempts`` draws the partial grid is thrown
    away and generation starts over from the first cell.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f'Grid must be at least 1x1, got {rows}x{cols}')
    if max_attempts < 1:
        raise ValueError('max_attempts must be positive')
    rng = rng or random.Random()
    restarts = 0
    while True:
        grid = _try_fill(rows, cols, rng, max_attempts)
        if grid is not None:
            if restarts:
                logger.info(f"[grid-generated] rows={rows} cols={cols} restarts={restarts}")
            return grid
        restarts += 1
