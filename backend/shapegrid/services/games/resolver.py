import copy
import logging
import random
from typing import Optional, Tuple

from .rules import in_bounds, legal_replacements
from .types import COOLDOWN_TURNS, GameState, Outcome

logger = logging.getLogger(__name__)


def resolve(
    state: GameState,
    row: int,
    col: int,
    rng: Optional[random.Random] = None,
    cooldown_turns: int = COOLDOWN_TURNS,
) -> Tuple[GameState, Outcome]:
    """Resolve a click on (row, col).

    Returns the next state and the outcome. Ignored clicks hand back the very
    same state object. Applied and game-over results are deep copies; the
    input state is never mutated.
    """
    if not state.is_active:
        logger.debug(f"[click-ignored] row={row} col={col} reason=inactive")
        return state, Outcome.IGNORED
    if not in_bounds(state.grid, row, col):
        logger.debug(f"[click-ignored] row={row} col={col} reason=out_of_bounds")
        return state, Outcome.IGNORED
    if state.grid[row][col].cooldown > 0:
        logger.debug(f"[click-ignored] row={row} col={col} reason=cooldown")
        return state, Outcome.IGNORED

    moves = legal_replacements(state.grid, row, col)
    next_state = copy.deepcopy(state)

    if not moves:
        next_state.is_active = False
        logger.info(f"[game-over] row={row} col={col} final_score={state.score}")
        return next_state, Outcome.GAME_OVER

    shape, color = (rng or random).choice(moves)
    target = next_state.grid[row][col]
    target.shape = shape
    target.color = color
    target.cooldown = cooldown_turns
    next_state.score += 1

    for r, cells in enumerate(next_state.grid):
        for c, cell in enumerate(cells):
            if (r, c) != (row, col) and cell.cooldown > 0:
                cell.cooldown -= 1

    logger.info(
        f"[move] row={row} col={col} shape={shape.value} color={color.value} "
        f"candidates={len(moves)} score={next_state.score}"
    )
    return next_state, Outcome.APPLIED
