import logging
import random
import threading
from typing import Callable, Optional, Union

from .generator import MAX_ATTEMPTS, generate_grid
from .resolver import resolve
from .types import COLS, COOLDOWN_TURNS, ROWS, GameOverSignal, GameState, Outcome

logger = logging.getLogger(__name__)


class ScoreSubmissionError(Exception):
    """Raised when the leaderboard could not record a submitted score."""


def _noop(*_args) -> None:
    return None


class GameSession:
    """Owns the one live GameState and serialises every intent against it.

    ``broadcast(state)`` is called after each applied move and each start,
    ``notify_game_over(final_score)`` once per game that ends, and
    ``record_score(name, score)`` for positive submitted scores.
    """

    def __init__(
        self,
        record_score: Callable[[str, int], None] = _noop,
        broadcast: Callable[[GameState], None] = _noop,
        notify_game_over: Callable[[int], None] = _noop,
        rows: int = ROWS,
        cols: int = COLS,
        cooldown_turns: int = COOLDOWN_TURNS,
        max_attempts: int = MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ):
        self._record_score = record_score
        self._broadcast = broadcast
        self._notify_game_over = notify_game_over
        self.rows = rows
        self.cols = cols
        self.cooldown_turns = cooldown_turns
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._state = GameState()

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._state

    def start(self) -> GameState:
        with self._lock:
            return self._start_locked()

    def apply_click(self, row: int, col: int) -> Union[GameState, GameOverSignal]:
        with self._lock:
            next_state, outcome = resolve(
                self._state, row, col, rng=self._rng, cooldown_turns=self.cooldown_turns
            )
            if outcome is Outcome.IGNORED:
                return self._state
            self._state = next_state
            if outcome is Outcome.GAME_OVER:
                self._emit(self._notify_game_over, next_state.score)
                return GameOverSignal(final_score=next_state.score)
            self._emit(self._broadcast, next_state)
            return next_state

    def submit_score(self, name: str, score: int) -> GameState:
        with self._lock:
            if score > 0:
                try:
                    self._record_score(name, score)
                except Exception as exc:
                    logger.error(f"[score-failed] name={name!r} score={score} error={exc}")
                    raise ScoreSubmissionError(str(exc)) from exc
            return self._start_locked()

    def _start_locked(self) -> GameState:
        self._state = GameState(
            score=0,
            grid=generate_grid(self.rows, self.cols, rng=self._rng, max_attempts=self.max_attempts),
            is_active=True,
        )
        logger.info(f"[new-game] rows={self.rows} cols={self.cols}")
        self._emit(self._broadcast, self._state)
        return self._state

    def _emit(self, callback: Callable, payload) -> None:
        # The state is already committed; a transport failure must not undo it.
        try:
            callback(payload)
        except Exception as exc:
            logger.error(f"[broadcast-failed] callback={getattr(callback, '__name__', callback)} error={exc}")
