import random
import threading

import pytest

from conftest import make_grid
from shapegrid.services.games.session import GameSession, ScoreSubmissionError
from shapegrid.services.games.types import Color, GameOverSignal, GameState, Shape


class Recorder:
    def __init__(self):
        self.states = []
        self.game_overs = []
        self.scores = []

    def broadcast(self, state):
        self.states.append(state)

    def notify_game_over(self, final_score):
        self.game_overs.append(final_score)

    def record_score(self, name, score):
        self.scores.append((name, score))


@pytest.fixture()
def recorder():
    return Recorder()


@pytest.fixture()
def session(recorder):
    return GameSession(
        record_score=recorder.record_score,
        broadcast=recorder.broadcast,
        notify_game_over=recorder.notify_game_over,
        rng=random.Random(42),
    )


def _load(session, *rows, score=0):
    session._state = GameState(score=score, grid=make_grid(*rows), is_active=True)
    return session._state


def test_session_starts_inactive_until_start(session, recorder):
    assert session.state.is_active is False
    state = session.start()
    assert state.is_active
    assert state.score == 0
    assert (state.rows, state.cols) == (3, 6)
    assert recorder.states == [state]


def test_start_replaces_previous_game(session):
    first = session.start()
    second = session.start()
    assert second is not first
    assert session.state is second


def test_applied_click_stores_and_broadcasts(session, recorder):
    _load(session, 'CY TR CY', 'DB SB TG', 'CY SG CY')
    result = session.apply_click(1, 1)
    assert isinstance(result, GameState)
    assert session.state is result
    assert result.score == 1
    assert (result.grid[1][1].shape, result.grid[1][1].color) == (Shape.CIRCLE, Color.YELLOW)
    assert recorder.states == [result]


def test_ignored_click_returns_same_state_without_broadcast(session, recorder):
    current = _load(session, 'CY TR CY', 'DB SB TG', 'CY SG CY')
    assert session.apply_click(5, 5) is current
    current.grid[0][0].cooldown = 2
    assert session.apply_click(0, 0) is current
    assert recorder.states == []


def test_game_over_signals_once_and_blocks_further_clicks(session, recorder):
    _load(session, 'CY TR CY', 'DB CY TG', 'CY SG CY', score=12)
    result = session.apply_click(1, 1)
    assert result == GameOverSignal(final_score=12)
    assert session.state.is_active is False
    assert recorder.game_overs == [12]
    assert recorder.states == []

    frozen = session.state
    assert session.apply_click(0, 0) is frozen
    assert recorder.game_overs == [12]


def test_submit_score_records_and_restarts(session, recorder):
    _load(session, 'CY TR CY', 'DB CY TG', 'CY SG CY', score=5)
    session.apply_click(1, 1)
    fresh = session.submit_score('Ann', 5)
    assert recorder.scores == [('Ann', 5)]
    assert fresh.is_active
    assert fresh.score == 0
    assert session.state is fresh
    assert recorder.states[-1] is fresh


@pytest.mark.parametrize('score', [0, -3])
def test_submit_non_positive_score_only_restarts(session, recorder, score):
    session.start()
    fresh = session.submit_score('Ann', score)
    assert recorder.scores == []
    assert fresh.is_active


def test_failed_record_leaves_state_untouched(recorder):
    def broken(name, score):
        raise RuntimeError('disk full')

    session = GameSession(record_score=broken, broadcast=recorder.broadcast, rng=random.Random(1))
    _load(session, 'CY TR CY', 'DB CY TG', 'CY SG CY', score=9)
    session.apply_click(1, 1)
    ended = session.state

    with pytest.raises(ScoreSubmissionError):
        session.submit_score('Ann', 9)
    assert session.state is ended
    assert ended.is_active is False
    assert recorder.states == []


def test_failed_broadcast_keeps_committed_state():
    def broken(_state):
        raise ConnectionError('transport down')

    session = GameSession(broadcast=broken, rng=random.Random(3))
    started = session.start()
    assert session.state is started
    _load(session, 'CY TR CY', 'DB SB TG', 'CY SG CY')
    result = session.apply_click(1, 1)
    assert session.state is result
    assert result.score == 1


def test_failed_game_over_notice_keeps_ended_game(recorder):
    def broken(_final_score):
        raise ConnectionError('transport down')

    session = GameSession(broadcast=recorder.broadcast, notify_game_over=broken, rng=random.Random(4))
    _load(session, 'CY TR CY', 'DB CY TG', 'CY SG CY', score=6)
    result = session.apply_click(1, 1)
    assert result == GameOverSignal(final_score=6)
    ended = session.state
    assert ended.is_active is False
    assert ended.score == 6
    assert ended.grid == make_grid('CY TR CY', 'DB CY TG', 'CY SG CY')
    assert recorder.states == []


def test_concurrent_clicks_are_serialised(recorder):
    session = GameSession(broadcast=recorder.broadcast, rng=random.Random(8))
    session.start()
    results = []

    def worker(seed):
        rng = random.Random(seed)
        for _ in range(50):
            results.append(session.apply_click(rng.randrange(3), rng.randrange(6)))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    final = session.state
    applied = len(recorder.states) - 1  # first broadcast is the start
    assert final.score == applied
    for row in final.grid:
        for cell in row:
            assert 0 <= cell.cooldown <= 3
