from flask_socketio import emit
from flask import current_app, request
from shapegrid import socketio, db, get_session
from shapegrid.services.games import GameOverSignal, GameState, ScoreSubmissionError
from shapegrid.services.leaderboard import top_scores

NAMESPACE = '/ws'


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _as_int(value):
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


# ---- Broadcasts used by the game session ----

def broadcast_state(state: GameState) -> None:
    # Use socketio.emit since this may run outside a request context
    socketio.emit('game_state_update', state.to_dict(), namespace=NAMESPACE)


def broadcast_game_over(final_score: int) -> None:
    socketio.emit('game_over', {'final_score': final_score}, namespace=NAMESPACE)


# ---- Handlers ----

def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")
    emit('game_state_update', get_session().state.to_dict())


def handle_disconnect(reason=None):
    current_app.logger.info(f"[disconnect] sid={_get_sid()}")


def handle_player_click(data):
    data = data if isinstance(data, dict) else {}
    row = _as_int(data.get('row'))
    col = _as_int(data.get('col'))
    if row is None or col is None:
        emit('error', {'message': 'row and col must be integers'})
        return
    result = get_session().apply_click(row, col)
    if isinstance(result, GameOverSignal):
        current_app.logger.info(f"[click] sid={_get_sid()} row={row} col={col} game_over final_score={result.final_score}")


def handle_submit_score(data):
    data = data if isinstance(data, dict) else {}
    score = _as_int(data.get('score'))
    if score is None:
        emit('error', {'message': 'score must be an integer'})
        return
    name = str(data.get('name') or '')
    try:
        get_session().submit_score(name, score)
    except ScoreSubmissionError as exc:
        db.session.rollback()
        current_app.logger.warning(f"[submit-score] sid={_get_sid()} failed: {exc}")
        emit('error', {'message': 'Could not save score, please try again'})
        return
    if score > 0:
        socketio.emit('leaderboard_update', top_scores(), namespace=NAMESPACE)


def handle_get_leaderboard(data=None):
    emit('leaderboard_update', top_scores())


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    handlers = {
        'connect': handle_connect,
        'disconnect': handle_disconnect,
        'player_click': handle_player_click,
        'submit_score': handle_submit_score,
        'get_leaderboard': handle_get_leaderboard,
        'ping': handle_ping,
    }
    for event, handler in handlers.items():
        socketio.on_event(event, handler, namespace=NAMESPACE)
