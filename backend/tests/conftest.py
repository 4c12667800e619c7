import os
import sys
import pytest

# Ensure the backend root (containing the `shapegrid` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from shapegrid import create_app, db, socketio, get_session
from shapegrid.services.games.types import Cell, Color, Shape


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = '*'
    GRID_ROWS = 3
    GRID_COLS = 6
    COOLDOWN_TURNS = 3
    GENERATION_MAX_ATTEMPTS = 50
    LEADERBOARD_SIZE = 10
    MAX_NAME_LENGTH = 15
    GAME_SEED = 1234


SHAPE_CODES = {'T': Shape.TRIANGLE, 'S': Shape.SQUARE, 'D': Shape.DIAMOND, 'C': Shape.CIRCLE}
COLOR_CODES = {'R': Color.RED, 'G': Color.GREEN, 'B': Color.BLUE, 'Y': Color.YELLOW}


def make_grid(*rows):
    """Build a grid from rows of two-letter codes, e.g. make_grid('TR SG', 'DB CY')."""
    return [
        [Cell(shape=SHAPE_CODES[code[0]], color=COLOR_CODES[code[1]]) for code in row.split()]
        for row in rows
    ]


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import shapegrid.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def game_session(flask_app):
    return get_session()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
