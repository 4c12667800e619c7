from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
import random
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def get_session():
    """Return the live GameSession of the current app."""
    return current_app.extensions['game_session']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS') or '*'

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from shapegrid.main import main
    flask_app.register_blueprint(main)

    from shapegrid.api.game import game_api
    flask_app.register_blueprint(game_api, url_prefix='/api')

    from shapegrid.socketio_events import (
        register_socketio_handlers,
        broadcast_state,
        broadcast_game_over,
    )
    register_socketio_handlers()

    from shapegrid.services.games import GameSession
    from shapegrid.services.leaderboard import record_score

    cfg = flask_app.config
    session = GameSession(
        record_score=record_score,
        broadcast=broadcast_state,
        notify_game_over=broadcast_game_over,
        rows=int(cfg.get('GRID_ROWS', 3)),
        cols=int(cfg.get('GRID_COLS', 6)),
        cooldown_turns=int(cfg.get('COOLDOWN_TURNS', 3)),
        max_attempts=int(cfg.get('GENERATION_MAX_ATTEMPTS', 50)),
        rng=random.Random(cfg.get('GAME_SEED')),
    )
    flask_app.extensions['game_session'] = session
    session.start()
    flask_app.logger.info(f"[startup] game session ready rows={session.rows} cols={session.cols}")

    @click.command('leaderboard-reset')
    def leaderboard_reset_command():
        """Drops and recreates the leaderboard tables."""
        import shapegrid.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Leaderboard has been reset!')

    flask_app.cli.add_command(leaderboard_reset_command)

    return flask_app
