import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///shapegrid.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Origins allowed for HTTP and Socket.IO
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS', 'http://localhost:3000,http://127.0.0.1:3000'
        ).split(',') if o.strip()
    ]
    # Grid dimensions and move cooldown (reference values)
    GRID_ROWS = 3
    GRID_COLS = 6
    COOLDOWN_TURNS = 3
    # Per-cell draws before the whole grid is regenerated
    GENERATION_MAX_ATTEMPTS = 50
    # Leaderboard
    LEADERBOARD_SIZE = 10
    MAX_NAME_LENGTH = 15
    # Optional: seed the game RNG for reproducible sessions
    GAME_SEED = int(os.environ['GAME_SEED']) if os.environ.get('GAME_SEED') else None
