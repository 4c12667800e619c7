"""Game domain services: grid generation, adjacency rules, moves and the session.

This package contains the pure game mechanics that are driven by the
Socket.IO handlers and HTTP routes, keeping transport concerns separated
from the core rules.
"""

from .generator import generate_grid
from .resolver import resolve
from .rules import is_legal, legal_replacements
from .session import GameSession, ScoreSubmissionError
from .types import Cell, Color, GameOverSignal, GameState, Outcome, Shape
