from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


ROWS = 3
COLS = 6
COOLDOWN_TURNS = 3


class Shape(str, Enum):
    TRIANGLE = 'Triangle'
    SQUARE = 'Square'
    DIAMOND = 'Diamond'
    CIRCLE = 'Circle'


class Color(str, Enum):
    RED = 'Red'
    GREEN = 'Green'
    BLUE = 'Blue'
    YELLOW = 'Yellow'


SHAPES = tuple(Shape)
COLORS = tuple(Color)


@dataclass
class Cell:
    """A single grid cell. ``cooldown == 0`` means it can be clicked."""
    shape: Shape
    color: Color
    cooldown: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shape': self.shape.value,
            'color': self.color.value,
            'cooldown': self.cooldown,
        }


Grid = List[List[Cell]]


@dataclass
class GameState:
    """The single mutable game held by a session."""
    score: int = 0
    grid: Grid = field(default_factory=list)
    is_active: bool = False

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'is_active': self.is_active,
            'rows': self.rows,
            'cols': self.cols,
            'grid': [[cell.to_dict() for cell in row] for row in self.grid],
        }


class Outcome(str, Enum):
    APPLIED = 'applied'
    IGNORED = 'ignored'
    GAME_OVER = 'game_over'


@dataclass(frozen=True)
class GameOverSignal:
    final_score: int
