"""
Daily Connections - puzzle model and game state machine.
"""

from .puzzle import Puzzle, Category, Word, Difficulty
from .grid import Grid, build, shuffle, word_at, category_of
from .selection import Direction, SelectionState, Status, Session, GuessResult
from .game_loop import GameController, CellView, play_game
from .client import fetch_daily_puzzle, load_daily_puzzle

__all__ = [
    "Puzzle",
    "Category",
    "Word",
    "Difficulty",
    "Grid",
    "build",
    "shuffle",
    "word_at",
    "category_of",
    "Direction",
    "SelectionState",
    "Status",
    "Session",
    "GuessResult",
    "GameController",
    "CellView",
    "play_game",
    "fetch_daily_puzzle",
    "load_daily_puzzle",
]
