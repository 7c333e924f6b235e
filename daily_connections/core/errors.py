"""
Error types raised by the puzzle model and the game state machine.
"""

from __future__ import annotations


class ConnectionsError(Exception):
    """Base class for every error raised by this package."""


class MalformedPuzzle(ConnectionsError, ValueError):
    """Puzzle data is not 4 categories of 4 non-empty, unique words."""


class OutOfBounds(ConnectionsError, IndexError):
    """A (row, col) coordinate outside the 4x4 grid."""


class UnknownWord(ConnectionsError, LookupError):
    """A word that is not part of the puzzle."""


class FetchError(ConnectionsError, RuntimeError):
    """The daily puzzle could not be downloaded or decoded."""


class GameRejection(ConnectionsError):
    """An operation that is not legal right now. Nothing was changed."""


class SelectionFull(GameRejection):
    def __init__(self, message: str = "Four cells are already selected"):
        super().__init__(message)


class CellUnavailable(GameRejection):
    def __init__(self, message: str = "That word belongs to a solved category"):
        super().__init__(message)


class IncompleteSelection(GameRejection):
    def __init__(self, message: str = "Select exactly four cells before submitting"):
        super().__init__(message)


class SessionFinished(GameRejection):
    def __init__(self, message: str = "The game is over"):
        super().__init__(message)
