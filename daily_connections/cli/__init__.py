"""
CLI commands for playing Connections in the terminal.
"""

from .play import main as play
from .show_puzzle import main as show_puzzle

__all__ = [
    "play",
    "show_puzzle",
]
