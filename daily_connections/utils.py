"""
Small helpers shared by the game loop and the CLI.
"""

import re
from typing import Iterable, List, Tuple

from .puzzle import Category

_COORD_RE = re.compile(r"^\s*([a-dA-D])\s*([1-4])\s*$")


def normalize_words(words: List[str]) -> List[str]:
    """Normalize words to uppercase."""
    return [w.upper().strip() for w in words]


def check_one_away(guess_set: frozenset, categories: Iterable[Category]) -> bool:
    """Check if guess is ONE AWAY (3 correct, 1 wrong) from any of the categories."""
    return any(len(guess_set & set(c.texts)) == 3 for c in categories)


def parse_coord(text: str) -> Tuple[int, int]:
    """
    Parse a cell name such as "b3" (column letter, row number) into (row, col).

    Raises:
        ValueError: If text is not a cell name on the 4x4 grid
    """
    match = _COORD_RE.match(text)
    if not match:
        raise ValueError(f"Not a cell: {text!r} (use a1..d4)")
    col = ord(match.group(1).lower()) - ord("a")
    row = int(match.group(2)) - 1
    return row, col
