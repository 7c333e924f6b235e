"""
Grid engine: the shuffled 4x4 arrangement of a puzzle's 16 words.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .core.errors import OutOfBounds, UnknownWord
from .puzzle import Category, Puzzle, Word

SIZE = 4

Coord = Tuple[int, int]


@dataclass
class Grid:
    cells: List[List[Word]]
    cursor: Coord = (0, 0)
    selected_cells: List[Coord] = field(default_factory=list)  # insertion order kept
    retired: Set[str] = field(default_factory=set)  # texts of solved words

    def __post_init__(self):
        if len(self.cells) != SIZE or any(len(row) != SIZE for row in self.cells):
            raise ValueError(f"Grid must be {SIZE}x{SIZE}")

    def flat(self) -> List[Word]:
        return [w for row in self.cells for w in row]

    def position_of(self, text: str) -> Coord:
        for r, row in enumerate(self.cells):
            for c, word in enumerate(row):
                if word.text == text:
                    return (r, c)
        raise UnknownWord(f"{text!r} is not on the grid")

    def is_retired(self, coord: Coord) -> bool:
        return word_at(self, *coord).text in self.retired


def check_coord(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise OutOfBounds(f"({row}, {col}) is outside the {SIZE}x{SIZE} grid")


def _place(words: List[Word]) -> List[List[Word]]:
    return [words[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]


def build(puzzle: Puzzle, rng: Optional[random.Random] = None) -> Grid:
    """Lay out the 16 words in category order, then shuffle them."""
    grid = Grid(cells=_place(puzzle.words))
    shuffle(grid, rng)
    return grid


def shuffle(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """
    Resample a uniformly random arrangement of all 16 cells.

    Each call is an independent draw, so the previous arrangement can come
    back. Cursor, selection and retired words are left alone.
    """
    words = grid.flat()
    (rng or random).shuffle(words)
    grid.cells = _place(words)


def word_at(grid: Grid, row: int, col: int) -> Word:
    check_coord(row, col)
    return grid.cells[row][col]


def category_of(puzzle: Puzzle, word: Word) -> Category:
    """Reverse lookup by word text. Raises UnknownWord for foreign words."""
    return puzzle.category_for(word.text)


def retire(grid: Grid, category: Category) -> None:
    """Take a solved category's words out of play. Positions do not move."""
    grid.retired.update(category.texts)
