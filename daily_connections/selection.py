"""
Selection and guess state machine.

Selection sub-states (only while the session is in progress):
    IDLE (0 selected) -> SELECTING (1-3) -> READY (4)
A submitted guess either solves a category or costs a mistake; both clear
the selection. WON and LOST are terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from .core.env import DEFAULT_MAX_MISTAKES
from .core.errors import (
    CellUnavailable,
    IncompleteSelection,
    SelectionFull,
    SessionFinished,
)
from .grid import SIZE, Coord, Grid, category_of, check_coord, retire, word_at
from .puzzle import GROUP_SIZE, Category, Puzzle
from .utils import check_one_away


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class SelectionState(Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    READY = "ready"


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class GuessResult:
    words: List[str]
    correct: bool
    category: Optional[Category] = None  # set when correct
    one_away: bool = False


@dataclass
class Session:
    puzzle: Puzzle
    grid: Grid
    max_mistakes: int = DEFAULT_MAX_MISTAKES
    solved_categories: Set[Category] = field(default_factory=set)
    mistakes_made: int = 0
    status: Status = Status.IN_PROGRESS
    history: List[GuessResult] = field(default_factory=list)

    @property
    def mistakes_remaining(self) -> int:
        return self.max_mistakes - self.mistakes_made

    def ensure_in_progress(self) -> None:
        if self.status is not Status.IN_PROGRESS:
            raise SessionFinished(f"The game is over ({self.status.value})")


def move_cursor(grid: Grid, direction: Direction) -> None:
    """Move the cursor one cell, clamped to the grid edges."""
    dr, dc = direction.value
    row, col = grid.cursor
    grid.cursor = (
        min(max(row + dr, 0), SIZE - 1),
        min(max(col + dc, 0), SIZE - 1),
    )


def toggle_selection(grid: Grid, coord: Coord) -> None:
    """
    Select or deselect one cell.

    Raises:
        OutOfBounds: If coord is not on the grid
        SelectionFull: If four cells are already selected
        CellUnavailable: If the cell's word is already solved
    """
    row, col = coord
    check_coord(row, col)
    coord = (row, col)

    if coord in grid.selected_cells:
        grid.selected_cells.remove(coord)
        return
    if len(grid.selected_cells) >= GROUP_SIZE:
        raise SelectionFull()
    if grid.is_retired(coord):
        raise CellUnavailable(f"{word_at(grid, row, col).text} is already solved")
    grid.selected_cells.append(coord)


def clear_selection(grid: Grid) -> None:
    grid.selected_cells.clear()


def selection_state(grid: Grid) -> SelectionState:
    n = len(grid.selected_cells)
    if n == 0:
        return SelectionState.IDLE
    if n < GROUP_SIZE:
        return SelectionState.SELECTING
    return SelectionState.READY


def submit_guess(session: Session) -> GuessResult:
    """
    Evaluate the four selected cells.

    Repeating an earlier wrong guess still costs a mistake.

    Raises:
        SessionFinished: If the game is already won or lost
        IncompleteSelection: If fewer than four cells are selected
    """
    session.ensure_in_progress()
    grid = session.grid
    if selection_state(grid) is not SelectionState.READY:
        raise IncompleteSelection(
            f"Select exactly {GROUP_SIZE} cells, {len(grid.selected_cells)} selected"
        )

    words = [word_at(grid, r, c) for r, c in grid.selected_cells]
    categories = {category_of(session.puzzle, w) for w in words}
    texts = [w.text for w in words]

    category = next(iter(categories)) if len(categories) == 1 else None
    if category is not None and category not in session.solved_categories:
        session.solved_categories.add(category)
        retire(grid, category)
        result = GuessResult(words=texts, correct=True, category=category)
        if len(session.solved_categories) == len(session.puzzle.categories):
            session.status = Status.WON
    else:
        unsolved = [c for c in session.puzzle.categories if c not in session.solved_categories]
        result = GuessResult(
            words=texts,
            correct=False,
            one_away=check_one_away(frozenset(texts), unsolved),
        )
        session.mistakes_made += 1
        if session.mistakes_made >= session.max_mistakes:
            session.status = Status.LOST

    clear_selection(grid)
    session.history.append(result)
    return result
