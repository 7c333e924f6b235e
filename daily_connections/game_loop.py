"""
Game controller: one play session driven by discrete calls.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set

from . import grid as grid_engine
from . import selection
from .core.env import DEFAULT_MAX_MISTAKES
from .core.errors import IncompleteSelection, UnknownWord
from .grid import Coord, Grid
from .puzzle import Category, Difficulty, Puzzle
from .selection import Direction, GuessResult, Session, SelectionState, Status
from .utils import normalize_words


@dataclass(frozen=True)
class CellView:
    """What the presentation layer needs to draw one cell."""
    row: int
    col: int
    text: str
    is_cursor: bool
    selected: bool
    solved_by: Optional[str] = None  # category title once solved
    difficulty: Optional[Difficulty] = None


class GameController:
    """
    Owns the session state for one puzzle.

    Every mutating call either completes or raises a GameRejection without
    changing anything. Not thread-safe; callers serialize access.
    """

    def __init__(
        self,
        puzzle: Puzzle,
        max_mistakes: int = DEFAULT_MAX_MISTAKES,
        rng: Optional[random.Random] = None,
    ):
        if max_mistakes < 1:
            raise ValueError(f"max_mistakes must be positive, got {max_mistakes}")
        self._rng = rng
        self._max_mistakes = max_mistakes
        self.session = Session(
            puzzle=puzzle,
            grid=grid_engine.build(puzzle, rng),
            max_mistakes=max_mistakes,
        )

    @classmethod
    def new(cls, puzzle: Puzzle, **kwargs) -> "GameController":
        return cls(puzzle, **kwargs)

    # Read-only accessors

    @property
    def puzzle(self) -> Puzzle:
        return self.session.puzzle

    @property
    def grid(self) -> Grid:
        return self.session.grid

    @property
    def status(self) -> Status:
        return self.session.status

    @property
    def mistakes_made(self) -> int:
        return self.session.mistakes_made

    @property
    def mistakes_remaining(self) -> int:
        return self.session.mistakes_remaining

    @property
    def solved_categories(self) -> Set[Category]:
        return set(self.session.solved_categories)

    @property
    def selection_state(self) -> SelectionState:
        return selection.selection_state(self.grid)

    @property
    def history(self) -> List[GuessResult]:
        return list(self.session.history)

    def snapshot(self) -> List[List[CellView]]:
        rows = []
        for r, row in enumerate(self.grid.cells):
            views = []
            for c, word in enumerate(row):
                category = self.puzzle.category_for(word.text)
                solved = category in self.session.solved_categories
                views.append(CellView(
                    row=r,
                    col=c,
                    text=word.text,
                    is_cursor=self.grid.cursor == (r, c),
                    selected=(r, c) in self.grid.selected_cells,
                    solved_by=category.title if solved else None,
                    difficulty=self.puzzle.difficulty_of(category) if solved else None,
                ))
            rows.append(views)
        return rows

    # Player actions

    def move_cursor(self, direction: Direction) -> None:
        self.session.ensure_in_progress()
        selection.move_cursor(self.grid, direction)

    def toggle_selection(self, coord: Optional[Coord] = None) -> None:
        """Toggle the given cell, or the cell under the cursor."""
        self.session.ensure_in_progress()
        selection.toggle_selection(self.grid, coord if coord is not None else self.grid.cursor)

    def clear_selection(self) -> None:
        self.session.ensure_in_progress()
        selection.clear_selection(self.grid)

    def submit_guess(self) -> GuessResult:
        return selection.submit_guess(self.session)

    def reshuffle(self) -> None:
        """Shuffle cell positions; the selection follows its words."""
        self.session.ensure_in_progress()
        picked = [grid_engine.word_at(self.grid, r, c).text for r, c in self.grid.selected_cells]
        grid_engine.shuffle(self.grid, self._rng)
        self.grid.selected_cells = [self.grid.position_of(text) for text in picked]

    def restart(self) -> None:
        """Start the same puzzle over with a fresh shuffle."""
        self.session = Session(
            puzzle=self.puzzle,
            grid=grid_engine.build(self.puzzle, self._rng),
            max_mistakes=self._max_mistakes,
        )


def play_game(
    puzzle: Puzzle,
    guesses: List[List[str]],
    max_mistakes: int = DEFAULT_MAX_MISTAKES,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """
    Replay a scripted list of guesses against a fresh session.

    Args:
        puzzle: The puzzle to play
        guesses: Each guess is four words (case-insensitive)
        max_mistakes: Mistake budget
        rng: Random source for the initial shuffle

    Returns:
        Dict with 'status', 'solved', 'groups_found', 'mistakes', 'guesses'
        and 'trace' (one entry per evaluated guess)

    Raises:
        IncompleteSelection: If a guess does not name four distinct words
        UnknownWord: If a guess names a word that is not in the puzzle
        CellUnavailable: If a guess names a word whose category is already
            solved; the guesses before it have been applied
    """
    game = GameController(puzzle, max_mistakes=max_mistakes, rng=rng)
    by_text = {w.text.upper().strip(): w.text for w in puzzle.words}
    trace = []

    for guess in guesses:
        if game.status is not Status.IN_PROGRESS:
            break
        wanted = normalize_words(guess)
        if len(set(wanted)) != 4:
            raise IncompleteSelection(f"A guess needs four distinct words: {guess}")

        game.clear_selection()
        for text in wanted:
            if text not in by_text:
                raise UnknownWord(f"{text!r} is not part of puzzle {puzzle.id}")
            game.toggle_selection(game.grid.position_of(by_text[text]))

        result = game.submit_guess()
        trace.append({
            "guess": result.words,
            "result": "CORRECT" if result.correct else ("ONE_AWAY" if result.one_away else "WRONG"),
            "category": result.category.title if result.category else None,
        })

    return {
        "status": game.status.value,
        "solved": game.status is Status.WON,
        "groups_found": len(game.solved_categories),
        "mistakes": game.mistakes_made,
        "guesses": len(trace),
        "trace": trace,
    }
