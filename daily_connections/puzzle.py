"""
Puzzle data: one day's solved Connections puzzle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Tuple

import orjson

from .core.errors import MalformedPuzzle, UnknownWord

GROUP_SIZE = 4
NUM_CATEGORIES = 4


class Difficulty(IntEnum):
    """Positional rank of a category; the Nth category gets level N."""
    STRAIGHTFORWARD = 0
    MEDIUM = 1
    HARD = 2
    TRICKY = 3


@dataclass(frozen=True)
class Word:
    text: str
    solution_position: int  # index in the canonical, unshuffled ordering


@dataclass(frozen=True)
class Category:
    title: str
    words: Tuple[Word, ...]

    def __post_init__(self):
        object.__setattr__(self, "words", tuple(self.words))

    @property
    def texts(self) -> List[str]:
        return [w.text for w in self.words]


@dataclass(frozen=True)
class Puzzle:
    """
    Immutable puzzle. Build it with from_dict()/from_json() so the
    structure is validated; the word -> category index is derived here.
    """
    id: int
    print_date: str
    editor: str
    categories: Tuple[Category, ...]
    _category_by_word: Dict[str, Category] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self):
        object.__setattr__(self, "categories", tuple(self.categories))
        if len(self.categories) != NUM_CATEGORIES:
            raise MalformedPuzzle(
                f"Expected {NUM_CATEGORIES} categories, got {len(self.categories)}"
            )

        index: Dict[str, Category] = {}
        titles = set()
        for i, category in enumerate(self.categories):
            if category.title in titles:
                raise MalformedPuzzle(f"Duplicate category title: {category.title!r}")
            titles.add(category.title)
            if len(category.words) != GROUP_SIZE:
                raise MalformedPuzzle(
                    f"Category {i} ({category.title!r}) must have exactly "
                    f"{GROUP_SIZE} words, got {len(category.words)}"
                )
            for word in category.words:
                if not word.text or not word.text.strip():
                    raise MalformedPuzzle(f"Empty word in category {category.title!r}")
                if word.text in index:
                    raise MalformedPuzzle(f"Duplicate word: {word.text!r}")
                index[word.text] = category

        positions = sorted(w.solution_position for c in self.categories for w in c.words)
        if positions != list(range(GROUP_SIZE * NUM_CATEGORIES)):
            raise MalformedPuzzle(
                f"Card positions must be a permutation of 0..{GROUP_SIZE * NUM_CATEGORIES - 1}, "
                f"got {positions}"
            )

        object.__setattr__(self, "_category_by_word", index)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Puzzle":
        """
        Create a Puzzle from the daily JSON document.

        Expected shape:
            {"id": int, "print_date": str, "editor": str,
             "categories": [{"title": str,
                             "cards": [{"content": str, "position": int}, ...]}, ...]}

        Raises:
            MalformedPuzzle: If the document is not 4 categories of 4 words
        """
        if not isinstance(data, dict):
            raise MalformedPuzzle(f"Expected a JSON object, got {type(data).__name__}")

        raw_categories = data.get("categories")
        if not isinstance(raw_categories, list):
            raise MalformedPuzzle("Missing 'categories' list")

        categories = []
        for i, raw in enumerate(raw_categories):
            if not isinstance(raw, dict) or not isinstance(raw.get("cards"), list):
                raise MalformedPuzzle(f"Category {i} has no 'cards' list")
            words = []
            for card in raw["cards"]:
                if not isinstance(card, dict):
                    raise MalformedPuzzle(f"Category {i} has a card that is not an object")
                content = card.get("content")
                if not isinstance(content, str):
                    raise MalformedPuzzle(f"Category {i} has a card without text content")
                try:
                    position = int(card.get("position", len(words) + GROUP_SIZE * i))
                except (TypeError, ValueError):
                    raise MalformedPuzzle(f"Bad position for card {content!r}")
                words.append(Word(text=content, solution_position=position))
            categories.append(Category(title=str(raw.get("title", "")), words=tuple(words)))

        try:
            puzzle_id = int(data.get("id", 0))
        except (TypeError, ValueError):
            raise MalformedPuzzle(f"Bad puzzle id: {data.get('id')!r}")

        return cls(
            id=puzzle_id,
            print_date=str(data.get("print_date", "")),
            editor=str(data.get("editor", "")),
            categories=tuple(categories),
        )

    @classmethod
    def from_json(cls, raw: bytes | str) -> "Puzzle":
        """Parse and validate a raw JSON document."""
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise MalformedPuzzle(f"Invalid JSON: {e}")
        return cls.from_dict(data)

    @property
    def words(self) -> List[Word]:
        """All 16 words in category order."""
        return [w for c in self.categories for w in c.words]

    def category_for(self, text: str) -> Category:
        try:
            return self._category_by_word[text]
        except KeyError:
            raise UnknownWord(f"{text!r} is not part of puzzle {self.id}")

    def difficulty_of(self, category: Category) -> Difficulty:
        return Difficulty(self.categories.index(category))

    def with_difficulties(self) -> List[Tuple[Category, Difficulty]]:
        """Pair each category with its positional difficulty."""
        return list(zip(self.categories, Difficulty))
