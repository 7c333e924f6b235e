"""Tests for puzzle parsing and validation."""
import orjson
import pytest

from daily_connections.core.errors import MalformedPuzzle, UnknownWord
from daily_connections.game_loop import GameController
from daily_connections.puzzle import Category, Difficulty, Puzzle


class TestFromDict:
    def test_parses_metadata(self, puzzle):
        assert puzzle.id == 514
        assert puzzle.print_date == "2024-11-15"
        assert puzzle.editor == "Wyna Liu"

    def test_keeps_category_and_word_order(self, puzzle):
        assert [c.title for c in puzzle.categories] == ["SNUG", "PATRON", "WINTER ___", "SILENT ___"]
        assert puzzle.categories[0].texts == ["FAST", "FIRM", "SECURE", "TIGHT"]
        assert puzzle.categories[0].words[0].solution_position == 8

    def test_words_are_all_sixteen_in_category_order(self, puzzle):
        texts = [w.text for w in puzzle.words]
        assert len(texts) == 16
        assert texts[:4] == ["FAST", "FIRM", "SECURE", "TIGHT"]
        assert texts[-1] == "TREATMENT"

    def test_three_categories_rejected(self, raw_puzzle):
        raw_puzzle["categories"].pop()
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict(raw_puzzle)

    def test_category_with_five_words_rejected(self, raw_puzzle):
        raw_puzzle["categories"][1]["cards"].append({"content": "EXTRA", "position": 16})
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict(raw_puzzle)

    def test_empty_word_rejected(self, raw_puzzle):
        raw_puzzle["categories"][2]["cards"][0]["content"] = ""
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict(raw_puzzle)

    def test_duplicate_word_rejected(self, raw_puzzle):
        raw_puzzle["categories"][3]["cards"][0]["content"] = "FAST"
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict(raw_puzzle)

    def test_duplicate_title_rejected(self, raw_puzzle):
        raw_puzzle["categories"][1]["title"] = "SNUG"
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict(raw_puzzle)

    def test_position_out_of_range_rejected(self, raw_puzzle):
        raw_puzzle["categories"][0]["cards"][0]["position"] = 99
        raw_puzzle["categories"][1]["cards"][0]["position"] = -5
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict(raw_puzzle)

    def test_duplicate_position_rejected(self, raw_puzzle):
        raw_puzzle["categories"][0]["cards"][0]["position"] = 4  # FIRM already has 4
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict(raw_puzzle)

    def test_missing_categories_rejected(self):
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_dict({"id": 1})

    def test_malformed_is_a_value_error(self):
        with pytest.raises(ValueError):
            Puzzle.from_dict([])


class TestFromJson:
    def test_round_trip_from_bytes(self, raw_puzzle, puzzle):
        assert Puzzle.from_json(orjson.dumps(raw_puzzle)) == puzzle

    def test_invalid_json(self):
        with pytest.raises(MalformedPuzzle):
            Puzzle.from_json(b"{not json")


class TestLookups:
    def test_category_for(self, puzzle):
        assert puzzle.category_for("MOVIE").title == "SILENT ___"

    def test_category_for_unknown_word(self, puzzle):
        with pytest.raises(UnknownWord):
            puzzle.category_for("BANANA")

    def test_with_difficulties_is_positional(self, puzzle):
        pairs = puzzle.with_difficulties()
        assert [d for _, d in pairs] == [
            Difficulty.STRAIGHTFORWARD, Difficulty.MEDIUM, Difficulty.HARD, Difficulty.TRICKY
        ]
        assert [c for c, _ in pairs] == list(puzzle.categories)

    def test_with_difficulties_does_not_mutate(self, puzzle):
        before = puzzle.categories
        puzzle.with_difficulties()
        assert puzzle.categories is before

    def test_difficulty_ordering(self):
        assert Difficulty.STRAIGHTFORWARD < Difficulty.MEDIUM < Difficulty.HARD < Difficulty.TRICKY


class TestDirectConstruction:
    def test_lists_are_frozen_into_tuples(self, puzzle):
        categories = [Category(c.title, list(c.words)) for c in puzzle.categories]
        built = Puzzle(id=1, print_date="", editor="", categories=categories)
        assert isinstance(built.categories, tuple)
        assert all(isinstance(c.words, tuple) for c in built.categories)
        assert built == Puzzle(id=1, print_date="", editor="", categories=puzzle.categories)

    def test_list_built_puzzle_can_be_played(self, puzzle):
        categories = [Category(c.title, list(c.words)) for c in puzzle.categories]
        built = Puzzle(id=1, print_date="", editor="", categories=categories)
        game = GameController(built)
        for text in built.categories[0].texts:
            game.toggle_selection(game.grid.position_of(text))
        result = game.submit_guess()
        assert result.correct
        assert game.solved_categories == {built.categories[0]}
