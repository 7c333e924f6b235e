"""Shared test fixtures: a known puzzle and a seeded random source."""
import copy
import random

import pytest

from daily_connections.puzzle import Puzzle


SAMPLE_PUZZLE = {
    "id": 514,
    "print_date": "2024-11-15",
    "editor": "Wyna Liu",
    "categories": [
        {"title": "SNUG", "cards": [
            {"content": "FAST", "position": 8},
            {"content": "FIRM", "position": 4},
            {"content": "SECURE", "position": 10},
            {"content": "TIGHT", "position": 14},
        ]},
        {"title": "PATRON", "cards": [
            {"content": "ACCOUNT", "position": 11},
            {"content": "CLIENT", "position": 6},
            {"content": "CONSUMER", "position": 15},
            {"content": "USE", "position": 12},
        ]},
        {"title": "WINTER ___", "cards": [
            {"content": "FROSTY", "position": 0},
            {"content": "MISTLETOE", "position": 7},
            {"content": "RAINMAKER", "position": 3},
            {"content": "SNOWMAN", "position": 1},
        ]},
        {"title": "SILENT ___", "cards": [
            {"content": "AUCTION", "position": 2},
            {"content": "MOVIE", "position": 5},
            {"content": "PARTNER", "position": 9},
            {"content": "TREATMENT", "position": 13},
        ]},
    ],
}


@pytest.fixture
def raw_puzzle():
    """Fresh copy so tests can mutate it."""
    return copy.deepcopy(SAMPLE_PUZZLE)


@pytest.fixture
def puzzle(raw_puzzle):
    return Puzzle.from_dict(raw_puzzle)


@pytest.fixture
def rng():
    return random.Random(1234)
