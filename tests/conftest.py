"""
Shared fixtures for GameLens tests.
"""

import pytest
from gamelens.models.game import GameRecord


def build_game(**overrides) -> GameRecord:
    """Create a GameRecord with sensible defaults."""
    values = {
        "id": "g-1",
        "name": "Test Game",
        "date": "Jan 01, 2020",
        "reviews": 10,
        "plays": 100,
        "playing": 5,
        "backlogs": 20,
        "wishlists": 30,
        "developer": "DevA",
        "genre": "RPG",
        "platform": "PC",
        "final_rating": 4.0,
    }
    values.update(overrides)
    return GameRecord(**values)


@pytest.fixture
def make_game():
    """Factory fixture for GameRecord objects."""
    return build_game


@pytest.fixture
def sample_games():
    """Small dataset with multi-valued labels and one unrated game."""
    return [
        build_game(id="1", name="Alpha", plays=100, reviews=10, wishlists=40,
                   developer="DevA, DevB", genre="RPG, Adventure", platform="PC, Switch",
                   final_rating=4.0),
        build_game(id="2", name="Beta", plays=200, reviews=25, wishlists=70,
                   developer="DevA", genre="RPG", platform="PC",
                   final_rating=4.5),
        build_game(id="3", name="Gamma", plays=900, reviews=90, wishlists=300,
                   developer="DevC", genre="Shooter", platform="PlayStation 4",
                   final_rating=0.0),
        build_game(id="4", name="Delta", plays=50, reviews=3, wishlists=10,
                   developer="", genre="Puzzle", platform="PC",
                   final_rating=3.1),
    ]
