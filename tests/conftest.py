"""
Shut the Box - Test Configuration and Fixtures

Common fixtures and board positions for all test modules.
"""

import random

import pytest

from shut_the_box.engine.base import DiceRoll, GameState, TileSet


# =============================================================================
# BOARD POSITIONS
# =============================================================================

@pytest.fixture
def fresh_state() -> GameState:
    """All tiles open, no roll."""
    return GameState.new()


@pytest.fixture
def only_nine_open() -> GameState:
    """Tiles 1-8 closed, tile 9 still up."""
    return GameState(tiles=TileSet.from_open_labels([9]), dice=DiceRoll.none())


@pytest.fixture
def low_tiles_open() -> GameState:
    """Tiles 7, 8, 9 closed: the next roll uses a single die."""
    return GameState(tiles=TileSet.from_open_labels(range(1, 7)), dice=DiceRoll.none())


@pytest.fixture
def shut_state() -> GameState:
    """Every tile closed."""
    return GameState(tiles=TileSet.from_open_labels([]), dice=DiceRoll.none())


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def shut_sequence() -> list[tuple[tuple[int, int], tuple[int, ...]]]:
    """
    Rolls and moves that close the whole box.

    Returns:
        List of ((d1, d2), tiles_to_close)
    """
    return [
        ((6, 3), (9,)),
        ((4, 4), (8,)),
        ((3, 4), (7,)),
        ((6, 0), (6,)),
        ((5, 0), (5,)),
        ((4, 0), (4,)),
        ((6, 0), (1, 2, 3)),
    ]
