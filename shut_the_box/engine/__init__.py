"""
Shut the Box Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, move validation, game-over detection and scoring.
"""

from shut_the_box.engine.base import (
    DiceRoll,
    GameState,
    GameStatus,
    MoveResult,
    TileSet,
)
from shut_the_box.engine.events import EventPayload, GameEvent
from shut_the_box.engine.shut_the_box import ShutTheBoxEngine
from shut_the_box.engine.game import ShutTheBoxGame

__all__ = [
    # Data Classes
    "DiceRoll",
    "TileSet",
    "GameState",
    "MoveResult",
    "EventPayload",
    # Enums
    "GameStatus",
    "GameEvent",
    # Engine
    "ShutTheBoxEngine",
    "ShutTheBoxGame",
]
