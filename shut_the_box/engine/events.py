"""
Shut the Box - Game Event Definitions

Event types and payloads emitted when a game changes state, so a
presentation layer can react without diffing state itself.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from shut_the_box.engine.base import GameState
from shut_the_box.engine.shut_the_box import ShutTheBoxEngine


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    MOVE_MADE = auto()
    MOVE_REJECTED = auto()
    BOX_SHUT = auto()
    GAME_OVER = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    state: GameState
    data: dict[str, Any] = field(default_factory=dict)


def classify_transition(before: GameState, after: GameState) -> GameEvent | None:
    """Determine the game event from a change of state."""
    if before == after:
        return None

    if after == GameState.new():
        return GameEvent.GAME_STARTED
    if after.tiles.is_shut:
        # a box that was already shut stays shut whatever dice are registered
        return None if before.tiles.is_shut else GameEvent.BOX_SHUT
    if after.tiles != before.tiles:
        return GameEvent.MOVE_MADE
    if after.dice.is_active:
        if ShutTheBoxEngine.is_game_over(after):
            return GameEvent.GAME_OVER
        return GameEvent.DICE_ROLLED
    return None
