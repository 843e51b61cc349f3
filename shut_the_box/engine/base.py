"""
Shut the Box - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a game state
can be handed to the presentation layer without exposing anything it could
mutate.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterable, Sequence

from shut_the_box.engine.validators import (
    validate_die_values,
    validate_tile_flags,
    validate_tile_label,
)

NUM_TILES = 9
DIE_FACES = 6
HIGH_TILES = (7, 8, 9)


class GameStatus(Enum):
    """Where a game currently stands."""
    AWAITING_ROLL = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()
    BOX_SHUT = auto()


@dataclass(frozen=True)
class DiceRoll:
    """
    The active pair of die values.

    Attributes:
        d1: First die (1-6), or 0 when no roll is active
        d2: Second die (1-6), or 0 when only one die is in play
    """
    d1: int = 0
    d2: int = 0

    def __post_init__(self) -> None:
        """Validate die values; (0, 0) is the "no roll" sentinel."""
        if (self.d1, self.d2) != (0, 0):
            validate_die_values(self.d1, self.d2)

    @classmethod
    def none(cls) -> "DiceRoll":
        """The empty roll: no dice have been registered this turn."""
        return cls(0, 0)

    @property
    def total(self) -> int:
        return self.d1 + self.d2

    @property
    def is_active(self) -> bool:
        """Returns True if a roll is waiting for a move."""
        return self.total > 0

    @property
    def is_single_die(self) -> bool:
        return self.is_active and self.d2 == 0

    @property
    def values(self) -> tuple[int, int]:
        return (self.d1, self.d2)


@dataclass(frozen=True)
class TileSet:
    """
    Open/closed flags for tiles 1-9.

    Attributes:
        flags: Tuple of 9 booleans, index i is tile label i+1.
               True = open (still in play), False = closed (flipped down).
    """
    flags: tuple[bool, ...] = field(default=(True,) * NUM_TILES)

    def __post_init__(self) -> None:
        validate_tile_flags(self.flags, NUM_TILES)

    @classmethod
    def all_open(cls) -> "TileSet":
        """Create a fresh box with every tile up."""
        return cls(flags=(True,) * NUM_TILES)

    @classmethod
    def from_sequence(cls, flags: Sequence[bool]) -> "TileSet":
        """Create a TileSet from any sequence of flags."""
        return cls(flags=tuple(flags))

    @classmethod
    def from_open_labels(cls, labels: Iterable[int]) -> "TileSet":
        """Create a TileSet where exactly the given labels are open."""
        open_set = {validate_tile_label(label, NUM_TILES) for label in labels}
        return cls(flags=tuple(
            label in open_set for label in range(1, NUM_TILES + 1)
        ))

    def is_open(self, label: int) -> bool:
        """Check whether a tile label is still up."""
        validate_tile_label(label, NUM_TILES)
        return self.flags[label - 1]

    @property
    def open_labels(self) -> tuple[int, ...]:
        return tuple(i + 1 for i, up in enumerate(self.flags) if up)

    @property
    def closed_labels(self) -> tuple[int, ...]:
        return tuple(i + 1 for i, up in enumerate(self.flags) if not up)

    @property
    def is_shut(self) -> bool:
        """Returns True if every tile has been flipped down."""
        return not any(self.flags)

    @property
    def score(self) -> int:
        """Sum of the labels still open."""
        return sum(self.open_labels)

    def close(self, labels: Iterable[int]) -> "TileSet":
        """Return a copy with the given labels flipped down."""
        to_close = {validate_tile_label(label, NUM_TILES) for label in labels}
        return TileSet(flags=tuple(
            up and (i + 1) not in to_close for i, up in enumerate(self.flags)
        ))


@dataclass(frozen=True)
class GameState:
    """
    Complete state of one game.

    Attributes:
        tiles: Which tiles are open
        dice: The active roll, (0, 0) between moves
    """
    tiles: TileSet = field(default_factory=TileSet.all_open)
    dice: DiceRoll = field(default_factory=DiceRoll.none)

    @classmethod
    def new(cls) -> "GameState":
        """All tiles open, no roll yet."""
        return cls(tiles=TileSet.all_open(), dice=DiceRoll.none())

    @property
    def current_sum(self) -> int:
        return self.dice.total

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameState":
        """Create GameState from its plain-data form."""
        tiles = data.get("tiles", [True] * NUM_TILES)
        d1, d2 = data.get("dice", [0, 0])
        return cls(
            tiles=TileSet.from_sequence(tiles),
            dice=DiceRoll(d1, d2),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data for the presentation layer."""
        return {
            "tiles": list(self.tiles.flags),
            "dice": list(self.dice.values),
        }


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of submitting a move.

    Attributes:
        success: Whether the move was accepted
        state: Game state after the attempt (the input state on failure)
        closed_labels: Tiles flipped down by this move, ascending
        reason: Why the move was rejected (empty on success)
    """
    success: bool
    state: GameState
    closed_labels: tuple[int, ...] = field(default_factory=tuple)
    reason: str = ""

    def __bool__(self) -> bool:
        return self.success
