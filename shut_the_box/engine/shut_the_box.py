"""
Shut the Box - Rule Engine

This module implements the rules of the classic tile-flipping dice game.
All methods are stateless class methods that operate on immutable inputs.

Rules:
    - Tiles 1-9 start open
    - Roll two dice while any of tiles 7, 8, 9 is open, otherwise one die
    - Close any set of open tiles whose labels add up to the roll
    - The game ends when no set of open tiles matches the roll
    - Score is the sum of the tiles left open; shutting the box scores 0
"""

from itertools import combinations
from typing import Iterable, Iterator
import random

from shut_the_box.engine.base import (
    DIE_FACES,
    HIGH_TILES,
    NUM_TILES,
    DiceRoll,
    GameState,
    GameStatus,
    MoveResult,
)
from shut_the_box.engine.validators import validate_die_values


class ShutTheBoxEngine:
    """
    Stateless engine for Shut the Box.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    # Constants
    NUM_TILES = NUM_TILES
    DIE_FACES = DIE_FACES
    HIGH_TILES = HIGH_TILES

    @classmethod
    def new_game(cls) -> GameState:
        """Create a fresh game: every tile open, no roll yet."""
        return GameState.new()

    @classmethod
    def reset(cls, state: GameState | None = None) -> GameState:
        """
        Return a game to its initial configuration.

        The previous state is not needed; it is accepted so callers can
        treat reset like every other transition.
        """
        return cls.new_game()

    @classmethod
    def dice_count(cls, state: GameState) -> int:
        """
        Number of dice to roll for the next turn.

        Two dice while any of the high tiles (7, 8, 9) is open, otherwise one.
        """
        if any(state.tiles.flags[label - 1] for label in cls.HIGH_TILES):
            return 2
        return 1

    @classmethod
    def roll_dice(
        cls,
        state: GameState,
        rng: random.Random | None = None
    ) -> GameState:
        """
        Roll the dice for a new turn.

        Args:
            state: Current game state
            rng: Random source (module-level random when omitted)

        Returns:
            New GameState carrying the rolled values. A second die that is
            not in play is recorded as 0.
        """
        source = rng if rng is not None else random
        d1 = source.randint(1, cls.DIE_FACES)
        d2 = source.randint(1, cls.DIE_FACES) if cls.dice_count(state) == 2 else 0
        return GameState(tiles=state.tiles, dice=DiceRoll(d1, d2))

    @classmethod
    def set_dice_values(cls, state: GameState, d1: int, d2: int = 0) -> GameState:
        """
        Register die faces determined outside the engine.

        The values are trusted as observed; they are not checked against
        how many dice the current tiles call for.

        Args:
            state: Current game state
            d1: First die face (1-6)
            d2: Second die face (1-6), or 0 when only one die is in play

        Returns:
            New GameState carrying the supplied values

        Raises:
            ValueError: If a value is not a valid face
        """
        d1, d2 = validate_die_values(d1, d2, faces=cls.DIE_FACES)
        return GameState(tiles=state.tiles, dice=DiceRoll(d1, d2))

    @classmethod
    def current_sum(cls, state: GameState) -> int:
        """Required move sum; 0 when no roll is active."""
        return state.current_sum

    @classmethod
    def get_tiles(cls, state: GameState) -> tuple[bool, ...]:
        """Snapshot of the open/closed flags, index i is tile i+1."""
        return tuple(state.tiles.flags)

    @classmethod
    def _rejection_reason(cls, state: GameState, labels: frozenset) -> str:
        """
        Single definition of move legality.

        Returns an empty string for a legal move, otherwise a short
        explanation of the first rule it breaks.
        """
        target = state.current_sum
        if target == 0:
            return "No active roll."
        if not labels:
            return "Select at least one tile."

        # 3.0 and True hash like tile labels 3 and 1 but are not tiles
        open_labels = set(state.tiles.open_labels)
        unavailable = {
            label for label in labels
            if isinstance(label, bool) or not isinstance(label, int) or label not in open_labels
        }
        if unavailable:
            shown = ", ".join(str(label) for label in sorted(unavailable, key=str))
            return f"Tiles not open: {shown}."

        total = sum(labels)
        if total != target:
            return f"Tiles add up to {total}, roll is {target}."
        return ""

    @classmethod
    def is_valid_move(cls, state: GameState, candidate: Iterable[int]) -> bool:
        """
        Check whether a set of tile labels is a legal move.

        A move is legal when it is non-empty, every label is an open tile
        and the labels add up exactly to the current roll.

        Args:
            state: Current game state
            candidate: Tile labels to flip (duplicates collapse)

        Returns:
            True if the move may be applied
        """
        return not cls._rejection_reason(state, frozenset(candidate))

    @classmethod
    def iter_valid_moves(cls, state: GameState) -> Iterator[tuple[int, ...]]:
        """
        Yield every legal move for the current roll.

        Exhaustive over all non-empty subsets of the open tiles (at most
        2^9 - 1), smallest subsets first, labels ascending.
        """
        open_labels = state.tiles.open_labels
        for size in range(1, len(open_labels) + 1):
            for combo in combinations(open_labels, size):
                if cls.is_valid_move(state, combo):
                    yield combo

    @classmethod
    def get_valid_moves(cls, state: GameState) -> tuple[tuple[int, ...], ...]:
        """All legal moves for the current roll (empty when no roll is active)."""
        return tuple(cls.iter_valid_moves(state))

    @classmethod
    def has_valid_move(cls, state: GameState) -> bool:
        """Returns True as soon as one legal move is found."""
        return next(cls.iter_valid_moves(state), None) is not None

    @classmethod
    def make_move(cls, state: GameState, candidate: Iterable[int]) -> MoveResult:
        """
        Flip a set of tiles down.

        An invalid move is reported, not raised, and leaves the state
        untouched. A valid move closes every listed tile and clears the
        roll so the next turn starts with a fresh roll.

        Args:
            state: Current game state
            candidate: Tile labels to flip

        Returns:
            MoveResult with the resulting state
        """
        labels = frozenset(candidate)
        reason = cls._rejection_reason(state, labels)
        if reason:
            return MoveResult(success=False, state=state, reason=reason)

        new_state = GameState(tiles=state.tiles.close(labels), dice=DiceRoll.none())
        return MoveResult(
            success=True,
            state=new_state,
            closed_labels=tuple(sorted(labels)),
        )

    @classmethod
    def is_game_over(cls, state: GameState) -> bool:
        """
        Check whether the game has ended.

        A shut box is always over. Otherwise the game is over only relative
        to an active roll: when no set of open tiles adds up to it.
        """
        if state.tiles.is_shut:
            return True
        if not state.dice.is_active:
            return False
        return not cls.has_valid_move(state)

    @classmethod
    def get_score(cls, state: GameState) -> int:
        """Sum of the open tile labels. Lower is better; 0 is a shut box."""
        return state.tiles.score

    @classmethod
    def get_status(cls, state: GameState) -> GameStatus:
        """Classify the state for the caller's turn sequencing."""
        if state.tiles.is_shut:
            return GameStatus.BOX_SHUT
        if not state.dice.is_active:
            return GameStatus.AWAITING_ROLL
        if cls.has_valid_move(state):
            return GameStatus.AWAITING_MOVE
        return GameStatus.GAME_OVER
