"""
Shut the Box - View Models

Pydantic models describing what a front end renders: the board, the dice
readout, the score line and whether the current selection may be submitted.
"""

from typing import Iterable

from pydantic import BaseModel, Field

from shut_the_box.engine.base import GameState, GameStatus
from shut_the_box.engine.shut_the_box import ShutTheBoxEngine


class GameView(BaseModel):
    """Read-only snapshot of a game."""

    tiles: list[bool] = Field(min_length=9, max_length=9)
    dice: tuple[int, int] = (0, 0)
    current_sum: int = 0
    score: int = 45
    status: GameStatus = GameStatus.AWAITING_ROLL
    is_over: bool = False
    open_labels: list[int] = Field(default_factory=list)
    valid_moves: list[list[int]] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_state(cls, state: GameState) -> "GameView":
        return cls(
            tiles=list(ShutTheBoxEngine.get_tiles(state)),
            dice=state.dice.values,
            current_sum=ShutTheBoxEngine.current_sum(state),
            score=ShutTheBoxEngine.get_score(state),
            status=ShutTheBoxEngine.get_status(state),
            is_over=ShutTheBoxEngine.is_game_over(state),
            open_labels=list(state.tiles.open_labels),
            valid_moves=[list(move) for move in ShutTheBoxEngine.get_valid_moves(state)],
        )

    @property
    def message(self) -> str:
        """Status line shown under the board."""
        if self.status is GameStatus.BOX_SHUT:
            return "Perfect score! You shut the box!"
        if self.status is GameStatus.GAME_OVER:
            return f"Game over! Final score: {self.score}"
        if self.status is GameStatus.AWAITING_ROLL:
            return "Roll the dice"
        return f"Select tiles that add up to {self.current_sum}"


class SelectionView(BaseModel):
    """Tiles the player has picked but not yet submitted."""

    selected: list[int] = Field(default_factory=list)
    total: int = 0
    can_submit: bool = False

    @classmethod
    def from_selection(cls, state: GameState, selected: Iterable[int]) -> "SelectionView":
        labels = sorted(set(selected))
        return cls(
            selected=labels,
            total=sum(labels),
            can_submit=ShutTheBoxEngine.is_valid_move(state, labels),
        )
