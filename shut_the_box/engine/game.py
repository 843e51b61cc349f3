"""
Shut the Box - Game Handle

A caller-owned, mutable handle around one GameState. The rule engine itself
is stateless; this class keeps the current state for a single front end and
exposes the library boundary it calls into (bool/int results instead of
state values). Separate handles never share anything.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Iterable

from shut_the_box.engine.base import GameState, GameStatus
from shut_the_box.engine.events import EventPayload, GameEvent, classify_transition
from shut_the_box.engine.shut_the_box import ShutTheBoxEngine

if TYPE_CHECKING:
    from shut_the_box.config.settings import Settings

logger = logging.getLogger(__name__)

EventCallback = Callable[[EventPayload], None]


class ShutTheBoxGame:
    """One game in progress, owned by exactly one caller."""

    def __init__(
        self,
        state: GameState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._state = state if state is not None else ShutTheBoxEngine.new_game()
        self._rng = rng if rng is not None else random.Random()
        self._listeners: list[EventCallback] = []

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ShutTheBoxGame:
        """Create a game whose dice are seeded from settings, if configured."""
        if settings is None:
            from shut_the_box.config.settings import get_settings

            settings = get_settings()
        return cls(rng=random.Random(settings.rng_seed))

    # ── Listeners ─────────────────────────────────────────────────────────

    def subscribe(self, callback: EventCallback) -> None:
        """Register a callback invoked after every state change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: EventCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self, event: GameEvent, **data) -> None:
        payload = EventPayload(event=event, state=self._state, data=data)
        for callback in list(self._listeners):
            try:
                callback(payload)
            except Exception:
                logger.exception("Listener failed handling %s", event.name)

    def _transition(self, new_state: GameState, default: GameEvent | None, **data) -> None:
        before = self._state
        self._state = new_state
        event = classify_transition(before, new_state) or default
        if event is None:
            return
        if event is GameEvent.GAME_OVER:
            logger.info("Game over with roll %d, final score %d", new_state.current_sum, self.get_score())
        elif event is GameEvent.BOX_SHUT:
            logger.info("Box shut, perfect score")
        self._emit(event, **data)

    @staticmethod
    def _roll_event(new_state: GameState) -> GameEvent | None:
        # re-rolling identical faces is not a state change but is still a roll
        if new_state.tiles.is_shut:
            return None
        if ShutTheBoxEngine.is_game_over(new_state):
            return GameEvent.GAME_OVER
        return GameEvent.DICE_ROLLED

    # ── Read-only queries ─────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return ShutTheBoxEngine.get_status(self._state)

    def current_sum(self) -> int:
        return ShutTheBoxEngine.current_sum(self._state)

    def get_tiles(self) -> tuple[bool, ...]:
        return ShutTheBoxEngine.get_tiles(self._state)

    def get_score(self) -> int:
        return ShutTheBoxEngine.get_score(self._state)

    def is_game_over(self) -> bool:
        return ShutTheBoxEngine.is_game_over(self._state)

    def is_valid_move(self, candidate: Iterable[int]) -> bool:
        return ShutTheBoxEngine.is_valid_move(self._state, candidate)

    def valid_moves(self) -> tuple[tuple[int, ...], ...]:
        return ShutTheBoxEngine.get_valid_moves(self._state)

    def view(self):
        """Pydantic snapshot of the game for rendering."""
        from shut_the_box.models import GameView

        return GameView.from_state(self._state)

    # ── State changes ─────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start over with every tile open and no roll."""
        self._transition(ShutTheBoxEngine.reset(self._state), GameEvent.GAME_STARTED)
        logger.debug("Game reset")

    def roll_dice(self) -> tuple[int, int]:
        """
        Roll for a new turn.

        Returns:
            (d1, d2), with d2 == 0 when only one die is in play
        """
        new_state = ShutTheBoxEngine.roll_dice(self._state, rng=self._rng)
        logger.debug("Rolled %s", new_state.dice.values)
        self._transition(new_state, self._roll_event(new_state), dice=new_state.dice.values)
        return new_state.dice.values

    def set_dice_values(self, d1: int, d2: int = 0) -> None:
        """
        Register die faces observed by the front end.

        Raises:
            ValueError: If a value is not a valid face
        """
        new_state = ShutTheBoxEngine.set_dice_values(self._state, d1, d2)
        logger.debug("Dice set to %s", new_state.dice.values)
        self._transition(new_state, self._roll_event(new_state), dice=new_state.dice.values)

    def make_move(self, candidate: Iterable[int]) -> bool:
        """
        Flip the selected tiles down.

        Returns:
            True if the move was applied, False if it was rejected (state
            unchanged)
        """
        result = ShutTheBoxEngine.make_move(self._state, candidate)
        if not result.success:
            logger.debug("Move rejected: %s", result.reason)
            self._emit(GameEvent.MOVE_REJECTED, reason=result.reason)
            return False

        logger.debug("Closed tiles %s", result.closed_labels)
        self._transition(result.state, GameEvent.MOVE_MADE, closed=result.closed_labels)
        return True
