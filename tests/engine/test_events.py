"""Tests for shut_the_box/engine/events.py: event types and classification."""

from shut_the_box.engine.base import DiceRoll, GameState, TileSet
from shut_the_box.engine.events import EventPayload, GameEvent, classify_transition


def _state(open_labels, d1=0, d2=0) -> GameState:
    return GameState(tiles=TileSet.from_open_labels(open_labels), dice=DiceRoll(d1, d2))


# ── GameEvent enum ──────────────────────────────────────────────────────

class TestGameEvent:
    def test_all_events_defined(self):
        expected = {
            "GAME_STARTED", "DICE_ROLLED", "MOVE_MADE",
            "MOVE_REJECTED", "BOX_SHUT", "GAME_OVER",
        }
        assert {e.name for e in GameEvent} == expected

    def test_events_are_unique(self):
        values = [e.value for e in GameEvent]
        assert len(values) == len(set(values))


# ── EventPayload ────────────────────────────────────────────────────────

class TestEventPayload:
    def test_minimal_payload(self):
        p = EventPayload(event=GameEvent.DICE_ROLLED, state=GameState.new())
        assert p.event == GameEvent.DICE_ROLLED
        assert p.data == {}

    def test_data_not_shared(self):
        a = EventPayload(event=GameEvent.MOVE_MADE, state=GameState.new())
        b = EventPayload(event=GameEvent.MOVE_MADE, state=GameState.new())
        a.data["closed"] = (7,)
        assert b.data == {}


# ── classify_transition ────────────────────────────────────────────────

class TestClassifyTransition:
    def test_no_change(self):
        state = _state([1, 2, 3], 2, 0)
        assert classify_transition(state, state) is None

    def test_reset(self):
        assert classify_transition(_state([4, 5], 1, 1), GameState.new()) == GameEvent.GAME_STARTED

    def test_roll(self):
        assert classify_transition(GameState.new(), _state(range(1, 10), 3, 4)) == GameEvent.DICE_ROLLED

    def test_roll_with_no_move(self):
        assert classify_transition(_state([9]), _state([9], 3, 4)) == GameEvent.GAME_OVER

    def test_move(self):
        before = _state(range(1, 10), 3, 4)
        after = _state([1, 2, 5, 6, 7, 8, 9])
        assert classify_transition(before, after) == GameEvent.MOVE_MADE

    def test_last_move_shuts_box(self):
        assert classify_transition(_state([4], 2, 2), _state([])) == GameEvent.BOX_SHUT

    def test_dice_on_shut_box(self):
        assert classify_transition(_state([]), _state([], 1, 1)) is None
