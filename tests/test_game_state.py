"""
Tests for the GameState snapshot.
"""

import dataclasses

import pytest

from snek.domain.constants import RIGHT
from snek.domain.game_state import GameState, GameStatus


def make_state(**overrides):
    fields = dict(
        status=GameStatus.RUNNING,
        ticks=4,
        tick_interval_ms=180,
        last_observed_length=2,
        body=((0, 0), (10, 0)),
        direction=RIGHT,
        food=(20, 20),
        food_lifespan=97,
        width=30,
        height=30,
        size=10,
    )
    fields.update(overrides)
    return GameState(**fields)


class TestGameState:
    def test_head_and_length(self):
        state = make_state()
        assert state.head == (10, 0)
        assert state.length == 2

    def test_print_board(self):
        """print_board() marks head, body and food, top row first."""
        assert make_state().print_board() == "SH.\n...\n..F"

    def test_print_board_without_food(self):
        assert make_state(food=None, body=((10, 10),)).print_board() == "...\n.H.\n..."

    def test_snapshot_is_immutable(self):
        state = make_state()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.ticks = 5

    def test_repr(self):
        text = repr(make_state())
        assert "status=running" in text
        assert "length=2" in text
        assert "interval=180ms" in text
