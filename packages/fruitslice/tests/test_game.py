"""Tests for GameStatus phase transitions."""
from __future__ import annotations

import pytest

from fruitslice.game import GAME_OVER, IDLE, RUNNING, GameStatus
from fruitslice.types import InvalidTransitionError


def test_initial_phase_is_idle():
    status = GameStatus()
    assert status.phase == IDLE
    assert not status.running
    assert not status.game_over


def test_start_resets_score_and_lives():
    status = GameStatus(score=12, lives=0, phase=GAME_OVER)
    status.start(3)
    assert status.phase == RUNNING
    assert status.score == 0
    assert status.lives == 3


def test_restart_while_running():
    status = GameStatus()
    status.start(3)
    status.add_point()
    status.start(3)
    assert status.running
    assert status.score == 0


def test_add_point_only_while_running():
    status = GameStatus()
    assert status.add_point() is False
    assert status.score == 0
    status.start(3)
    assert status.add_point() is True
    assert status.score == 1


def test_lose_life_ends_game_at_zero():
    status = GameStatus()
    status.start(3)
    assert status.lose_life() is False
    assert status.lose_life() is False
    assert status.lives == 1
    assert status.lose_life() is True
    assert status.lives == 0
    assert status.game_over
    assert not status.running


def test_frozen_after_game_over():
    status = GameStatus()
    status.start(1)
    status.add_point()
    status.lose_life()
    assert status.lose_life() is False
    assert status.add_point() is False
    assert status.lives == 0
    assert status.score == 1


def test_bomb_ends_game():
    status = GameStatus()
    status.start(3)
    status.end("bomb")
    assert status.game_over
    assert not status.running


def test_end_from_idle_raises():
    status = GameStatus()
    with pytest.raises(InvalidTransitionError) as excinfo:
        status.end("bomb")
    assert excinfo.value.phase == IDLE
    assert excinfo.value.command == "bomb"


def test_unknown_command_raises():
    status = GameStatus()
    status.start(3)
    with pytest.raises(InvalidTransitionError):
        status.end("timeout")


def test_as_dict():
    status = GameStatus()
    status.start(3)
    assert status.as_dict() == {
        "score": 0,
        "lives": 3,
        "running": True,
        "game_over": False,
    }
