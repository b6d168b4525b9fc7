"""Tests for pointer sampling into swipe segments."""
from __future__ import annotations

from fruitslice.pointer import PointerTracker


def _tracker() -> PointerTracker:
    return PointerTracker(min_dist_sq=36.0, ttl=120.0)


def test_move_without_press_is_ignored():
    tracker = _tracker()
    assert tracker.move((100.0, 100.0), 5.0) is None
    assert not tracker.down


def test_press_then_long_move_emits_segment():
    tracker = _tracker()
    tracker.press((0.0, 0.0), 10.0)
    slash = tracker.move((6.0, 0.0), 20.0)
    assert slash is not None
    assert slash.start == (0.0, 0.0)
    assert slash.end == (6.0, 0.0)
    assert slash.born_at == 20.0
    assert slash.ttl == 120.0
    assert tracker.state.last_move_at == 20.0


def test_short_move_dropped_but_sample_advances():
    tracker = _tracker()
    tracker.press((0.0, 0.0), 0.0)
    assert tracker.move((3.0, 4.0), 1.0) is None
    assert tracker.state.last_position == (3.0, 4.0)
    assert tracker.state.last_move_at == 0.0

    slash = tracker.move((9.0, 4.0), 2.0)
    assert slash is not None
    assert slash.start == (3.0, 4.0)


def test_release_stops_segments():
    tracker = _tracker()
    tracker.press((0.0, 0.0), 0.0)
    tracker.release()
    assert tracker.move((50.0, 50.0), 1.0) is None
    assert not tracker.down
