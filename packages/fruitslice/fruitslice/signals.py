"""In-memory pub/sub bus for game events, flushed once per frame."""
from __future__ import annotations

import sys
from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

GAME_STARTED = "game_started"
SPAWNED = "spawned"
SLICED = "sliced"
BOMB_HIT = "bomb_hit"
MISSED = "missed"
SCORED = "scored"
GAME_OVER = "game_over"

ALL_SIGNALS = (GAME_STARTED, SPAWNED, SLICED, BOMB_HIT, MISSED, SCORED, GAME_OVER)


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        """Dispatch queued signals. A failing handler does not stop the rest."""
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                try:
                    handler(signal_name, data)
                except Exception:
                    print(
                        f"fruitslice: {signal_name} handler error: {sys.exc_info()[1]}",
                        file=sys.stderr,
                    )
