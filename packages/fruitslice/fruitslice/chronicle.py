"""Event log output: stderr lines and a JSONL chronicle of game signals."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

from fruitslice.signals import ALL_SIGNALS, SignalBus


class ChronicleRecorder:
    """Subscribes to a SignalBus and accumulates structured JSONL records."""

    def __init__(self, bus: SignalBus, clock_fn: Callable[[], float]) -> None:
        """*clock_fn* returns the current simulation time in ms."""
        self._records: list[dict[str, Any]] = []
        self._clock_fn = clock_fn
        for sig in ALL_SIGNALS:
            bus.subscribe(sig, self._record)

    def _record(self, signal: str, data: dict[str, Any]) -> None:
        record: dict[str, Any] = {"t": round(self._clock_fn(), 1), "type": signal}
        record.update(data)
        self._records.append(record)

    @property
    def count(self) -> int:
        return len(self._records)

    def write(self, path: str | Path) -> int:
        """Write all records as JSONL. Returns number of lines written."""
        lines = [json.dumps(record, default=str) for record in self._records]
        Path(path).write_text("".join(f"{line}\n" for line in lines))
        return len(lines)


def print_events(bus: SignalBus) -> None:
    """Echo every game signal to stderr, one line each."""

    def handler(signal: str, data: dict[str, Any]) -> None:
        fields = " ".join(f"{k}={v}" for k, v in data.items())
        print(f"fruitslice: {signal} {fields}".rstrip(), file=sys.stderr)

    for sig in ALL_SIGNALS:
        bus.subscribe(sig, handler)
