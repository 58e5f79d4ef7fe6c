"""
Trip event log: one JSON object per line, one file per trip.

Usage:
    from tourguide.modules.observability.logger import EventType, StructuredLogger

    events = StructuredLogger(enabled=True)
    events.log("trip_2024-02-10", EventType.ENRICHMENT, {"path": "deterministic"})

    with events.timed("trip_2024-02-10", "build_itinerary") as stats:
        ...
        stats["days"] = 3

Records land in <LOGS_DIR>/<trip_id>.jsonl.  Nothing is written unless the
logger is enabled (config.EVENT_LOG_ENABLED by default).
"""

from __future__ import annotations

import json
import threading
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import IO, Iterator

from tourguide import config


class EventType(str, Enum):
    PERFORMANCE = "PERFORMANCE"   # wall time of a planning step
    ENRICHMENT  = "ENRICHMENT"    # which path produced the itinerary


class StructuredLogger:
    """Append-only JSONL writer, safe to share between threads."""

    def __init__(self, logs_dir: Path | str | None = None, enabled: bool | None = None) -> None:
        self.logs_dir = Path(logs_dir or config.LOGS_DIR)
        self.enabled = config.EVENT_LOG_ENABLED if enabled is None else enabled
        self._lock = threading.Lock()
        self._files: dict[str, IO[str]] = {}

    def log(self, trip_id: str, event_type: EventType | str, payload: dict) -> None:
        if not self.enabled:
            return
        line = json.dumps(
            {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "trip_id": trip_id,
                "event_type": EventType(event_type).value,
                "payload": payload,
            },
            default=str,
            ensure_ascii=False,
        )
        with self._lock:
            fh = self._files.get(trip_id) or self._open(trip_id)
            fh.write(line + "\n")
            fh.flush()

    @contextmanager
    def timed(self, trip_id: str, component: str, **extra) -> Iterator[dict]:
        """
        Log a PERFORMANCE record for the wrapped block, even if it raises.
        Keys the caller adds to the yielded dict are included in the record.
        """
        stats: dict = dict(extra)
        started = time.perf_counter()
        try:
            yield stats
        finally:
            stats["component"] = component
            stats["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            self.log(trip_id, EventType.PERFORMANCE, stats)

    def close(self) -> None:
        with self._lock:
            for fh in self._files.values():
                fh.close()
            self._files.clear()

    def _open(self, trip_id: str) -> IO[str]:
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        fh = open(self.logs_dir / f"{trip_id}.jsonl", "a", encoding="utf-8")  # noqa: SIM115
        self._files[trip_id] = fh
        return fh


event_log = StructuredLogger()
