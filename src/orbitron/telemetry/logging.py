"""Contract for planet telemetry and structured logging sinks."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol


class Telemetry(Protocol):
    """Observes handled messages and planet decisions."""

    def emit(self, event_name: str, payload: dict) -> None:
        """Publish telemetry event to the configured sink."""


class LoggingTelemetry:
    """Forwards telemetry events to a standard library logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("orbitron.telemetry")

    def emit(self, event_name: str, payload: dict) -> None:
        self._logger.info(event_name, extra={"payload": payload})


class JsonlTelemetry:
    """Appends telemetry events to a JSONL file."""

    def __init__(self, file_path: str | Path) -> None:
        self._path = Path(file_path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, event_name: str, payload: dict) -> None:
        record = {
            "event": event_name,
            "emitted_at": datetime.now(timezone.utc).isoformat(),
            "payload": payload,
        }
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, default=str) + "\n")

    def read_events(self) -> list[dict[str, Any]]:
        if not self._path.exists():
            return []

        events: list[dict[str, Any]] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                events.append(json.loads(line))
        return events


class FanoutTelemetry:
    """Sends every event to each wrapped sink."""

    def __init__(self, *sinks: Telemetry) -> None:
        self._sinks = sinks

    def emit(self, event_name: str, payload: dict) -> None:
        for sink in self._sinks:
            sink.emit(event_name, payload)
