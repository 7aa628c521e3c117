import logging
from pathlib import Path

from orbitron.config import Settings
from orbitron.messages import StartPlanetAI, SunrayMessage
from orbitron.planet import create_planet
from orbitron.telemetry import FanoutTelemetry, JsonlTelemetry, LoggingTelemetry


def test_jsonl_telemetry_appends_events(tmp_path: Path) -> None:
    sink = JsonlTelemetry(tmp_path / "telemetry" / "events.jsonl")

    sink.emit("planet_event", {"planet_id": 1})
    sink.emit("planet_event", {"planet_id": 2})

    events = sink.read_events()
    assert [event["payload"]["planet_id"] for event in events] == [1, 2]
    assert events[0]["event"] == "planet_event"


def test_jsonl_telemetry_reads_nothing_before_first_event(tmp_path: Path) -> None:
    assert JsonlTelemetry(tmp_path / "events.jsonl").read_events() == []


def test_logging_telemetry_writes_to_logger(caplog) -> None:
    logger = logging.getLogger("orbitron.test_telemetry")

    with caplog.at_level(logging.INFO, logger="orbitron.test_telemetry"):
        LoggingTelemetry(logger).emit("sunray_rejected", {"planet_id": 3})

    assert caplog.records[0].getMessage() == "sunray_rejected"
    assert caplog.records[0].payload == {"planet_id": 3}


def test_router_feeds_jsonl_sink_through_fanout(tmp_path: Path) -> None:
    sink = JsonlTelemetry(tmp_path / "events.jsonl")
    router = create_planet(Settings(planet_id=8), telemetry=FanoutTelemetry(sink))

    router.handle_orchestrator(StartPlanetAI())
    router.handle_orchestrator(SunrayMessage())
    router.handle_orchestrator(SunrayMessage())

    events = sink.read_events()
    assert len(events) == 3
    assert events[-1]["payload"]["response"] == "SunrayAck(planet_id=8)"
