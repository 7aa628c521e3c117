from __future__ import annotations

from orbitron.ai import NO_CHARGED_CELL
from orbitron.config import Settings
from orbitron.messages import (
    AsteroidAck,
    AsteroidMessage,
    AvailableEnergyCellRequest,
    AvailableEnergyCellResponse,
    CombineResourceRequest,
    CombineResourceResponse,
    GenerateResourceRequest,
    GenerateResourceResponse,
    IncomingExplorerRequest,
    InternalStateRequest,
    InternalStateResponse,
    KillPlanet,
    OutgoingExplorerRequest,
    StartPlanetAI,
    StopPlanetAI,
    SunrayAck,
    SunrayMessage,
    SupportedCombinationRequest,
    SupportedCombinationResponse,
    SupportedResourceRequest,
    SupportedResourceResponse,
)
from orbitron.models import (
    BasicResource,
    BasicResourceType,
    CombineFailure,
    ComplexResourceRequest,
    ComplexResourceType,
    PlanetType,
    to_generic,
)
from orbitron.planet import create_planet

EXPLORER = 11
R1 = BasicResource(BasicResourceType.HYDROGEN)
R2 = BasicResource(BasicResourceType.OXYGEN)


class RecordingTelemetry:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def emit(self, event_name: str, payload: dict) -> None:
        self.events.append((event_name, payload))


def _build_router(*, started: bool = True, telemetry=None, **overrides):
    config = Settings(planet_id=42, telemetry_enabled=False, **overrides)
    router = create_planet(config, telemetry=telemetry)
    if started:
        router.handle_orchestrator(StartPlanetAI())
    return router


def _charged(router) -> int:
    response = router.handle_explorer(AvailableEnergyCellRequest(explorer_id=EXPLORER))
    return response.available_cells


def test_sunray_on_empty_cell_is_absorbed_silently() -> None:
    router = _build_router()

    assert router.handle_orchestrator(SunrayMessage()) is None
    assert _charged(router) == 1


def test_second_sunray_is_rejected_with_ack() -> None:
    router = _build_router()
    router.handle_orchestrator(SunrayMessage())

    assert router.handle_orchestrator(SunrayMessage()) == SunrayAck(planet_id=42)
    assert _charged(router) == 1


def test_generate_hydrogen_consumes_charge() -> None:
    router = _build_router()
    router.handle_orchestrator(SunrayMessage())

    response = router.handle_explorer(
        GenerateResourceRequest(explorer_id=EXPLORER, resource_type=BasicResourceType.HYDROGEN)
    )

    assert response == GenerateResourceResponse(resource=BasicResource(BasicResourceType.HYDROGEN))
    assert _charged(router) == 0


def test_combine_water_without_charge_returns_inputs() -> None:
    router = _build_router()

    response = router.handle_explorer(
        CombineResourceRequest(explorer_id=EXPLORER, recipe=ComplexResourceRequest(ComplexResourceType.WATER, R1, R2))
    )

    assert response == CombineResourceResponse(
        complex_response=CombineFailure(NO_CHARGED_CELL, to_generic(R1), to_generic(R2))
    )


def test_combine_diamond_is_unsupported_regardless_of_charge() -> None:
    for charge in (False, True):
        router = _build_router()
        if charge:
            router.handle_orchestrator(SunrayMessage())
        carbon = BasicResource(BasicResourceType.CARBON)

        response = router.handle_explorer(
            CombineResourceRequest(
                explorer_id=EXPLORER,
                recipe=ComplexResourceRequest(ComplexResourceType.DIAMOND, carbon, carbon),
            )
        )

        failure = response.complex_response
        assert isinstance(failure, CombineFailure)
        assert "Diamond" in failure.reason
        assert (failure.first, failure.second) == (to_generic(carbon), to_generic(carbon))
        assert _charged(router) == int(charge)


def test_rocketless_planet_with_full_cell_loses_to_asteroid() -> None:
    router = _build_router(planet_type=PlanetType.B)
    router.handle_orchestrator(SunrayMessage())

    assert router.handle_orchestrator(AsteroidMessage()) == AsteroidAck(planet_id=42, rocket=None)
    assert _charged(router) == 1


def test_rocket_capable_planet_survives_asteroid() -> None:
    router = _build_router(
        planet_type=PlanetType.C,
        generation_rules=[BasicResourceType.CARBON],
        combination_rules=[ComplexResourceType.DIAMOND],
    )
    router.handle_orchestrator(SunrayMessage())

    response = router.handle_orchestrator(AsteroidMessage())

    assert isinstance(response, AsteroidAck)
    assert response.rocket is not None
    assert _charged(router) == 0


def test_supported_lists_and_state_snapshot() -> None:
    router = _build_router()

    resources = router.handle_explorer(SupportedResourceRequest(explorer_id=EXPLORER))
    combinations = router.handle_explorer(SupportedCombinationRequest(explorer_id=EXPLORER))
    state = router.handle_orchestrator(InternalStateRequest())

    assert resources == SupportedResourceResponse(
        resource_list=frozenset({BasicResourceType.HYDROGEN, BasicResourceType.OXYGEN})
    )
    assert combinations == SupportedCombinationResponse(combination_list=frozenset({ComplexResourceType.WATER}))
    assert isinstance(state, InternalStateResponse)
    assert state.snapshot.energy_cells == (False,)
    assert state.snapshot.has_rocket is False


def test_topology_and_kill_messages_are_no_ops() -> None:
    router = _build_router()
    before = router.handle_orchestrator(InternalStateRequest()).snapshot

    assert router.handle_orchestrator(IncomingExplorerRequest(explorer_id=EXPLORER)) is None
    assert router.handle_orchestrator(OutgoingExplorerRequest(explorer_id=EXPLORER)) is None
    assert router.handle_orchestrator(KillPlanet()) is None
    assert router.handle_orchestrator(StartPlanetAI()) is None
    assert router.handle_orchestrator(InternalStateRequest()).snapshot == before


def test_stopped_planet_suppresses_decisions_but_reports_state() -> None:
    router = _build_router(started=False)

    assert router.handle_orchestrator(SunrayMessage()) is None
    assert router.handle_explorer(AvailableEnergyCellRequest(explorer_id=EXPLORER)) is None
    assert router.handle_orchestrator(AsteroidMessage()) == AsteroidAck(planet_id=42, rocket=None)
    assert router.handle_orchestrator(InternalStateRequest()).snapshot.energy_cells == (False,)


def test_stop_signal_gates_again_after_start() -> None:
    router = _build_router()
    router.handle_orchestrator(SunrayMessage())
    assert router.handle_orchestrator(StopPlanetAI()) is None

    assert router.handle_explorer(
        GenerateResourceRequest(explorer_id=EXPLORER, resource_type=BasicResourceType.OXYGEN)
    ) is None
    assert router.handle_orchestrator(InternalStateRequest()).snapshot.energy_cells == (True,)


def test_ungated_planet_handles_messages_while_stopped() -> None:
    router = _build_router(started=False, gate_when_stopped=False)

    assert router.handle_orchestrator(SunrayMessage()) is None
    assert router.handle_explorer(AvailableEnergyCellRequest(explorer_id=EXPLORER)) == AvailableEnergyCellResponse(
        available_cells=1
    )


def test_telemetry_observes_each_handled_message() -> None:
    telemetry = RecordingTelemetry()
    router = _build_router(started=False, telemetry=telemetry)

    router.handle_orchestrator(StartPlanetAI())
    router.handle_orchestrator(SunrayMessage())
    router.handle_explorer(GenerateResourceRequest(explorer_id=EXPLORER, resource_type=BasicResourceType.HYDROGEN))

    names = [name for name, _ in telemetry.events]
    assert names == ["orchestrator_message_handled", "orchestrator_message_handled", "explorer_message_handled"]
    last = telemetry.events[-1][1]
    assert last["source"] == "explorer"
    assert last["source_id"] == EXPLORER
    assert last["message_type"] == "GenerateResourceRequest"
    assert last["charged_cells"] == 0
