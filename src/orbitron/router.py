"""Dispatch of orchestrator and explorer messages to the planet AI."""

from __future__ import annotations

import logging
from typing import assert_never

from orbitron.ai import OrbitronAI
from orbitron.components import Combinator, Generator, PlanetState
from orbitron.messages import (
    AsteroidAck,
    AsteroidMessage,
    AvailableEnergyCellRequest,
    AvailableEnergyCellResponse,
    CombineResourceRequest,
    CombineResourceResponse,
    ExplorerToPlanet,
    GenerateResourceRequest,
    GenerateResourceResponse,
    IncomingExplorerRequest,
    InternalStateRequest,
    InternalStateResponse,
    KillPlanet,
    OrchestratorToPlanet,
    OutgoingExplorerRequest,
    PlanetToExplorer,
    PlanetToOrchestrator,
    StartPlanetAI,
    StopPlanetAI,
    SunrayAck,
    SunrayMessage,
    SupportedCombinationRequest,
    SupportedCombinationResponse,
    SupportedResourceRequest,
    SupportedResourceResponse,
)
from orbitron.telemetry import Telemetry


class PlanetMessageRouter:
    """Classifies inbound messages and wraps handler results into responses.

    The router owns no resource logic. When ``gate_when_stopped`` is set and
    the AI is stopped, sunrays are dropped, explorer requests go unanswered and
    asteroids are answered without a rocket; state requests are always served.
    """

    def __init__(
        self,
        *,
        ai: OrbitronAI,
        state: PlanetState,
        generator: Generator,
        combinator: Combinator,
        telemetry: Telemetry | None = None,
        orchestrator_id: int = 0,
        gate_when_stopped: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._ai = ai
        self._state = state
        self._generator = generator
        self._combinator = combinator
        self._telemetry = telemetry
        self._orchestrator_id = orchestrator_id
        self._gate_when_stopped = gate_when_stopped
        self._logger = logger or logging.getLogger("orbitron.router")

    @property
    def planet_id(self) -> int:
        return self._state.id

    @property
    def state(self) -> PlanetState:
        return self._state

    @property
    def ai(self) -> OrbitronAI:
        return self._ai

    def _suppressed(self) -> bool:
        return self._gate_when_stopped and not self._ai.is_running

    def handle_orchestrator(self, msg: OrchestratorToPlanet) -> PlanetToOrchestrator | None:
        response: PlanetToOrchestrator | None = None
        suppressed = False

        match msg:
            case SunrayMessage(sunray=sunray):
                if self._suppressed():
                    suppressed = True
                elif not self._ai.handle_sunray(self._state, sunray):
                    response = SunrayAck(planet_id=self.planet_id)
            case InternalStateRequest():
                snapshot = self._ai.handle_internal_state_request(self._state)
                response = InternalStateResponse(planet_id=self.planet_id, snapshot=snapshot)
            case AsteroidMessage(asteroid=asteroid):
                if self._suppressed():
                    suppressed = True
                    rocket = None
                else:
                    rocket = self._ai.handle_asteroid(self._state, asteroid)
                response = AsteroidAck(planet_id=self.planet_id, rocket=rocket)
            case StartPlanetAI():
                if self._ai.on_start(self._state):
                    self._logger.info("planet_ai_started", extra={"planet_id": self.planet_id})
            case StopPlanetAI():
                if self._ai.on_stop(self._state):
                    self._logger.info("planet_ai_stopped", extra={"planet_id": self.planet_id})
            case IncomingExplorerRequest(explorer_id=explorer_id):
                self._ai.on_explorer_arrival(self._state, explorer_id)
            case OutgoingExplorerRequest(explorer_id=explorer_id):
                self._ai.on_explorer_departure(self._state, explorer_id)
            case KillPlanet():
                pass
            case _:
                assert_never(msg)

        self._notify(
            "orchestrator_message_handled",
            source=("orchestrator", self._orchestrator_id),
            msg=msg,
            response=response,
            suppressed=suppressed,
        )
        return response

    def handle_explorer(self, msg: ExplorerToPlanet) -> PlanetToExplorer | None:
        if self._suppressed():
            self._logger.debug(
                "explorer_message_dropped",
                extra={"planet_id": self.planet_id, "explorer_id": msg.explorer_id, "message_type": type(msg).__name__},
            )
            self._notify(
                "explorer_message_handled",
                source=("explorer", msg.explorer_id),
                msg=msg,
                response=None,
                suppressed=True,
            )
            return None

        response: PlanetToExplorer
        match msg:
            case SupportedResourceRequest():
                response = SupportedResourceResponse(
                    resource_list=self._ai.handle_supported_resources(self._generator),
                )
            case SupportedCombinationRequest():
                response = SupportedCombinationResponse(
                    combination_list=self._ai.handle_supported_combinations(self._combinator),
                )
            case GenerateResourceRequest(resource_type=resource_type):
                response = GenerateResourceResponse(
                    resource=self._ai.handle_generate(self._state, self._generator, resource_type),
                )
            case CombineResourceRequest(recipe=recipe):
                response = CombineResourceResponse(
                    complex_response=self._ai.handle_combine(self._state, self._combinator, recipe),
                )
            case AvailableEnergyCellRequest():
                response = AvailableEnergyCellResponse(
                    available_cells=self._ai.handle_available_cells(self._state),
                )
            case _:
                assert_never(msg)

        self._notify(
            "explorer_message_handled",
            source=("explorer", msg.explorer_id),
            msg=msg,
            response=response,
            suppressed=False,
        )
        return response

    def _notify(
        self,
        event_name: str,
        *,
        source: tuple[str, int],
        msg: object,
        response: object | None,
        suppressed: bool,
    ) -> None:
        payload = {
            "planet_id": self.planet_id,
            "source": source[0],
            "source_id": source[1],
            "message_type": type(msg).__name__,
            "response": repr(response) if response is not None else None,
            "suppressed": suppressed,
            "running": self._ai.is_running,
            "charged_cells": self._ai.handle_available_cells(self._state),
        }
        self._logger.debug(event_name, extra=payload)
        if self._telemetry is None:
            return
        self._telemetry.emit(event_name, payload)
