"""Typed messages exchanged between the planet, the orchestrator and explorers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from orbitron.models import (
    Asteroid,
    BasicResource,
    BasicResourceType,
    CombineResult,
    ComplexResourceRequest,
    ComplexResourceType,
    PlanetSnapshot,
    Rocket,
    Sunray,
)


class ResponseSink(Protocol):
    """Where the planet delivers responses, e.g. an ``asyncio.Queue``."""

    def put_nowait(self, item: Any) -> None:
        """Enqueue a response without blocking."""


# Orchestrator -> planet


@dataclass(frozen=True, slots=True)
class SunrayMessage:
    sunray: Sunray = field(default_factory=Sunray)


@dataclass(frozen=True, slots=True)
class InternalStateRequest:
    pass


@dataclass(frozen=True, slots=True)
class AsteroidMessage:
    asteroid: Asteroid = field(default_factory=Asteroid)


@dataclass(frozen=True, slots=True)
class StartPlanetAI:
    pass


@dataclass(frozen=True, slots=True)
class StopPlanetAI:
    pass


@dataclass(frozen=True, slots=True)
class KillPlanet:
    pass


@dataclass(frozen=True, slots=True)
class IncomingExplorerRequest:
    explorer_id: int
    explorer_sink: ResponseSink | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class OutgoingExplorerRequest:
    explorer_id: int


OrchestratorToPlanet = (
    SunrayMessage
    | InternalStateRequest
    | AsteroidMessage
    | StartPlanetAI
    | StopPlanetAI
    | KillPlanet
    | IncomingExplorerRequest
    | OutgoingExplorerRequest
)

# Planet -> orchestrator


@dataclass(frozen=True, slots=True)
class SunrayAck:
    planet_id: int


@dataclass(frozen=True, slots=True)
class InternalStateResponse:
    planet_id: int
    snapshot: PlanetSnapshot


@dataclass(frozen=True, slots=True)
class AsteroidAck:
    planet_id: int
    rocket: Rocket | None


@dataclass(frozen=True, slots=True)
class IncomingExplorerResponse:
    planet_id: int
    explorer_id: int


@dataclass(frozen=True, slots=True)
class OutgoingExplorerResponse:
    planet_id: int
    explorer_id: int


@dataclass(frozen=True, slots=True)
class KillPlanetResult:
    planet_id: int


PlanetToOrchestrator = (
    SunrayAck
    | InternalStateResponse
    | AsteroidAck
    | IncomingExplorerResponse
    | OutgoingExplorerResponse
    | KillPlanetResult
)

# Explorer -> planet


@dataclass(frozen=True, slots=True)
class SupportedResourceRequest:
    explorer_id: int


@dataclass(frozen=True, slots=True)
class SupportedCombinationRequest:
    explorer_id: int


@dataclass(frozen=True, slots=True)
class GenerateResourceRequest:
    explorer_id: int
    resource_type: BasicResourceType


@dataclass(frozen=True, slots=True)
class CombineResourceRequest:
    explorer_id: int
    recipe: ComplexResourceRequest


@dataclass(frozen=True, slots=True)
class AvailableEnergyCellRequest:
    explorer_id: int


ExplorerToPlanet = (
    SupportedResourceRequest
    | SupportedCombinationRequest
    | GenerateResourceRequest
    | CombineResourceRequest
    | AvailableEnergyCellRequest
)

# Planet -> explorer


@dataclass(frozen=True, slots=True)
class SupportedResourceResponse:
    resource_list: frozenset[BasicResourceType]


@dataclass(frozen=True, slots=True)
class SupportedCombinationResponse:
    combination_list: frozenset[ComplexResourceType]


@dataclass(frozen=True, slots=True)
class GenerateResourceResponse:
    resource: BasicResource | None


@dataclass(frozen=True, slots=True)
class CombineResourceResponse:
    complex_response: CombineResult


@dataclass(frozen=True, slots=True)
class AvailableEnergyCellResponse:
    available_cells: int


PlanetToExplorer = (
    SupportedResourceResponse
    | SupportedCombinationResponse
    | GenerateResourceResponse
    | CombineResourceResponse
    | AvailableEnergyCellResponse
)
