"""Decision logic of the Orbitron planet.

Every handler receives the planet state and the recipe providers explicitly and
reports failures as return values: ``None`` for an absent resource or rocket,
``CombineFailure`` for a rejected combination. Nothing here raises for a
per-message failure and nothing here emits telemetry.
"""

from __future__ import annotations

from orbitron.components import Combinator, Generator, PlanetState
from orbitron.errors import CombinationError, GenerationError, RocketBuildError
from orbitron.lifecycle import LifecycleGate
from orbitron.models import (
    Asteroid,
    BasicResource,
    BasicResourceType,
    CombineFailure,
    CombineResult,
    CombineSuccess,
    ComplexResourceRequest,
    ComplexResourceType,
    PlanetSnapshot,
    Rocket,
    Sunray,
    to_generic,
)

NO_CHARGED_CELL = "no charged energy cell available"


def unsupported_recipe_reason(resource_type: ComplexResourceType) -> str:
    return f"there isn't a recipe for {resource_type.value}"


class OrbitronAI:
    """Reacts to orchestrator and explorer requests for one planet."""

    def __init__(self, lifecycle: LifecycleGate | None = None) -> None:
        self.lifecycle = lifecycle or LifecycleGate()

    @property
    def is_running(self) -> bool:
        return self.lifecycle.running

    def handle_sunray(self, state: PlanetState, sunray: Sunray) -> bool:
        """Charge an empty cell. ``False`` means every cell was full and the sunray is rejected."""
        return state.charge_cell(sunray)

    def handle_internal_state_request(self, state: PlanetState) -> PlanetSnapshot:
        return state.to_snapshot()

    def handle_supported_resources(self, generator: Generator) -> frozenset[BasicResourceType]:
        return generator.all_available_recipes()

    def handle_supported_combinations(self, combinator: Combinator) -> frozenset[ComplexResourceType]:
        return combinator.all_available_recipes()

    def handle_generate(
        self,
        state: PlanetState,
        generator: Generator,
        resource_type: BasicResourceType,
    ) -> BasicResource | None:
        found = state.full_cell()
        if found is None:
            return None
        if not generator.contains(resource_type):
            return None

        cell, _ = found
        try:
            return generator.make(resource_type, cell)
        except GenerationError:
            return None

    def handle_combine(
        self,
        state: PlanetState,
        combinator: Combinator,
        request: ComplexResourceRequest,
    ) -> CombineResult:
        first, second = to_generic(request.first), to_generic(request.second)
        if not combinator.contains(request.target):
            return CombineFailure(unsupported_recipe_reason(request.target), first, second)

        found = state.full_cell()
        if found is None:
            return CombineFailure(NO_CHARGED_CELL, first, second)

        cell, _ = found
        try:
            return CombineSuccess(combinator.make(request, cell))
        except CombinationError as exc:
            return CombineFailure(exc.reason, exc.first, exc.second)

    def handle_available_cells(self, state: PlanetState) -> int:
        return sum(1 for cell in state.cells_iter() if cell.charged)

    def handle_asteroid(self, state: PlanetState, asteroid: Asteroid) -> Rocket | None:
        """Hand over a rocket, building one if needed. ``None`` means the planet is destroyed."""
        if state.has_rocket():
            return state.take_rocket()
        if not state.can_have_rocket:
            return None

        found = state.full_cell()
        if found is None:
            return None

        _, index = found
        try:
            state.build_rocket(index)
        except RocketBuildError:
            return None
        return state.take_rocket()

    def on_explorer_arrival(self, state: PlanetState, explorer_id: int) -> None:
        pass

    def on_explorer_departure(self, state: PlanetState, explorer_id: int) -> None:
        pass

    def on_start(self, state: PlanetState) -> bool:
        return self.lifecycle.start()

    def on_stop(self, state: PlanetState) -> bool:
        return self.lifecycle.stop()
