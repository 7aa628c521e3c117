"""Construction of a configured Orbitron planet."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from orbitron.ai import OrbitronAI
from orbitron.components import Combinator, Generator, PlanetState
from orbitron.config import Settings
from orbitron.errors import PlanetConfigurationError
from orbitron.models import (
    PLANET_CONSTRAINTS,
    BasicResourceType,
    ComplexResourceType,
    PlanetConstraints,
    PlanetType,
)
from orbitron.router import PlanetMessageRouter
from orbitron.runtime import PlanetRuntime
from orbitron.telemetry import FanoutTelemetry, JsonlTelemetry, LoggingTelemetry, Telemetry


def validate_rules(
    planet_type: PlanetType,
    generation_rules: Sequence[BasicResourceType],
    combination_rules: Sequence[ComplexResourceType],
    constraints: PlanetConstraints | None = None,
) -> None:
    constraints = constraints or PLANET_CONSTRAINTS[planet_type]
    if constraints.cells == 0 and constraints.can_have_rocket:
        raise PlanetConfigurationError(f"Planet type {planet_type.value} can build rockets but has no energy cells")
    if not generation_rules:
        raise PlanetConfigurationError("A planet needs at least one generation rule")
    if len(set(generation_rules)) != len(generation_rules):
        raise PlanetConfigurationError("Generation rules contain duplicates")
    if len(set(combination_rules)) != len(combination_rules):
        raise PlanetConfigurationError("Combination rules contain duplicates")
    if constraints.max_generation_rules is not None and len(generation_rules) > constraints.max_generation_rules:
        raise PlanetConfigurationError(
            f"Planet type {planet_type.value} allows at most {constraints.max_generation_rules} generation rule(s)"
        )
    if len(combination_rules) > constraints.max_combination_rules:
        raise PlanetConfigurationError(
            f"Planet type {planet_type.value} allows at most {constraints.max_combination_rules} combination rule(s)"
        )


def build_telemetry(config: Settings) -> Telemetry | None:
    if not config.telemetry_enabled:
        return None
    if config.telemetry_path:
        return FanoutTelemetry(LoggingTelemetry(), JsonlTelemetry(config.telemetry_path))
    return LoggingTelemetry()


def create_planet(
    config: Settings | None = None,
    *,
    telemetry: Telemetry | None = None,
) -> PlanetMessageRouter:
    """Build the planet decision engine described by ``config``.

    Defaults to Orbitron's own setup: type B, Hydrogen and Oxygen generation,
    Water combination.
    """
    config = config or Settings()
    validate_rules(config.planet_type, config.generation_rules, config.combination_rules)

    return PlanetMessageRouter(
        ai=OrbitronAI(),
        state=PlanetState(config.planet_id, config.planet_type),
        generator=Generator(config.generation_rules),
        combinator=Combinator(config.combination_rules),
        telemetry=telemetry if telemetry is not None else build_telemetry(config),
        orchestrator_id=config.orchestrator_id,
        gate_when_stopped=config.gate_when_stopped,
    )


def create_runtime(
    config: Settings | None = None,
    *,
    to_orchestrator: asyncio.Queue | None = None,
    telemetry: Telemetry | None = None,
) -> tuple[PlanetRuntime, asyncio.Queue]:
    """Build a planet and wrap it in a runtime; returns the runtime and the orchestrator outbox."""
    config = config or Settings()
    outbox = to_orchestrator if to_orchestrator is not None else asyncio.Queue(maxsize=config.queue_size)
    runtime = PlanetRuntime(
        create_planet(config, telemetry=telemetry),
        to_orchestrator=outbox,
        max_queue_size=config.queue_size,
    )
    return runtime, outbox
