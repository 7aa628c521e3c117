"""CLI entrypoint for the Orbitron planet."""

from __future__ import annotations

import asyncio
import logging

import typer
from rich import print
from rich.logging import RichHandler

from orbitron.config import settings
from orbitron.messages import (
    AsteroidMessage,
    AvailableEnergyCellRequest,
    CombineResourceRequest,
    GenerateResourceRequest,
    IncomingExplorerRequest,
    InternalStateRequest,
    KillPlanet,
    StartPlanetAI,
    SunrayMessage,
    SupportedCombinationRequest,
    SupportedResourceRequest,
)
from orbitron.models import BasicResource, BasicResourceType, ComplexResourceRequest, ComplexResourceType
from orbitron.planet import create_planet, create_runtime

app = typer.Typer(help="Orbitron planet entrypoint")

_EXPLORER_ID = 1


@app.callback()
def main(log_level: str | None = typer.Option(None, help="Override ORBITRON_LOG_LEVEL")) -> None:
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


@app.command()
def start() -> None:
    """Show planet configuration."""
    print(
        {
            "app_name": settings.app_name,
            "planet_id": settings.planet_id,
            "planet_type": settings.planet_type.value,
            "generation_rules": [rule.value for rule in settings.generation_rules],
            "combination_rules": [rule.value for rule in settings.combination_rules],
            "gate_when_stopped": settings.gate_when_stopped,
            "telemetry_path": settings.telemetry_path,
        }
    )


@app.command()
def state() -> None:
    """Print the snapshot of a freshly created planet."""
    router = create_planet(settings)
    print(router.handle_orchestrator(InternalStateRequest()))


@app.command()
def simulate(
    sunrays: int = typer.Option(2, help="Sunrays delivered before explorers arrive"),
    resource: BasicResourceType = typer.Option(BasicResourceType.HYDROGEN, help="Basic resource to generate"),
    combine: ComplexResourceType = typer.Option(ComplexResourceType.WATER, help="Complex resource to request"),
    asteroid: bool = typer.Option(True, help="Finish with an asteroid impact"),
) -> None:
    """Run a scripted session against the planet runtime and print every response."""

    async def _run() -> list[tuple[str, object]]:
        runtime, outbox = create_runtime(settings)
        explorer_inbox: asyncio.Queue = asyncio.Queue()
        await runtime.start()

        runtime.send_from_orchestrator(StartPlanetAI())
        for _ in range(sunrays):
            runtime.send_from_orchestrator(SunrayMessage())
        runtime.send_from_orchestrator(IncomingExplorerRequest(explorer_id=_EXPLORER_ID, explorer_sink=explorer_inbox))
        runtime.send_from_explorer(SupportedResourceRequest(explorer_id=_EXPLORER_ID))
        runtime.send_from_explorer(SupportedCombinationRequest(explorer_id=_EXPLORER_ID))
        runtime.send_from_explorer(AvailableEnergyCellRequest(explorer_id=_EXPLORER_ID))
        runtime.send_from_explorer(GenerateResourceRequest(explorer_id=_EXPLORER_ID, resource_type=resource))
        runtime.send_from_explorer(
            CombineResourceRequest(
                explorer_id=_EXPLORER_ID,
                recipe=ComplexResourceRequest(
                    target=combine,
                    first=BasicResource(BasicResourceType.HYDROGEN),
                    second=BasicResource(BasicResourceType.OXYGEN),
                ),
            )
        )
        runtime.send_from_orchestrator(InternalStateRequest())
        if asteroid:
            runtime.send_from_orchestrator(AsteroidMessage())
        runtime.send_from_orchestrator(KillPlanet())

        await asyncio.wait_for(runtime.wait_closed(), timeout=5)

        transcript: list[tuple[str, object]] = []
        while not outbox.empty():
            transcript.append(("orchestrator", outbox.get_nowait()))
        while not explorer_inbox.empty():
            transcript.append((f"explorer:{_EXPLORER_ID}", explorer_inbox.get_nowait()))
        transcript.append(("status", runtime.status.value))
        return transcript

    for recipient, response in asyncio.run(_run()):
        print({"to": recipient, "response": response})


if __name__ == "__main__":
    app()
