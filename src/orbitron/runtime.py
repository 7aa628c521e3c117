"""Asynchronous runtime that feeds orchestrator and explorer traffic to a planet."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from orbitron.messages import (
    AsteroidAck,
    ExplorerToPlanet,
    IncomingExplorerRequest,
    IncomingExplorerResponse,
    KillPlanet,
    KillPlanetResult,
    OrchestratorToPlanet,
    OutgoingExplorerRequest,
    OutgoingExplorerResponse,
    PlanetToExplorer,
    PlanetToOrchestrator,
    ResponseSink,
)
from orbitron.router import PlanetMessageRouter


class MessageOrigin(str, Enum):
    ORCHESTRATOR = "orchestrator"
    EXPLORER = "explorer"


class PlanetStatus(str, Enum):
    """Lifecycle states of the runtime loop itself."""

    IDLE = "idle"
    ALIVE = "alive"
    KILLED = "killed"
    DESTROYED = "destroyed"


class PlanetRuntime:
    """Queue-backed worker that handles one message at a time.

    Orchestrator and explorer messages share a single inbox, so the router is
    never re-entered and each channel keeps its arrival order.
    """

    def __init__(
        self,
        router: PlanetMessageRouter,
        *,
        to_orchestrator: ResponseSink,
        max_queue_size: int = 100,
        logger: logging.Logger | None = None,
    ) -> None:
        self._router = router
        self._to_orchestrator = to_orchestrator
        self._logger = logger or logging.getLogger("orbitron.runtime")

        self._explorers: dict[int, ResponseSink] = {}
        self._inbox: asyncio.Queue[tuple[MessageOrigin, OrchestratorToPlanet | ExplorerToPlanet]] = asyncio.Queue(
            maxsize=max_queue_size
        )
        self._worker_task: asyncio.Task[None] | None = None
        self._status = PlanetStatus.IDLE

    @property
    def status(self) -> PlanetStatus:
        return self._status

    @property
    def router(self) -> PlanetMessageRouter:
        return self._router

    def explorers(self) -> list[int]:
        return sorted(self._explorers)

    def register_explorer(self, explorer_id: int, sink: ResponseSink) -> None:
        self._explorers[explorer_id] = sink

    def send_from_orchestrator(self, msg: OrchestratorToPlanet) -> None:
        self._inbox.put_nowait((MessageOrigin.ORCHESTRATOR, msg))

    def send_from_explorer(self, msg: ExplorerToPlanet) -> None:
        self._inbox.put_nowait((MessageOrigin.EXPLORER, msg))

    async def start(self) -> None:
        """Start the worker loop once for this runtime."""
        if self._worker_task and not self._worker_task.done():
            return
        if self._status in (PlanetStatus.KILLED, PlanetStatus.DESTROYED):
            self._logger.warning(
                "planet_runtime_not_restartable",
                extra={"planet_id": self._router.planet_id, "status": self._status.value},
            )
            return

        self._status = PlanetStatus.ALIVE
        self._worker_task = asyncio.create_task(self._worker_loop(), name=f"planet-{self._router.planet_id}-worker")
        self._logger.info("planet_runtime_started", extra={"planet_id": self._router.planet_id})

    async def stop(self) -> None:
        """Cancel the worker loop and wait for it to finish."""
        if not self._worker_task:
            return

        self._worker_task.cancel()
        try:
            await self._worker_task
        except asyncio.CancelledError:
            pass
        finally:
            self._worker_task = None

        if self._status == PlanetStatus.ALIVE:
            self._status = PlanetStatus.IDLE
        self._logger.info("planet_runtime_stopped", extra={"planet_id": self._router.planet_id})

    async def join(self) -> None:
        """Wait until every queued message has been handled."""
        await self._inbox.join()

    async def wait_closed(self) -> PlanetStatus:
        """Wait for the loop to end on its own (killed or destroyed)."""
        if self._worker_task:
            await self._worker_task
        return self._status

    async def _worker_loop(self) -> None:
        while self._status == PlanetStatus.ALIVE:
            origin, msg = await self._inbox.get()
            try:
                if origin == MessageOrigin.ORCHESTRATOR:
                    self._dispatch_orchestrator(msg)
                else:
                    self._dispatch_explorer(msg)
            finally:
                self._inbox.task_done()

        self._drain_inbox()
        self._logger.info(
            "planet_runtime_finished",
            extra={"planet_id": self._router.planet_id, "status": self._status.value},
        )

    def _dispatch_orchestrator(self, msg: OrchestratorToPlanet) -> None:
        planet_id = self._router.planet_id
        response: PlanetToOrchestrator | None = self._router.handle_orchestrator(msg)

        if isinstance(msg, IncomingExplorerRequest):
            if msg.explorer_sink is not None:
                self.register_explorer(msg.explorer_id, msg.explorer_sink)
            response = IncomingExplorerResponse(planet_id=planet_id, explorer_id=msg.explorer_id)
        elif isinstance(msg, OutgoingExplorerRequest):
            self._explorers.pop(msg.explorer_id, None)
            response = OutgoingExplorerResponse(planet_id=planet_id, explorer_id=msg.explorer_id)
        elif isinstance(msg, KillPlanet):
            response = KillPlanetResult(planet_id=planet_id)
            self._status = PlanetStatus.KILLED
        elif isinstance(response, AsteroidAck) and response.rocket is None:
            self._status = PlanetStatus.DESTROYED
            self._logger.warning("planet_destroyed", extra={"planet_id": planet_id})

        if response is not None:
            self._deliver(self._to_orchestrator, response, recipient="orchestrator")

    def _dispatch_explorer(self, msg: ExplorerToPlanet) -> None:
        # Requests from explorers that are not on the planet never reach the AI.
        sink = self._explorers.get(msg.explorer_id)
        if sink is None:
            self._logger.warning(
                "explorer_not_registered",
                extra={"planet_id": self._router.planet_id, "explorer_id": msg.explorer_id},
            )
            return

        response: PlanetToExplorer | None = self._router.handle_explorer(msg)
        if response is None:
            return
        self._deliver(sink, response, recipient=f"explorer:{msg.explorer_id}")

    def _deliver(self, sink: ResponseSink, response: object, *, recipient: str) -> None:
        try:
            sink.put_nowait(response)
        except asyncio.QueueFull:
            self._logger.warning(
                "response_dropped",
                extra={"planet_id": self._router.planet_id, "recipient": recipient},
            )

    def _drain_inbox(self) -> None:
        while not self._inbox.empty():
            self._inbox.get_nowait()
            self._inbox.task_done()
