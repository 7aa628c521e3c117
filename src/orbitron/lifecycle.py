"""Running/stopped gate toggled by the orchestrator."""

from __future__ import annotations

from enum import Enum


class LifecycleStatus(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class LifecycleGate:
    """Tracks whether the planet AI is allowed to make decisions.

    Starts stopped. ``start`` and ``stop`` return whether the status actually
    changed, so repeated signals are no-ops.
    """

    def __init__(self) -> None:
        self._status = LifecycleStatus.STOPPED

    @property
    def status(self) -> LifecycleStatus:
        return self._status

    @property
    def running(self) -> bool:
        return self._status == LifecycleStatus.RUNNING

    def start(self) -> bool:
        if self._status == LifecycleStatus.RUNNING:
            return False
        self._status = LifecycleStatus.RUNNING
        return True

    def stop(self) -> bool:
        if self._status == LifecycleStatus.STOPPED:
            return False
        self._status = LifecycleStatus.STOPPED
        return True
