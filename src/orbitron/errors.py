"""Exceptions raised by planet components."""

from __future__ import annotations

from orbitron.models import GenericResource


class OrbitronError(RuntimeError):
    """Base class for planet errors."""


class PlanetConfigurationError(OrbitronError):
    """Raised when a planet is constructed with rules its type does not allow."""


class GenerationError(OrbitronError):
    """Raised by the generator when a basic recipe cannot run."""


class RocketBuildError(OrbitronError):
    """Raised when a rocket cannot be built from the requested cell."""


class CombinationError(OrbitronError):
    """Raised by the combinator; carries both inputs back to the caller."""

    def __init__(self, reason: str, first: GenericResource, second: GenericResource) -> None:
        super().__init__(reason)
        self.reason = reason
        self.first = first
        self.second = second
