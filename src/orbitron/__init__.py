"""Orbitron planet decision engine."""

from .ai import OrbitronAI
from .planet import create_planet, create_runtime
from .router import PlanetMessageRouter
from .runtime import PlanetRuntime

__all__ = ["OrbitronAI", "PlanetMessageRouter", "PlanetRuntime", "create_planet", "create_runtime"]
