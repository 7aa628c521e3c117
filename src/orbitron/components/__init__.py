"""Planet state and recipe providers consumed by the planet AI."""

from .resources import Combinator, Generator
from .state import PlanetState

__all__ = ["Combinator", "Generator", "PlanetState"]
