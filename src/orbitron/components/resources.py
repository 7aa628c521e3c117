"""Recipe providers that turn a charged energy cell into resources."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from orbitron.errors import CombinationError, GenerationError
from orbitron.models import (
    COMPLEX_RECIPES,
    BasicResource,
    BasicResourceType,
    ComplexResource,
    ComplexResourceRequest,
    ComplexResourceType,
    EnergyCell,
    to_generic,
)


class Generator:
    """Produces basic resources for the configured recipe set."""

    def __init__(self, rules: Iterable[BasicResourceType]) -> None:
        self._rules = frozenset(rules)

    def all_available_recipes(self) -> frozenset[BasicResourceType]:
        return self._rules

    def contains(self, resource_type: BasicResourceType) -> bool:
        return resource_type in self._rules

    def make(self, resource_type: BasicResourceType, cell: EnergyCell) -> BasicResource:
        """Consume ``cell`` and return the resource; the cell is untouched on failure."""
        if resource_type not in self._rules:
            raise GenerationError(f"No generation recipe for {resource_type.value}")
        if not cell.charged:
            raise GenerationError("Energy cell is not charged")
        cell.discharge()
        return BasicResource(type=resource_type)


class Combinator:
    """Produces complex resources from two inputs and a charged cell."""

    def __init__(self, rules: Iterable[ComplexResourceType]) -> None:
        self._rules = frozenset(rules)

    def all_available_recipes(self) -> frozenset[ComplexResourceType]:
        return self._rules

    def contains(self, resource_type: ComplexResourceType) -> bool:
        return resource_type in self._rules

    def make(self, request: ComplexResourceRequest, cell: EnergyCell) -> ComplexResource:
        """Consume ``cell`` and return the combined resource.

        Raises ``CombinationError`` carrying both inputs when the recipe is not
        enabled, the cell is empty, or the inputs do not match the recipe.
        """
        first, second = to_generic(request.first), to_generic(request.second)
        target = request.target

        if target not in self._rules:
            raise CombinationError(f"No combination recipe for {target.value}", first, second)
        if not cell.charged:
            raise CombinationError("Energy cell is not charged", first, second)

        expected = Counter(COMPLEX_RECIPES[target])
        supplied = Counter((request.first.type, request.second.type))
        if expected != supplied:
            wanted = " + ".join(kind.value for kind in COMPLEX_RECIPES[target])
            raise CombinationError(
                f"{target.value} requires {wanted}, got {first.name} + {second.name}",
                first,
                second,
            )

        cell.discharge()
        return ComplexResource(type=target)
