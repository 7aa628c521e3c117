from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BasicResourceType(str, Enum):
    OXYGEN = "Oxygen"
    HYDROGEN = "Hydrogen"
    CARBON = "Carbon"
    SILICON = "Silicon"


class ComplexResourceType(str, Enum):
    WATER = "Water"
    DIAMOND = "Diamond"
    LIFE = "Life"
    ROBOT = "Robot"
    DOLPHIN = "Dolphin"
    AI_PARTNER = "AIPartner"


class PlanetType(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


@dataclass(frozen=True, slots=True)
class PlanetConstraints:
    cells: int
    can_have_rocket: bool
    max_generation_rules: int | None
    max_combination_rules: int


PLANET_CONSTRAINTS: dict[PlanetType, PlanetConstraints] = {
    PlanetType.A: PlanetConstraints(cells=5, can_have_rocket=True, max_generation_rules=None, max_combination_rules=0),
    PlanetType.B: PlanetConstraints(cells=1, can_have_rocket=False, max_generation_rules=None, max_combination_rules=1),
    PlanetType.C: PlanetConstraints(cells=1, can_have_rocket=True, max_generation_rules=1, max_combination_rules=6),
    PlanetType.D: PlanetConstraints(cells=5, can_have_rocket=False, max_generation_rules=None, max_combination_rules=0),
}


@dataclass(frozen=True, slots=True)
class BasicResource:
    type: BasicResourceType


@dataclass(frozen=True, slots=True)
class ComplexResource:
    type: ComplexResourceType


@dataclass(frozen=True, slots=True)
class GenericResource:
    """Type-erased resource handed back to an explorer after a failed combination."""

    resource: BasicResource | ComplexResource

    @property
    def name(self) -> str:
        return self.resource.type.value


def to_generic(resource: BasicResource | ComplexResource | GenericResource) -> GenericResource:
    if isinstance(resource, GenericResource):
        return resource
    return GenericResource(resource=resource)


@dataclass(frozen=True, slots=True)
class ComplexResourceRequest:
    """Request to combine two inputs into ``target``.

    Inputs handed back by a failed combination may be resubmitted as they are;
    they are unwrapped to their concrete resource here.
    """

    target: ComplexResourceType
    first: BasicResource | ComplexResource | GenericResource
    second: BasicResource | ComplexResource | GenericResource

    def __post_init__(self) -> None:
        for name in ("first", "second"):
            value = getattr(self, name)
            if isinstance(value, GenericResource):
                object.__setattr__(self, name, value.resource)


# Expected inputs per complex recipe, order-insensitive.
COMPLEX_RECIPES: dict[ComplexResourceType, tuple[BasicResourceType | ComplexResourceType, ...]] = {
    ComplexResourceType.WATER: (BasicResourceType.HYDROGEN, BasicResourceType.OXYGEN),
    ComplexResourceType.DIAMOND: (BasicResourceType.CARBON, BasicResourceType.CARBON),
    ComplexResourceType.LIFE: (ComplexResourceType.WATER, BasicResourceType.CARBON),
    ComplexResourceType.ROBOT: (BasicResourceType.SILICON, ComplexResourceType.LIFE),
    ComplexResourceType.DOLPHIN: (ComplexResourceType.WATER, ComplexResourceType.LIFE),
    ComplexResourceType.AI_PARTNER: (ComplexResourceType.ROBOT, ComplexResourceType.DIAMOND),
}


@dataclass(frozen=True, slots=True)
class Sunray:
    """One unit of energy delivered by the orchestrator."""


@dataclass(frozen=True, slots=True)
class Asteroid:
    """Impact event; the planet survives only by handing back a rocket."""


@dataclass(frozen=True, slots=True)
class Rocket:
    pass


@dataclass(slots=True)
class EnergyCell:
    charged: bool = False

    def charge(self, sunray: Sunray) -> None:
        self.charged = True

    def discharge(self) -> None:
        self.charged = False


@dataclass(frozen=True, slots=True)
class PlanetSnapshot:
    """Detached copy of the externally visible planet state."""

    planet_id: int
    planet_type: PlanetType
    energy_cells: tuple[bool, ...] = field(default_factory=tuple)
    has_rocket: bool = False

    @property
    def charged_cells_count(self) -> int:
        return sum(1 for charged in self.energy_cells if charged)


@dataclass(frozen=True, slots=True)
class CombineSuccess:
    resource: ComplexResource


@dataclass(frozen=True, slots=True)
class CombineFailure:
    reason: str
    first: GenericResource
    second: GenericResource


CombineResult = CombineSuccess | CombineFailure
