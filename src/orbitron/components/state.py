"""Mutable resource state owned by a single planet."""

from __future__ import annotations

from collections.abc import Iterator

from orbitron.errors import RocketBuildError
from orbitron.models import PLANET_CONSTRAINTS, EnergyCell, PlanetSnapshot, PlanetType, Rocket, Sunray


class PlanetState:
    """Energy cells, rocket slot and identity of one planet.

    The cell count and rocket eligibility come from the planet type and never
    change after construction.
    """

    def __init__(self, planet_id: int, planet_type: PlanetType) -> None:
        constraints = PLANET_CONSTRAINTS[planet_type]
        self._id = planet_id
        self._planet_type = planet_type
        self._can_have_rocket = constraints.can_have_rocket
        self._cells = [EnergyCell() for _ in range(constraints.cells)]
        self._rocket: Rocket | None = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def planet_type(self) -> PlanetType:
        return self._planet_type

    @property
    def can_have_rocket(self) -> bool:
        return self._can_have_rocket

    def cells_iter(self) -> Iterator[EnergyCell]:
        return iter(self._cells)

    def cells_count(self) -> int:
        return len(self._cells)

    def cell(self, index: int) -> EnergyCell:
        return self._cells[index]

    def charge_cell(self, sunray: Sunray) -> bool:
        """Charge the first empty cell; return ``False`` when every cell is already charged."""
        for cell in self._cells:
            if not cell.charged:
                cell.charge(sunray)
                return True
        return False

    def full_cell(self) -> tuple[EnergyCell, int] | None:
        """Return the lowest-index charged cell and its index."""
        for index, cell in enumerate(self._cells):
            if cell.charged:
                return cell, index
        return None

    def has_rocket(self) -> bool:
        return self._rocket is not None

    def build_rocket(self, cell_index: int) -> None:
        if not self._can_have_rocket:
            raise RocketBuildError(f"Planet type {self._planet_type.value} cannot build rockets")
        if self._rocket is not None:
            raise RocketBuildError("Rocket slot is already occupied")
        cell = self._cells[cell_index]
        if not cell.charged:
            raise RocketBuildError(f"Energy cell {cell_index} is not charged")
        cell.discharge()
        self._rocket = Rocket()

    def take_rocket(self) -> Rocket | None:
        rocket, self._rocket = self._rocket, None
        return rocket

    def to_snapshot(self) -> PlanetSnapshot:
        return PlanetSnapshot(
            planet_id=self._id,
            planet_type=self._planet_type,
            energy_cells=tuple(cell.charged for cell in self._cells),
            has_rocket=self._rocket is not None,
        )
