"""Construction phase: a group of houses plus non-house capital cost."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

from dateutil.relativedelta import relativedelta

from .house import House
from .lookups import HOUSE_TYPES, HouseTierConfig, HouseTier, HouseType

PHASE_DURATION_MONTHS = 6


@dataclass
class Phase:
    """A construction/development phase."""

    id: str
    name: str
    start_date: date
    houses: List[House] = field(default_factory=list)
    capex: float = 0.0  # Extra capital cost not tied to houses (millions)

    def get_total_units(self) -> int:
        """Total number of units built in this phase."""
        return sum(house.qty for house in self.houses)

    def get_total_capex(
        self,
        lookup: Dict[HouseType, Dict[HouseTier, HouseTierConfig]] = HOUSE_TYPES,
    ) -> float:
        """Total phase CAPEX in millions: house costs plus explicit capex."""
        house_capex = sum(house.cost(lookup) for house in self.houses)
        return house_capex + self.capex

    def get_duration(self) -> int:
        """Phase duration in months."""
        return PHASE_DURATION_MONTHS

    def get_end_date(self) -> date:
        """Date the phase ends (start + duration in calendar months)."""
        return self.start_date + relativedelta(months=self.get_duration())

    def copy(self) -> "Phase":
        """Create a copy with its own house list."""
        return Phase(
            id=self.id,
            name=self.name,
            start_date=self.start_date,
            houses=[house.clone() for house in self.houses],
            capex=self.capex,
        )
