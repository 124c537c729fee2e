"""Scenario: the aggregate root holding houses, phases and model parameters."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Dict, List

from .house import House
from .lookups import (
    EXTRA_REVENUES,
    HOUSE_TYPES,
    MONTH_KEYS,
    SEASONALITY_FACTORS,
    HouseTierConfig,
    HouseTier,
    HouseType,
    SeasonalFactor,
    TaxRegime,
)
from .phase import Phase


@dataclass
class OpexStructure:
    """Operating cost baseline for a reference 10-unit property."""

    payroll: float = 3_500_000.0  # Annual
    marketing: float = 1_200_000.0  # Annual
    booking: float = 0.05  # Fraction of room revenue
    consumables: float = 500.0  # Per occupied room-night
    utilities: float = 3_000_000.0  # Annual (250k/month x 12)


@dataclass
class ScenarioParams:
    """Model parameters for a scenario.

    Percent fields (occupancy, CAGRs) are expressed as 0-100, matching the
    input form; ``opex_structure.booking`` is a 0-1 fraction.
    """

    # === Revenue ===
    occupancy: float = 55.0  # Base occupancy, %
    adr: float = 9_400.0  # Average daily rate, currency per night
    adr_cagr: float = 3.0  # % per year, applied after 2028

    # === Operating costs ===
    opex_structure: OpexStructure = field(default_factory=OpexStructure)
    opex_cagr: float = 6.0  # % per year, compounded from 2025

    # === Tax ===
    tax_regime: TaxRegime = TaxRegime.USN6

    # === Ancillary services ===
    extra_revenue_services: List[str] = field(default_factory=list)

    # === Seasonality ===
    seasonality: Dict[str, SeasonalFactor] = field(
        default_factory=lambda: dict(SEASONALITY_FACTORS)
    )

    def validate(self) -> list[str]:
        """Validate parameters and return list of errors.

        Returns:
            List of validation error messages. Empty if valid.
        """
        errors = []

        if not 0 <= self.occupancy <= 100:
            errors.append(f"occupancy must be 0-100, got {self.occupancy}")
        if self.adr < 0:
            errors.append(f"adr must be non-negative, got {self.adr}")
        if self.adr_cagr < 0:
            errors.append(f"adr_cagr must be non-negative, got {self.adr_cagr}")
        if self.opex_cagr < 0:
            errors.append(f"opex_cagr must be non-negative, got {self.opex_cagr}")

        opex = self.opex_structure
        if not 0 <= opex.booking <= 1:
            errors.append(f"opex booking fraction must be 0-1, got {opex.booking}")
        for name in ("payroll", "marketing", "consumables", "utilities"):
            value = getattr(opex, name)
            if value < 0:
                errors.append(f"opex {name} must be non-negative, got {value}")

        if not isinstance(self.tax_regime, TaxRegime):
            errors.append(f"unknown tax regime: {self.tax_regime!r}")

        for service_id in self.extra_revenue_services:
            if service_id not in EXTRA_REVENUES:
                errors.append(f"unknown extra revenue service: {service_id}")

        for month, factor in self.seasonality.items():
            if month not in MONTH_KEYS:
                errors.append(f"unknown seasonality month: {month}")
            elif factor.occupancy < 0 or factor.adr < 0:
                errors.append(f"seasonality multipliers for {month} must be non-negative")

        return errors

    def copy(self) -> "ScenarioParams":
        """Create a copy that shares no mutable containers with this one."""
        return replace(
            self,
            opex_structure=replace(self.opex_structure),
            extra_revenue_services=list(self.extra_revenue_services),
            seasonality=dict(self.seasonality),
        )


@dataclass
class Scenario:
    """A development scenario.

    ``houses`` is the flat unit list used for unit counts; ``phases`` carry
    the CAPEX accounting. Total CAPEX is always recomputed from phases.
    """

    id: str
    name: str
    params: ScenarioParams = field(default_factory=ScenarioParams)
    houses: List[House] = field(default_factory=list)
    phases: List[Phase] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def add_house(self, house: House) -> None:
        """Add a house line to the scenario."""
        self.houses.append(house)
        self.updated_at = datetime.now()

    def add_phase(self, phase: Phase) -> None:
        """Add a phase to the scenario."""
        self.phases.append(phase)
        self.updated_at = datetime.now()

    def update_params(self, **changes: Any) -> None:
        """Merge new parameter values into the scenario.

        The merge is shallow, except ``opex_structure`` which may be given
        as a partial mapping and is merged key by key.

        Raises:
            TypeError: If a parameter or opex field name is unknown.
        """
        valid_names = {f.name for f in fields(ScenarioParams)}
        unknown = set(changes) - valid_names
        if unknown:
            raise TypeError(f"unknown scenario parameters: {', '.join(sorted(unknown))}")

        opex_changes = changes.pop("opex_structure", None)
        params = replace(self.params, **changes)
        if opex_changes is not None:
            if isinstance(opex_changes, OpexStructure):
                params.opex_structure = replace(opex_changes)
            else:
                params.opex_structure = replace(self.params.opex_structure, **opex_changes)
        self.params = params
        self.updated_at = datetime.now()

    def get_total_capex(
        self,
        lookup: Dict[HouseType, Dict[HouseTier, HouseTierConfig]] = HOUSE_TYPES,
    ) -> float:
        """Total CAPEX in millions summed over all phases."""
        return sum(phase.get_total_capex(lookup) for phase in self.phases)

    def get_total_units(self) -> int:
        """Total number of units across the scenario's houses."""
        return sum(house.qty for house in self.houses)

    def clone(self, new_id: str, new_name: str) -> "Scenario":
        """Create an independent copy under a new id and name."""
        return Scenario(
            id=new_id,
            name=new_name,
            params=self.params.copy(),
            houses=[house.clone() for house in self.houses],
            phases=[phase.copy() for phase in self.phases],
        )
