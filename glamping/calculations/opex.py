"""Operating cost calculations and ancillary revenue streams."""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..models.lookups import EXTRA_REVENUES, ExtraRevenueConfig
from ..models.scenario import OpexStructure, Scenario

# OPEX and extras catalogs are sized for a 10-unit property
REFERENCE_UNITS = 10

# OPEX escalation compounds from this year
OPEX_BASE_YEAR = 2025


def calculate_opex(
    period_revenue: float,
    units: int,
    room_nights: float,
    year: int,
    scenario: Scenario,
) -> float:
    """Calculate half-year OPEX in millions.

    OPEX = fixed + booking commission + consumables, where
    - fixed = (payroll + marketing + utilities) x units / 10 / 2
    - booking commission = revenue x booking fraction
    - consumables = room-nights x cost per room-night
    and the sum escalates by opex_cagr compounded from 2025.

    Args:
        period_revenue: Room revenue for the half-year, in millions.
        units: Units operating in the period.
        room_nights: Occupied room-nights in the period.
        year: Calendar year.
        scenario: Scenario supplying OPEX structure and escalation.

    Returns:
        OPEX for the half-year in millions.
    """
    params = scenario.params
    structure = params.opex_structure
    scaling_factor = units / REFERENCE_UNITS if units > 0 else 0.0

    fixed_costs = (structure.payroll + structure.marketing + structure.utilities) * scaling_factor / 2

    booking_commission = period_revenue * 1_000_000 * structure.booking
    consumables_cost = max(room_nights, 0.0) * structure.consumables

    total = fixed_costs + booking_commission + consumables_cost
    if year > OPEX_BASE_YEAR:
        total *= (1 + params.opex_cagr / 100) ** (year - OPEX_BASE_YEAR)

    return total / 1_000_000


def apply_extras(
    revenue: float,
    opex: float,
    units: int,
    scenario: Scenario,
    catalog: Dict[str, ExtraRevenueConfig] = EXTRA_REVENUES,
) -> Tuple[float, float]:
    """Add enabled ancillary services to a half-year's revenue and OPEX.

    Each service contributes annual revenue x units / 10 / 2 (in millions)
    to revenue and that amount x (1 - margin) to OPEX. Unknown service IDs
    contribute nothing.

    Args:
        revenue: Half-year revenue in millions.
        opex: Half-year OPEX in millions.
        units: Units operating in the period.
        scenario: Scenario with enabled services.
        catalog: Ancillary service catalog.

    Returns:
        Tuple of (revenue, opex) including extras.
    """
    if units == 0:
        return revenue, opex

    scaling_factor = units / REFERENCE_UNITS

    for service_id in scenario.params.extra_revenue_services:
        config = catalog.get(service_id)
        if config is None:
            continue
        extra_revenue = config.annual_revenue * scaling_factor * 0.5 / 1_000_000
        revenue += extra_revenue
        opex += extra_revenue * (1 - config.margin)

    return revenue, opex


def annual_fixed_opex(units: int, structure: OpexStructure) -> float:
    """Annual fixed OPEX (payroll, marketing, utilities) scaled to the unit count.

    Variable costs (booking commission, consumables) depend on revenue and
    are not included. With no units the 10-unit baseline is returned.

    Returns:
        Annual fixed OPEX in currency units.
    """
    scaling_factor = units / REFERENCE_UNITS if units > 0 else 1.0
    return (structure.payroll + structure.marketing + structure.utilities) * scaling_factor


@dataclass
class ExtraServiceSummary:
    """Scaled annual figures of one ancillary service."""

    service_id: str
    name: str
    annual_revenue: float  # Millions
    annual_profit: float  # Millions


def describe_extra_services(
    units: int,
    catalog: Dict[str, ExtraRevenueConfig] = EXTRA_REVENUES,
) -> List[ExtraServiceSummary]:
    """Annual revenue and profit of every catalog service for a property size."""
    scaling_factor = units / REFERENCE_UNITS
    summaries = []
    for service_id, config in catalog.items():
        annual_revenue = config.annual_revenue * scaling_factor / 1_000_000
        summaries.append(ExtraServiceSummary(
            service_id=service_id,
            name=config.name,
            annual_revenue=annual_revenue,
            annual_profit=annual_revenue * config.margin,
        ))
    return summaries
