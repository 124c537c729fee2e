"""CAPEX budget: house costs, other capital items and reserve."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

from ..models.house import House
from ..models.lookups import (
    HOUSE_TYPES,
    INFRA_ITEMS,
    HouseTierConfig,
    HouseTier,
    HouseType,
    get_infra_item_cost,
    get_optional_infra_items,
    get_required_infra_items,
    is_infra_item_optional,
)
from ..models.scenario import Scenario

RESERVE_PCT = 0.10

# Non-house capital items (millions)
DEFAULT_OTHER_CAPEX: Dict[str, float] = {
    "public_buildings": 5.35,
    "sport_spa": 3.0,
    "engineering": 4.95,
    "it_smart": 0.9,
    "landscaping": 4.0,
    "furniture": 1.2,
    "other": 0.5,
}


@dataclass
class CapexSummary:
    """Capital budget of a project. All amounts in millions."""

    house_capex: float
    other_capex: float
    total_capex: float  # house + other
    reserve: float  # Contingency on total_capex
    total_investment: float  # total_capex + reserve
    other_items: Dict[str, float] = field(default_factory=dict)


def calculate_capex_summary(
    houses: Iterable[House],
    other_capex: Mapping[str, float] | None = None,
    reserve_pct: float = RESERVE_PCT,
    lookup: Dict[HouseType, Dict[HouseTier, HouseTierConfig]] = HOUSE_TYPES,
) -> CapexSummary:
    """Calculate the capital budget.

    Args:
        houses: House lines to be built.
        other_capex: Non-house items by name. Uses defaults if None.
            Negative amounts are treated as zero.
        reserve_pct: Reserve as a fraction of total CAPEX.
        lookup: House catalog.

    Returns:
        CapexSummary with totals, reserve and total investment.
    """
    items = dict(DEFAULT_OTHER_CAPEX if other_capex is None else other_capex)
    items = {name: max(amount, 0.0) for name, amount in items.items()}

    house_capex = sum(house.cost(lookup) for house in houses)
    other_total = sum(items.values())
    total_capex = house_capex + other_total
    reserve = total_capex * reserve_pct

    return CapexSummary(
        house_capex=house_capex,
        other_capex=other_total,
        total_capex=total_capex,
        reserve=reserve,
        total_investment=total_capex + reserve,
        other_items=items,
    )


def summarize_scenario_capex(
    scenario: Scenario,
    reserve_pct: float = RESERVE_PCT,
    lookup: Dict[HouseType, Dict[HouseTier, HouseTierConfig]] = HOUSE_TYPES,
) -> CapexSummary:
    """Capital budget of a scenario, taken from its phases.

    The total always equals ``scenario.get_total_capex()``: house costs
    count only for houses placed in a phase, and each phase's explicit
    CAPEX is one other item keyed by phase id (repeated ids add up).

    Args:
        scenario: Scenario whose phases carry the CAPEX.
        reserve_pct: Reserve as a fraction of total CAPEX.
        lookup: House catalog.

    Returns:
        CapexSummary with totals, reserve and total investment.
    """
    house_capex = sum(
        house.cost(lookup) for phase in scenario.phases for house in phase.houses
    )
    items: Dict[str, float] = {}
    for phase in scenario.phases:
        items[phase.id] = items.get(phase.id, 0.0) + phase.capex

    total_capex = scenario.get_total_capex(lookup)
    reserve = total_capex * reserve_pct

    return CapexSummary(
        house_capex=house_capex,
        other_capex=total_capex - house_capex,
        total_capex=total_capex,
        reserve=reserve,
        total_investment=total_capex + reserve,
        other_items=items,
    )


def infra_catalog_rows() -> List[Dict[str, object]]:
    """Site infrastructure catalog as display rows, required items first.

    Reference only: the same works are budgeted through the engineering,
    sport/SPA, IT and landscaping lines of DEFAULT_OTHER_CAPEX, so these
    costs are never added to a CapexSummary.
    """
    names = get_required_infra_items() + get_optional_infra_items()
    return [
        {
            "item": name,
            "description": INFRA_ITEMS[name].description,
            "cost": get_infra_item_cost(name),
            "optional": is_infra_item_optional(name),
        }
        for name in names
    ]
