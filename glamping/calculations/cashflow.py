"""Half-year cash flow engine.

2025 is a single pre-operational period carrying that year's CAPEX.
From 2026 each year is split into H1 and H2; revenue is built month by
month so that seasonality is honoured, then OPEX, ancillary services,
CAPEX and tax are applied to the half-year.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..models.scenario import Scenario
from .opex import apply_extras, calculate_opex
from .revenue import calculate_half_year_revenue
from .taxes import calculate_tax
from .timeline import BASE_YEAR, FINAL_YEAR, TimelineYear

# CAPEX stops after the ramp-up phase
LAST_CAPEX_YEAR = 2028


@dataclass
class CashFlowPeriod:
    """Cash flow for one period (full year 2025, otherwise a half-year).

    All amounts are in millions.
    """

    period: str  # "2025", "2026 H1", "2026 H2", ...
    revenue: float
    opex: float
    capex: float
    tax: float
    net_cf: float  # revenue - opex - capex - tax
    cumulative_cf: float
    year: int
    is_h2: bool


def calculate_period(
    scenario: Scenario,
    phase_data: Optional[TimelineYear],
    year: int,
    is_h2: bool,
    prior_cumulative_cf: float,
    is_first_year: bool = False,
) -> CashFlowPeriod:
    """Calculate one cash flow period.

    Args:
        scenario: Scenario with model parameters.
        phase_data: Timeline record for the year (units and CAPEX).
        year: Calendar year.
        is_h2: True for the second half-year.
        prior_cumulative_cf: Cumulative cash flow before this period.
        is_first_year: True for the full-year pre-operational period.

    Returns:
        CashFlowPeriod for the period.
    """
    year_capex = phase_data.capex if phase_data else 0.0

    if is_first_year:
        net_cf = -year_capex
        return CashFlowPeriod(
            period=f"{year}",
            revenue=0.0,
            opex=0.0,
            capex=year_capex,
            tax=0.0,
            net_cf=net_cf,
            cumulative_cf=prior_cumulative_cf + net_cf,
            year=year,
            is_h2=False,
        )

    units = phase_data.units if phase_data else 0

    rooms = calculate_half_year_revenue(scenario.params, units, year, is_h2)
    opex = calculate_opex(rooms.revenue, units, rooms.room_nights, year, scenario)
    revenue, opex = apply_extras(rooms.revenue, opex, units, scenario)

    # Annual CAPEX is split evenly between H1 and H2
    capex = year_capex * 0.5 if year <= LAST_CAPEX_YEAR else 0.0

    tax = calculate_tax(revenue, opex, scenario.params.tax_regime)

    net_cf = revenue - opex - capex - tax
    return CashFlowPeriod(
        period=f"{year} H2" if is_h2 else f"{year} H1",
        revenue=revenue,
        opex=opex,
        capex=capex,
        tax=tax,
        net_cf=net_cf,
        cumulative_cf=prior_cumulative_cf + net_cf,
        year=year,
        is_h2=is_h2,
    )


def calculate_cash_flow(
    scenario: Scenario,
    timeline: List[TimelineYear],
) -> List[CashFlowPeriod]:
    """Calculate the 2025-2033 cash flow sequence.

    Years missing from the timeline run with no CAPEX and all units.

    Args:
        scenario: Scenario with model parameters.
        timeline: Yearly records from build_phase_timeline().

    Returns:
        17 periods: 2025, then H1/H2 for each of 2026-2033.
    """
    by_year = {entry.year: entry for entry in timeline}
    cash_flow: List[CashFlowPeriod] = []
    cumulative_cf = 0.0

    for year in range(BASE_YEAR, FINAL_YEAR + 1):
        phase_data = by_year.get(year) or TimelineYear(
            year=year, capex=0.0, units=scenario.get_total_units(), name=""
        )

        if year == BASE_YEAR:
            full_year = calculate_period(
                scenario, phase_data, year, False, cumulative_cf, is_first_year=True
            )
            cash_flow.append(full_year)
            cumulative_cf = full_year.cumulative_cf
            continue

        for is_h2 in (False, True):
            half = calculate_period(scenario, phase_data, year, is_h2, cumulative_cf)
            cash_flow.append(half)
            cumulative_cf = half.cumulative_cf

    return cash_flow
