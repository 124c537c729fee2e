"""Full projection run: timeline, cash flow and KPIs in one call."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from ..models.scenario import Scenario
from .capex import RESERVE_PCT
from .cashflow import CashFlowPeriod, calculate_cash_flow
from .metrics import KPIResult, calculate_periodic_irr, derive_kpis
from .timeline import TimelineYear, build_phase_timeline

logger = logging.getLogger(__name__)

# First year with all units and no CAPEX
FLAGSHIP_YEAR = 2029


@dataclass
class ProjectionResult:
    """Result of a projection run."""

    scenario_name: str
    total_capex: float
    timeline: List[TimelineYear]
    cash_flow: List[CashFlowPeriod]
    kpis: KPIResult
    periodic_irr: Optional[float] = None  # Root-solved, for reference only

    def annual_revenue(self, year: int = FLAGSHIP_YEAR) -> float:
        """Total revenue of a calendar year in millions."""
        return sum(p.revenue for p in self.cash_flow if p.year == year)

    def to_dataframe(self) -> pd.DataFrame:
        """Cash flow as a DataFrame, one row per period, with the phase name."""
        phase_names = {entry.year: entry.name for entry in self.timeline}
        rows = [
            {
                "period": p.period,
                "phase": phase_names.get(p.year, ""),
                "year": p.year,
                "is_h2": p.is_h2,
                "revenue": p.revenue,
                "opex": p.opex,
                "capex": p.capex,
                "tax": p.tax,
                "net_cf": p.net_cf,
                "cumulative_cf": p.cumulative_cf,
            }
            for p in self.cash_flow
        ]
        return pd.DataFrame(rows)


def run_projection(
    scenario: Scenario,
    total_capex: float,
    total_investment: float | None = None,
) -> ProjectionResult:
    """Run the projection engine for a scenario.

    The engine is stateless: the same scenario and CAPEX always produce
    the same result.

    Args:
        scenario: Scenario to project.
        total_capex: Total CAPEX in millions (houses plus other items).
        total_investment: Investment used for KPIs. Defaults to total
            CAPEX plus the 10% reserve.

    Returns:
        ProjectionResult with timeline, cash flow and KPIs.
    """
    if total_investment is None:
        total_investment = total_capex * (1 + RESERVE_PCT)

    # Invalid values still run with the engine's neutral fallbacks
    for error in scenario.params.validate():
        logger.warning("Scenario %s: %s", scenario.name, error)

    timeline = build_phase_timeline(scenario, total_capex)
    cash_flow = calculate_cash_flow(scenario, timeline)
    kpis = derive_kpis(cash_flow, total_investment)

    logger.debug(
        "Projection %s: units=%d capex=%.2f final_cf=%.2f npv=%.2f",
        scenario.name,
        scenario.get_total_units(),
        total_capex,
        kpis.final_cumulative_cf,
        kpis.npv,
    )

    return ProjectionResult(
        scenario_name=scenario.name,
        total_capex=total_capex,
        timeline=timeline,
        cash_flow=cash_flow,
        kpis=kpis,
        periodic_irr=calculate_periodic_irr(cash_flow),
    )
