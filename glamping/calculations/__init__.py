"""Calculation modules for the glamping projection engine."""

from .timeline import build_phase_timeline, TimelineYear, CAPEX_DISTRIBUTION
from .revenue import calculate_half_year_revenue, escalate_adr, HalfYearRevenue
from .opex import (
    calculate_opex,
    apply_extras,
    annual_fixed_opex,
    describe_extra_services,
    ExtraServiceSummary,
)
from .taxes import calculate_tax, calculate_period_tax
from .cashflow import calculate_period, calculate_cash_flow, CashFlowPeriod
from .metrics import (
    derive_kpis,
    calculate_payback_period,
    calculate_irr,
    calculate_npv,
    calculate_periodic_irr,
    KPIResult,
)
from .capex import (
    calculate_capex_summary,
    summarize_scenario_capex,
    infra_catalog_rows,
    CapexSummary,
    DEFAULT_OTHER_CAPEX,
)

# Unified entry point
from .projection import run_projection, ProjectionResult

__all__ = [
    "build_phase_timeline",
    "TimelineYear",
    "CAPEX_DISTRIBUTION",
    "calculate_half_year_revenue",
    "escalate_adr",
    "HalfYearRevenue",
    "calculate_opex",
    "apply_extras",
    "annual_fixed_opex",
    "describe_extra_services",
    "ExtraServiceSummary",
    "calculate_tax",
    "calculate_period_tax",
    "calculate_period",
    "calculate_cash_flow",
    "CashFlowPeriod",
    "derive_kpis",
    "calculate_payback_period",
    "calculate_irr",
    "calculate_npv",
    "calculate_periodic_irr",
    "KPIResult",
    "calculate_capex_summary",
    "summarize_scenario_capex",
    "infra_catalog_rows",
    "CapexSummary",
    "DEFAULT_OTHER_CAPEX",
    "run_projection",
    "ProjectionResult",
]
