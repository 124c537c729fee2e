"""UI components for the glamping projection model."""

from .inputs import (
    render_house_inputs,
    render_other_capex_inputs,
    render_operating_inputs,
    render_extra_service_inputs,
)
from .results import render_kpi_cards, render_cash_flow_table, render_infra_catalog
from .charts import build_cash_flow_figure, render_cash_flow_chart, render_capex_breakdown_chart

__all__ = [
    "render_house_inputs",
    "render_other_capex_inputs",
    "render_operating_inputs",
    "render_extra_service_inputs",
    "render_kpi_cards",
    "render_cash_flow_table",
    "render_infra_catalog",
    "build_cash_flow_figure",
    "render_cash_flow_chart",
    "render_capex_breakdown_chart",
]
