"""Main Streamlit application for the glamping financial model."""

import logging
import os
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from glamping.calculations.capex import (
    CapexSummary,
    calculate_capex_summary,
    summarize_scenario_capex,
)
from glamping.calculations.projection import ProjectionResult, run_projection
from glamping.export.projection_report import ReportConfig, generate_projection_excel
from glamping.models.errors import GlampingModelError
from glamping.models.phase import Phase
from glamping.models.scenario import Scenario
from glamping.scenarios import format_matrix_results, run_scenario_matrix
from glamping.storage.store import ScenarioStore, scenario_from_json, scenario_to_json
from ui.components import (
    render_capex_breakdown_chart,
    render_cash_flow_chart,
    render_cash_flow_table,
    render_extra_service_inputs,
    render_house_inputs,
    render_infra_catalog,
    render_kpi_cards,
    render_operating_inputs,
    render_other_capex_inputs,
)

logging.basicConfig(level=os.environ.get("GLAMPING_LOG_LEVEL", "INFO"))

STORE_DIR = Path(os.environ.get("GLAMPING_STORE_DIR", Path.home() / ".glamping" / "scenarios"))

st.set_page_config(
    page_title="Glamping Financial Model",
    page_icon="🏕️",
    layout="wide",
    initial_sidebar_state="expanded",
)


def build_scenario_from_inputs() -> tuple[Scenario, CapexSummary]:
    """Read the sidebar into a Scenario.

    All houses and other CAPEX go into a single phase starting 2025-01-01,
    so the scenario's phase CAPEX equals the budget's total CAPEX.

    Returns:
        Tuple of (scenario, CAPEX budget).
    """
    houses = render_house_inputs()
    other_capex = render_other_capex_inputs()
    total_units = sum(h.qty for h in houses)
    params = render_operating_inputs(total_units)
    params["extra_revenue_services"] = render_extra_service_inputs(total_units)

    capex = calculate_capex_summary(houses, other_capex)

    scenario = Scenario("ui", "UI Scenario")
    scenario.update_params(**params)
    for house in houses:
        scenario.add_house(house)
    scenario.add_phase(Phase("phase1", "Phase 1", date(2025, 1, 1), list(houses),
                             capex=capex.other_capex))

    return scenario, capex


def render_results(
    result: ProjectionResult,
    scenario: Scenario,
    capex: CapexSummary,
    key: str = "current",
) -> None:
    """Render KPIs, chart, table and the report download."""
    render_kpi_cards(result, capex)
    render_cash_flow_chart(result.cash_flow)
    render_cash_flow_table(result)

    report = generate_projection_excel(
        result,
        ReportConfig(scenario_name=scenario.name, tax_regime=scenario.params.tax_regime),
    )
    st.download_button(
        "Download Excel report",
        data=report,
        file_name=f"{scenario.name}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        key=f"report_{key}",
    )


def render_scenario_storage(scenario: Scenario) -> None:
    """Save, load, export and import scenarios."""
    store = ScenarioStore(STORE_DIR)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Save")
        name = st.text_input("Scenario name")
        if st.button("Save scenario"):
            try:
                store.save_scenario(name, scenario)
                st.success(f"Saved '{name}'")
            except GlampingModelError as e:
                st.error(str(e))

        st.download_button(
            "Download scenario JSON",
            data=scenario_to_json(name or scenario.name, scenario),
            file_name=f"{name or 'scenario'}.json",
            mime="application/json",
        )

    loaded = None
    with col2:
        st.subheader("Load")
        saved = store.list_scenarios()
        selected = st.selectbox("Saved scenarios", options=saved) if saved else None
        if selected and st.button("Project saved scenario"):
            loaded = store.load_scenario(selected)
        if selected and st.button("Delete saved scenario"):
            store.delete_scenario(selected)
            st.rerun()

        uploaded = st.file_uploader("Import scenario JSON", type=["json"])
        if uploaded is not None:
            try:
                _, loaded = scenario_from_json(uploaded.getvalue().decode("utf-8"))
            except GlampingModelError as e:
                st.error(str(e))

    if loaded is not None:
        st.markdown(f"### {loaded.name}")
        errors = loaded.params.validate()
        if errors:
            st.warning("; ".join(errors))
        capex = summarize_scenario_capex(loaded)
        result = run_projection(loaded, capex.total_capex, capex.total_investment)
        render_results(result, loaded, capex, key="loaded")


def main() -> None:
    st.title("Glamping Financial Model")

    scenario, capex = build_scenario_from_inputs()

    errors = scenario.params.validate()
    if errors:
        for error in errors:
            st.error(error)
        return

    result = run_projection(scenario, capex.total_capex, capex.total_investment)

    tab_projection, tab_capex, tab_matrix, tab_storage = st.tabs(
        ["Projection", "CAPEX", "Scenario Matrix", "Scenarios"]
    )

    with tab_projection:
        render_results(result, scenario, capex)

    with tab_capex:
        render_capex_breakdown_chart(capex.house_capex, capex.other_items, capex.reserve)
        st.write(f"Total CAPEX: {capex.total_capex:.2f} млн ₽, "
                 f"reserve: {capex.reserve:.2f} млн ₽, "
                 f"total investment: {capex.total_investment:.2f} млн ₽")
        render_infra_catalog()

    with tab_matrix:
        if st.button("Run tax regime × services matrix"):
            rows = run_scenario_matrix(scenario, capex.total_capex)
            st.code(format_matrix_results(rows), language=None)

    with tab_storage:
        render_scenario_storage(scenario)


main()
