"""Results display components for the Streamlit UI."""

import pandas as pd
import streamlit as st

from glamping.calculations.capex import CapexSummary, infra_catalog_rows
from glamping.calculations.projection import ProjectionResult


def render_kpi_cards(result: ProjectionResult, capex: CapexSummary) -> None:
    """Render headline KPIs.

    Args:
        result: Projection result.
        capex: CAPEX budget used for the run.
    """
    kpis = result.kpis
    col1, col2, col3, col4, col5 = st.columns(5)

    col1.metric("Investment", f"{capex.total_investment:.1f} млн ₽")
    col2.metric(
        "Payback",
        f"{kpis.payback_period:.1f} yrs" if kpis.payback_period is not None else "not reached",
    )
    col3.metric("Revenue 2029", f"{result.annual_revenue(2029):.1f} млн ₽")
    col4.metric("NPV @ 15%", f"{kpis.npv:.1f} млн ₽")
    col5.metric("IRR (simplified)", f"{kpis.irr:.1%}")

    if result.periodic_irr is not None:
        st.caption(f"IRR from period cash flows: {result.periodic_irr:.1%}")


def render_cash_flow_table(result: ProjectionResult) -> None:
    """Render the period cash flow table."""
    df = result.to_dataframe()
    df = df[["phase", "period", "revenue", "opex", "capex", "tax", "net_cf", "cumulative_cf"]]
    df.columns = ["Phase", "Period", "Revenue", "OPEX", "CAPEX", "Tax", "Net CF", "Cumulative CF"]
    st.dataframe(
        df.style.format({col: "{:.2f}" for col in df.columns[2:]}),
        use_container_width=True,
        hide_index=True,
    )


def render_infra_catalog() -> None:
    """Render the site infrastructure catalog below the CAPEX budget."""
    df = pd.DataFrame(infra_catalog_rows())
    df.columns = ["Item", "Description", "Cost (млн ₽)", "Optional"]
    st.caption("Infrastructure catalog (covered by the other CAPEX lines, not added again)")
    st.dataframe(df, use_container_width=True, hide_index=True)
