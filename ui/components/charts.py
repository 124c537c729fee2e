"""Chart components for the Streamlit UI."""

import streamlit as st
import plotly.graph_objects as go
from typing import List

from glamping.calculations.cashflow import CashFlowPeriod


def build_cash_flow_figure(cash_flow: List[CashFlowPeriod]) -> go.Figure:
    """Build a fresh cash flow chart.

    Bars show revenue, OPEX and CAPEX per period; lines show net and
    cumulative cash flow, the latter on a secondary axis.

    Args:
        cash_flow: Cash flow periods to plot.

    Returns:
        New plotly Figure.
    """
    labels = [p.period for p in cash_flow]

    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=labels,
        y=[p.revenue for p in cash_flow],
        name='Выручка',
        marker_color='rgba(75, 192, 192, 0.6)',
    ))
    fig.add_trace(go.Bar(
        x=labels,
        y=[p.opex for p in cash_flow],
        name='OPEX',
        marker_color='rgba(255, 159, 64, 0.6)',
    ))
    fig.add_trace(go.Bar(
        x=labels,
        y=[p.capex for p in cash_flow],
        name='CAPEX',
        marker_color='rgba(153, 102, 255, 0.6)',
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=[p.net_cf for p in cash_flow],
        mode='lines+markers',
        name='Чистый CF',
        line=dict(color='rgba(54, 162, 235, 1)', width=2),
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=[p.cumulative_cf for p in cash_flow],
        mode='lines+markers',
        name='Накопленный CF',
        line=dict(color='rgb(255, 205, 86)', width=2),
        marker=dict(size=8),
        yaxis='y2',
    ))

    fig.update_layout(
        barmode='group',
        xaxis_title="Период",
        yaxis=dict(title="Денежный поток (млн ₽)"),
        yaxis2=dict(
            title="Накопленный CF (млн ₽)",
            overlaying='y',
            side='right',
            showgrid=False,
        ),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="left",
            x=0.01
        ),
        height=450,
        hovermode="x unified",
    )

    return fig


def render_cash_flow_chart(cash_flow: List[CashFlowPeriod]) -> None:
    """Render the cash flow chart.

    Args:
        cash_flow: Cash flow periods to plot.
    """
    if not cash_flow:
        st.info("No cash flows to display")
        return

    st.plotly_chart(build_cash_flow_figure(cash_flow), use_container_width=True)


def render_capex_breakdown_chart(house_capex: float, other_items: dict, reserve: float) -> None:
    """Render CAPEX breakdown pie chart.

    Args:
        house_capex: Residential fund (houses) in millions.
        other_items: Other CAPEX items by name, in millions.
        reserve: Reserve in millions.
    """
    labels = ['Houses'] + [name.replace("_", " ").title() for name in other_items] + ['Reserve']
    values = [house_capex] + list(other_items.values()) + [reserve]

    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=0.4,
        textinfo='label+percent',
        textposition='outside',
    )])

    fig.update_layout(
        title="CAPEX Breakdown",
        height=350,
        showlegend=False,
    )

    st.plotly_chart(fig, use_container_width=True)
