"""Input components for the Streamlit UI."""

import streamlit as st
from typing import Dict, Any, List

from glamping.calculations.capex import DEFAULT_OTHER_CAPEX
from glamping.calculations.opex import annual_fixed_opex, describe_extra_services
from glamping.models.house import House
from glamping.models.lookups import (
    EXTRA_REVENUES,
    HouseTier,
    HouseType,
    TAX_REGIMES,
    TaxRegime,
    get_house_cost,
    get_tiers_for_type,
)
from glamping.models.scenario import OpexStructure

DEFAULT_HOUSE_QTY = {
    (HouseType.EASYFAB, HouseTier.COMFORT): 5,
    (HouseType.A_FRAME, HouseTier.COMFORT): 3,
    (HouseType.FAMILY_SUITE, HouseTier.COMFORT): 2,
}

OTHER_CAPEX_LABELS = {
    "public_buildings": "Public buildings",
    "sport_spa": "Sport & SPA",
    "engineering": "Engineering networks",
    "it_smart": "IT & smart systems",
    "landscaping": "Landscaping",
    "furniture": "Furniture & equipment",
    "other": "Other",
}


def render_house_inputs() -> List[House]:
    """Render quantity inputs for every house type and tier.

    Returns:
        House lines with a positive quantity.
    """
    st.sidebar.subheader("Houses")
    houses = []
    for house_type in HouseType:
        for tier in get_tiers_for_type(house_type):
            qty = st.sidebar.number_input(
                f"{house_type.value} · {tier.value}",
                min_value=0, max_value=200,
                value=DEFAULT_HOUSE_QTY.get((house_type, tier), 0),
                step=1,
                help=f"{get_house_cost(house_type, tier):.1f} млн ₽ per unit",
                key=f"qty_{house_type.name}_{tier.name}",
            )
            if qty > 0:
                houses.append(House(
                    id=f"{house_type.name.lower()}-{tier.value}",
                    type=house_type,
                    tier=tier,
                    qty=int(qty),
                ))
    return houses


def render_other_capex_inputs() -> Dict[str, float]:
    """Render non-house CAPEX items in millions."""
    st.sidebar.subheader("Other CAPEX (млн ₽)")
    return {
        name: st.sidebar.number_input(
            OTHER_CAPEX_LABELS.get(name, name),
            min_value=0.0, max_value=500.0, value=default, step=0.05,
            key=f"capex_{name}",
        )
        for name, default in DEFAULT_OTHER_CAPEX.items()
    }


def render_operating_inputs(total_units: int) -> Dict[str, Any]:
    """Render revenue, OPEX, growth and tax inputs.

    Args:
        total_units: Units entered, used for the scaled OPEX summary.

    Returns:
        Dictionary of scenario parameter values.
    """
    inputs: Dict[str, Any] = {}

    st.sidebar.subheader("Revenue")
    inputs["occupancy"] = st.sidebar.slider(
        "Occupancy %", 0.0, 100.0, 55.0, 1.0,
        help="Base occupancy before seasonal adjustment"
    )
    inputs["adr"] = st.sidebar.number_input(
        "ADR (₽/night)", 0, 100_000, 9_400, step=100
    )
    inputs["adr_cagr"] = st.sidebar.number_input(
        "ADR growth after 2028, %/yr", 0.0, 30.0, 3.0, step=0.5
    )

    st.sidebar.subheader("OPEX (10-unit baseline)")
    payroll = st.sidebar.number_input("Payroll, ₽/yr", 0, 100_000_000, 3_500_000, step=50_000)
    marketing = st.sidebar.number_input("Marketing, ₽/yr", 0, 100_000_000, 1_200_000, step=50_000)
    booking_pct = st.sidebar.slider("Booking commission %", 0.0, 30.0, 5.0, 0.5)
    consumables = st.sidebar.number_input("Consumables, ₽/room-night", 0, 10_000, 500, step=50)
    utilities_monthly = st.sidebar.number_input("Utilities, ₽/month", 0, 10_000_000, 250_000, step=10_000)

    inputs["opex_structure"] = OpexStructure(
        payroll=float(payroll),
        marketing=float(marketing),
        booking=booking_pct / 100,
        consumables=float(consumables),
        utilities=float(utilities_monthly) * 12,
    )
    inputs["opex_cagr"] = st.sidebar.number_input(
        "OPEX growth, %/yr", 0.0, 30.0, 6.0, step=0.5
    )
    fixed = annual_fixed_opex(total_units, inputs["opex_structure"])
    st.sidebar.caption(
        f"Fixed OPEX for {total_units} units: {fixed / 1_000_000:.2f} млн ₽/yr "
        "(booking commission and consumables excluded)"
    )

    st.sidebar.subheader("Tax")
    inputs["tax_regime"] = st.sidebar.selectbox(
        "Tax regime",
        options=list(TaxRegime),
        format_func=lambda r: TAX_REGIMES[r].name,
    )

    return inputs


def render_extra_service_inputs(total_units: int) -> List[str]:
    """Render ancillary service toggles with their scaled annual figures."""
    st.sidebar.subheader("Extra services")
    summaries = {s.service_id: s for s in describe_extra_services(total_units)}
    enabled = []
    for service_id, config in EXTRA_REVENUES.items():
        summary = summaries[service_id]
        if st.sidebar.checkbox(
            config.name,
            value=False,
            key=f"extra_{service_id}",
            help=(f"Revenue {summary.annual_revenue:.1f} млн, "
                  f"profit {summary.annual_profit:.1f} млн per year"),
        ):
            enabled.append(service_id)
    return enabled
