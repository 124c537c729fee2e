#!/usr/bin/env python3
"""Example script to run the glamping projection with the reference inputs."""

import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from glamping.models.house import House
from glamping.models.lookups import HouseTier, HouseType, TaxRegime
from glamping.models.phase import Phase
from glamping.models.scenario import OpexStructure, Scenario, ScenarioParams
from glamping.calculations.capex import calculate_capex_summary
from glamping.calculations.projection import run_projection
from glamping.scenarios import format_matrix_results, run_scenario_matrix

REFERENCE_TOTAL_CAPEX = 42.9


def get_reference_scenario() -> Scenario:
    """Get the 10-unit reference scenario."""
    params = ScenarioParams(
        occupancy=55,
        adr=9_400,
        adr_cagr=3,
        opex_structure=OpexStructure(
            payroll=3_500_000,
            marketing=1_200_000,
            booking=0.05,
            consumables=500,
            utilities=3_000_000,
        ),
        opex_cagr=6,
        tax_regime=TaxRegime.USN6,
    )
    houses = [
        House("easyfab", HouseType.EASYFAB, HouseTier.COMFORT, 5),
        House("aframe", HouseType.A_FRAME, HouseTier.COMFORT, 3),
        House("family", HouseType.FAMILY_SUITE, HouseTier.COMFORT, 2),
    ]
    scenario = Scenario("reference", "Reference 10 units", params=params)
    for house in houses:
        scenario.add_house(house)
    scenario.add_phase(Phase("phase-1", "Phase I", date(2025, 1, 1), list(houses), capex=15.4))
    return scenario


def run_single_projection():
    """Run the reference projection and print timeline, cash flow and KPIs."""
    print("\n" + "=" * 60)
    print("GLAMPING FINANCIAL MODEL")
    print("Reference Projection")
    print("=" * 60 + "\n")

    scenario = get_reference_scenario()
    result = run_projection(scenario, REFERENCE_TOTAL_CAPEX)

    print(f"{'Year':<6} {'Phase':<20} {'Units':>6} {'CAPEX':>10}")
    print("-" * 45)
    for entry in result.timeline:
        print(f"{entry.year:<6} {entry.name:<20} {entry.units:>6} {entry.capex:>10.2f}")

    print(f"\n{'Period':<10} {'Revenue':>10} {'OPEX':>10} {'CAPEX':>10} "
          f"{'Tax':>8} {'Net CF':>10} {'Cum. CF':>10}")
    print("-" * 72)
    for p in result.cash_flow:
        print(f"{p.period:<10} {p.revenue:>10.2f} {p.opex:>10.2f} {p.capex:>10.2f} "
              f"{p.tax:>8.2f} {p.net_cf:>10.2f} {p.cumulative_cf:>10.2f}")

    kpis = result.kpis
    payback = f"{kpis.payback_period:.1f} years" if kpis.payback_period is not None else "not reached"
    print("\n" + "=" * 60)
    print("KEY METRICS")
    print("=" * 60)
    print(f"{'Total investment':<25} {kpis.total_investment:>12.2f} M")
    print(f"{'Payback':<25} {payback:>14}")
    print(f"{'IRR (simplified)':<25} {kpis.irr:>13.1%}")
    if result.periodic_irr is not None:
        print(f"{'IRR (period cash flows)':<25} {result.periodic_irr:>13.1%}")
    print(f"{'NPV @ 15%':<25} {kpis.npv:>12.2f} M")
    print(f"{'Revenue 2029':<25} {result.annual_revenue(2029):>12.2f} M")

    budget = calculate_capex_summary(scenario.houses)
    print(f"\nDefault CAPEX budget: {budget.total_capex:.2f} M "
          f"(houses {budget.house_capex:.2f} M, reserve {budget.reserve:.2f} M)")


def run_matrix():
    """Run the tax regime x services matrix."""
    print("\n" + "=" * 60)
    print("SCENARIO MATRIX ANALYSIS")
    print("=" * 60 + "\n")

    results = run_scenario_matrix(get_reference_scenario(), REFERENCE_TOTAL_CAPEX)
    print(format_matrix_results(results, show_top_n=16))


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Glamping Financial Model")
    parser.add_argument(
        "--matrix",
        action="store_true",
        help="Run tax regime x services matrix",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    run_single_projection()

    if args.matrix:
        run_matrix()

    print("\nDone.")


if __name__ == "__main__":
    main()
