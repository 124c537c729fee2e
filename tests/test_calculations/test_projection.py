"""Tests for the unified projection entry point."""

import logging

import pytest

from glamping.calculations.projection import run_projection
from glamping.calculations.timeline import PHASE_FLAGSHIP, PHASE_START


class TestRunProjection:
    """Tests for run_projection."""

    def test_reference_scenario(self, example_result):
        assert example_result.scenario_name == "Example"
        assert example_result.total_capex == 42.9
        assert len(example_result.timeline) == 9
        assert len(example_result.cash_flow) == 17
        assert example_result.timeline[3].units == 10

    def test_deterministic(self, example_scenario):
        """Repeated runs give identical results."""
        first = run_projection(example_scenario, 42.9)
        second = run_projection(example_scenario, 42.9)

        assert first.cash_flow == second.cash_flow
        assert first.kpis == second.kpis

    def test_explicit_investment(self, example_scenario):
        result = run_projection(example_scenario, 42.9, total_investment=50.0)
        assert result.kpis.total_investment == 50.0

    def test_annual_revenue(self, example_result):
        h1, h2 = [p for p in example_result.cash_flow if p.year == 2029]
        assert example_result.annual_revenue() == pytest.approx(h1.revenue + h2.revenue)
        assert example_result.annual_revenue(2025) == 0

    def test_higher_occupancy_improves_npv(self, example_scenario):
        base = run_projection(example_scenario, 42.9)
        example_scenario.update_params(occupancy=75)
        better = run_projection(example_scenario, 42.9)

        assert better.kpis.npv > base.kpis.npv
        assert better.kpis.final_cumulative_cf > base.kpis.final_cumulative_cf

    def test_to_dataframe(self, example_result):
        df = example_result.to_dataframe()

        assert len(df) == 17
        assert list(df.columns) == [
            "period", "phase", "year", "is_h2", "revenue", "opex",
            "capex", "tax", "net_cf", "cumulative_cf",
        ]
        assert df["phase"].iloc[0] == PHASE_START
        assert df["phase"].iloc[-1] == PHASE_FLAGSHIP
        assert df["capex"].sum() == pytest.approx(42.9)
        assert df["cumulative_cf"].iloc[-1] == pytest.approx(example_result.kpis.final_cumulative_cf)

    def test_invalid_params_logged(self, example_scenario, caplog):
        """Unknown services are skipped by the engine and reported as warnings."""
        example_scenario.update_params(extra_revenue_services=["helipad"])

        with caplog.at_level(logging.WARNING, logger="glamping.calculations.projection"):
            result = run_projection(example_scenario, 42.9)

        assert "helipad" in caplog.text
        assert len(result.cash_flow) == 17
