"""Tests for OPEX and ancillary services."""

import pytest

from glamping.calculations.opex import (
    annual_fixed_opex,
    apply_extras,
    calculate_opex,
    describe_extra_services,
)
from glamping.models.lookups import EXTRA_REVENUES
from glamping.models.scenario import OpexStructure, Scenario


@pytest.fixture
def scenario():
    return Scenario("s", "S")


class TestCalculateOpex:
    """Tests for half-year OPEX."""

    def test_base_year(self, scenario):
        """Fixed half-year costs plus booking commission plus consumables."""
        # fixed 7.7M / 2 = 3.85M, booking 10M x 5% = 0.5M, consumables 1000 x 500 = 0.5M
        opex = calculate_opex(10.0, 10, 1_000, 2025, scenario)
        assert opex == pytest.approx(4.85)

    def test_escalates_from_2025(self, scenario):
        opex = calculate_opex(10.0, 10, 1_000, 2027, scenario)
        assert opex == pytest.approx(4.85 * 1.06 ** 2)

    def test_fixed_costs_scale_with_units(self, scenario):
        assert calculate_opex(0.0, 5, 0, 2025, scenario) == pytest.approx(1.925)
        assert calculate_opex(0.0, 20, 0, 2025, scenario) == pytest.approx(7.7)

    def test_no_units_no_fixed_costs(self, scenario):
        assert calculate_opex(0.0, 0, 0, 2030, scenario) == 0

    def test_negative_room_nights_ignored(self, scenario):
        assert calculate_opex(0.0, 10, -50, 2025, scenario) == pytest.approx(3.85)

    def test_uses_scenario_structure(self, scenario):
        scenario.update_params(opex_structure={"payroll": 0, "marketing": 0, "utilities": 0})
        assert calculate_opex(20.0, 10, 0, 2025, scenario) == pytest.approx(1.0)


class TestApplyExtras:
    """Tests for ancillary revenue and cost."""

    def test_no_services(self, scenario):
        assert apply_extras(5.0, 3.0, 10, scenario) == (5.0, 3.0)

    def test_bath_complex(self, scenario):
        scenario.update_params(extra_revenue_services=["bath_complex"])
        revenue, opex = apply_extras(5.0, 3.0, 10, scenario)

        # 4.2M x 0.5 = 2.1M revenue, 30% of it as cost
        assert revenue == pytest.approx(7.1)
        assert opex == pytest.approx(3.63)

    def test_scales_with_units(self, scenario):
        scenario.update_params(extra_revenue_services=["bath_complex"])
        revenue, _ = apply_extras(0.0, 0.0, 5, scenario)
        assert revenue == pytest.approx(1.05)

    def test_zero_units_is_noop(self, scenario):
        scenario.update_params(extra_revenue_services=["bath_complex", "pool"])
        assert apply_extras(0.0, 1.0, 0, scenario) == (0.0, 1.0)

    def test_unknown_service_skipped(self, scenario):
        scenario.update_params(extra_revenue_services=["helicopter", "pool"])
        revenue, opex = apply_extras(0.0, 0.0, 10, scenario)

        assert revenue == pytest.approx(0.85)
        assert opex == pytest.approx(0.85 * 0.4)


class TestSummaries:
    """Tests for fixed OPEX and service summaries."""

    def test_annual_fixed_opex(self):
        structure = OpexStructure()
        assert annual_fixed_opex(10, structure) == pytest.approx(7_700_000)
        assert annual_fixed_opex(5, structure) == pytest.approx(3_850_000)
        assert annual_fixed_opex(0, structure) == pytest.approx(7_700_000)

    def test_describe_extra_services(self):
        summaries = {s.service_id: s for s in describe_extra_services(20)}

        assert set(summaries) == set(EXTRA_REVENUES)
        assert summaries["bath_complex"].annual_revenue == pytest.approx(8.4)
        assert summaries["bath_complex"].annual_profit == pytest.approx(8.4 * 0.7)
