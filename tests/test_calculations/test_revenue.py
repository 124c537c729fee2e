"""Tests for seasonal room revenue."""

import pytest

from glamping.calculations.revenue import (
    calculate_half_year_revenue,
    escalate_adr,
    half_year_months,
)
from glamping.models.scenario import ScenarioParams


class TestEscalateADR:
    """Tests for ADR escalation."""

    def test_no_escalation_through_2028(self):
        assert escalate_adr(10_000, 2026, 3) == 10_000
        assert escalate_adr(10_000, 2028, 3) == 10_000

    def test_compounds_after_2028(self):
        assert escalate_adr(100, 2029, 3) == pytest.approx(103.0)
        assert escalate_adr(100, 2030, 3) == pytest.approx(106.09)


class TestHalfYearRevenue:
    """Tests for calculate_half_year_revenue."""

    def test_months_split(self):
        assert half_year_months(False) == ["jan", "feb", "mar", "apr", "may", "jun"]
        assert half_year_months(True) == ["jul", "aug", "sep", "oct", "nov", "dec"]

    def test_neutral_seasonality(self):
        """Without seasonal factors revenue is units x days x occupancy x ADR."""
        params = ScenarioParams(occupancy=50, adr=10_000, seasonality={})

        h1 = calculate_half_year_revenue(params, 10, 2026, False)
        h2 = calculate_half_year_revenue(params, 10, 2026, True)

        # 181 days in H1 2026, 184 in H2
        assert h1.room_nights == pytest.approx(905)
        assert h1.revenue == pytest.approx(9.05)
        assert h2.room_nights == pytest.approx(920)
        assert h2.revenue == pytest.approx(9.2)

    def test_leap_year_february(self):
        params = ScenarioParams(occupancy=100, adr=1_000, seasonality={})
        h1 = calculate_half_year_revenue(params, 1, 2028, False)

        assert h1.months[1].days == 29
        assert h1.room_nights == pytest.approx(182)

    def test_seasonal_factors_applied(self):
        params = ScenarioParams(occupancy=55, adr=9_400)
        january = calculate_half_year_revenue(params, 10, 2026, False).months[0]

        assert january.month_key == "jan"
        assert january.occupancy == pytest.approx(0.55 * 0.7)
        assert january.adr == pytest.approx(9_400 * 1.2)
        assert january.room_nights == pytest.approx(10 * 31 * 0.55 * 0.7)

    def test_summer_half_beats_winter_half(self):
        params = ScenarioParams()
        h1 = calculate_half_year_revenue(params, 10, 2029, False)
        h2 = calculate_half_year_revenue(params, 10, 2029, True)
        assert h2.revenue > h1.revenue

    def test_zero_units(self):
        result = calculate_half_year_revenue(ScenarioParams(), 0, 2029, False)
        assert result.revenue == 0
        assert result.room_nights == 0

    def test_totals_match_months(self):
        result = calculate_half_year_revenue(ScenarioParams(), 10, 2030, True)
        assert result.revenue == pytest.approx(sum(m.revenue for m in result.months))
        assert len(result.months) == 6
