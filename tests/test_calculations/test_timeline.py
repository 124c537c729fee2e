"""Tests for the yearly phase timeline."""

import pytest

from glamping.calculations.timeline import (
    CAPEX_DISTRIBUTION,
    PHASE_FLAGSHIP,
    PHASE_RAMP_UP,
    PHASE_START,
    build_phase_timeline,
    get_phase_name,
)
from glamping.models.house import House
from glamping.models.lookups import HouseTier, HouseType
from glamping.models.scenario import Scenario


class TestBuildPhaseTimeline:
    """Tests for build_phase_timeline."""

    def test_covers_2025_to_2033(self, example_scenario):
        timeline = build_phase_timeline(example_scenario, 42.9)
        assert [t.year for t in timeline] == list(range(2025, 2034))

    def test_capex_distribution(self, example_scenario):
        """CAPEX follows 9.6% / 38.5% / 36.5% / 15.4% over 2025-2028."""
        timeline = build_phase_timeline(example_scenario, 42.9)

        assert timeline[0].capex == pytest.approx(4.12, abs=0.005)
        assert timeline[1].capex == pytest.approx(42.9 * 0.385)
        assert timeline[2].capex == pytest.approx(42.9 * 0.365)
        assert timeline[3].capex == pytest.approx(42.9 * 0.154)
        assert all(t.capex == 0 for t in timeline[4:])

    def test_capex_sums_to_total(self, example_scenario):
        timeline = build_phase_timeline(example_scenario, 42.9)
        assert sum(t.capex for t in timeline) == pytest.approx(42.9)
        assert sum(CAPEX_DISTRIBUTION) == pytest.approx(1.0)

    def test_unit_ramp(self, example_scenario):
        timeline = build_phase_timeline(example_scenario, 42.9)
        assert [t.units for t in timeline] == [0, 4, 9, 10, 10, 10, 10, 10, 10]

    def test_units_floored(self):
        """Fractional ramp units round down."""
        scenario = Scenario("s", "S")
        scenario.add_house(House("a", HouseType.EASYFAB, HouseTier.COMFORT, 7))

        timeline = build_phase_timeline(scenario, 10.0)

        # 7 x 0.4 = 2.8, 7 x 0.9 = 6.3
        assert timeline[1].units == 2
        assert timeline[2].units == 6
        assert timeline[3].units == 7

    def test_units_never_decrease(self, example_scenario):
        units = [t.units for t in build_phase_timeline(example_scenario, 42.9)]
        assert units == sorted(units)

    def test_zero_units(self):
        timeline = build_phase_timeline(Scenario("s", "S"), 0.0)
        assert all(t.units == 0 and t.capex == 0 for t in timeline)


class TestPhaseName:
    """Tests for get_phase_name."""

    @pytest.mark.parametrize("year,name", [
        (2025, PHASE_START),
        (2026, PHASE_START),
        (2027, PHASE_RAMP_UP),
        (2028, PHASE_RAMP_UP),
        (2029, PHASE_FLAGSHIP),
        (2033, PHASE_FLAGSHIP),
    ])
    def test_phase_name(self, year, name):
        assert get_phase_name(year) == name
