"""Tests for dict conversion of scenarios."""

from datetime import date

import pytest

from glamping.models.errors import InvalidScenarioError
from glamping.models.lookups import HouseTier, HouseType, TaxRegime
from glamping.storage.serialization import (
    house_from_dict,
    params_from_dict,
    params_to_dict,
    phase_from_dict,
    scenario_from_dict,
    scenario_to_dict,
)


class TestParams:
    """Tests for parameter conversion."""

    def test_enum_stored_as_value(self, example_scenario):
        raw = params_to_dict(example_scenario.params)

        assert raw["tax_regime"] == "USN6"
        assert raw["seasonality"]["jan"] == {"occupancy": 0.7, "adr": 1.2}

    def test_missing_keys_use_defaults(self):
        params = params_from_dict({"occupancy": 70})

        assert params.occupancy == 70
        assert params.adr == 9_400
        assert params.tax_regime == TaxRegime.USN6
        assert len(params.seasonality) == 12

    def test_camel_case_keys(self):
        params = params_from_dict({
            "adrCAGR": 5,
            "taxRegime": "OSN",
            "opexStructure": {"payroll": 1_000_000},
            "extraRevenueServices": ["pool"],
        })

        assert params.adr_cagr == 5
        assert params.tax_regime == TaxRegime.OSN
        assert params.opex_structure.payroll == 1_000_000
        assert params.opex_structure.marketing == 1_200_000
        assert params.extra_revenue_services == ["pool"]

    def test_unknown_regime(self):
        with pytest.raises(InvalidScenarioError):
            params_from_dict({"tax_regime": "VAT"})

    def test_bad_number(self):
        with pytest.raises(InvalidScenarioError):
            params_from_dict({"occupancy": "lots"})


class TestRecords:
    """Tests for house, phase and scenario records."""

    def test_house_from_dict(self):
        house = house_from_dict({"id": "h", "type": "A-Frame (39 м²)", "tier": "comfort"})

        assert house.type == HouseType.A_FRAME
        assert house.tier == HouseTier.COMFORT
        assert house.qty == 1

    def test_house_unknown_type(self):
        with pytest.raises(InvalidScenarioError):
            house_from_dict({"id": "h", "type": "Igloo", "tier": "comfort"})

    def test_house_negative_qty(self):
        """A negative unit count would subtract CAPEX and revenue."""
        with pytest.raises(InvalidScenarioError, match="qty"):
            house_from_dict({"id": "h", "type": "A-Frame (39 м²)", "tier": "comfort", "qty": -10})

    def test_phase_accepts_datetime_string(self):
        phase = phase_from_dict({"id": "p", "name": "P", "start_date": "2026-03-01T00:00:00"})

        assert phase.start_date == date(2026, 3, 1)
        assert phase.houses == []
        assert phase.capex == 0.0

    def test_phase_missing_name(self):
        with pytest.raises(InvalidScenarioError):
            phase_from_dict({"id": "p", "start_date": "2026-03-01"})

    def test_scenario_round_trip(self, example_scenario):
        loaded = scenario_from_dict(scenario_to_dict(example_scenario))

        assert loaded.params == example_scenario.params
        assert loaded.phases == example_scenario.phases
        assert loaded.updated_at == example_scenario.updated_at
        assert loaded.get_total_capex() == pytest.approx(42.9)

    def test_scenario_missing_id(self):
        with pytest.raises(InvalidScenarioError):
            scenario_from_dict({"name": "x"})

    def test_scenario_bad_timestamp(self):
        with pytest.raises(InvalidScenarioError):
            scenario_from_dict({"id": "x", "name": "x", "created_at": "yesterday"})
