"""Tests for migration of first-version parameters."""

import logging
from datetime import date

import pytest

from glamping.models.lookups import HouseType
from glamping.storage.migration import (
    create_houses_from_old_capex,
    create_phases_from_old_phasing,
    migrate_from_old_format,
    validate_scenario_data,
)


class TestMigrateFromOldFormat:
    """Tests for migrate_from_old_format."""

    def test_carries_occupancy_and_adr(self):
        scenario = migrate_from_old_format({"occupancyRate": 60, "adr": 8_000})

        assert scenario.id == "migrated-scenario"
        assert scenario.params.occupancy == 60
        assert scenario.params.adr == 8_000
        assert scenario.params.opex_cagr == 6.0

    def test_defaults_when_missing(self):
        scenario = migrate_from_old_format({})

        assert scenario.params.occupancy == 55
        assert scenario.params.adr == 9_400

    def test_rebuilds_houses_and_phases(self):
        scenario = migrate_from_old_format({})

        assert scenario.get_total_units() == 10
        assert len(scenario.phases) == 4
        assert scenario.get_total_capex() == pytest.approx(52.0)

    def test_opex_percent_dropped_with_log(self, caplog):
        with caplog.at_level(logging.INFO, logger="glamping.storage.migration"):
            migrate_from_old_format({"opexPercent": 40})

        assert "opexPercent" in caplog.text

    def test_house_split(self):
        houses = {h.type: h.qty for h in create_houses_from_old_capex({})}
        assert houses == {HouseType.EASYFAB: 5, HouseType.A_FRAME: 3, HouseType.FAMILY_SUITE: 2}

    def test_phase_dates(self):
        phases = create_phases_from_old_phasing()

        assert [p.start_date for p in phases] == [date(y, 1, 1) for y in range(2025, 2029)]
        assert [p.capex for p in phases] == [5.0, 20.0, 19.0, 8.0]


class TestValidateScenarioData:
    """Tests for validate_scenario_data."""

    @pytest.fixture
    def record(self):
        return {
            "id": "s",
            "name": "S",
            "params": {
                "occupancy": 55,
                "adr": 9_400,
                "adr_cagr": 3,
                "opex_cagr": 6,
                "tax_regime": "USN6",
            },
        }

    def test_valid(self, record):
        assert validate_scenario_data(record)

    def test_camel_case_params(self, record):
        params = record["params"]
        params["adrCAGR"] = params.pop("adr_cagr")
        params["taxRegime"] = params.pop("tax_regime")
        assert validate_scenario_data(record)

    def test_missing_field(self, record, caplog):
        del record["name"]
        with caplog.at_level(logging.ERROR, logger="glamping.storage.migration"):
            assert not validate_scenario_data(record)
        assert "name" in caplog.text

    def test_missing_param(self, record):
        del record["params"]["tax_regime"]
        assert not validate_scenario_data(record)

    def test_params_not_object(self, record):
        record["params"] = ["occupancy"]
        assert not validate_scenario_data(record)
