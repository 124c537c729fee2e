"""Migration of first-version flat parameters to the Scenario model."""

import logging
import math
from datetime import date
from typing import Any, List, Mapping

from ..models.house import House
from ..models.lookups import HouseTier, HouseType
from ..models.phase import Phase
from ..models.scenario import Scenario, ScenarioParams
from .serialization import normalize_param_keys

logger = logging.getLogger(__name__)

LEGACY_TOTAL_UNITS = 10

# (phase id, name, start year, capex in millions) of the first version
LEGACY_PHASES = [
    ("phase-1", "Phase I", 2025, 5.0),
    ("phase-2", "Phase II", 2026, 20.0),
    ("phase-3", "Phase III", 2027, 19.0),
    ("phase-4", "Phase IV", 2028, 8.0),
]

REQUIRED_FIELDS = ("id", "name", "params")
REQUIRED_PARAMS = ("occupancy", "adr", "adr_cagr", "opex_cagr", "tax_regime")


def migrate_from_old_format(old_params: Mapping[str, Any]) -> Scenario:
    """Convert first-version parameters to a Scenario.

    Only occupancy (``occupancyRate``) and ADR carry over; the legacy OPEX
    percentage has no counterpart in the cost-structure model and is
    dropped. Houses and phases are rebuilt from the first-version plan.

    Args:
        old_params: Flat dict of legacy form values.

    Returns:
        New Scenario with default parameters otherwise.
    """
    defaults = ScenarioParams()
    params = ScenarioParams(
        occupancy=float(old_params.get("occupancyRate") or defaults.occupancy),
        adr=float(old_params.get("adr") or defaults.adr),
    )
    if "opexPercent" in old_params:
        logger.info("Dropping legacy opexPercent=%s during migration", old_params["opexPercent"])

    scenario = Scenario("migrated-scenario", "Migrated Scenario", params=params)
    for house in create_houses_from_old_capex(old_params):
        scenario.add_house(house)
    for phase in create_phases_from_old_phasing():
        scenario.add_phase(phase)
    return scenario


def create_houses_from_old_capex(old_params: Mapping[str, Any]) -> List[House]:
    """Split the legacy 10-unit residential fund 50/30/20 across house types."""
    total_units = LEGACY_TOTAL_UNITS
    comfort_units = math.floor(total_units * 0.5)
    a_frame_units = math.floor(total_units * 0.3)
    family_units = total_units - comfort_units - a_frame_units

    houses = []
    if comfort_units > 0:
        houses.append(House("comfort-1", HouseType.EASYFAB, HouseTier.COMFORT, comfort_units))
    if a_frame_units > 0:
        houses.append(House("aframe-1", HouseType.A_FRAME, HouseTier.COMFORT, a_frame_units))
    if family_units > 0:
        houses.append(House("family-1", HouseType.FAMILY_SUITE, HouseTier.COMFORT, family_units))
    return houses


def create_phases_from_old_phasing() -> List[Phase]:
    """Recreate the four yearly phases of the legacy plan."""
    return [
        Phase(phase_id, name, date(year, 1, 1), [], capex)
        for phase_id, name, year, capex in LEGACY_PHASES
    ]


def validate_scenario_data(scenario_data: Mapping[str, Any]) -> bool:
    """Check that a persisted scenario record has all required keys.

    camelCase parameter names written by earlier versions are accepted.

    Returns:
        True if the record is complete. Each missing key is logged.
    """
    for key in REQUIRED_FIELDS:
        if not scenario_data.get(key):
            logger.error("Missing required field: %s", key)
            return False

    params = scenario_data["params"]
    if not isinstance(params, Mapping):
        logger.error("Field 'params' must be an object")
        return False

    params = normalize_param_keys(params)
    valid = True
    for key in REQUIRED_PARAMS:
        if key not in params:
            logger.error("Missing required parameter: %s", key)
            valid = False
    return valid
