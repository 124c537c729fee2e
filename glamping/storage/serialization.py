"""Conversion of scenarios to and from plain JSON-compatible dicts."""

from dataclasses import asdict
from datetime import date, datetime
from typing import Any, Dict, Mapping

from ..models.errors import InvalidScenarioError
from ..models.house import House
from ..models.lookups import HouseTier, HouseType, SeasonalFactor, TaxRegime
from ..models.phase import Phase
from ..models.scenario import OpexStructure, Scenario, ScenarioParams

# camelCase keys written by earlier versions of the app
PARAM_ALIASES: Dict[str, str] = {
    "adrCAGR": "adr_cagr",
    "opexCAGR": "opex_cagr",
    "opexStructure": "opex_structure",
    "taxRegime": "tax_regime",
    "extraRevenueServices": "extra_revenue_services",
}


def normalize_param_keys(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename legacy camelCase parameter keys to their current names."""
    return {PARAM_ALIASES.get(key, key): value for key, value in raw.items()}


def house_to_dict(house: House) -> Dict[str, Any]:
    return {
        "id": house.id,
        "type": house.type.value,
        "tier": house.tier.value,
        "qty": house.qty,
    }


def house_from_dict(raw: Mapping[str, Any]) -> House:
    try:
        return House(
            id=str(raw["id"]),
            type=HouseType(raw["type"]),
            tier=HouseTier(raw["tier"]),
            qty=int(raw.get("qty", 1)),
        )
    except (KeyError, ValueError, TypeError) as e:
        raise InvalidScenarioError(f"Invalid house record {raw!r}: {e}") from e


def phase_to_dict(phase: Phase) -> Dict[str, Any]:
    return {
        "id": phase.id,
        "name": phase.name,
        "start_date": phase.start_date.isoformat(),
        "houses": [house_to_dict(h) for h in phase.houses],
        "capex": phase.capex,
    }


def phase_from_dict(raw: Mapping[str, Any]) -> Phase:
    try:
        return Phase(
            id=str(raw["id"]),
            name=str(raw["name"]),
            start_date=date.fromisoformat(str(raw["start_date"])[:10]),
            houses=[house_from_dict(h) for h in raw.get("houses", [])],
            capex=float(raw.get("capex", 0.0)),
        )
    except (KeyError, ValueError, TypeError) as e:
        raise InvalidScenarioError(f"Invalid phase record {raw!r}: {e}") from e


def params_to_dict(params: ScenarioParams) -> Dict[str, Any]:
    return {
        "occupancy": params.occupancy,
        "adr": params.adr,
        "adr_cagr": params.adr_cagr,
        "opex_structure": asdict(params.opex_structure),
        "opex_cagr": params.opex_cagr,
        "tax_regime": params.tax_regime.value,
        "extra_revenue_services": list(params.extra_revenue_services),
        "seasonality": {
            month: {"occupancy": factor.occupancy, "adr": factor.adr}
            for month, factor in params.seasonality.items()
        },
    }


def params_from_dict(raw: Mapping[str, Any]) -> ScenarioParams:
    """Build ScenarioParams from a dict, defaulting missing keys.

    Unknown keys are ignored so that records written by older versions
    still load.

    Raises:
        InvalidScenarioError: If a value has the wrong type or an unknown enum value.
    """
    values = normalize_param_keys(raw)
    defaults = ScenarioParams()
    try:
        opex_raw = values.get("opex_structure") or {}
        opex = OpexStructure(**{
            key: float(opex_raw.get(key, getattr(defaults.opex_structure, key)))
            for key in asdict(defaults.opex_structure)
        })

        seasonality_raw = values.get("seasonality")
        if seasonality_raw is None:
            seasonality = defaults.seasonality
        else:
            seasonality = {
                month: SeasonalFactor(
                    occupancy=float(factor.get("occupancy", 1.0)),
                    adr=float(factor.get("adr", 1.0)),
                )
                for month, factor in seasonality_raw.items()
            }

        return ScenarioParams(
            occupancy=float(values.get("occupancy", defaults.occupancy)),
            adr=float(values.get("adr", defaults.adr)),
            adr_cagr=float(values.get("adr_cagr", defaults.adr_cagr)),
            opex_structure=opex,
            opex_cagr=float(values.get("opex_cagr", defaults.opex_cagr)),
            tax_regime=TaxRegime(values.get("tax_regime", defaults.tax_regime.value)),
            extra_revenue_services=[str(s) for s in values.get("extra_revenue_services", [])],
            seasonality=seasonality,
        )
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidScenarioError(f"Invalid scenario parameters: {e}") from e


def scenario_to_dict(scenario: Scenario) -> Dict[str, Any]:
    """Convert a scenario to a JSON-compatible dict."""
    return {
        "id": scenario.id,
        "name": scenario.name,
        "params": params_to_dict(scenario.params),
        "houses": [house_to_dict(h) for h in scenario.houses],
        "phases": [phase_to_dict(p) for p in scenario.phases],
        "created_at": scenario.created_at.isoformat(),
        "updated_at": scenario.updated_at.isoformat(),
    }


def scenario_from_dict(raw: Mapping[str, Any]) -> Scenario:
    """Build a scenario from a dict produced by scenario_to_dict().

    Raises:
        InvalidScenarioError: If required fields are missing or malformed.
    """
    if not isinstance(raw, Mapping):
        raise InvalidScenarioError(f"Scenario record must be an object, got {type(raw).__name__}")
    for key in ("id", "name"):
        if key not in raw:
            raise InvalidScenarioError(f"Scenario record is missing '{key}'")

    scenario = Scenario(
        id=str(raw["id"]),
        name=str(raw["name"]),
        params=params_from_dict(raw.get("params", {})),
        houses=[house_from_dict(h) for h in raw.get("houses", [])],
        phases=[phase_from_dict(p) for p in raw.get("phases", [])],
    )
    try:
        if "created_at" in raw:
            scenario.created_at = datetime.fromisoformat(raw["created_at"])
        if "updated_at" in raw:
            scenario.updated_at = datetime.fromisoformat(raw["updated_at"])
    except (TypeError, ValueError) as e:
        raise InvalidScenarioError(f"Invalid scenario timestamp: {e}") from e
    return scenario
