"""Scenario persistence: JSON store, file import/export and legacy migration."""

from .serialization import scenario_to_dict, scenario_from_dict
from .store import (
    ScenarioStore,
    scenario_to_json,
    scenario_from_json,
    export_scenario_to_file,
    import_scenario_from_file,
)
from .migration import migrate_from_old_format, validate_scenario_data

__all__ = [
    "scenario_to_dict",
    "scenario_from_dict",
    "ScenarioStore",
    "scenario_to_json",
    "scenario_from_json",
    "export_scenario_to_file",
    "import_scenario_from_file",
    "migrate_from_old_format",
    "validate_scenario_data",
]
