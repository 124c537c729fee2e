"""File-backed scenario store and JSON import/export."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..models.errors import InvalidScenarioError, StorageError
from ..models.scenario import Scenario
from .serialization import scenario_from_dict, scenario_to_dict

logger = logging.getLogger(__name__)

SCENARIO_LIST_FILE = "scenario_list.json"
SCENARIO_PREFIX = "scenario_"


class ScenarioStore:
    """Stores scenarios as one JSON file each, plus an index of names.

    Usage:
        store = ScenarioStore(Path("~/.glamping").expanduser())
        store.save_scenario("base", scenario)
        scenario = store.load_scenario("base")
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _index_path(self) -> Path:
        return self.root / SCENARIO_LIST_FILE

    def _scenario_path(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise StorageError(f"Invalid scenario name: {name!r}")
        return self.root / f"{SCENARIO_PREFIX}{name}.json"

    def _write_index(self, names: List[str]) -> None:
        self._index_path().write_text(json.dumps(names, ensure_ascii=False), encoding="utf-8")

    def list_scenarios(self) -> List[str]:
        """Names of all saved scenarios, in save order."""
        path = self._index_path()
        if not path.exists():
            return []
        try:
            return list(json.loads(path.read_text(encoding="utf-8")))
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupted scenario index {path}: {e}") from e

    def save_scenario(self, name: str, scenario: Scenario) -> None:
        """Save a scenario under a name, replacing any previous version.

        Raises:
            StorageError: If the name is empty or cannot be used as a file name.
        """
        if not name:
            raise StorageError("Scenario name cannot be empty.")
        path = self._scenario_path(name)
        self.root.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(scenario_to_dict(scenario), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

        names = self.list_scenarios()
        if name not in names:
            names.append(name)
            self._write_index(names)
        logger.debug("Saved scenario %r to %s", name, path)

    def load_scenario(self, name: str) -> Optional[Scenario]:
        """Load a scenario by name, or None if it was never saved."""
        path = self._scenario_path(name)
        if not path.exists():
            return None
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupted scenario file {path}: {e}") from e
        return scenario_from_dict(raw)

    def delete_scenario(self, name: str) -> None:
        """Delete a scenario. Deleting an unknown name is a no-op."""
        path = self._scenario_path(name)
        if path.exists():
            path.unlink()

        names = self.list_scenarios()
        if name in names:
            names.remove(name)
            self._write_index(names)
        logger.debug("Deleted scenario %r", name)


def scenario_to_json(name: str, scenario: Scenario) -> str:
    """Serialize a scenario for download, with its name at the top level."""
    return json.dumps({"name": name, **scenario_to_dict(scenario)}, ensure_ascii=False, indent=2)


def scenario_from_json(text: str) -> Tuple[str, Scenario]:
    """Parse a downloaded scenario file.

    Raises:
        InvalidScenarioError: If the content is not JSON, the name is
            missing or not a string, or the house list is absent.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Rejected scenario import: %s", e)
        raise InvalidScenarioError(f"Scenario file is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidScenarioError("Invalid or corrupted scenario file.")
    name = data.get("name")
    if not name or not isinstance(name, str) or "houses" not in data:
        logger.warning("Rejected scenario import: missing name or houses")
        raise InvalidScenarioError("Invalid or corrupted scenario file.")

    data.setdefault("id", name)
    return name, scenario_from_dict(data)


def export_scenario_to_file(path: Path | str, name: str, scenario: Scenario) -> Path:
    """Write a scenario to a JSON file and return its path."""
    path = Path(path)
    path.write_text(scenario_to_json(name, scenario), encoding="utf-8")
    return path


def import_scenario_from_file(path: Path | str) -> Tuple[str, Scenario]:
    """Read a scenario written by export_scenario_to_file()."""
    return scenario_from_json(Path(path).read_text(encoding="utf-8"))
