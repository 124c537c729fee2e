"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from glamping.calculations.projection import run_projection
from tests.fixtures.test_inputs import EXAMPLE_TOTAL_CAPEX, get_example_scenario


@pytest.fixture
def example_scenario():
    """Get the 10-unit reference scenario."""
    return get_example_scenario()


@pytest.fixture
def example_result(example_scenario):
    """Get the projection of the reference scenario at 42.9 M CAPEX."""
    return run_projection(example_scenario, EXAMPLE_TOTAL_CAPEX)
