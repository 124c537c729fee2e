"""Yearly phase timeline: unit ramp and CAPEX distribution for 2025-2033."""

import math
from dataclasses import dataclass
from typing import Dict, List

from ..models.scenario import Scenario

BASE_YEAR = 2025
FINAL_YEAR = 2033

# Share of total CAPEX spent in each of the first four years (sums to 1.0)
CAPEX_DISTRIBUTION = (0.096, 0.385, 0.365, 0.154)

# Share of total units available per year; later years run at 100%
UNIT_RAMP: Dict[int, float] = {
    2025: 0.0,
    2026: 0.4,
    2027: 0.9,
}

PHASE_START = "Фаза I. Старт"
PHASE_RAMP_UP = "Фаза II. Разгон"
PHASE_FLAGSHIP = "Фаза III. Флагман"


@dataclass
class TimelineYear:
    """One year of the development timeline."""

    year: int
    capex: float  # Millions spent this year
    units: int  # Units available for sale
    name: str  # Phase name (informational)


def get_phase_name(year: int) -> str:
    """Phase name for a calendar year."""
    if year <= 2026:
        return PHASE_START
    elif year <= 2028:
        return PHASE_RAMP_UP
    else:
        return PHASE_FLAGSHIP


def build_phase_timeline(scenario: Scenario, total_capex: float) -> List[TimelineYear]:
    """Build the 2025-2033 yearly timeline.

    Units ramp 0% / 40% / 90% / 100% over 2025-2028 (floored to whole
    units). CAPEX is spread over 2025-2028 using ``CAPEX_DISTRIBUTION``;
    later years carry no CAPEX.

    Args:
        scenario: Scenario supplying the total unit count.
        total_capex: Total CAPEX in millions, including house costs.

    Returns:
        Nine TimelineYear records, one per year.

    Example:
        >>> timeline = build_phase_timeline(scenario, 42.9)
        >>> round(timeline[0].capex, 2)
        4.12
    """
    total_units = scenario.get_total_units()
    timeline = []

    for offset, year in enumerate(range(BASE_YEAR, FINAL_YEAR + 1)):
        capex_share = CAPEX_DISTRIBUTION[offset] if offset < len(CAPEX_DISTRIBUTION) else 0.0
        units = math.floor(total_units * UNIT_RAMP.get(year, 1.0))
        timeline.append(TimelineYear(
            year=year,
            capex=total_capex * capex_share,
            units=units,
            name=get_phase_name(year),
        ))

    return timeline
