"""Room revenue with monthly seasonality and ADR escalation."""

import calendar
from dataclasses import dataclass
from typing import List

from ..models.lookups import MONTH_KEYS, NEUTRAL_FACTOR
from ..models.scenario import ScenarioParams

# ADR grows only after this year
ADR_ESCALATION_BASE_YEAR = 2028


@dataclass
class MonthlyRevenue:
    """Room revenue for one calendar month."""

    month_key: str
    days: int
    occupancy: float  # Adjusted occupancy as a fraction
    adr: float  # Adjusted ADR, currency per night
    room_nights: float
    revenue: float  # Millions


@dataclass
class HalfYearRevenue:
    """Room revenue for six months."""

    months: List[MonthlyRevenue]
    room_nights: float
    revenue: float  # Millions


def half_year_months(is_h2: bool) -> List[str]:
    """Month keys of the first or second half of a year."""
    return MONTH_KEYS[6:] if is_h2 else MONTH_KEYS[:6]


def escalate_adr(base_adr: float, year: int, adr_cagr: float) -> float:
    """Apply ADR escalation for years after 2028.

    Args:
        base_adr: Seasonally adjusted ADR.
        year: Calendar year.
        adr_cagr: Annual growth in percent (e.g., 3.0 for 3%).

    Returns:
        Escalated ADR. Unchanged through 2028.
    """
    if year > ADR_ESCALATION_BASE_YEAR:
        return base_adr * (1 + adr_cagr / 100) ** (year - ADR_ESCALATION_BASE_YEAR)
    return base_adr


def calculate_half_year_revenue(
    params: ScenarioParams,
    units: int,
    year: int,
    is_h2: bool,
) -> HalfYearRevenue:
    """Calculate room revenue for a half-year month by month.

    For each month:
    - occupancy = base occupancy / 100 x seasonal occupancy multiplier
    - ADR = base ADR x seasonal ADR multiplier, escalated after 2028
    - room-nights = units x days in month x occupancy
    - revenue = room-nights x ADR / 1,000,000

    Months missing from the seasonality table use neutral multipliers.

    Args:
        params: Scenario parameters.
        units: Units available in the period.
        year: Calendar year.
        is_h2: True for July-December.

    Returns:
        HalfYearRevenue with monthly breakdown and totals.
    """
    months = []
    first_month = 7 if is_h2 else 1

    for index, month_key in enumerate(half_year_months(is_h2)):
        days = calendar.monthrange(year, first_month + index)[1]
        factor = params.seasonality.get(month_key, NEUTRAL_FACTOR)

        occupancy = (params.occupancy / 100) * factor.occupancy
        adr = escalate_adr(params.adr * factor.adr, year, params.adr_cagr)

        room_nights = units * days * occupancy
        months.append(MonthlyRevenue(
            month_key=month_key,
            days=days,
            occupancy=occupancy,
            adr=adr,
            room_nights=room_nights,
            revenue=room_nights * adr / 1_000_000,
        ))

    return HalfYearRevenue(
        months=months,
        room_nights=sum(m.room_nights for m in months),
        revenue=sum(m.revenue for m in months),
    )
