"""Investment KPIs derived from the cash flow sequence."""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import numpy_financial as npf

from .cashflow import CashFlowPeriod

NPV_DISCOUNT_RATE = 0.15

# The first period is a full year, every later period is a half-year
FIRST_PERIOD_YEARS = 1.0
PERIOD_YEARS = 0.5


@dataclass
class KPIResult:
    """Summary investment metrics."""

    payback_period: Optional[float]  # Years; None if never reached
    irr: float  # Simplified, CAGR-style
    npv: float
    total_investment: float
    final_cumulative_cf: float


def calculate_payback_period(cash_flow: List[CashFlowPeriod]) -> Optional[float]:
    """Find when cumulative cash flow first becomes non-negative.

    For the first crossing period i > 0:
        payback = 1 + (i - 1) x 0.5 + |cumulative[i-1]| / net[i] x 0.5
    where the fraction is 0 if net[i] <= 0. If the first (full-year)
    period already has non-negative cumulative cash flow, payback is
    capex / net of that period.

    Args:
        cash_flow: Cash flow periods in order.

    Returns:
        Payback in years, or None if cumulative cash flow never reaches zero.
    """
    payback_index = next(
        (i for i, period in enumerate(cash_flow) if period.cumulative_cf >= 0), None
    )
    if payback_index is None:
        return None

    if payback_index == 0:
        first = cash_flow[0]
        if first.net_cf <= 0:
            return 0.0
        return first.capex / first.net_cf * FIRST_PERIOD_YEARS

    last_negative = cash_flow[payback_index - 1]
    payback = cash_flow[payback_index]

    years_before = FIRST_PERIOD_YEARS + (payback_index - 1) * PERIOD_YEARS
    cf_to_cover = abs(last_negative.cumulative_cf)
    fraction = cf_to_cover / payback.net_cf if payback.net_cf > 0 else 0.0

    return years_before + fraction * PERIOD_YEARS


def calculate_irr(investment: float, final_value: float, years: float) -> float:
    """Simplified IRR: annualised growth of final cumulative cash flow over investment.

    irr = (final_value / investment) ^ (1 / years) - 1

    This is a CAGR-style approximation, not a root-solved IRR. See
    calculate_periodic_irr() for the latter.

    Args:
        investment: Total investment in millions.
        final_value: Final cumulative cash flow in millions.
        years: Projection length in years.

    Returns:
        Annualised rate. 0.0 if investment or years are not positive,
        since no rate is defined without an investment or a horizon.
        -1.0 if the final value is zero or negative: the whole investment
        is lost, which is a -100% return. A fractional power of a negative
        ratio has no real value, and returning 0.0 would rank a loss-making
        scenario level with one that breaks even.
    """
    if investment <= 0 or years <= 0:
        return 0.0
    ratio = final_value / investment
    if ratio <= 0:
        return -1.0
    return ratio ** (1 / years) - 1


def calculate_npv(
    cash_flow: List[CashFlowPeriod],
    discount_rate: float = NPV_DISCOUNT_RATE,
) -> float:
    """Discount period net cash flows: sum of net[k] / (1 + rate) ^ (k x 0.5)."""
    return sum(
        period.net_cf / (1 + discount_rate) ** (index * PERIOD_YEARS)
        for index, period in enumerate(cash_flow)
    )


def calculate_periodic_irr(cash_flow: List[CashFlowPeriod]) -> Optional[float]:
    """Root-solved IRR of period net cash flows, annualised.

    Periods are treated as equally spaced half-years.

    Returns:
        Annual IRR, or None if it cannot be solved (no sign change or no convergence).
    """
    values = np.array([period.net_cf for period in cash_flow], dtype=float)
    if values.size < 2 or not (np.any(values < 0) and np.any(values > 0)):
        return None

    period_irr = npf.irr(values)
    if period_irr is None or np.isnan(period_irr):
        return None
    return (1 + period_irr) ** 2 - 1


def derive_kpis(cash_flow: List[CashFlowPeriod], total_investment: float) -> KPIResult:
    """Derive payback, IRR and NPV from a cash flow sequence.

    Args:
        cash_flow: Periods from calculate_cash_flow().
        total_investment: Investment including reserve, in millions.

    Returns:
        KPIResult with all summary values.
    """
    final_cf = cash_flow[-1].cumulative_cf if cash_flow else 0.0
    total_years = len(cash_flow) * PERIOD_YEARS

    return KPIResult(
        payback_period=calculate_payback_period(cash_flow),
        irr=calculate_irr(total_investment, final_cf, total_years),
        npv=calculate_npv(cash_flow),
        total_investment=total_investment,
        final_cumulative_cf=final_cf,
    )
