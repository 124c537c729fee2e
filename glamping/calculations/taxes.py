"""Tax calculations for the simplified tax regimes."""

from typing import Dict

from ..models.lookups import TAX_REGIMES, TaxBase, TaxRegime, TaxRegimeConfig


def calculate_tax(
    revenue: float,
    opex: float,
    regime: TaxRegime | str,
    regimes: Dict[TaxRegime, TaxRegimeConfig] = TAX_REGIMES,
) -> float:
    """Calculate tax for a period.

    Tax base is revenue for revenue-based regimes and revenue - opex for
    profit-based regimes. A negative profit base is clamped to zero (no
    refund on losses). CAPEX is not part of the base.

    Args:
        revenue: Period revenue in millions.
        opex: Period OPEX in millions.
        regime: Tax regime, as enum or its string value.
        regimes: Regime table.

    Returns:
        Tax amount in millions, never negative. Unknown regimes pay no tax.

    Example:
        >>> round(calculate_tax(10, 4, TaxRegime.USN15), 2)
        0.9
    """
    if isinstance(regime, str):
        try:
            regime = TaxRegime(regime)
        except ValueError:
            return 0.0

    config = regimes.get(regime)
    if config is None or config.rate == 0:
        return 0.0

    if config.base == TaxBase.REVENUE:
        tax_base = revenue
    elif config.base == TaxBase.PROFIT:
        tax_base = revenue - opex
    else:
        tax_base = 0.0

    return max(tax_base, 0.0) * config.rate


def calculate_period_tax(period, regime: TaxRegime | str) -> float:
    """Tax of a period record with ``revenue`` and ``opex`` attributes.

    Shorthand for ``calculate_tax(period.revenue, period.opex, regime)``,
    which is the primary form.

    Args:
        period: Any object with ``revenue`` and ``opex`` (e.g., CashFlowPeriod).
        regime: Tax regime, as enum or its string value.

    Returns:
        Tax amount in millions.
    """
    return calculate_tax(period.revenue, period.opex, regime)
