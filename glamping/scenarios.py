"""Scenario matrix runner for comparing tax regimes and ancillary service sets.

Uses the unified projection engine (run_projection) for every combination.
"""

from dataclasses import dataclass
from itertools import product
from typing import Iterator, List, Sequence, Tuple

from .models.lookups import TaxRegime
from .models.scenario import Scenario
from .calculations.metrics import KPIResult
from .calculations.projection import run_projection

DEFAULT_SERVICE_SETS: List[Tuple[str, ...]] = [
    (),
    ("bath_complex",),
    ("bath_complex", "breakfast"),
    ("bath_complex", "breakfast", "excursions", "pool"),
]


@dataclass
class MatrixCombination:
    """A tax regime and set of enabled services to test."""

    name: str
    tax_regime: TaxRegime
    services: Tuple[str, ...]


@dataclass
class ScenarioMatrixResult:
    """Result of one combination."""

    combination: MatrixCombination
    kpis: KPIResult
    revenue_2029: float


def generate_combinations(
    regimes: Sequence[TaxRegime] | None = None,
    service_sets: Sequence[Tuple[str, ...]] | None = None,
) -> Iterator[MatrixCombination]:
    """Generate every tax regime x service set combination.

    Args:
        regimes: Regimes to test. Defaults to all.
        service_sets: Service ID tuples to test. Defaults to DEFAULT_SERVICE_SETS.

    Yields:
        MatrixCombination for each pair.
    """
    regimes = list(regimes or TaxRegime)
    service_sets = list(service_sets if service_sets is not None else DEFAULT_SERVICE_SETS)

    for regime, services in product(regimes, service_sets):
        extras = "+".join(services) if services else "rooms only"
        yield MatrixCombination(
            name=f"{regime.value} / {extras}",
            tax_regime=regime,
            services=tuple(services),
        )


def run_scenario_matrix(
    base: Scenario,
    total_capex: float,
    regimes: Sequence[TaxRegime] | None = None,
    service_sets: Sequence[Tuple[str, ...]] | None = None,
) -> List[ScenarioMatrixResult]:
    """Run the projection for every combination on copies of a base scenario.

    Args:
        base: Base scenario (never modified).
        total_capex: Total CAPEX in millions.
        regimes: Tax regimes to test. Defaults to all.
        service_sets: Enabled-service sets to test.

    Returns:
        List of ScenarioMatrixResult, sorted by NPV (descending).
    """
    results: List[ScenarioMatrixResult] = []

    for combo in generate_combinations(regimes, service_sets):
        scenario = base.clone(f"{base.id}:{combo.name}", combo.name)
        scenario.update_params(
            tax_regime=combo.tax_regime,
            extra_revenue_services=list(combo.services),
        )
        result = run_projection(scenario, total_capex)
        results.append(ScenarioMatrixResult(
            combination=combo,
            kpis=result.kpis,
            revenue_2029=result.annual_revenue(2029),
        ))

    results.sort(key=lambda r: r.kpis.npv, reverse=True)
    return results


def format_matrix_results(
    results: List[ScenarioMatrixResult],
    show_top_n: int = 10,
) -> str:
    """Format matrix results as a text table.

    Args:
        results: Scenario matrix results (assumed sorted).
        show_top_n: Number of top results to show.

    Returns:
        Formatted string table.
    """
    lines = [
        "=" * 90,
        "SCENARIO MATRIX RESULTS (sorted by NPV)",
        "=" * 90,
        "",
        f"{'Rank':<6} {'Scenario':<40} {'NPV':>10} {'IRR':>9} {'Payback':>10} {'Rev 2029':>10}",
        "-" * 90,
    ]

    for i, result in enumerate(results[:show_top_n], 1):
        kpis = result.kpis
        payback = f"{kpis.payback_period:.1f}y" if kpis.payback_period is not None else "-"
        lines.append(
            f"{i:<6} {result.combination.name[:40]:<40} "
            f"{kpis.npv:>10.2f} {kpis.irr:>8.2%} {payback:>10} {result.revenue_2029:>10.2f}"
        )

    lines.append("-" * 90)
    lines.append(f"\nTotal combinations tested: {len(results)}")

    if results:
        best = results[0]
        lines.append(f"\nBest combination: {best.combination.name}")
        lines.append(f"  NPV: {best.kpis.npv:.2f} M")

    lines.append("=" * 90)

    return "\n".join(lines)
