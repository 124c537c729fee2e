"""Tests for the tax regime x services scenario matrix."""

import pytest

from glamping.models.lookups import TaxRegime
from glamping.scenarios import (
    DEFAULT_SERVICE_SETS,
    format_matrix_results,
    generate_combinations,
    run_scenario_matrix,
)


class TestGenerateCombinations:
    """Tests for generate_combinations."""

    def test_default_grid(self):
        combos = list(generate_combinations())
        assert len(combos) == len(TaxRegime) * len(DEFAULT_SERVICE_SETS)

    def test_names(self):
        combos = list(generate_combinations([TaxRegime.USN6], [(), ("pool", "bbq_kit")]))

        assert combos[0].name == "USN6 / rooms only"
        assert combos[1].name == "USN6 / pool+bbq_kit"
        assert combos[1].services == ("pool", "bbq_kit")


class TestRunScenarioMatrix:
    """Tests for run_scenario_matrix."""

    @pytest.fixture
    def results(self, example_scenario):
        return run_scenario_matrix(
            example_scenario,
            42.9,
            regimes=[TaxRegime.USN6, TaxRegime.NONE],
            service_sets=[(), ("bath_complex",)],
        )

    def test_one_result_per_combination(self, results):
        assert len(results) == 4

    def test_sorted_by_npv(self, results):
        npvs = [r.kpis.npv for r in results]
        assert npvs == sorted(npvs, reverse=True)

    def test_no_tax_beats_usn6(self, results):
        by_name = {r.combination.name: r for r in results}
        assert by_name["NONE / rooms only"].kpis.npv > by_name["USN6 / rooms only"].kpis.npv

    def test_services_add_revenue(self, results):
        by_name = {r.combination.name: r for r in results}
        assert by_name["USN6 / bath_complex"].revenue_2029 > by_name["USN6 / rooms only"].revenue_2029

    def test_base_not_modified(self, example_scenario, results):
        assert example_scenario.params.tax_regime == TaxRegime.USN6
        assert example_scenario.params.extra_revenue_services == []

    def test_format(self, results):
        text = format_matrix_results(results)

        assert "SCENARIO MATRIX RESULTS" in text
        assert "Total combinations tested: 4" in text
        assert f"Best combination: {results[0].combination.name}" in text

    def test_format_empty(self):
        assert "Total combinations tested: 0" in format_matrix_results([])
