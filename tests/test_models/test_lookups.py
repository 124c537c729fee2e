"""Tests for lookup tables and helpers."""

import pytest

from glamping.models.lookups import (
    EXTRA_REVENUES,
    INFRA_ITEMS,
    MONTH_KEYS,
    SEASONALITY_FACTORS,
    TAX_REGIMES,
    HouseTier,
    HouseType,
    TaxBase,
    TaxRegime,
    calculate_infra_cost,
    get_house_cost,
    get_house_features,
    get_house_types,
    get_infra_item_cost,
    get_infra_items,
    get_optional_infra_items,
    get_required_infra_items,
    get_tiers_for_type,
    is_infra_item_optional,
)


class TestHouseCatalog:
    """Tests for house catalog lookups."""

    @pytest.mark.parametrize("house_type,tier,cost", [
        (HouseType.EASYFAB, HouseTier.COMFORT, 2.3),
        (HouseType.EASYFAB, HouseTier.PREMIUM_BASE, 2.8),
        (HouseType.A_FRAME, HouseTier.COMFORT, 3.0),
        (HouseType.FAMILY_SUITE, HouseTier.PREMIUM_BASE, 4.0),
    ])
    def test_house_cost(self, house_type, tier, cost):
        assert get_house_cost(house_type, tier) == cost

    def test_every_type_has_both_tiers(self):
        for house_type in get_house_types():
            assert set(get_tiers_for_type(house_type)) == set(HouseTier)

    def test_premium_adds_luxury_amenities(self):
        assert "luxury_amenities" in get_house_features(HouseType.A_FRAME, HouseTier.PREMIUM_BASE)
        assert "luxury_amenities" not in get_house_features(HouseType.A_FRAME, HouseTier.COMFORT)

    def test_enums_coerce_from_values(self):
        assert HouseType("A-Frame (39 м²)") is HouseType.A_FRAME
        assert HouseTier("premium_base") is HouseTier.PREMIUM_BASE
        assert TaxRegime("USN15") is TaxRegime.USN15
        with pytest.raises(ValueError):
            TaxRegime("VAT")


class TestTables:
    """Tests for the static tables."""

    def test_seasonality_covers_months(self):
        assert set(SEASONALITY_FACTORS) == set(MONTH_KEYS)
        assert len(MONTH_KEYS) == 12

    def test_july_is_peak(self):
        july = SEASONALITY_FACTORS["jul"]
        assert july.occupancy == max(f.occupancy for f in SEASONALITY_FACTORS.values())

    def test_tax_regimes(self):
        assert TAX_REGIMES[TaxRegime.USN6].rate == 0.06
        assert TAX_REGIMES[TaxRegime.USN6].base == TaxBase.REVENUE
        assert TAX_REGIMES[TaxRegime.USN15].base == TaxBase.PROFIT
        assert TAX_REGIMES[TaxRegime.OSN].rate == 0.20
        assert TAX_REGIMES[TaxRegime.NONE].rate == 0.0

    def test_extra_margins_are_fractions(self):
        for config in EXTRA_REVENUES.values():
            assert 0 <= config.margin <= 1
            assert config.annual_revenue > 0


class TestInfraItems:
    """Tests for site infrastructure helpers."""

    def test_optional_and_required_partition_items(self):
        optional = set(get_optional_infra_items())
        required = set(get_required_infra_items())

        assert optional.isdisjoint(required)
        assert optional | required == set(get_infra_items()) == set(INFRA_ITEMS)

    def test_item_cost_and_flags(self):
        assert get_infra_item_cost("pool") == 2.10
        assert is_infra_item_optional("pool")
        assert not is_infra_item_optional("reception")

    def test_unknown_item(self):
        assert get_infra_item_cost("helipad") == 0.0
        assert not is_infra_item_optional("helipad")

    def test_calculate_infra_cost(self):
        assert calculate_infra_cost(["well", "sewage", "helipad"]) == pytest.approx(0.69)
        assert calculate_infra_cost([]) == 0
