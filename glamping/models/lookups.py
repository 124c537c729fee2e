"""Lookup tables for house types, ancillary services, seasonality and tax regimes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List


class HouseType(Enum):
    """Physical unit type. Values are the catalog display names."""

    EASYFAB = "Модульный EasyFab (27 м²)"
    A_FRAME = "A-Frame (39 м²)"
    FAMILY_SUITE = "Family-suite (44 м²)"


class HouseTier(Enum):
    """Finishing tier of a house."""

    COMFORT = "comfort"
    PREMIUM_BASE = "premium_base"


class TaxRegime(Enum):
    """Simplified tax regimes."""

    USN6 = "USN6"  # Simplified, 6% of revenue
    USN15 = "USN15"  # Simplified, 15% of revenue minus expenses
    OSN = "OSN"  # General regime, 20% of profit
    NONE = "NONE"  # Self-employed / exempt


class TaxBase(Enum):
    """What a tax rate is applied to."""

    REVENUE = "revenue"
    PROFIT = "profit"
    NONE = "none"


@dataclass(frozen=True)
class HouseTierConfig:
    """Cost and features of one house type in one tier."""

    cost: float  # Millions per unit
    features: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ExtraRevenueConfig:
    """Ancillary revenue stream, sized for a 10-unit property."""

    name: str
    annual_revenue: float  # Currency per year for 10 units
    margin: float  # Share of revenue kept as profit (0-1)


@dataclass(frozen=True)
class SeasonalFactor:
    """Multipliers applied to base occupancy and ADR for one month."""

    occupancy: float = 1.0
    adr: float = 1.0


@dataclass(frozen=True)
class TaxRegimeConfig:
    """Rate and base of a tax regime."""

    rate: float
    base: TaxBase
    name: str


@dataclass(frozen=True)
class InfraItem:
    """Site infrastructure item."""

    cost: float  # Millions
    optional: bool
    description: str = ""


# Catalog of house costs (millions) and features from the CAPEX breakdown
HOUSE_TYPES: Dict[HouseType, Dict[HouseTier, HouseTierConfig]] = {
    HouseType.EASYFAB: {
        HouseTier.COMFORT: HouseTierConfig(
            cost=2.3,
            features=["basic_furniture", "heating", "electricity", "premium_finishing"],
        ),
        HouseTier.PREMIUM_BASE: HouseTierConfig(
            cost=2.8,
            features=["basic_furniture", "heating", "electricity", "premium_finishing",
                      "luxury_amenities"],
        ),
    },
    HouseType.A_FRAME: {
        HouseTier.COMFORT: HouseTierConfig(
            cost=3.0,
            features=["basic_furniture", "heating", "electricity", "unique_design",
                      "premium_finishing"],
        ),
        HouseTier.PREMIUM_BASE: HouseTierConfig(
            cost=3.5,
            features=["basic_furniture", "heating", "electricity", "unique_design",
                      "premium_finishing", "luxury_amenities"],
        ),
    },
    HouseType.FAMILY_SUITE: {
        HouseTier.COMFORT: HouseTierConfig(
            cost=3.5,
            features=["basic_furniture", "heating", "electricity", "family_size",
                      "premium_finishing"],
        ),
        HouseTier.PREMIUM_BASE: HouseTierConfig(
            cost=4.0,
            features=["basic_furniture", "heating", "electricity", "family_size",
                      "premium_finishing", "luxury_amenities"],
        ),
    },
}


# Ancillary services. Revenue figures are for a 10-unit setup.
EXTRA_REVENUES: Dict[str, ExtraRevenueConfig] = {
    "bath_complex": ExtraRevenueConfig("Приватная русская баня", 4_200_000, 0.70),
    "pool": ExtraRevenueConfig("Тёплый бассейн (day-pass)", 1_700_000, 0.60),
    "bbq_kit": ExtraRevenueConfig("BBQ-kit", 1_000_000, 0.50),
    "breakfast": ExtraRevenueConfig("Завтраки-to-door", 2_400_000, 0.35),
    "market": ExtraRevenueConfig("Мини-маркет / мини-бар", 1_300_000, 0.40),
    "rentals": ExtraRevenueConfig("Велосипеды / SUP / снегоступы", 500_000, 0.50),
    "photoshoot": ExtraRevenueConfig("Профессиональная фотосессия", 250_000, 0.80),
    "corp_events": ExtraRevenueConfig("Корпоративы / аренда комплекса", 600_000, 0.70),
    "excursions": ExtraRevenueConfig("Экскурсионные пакеты", 3_000_000, 0.20),
}


MONTH_KEYS: List[str] = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

# Monthly adjustments to base occupancy and ADR
SEASONALITY_FACTORS: Dict[str, SeasonalFactor] = {
    "jan": SeasonalFactor(occupancy=0.7, adr=1.2),  # New Year holidays
    "feb": SeasonalFactor(occupancy=0.75, adr=1.1),
    "mar": SeasonalFactor(occupancy=0.8, adr=1.0),
    "apr": SeasonalFactor(occupancy=0.9, adr=1.0),
    "may": SeasonalFactor(occupancy=1.1, adr=1.2),  # May holidays
    "jun": SeasonalFactor(occupancy=1.2, adr=1.3),
    "jul": SeasonalFactor(occupancy=1.4, adr=1.4),  # Peak summer
    "aug": SeasonalFactor(occupancy=1.3, adr=1.4),
    "sep": SeasonalFactor(occupancy=1.1, adr=1.1),  # Velvet season
    "oct": SeasonalFactor(occupancy=0.9, adr=0.9),
    "nov": SeasonalFactor(occupancy=0.7, adr=0.8),  # Low season
    "dec": SeasonalFactor(occupancy=1.0, adr=1.15),
}

NEUTRAL_FACTOR = SeasonalFactor()


TAX_REGIMES: Dict[TaxRegime, TaxRegimeConfig] = {
    TaxRegime.USN6: TaxRegimeConfig(rate=0.06, base=TaxBase.REVENUE, name="УСН (доходы)"),
    TaxRegime.USN15: TaxRegimeConfig(
        rate=0.15, base=TaxBase.PROFIT, name="УСН (доходы минус расходы)"
    ),
    TaxRegime.OSN: TaxRegimeConfig(rate=0.20, base=TaxBase.PROFIT, name="ОСН"),
    TaxRegime.NONE: TaxRegimeConfig(rate=0.0, base=TaxBase.NONE, name="Нет (самозанятый)"),
}


INFRA_ITEMS: Dict[str, InfraItem] = {
    "well": InfraItem(0.25, True, "Скважина 100 м + насосный узел"),
    "water_tower": InfraItem(0.62, True, "Водонапорная башня 10–15 м³"),
    "sewage": InfraItem(0.44, True, "ЛОС «Биосфера-50» (до 50 чел)"),
    "transformer": InfraItem(0.90, True, "КТП-160 кВА + кабель 0,4 кВ"),
    "pool": InfraItem(2.10, True, "Открытый бетонный бассейн 8 × 4 м"),
    "spa": InfraItem(1.50, True, "Баня/SPA 28 м²"),
    "reception": InfraItem(2.60, False, "Ресепшен + мини-кухня 60 м²"),
    "service_block": InfraItem(0.75, False, "Сервис-блок (прачечная + склад) 30 м²"),
    "landscaping": InfraItem(4.00, False, "Благоустройство территории"),
    "it": InfraItem(0.90, False, "IT & автоматизация"),
}


def get_house_types() -> List[HouseType]:
    """Get available house types."""
    return list(HOUSE_TYPES)


def get_tiers_for_type(house_type: HouseType) -> List[HouseTier]:
    """Get available tiers for a house type (empty if the type is unknown)."""
    return list(HOUSE_TYPES.get(house_type, {}))


def get_house_cost(house_type: HouseType, tier: HouseTier) -> float:
    """Get unit cost in millions for a house type and tier.

    Args:
        house_type: House type.
        tier: Finishing tier.

    Returns:
        Cost per unit in millions, 0.0 if the combination is not in the catalog.
    """
    config = HOUSE_TYPES.get(house_type, {}).get(tier)
    return config.cost if config else 0.0


def get_house_features(house_type: HouseType, tier: HouseTier) -> List[str]:
    """Get feature list for a house type and tier (empty if unknown)."""
    config = HOUSE_TYPES.get(house_type, {}).get(tier)
    return list(config.features) if config else []


def get_infra_items() -> List[str]:
    """Get all infrastructure item names."""
    return list(INFRA_ITEMS)


def get_optional_infra_items() -> List[str]:
    """Get optional infrastructure item names."""
    return [name for name, item in INFRA_ITEMS.items() if item.optional]


def get_required_infra_items() -> List[str]:
    """Get required infrastructure item names."""
    return [name for name, item in INFRA_ITEMS.items() if not item.optional]


def get_infra_item_cost(name: str) -> float:
    """Get cost in millions for an infrastructure item (0.0 if unknown)."""
    item = INFRA_ITEMS.get(name)
    return item.cost if item else 0.0


def is_infra_item_optional(name: str) -> bool:
    """Check whether an infrastructure item is optional (False if unknown)."""
    item = INFRA_ITEMS.get(name)
    return item.optional if item else False


def calculate_infra_cost(selected_items: Iterable[str]) -> float:
    """Total cost in millions of the selected infrastructure items."""
    return sum(get_infra_item_cost(name) for name in selected_items)
