"""Data models for the glamping projection engine."""

from .lookups import (
    HouseType,
    HouseTier,
    TaxRegime,
    TaxBase,
    HouseTierConfig,
    ExtraRevenueConfig,
    SeasonalFactor,
    TaxRegimeConfig,
    InfraItem,
    HOUSE_TYPES,
    EXTRA_REVENUES,
    MONTH_KEYS,
    SEASONALITY_FACTORS,
    TAX_REGIMES,
    INFRA_ITEMS,
)
from .errors import GlampingModelError, StorageError, InvalidScenarioError
from .house import House
from .phase import Phase
from .scenario import OpexStructure, ScenarioParams, Scenario

__all__ = [
    "HouseType",
    "HouseTier",
    "TaxRegime",
    "TaxBase",
    "HouseTierConfig",
    "ExtraRevenueConfig",
    "SeasonalFactor",
    "TaxRegimeConfig",
    "InfraItem",
    "HOUSE_TYPES",
    "EXTRA_REVENUES",
    "MONTH_KEYS",
    "SEASONALITY_FACTORS",
    "TAX_REGIMES",
    "INFRA_ITEMS",
    "GlampingModelError",
    "StorageError",
    "InvalidScenarioError",
    "House",
    "Phase",
    "OpexStructure",
    "ScenarioParams",
    "Scenario",
]
