"""House: a line of identical accommodation units."""

from dataclasses import dataclass, replace
from typing import Dict, List

from .lookups import HOUSE_TYPES, HouseTierConfig, HouseTier, HouseType


@dataclass(frozen=True)
class House:
    """A quantity of one house type in one tier.

    Houses are immutable; use ``clone`` to derive a modified copy.
    """

    id: str
    type: HouseType
    tier: HouseTier
    qty: int = 1

    def __post_init__(self):
        if self.qty < 0:
            raise ValueError(f"House {self.id}: qty must be non-negative, got {self.qty}")

    def cost(
        self,
        lookup: Dict[HouseType, Dict[HouseTier, HouseTierConfig]] = HOUSE_TYPES,
    ) -> float:
        """Total cost of this line in millions.

        Args:
            lookup: House catalog keyed by type and tier.

        Returns:
            Unit cost x quantity, 0.0 when the type/tier is not in the catalog.
        """
        config = lookup.get(self.type, {}).get(self.tier)
        base_cost = config.cost if config else 0.0
        return base_cost * self.qty

    def get_features(
        self,
        lookup: Dict[HouseType, Dict[HouseTier, HouseTierConfig]] = HOUSE_TYPES,
    ) -> List[str]:
        """Features available for this type and tier."""
        config = lookup.get(self.type, {}).get(self.tier)
        return list(config.features) if config else []

    def clone(self, **changes) -> "House":
        """Create a copy with the given fields replaced."""
        return replace(self, **changes)
