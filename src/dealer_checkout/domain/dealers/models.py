"""Dealer reference data models.

Dealers and their capabilities are read-only reference data owned by the
dealer directory. Validation only reads them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class ProductCategory(str, Enum):
    """Product categories a dealer can be equipped to support"""
    WINDSURF = "windsurf"
    SUP = "sup"
    WINGFOIL = "wingfoil"

    @classmethod
    def from_product_type(cls, product_type: Optional[str]) -> Optional["ProductCategory"]:
        """Derive a category from a free-text product type.

        Matching is a case-insensitive substring test evaluated in priority
        order; the first matching group wins.

        Args:
            product_type: Product type string from the cart line (may be None)

        Returns:
            Matching ProductCategory, or None if nothing matches
        """
        text = (product_type or "").lower()
        if not text:
            return None
        for category, terms in _CATEGORY_TERMS:
            if any(term in text for term in terms):
                return category
        return None


# Priority order matters: "windsurf" must win over "sup" for "windsurf supplies"
_CATEGORY_TERMS: tuple[tuple[ProductCategory, tuple[str, ...]], ...] = (
    (ProductCategory.WINDSURF, ("windsurf", "wind")),
    (ProductCategory.SUP, ("sup", "paddle")),
    (ProductCategory.WINGFOIL, ("wing", "foil")),
)


@dataclass(frozen=True)
class DealerCapabilityRecord:
    """What a dealer supports and where it delivers."""
    dealer_id: str
    supported_categories: frozenset[ProductCategory] = frozenset()
    service_regions: frozenset[str] = frozenset()

    def __post_init__(self):
        # Regions are compared upper-cased whatever the provider returns
        object.__setattr__(
            self,
            "service_regions",
            frozenset(region.strip().upper() for region in self.service_regions),
        )
        object.__setattr__(self, "supported_categories", frozenset(self.supported_categories))

    def services_region(self, region: str) -> bool:
        return region.strip().upper() in self.service_regions


@dataclass(frozen=True)
class Dealer:
    """Dealer profile as listed in the dealer directory."""
    id: str
    name: str
    phone: str = ""
    email: str = ""
    city: str = ""
    state: str = ""
    country: str = "US"
    supported_categories: tuple[ProductCategory, ...] = ()
    service_regions: tuple[str, ...] = ()
    consultation_available: bool = False
    languages: tuple[str, ...] = ()

    @property
    def contact(self) -> str:
        return f"{self.phone} | {self.email}"

    def supports_any(self, categories: Iterable[ProductCategory]) -> bool:
        return any(category in self.supported_categories for category in categories)

    def supports_all(self, categories: Iterable[ProductCategory]) -> bool:
        return all(category in self.supported_categories for category in categories)

    def capability_record(self) -> DealerCapabilityRecord:
        """Reduce the profile to the fields validation consumes."""
        return DealerCapabilityRecord(
            dealer_id=self.id,
            supported_categories=frozenset(self.supported_categories),
            service_regions=frozenset(self.service_regions),
        )
