"""Validation models and enums for dealer assignment checks"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..dealers.models import DealerCapabilityRecord, ProductCategory


CART_TARGET = "cart"


class ValidationIssueType(str, Enum):
    """Failure taxonomy for dealer assignment validation"""
    MALFORMED_ASSIGNMENT = "MALFORMED_ASSIGNMENT"
    INCOMPLETE_DEALER_SELECTION = "INCOMPLETE_DEALER_SELECTION"
    CAPABILITY_MISMATCH = "CAPABILITY_MISMATCH"
    GEOGRAPHIC_MISMATCH = "GEOGRAPHIC_MISMATCH"
    CONSULTATION_INVALID = "CONSULTATION_INVALID"


@dataclass(frozen=True)
class ValidationError:
    """A single blocking validation failure.

    Every ValidationError blocks checkout; there is no warning severity.
    `type` is kept for logging and metrics and is never shown to the shopper.
    """
    message: str
    target: str = CART_TARGET
    type: Optional[ValidationIssueType] = None


@dataclass(frozen=True)
class CartLine:
    """Cart line item reduced to the product type the host exposes."""
    product_type: Optional[str] = None

    @property
    def category(self) -> Optional[ProductCategory]:
        return ProductCategory.from_product_type(self.product_type)


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only view of the cart at validation time."""
    lines: tuple[CartLine, ...] = ()
    delivery_region: Optional[str] = None

    def categories(self) -> list[ProductCategory]:
        """Product categories in cart-encounter order, deduplicated."""
        seen: list[ProductCategory] = []
        for line in self.lines:
            category = line.category
            if category is not None and category not in seen:
                seen.append(category)
        return seen


@dataclass
class ValidationContext:
    """Context object passed to validation rules.

    Built once per validation call. `dealer` is the reference data record
    for the assigned dealer, or None when the directory does not know it.
    """
    now: datetime
    dealer: Optional[DealerCapabilityRecord] = None
