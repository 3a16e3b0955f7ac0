"""Geographic coverage rules"""

from ...assignment.models import DealerAssignment
from ..models import (
    CartSnapshot,
    ValidationContext,
    ValidationError,
    ValidationIssueType,
)


def validate_geographic_coverage(
    assignment: DealerAssignment,
    cart: CartSnapshot,
    context: ValidationContext,
) -> list[ValidationError]:
    """The dealer must service the cart's delivery region.

    Skipped entirely when the cart carries no delivery region. A dealer
    missing from reference data services nowhere.
    """
    region = (cart.delivery_region or "").strip()
    if not region:
        return []

    if context.dealer is not None and context.dealer.services_region(region):
        return []

    return [ValidationError(
        message=f"Selected dealer does not service deliveries to {region}. Please choose a dealer in your area.",
        type=ValidationIssueType.GEOGRAPHIC_MISMATCH,
    )]
