"""Dealer selection and capability rules"""

from ...assignment.models import DealerAssignment
from ..models import (
    CartSnapshot,
    ValidationContext,
    ValidationError,
    ValidationIssueType,
)


NO_DEALER_SELECTED_MESSAGE = "No dealer selected. Please choose an authorized Starboard dealer."


def no_dealer_selected() -> ValidationError:
    return ValidationError(
        message=NO_DEALER_SELECTED_MESSAGE,
        type=ValidationIssueType.INCOMPLETE_DEALER_SELECTION,
    )


def validate_dealer_selected(
    assignment: DealerAssignment,
    cart: CartSnapshot,
    context: ValidationContext,
) -> list[ValidationError]:
    """An assignment must name a dealer.

    The engine stops after this rule when it reports an error; nothing else
    can be checked without a dealer id.
    """
    if not assignment.has_dealer:
        return [no_dealer_selected()]
    return []


def validate_dealer_capabilities(
    assignment: DealerAssignment,
    cart: CartSnapshot,
    context: ValidationContext,
) -> list[ValidationError]:
    """The dealer must support every product category in the cart.

    A dealer missing from reference data supports nothing. Unsupported
    categories are reported in one error, in cart order.

    Args:
        assignment: Parsed assignment with a dealer id
        cart: Cart snapshot
        context: Validation context holding the dealer's capability record

    Returns:
        At most one CAPABILITY_MISMATCH error
    """
    supported = context.dealer.supported_categories if context.dealer else frozenset()
    unsupported = [category for category in cart.categories() if category not in supported]

    if not unsupported:
        return []

    names = ", ".join(category.value for category in unsupported)
    return [ValidationError(
        message=f"Selected dealer does not support {names} products. Please choose a different dealer.",
        type=ValidationIssueType.CAPABILITY_MISMATCH,
    )]
