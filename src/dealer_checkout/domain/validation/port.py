"""ValidatorPort interface (Hexagonal Architecture)"""

from abc import ABC, abstractmethod
from typing import Optional

from ..assignment.models import DealerAssignment
from ..dealers.ports import ReferenceDataProvider
from .models import CartSnapshot, ValidationError


class ValidatorPort(ABC):
    """Port interface for dealer assignment validation.

    Defines the contract for validation engines. This allows different
    validation implementations while keeping domain logic isolated.
    """

    @abstractmethod
    def validate(
        self,
        cart: CartSnapshot,
        assignment: Optional[DealerAssignment],
        reference_data: ReferenceDataProvider,
    ) -> list[ValidationError]:
        """Validate an assignment against the cart and dealer reference data.

        Args:
            cart: Read-only cart snapshot
            assignment: Parsed assignment, or None when none was attached
            reference_data: Dealer directory to read capabilities from

        Returns:
            Ordered list of blocking ValidationError objects; empty means
            checkout may proceed
        """
        pass
