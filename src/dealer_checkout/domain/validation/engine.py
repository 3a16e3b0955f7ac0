"""ValidationEngine - orchestrates dealer assignment rules"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..assignment.models import DealerAssignment
from ..dealers.models import DealerCapabilityRecord
from ..dealers.ports import ReferenceDataProvider
from .models import CartSnapshot, ValidationContext, ValidationError
from .port import ValidatorPort
from .rules import (
    validate_consultation,
    validate_dealer_capabilities,
    validate_dealer_selected,
    validate_geographic_coverage,
)
from .rules.dealer_rules import no_dealer_selected


logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ValidationEngine(ValidatorPort):
    """Concrete implementation of ValidatorPort.

    Runs the dealer assignment rules in a fixed order:

    1. presence gate (optional or mandatory assignment, per policy)
    2. dealer selected; stops here on failure
    3. capability, 4. geographic coverage, 5. consultation

    Rules 3-5 are independent and their errors accumulate in that order.
    The engine holds no per-call state, so one instance can serve
    concurrent validations.
    """

    def __init__(
        self,
        require_assignment: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the engine.

        Args:
            require_assignment: If True, a cart without an assignment is
                blocked as an incomplete dealer selection
            clock: Source of the validation instant (aware datetime)
        """
        self._require_assignment = require_assignment
        self._clock = clock

    def validate(
        self,
        cart: CartSnapshot,
        assignment: Optional[DealerAssignment],
        reference_data: ReferenceDataProvider,
    ) -> list[ValidationError]:
        if assignment is None:
            if self._require_assignment:
                logger.info("No dealer assignment attached; assignment is required")
                return [no_dealer_selected()]
            logger.debug("No dealer assignment attached; proceeding")
            return []

        context = ValidationContext(now=self._now())

        errors = validate_dealer_selected(assignment, cart, context)
        if errors:
            logger.info("Dealer assignment has no dealer id; skipping remaining rules")
            return errors

        context.dealer = self._lookup_dealer(reference_data, assignment.dealer_id.strip())

        rule_functions = [
            ("dealer_capabilities", validate_dealer_capabilities),
            ("geographic_coverage", validate_geographic_coverage),
            ("consultation", validate_consultation),
        ]

        for rule_name, rule_func in rule_functions:
            issues = rule_func(assignment, cart, context)
            errors.extend(issues)
            logger.debug(
                f"Validation rule '{rule_name}' found {len(issues)} issues for dealer {assignment.dealer_id}"
            )

        logger.info(
            f"Dealer assignment validation completed for dealer {assignment.dealer_id}: {len(errors)} errors"
        )

        return errors

    def _now(self) -> datetime:
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now

    def _lookup_dealer(
        self,
        reference_data: ReferenceDataProvider,
        dealer_id: str,
    ) -> Optional[DealerCapabilityRecord]:
        """Read the dealer's capability record.

        A failing provider is treated the same as an unknown dealer.
        """
        try:
            record = reference_data.lookup(dealer_id)
        except Exception as e:
            logger.error(f"Reference data lookup failed for dealer {dealer_id}: {e}", exc_info=True)
            return None

        if record is None:
            logger.warning(f"Dealer {dealer_id} not found in reference data")
        return record
