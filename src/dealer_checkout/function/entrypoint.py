"""Checkout validation function entry point.

Reads the assignment attribute from the cart, parses it, runs the rule
engine and converts the outcome into the host's result format.
"""

import logging
import time

from ..domain.assignment.encoder import ASSIGNMENT_DATA_KEY
from ..domain.assignment.parser import MalformedAssignmentError, parse_assignment
from ..domain.dealers.ports import ReferenceDataProvider
from ..domain.validation.models import ValidationError, ValidationIssueType
from ..domain.validation.port import ValidatorPort
from ..observability.metrics import (
    validation_duration_seconds,
    validation_issues_total,
    validation_runs_total,
)
from ..schemas.function import FunctionRunResult, RunInput
from .result_emitter import emit_result


logger = logging.getLogger(__name__)

MALFORMED_ASSIGNMENT_MESSAGE = "Invalid dealer assignment data. Please select a dealer again."


def run_validation(
    run_input: RunInput,
    engine: ValidatorPort,
    reference_data: ReferenceDataProvider,
    attribute_key: str = ASSIGNMENT_DATA_KEY,
) -> FunctionRunResult:
    """Validate the dealer assignment attached to a cart.

    Args:
        run_input: Host input carrying the cart
        engine: Rule engine to run
        reference_data: Dealer directory, re-read on every call
        attribute_key: Cart attribute holding the assignment blob

    Returns:
        FunctionRunResult; empty operations when checkout may proceed
    """
    start = time.perf_counter()
    raw = run_input.cart.attribute_value(attribute_key)

    try:
        assignment = parse_assignment(raw)
    except MalformedAssignmentError as e:
        logger.warning(f"Error parsing dealer assignment data: {e}")
        errors = [ValidationError(
            message=MALFORMED_ASSIGNMENT_MESSAGE,
            type=ValidationIssueType.MALFORMED_ASSIGNMENT,
        )]
        outcome = "malformed"
    else:
        errors = engine.validate(run_input.cart.to_snapshot(), assignment, reference_data)
        outcome = "blocked" if errors else "proceed"

    validation_runs_total.labels(outcome=outcome).inc()
    for error in errors:
        issue_type = error.type.value if error.type else "UNKNOWN"
        validation_issues_total.labels(issue_type=issue_type).inc()
    validation_duration_seconds.observe(time.perf_counter() - start)

    logger.info(
        f"Dealer assignment validation outcome: {outcome}",
        extra={
            "outcome": outcome,
            "error_count": len(errors),
            "issue_types": [error.type.value for error in errors if error.type],
        },
    )

    return emit_result(errors)
