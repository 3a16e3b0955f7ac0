"""Consultation booking rules.

Sub-checks:
- completeness: type, preferred date and preferred time must all be set
- futurity: preferred date must be strictly after the validation instant
- type: must be one of the known ConsultationType values

Completeness gates the other two; futurity and type run independently.
"""

from datetime import date, datetime, timezone
from typing import Optional

from ...assignment.models import ConsultationType, DealerAssignment
from ..models import (
    CartSnapshot,
    ValidationContext,
    ValidationError,
    ValidationIssueType,
)


INCOMPLETE_MESSAGE = "Incomplete consultation booking information."
NOT_IN_FUTURE_MESSAGE = "Consultation date must be in the future."
INVALID_TYPE_MESSAGE = "Invalid consultation type selected."


def parse_preferred_date(value: str) -> Optional[datetime]:
    """Read a preferred date as an aware UTC datetime.

    Date-only values are midnight UTC. Datetimes without an offset are UTC.

    Returns:
        The parsed instant, or None if the value is not an ISO date
    """
    text = value.strip()
    try:
        if "T" not in text and " " not in text:
            day = date.fromisoformat(text)
            return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_consultation(
    assignment: DealerAssignment,
    cart: CartSnapshot,
    context: ValidationContext,
) -> list[ValidationError]:
    """Validate the consultation booking, if one is attached.

    Args:
        assignment: Parsed assignment
        cart: Cart snapshot (unused; consultations do not depend on the cart)
        context: Validation context supplying the validation instant

    Returns:
        Errors in sub-check order (completeness, futurity, type)
    """
    consultation = assignment.consultation
    if consultation is None:
        return []

    if not consultation.is_complete():
        return [_consultation_error(INCOMPLETE_MESSAGE)]

    errors = []

    preferred_at = parse_preferred_date(consultation.preferred_date)
    if preferred_at is None or preferred_at <= context.now:
        errors.append(_consultation_error(NOT_IN_FUTURE_MESSAGE))

    if not ConsultationType.is_valid(consultation.type):
        errors.append(_consultation_error(INVALID_TYPE_MESSAGE))

    return errors


def _consultation_error(message: str) -> ValidationError:
    return ValidationError(message=message, type=ValidationIssueType.CONSULTATION_INVALID)
