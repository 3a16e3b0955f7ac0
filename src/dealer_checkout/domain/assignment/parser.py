"""Dealer assignment metadata parser.

Decodes the JSON blob stored under the cart attribute into a
DealerAssignment. Only the structure is checked here; field semantics are
left to the validation rules. Unknown keys are ignored.
"""

import json
from typing import Any, Optional

from .models import Consultation, DealerAssignment


class MalformedAssignmentError(ValueError):
    """Metadata is present but cannot be decoded as an assignment."""


def parse_assignment(raw: Optional[str]) -> Optional[DealerAssignment]:
    """Parse the raw metadata string.

    Args:
        raw: Attribute value, or None if the attribute is missing

    Returns:
        DealerAssignment, or None when no metadata was attached

    Raises:
        MalformedAssignmentError: If the string is not a JSON object of the
            expected shape
    """
    if not raw:
        return None

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedAssignmentError(f"Assignment metadata is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedAssignmentError(
            f"Assignment metadata must be a JSON object, got {type(payload).__name__}"
        )

    consultation = _parse_consultation(payload.get("consultation"))

    return DealerAssignment(
        dealer_id=_dealer_id(payload.get("dealerId")),
        dealer_name=_optional_text(payload.get("dealerName")),
        consultation=consultation,
        delivery_instructions=_text(payload.get("deliveryInstructions")),
        setup_preference=_text(payload.get("setupPreference")),
        timestamp=_optional_text(payload.get("timestamp")),
    )


def _parse_consultation(value: Any) -> Optional[Consultation]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise MalformedAssignmentError(
            f"Consultation must be a JSON object or null, got {type(value).__name__}"
        )
    return Consultation(
        type=_text(value.get("type")),
        preferred_date=_text(value.get("preferredDate")),
        preferred_time=_text(value.get("preferredTime")),
        contact_method=_text(value.get("contactMethod")),
        notes=_text(value.get("notes")),
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise MalformedAssignmentError(f"Expected a scalar value, got {type(value).__name__}")
    return str(value)


def _optional_text(value: Any) -> Optional[str]:
    text = _text(value)
    return text or None


def _dealer_id(value: Any) -> Optional[str]:
    # false, 0 and other falsy scalars mean no dealer was picked
    if isinstance(value, bool) or (not isinstance(value, str) and not value):
        return None
    return _optional_text(value)
