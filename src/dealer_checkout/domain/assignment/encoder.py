"""Cart attribute encoding for a shopper's dealer assignment.

Produces the attribute list the checkout extension writes to the cart: flat
attributes for order display plus the JSON blob the validator reads back.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..dealers.models import Dealer
from .models import Consultation


ASSIGNMENT_DATA_KEY = "dealer_assignment_data"


@dataclass(frozen=True)
class CartAttribute:
    key: str
    value: str


def consultation_payload(consultation: Consultation) -> dict[str, str]:
    """Wire representation of a consultation inside the assignment blob."""
    return {
        "type": consultation.type,
        "preferredDate": consultation.preferred_date,
        "preferredTime": consultation.preferred_time,
        "contactMethod": consultation.contact_method,
        "notes": consultation.notes,
    }


def encode_assignment(
    dealer: Optional[Dealer],
    consultation: Optional[Consultation] = None,
    delivery_instructions: str = "",
    setup_preference: str = "",
    timestamp: Optional[datetime] = None,
    data_key: str = ASSIGNMENT_DATA_KEY,
) -> list[CartAttribute]:
    """Build the cart attributes for a dealer assignment.

    Args:
        dealer: Selected dealer, or None if the shopper has not chosen one
        consultation: Booked consultation, if any
        delivery_instructions: Free-text delivery instructions
        setup_preference: Equipment setup preference id
        timestamp: Time the assignment was made (defaults to now, UTC)
        data_key: Attribute key for the JSON blob

    Returns:
        Attributes in write order; empty when nothing was chosen
    """
    attributes: list[CartAttribute] = []

    if dealer is not None:
        attributes.append(CartAttribute("assigned_dealer_id", dealer.id))
        attributes.append(CartAttribute("assigned_dealer_name", dealer.name))
        attributes.append(CartAttribute("assigned_dealer_contact", dealer.contact))

    if consultation is not None:
        attributes.append(CartAttribute("consultation_requested", "true"))
        attributes.append(CartAttribute("consultation_type", consultation.type))
        attributes.append(CartAttribute("consultation_date", consultation.preferred_date))
        attributes.append(CartAttribute("consultation_time", consultation.preferred_time))
        attributes.append(CartAttribute("consultation_method", consultation.contact_method))
        if consultation.notes:
            attributes.append(CartAttribute("consultation_notes", consultation.notes))

    if delivery_instructions:
        attributes.append(CartAttribute("delivery_instructions", delivery_instructions))

    if setup_preference:
        attributes.append(CartAttribute("equipment_setup_preference", setup_preference))

    if not attributes:
        return attributes

    timestamp = timestamp or datetime.now(timezone.utc)
    blob = {
        "dealerId": dealer.id if dealer else None,
        "dealerName": dealer.name if dealer else None,
        "consultation": consultation_payload(consultation) if consultation else None,
        "deliveryInstructions": delivery_instructions,
        "setupPreference": setup_preference,
        "timestamp": timestamp.isoformat(),
    }
    attributes.append(CartAttribute(data_key, json.dumps(blob)))

    return attributes
