"""Dealer assignment models decoded from cart metadata"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConsultationType(str, Enum):
    """Consultation types a shopper can book"""
    PRODUCT_SELECTION = "product_selection"
    TECHNICAL_SETUP = "technical_setup"
    SKILL_ASSESSMENT = "skill_assessment"
    LOCAL_CONDITIONS = "local_conditions"

    @classmethod
    def is_valid(cls, value: Optional[str]) -> bool:
        return value in {member.value for member in cls}


class ContactMethod(str, Enum):
    """How the dealer should reach the shopper"""
    PHONE = "phone"
    EMAIL = "email"
    VIDEO_CALL = "video_call"


@dataclass(frozen=True)
class Consultation:
    """Consultation booking as submitted by the checkout extension.

    Fields are kept as the raw strings the shopper submitted; the rule
    engine decides whether they are complete and valid.
    """
    type: str = ""
    preferred_date: str = ""
    preferred_time: str = ""
    contact_method: str = ""
    notes: str = ""

    def is_complete(self) -> bool:
        return bool(self.type and self.preferred_date and self.preferred_time)


@dataclass(frozen=True)
class DealerAssignment:
    """Shopper's dealer choice plus an optional consultation booking.

    Constructed once per validation call and never mutated.
    Delivery instructions, setup preference and timestamp are passed
    through without validation.
    """
    dealer_id: Optional[str] = None
    dealer_name: Optional[str] = None
    consultation: Optional[Consultation] = None
    delivery_instructions: str = ""
    setup_preference: str = ""
    timestamp: Optional[str] = None

    @property
    def has_dealer(self) -> bool:
        return bool(self.dealer_id and self.dealer_id.strip())
