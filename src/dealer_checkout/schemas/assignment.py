"""Pydantic schemas for the assignment attribute API"""

from typing import Optional

from pydantic import BaseModel, Field

from ..domain.assignment.models import Consultation, ConsultationType, ContactMethod
from ..domain.dealers.models import Dealer, ProductCategory


class ConsultationRequest(BaseModel):
    """Consultation booking submitted by the checkout extension."""
    type: ConsultationType
    preferred_date: str = Field(..., min_length=1, alias="preferredDate")
    preferred_time: str = Field(..., min_length=1, alias="preferredTime")
    contact_method: ContactMethod = Field(ContactMethod.PHONE, alias="contactMethod")
    notes: str = ""

    class Config:
        populate_by_name = True

    def to_domain(self) -> Consultation:
        return Consultation(
            type=self.type.value,
            preferred_date=self.preferred_date,
            preferred_time=self.preferred_time,
            contact_method=self.contact_method.value,
            notes=self.notes,
        )


class AssignmentAttributesRequest(BaseModel):
    """Shopper's current dealer choices."""
    dealer_id: Optional[str] = Field(None, alias="dealerId")
    consultation: Optional[ConsultationRequest] = None
    delivery_instructions: str = Field("", alias="deliveryInstructions")
    setup_preference: str = Field("", alias="setupPreference")

    class Config:
        populate_by_name = True


class CartAttributeResponse(BaseModel):
    key: str
    value: str


class AssignmentAttributesResponse(BaseModel):
    """Cart attributes to write, in order."""
    attributes: list[CartAttributeResponse] = Field(default_factory=list)


class EligibleDealersRequest(BaseModel):
    """Product types of the lines in the shopper's cart."""
    product_types: list[Optional[str]] = Field(default_factory=list, alias="productTypes")

    class Config:
        populate_by_name = True


class DealerResponse(BaseModel):
    """Dealer profile as shown in the dealer picker."""
    id: str
    name: str
    phone: str
    email: str
    city: str
    state: str
    country: str
    supported_categories: list[ProductCategory] = Field(..., serialization_alias="supportedCategories")
    service_regions: list[str] = Field(..., serialization_alias="serviceRegions")
    consultation_available: bool = Field(..., serialization_alias="consultationAvailable")
    languages: list[str]
    supports_all_categories: bool = Field(..., serialization_alias="supportsAllCategories")

    @classmethod
    def from_dealer(cls, dealer: Dealer, categories: list[ProductCategory]) -> "DealerResponse":
        return cls(
            id=dealer.id,
            name=dealer.name,
            phone=dealer.phone,
            email=dealer.email,
            city=dealer.city,
            state=dealer.state,
            country=dealer.country,
            supported_categories=list(dealer.supported_categories),
            service_regions=list(dealer.service_regions),
            consultation_available=dealer.consultation_available,
            languages=list(dealer.languages),
            supports_all_categories=dealer.supports_all(categories),
        )


class EligibleDealersResponse(BaseModel):
    """Dealers a shopper may pick for the cart's categories."""
    categories: list[ProductCategory]
    dealers: list[DealerResponse]
