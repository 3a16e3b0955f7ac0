"""Assignment API router: dealer picker data and cart attributes for a dealer choice"""

from fastapi import APIRouter, Depends, HTTPException, status

from ....config import Settings, get_settings
from ....dependencies import get_dealer_directory
from ....domain.assignment.encoder import encode_assignment
from ....domain.validation.models import CartLine, CartSnapshot
from ....infrastructure.dealers.in_memory_directory import InMemoryDealerDirectory
from ....schemas.assignment import (
    AssignmentAttributesRequest,
    AssignmentAttributesResponse,
    CartAttributeResponse,
    DealerResponse,
    EligibleDealersRequest,
    EligibleDealersResponse,
)

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.post("/eligible-dealers", response_model=EligibleDealersResponse)
def list_eligible_dealers(
    dealers_request: EligibleDealersRequest,
    directory: InMemoryDealerDirectory = Depends(get_dealer_directory),
):
    """List dealers supporting at least one product category in the cart.

    Dealers covering every category are listed first.
    """
    cart = CartSnapshot(lines=tuple(CartLine(product_type) for product_type in dealers_request.product_types))
    categories = cart.categories()

    return EligibleDealersResponse(
        categories=categories,
        dealers=[
            DealerResponse.from_dealer(dealer, categories)
            for dealer in directory.eligible_for(categories)
        ],
    )


@router.post("/attributes", response_model=AssignmentAttributesResponse)
def build_assignment_attributes(
    assignment_request: AssignmentAttributesRequest,
    directory: InMemoryDealerDirectory = Depends(get_dealer_directory),
    settings: Settings = Depends(get_settings),
):
    """Encode a shopper's dealer choice as cart attributes.

    Returns 404 when the dealer id is not in the directory and 409 when a
    consultation is booked with a dealer that does not offer them. With
    nothing chosen the attribute list is empty.
    """
    dealer = None
    if assignment_request.dealer_id:
        dealer = directory.get_dealer(assignment_request.dealer_id)
        if dealer is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Dealer '{assignment_request.dealer_id}' not found",
            )
        if assignment_request.consultation and not dealer.consultation_available:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Dealer '{dealer.id}' does not offer consultations",
            )

    attributes = encode_assignment(
        dealer=dealer,
        consultation=assignment_request.consultation.to_domain() if assignment_request.consultation else None,
        delivery_instructions=assignment_request.delivery_instructions,
        setup_preference=assignment_request.setup_preference,
        data_key=settings.DEALER_ASSIGNMENT_ATTRIBUTE_KEY,
    )

    return AssignmentAttributesResponse(attributes=[
        CartAttributeResponse(key=attribute.key, value=attribute.value)
        for attribute in attributes
    ])
