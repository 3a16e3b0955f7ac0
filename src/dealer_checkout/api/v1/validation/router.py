"""Validation API router exposing the checkout validation function"""

from fastapi import APIRouter, Depends

from ....config import Settings, get_settings
from ....dependencies import get_dealer_directory, get_validation_engine
from ....domain.dealers.ports import ReferenceDataProvider
from ....domain.validation.port import ValidatorPort
from ....function.entrypoint import run_validation
from ....schemas.function import FunctionRunResult, RunInput

router = APIRouter(prefix="/validation", tags=["validation"])


@router.post("/run", response_model=FunctionRunResult)
def run_dealer_validation(
    run_input: RunInput,
    engine: ValidatorPort = Depends(get_validation_engine),
    reference_data: ReferenceDataProvider = Depends(get_dealer_directory),
    settings: Settings = Depends(get_settings),
):
    """Validate the dealer assignment attached to a cart.

    Called by the host checkout before payment. A response with no
    operations lets checkout proceed; otherwise a hide operation lists the
    blocking messages to show the shopper.

    Args:
        run_input: Cart with attributes, lines and delivery groups
        engine: Validation engine configured from settings
        reference_data: Dealer directory
        settings: Application settings (attribute key)

    Returns:
        FunctionRunResult
    """
    return run_validation(
        run_input,
        engine=engine,
        reference_data=reference_data,
        attribute_key=settings.DEALER_ASSIGNMENT_ATTRIBUTE_KEY,
    )
