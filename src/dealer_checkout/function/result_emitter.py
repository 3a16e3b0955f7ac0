"""Maps validation errors onto the host's accept/reject protocol."""

from ..domain.validation.models import ValidationError
from ..schemas.function import FunctionError, FunctionRunResult, HideOperation, Operation


def emit_result(errors: list[ValidationError]) -> FunctionRunResult:
    """Build the function result for a list of validation errors.

    An empty list means "no changes" and checkout proceeds. Otherwise a
    single hide operation carries every message, in order and verbatim.
    """
    if not errors:
        return FunctionRunResult(operations=[])

    return FunctionRunResult(operations=[
        Operation(hide=HideOperation(errors=[
            FunctionError(message=error.message, target=error.target)
            for error in errors
        ]))
    ])
