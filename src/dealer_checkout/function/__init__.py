"""Host-facing validation function."""

from .entrypoint import MALFORMED_ASSIGNMENT_MESSAGE, run_validation
from .result_emitter import emit_result

__all__ = [
    "MALFORMED_ASSIGNMENT_MESSAGE",
    "run_validation",
    "emit_result",
]
