"""Validation rules implementations.

Each rule module contains discrete validation functions that return
ValidationError objects when violations are detected.
"""

from .dealer_rules import validate_dealer_selected, validate_dealer_capabilities
from .geographic_rules import validate_geographic_coverage
from .consultation_rules import validate_consultation

__all__ = [
    "validate_dealer_selected",
    "validate_dealer_capabilities",
    "validate_geographic_coverage",
    "validate_consultation",
]
