"""Validation domain module.

This module implements the rule engine that decides whether a cart's dealer
assignment lets checkout proceed.
"""

from .models import (
    CART_TARGET,
    CartLine,
    CartSnapshot,
    ValidationContext,
    ValidationError,
    ValidationIssueType,
)
from .port import ValidatorPort
from .engine import ValidationEngine

__all__ = [
    "CART_TARGET",
    "CartLine",
    "CartSnapshot",
    "ValidationContext",
    "ValidationError",
    "ValidationIssueType",
    "ValidatorPort",
    "ValidationEngine",
]
