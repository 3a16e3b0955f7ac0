"""Dealer reference data domain module."""

from .models import Dealer, DealerCapabilityRecord, ProductCategory
from .ports import ReferenceDataProvider

__all__ = [
    "Dealer",
    "DealerCapabilityRecord",
    "ProductCategory",
    "ReferenceDataProvider",
]
