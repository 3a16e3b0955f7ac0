"""Reference data ports (interfaces) following Hexagonal Architecture.

The dealer directory is a pluggable adapter. Validation depends only on this
interface so a network-backed directory can replace the in-memory one.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .models import DealerCapabilityRecord


class ReferenceDataProvider(ABC):
    """Port interface for dealer reference data lookups."""

    @abstractmethod
    def lookup(self, dealer_id: str) -> Optional[DealerCapabilityRecord]:
        """Look up the capability record for a dealer.

        Args:
            dealer_id: Dealer identifier from the assignment

        Returns:
            DealerCapabilityRecord, or None if the dealer is unknown
        """
        pass

    @abstractmethod
    def dealer_ids(self) -> Iterable[str]:
        """Return the ids of all dealers currently known to the provider."""
        pass
