"""In-memory dealer directory adapter.

Implements ReferenceDataProvider over a fixed set of dealer profiles. Used
as the default directory until a network-backed one is plugged in.
"""

import logging
from typing import Iterable, Optional

from ...domain.dealers.models import Dealer, DealerCapabilityRecord, ProductCategory
from ...domain.dealers.ports import ReferenceDataProvider


logger = logging.getLogger(__name__)


DEFAULT_DEALERS: tuple[Dealer, ...] = (
    Dealer(
        id="dealer_1",
        name="Pacific Windsurf Center",
        phone="+1-415-555-0123",
        email="info@pacificwindsurf.com",
        city="San Francisco",
        state="CA",
        supported_categories=(ProductCategory.WINDSURF, ProductCategory.WINGFOIL),
        service_regions=("CA", "OR", "WA"),
        consultation_available=True,
        languages=("English", "Spanish"),
    ),
    Dealer(
        id="dealer_2",
        name="Bay Area SUP Shop",
        phone="+1-415-555-0456",
        email="contact@bayareasup.com",
        city="San Francisco",
        state="CA",
        supported_categories=(ProductCategory.SUP, ProductCategory.WINGFOIL),
        service_regions=("CA", "NV"),
        consultation_available=True,
        languages=("English",),
    ),
    Dealer(
        id="dealer_3",
        name="Complete Watersports",
        phone="+1-415-555-0789",
        email="support@completewatersports.com",
        city="San Francisco",
        state="CA",
        supported_categories=(ProductCategory.WINDSURF, ProductCategory.SUP, ProductCategory.WINGFOIL),
        service_regions=("CA", "OR", "WA", "NV", "AZ"),
        consultation_available=True,
        languages=("English", "French", "German"),
    ),
)


class InMemoryDealerDirectory(ReferenceDataProvider):
    """Dealer directory backed by a dict of profiles keyed by dealer id."""

    def __init__(self, dealers: Iterable[Dealer] = DEFAULT_DEALERS):
        self._dealers: dict[str, Dealer] = {dealer.id: dealer for dealer in dealers}
        logger.debug(f"Dealer directory loaded with {len(self._dealers)} dealers")

    def lookup(self, dealer_id: str) -> Optional[DealerCapabilityRecord]:
        dealer = self._dealers.get(dealer_id)
        return dealer.capability_record() if dealer else None

    def get_dealer(self, dealer_id: str) -> Optional[Dealer]:
        """Return the full dealer profile, or None if unknown."""
        return self._dealers.get(dealer_id)

    def dealer_ids(self) -> list[str]:
        return list(self._dealers)

    def eligible_for(self, categories: Iterable[ProductCategory]) -> list[Dealer]:
        """Dealers supporting at least one of the given categories.

        Dealers covering every category come first; directory order is kept
        otherwise. No categories means no eligible dealers.
        """
        wanted = list(categories)
        eligible = [dealer for dealer in self._dealers.values() if dealer.supports_any(wanted)]
        return sorted(eligible, key=lambda dealer: not dealer.supports_all(wanted))
