"""FastAPI dependency providers.

Tests replace these through app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends

from .config import Settings, get_settings
from .domain.validation.engine import ValidationEngine
from .infrastructure.dealers.in_memory_directory import InMemoryDealerDirectory


@lru_cache()
def get_dealer_directory() -> InMemoryDealerDirectory:
    """Shared dealer directory instance."""
    return InMemoryDealerDirectory()


def get_validation_engine(settings: Settings = Depends(get_settings)) -> ValidationEngine:
    return ValidationEngine(require_assignment=settings.REQUIRE_DEALER_ASSIGNMENT)
