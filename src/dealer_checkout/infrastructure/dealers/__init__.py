"""Dealer directory adapters."""

from .in_memory_directory import DEFAULT_DEALERS, InMemoryDealerDirectory

__all__ = [
    "DEFAULT_DEALERS",
    "InMemoryDealerDirectory",
]
