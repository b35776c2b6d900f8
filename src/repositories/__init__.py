"""Ratings-store backends."""

from repositories.ratings import (
    AsyncInMemoryRatingsStore,
    InMemoryRatingsStore,
    LockedRatingsStore,
    SqlRatingsStore,
)

__all__ = [
    "AsyncInMemoryRatingsStore",
    "InMemoryRatingsStore",
    "LockedRatingsStore",
    "SqlRatingsStore",
]
