"""Concrete ratings stores."""

from repositories.ratings.memory import (
    AsyncInMemoryRatingsStore,
    InMemoryRatingsStore,
    LockedRatingsStore,
)
from repositories.ratings.sql import SqlRatingsStore, ensure_player_rating_schema

__all__ = [
    "AsyncInMemoryRatingsStore",
    "InMemoryRatingsStore",
    "LockedRatingsStore",
    "SqlRatingsStore",
    "ensure_player_rating_schema",
]
