"""Rating-system domain modules."""

from domain.ratings.common import MatchResult, Player, rank_players
from domain.ratings.errors import SelfPlayError
from domain.ratings.protocol import (
    AsyncRatingsStore,
    MutableRatingsStore,
    Outcome,
    RatingsStore,
)
from domain.ratings.service import AsyncRatingService, RatingService

__all__ = [
    "AsyncRatingService",
    "AsyncRatingsStore",
    "MatchResult",
    "MutableRatingsStore",
    "Outcome",
    "Player",
    "RatingService",
    "RatingsStore",
    "SelfPlayError",
    "rank_players",
]
