"""Rating domain modules."""

from domain.ratings.common import MatchResult, Player
from domain.ratings.protocol import Outcome

__all__ = ["MatchResult", "Outcome", "Player"]
