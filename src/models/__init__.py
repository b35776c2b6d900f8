"""ORM models."""

from models.base import Base
from models.player import PlayerRating

__all__ = ["Base", "PlayerRating"]
