"""player_ratings table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class PlayerRating(Base):
    """Current rating state for one player (one row per player name)."""

    __tablename__ = "player_ratings"
    __table_args__ = (
        CheckConstraint("games_played >= 0", name="ck_player_ratings_games_played"),
        Index("idx_player_ratings_leaderboard", "rating", "games_played"),
    )

    name: Mapped[str] = mapped_column(String(128), primary_key=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    games_played: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
