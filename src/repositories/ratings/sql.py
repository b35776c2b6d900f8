"""Ratings store persisted through SQLAlchemy."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from domain.ratings.common import Player
from models import PlayerRating


def ensure_player_rating_schema(engine: Engine) -> None:
    """Create the player_ratings table and its indexes if they do not exist."""
    with engine.begin() as connection:
        PlayerRating.__table__.create(bind=connection, checkfirst=True)


def _to_player(row: PlayerRating) -> Player:
    return Player(name=row.name, rating=row.rating, games_played=row.games_played)


class SqlRatingsStore:
    """Store that opens one session per call and commits before returning.

    Reads return detached :class:`Player` values, never ORM rows.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, db_url: str) -> SqlRatingsStore:
        engine = create_db_engine(db_url)
        ensure_player_rating_schema(engine)
        return cls(create_session_factory(engine))

    def create(self, player: Player) -> None:
        self._upsert(player)

    def update(self, player: Player) -> None:
        self._upsert(player)

    def get(self, name: str) -> Player | None:
        with self._session_factory() as session:
            row = session.get(PlayerRating, name)
            return None if row is None else _to_player(row)

    def players(self) -> Iterator[Player]:
        with self._session_factory() as session:
            for row in session.scalars(select(PlayerRating).execution_options(yield_per=500)):
                yield _to_player(row)

    def leaderboard(self, top_n: int | None = None) -> list[Player]:
        """Return players best-first, ordered in the database."""
        statement = select(PlayerRating).order_by(
            PlayerRating.rating.desc(),
            PlayerRating.games_played.desc(),
            PlayerRating.name.asc(),
        )
        if top_n is not None:
            statement = statement.limit(top_n)
        with self._session_factory() as session:
            return [_to_player(row) for row in session.scalars(statement)]

    def __len__(self) -> int:
        with self._session_factory() as session:
            result = session.scalar(select(func.count()).select_from(PlayerRating))
            return int(result or 0)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._session_factory() as session:
            return session.get(PlayerRating, name) is not None

    def _upsert(self, player: Player) -> None:
        with self._session_factory() as session, session.begin():
            row = session.get(PlayerRating, player.name)
            if row is None:
                session.add(
                    PlayerRating(
                        name=player.name,
                        rating=player.rating,
                        games_played=player.games_played,
                    )
                )
            else:
                row.rating = player.rating
                row.games_played = player.games_played
                row.updated_at = datetime.now(UTC).replace(tzinfo=None)


__all__ = ["SqlRatingsStore", "ensure_player_rating_schema"]
