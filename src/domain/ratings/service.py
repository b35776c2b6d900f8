"""Match reporting on top of a ratings store."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from domain.ratings.common import Player, rank_players
from domain.ratings.elo.calculator import EloParameters, RatingChange, describe_match
from domain.ratings.errors import SelfPlayError
from domain.ratings.protocol import AsyncRatingsStore, Outcome, RatingsStore

StoreT = TypeVar("StoreT", bound=RatingsStore)
AsyncStoreT = TypeVar("AsyncStoreT", bound=AsyncRatingsStore)


def _format_match(
    player_a: Player,
    player_b: Player,
    outcome: Outcome,
    a_change: RatingChange,
    b_change: RatingChange,
) -> str:
    return (
        f"match player1={player_a.name} player2={player_b.name} outcome={outcome.value} "
        f"player1_rating={a_change.pre_rating}->{a_change.post_rating} "
        f"player2_rating={b_change.pre_rating}->{b_change.post_rating}"
    )


def _apply(player: Player, change: RatingChange) -> None:
    player.rating = change.post_rating
    player.games_played += 1


class RatingService(Generic[StoreT]):
    """Reports matches against a synchronous store.

    Missing players are registered on first appearance. The service never
    keeps store records between calls; it reads copies and writes them back.
    With a shared store, two overlapping ``report_match`` calls can still lose
    an update because the store only locks per call.
    """

    def __init__(
        self,
        store: StoreT,
        params: EloParameters = EloParameters(),
        *,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self._store = store
        self.params = params
        self.echo = echo

    @property
    def store(self) -> StoreT:
        return self._store

    @property
    def initial_rating(self) -> int:
        return self.params.initial_rating

    def add_player(self, name: str) -> Player:
        """Register ``name`` with a fresh record, replacing any existing one."""
        player = Player(name=name, rating=self.initial_rating, games_played=0)
        self._store.create(player)
        return player

    def ensure_player(self, name: str) -> Player:
        player = self._store.get(name)
        if player is None:
            return self.add_player(name)
        return player

    def report_match(self, name_a: str, name_b: str, outcome: Outcome | str) -> None:
        """Record one game; for a decisive outcome ``name_a`` is the winner."""
        if name_a == name_b:
            raise SelfPlayError(name_a)
        outcome = Outcome(outcome)

        player_a = self.ensure_player(name_a)
        player_b = self.ensure_player(name_b)

        a_change, b_change = describe_match(player_a.rating, player_b.rating, outcome, self.params)
        _apply(player_a, a_change)
        _apply(player_b, b_change)

        self._store.update(player_a)
        self._store.update(player_b)

        if self.echo is not None:
            self.echo(_format_match(player_a, player_b, outcome, a_change, b_change))

    def get_player(self, name: str) -> Player | None:
        return self._store.get(name)

    def all_players(self) -> list[Player]:
        return list(self._store.players())

    def leaderboard(self, top_n: int | None = None) -> list[Player]:
        return rank_players(self.all_players(), top_n)

    def __getitem__(self, name: str) -> Player:
        player = self._store.get(name)
        if player is None:
            raise KeyError(name)
        return player


class AsyncRatingService(Generic[AsyncStoreT]):
    """asyncio counterpart of :class:`RatingService`; awaits only on store calls."""

    def __init__(
        self,
        store: AsyncStoreT,
        params: EloParameters = EloParameters(),
        *,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self._store = store
        self.params = params
        self.echo = echo

    @property
    def store(self) -> AsyncStoreT:
        return self._store

    @property
    def initial_rating(self) -> int:
        return self.params.initial_rating

    async def add_player(self, name: str) -> Player:
        player = Player(name=name, rating=self.initial_rating, games_played=0)
        await self._store.create(player)
        return player

    async def ensure_player(self, name: str) -> Player:
        player = await self._store.get(name)
        if player is None:
            return await self.add_player(name)
        return player

    async def report_match(self, name_a: str, name_b: str, outcome: Outcome | str) -> None:
        if name_a == name_b:
            raise SelfPlayError(name_a)
        outcome = Outcome(outcome)

        player_a = await self.ensure_player(name_a)
        player_b = await self.ensure_player(name_b)

        a_change, b_change = describe_match(player_a.rating, player_b.rating, outcome, self.params)
        _apply(player_a, a_change)
        _apply(player_b, b_change)

        await self._store.update(player_a)
        await self._store.update(player_b)

        if self.echo is not None:
            self.echo(_format_match(player_a, player_b, outcome, a_change, b_change))

    async def get_player(self, name: str) -> Player | None:
        return await self._store.get(name)

    async def all_players(self) -> list[Player]:
        return [player async for player in self._store.players()]

    async def leaderboard(self, top_n: int | None = None) -> list[Player]:
        return rank_players(await self.all_players(), top_n)


__all__ = ["AsyncRatingService", "RatingService"]
