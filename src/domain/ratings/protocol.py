"""Shared protocols and enums for ratings stores."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from domain.ratings.common import Player


class Outcome(str, Enum):
    """Result of one game from the first player's point of view."""

    PLAYER1_WINS = "player1_wins"
    DRAW = "draw"

    @classmethod
    def from_is_draw(cls, is_draw: bool) -> Outcome:
        return cls.DRAW if is_draw else cls.PLAYER1_WINS


@runtime_checkable
class RatingsStore(Protocol):
    """Base contract every synchronous store satisfies.

    ``create`` and ``update`` are both upserts. ``get`` returns a copy, so
    callers must write changes back with ``update``.
    """

    def create(self, player: Player) -> None: ...

    def update(self, player: Player) -> None: ...

    def get(self, name: str) -> Player | None: ...

    def players(self) -> Iterator[Player]: ...

    def __len__(self) -> int: ...

    def __contains__(self, name: object) -> bool: ...


@runtime_checkable
class MutableRatingsStore(RatingsStore, Protocol):
    """Exclusive-access stores that can hand out the live stored record."""

    def get_mut(self, name: str) -> Player | None: ...


@runtime_checkable
class AsyncRatingsStore(Protocol):
    """Contract for stores used from asyncio code; values are always copies."""

    async def create(self, player: Player) -> None: ...

    async def update(self, player: Player) -> None: ...

    async def get(self, name: str) -> Player | None: ...

    def players(self) -> AsyncIterator[Player]: ...

    async def count(self) -> int: ...


__all__ = [
    "AsyncRatingsStore",
    "MutableRatingsStore",
    "Outcome",
    "RatingsStore",
]
