"""In-process ratings stores backed by a dict keyed on player name."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import AsyncIterator, Iterable, Iterator

from domain.ratings.common import Player


class InMemoryRatingsStore:
    """Single-owner store; ``get_mut`` hands out the live record."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: dict[str, Player] = {}
        for player in players:
            self.create(player)

    def create(self, player: Player) -> None:
        self._players[player.name] = player.copy()

    def update(self, player: Player) -> None:
        self._players[player.name] = player.copy()

    def get(self, name: str) -> Player | None:
        player = self._players.get(name)
        return None if player is None else player.copy()

    def get_mut(self, name: str) -> Player | None:
        return self._players.get(name)

    def players(self) -> Iterator[Player]:
        return (player.copy() for player in list(self._players.values()))

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return name in self._players


class LockedRatingsStore:
    """Thread-safe store; the lock covers one call, never a whole match."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: dict[str, Player] = {}
        self._lock = threading.RLock()
        for player in players:
            self.create(player)

    def create(self, player: Player) -> None:
        with self._lock:
            self._players[player.name] = player.copy()

    def update(self, player: Player) -> None:
        with self._lock:
            self._players[player.name] = player.copy()

    def get(self, name: str) -> Player | None:
        with self._lock:
            player = self._players.get(name)
            return None if player is None else player.copy()

    def players(self) -> Iterator[Player]:
        with self._lock:
            snapshot = [player.copy() for player in self._players.values()]
        return iter(snapshot)

    def __len__(self) -> int:
        with self._lock:
            return len(self._players)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._players


class AsyncInMemoryRatingsStore:
    """asyncio store guarded by an ``asyncio.Lock``; only copies leave the store."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: dict[str, Player] = {player.name: player.copy() for player in players}
        self._lock = asyncio.Lock()

    async def create(self, player: Player) -> None:
        async with self._lock:
            self._players[player.name] = player.copy()

    async def update(self, player: Player) -> None:
        async with self._lock:
            self._players[player.name] = player.copy()

    async def get(self, name: str) -> Player | None:
        async with self._lock:
            player = self._players.get(name)
            return None if player is None else player.copy()

    async def players(self) -> AsyncIterator[Player]:
        async with self._lock:
            snapshot = [player.copy() for player in self._players.values()]
        for player in snapshot:
            yield player

    async def count(self) -> int:
        async with self._lock:
            return len(self._players)


__all__ = ["AsyncInMemoryRatingsStore", "InMemoryRatingsStore", "LockedRatingsStore"]
