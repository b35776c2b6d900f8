"""Shared types for the rating service and its stores."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import total_ordering
from typing import Any

from domain.ratings.protocol import Outcome


@total_ordering
@dataclass
class Player:
    """Identity and rating state for one participant.

    Players sort best-first: rating descending, then games played descending,
    then name ascending.
    """

    name: str
    rating: int
    games_played: int = 0

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name" and "name" in self.__dict__:
            raise AttributeError(f"player name is immutable (name={self.name!r})")
        if key == "games_played" and value < 0:
            raise ValueError(f"games_played must be >= 0 (name={self.__dict__.get('name')!r})")
        super().__setattr__(key, value)

    def sort_key(self) -> tuple[int, int, str]:
        return (-self.rating, -self.games_played, self.name)

    def copy(self) -> Player:
        return replace(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class MatchResult:
    """One reported two-player game; the winner of a decisive game is player1."""

    player1: str
    player2: str
    outcome: Outcome = Outcome.PLAYER1_WINS


def rank_players(players: list[Player], top_n: int | None = None) -> list[Player]:
    """Sort players best-first and optionally keep the first ``top_n``."""
    ranked = sorted(players, key=Player.sort_key)
    if top_n is None:
        return ranked
    return ranked[:top_n]


__all__ = ["MatchResult", "Player", "rank_players"]
