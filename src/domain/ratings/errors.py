"""Errors raised by the rating service."""

from __future__ import annotations


class SelfPlayError(ValueError):
    """A match was reported between a player and themself."""

    def __init__(self, player_name: str) -> None:
        self.player_name = player_name
        super().__init__(f"player={player_name!r} cannot play against themselves")


__all__ = ["SelfPlayError"]
