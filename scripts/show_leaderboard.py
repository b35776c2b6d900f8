#!/usr/bin/env python3
"""Show top players stored in a SQL ratings database."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL
from repositories.ratings.sql import SqlRatingsStore

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Query top players from player_ratings.",
)


@app.command()
def show_leaderboard(
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of players to return."),
    ] = 20,
    min_games: Annotated[
        int,
        typer.Option("--min-games", help="Hide players with fewer games than this."),
    ] = 0,
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL. Defaults to ./ratings.db."),
    ] = DEFAULT_DB_URL,
) -> None:
    """Print top players by rating, then games played, then name."""
    if top_n <= 0:
        raise typer.BadParameter("--top-n must be greater than 0")
    if min_games < 0:
        raise typer.BadParameter("--min-games must be >= 0")

    store = SqlRatingsStore.from_url(db_url)
    players = [player for player in store.leaderboard() if player.games_played >= min_games][:top_n]

    if not players:
        typer.echo(f"No players found with min_games={min_games}.")
        return

    typer.echo(f"top_n={top_n} min_games={min_games} tracked_players={len(store)}")
    for index, player in enumerate(players, start=1):
        typer.echo(
            f"{index:2d}. {player.name:<20} "
            f"rating={player.rating:5d} games_played={player.games_played:4d}"
        )


if __name__ == "__main__":
    app()
