#!/usr/bin/env python3
"""Report one match result into a SQL ratings database."""

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
from domain.ratings.elo.config import load_elo_system_config
from domain.ratings.errors import SelfPlayError
from domain.ratings.protocol import Outcome
from domain.ratings.service import RatingService
from repositories.ratings.sql import SqlRatingsStore

DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "ratings" / "elo" / "default.toml"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Report a single game and print both players' new ratings.",
)


@app.command()
def report_match(
    winner: Annotated[str, typer.Argument(help="Winner (or first player of a draw).")],
    loser: Annotated[str, typer.Argument(help="Loser (or second player of a draw).")],
    draw: Annotated[
        bool,
        typer.Option("--draw", help="Record the game as a draw."),
    ] = False,
    config_path: Annotated[
        Path,
        typer.Option("--config", help="Elo system TOML config."),
    ] = DEFAULT_CONFIG_PATH,
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL. Defaults to ./ratings.db."),
    ] = DEFAULT_DB_URL,
) -> None:
    """Record one game between two players."""
    system_config = load_elo_system_config(config_path)
    service = RatingService(
        SqlRatingsStore.from_url(db_url),
        system_config.parameters,
        echo=typer.echo,
    )

    try:
        service.report_match(winner, loser, Outcome.from_is_draw(draw))
    except SelfPlayError as exc:
        raise typer.BadParameter(str(exc), param_hint="LOSER") from exc

    for name in (winner, loser):
        player = service[name]
        typer.echo(f"{player.name:<20} rating={player.rating:5d} games_played={player.games_played:4d}")


if __name__ == "__main__":
    app()
