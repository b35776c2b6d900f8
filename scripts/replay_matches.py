#!/usr/bin/env python3
"""Replay a CSV file of match results into a ratings store and print the leaderboard."""

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
from domain.pipeline import load_match_results, replay_matches
from domain.ratings.elo.config import load_elo_system_config
from domain.ratings.errors import SelfPlayError
from domain.ratings.service import RatingService
from repositories.ratings.registry import create_store, get, get_all

DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "ratings" / "elo" / "default.toml"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Replay match results through the Elo rating service.",
)


@app.command()
def replay(
    match_file: Annotated[
        Path,
        typer.Argument(help="CSV file with player1,player2[,outcome] rows."),
    ],
    backend: Annotated[
        str,
        typer.Option("--backend", help="Store backend (see list-backends)."),
    ] = "memory",
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL for persistent backends."),
    ] = DEFAULT_DB_URL,
    config_path: Annotated[
        Path,
        typer.Option("--config", help="Elo system TOML config."),
    ] = DEFAULT_CONFIG_PATH,
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of players to print after the replay."),
    ] = 20,
    skip_invalid: Annotated[
        bool,
        typer.Option("--skip-invalid", help="Skip self-play rows instead of aborting."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Print one line per reported match."),
    ] = False,
) -> None:
    """Replay one match file and print the resulting top players."""
    if top_n <= 0:
        raise typer.BadParameter("--top-n must be greater than 0")
    try:
        get(backend)
    except KeyError as exc:
        raise typer.BadParameter(str(exc), param_hint="--backend") from exc

    try:
        system_config = load_elo_system_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    try:
        results = load_match_results(match_file)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="MATCH_FILE") from exc

    service = RatingService(
        create_store(backend, db_url=db_url),
        system_config.parameters,
        echo=typer.echo if verbose else None,
    )

    typer.echo(
        f"loaded_results={len(results)} "
        f"backend={backend} "
        f"system={system_config.name} "
        f"initial_rating={system_config.parameters.initial_rating} "
        f"k_factor={system_config.parameters.k_factor}"
    )

    try:
        summary = replay_matches(service, results, skip_invalid=skip_invalid, echo=typer.echo)
    except SelfPlayError as exc:
        typer.echo(f"aborted: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"processed_results={summary.processed_results} "
        f"skipped_results={summary.skipped_results} "
        f"tracked_players={summary.tracked_players}"
    )
    for index, player in enumerate(service.leaderboard(top_n), start=1):
        typer.echo(
            f"{index:2d}. {player.name:<20} "
            f"rating={player.rating:5d} games_played={player.games_played:4d}"
        )


@app.command()
def list_backends() -> None:
    """Print all registered store backends."""
    for descriptor in get_all():
        typer.echo(
            f"{descriptor.backend} persistent={descriptor.persistent} "
            f"description={descriptor.description}"
        )


if __name__ == "__main__":
    app()
