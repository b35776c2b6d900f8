"""Replay a sequence of match results through a rating service."""

from __future__ import annotations

import csv
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from domain.ratings.common import MatchResult
from domain.ratings.errors import SelfPlayError
from domain.ratings.protocol import Outcome
from domain.ratings.service import RatingService


@dataclass(frozen=True)
class ReplaySummary:
    """Outcome of one replay run."""

    processed_results: int
    skipped_results: int
    tracked_players: int


def load_match_results(file_path: Path) -> list[MatchResult]:
    """Parse a ``player1,player2,outcome`` CSV file.

    Blank lines and lines starting with ``#`` are ignored. A missing outcome
    column means player1 won.
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Match file not found: {file_path}")

    results: list[MatchResult] = []
    with file_path.open(newline="", encoding="utf-8") as file:
        for line_number, row in enumerate(csv.reader(file), start=1):
            if not row or not "".join(row).strip() or row[0].lstrip().startswith("#"):
                continue
            fields = [field.strip() for field in row]
            if len(fields) not in (2, 3):
                raise ValueError(
                    f"{file_path}:{line_number}: expected 'player1,player2[,outcome]', got {row!r}"
                )
            if not fields[0] or not fields[1]:
                raise ValueError(f"{file_path}:{line_number}: player names cannot be empty")

            outcome_value = fields[2] if len(fields) == 3 and fields[2] else Outcome.PLAYER1_WINS.value
            try:
                outcome = Outcome(outcome_value.lower())
            except ValueError as exc:
                allowed = ", ".join(item.value for item in Outcome)
                raise ValueError(
                    f"{file_path}:{line_number}: unknown outcome {outcome_value!r} (expected one of: {allowed})"
                ) from exc

            results.append(MatchResult(player1=fields[0], player2=fields[1], outcome=outcome))
    return results


def replay_matches(
    service: RatingService,
    results: Iterable[MatchResult],
    *,
    skip_invalid: bool = False,
    progress_every: int = 10_000,
    echo: Callable[[str], None] | None = None,
) -> ReplaySummary:
    """Report every result in order; stop on the first self-play unless ``skip_invalid``."""
    if progress_every <= 0:
        raise ValueError("progress_every must be greater than 0")

    processed = 0
    skipped = 0
    for index, result in enumerate(results, start=1):
        try:
            service.report_match(result.player1, result.player2, result.outcome)
        except SelfPlayError as exc:
            if not skip_invalid:
                raise
            skipped += 1
            if echo is not None:
                echo(f"[skip] result={index} reason={exc}")
            continue

        processed += 1
        if echo is not None and processed % progress_every == 0:
            echo(f"processed_results={processed} skipped_results={skipped}")

    return ReplaySummary(
        processed_results=processed,
        skipped_results=skipped,
        tracked_players=len(service.store),
    )
