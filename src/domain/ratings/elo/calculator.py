"""Two-player Elo logic."""

from __future__ import annotations

from dataclasses import dataclass
from math import copysign, floor

from domain.ratings.protocol import Outcome

DEFAULT_INITIAL_RATING = 1000
DEFAULT_K_FACTOR = 32.0
DEFAULT_SCALE_FACTOR = 400.0


@dataclass(frozen=True)
class EloParameters:
    initial_rating: int = DEFAULT_INITIAL_RATING
    k_factor: float = DEFAULT_K_FACTOR
    scale_factor: float = DEFAULT_SCALE_FACTOR


@dataclass(frozen=True)
class RatingChange:
    """Per-side figures for one computed game."""

    pre_rating: int
    post_rating: int
    expected_score: float
    actual_score: float

    @property
    def rating_delta(self) -> int:
        return self.post_rating - self.pre_rating


def calculate_expected_score(rating: float, opponent_rating: float, scale_factor: float) -> float:
    """Compute the Elo expected score for one side."""
    return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / scale_factor))


def actual_scores(outcome: Outcome) -> tuple[float, float]:
    if outcome is Outcome.DRAW:
        return 0.5, 0.5
    return 1.0, 0.0


def round_rating(value: float) -> int:
    """Round to the nearest integer, halves away from zero (1.5 -> 2, -1.5 -> -2)."""
    return int(copysign(floor(abs(value) + 0.5), value))


def describe_match(
    player_a_rating: int,
    player_b_rating: int,
    outcome: Outcome,
    params: EloParameters = EloParameters(),
) -> tuple[RatingChange, RatingChange]:
    """Compute both sides of one game.

    Each side derives its own expected score and is rounded on its own, so the
    sum of post ratings can drift from the sum of pre ratings by one point.
    Ratings are not clamped and can go negative for extreme inputs.
    """
    a_expected = calculate_expected_score(player_a_rating, player_b_rating, params.scale_factor)
    b_expected = calculate_expected_score(player_b_rating, player_a_rating, params.scale_factor)
    a_actual, b_actual = actual_scores(outcome)

    a_post = round_rating(player_a_rating + params.k_factor * (a_actual - a_expected))
    b_post = round_rating(player_b_rating + params.k_factor * (b_actual - b_expected))

    return (
        RatingChange(
            pre_rating=player_a_rating,
            post_rating=a_post,
            expected_score=a_expected,
            actual_score=a_actual,
        ),
        RatingChange(
            pre_rating=player_b_rating,
            post_rating=b_post,
            expected_score=b_expected,
            actual_score=b_actual,
        ),
    )


def compute_new_ratings(
    player_a_rating: int,
    player_b_rating: int,
    outcome: Outcome,
    params: EloParameters = EloParameters(),
) -> tuple[int, int]:
    """Return the post-game ratings for player A and player B."""
    a_change, b_change = describe_match(player_a_rating, player_b_rating, outcome, params)
    return a_change.post_rating, b_change.post_rating
