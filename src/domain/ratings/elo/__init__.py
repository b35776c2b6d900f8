"""Elo rating modules."""

from domain.ratings.elo.calculator import (
    DEFAULT_INITIAL_RATING,
    DEFAULT_K_FACTOR,
    DEFAULT_SCALE_FACTOR,
    EloParameters,
    RatingChange,
    actual_scores,
    calculate_expected_score,
    compute_new_ratings,
    describe_match,
    round_rating,
)
from domain.ratings.elo.config import (
    EloSystemConfig,
    load_elo_system_config,
    load_elo_system_configs,
)

__all__ = [
    "DEFAULT_INITIAL_RATING",
    "DEFAULT_K_FACTOR",
    "DEFAULT_SCALE_FACTOR",
    "EloParameters",
    "EloSystemConfig",
    "RatingChange",
    "actual_scores",
    "calculate_expected_score",
    "compute_new_ratings",
    "describe_match",
    "load_elo_system_config",
    "load_elo_system_configs",
    "round_rating",
]
