"""Unit tests for two-player Elo calculations."""

from __future__ import annotations

import pytest

from domain.ratings.elo.calculator import (
    DEFAULT_INITIAL_RATING,
    DEFAULT_K_FACTOR,
    DEFAULT_SCALE_FACTOR,
    EloParameters,
    actual_scores,
    calculate_expected_score,
    compute_new_ratings,
    describe_match,
    round_rating,
)
from domain.ratings.protocol import Outcome


def test_elo_parameters_defaults_are_expected_constants() -> None:
    params = EloParameters()
    assert params.initial_rating == DEFAULT_INITIAL_RATING == 1000
    assert params.k_factor == pytest.approx(DEFAULT_K_FACTOR)
    assert params.k_factor == pytest.approx(32.0)
    assert params.scale_factor == pytest.approx(DEFAULT_SCALE_FACTOR)
    assert params.scale_factor == pytest.approx(400.0)


def test_expected_score_equal_ratings_is_half() -> None:
    expected = calculate_expected_score(1000.0, 1000.0, 400.0)
    assert expected == pytest.approx(0.5)


def test_expected_scores_sum_to_one() -> None:
    expected_a = calculate_expected_score(1200.0, 1000.0, 400.0)
    expected_b = calculate_expected_score(1000.0, 1200.0, 400.0)
    assert expected_a + expected_b == pytest.approx(1.0)


def test_actual_scores_by_outcome() -> None:
    assert actual_scores(Outcome.PLAYER1_WINS) == (1.0, 0.0)
    assert actual_scores(Outcome.DRAW) == (0.5, 0.5)


def test_round_rating_rounds_halves_away_from_zero() -> None:
    assert round_rating(1.5) == 2
    assert round_rating(2.5) == 3
    assert round_rating(-1.5) == -2
    assert round_rating(-2.5) == -3
    assert round_rating(1000.49) == 1000
    assert round_rating(-0.4) == 0


def test_even_decisive_game_moves_half_the_k_factor() -> None:
    assert compute_new_ratings(1000, 1000, Outcome.PLAYER1_WINS) == (1016, 984)


def test_draw_with_equal_ratings_leaves_ratings_unchanged() -> None:
    assert compute_new_ratings(1000, 1000, Outcome.DRAW) == (1000, 1000)
    assert compute_new_ratings(1450, 1450, Outcome.DRAW) == (1450, 1450)


def test_draw_pulls_ratings_towards_each_other() -> None:
    new_a, new_b = compute_new_ratings(1200, 1000, Outcome.DRAW)
    assert new_a < 1200
    assert new_b > 1000
    assert (new_a, new_b) == (1192, 1008)


def test_decisive_game_is_zero_sum_within_rounding() -> None:
    pairs = [(1000, 1000), (1016, 984), (1200, 1000), (800, 1500), (2400, 100), (0, 10)]
    for rating_a, rating_b in pairs:
        new_a, new_b = compute_new_ratings(rating_a, rating_b, Outcome.PLAYER1_WINS)
        assert abs((new_a + new_b) - (rating_a + rating_b)) <= 1
        assert new_a >= rating_a
        assert new_b <= rating_b


def test_underdog_win_gains_more_than_even_match_win() -> None:
    even_a, _ = compute_new_ratings(1000, 1000, Outcome.PLAYER1_WINS)
    underdog_a, _ = compute_new_ratings(1000, 1200, Outcome.PLAYER1_WINS)
    assert underdog_a - 1000 > even_a - 1000


def test_ratings_are_not_clamped_at_zero() -> None:
    assert compute_new_ratings(0, 10, Outcome.PLAYER1_WINS) == (16, -6)


def test_k_factor_changes_delta_magnitude() -> None:
    params = EloParameters(k_factor=16.0)
    assert compute_new_ratings(1000, 1000, Outcome.PLAYER1_WINS, params) == (1008, 992)


def test_scale_factor_changes_expected_score() -> None:
    narrow_a, _ = describe_match(1000, 1200, Outcome.PLAYER1_WINS, EloParameters(scale_factor=400.0))
    wide_a, _ = describe_match(1000, 1200, Outcome.PLAYER1_WINS, EloParameters(scale_factor=800.0))
    assert narrow_a.expected_score < wide_a.expected_score
    assert narrow_a.rating_delta > wide_a.rating_delta


def test_describe_match_reports_both_sides() -> None:
    a_change, b_change = describe_match(1000, 1000, Outcome.PLAYER1_WINS)
    assert a_change.pre_rating == 1000
    assert a_change.post_rating == 1016
    assert a_change.rating_delta == 16
    assert a_change.actual_score == pytest.approx(1.0)
    assert a_change.expected_score == pytest.approx(0.5)
    assert b_change.rating_delta == -16
    assert b_change.actual_score == pytest.approx(0.0)


def test_compute_new_ratings_is_deterministic() -> None:
    first = compute_new_ratings(1234, 987, Outcome.PLAYER1_WINS)
    second = compute_new_ratings(1234, 987, Outcome.PLAYER1_WINS)
    assert first == second
