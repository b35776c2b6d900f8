"""Tests for match reporting through the synchronous rating service."""

from __future__ import annotations

import pytest

from domain.ratings.common import Player
from domain.ratings.elo.calculator import EloParameters
from domain.ratings.errors import SelfPlayError
from domain.ratings.protocol import Outcome
from domain.ratings.service import RatingService
from repositories.ratings.memory import InMemoryRatingsStore, LockedRatingsStore


@pytest.fixture(params=[InMemoryRatingsStore, LockedRatingsStore])
def service(request: pytest.FixtureRequest) -> RatingService:
    return RatingService(request.param())


def test_self_play_is_rejected(service: RatingService) -> None:
    service.add_player("a")

    with pytest.raises(SelfPlayError, match="'a'") as exc_info:
        service.report_match("a", "a", Outcome.PLAYER1_WINS)

    assert exc_info.value.player_name == "a"
    assert service["a"] == Player(name="a", rating=1000, games_played=0)


def test_self_play_does_not_register_unknown_player(service: RatingService) -> None:
    with pytest.raises(SelfPlayError):
        service.report_match("x", "x", Outcome.DRAW)

    assert service.get_player("x") is None
    assert len(service.store) == 0


def test_self_play_error_is_a_value_error() -> None:
    assert issubclass(SelfPlayError, ValueError)


def test_unknown_players_are_auto_registered(service: RatingService) -> None:
    service.report_match("a", "b", Outcome.DRAW)

    assert service["a"] == Player(name="a", rating=1000, games_played=1)
    assert service["b"] == Player(name="b", rating=1000, games_played=1)


def test_win_then_loss_nets_a_two_point_swing(service: RatingService) -> None:
    service.add_player("a")
    service.add_player("b")

    service.report_match("a", "b", Outcome.PLAYER1_WINS)
    service.report_match("b", "a", Outcome.PLAYER1_WINS)

    assert service["a"].rating == 999
    assert service["b"].rating == 1001
    assert service["a"].games_played == 2
    assert service["b"].games_played == 2


def test_draw_between_fresh_players_keeps_ratings(service: RatingService) -> None:
    service.report_match("a", "b", Outcome.DRAW)

    assert service["a"].rating == 1000
    assert service["b"].rating == 1000


def test_games_played_counts_every_match(service: RatingService) -> None:
    outcomes = [Outcome.PLAYER1_WINS, Outcome.DRAW, Outcome.PLAYER1_WINS, Outcome.DRAW]
    for index, outcome in enumerate(outcomes, start=1):
        service.report_match("a", "b", outcome)
        assert service["a"].games_played == index
        assert service["b"].games_played == index

    service.report_match("b", "c", Outcome.PLAYER1_WINS)
    assert service["a"].games_played == 4
    assert service["b"].games_played == 5
    assert service["c"].games_played == 1


def test_outcome_accepts_string_values(service: RatingService) -> None:
    service.report_match("a", "b", "player1_wins")
    assert service["a"].rating == 1016
    assert service["b"].rating == 984

    with pytest.raises(ValueError):
        service.report_match("a", "b", "player2_wins")


def test_add_player_overwrites_existing_record(service: RatingService) -> None:
    service.report_match("a", "b", Outcome.PLAYER1_WINS)
    service.add_player("a")

    assert service["a"] == Player(name="a", rating=1000, games_played=0)


def test_ensure_player_keeps_existing_record(service: RatingService) -> None:
    service.report_match("a", "b", Outcome.PLAYER1_WINS)

    assert service.ensure_player("a").rating == 1016
    assert service.ensure_player("new").rating == 1000
    assert len(service.store) == 3


def test_get_player_returns_none_for_unknown_name(service: RatingService) -> None:
    assert service.get_player("nobody") is None
    with pytest.raises(KeyError):
        service["nobody"]


def test_returned_players_are_copies(service: RatingService) -> None:
    service.report_match("a", "b", Outcome.PLAYER1_WINS)
    player = service["a"]
    player.rating = 5000

    assert service["a"].rating == 1016


def test_all_players_and_leaderboard(service: RatingService) -> None:
    service.report_match("a", "b", Outcome.PLAYER1_WINS)
    service.report_match("c", "d", Outcome.DRAW)

    assert sorted(player.name for player in service.all_players()) == ["a", "b", "c", "d"]
    assert [player.name for player in service.leaderboard()] == ["a", "c", "d", "b"]
    assert [player.name for player in service.leaderboard(top_n=1)] == ["a"]


def test_custom_parameters_change_starting_rating_and_swing() -> None:
    service = RatingService(
        InMemoryRatingsStore(),
        EloParameters(initial_rating=1500, k_factor=16.0),
    )
    service.report_match("a", "b", Outcome.PLAYER1_WINS)

    assert service.initial_rating == 1500
    assert service["a"].rating == 1508
    assert service["b"].rating == 1492


def test_leaderboard_ordering_with_forced_ratings() -> None:
    store = InMemoryRatingsStore()
    service = RatingService(store)
    for name in ("a", "b", "c", "d"):
        service.add_player(name)

    service.report_match("a", "b", Outcome.PLAYER1_WINS)
    service.report_match("a", "b", Outcome.PLAYER1_WINS)
    service.report_match("a", "c", Outcome.PLAYER1_WINS)

    store.get_mut("b").rating = 985
    d = store.get_mut("d")
    d.rating = 985
    d.games_played = 2

    assert store.get("c") == Player(name="c", rating=985, games_played=1)
    players = sorted(store.players())
    assert [player.name for player in players] == ["a", "b", "d", "c"]


def test_echo_receives_one_line_per_match() -> None:
    lines: list[str] = []
    service = RatingService(InMemoryRatingsStore(), echo=lines.append)

    service.report_match("a", "b", Outcome.PLAYER1_WINS)
    with pytest.raises(SelfPlayError):
        service.report_match("a", "a", Outcome.DRAW)

    assert lines == [
        "match player1=a player2=b outcome=player1_wins "
        "player1_rating=1000->1016 player2_rating=1000->984"
    ]
