"""Tests for turning game lines into Game records."""

import pytest

from errors import GameParseError, InvalidNumberError, MalformedLineError, UnknownColorError
from game_logic import parse_color, parse_cube_count, parse_game, parse_games, parse_round
from models import CubeColor, CubeCount, Round


def test_parse_game_full_example():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")

    assert game.id == 1
    assert game.rounds == (
        Round((CubeCount(CubeColor.BLUE, 3), CubeCount(CubeColor.RED, 4))),
        Round((CubeCount(CubeColor.RED, 1), CubeCount(CubeColor.GREEN, 2), CubeCount(CubeColor.BLUE, 6))),
        Round((CubeCount(CubeColor.GREEN, 2),)),
    )


@pytest.mark.parametrize("game_id", [1, 7, 42, 100, 12345])
def test_parsed_id_matches_header(game_id):
    assert parse_game(f"Game {game_id}: 1 red").id == game_id


@pytest.mark.parametrize("name", ["red", "RED", "Red", "rEd"])
def test_color_names_are_case_insensitive(name):
    assert parse_color(name) is CubeColor.RED


def test_game_keyword_is_case_sensitive():
    with pytest.raises(MalformedLineError):
        parse_game("game 1: 1 red")


def test_unknown_color_is_rejected():
    with pytest.raises(UnknownColorError):
        parse_game("Game 3: 20 red, 8 blue; 4 white")


def test_parse_cube_count():
    assert parse_cube_count("15 Blue") == CubeCount(CubeColor.BLUE, 15)


def test_parse_round_keeps_order():
    r = parse_round("2 green, 1 red, 5 green")
    assert [c.color for c in r.counts] == [CubeColor.GREEN, CubeColor.RED, CubeColor.GREEN]
    assert [c.amount for c in r.counts] == [2, 1, 5]


@pytest.mark.parametrize(
    "line, error",
    [
        ("Game 1 1 red", MalformedLineError),          # no ": "
        ("Round 1: 1 red", MalformedLineError),        # wrong keyword
        ("Game 1: 1red", MalformedLineError),          # no space between amount and color
        ("Game 1: ", MalformedLineError),              # empty body
        ("Game 1: 1 red;2 blue", UnknownColorError),   # color token becomes "red;2 blue"
    ],
)
def test_malformed_lines(line, error):
    with pytest.raises(error):
        parse_game(line)
    assert issubclass(error, GameParseError)


@pytest.mark.parametrize("line", ["Game x: 1 red", "Game 1: two red", "Game 1: -1 red", "Game 1.5: 1 red"])
def test_invalid_numbers(line):
    with pytest.raises(InvalidNumberError):
        parse_game(line)


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_game("Game 1: 1 purple")


def test_parse_games_stops_at_first_bad_line():
    with pytest.raises(UnknownColorError):
        parse_games(["Game 1: 1 red", "Game 2: 1 white"])


def test_game_peak():
    game = parse_game("Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red")
    assert game.peak(CubeColor.RED) == 14
    assert game.peak(CubeColor.GREEN) == 3
    assert game.peak(CubeColor.BLUE) == 15


def test_peak_is_largest_single_withdrawal():
    game = parse_game("Game 1: 5 red, 10 red; 3 red")
    assert game.peak(CubeColor.RED) == 10
    assert game.peak(CubeColor.BLUE) == 0
