"""
Core game logic: parsing game lines and checking them against the bag.
"""

import logging
from typing import Iterable, List, Optional

from config import (
    AMOUNT_SEPARATOR,
    GAME_KEYWORD,
    HEADER_SEPARATOR,
    ROUND_SEPARATOR,
    WITHDRAWAL_SEPARATOR,
)
from errors import InvalidNumberError, MalformedLineError, UnknownColorError
from models import BagLimits, CubeColor, CubeCount, Game, Round

logger = logging.getLogger("cubes.parser")

_DEFAULT_LIMITS = BagLimits.default()


def _parse_int(text: str, what: str) -> int:
    # int() alone would also take signs, whitespace and underscores
    if not (text.isascii() and text.isdigit()):
        raise InvalidNumberError(f"{what} is not a non-negative integer: {text!r}")
    return int(text)


def parse_color(text: str) -> CubeColor:
    """Color names match case-insensitively."""
    try:
        return CubeColor(text.lower())
    except ValueError:
        raise UnknownColorError(f"those don't look like cubes: {text!r}") from None


def parse_cube_count(text: str) -> CubeCount:
    """Parse a single withdrawal such as '3 blue'."""
    amount, sep, color = text.partition(AMOUNT_SEPARATOR)
    if not sep:
        raise MalformedLineError(f"withdrawal has no amount/color separator: {text!r}")
    return CubeCount(color=parse_color(color), amount=_parse_int(amount, "amount"))


def parse_round(text: str) -> Round:
    """Parse a withdrawal combination such as '3 blue, 4 red'."""
    return Round(counts=tuple(parse_cube_count(t) for t in text.split(WITHDRAWAL_SEPARATOR)))


def parse_game(line: str) -> Game:
    """
    Turn a raw input line into a Game.

    Expected form: 'Game <id>: <round>; <round>; ...'. The 'Game' keyword is
    case-sensitive; color names are not. Any deviation raises a GameParseError
    subclass and nothing is returned.
    """
    header, sep, body = line.partition(HEADER_SEPARATOR)
    if not sep:
        raise MalformedLineError(f"missing {HEADER_SEPARATOR!r} after game header: {line!r}")
    if not header.startswith(GAME_KEYWORD):
        raise MalformedLineError(f"line does not start with {GAME_KEYWORD!r}: {line!r}")

    game_id = _parse_int(header[len(GAME_KEYWORD):], "game id")
    rounds = tuple(parse_round(r) for r in body.split(ROUND_SEPARATOR))
    return Game(id=game_id, rounds=rounds)


def parse_games(lines: Iterable[str]) -> List[Game]:
    games = [parse_game(line) for line in lines]
    logger.debug("Parsed %d games", len(games))
    return games


def is_valid_cube_count(count: CubeCount, limits: Optional[BagLimits] = None) -> bool:
    if limits is None:
        limits = _DEFAULT_LIMITS
    return count.amount <= limits[count.color]


def is_valid_round(round_: Round, limits: Optional[BagLimits] = None) -> bool:
    return all(is_valid_cube_count(c, limits) for c in round_.counts)


def is_valid_game(game: Game, limits: Optional[BagLimits] = None) -> bool:
    """A game is possible only if every round fits in the bag."""
    return all(is_valid_round(r, limits) for r in game.rounds)
