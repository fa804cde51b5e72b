"""
Aggregation over parsed games: the answer sum and a per-game summary table.
"""

import logging
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from config import ANSWER_TEMPLATE
from game_logic import is_valid_game, parse_games
from models import BagLimits, CubeColor, Game

logger = logging.getLogger("cubes.analytics")


def sum_valid_game_ids(games: Iterable[Game], limits: Optional[BagLimits] = None) -> int:
    """Sum the ids of the games that are possible with the given bag."""
    total = 0
    for game in games:
        if is_valid_game(game, limits):
            total += game.id
        else:
            logger.debug("Game %d exceeds the bag capacity", game.id)
    return total


def solve(lines: Iterable[str], limits: Optional[BagLimits] = None) -> int:
    """Parse every line, then sum the ids of the possible games."""
    return sum_valid_game_ids(parse_games(lines), limits)


def format_answer(total: int) -> str:
    return ANSWER_TEMPLATE.format(total=total)


def summarize_games(games: Sequence[Game], limits: Optional[BagLimits] = None) -> pd.DataFrame:
    """
    One row per game:
      - Game: the id
      - Red / Green / Blue: the largest single-round amount of that color
      - Valid: whether every round fits in the bag
    """
    rows: List[dict] = []
    for game in games:
        row = {"Game": game.id}
        for color in CubeColor:
            row[color.label] = game.peak(color)
        row["Valid"] = is_valid_game(game, limits)
        rows.append(row)

    columns = ["Game"] + [c.label for c in CubeColor] + ["Valid"]
    return pd.DataFrame(rows, columns=columns)
