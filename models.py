"""
Data models for games, rounds and cube withdrawals.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from config import CAPACITIES


class CubeColor(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class CubeCount:
    """A single withdrawal: how many cubes of one color were shown."""
    color: CubeColor
    amount: int


@dataclass(frozen=True)
class Round:
    """One instant's draw from the bag, in the order the counts were written."""
    counts: Tuple[CubeCount, ...]


@dataclass(frozen=True)
class Game:
    id: int
    rounds: Tuple[Round, ...]

    def peak(self, color: CubeColor) -> int:
        """Largest single withdrawal of `color` in the game (0 if never drawn)."""
        return max((c.amount for r in self.rounds for c in r.counts if c.color is color), default=0)


@dataclass(frozen=True)
class BagLimits:
    """Per-color capacity of the bag; a withdrawal may never exceed it."""
    capacities: Mapping[CubeColor, int]

    def __post_init__(self):
        object.__setattr__(self, "capacities", MappingProxyType(dict(self.capacities)))

    @classmethod
    def default(cls) -> "BagLimits":
        return cls.from_names(CAPACITIES)

    @classmethod
    def from_names(cls, capacities: Mapping[str, int]) -> "BagLimits":
        """Build limits from a {"red": 12, ...} style mapping."""
        resolved: Dict[CubeColor, int] = {CubeColor(name.lower()): cap for name, cap in capacities.items()}
        missing = [c.value for c in CubeColor if c not in resolved]
        if missing:
            raise ValueError(f"no capacity configured for: {', '.join(missing)}")
        return cls(capacities=resolved)

    def __getitem__(self, color: CubeColor) -> int:
        return self.capacities[color]
