from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple

Coord = Tuple[int, int]


class Team(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3

    @property
    def letter(self) -> str:
        return self.name[0]


class CellKind(Enum):
    DEFAULT = "default"
    SAFE_SPOT = "safe_spot"
    LOCKED_POSITION = "locked_position"  # owned by a team
    HOME_LANE = "home_lane"  # owned by a team
    UNUSABLE = "unusable"


class MoveOutcome(Enum):
    NORMAL_MOVE = "normal_move"
    ATTACKED = "attacked"
    UNLOCKED = "unlocked"
    FINISHED = "finished"


@dataclass(frozen=True, slots=True)
class MoveResult:
    outcome: MoveOutcome
    coord: Optional[Coord] = None  # set for NORMAL_MOVE and ATTACKED
    captured: Tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def normal_move(cls, coord: Coord) -> "MoveResult":
        return cls(MoveOutcome.NORMAL_MOVE, coord)

    @classmethod
    def attacked(cls, coord: Coord, captured: Tuple[int, ...]) -> "MoveResult":
        return cls(MoveOutcome.ATTACKED, coord, captured)

    @classmethod
    def unlocked(cls) -> "MoveResult":
        return cls(MoveOutcome.UNLOCKED)

    @classmethod
    def finished(cls) -> "MoveResult":
        return cls(MoveOutcome.FINISHED)


@dataclass(frozen=True, slots=True)
class TokenView:
    token_id: int
    team: Team
    coord: Coord


@dataclass(frozen=True, slots=True)
class CellView:
    coord: Coord
    kind: CellKind
    owner: Optional[Team]
    tokens: Tuple[TokenView, ...]

    @property
    def is_empty(self) -> bool:
        return not self.tokens
