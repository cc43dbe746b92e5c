"""
Rules engine for a four-player, cross-shaped Ludo board.
"""

from .board import Board, next_coord
from .config import config
from .dice import Dice
from .engine import Engine
from .exceptions import (
    IllegalMoveError,
    InvariantViolation,
    LudoError,
    NoLockedTokenError,
    TokenNotFoundError,
)
from .game import LudoGame, PlayerSeat, TurnOption, TurnReport, random_chooser
from .types import CellKind, CellView, Coord, MoveOutcome, MoveResult, Team, TokenView

__all__ = [
    "Board",
    "CellKind",
    "CellView",
    "Coord",
    "config",
    "Dice",
    "Engine",
    "IllegalMoveError",
    "InvariantViolation",
    "LudoError",
    "LudoGame",
    "MoveOutcome",
    "MoveResult",
    "next_coord",
    "NoLockedTokenError",
    "PlayerSeat",
    "random_chooser",
    "Team",
    "TokenNotFoundError",
    "TokenView",
    "TurnOption",
    "TurnReport",
]
