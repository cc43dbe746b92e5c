"""
Turn driver for a hot-seat game on top of :class:`Engine`.

The driver owns seating order, dice and the extra-turn rules. It only talks
to the engine through its public surface, so any other front end can drive
the engine the same way.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence

from loguru import logger

from .config import config
from .dice import Dice
from .engine import Engine
from .exceptions import LudoError
from .types import Coord, MoveOutcome, MoveResult, Team


class OptionKind(Enum):
    UNLOCK = "unlock"
    MOVE = "move"


@dataclass(frozen=True, slots=True)
class TurnOption:
    kind: OptionKind
    coord: Optional[Coord] = None  # start coordinate for MOVE

    def describe(self) -> str:
        if self.kind is OptionKind.UNLOCK:
            return "Unlock a new token"
        return f"Move token at [{self.coord[0]}][{self.coord[1]}]"


@dataclass(frozen=True, slots=True)
class PlayerSeat:
    name: str
    team: Team


@dataclass(slots=True)
class TurnReport:
    seat: PlayerSeat
    roll: int
    options: List[TurnOption]
    choice: Optional[int] = None
    result: Optional[MoveResult] = None
    extra_turn: bool = False


# (seat, roll, options) -> index into options
Chooser = Callable[[PlayerSeat, int, Sequence[TurnOption]], int]

_BONUS_OUTCOMES = (MoveOutcome.ATTACKED, MoveOutcome.FINISHED, MoveOutcome.UNLOCKED)


def first_option_chooser(
    seat: PlayerSeat, roll: int, options: Sequence[TurnOption]
) -> int:
    return 0


def random_chooser(seed: int | None = None) -> Chooser:
    """Uniform pick among the legal options; used for unattended simulations."""
    rng = random.Random(seed)

    def choose(seat: PlayerSeat, roll: int, options: Sequence[TurnOption]) -> int:
        return rng.randrange(len(options))

    return choose


@dataclass(slots=True)
class LudoGame:
    players: List[PlayerSeat]
    dice: Optional[Dice] = None
    chooser: Optional[Chooser] = None
    engine: Engine = field(init=False)
    player_index: int = field(default=0, init=False)
    turns_played: int = field(default=0, init=False)
    finish_order: List[Team] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if not self.players:
            raise ValueError("No players entered")
        if self.dice is None:
            self.dice = Dice()
        if self.chooser is None:
            self.chooser = first_option_chooser
        self.engine = Engine([seat.team for seat in self.players])

    @property
    def current_seat(self) -> PlayerSeat:
        return self.players[self.player_index]

    def next_seat(self) -> Optional[PlayerSeat]:
        """Seat that will roll next, skipping teams that have finished.

        Returns ``None`` once the game is over.
        """
        if self.engine.is_game_finished():
            return None
        while self.engine.is_finished(self.current_seat.team):
            self._advance()
        return self.current_seat

    def turn_options(self, team: Team, roll: int) -> List[TurnOption]:
        options: List[TurnOption] = []
        if roll == config.UNLOCK_ROLL and self.engine.get_num_locked(team):
            options.append(TurnOption(OptionKind.UNLOCK))
        options.extend(
            TurnOption(OptionKind.MOVE, coord)
            for coord in self.engine.get_movable_tokens(team, roll)
        )
        return options

    def apply_option(self, team: Team, option: TurnOption, roll: int) -> MoveResult:
        if option.kind is OptionKind.UNLOCK:
            return self.engine.unlock_token(team)
        return self.engine.move_token(team, option.coord, roll)

    def _advance(self) -> None:
        self.player_index = (self.player_index + 1) % len(self.players)

    def play_turn(self) -> Optional[TurnReport]:
        """Play one turn for the seat whose turn it is.

        Returns ``None`` once the game is over.
        """
        seat = self.next_seat()
        if seat is None:
            return None
        self.engine.set_current_team(seat.team)
        roll = self.dice.roll()
        options = self.turn_options(seat.team, roll)
        report = TurnReport(seat=seat, roll=roll, options=options)
        report.extra_turn = roll == config.UNLOCK_ROLL
        self.turns_played += 1
        logger.info(f"{seat.name} ({seat.team.name}) rolled {roll}")

        if not options:
            logger.info(f"{seat.name} has no possible moves")
        else:
            for _ in range(config.MAX_CHOICE_ATTEMPTS):
                choice = self.chooser(seat, roll, options)
                if not 0 <= choice < len(options):
                    logger.warning(f"Invalid choice {choice} from {seat.name}")
                    continue
                try:
                    result = self.apply_option(seat.team, options[choice], roll)
                except LudoError as e:
                    logger.warning(f"Rejected choice {choice} from {seat.name}: {e}")
                    continue
                report.choice = choice
                report.result = result
                report.extra_turn = report.extra_turn or result.outcome in _BONUS_OUTCOMES
                logger.info(f"{seat.name}: {result.outcome.value} {result.coord or ''}")
                break
            else:
                logger.warning(f"{seat.name} forfeits the turn after repeated bad choices")

        if self.engine.is_finished(seat.team) and seat.team not in self.finish_order:
            self.finish_order.append(seat.team)
            logger.info(f"{seat.name} has finished in place {len(self.finish_order)}")
            report.extra_turn = False

        if not report.extra_turn:
            self._advance()
        return report

    def play(self, max_turns: int | None = None) -> List[Team]:
        """Play until every team finishes or ``max_turns`` is reached."""
        limit = config.MAX_TURNS if max_turns is None else max_turns
        while self.turns_played < limit and self.play_turn() is not None:
            pass
        if not self.engine.is_game_finished():
            logger.warning(f"Stopped after {limit} turns without a result")
        return list(self.finish_order)
