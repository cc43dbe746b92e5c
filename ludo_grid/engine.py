from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
from loguru import logger

from .board import Board, in_bounds, next_coord
from .config import config
from .exceptions import (
    IllegalMoveError,
    InvariantViolation,
    NoLockedTokenError,
    TokenNotFoundError,
)
from .team import end_coord, locked_positions, start_coord
from .types import CellKind, CellView, Coord, MoveOutcome, MoveResult, Team, TokenView


class Engine:
    """Rules engine for the cross-shaped Ludo board.

    All mutation goes through :meth:`move_token` (``unlock_token`` is a thin
    wrapper around it). Every token id is held by exactly one of its team's
    locked/moving lists and by the cell at its coordinate, or by neither once
    it has finished.
    """

    def __init__(self, active_teams: Iterable[Team]) -> None:
        teams = [Team(t) for t in active_teams]
        if not teams:
            raise InvariantViolation("No active teams to play")
        if len(set(teams)) != len(teams):
            raise InvariantViolation(f"Duplicate active teams: {teams}")

        self._active_teams: Tuple[Team, ...] = tuple(teams)
        self.board = Board(active_teams=self._active_teams)
        self._locked: Dict[Team, List[int]] = {}
        self._moving: Dict[Team, List[int]] = {}
        self._finished: Dict[Team, int] = {}
        self._current_team: Team = teams[0]

        for team in self._active_teams:
            self._locked[team] = [
                self.board.spawn(team, pen).token_id for pen in locked_positions(team)
            ]
            self._moving[team] = []
            self._finished[team] = 0

        logger.debug(f"Engine ready for teams {[t.name for t in self._active_teams]}")

    # --- Status ---
    @property
    def active_teams(self) -> Tuple[Team, ...]:
        return self._active_teams

    @property
    def current_team(self) -> Team:
        return self._current_team

    def set_current_team(self, team: Team) -> None:
        team = Team(team)
        if team not in self._active_teams:
            raise ValueError(f"{team.name} is not playing")
        self._current_team = team

    def is_active(self, team: Team) -> bool:
        return team in self._active_teams

    def is_finished(self, team: Team) -> bool:
        """Always ``True`` for a team that is not playing."""
        if not self.is_active(team):
            return True
        return not self._locked[team] and not self._moving[team]

    def is_game_finished(self) -> bool:
        return all(self.is_finished(team) for team in self._active_teams)

    def get_num_locked(self, team: Team) -> Optional[int]:
        """Pen count, or ``None`` for a team that is not playing."""
        if not self.is_active(team):
            return None
        return len(self._locked[team])

    def get_num_moving(self, team: Team) -> Optional[int]:
        if not self.is_active(team):
            return None
        return len(self._moving[team])

    def get_num_finished(self, team: Team) -> Optional[int]:
        if not self.is_active(team):
            return None
        return self._finished[team]

    # --- Read-only views ---
    def get_board_snapshot(self) -> Tuple[Tuple[CellView, ...], ...]:
        return self.board.snapshot()

    def token_view(self, token_id: int) -> TokenView:
        return self.board.token(token_id).view()

    def build_tensor(self, out: np.ndarray | None = None) -> np.ndarray:
        return self.board.build_tensor(out)

    # --- Rules: legality ---
    def is_move_possible(
        self, team: Team, start: Coord, distance: int
    ) -> Optional[Coord]:
        """Return the destination of a ``distance`` step move, or ``None``.

        Does not check that a token of ``team`` actually stands on ``start``,
        so it can answer what-if questions; :meth:`move_token` does that.
        """
        if not in_bounds(start) or self.board.kind_at(start) is CellKind.UNUSABLE:
            raise InvariantViolation(f"Invalid start coordinate: {start}")

        if not config.DICE_MIN <= distance <= config.DICE_MAX:
            return None

        if start in locked_positions(team):
            return start_coord(team) if distance == config.UNLOCK_ROLL else None

        end = end_coord(team)
        coord = start
        for _ in range(distance):
            coord = next_coord(team, coord)
            if not in_bounds(coord):
                return None
            if self.board.kind_at(coord) is CellKind.UNUSABLE and coord != end:
                return None
        return coord

    def get_movable_tokens(self, team: Team, distance: int) -> List[Coord]:
        """Distinct coordinates of moving tokens that can travel ``distance``.

        Unlocking is not included; check :meth:`get_num_locked` for that.
        """
        coords: List[Coord] = []
        for tid in self._moving.get(team, ()):
            coord = self.board.token(tid).coord
            if coord in coords:
                continue
            if self.is_move_possible(team, coord, distance) is not None:
                coords.append(coord)
        return coords

    # --- Mutations ---
    def unlock_token(self, team: Team) -> MoveResult:
        team = Team(team)
        if not self.is_active(team):
            raise NoLockedTokenError(f"{team.name} is not playing")

        pen = next(
            (p for p in locked_positions(team) if self.board.cell(p).tokens), None
        )
        if pen is None:
            raise NoLockedTokenError(f"No locked token for {team.name}")

        result = self.move_token(team, pen, config.UNLOCK_ROLL)
        if result.outcome is not MoveOutcome.UNLOCKED:
            raise InvariantViolation(
                f"Unlock from {pen} for {team.name} produced {result.outcome.value}"
            )
        return result

    def move_token(self, team: Team, start: Coord, distance: int) -> MoveResult:
        """Move one token of ``team`` from ``start`` by ``distance`` steps.

        Raises ``IllegalMoveError``/``TokenNotFoundError`` without touching
        the board when the move cannot be made.
        """
        team = Team(team)
        final = self.is_move_possible(team, start, distance)
        if final is None:
            logger.warning(
                f"Illegal move for {team.name} from {start} by {distance}"
            )
            raise IllegalMoveError(
                f"{team.name} cannot move {distance} from {start}"
            )

        token = self.board.find_token(team, start)
        if token is None:
            logger.warning(f"No {team.name} token at {start}")
            raise TokenNotFoundError(f"No {team.name} token at {start}")

        dest = self.board.cell(final)
        is_unlock = final == start_coord(team)
        is_finish = final == end_coord(team)
        is_capture = not dest.is_safe() and any(
            t.team != team for t in self.board.occupants(final)
        )

        # Plan the captures before mutating anything so a missing pen slot
        # fails with the board untouched.
        captures: List[Tuple[int, Coord]] = []
        if is_capture and not is_unlock and not is_finish:
            reserved: Dict[Team, List[Coord]] = {}
            for tid in dest.tokens:
                victim = self.board.token(tid)
                if victim.team == team:
                    continue
                taken = reserved.setdefault(victim.team, [])
                pen = self.board.first_empty_pen(victim.team, reserved=taken)
                if pen is None or tid not in self._moving[victim.team]:
                    raise InvariantViolation(
                        f"Captured {victim.team.name} token {tid} has nowhere to go"
                    )
                taken.append(pen)
                captures.append((tid, pen))

        token.move_to(final)
        self.board.cell(start).remove(token.token_id)

        if is_unlock:
            self._locked[team].remove(token.token_id)
            self._moving[team].append(token.token_id)
            dest.add(token.token_id)
            result = MoveResult.unlocked()
        elif is_finish:
            self._moving[team].remove(token.token_id)
            self._finished[team] += 1
            result = MoveResult.finished()
        else:
            dest.add(token.token_id)
            for tid, pen in captures:
                victim = self.board.token(tid)
                dest.remove(tid)
                victim.move_to(pen)
                self._moving[victim.team].remove(tid)
                self._locked[victim.team].append(tid)
                self.board.cell(pen).add(tid)
                logger.debug(f"{team.name} captured {victim.team.name} token {tid} at {final}")
            if captures:
                result = MoveResult.attacked(final, tuple(tid for tid, _ in captures))
            else:
                result = MoveResult.normal_move(final)

        logger.debug(
            f"{team.name} token {token.token_id}: {start} -> {final} ({result.outcome.value})"
        )
        if config.STRICT_INVARIANTS:
            self.check_invariants()
        return result

    # --- Diagnostics ---
    def check_invariants(self) -> None:
        """Raise ``InvariantViolation`` on the first inconsistency found."""
        seen_in_cells: Dict[int, Coord] = {}
        for cell in self.board.iter_cells():
            teams = set()
            for tid in cell.tokens:
                if tid in seen_in_cells:
                    raise InvariantViolation(
                        f"Token {tid} is in cells {seen_in_cells[tid]} and {cell.coord}"
                    )
                seen_in_cells[tid] = cell.coord
                token = self.board.token(tid)
                if token.coord != cell.coord:
                    raise InvariantViolation(
                        f"Token {tid} thinks it is at {token.coord}, found at {cell.coord}"
                    )
                teams.add(token.team)
            if len(teams) > 1 and not cell.is_safe():
                raise InvariantViolation(f"Teams {teams} share unsafe cell {cell.coord}")
            if cell.owner is not None and teams - {cell.owner}:
                raise InvariantViolation(f"Foreign token in private cell {cell.coord}")

        for team in self._active_teams:
            locked, moving = self._locked[team], self._moving[team]
            if set(locked) & set(moving):
                raise InvariantViolation(f"{team.name} token both locked and moving")
            if len(locked) + len(moving) + self._finished[team] != config.TOKENS_PER_TEAM:
                raise InvariantViolation(f"{team.name} token count is off")
            for tid in locked:
                if self.board.token(tid).coord not in locked_positions(team):
                    raise InvariantViolation(f"Locked token {tid} is outside its pen")

        tracked = {tid for ids in self._locked.values() for tid in ids}
        tracked |= {tid for ids in self._moving.values() for tid in ids}
        for token in self.board.tokens:
            in_cell = token.token_id in seen_in_cells
            if (token.token_id in tracked) != in_cell:
                raise InvariantViolation(f"Token {token.token_id} is half tracked")
            if not in_cell and not token.is_at_end():
                raise InvariantViolation(
                    f"Untracked token {token.token_id} is not at its end coordinate"
                )
