from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell
from .config import config
from .exceptions import InvariantViolation
from .team import home_lane, home_lane_turn, locked_positions
from .token import Token
from .types import CellKind, CellView, Coord, Team

SAFE_SPOTS: Tuple[Coord, ...] = (
    (1, 8),
    (2, 6),
    (6, 1),
    (6, 12),
    (8, 2),
    (8, 13),
    (12, 8),
    (13, 6),
)

# (current, next): bends around the four outer corners of the cross and the
# four inner diagonals next to the centre square
_TURNS: Dict[Coord, Coord] = {
    # Outer turns
    (0, 6): (0, 7),
    (0, 8): (1, 8),
    (6, 0): (6, 1),
    (6, 14): (7, 14),
    (8, 0): (7, 0),
    (8, 14): (8, 13),
    (14, 6): (13, 6),
    (14, 8): (14, 7),
    # Inner turns
    (9, 6): (8, 5),
    (6, 5): (5, 6),
    (8, 9): (9, 8),
    (5, 8): (6, 9),
}


def in_bounds(coord: Coord) -> bool:
    row, col = coord
    return 0 <= row < config.BOARD_SIZE and 0 <= col < config.BOARD_SIZE


def next_coord(team: Team, coord: Coord) -> Coord:
    """Return the coordinate a token of ``team`` occupies after one step.

    Pure geometry: the result may be off the grid or on an unusable square,
    rejecting it is the caller's job. A coordinate that matches none of the
    track rules means the caller handed in something that is not on the
    track at all.
    """
    turn = _TURNS.get(coord)
    if turn is not None:
        return turn

    lane_from, lane_to = home_lane_turn(team)
    if coord == lane_from:
        return lane_to

    row, col = coord
    if row == 6:
        return (row, col + 1)
    if row == 7:
        if col == 0:
            return (row - 1, col)
        if col < 6:
            return (row, col + 1)
        if col == 14:
            return (row + 1, col)
        if col > 8:
            return (row, col - 1)
    elif row == 8:
        return (row, col - 1)

    if col == 6:
        return (row - 1, col)
    if col == 7:
        if row == 0:
            return (row, col + 1)
        if row < 6:
            return (row + 1, col)
        if row == 14:
            return (row, col - 1)
        if row > 8:
            return (row - 1, col)
    elif col == 8:
        return (row + 1, col)

    raise InvariantViolation(f"No track rule for coordinate {coord}")


def _build_cells(active_teams: Sequence[Team]) -> List[List[Cell]]:
    size = config.BOARD_SIZE
    cells = [[Cell(coord=(r, c)) for c in range(size)] for r in range(size)]

    # Order matters: each pass overrides the kinds set by earlier ones
    for r in range(6, 9):
        for c in range(size):
            cells[r][c].kind = CellKind.DEFAULT
            cells[c][r].kind = CellKind.DEFAULT

    for r in range(6, 9):
        for c in range(6, 9):
            cells[r][c].kind = CellKind.UNUSABLE

    for r, c in SAFE_SPOTS:
        cells[r][c].kind = CellKind.SAFE_SPOT

    for team in active_teams:
        for r, c in locked_positions(team):
            cells[r][c].kind = CellKind.LOCKED_POSITION
            cells[r][c].owner = team

    for team in Team:
        for r, c in home_lane(team):
            cells[r][c].kind = CellKind.HOME_LANE
            cells[r][c].owner = team

    return cells


@dataclass(slots=True)
class Board:
    """Owns the grid and the token arena (no rule logic).

    Cells reference tokens by id only; ``tokens[i].token_id == i`` always.
    """

    active_teams: Sequence[Team]
    cells: List[List[Cell]] = field(init=False)
    tokens: List[Token] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.cells = _build_cells(self.active_teams)

    def cell(self, coord: Coord) -> Cell:
        if not in_bounds(coord):
            raise InvariantViolation(f"Coordinate {coord} is off the board")
        row, col = coord
        return self.cells[row][col]

    def kind_at(self, coord: Coord) -> CellKind:
        return self.cell(coord).kind

    def iter_cells(self) -> Iterable[Cell]:
        for row in self.cells:
            yield from row

    # --- Token arena ---
    def spawn(self, team: Team, coord: Coord) -> Token:
        token = Token(token_id=len(self.tokens), team=team, coord=coord)
        self.tokens.append(token)
        self.cell(coord).add(token.token_id)
        return token

    def token(self, token_id: int) -> Token:
        return self.tokens[token_id]

    def occupants(self, coord: Coord) -> List[Token]:
        return [self.tokens[tid] for tid in self.cell(coord).tokens]

    def find_token(self, team: Team, coord: Coord) -> Optional[Token]:
        for tid in self.cell(coord).tokens:
            if self.tokens[tid].team == team:
                return self.tokens[tid]
        return None

    def first_empty_pen(
        self, team: Team, reserved: Iterable[Coord] = ()
    ) -> Optional[Coord]:
        taken = set(reserved)
        for pen in locked_positions(team):
            if pen not in taken and not self.cell(pen).tokens:
                return pen
        return None

    # --- Read-only views ---
    def snapshot(self) -> Tuple[Tuple[CellView, ...], ...]:
        return tuple(
            tuple(
                CellView(
                    coord=cell.coord,
                    kind=cell.kind,
                    owner=cell.owner,
                    tokens=tuple(self.tokens[tid].view() for tid in cell.tokens),
                )
                for cell in row
            )
            for row in self.cells
        )

    def build_tensor(self, out: np.ndarray | None = None) -> np.ndarray:
        """Build a (5, BOARD_SIZE, BOARD_SIZE) occupancy tensor.

        Channels:
        0-3: token count per team, in Team order
        4: safe spots (fixed)
        """
        shape = (5, config.BOARD_SIZE, config.BOARD_SIZE)
        if out is not None:
            if out.shape != shape:
                raise ValueError(f"Expected board tensor of shape {shape}")
            board = out
        else:
            board = np.zeros(shape, dtype=np.float32)

        board.fill(0.0)
        for cell in self.iter_cells():
            row, col = cell.coord
            for tid in cell.tokens:
                board[int(self.tokens[tid].team), row, col] += 1.0
            if cell.is_safe():
                board[4, row, col] = 1.0
        return board
