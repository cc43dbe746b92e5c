"""
Static geometry for each team on the 15x15 cross board.

Every function here is a pure lookup; nothing depends on engine state.
"""

from typing import Dict, Tuple

from .types import Coord, Team

START_COORDS: Dict[Team, Coord] = {
    Team.RED: (13, 6),
    Team.GREEN: (6, 1),
    Team.YELLOW: (1, 8),
    Team.BLUE: (8, 13),
}

END_COORDS: Dict[Team, Coord] = {
    Team.RED: (8, 7),
    Team.GREEN: (7, 6),
    Team.YELLOW: (6, 7),
    Team.BLUE: (7, 8),
}

# Order decides which pen token unlocks first and which pen a captured token returns to
LOCKED_POSITIONS: Dict[Team, Tuple[Coord, Coord, Coord, Coord]] = {
    Team.RED: ((10, 1), (10, 4), (13, 1), (13, 4)),
    Team.GREEN: ((1, 1), (1, 4), (4, 1), (4, 4)),
    Team.YELLOW: ((1, 10), (1, 13), (4, 10), (4, 13)),
    Team.BLUE: ((10, 10), (10, 13), (13, 10), (13, 13)),
}

# (from, to): where the outer track diverts into the team's private lane
HOME_LANE_TURNS: Dict[Team, Tuple[Coord, Coord]] = {
    Team.RED: ((14, 7), (13, 7)),
    Team.GREEN: ((7, 0), (7, 1)),
    Team.YELLOW: ((0, 7), (1, 7)),
    Team.BLUE: ((7, 14), (7, 13)),
}

HOME_LANES: Dict[Team, Tuple[Coord, ...]] = {
    Team.RED: tuple((r, 7) for r in range(9, 14)),
    Team.GREEN: tuple((7, c) for c in range(1, 6)),
    Team.YELLOW: tuple((r, 7) for r in range(1, 6)),
    Team.BLUE: tuple((7, c) for c in range(9, 14)),
}


def start_coord(team: Team) -> Coord:
    return START_COORDS[team]


def end_coord(team: Team) -> Coord:
    return END_COORDS[team]


def locked_positions(team: Team) -> Tuple[Coord, Coord, Coord, Coord]:
    return LOCKED_POSITIONS[team]


def home_lane_turn(team: Team) -> Tuple[Coord, Coord]:
    return HOME_LANE_TURNS[team]


def home_lane(team: Team) -> Tuple[Coord, ...]:
    return HOME_LANES[team]
