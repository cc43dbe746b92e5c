"""
Plain-text rendering of the engine's board snapshot.

Each cell is three characters wide. Occupied cells show the team letter,
followed by the count when tokens are stacked.
"""

from typing import List, Sequence

from .engine import Engine
from .team import end_coord
from .types import CellKind, CellView

_EMPTY_GLYPHS = {
    CellKind.DEFAULT: ".",
    CellKind.SAFE_SPOT: "*",
    CellKind.UNUSABLE: " ",
}

FINISHED_GLYPH = "#"
CELL_WIDTH = 3


def _cell_glyph(cell: CellView) -> str:
    if cell.tokens:
        glyph = cell.tokens[0].team.letter
        teams = {t.team for t in cell.tokens}
        if len(teams) > 1:
            # Only on safe spots: show each team once
            glyph = "".join(sorted(t.letter for t in teams))
            if len(glyph) > CELL_WIDTH:
                glyph = glyph[: CELL_WIDTH - 1] + "+"
        elif len(cell.tokens) > 1:
            glyph += str(len(cell.tokens))
        return glyph
    if cell.owner is not None:
        return cell.owner.letter.lower()
    return _EMPTY_GLYPHS[cell.kind]


def render_board(engine: Engine) -> str:
    snapshot = engine.get_board_snapshot()
    finished_ends = {
        end_coord(team) for team in engine.active_teams if engine.is_finished(team)
    }
    lines: List[str] = []
    for row in snapshot:
        glyphs = []
        for cell in row:
            glyph = FINISHED_GLYPH if cell.coord in finished_ends else _cell_glyph(cell)
            glyphs.append(glyph.center(CELL_WIDTH))
        lines.append("".join(glyphs).rstrip())
    return "\n".join(lines)


def render_summary(engine: Engine) -> str:
    """One line per active team: tokens in the pen, on the track, and home.

    Track counts come from the occupancy tensor, so tokens resting on safe
    spots can be reported as well.
    """
    tensor = engine.build_tensor()
    safe = tensor[4]
    lines: List[str] = []
    for team in engine.active_teams:
        locked = engine.get_num_locked(team)
        on_track = int(tensor[int(team)].sum()) - locked
        on_safe = int((tensor[int(team)] * safe).sum())
        lines.append(
            f"{team.name.title()}: {locked} locked, {on_track} moving "
            f"({on_safe} safe), {engine.get_num_finished(team)} home"
        )
    return "\n".join(lines)


def render_options(options: Sequence) -> str:
    return "\n".join(f"{i}. {opt.describe()}" for i, opt in enumerate(options))
