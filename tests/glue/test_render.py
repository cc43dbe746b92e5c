import unittest

from ludo_grid.engine import Engine
from ludo_grid.game import OptionKind, TurnOption
from ludo_grid.render import _cell_glyph, render_board, render_options, render_summary
from ludo_grid.types import CellKind, CellView, Team, TokenView


def glyph(text, row, col):
    line = text.splitlines()[row]
    return line[col * 3 : col * 3 + 3].strip()


class TestRenderBoard(unittest.TestCase):
    def test_fresh_board(self):
        text = render_board(Engine([Team.RED, Team.GREEN]))
        self.assertEqual(len(text.splitlines()), 15)
        self.assertEqual(glyph(text, 13, 1), "R")
        self.assertEqual(glyph(text, 1, 1), "G")
        self.assertEqual(glyph(text, 2, 6), "*")
        self.assertEqual(glyph(text, 0, 6), ".")
        self.assertEqual(glyph(text, 10, 7), "r")
        self.assertEqual(glyph(text, 7, 7), "")
        # Yellow is not playing: its pen is blank
        self.assertEqual(glyph(text, 1, 10), "")

    def test_stack_and_shared_safe_spot(self):
        engine = Engine([Team.RED, Team.GREEN])
        engine.unlock_token(Team.RED)
        engine.unlock_token(Team.RED)
        self.assertEqual(glyph(render_board(engine), 13, 6), "R2")

        engine.move_token(Team.RED, (13, 6), 6)
        engine.move_token(Team.RED, (8, 4), 6)
        engine.unlock_token(Team.GREEN)
        engine.move_token(Team.RED, (6, 0), 1)
        self.assertEqual(glyph(render_board(engine), 6, 1), "GR")

    def test_crowded_safe_spot_fits_cell(self):
        def crowd(teams):
            tokens = tuple(TokenView(i, team, (6, 1)) for i, team in enumerate(teams))
            return _cell_glyph(CellView((6, 1), CellKind.SAFE_SPOT, None, tokens))

        self.assertEqual(crowd([Team.YELLOW, Team.RED, Team.GREEN]), "GRY")
        self.assertEqual(crowd(list(Team)), "BG+")

    def test_finished_team_marker(self):
        engine = Engine([Team.RED])
        for _ in range(4):
            engine.unlock_token(Team.RED)
            coord = (13, 6)
            for _ in range(9):
                coord = engine.move_token(Team.RED, coord, 6).coord
            engine.move_token(Team.RED, coord, 2)
        self.assertEqual(glyph(render_board(engine), 8, 7), "#")

    def test_summary(self):
        engine = Engine([Team.RED, Team.GREEN])
        engine.unlock_token(Team.RED)
        self.assertEqual(
            render_summary(engine).splitlines(),
            [
                "Red: 3 locked, 1 moving (1 safe), 0 home",
                "Green: 4 locked, 0 moving (0 safe), 0 home",
            ],
        )
        engine.move_token(Team.RED, (13, 6), 4)
        self.assertEqual(
            render_summary(engine).splitlines()[0],
            "Red: 3 locked, 1 moving (0 safe), 0 home",
        )

    def test_options(self):
        text = render_options(
            [TurnOption(OptionKind.UNLOCK), TurnOption(OptionKind.MOVE, (9, 6))]
        )
        self.assertEqual(
            text.splitlines(), ["0. Unlock a new token", "1. Move token at [9][6]"]
        )


if __name__ == "__main__":
    unittest.main()
