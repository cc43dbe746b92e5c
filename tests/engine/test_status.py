import random
import unittest

import numpy as np

from ludo_grid.engine import Engine
from ludo_grid.exceptions import LudoError
from ludo_grid.team import end_coord, locked_positions, start_coord
from ludo_grid.types import CellKind, MoveOutcome, Team


def finish_one_token(engine, team):
    engine.unlock_token(team)
    coord = start_coord(team)
    for _ in range(9):
        coord = engine.move_token(team, coord, 6).coord
    return engine.move_token(team, coord, 2)


class TestGameStatus(unittest.TestCase):
    def test_inactive_team(self):
        engine = Engine([Team.RED])
        self.assertTrue(engine.is_finished(Team.GREEN))
        self.assertIsNone(engine.get_num_locked(Team.GREEN))
        self.assertEqual(engine.get_movable_tokens(Team.GREEN, 6), [])

    def test_fresh_engine(self):
        engine = Engine([Team.RED, Team.BLUE])
        self.assertEqual(engine.active_teams, (Team.RED, Team.BLUE))
        self.assertEqual(engine.current_team, Team.RED)
        self.assertEqual(engine.get_num_locked(Team.BLUE), 4)
        self.assertFalse(engine.is_finished(Team.RED))
        self.assertFalse(engine.is_game_finished())

    def test_set_current_team(self):
        engine = Engine([Team.RED, Team.BLUE])
        engine.set_current_team(Team.BLUE)
        self.assertEqual(engine.current_team, Team.BLUE)
        with self.assertRaises(ValueError):
            engine.set_current_team(Team.GREEN)

    def test_game_finishes_with_last_token(self):
        engine = Engine([Team.RED])
        for i in range(4):
            self.assertFalse(engine.is_game_finished())
            result = finish_one_token(engine, Team.RED)
            self.assertIs(result.outcome, MoveOutcome.FINISHED)
            self.assertEqual(engine.get_num_finished(Team.RED), i + 1)
        self.assertTrue(engine.is_finished(Team.RED))
        self.assertTrue(engine.is_game_finished())
        self.assertEqual(engine.get_num_locked(Team.RED), 0)
        engine.check_invariants()

    def test_game_waits_for_every_team(self):
        engine = Engine([Team.YELLOW, Team.BLUE])
        for _ in range(4):
            finish_one_token(engine, Team.YELLOW)
        self.assertTrue(engine.is_finished(Team.YELLOW))
        self.assertFalse(engine.is_game_finished())

    def test_board_tensor(self):
        engine = Engine([Team.RED, Team.GREEN])
        tensor = engine.build_tensor()
        self.assertEqual(tensor.shape, (5, 15, 15))
        self.assertEqual(tensor.dtype, np.float32)
        self.assertEqual(tensor[int(Team.RED)].sum(), 4)
        self.assertEqual(tensor[int(Team.YELLOW)].sum(), 0)
        self.assertEqual(tensor[4].sum(), 8)
        r, c = locked_positions(Team.GREEN)[0]
        self.assertEqual(tensor[int(Team.GREEN), r, c], 1.0)

        out = np.ones((5, 15, 15), dtype=np.float32)
        engine.build_tensor(out)
        self.assertEqual(out[int(Team.RED)].sum(), 4)
        with self.assertRaises(ValueError):
            engine.build_tensor(np.zeros((4, 15, 15), dtype=np.float32))


class TestInvariantsUnderRandomPlay(unittest.TestCase):
    """Drive the engine directly with random legal choices."""

    def play(self, seed, teams):
        rng = random.Random(seed)
        engine = Engine(teams)
        for _ in range(20000):
            if engine.is_game_finished():
                break
            for team in teams:
                if engine.is_finished(team):
                    continue
                engine.set_current_team(team)
                roll = rng.randint(1, 6)
                choices = [("move", c) for c in engine.get_movable_tokens(team, roll)]
                if roll == 6 and engine.get_num_locked(team):
                    choices.append(("unlock", None))
                if not choices:
                    continue
                kind, coord = rng.choice(choices)
                if kind == "unlock":
                    engine.unlock_token(team)
                else:
                    engine.move_token(team, coord, roll)
                engine.check_invariants()
                for t in teams:
                    self.assertEqual(
                        engine.get_num_locked(t)
                        + engine.get_num_moving(t)
                        + engine.get_num_finished(t),
                        4,
                    )
        return engine

    def test_four_teams(self):
        engine = self.play(7, list(Team))
        self.assertTrue(engine.is_game_finished())
        for team in Team:
            self.assertEqual(engine.get_num_finished(team), 4)
            cell = engine.get_board_snapshot()[end_coord(team)[0]][end_coord(team)[1]]
            self.assertEqual(cell.tokens, ())

    def test_two_teams(self):
        engine = self.play(11, [Team.GREEN, Team.BLUE])
        self.assertTrue(engine.is_game_finished())

    def test_illegal_requests_never_corrupt(self):
        rng = random.Random(3)
        engine = Engine([Team.RED, Team.YELLOW])
        engine.unlock_token(Team.RED)
        engine.unlock_token(Team.YELLOW)
        track = [
            cell.coord
            for row in engine.get_board_snapshot()
            for cell in row
            if cell.kind in (CellKind.DEFAULT, CellKind.SAFE_SPOT)
        ]
        for _ in range(300):
            team = rng.choice([Team.RED, Team.YELLOW])
            before = engine.get_board_snapshot()
            try:
                engine.move_token(team, rng.choice(track), rng.randint(1, 6))
            except LudoError:
                self.assertEqual(engine.get_board_snapshot(), before)
            engine.check_invariants()


if __name__ == "__main__":
    unittest.main()
