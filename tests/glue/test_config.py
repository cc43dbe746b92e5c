import unittest

from ludo_grid.config import Config, config


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(config.BOARD_SIZE, 15)
        self.assertEqual(config.TOKENS_PER_TEAM, 4)
        self.assertEqual(config.UNLOCK_ROLL, 6)
        self.assertEqual((config.DICE_MIN, config.DICE_MAX), (1, 6))

    def test_custom_values(self):
        cfg = Config(MAX_TURNS=10, MAX_CHOICE_ATTEMPTS=1)
        self.assertEqual(cfg.MAX_TURNS, 10)
        self.assertEqual(cfg.MAX_CHOICE_ATTEMPTS, 1)

    def test_rejects_unreachable_unlock_roll(self):
        with self.assertRaises(ValueError):
            Config(DICE_MAX=5)

    def test_rejects_non_positive_caps(self):
        with self.assertRaises(ValueError):
            Config(MAX_TURNS=0)
        with self.assertRaises(ValueError):
            Config(MAX_CHOICE_ATTEMPTS=0)


if __name__ == "__main__":
    unittest.main()
