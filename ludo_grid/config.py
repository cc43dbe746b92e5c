import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    BOARD_SIZE: int = 15
    TOKENS_PER_TEAM: int = 4
    UNLOCK_ROLL: int = 6
    DICE_MIN: int = 1
    DICE_MAX: int = 6

    # --- Runtime knobs ---
    MAX_TURNS: int = int(os.getenv("LUDO_MAX_TURNS", 5000))
    MAX_CHOICE_ATTEMPTS: int = int(os.getenv("LUDO_MAX_CHOICE_ATTEMPTS", 3))
    # Re-validate the whole board after every mutation (slow, for debugging)
    STRICT_INVARIANTS: bool = bool(int(os.getenv("LUDO_STRICT_INVARIANTS", 0)))
    LOG_LEVEL: str = os.getenv("LUDO_LOG_LEVEL", "WARNING")

    def __post_init__(self):
        if not 1 <= self.DICE_MIN <= self.UNLOCK_ROLL <= self.DICE_MAX:
            raise ValueError("UNLOCK_ROLL must lie within DICE_MIN..DICE_MAX")
        if self.MAX_TURNS < 1:
            raise ValueError("MAX_TURNS must be positive")
        if self.MAX_CHOICE_ATTEMPTS < 1:
            raise ValueError("MAX_CHOICE_ATTEMPTS must be positive")


config = Config()
