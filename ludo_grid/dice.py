from __future__ import annotations

import random
from dataclasses import dataclass, field

from .config import config


@dataclass(slots=True)
class Dice:
    seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)
