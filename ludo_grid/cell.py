from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .types import CellKind, Coord, Team


@dataclass(slots=True)
class Cell:
    """One square of the grid.

    ``kind``/``owner`` are fixed once the board is built; ``tokens`` holds the
    ids of the tokens currently standing here, in arrival order.
    """

    coord: Coord
    kind: CellKind = CellKind.UNUSABLE
    owner: Optional[Team] = None
    tokens: List[int] = field(default_factory=list)

    def is_usable(self) -> bool:
        return self.kind is not CellKind.UNUSABLE

    def is_safe(self) -> bool:
        return self.kind is CellKind.SAFE_SPOT

    def add(self, token_id: int) -> None:
        self.tokens.append(token_id)

    def remove(self, token_id: int) -> None:
        self.tokens.remove(token_id)
