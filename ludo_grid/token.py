from dataclasses import dataclass

from .team import end_coord
from .types import Coord, Team, TokenView


@dataclass(slots=True)
class Token:
    """Lightweight token model. Holds state only.

    Which collections reference the token (pen list, moving list, cell
    occupants) is the engine's business; the token only knows where it is.
    """

    token_id: int  # index into the engine's token arena
    team: Team
    coord: Coord

    def move_to(self, coord: Coord) -> None:
        self.coord = coord

    def is_at_end(self) -> bool:
        return self.coord == end_coord(self.team)

    def view(self) -> TokenView:
        return TokenView(token_id=self.token_id, team=self.team, coord=self.coord)
