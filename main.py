"""
Hot-seat Ludo on the 15x15 cross board.

Run with player names (empty string = seat not playing), or ``--simulate``
to let every seat pick uniformly among its legal options.
"""

import argparse
import sys
from typing import Sequence

from loguru import logger

from ludo_grid import LudoGame, PlayerSeat, Team, config, random_chooser
from ludo_grid.dice import Dice
from ludo_grid.game import TurnOption
from ludo_grid.render import render_board, render_options, render_summary


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Ludo in the terminal")
    parser.add_argument(
        "--players",
        nargs="+",
        default=["Red", "Green", "Yellow", "Blue"],
        help="Names for Red, Green, Yellow, Blue (use '' to leave a seat empty)",
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Pick moves at random instead of prompting",
    )
    parser.add_argument("--seed", type=int, default=None, help="Dice/chooser seed")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.MAX_TURNS,
        help="Stop after this many turns",
    )
    return parser.parse_args()


def build_seats(names: Sequence[str]) -> list[PlayerSeat]:
    if len(names) > len(Team):
        raise SystemExit(f"At most {len(Team)} players can sit at the board")
    return [
        PlayerSeat(name=name.strip(), team=team)
        for name, team in zip(names, Team)
        if name.strip()
    ]


def prompt_chooser(seat: PlayerSeat, roll: int, options: Sequence[TurnOption]) -> int:
    print(f"{seat.name} rolled {roll}. Choose from these options:")
    print(render_options(options))
    raw = input("> ").strip()
    try:
        return int(raw)
    except ValueError:
        print(f"Not an option: {raw!r}")
        return -1


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=config.LOG_LEVEL)

    seats = build_seats(args.players)
    if not seats:
        raise SystemExit("No players entered")

    chooser = random_chooser(args.seed) if args.simulate else prompt_chooser
    game = LudoGame(players=seats, dice=Dice(seed=args.seed), chooser=chooser)

    while game.turns_played < args.max_turns:
        seat = game.next_seat()
        if seat is None:
            break
        if not args.simulate:
            print(render_board(game.engine))
            print(render_summary(game.engine))
            input(f"{seat.name}, press Enter to roll: ")
        report = game.play_turn()
        if report is None:
            break
        if not report.options:
            print(f"{report.seat.name} rolled {report.roll}: no possible moves")
        elif report.result is not None and args.simulate:
            print(f"{report.seat.name} rolled {report.roll}: {report.result.outcome.value}")

    print(render_board(game.engine))
    print(render_summary(game.engine))
    if game.engine.is_game_finished():
        print("--- GAME OVER ---")
    for place, team in enumerate(game.finish_order, start=1):
        name = next(s.name for s in seats if s.team == team)
        print(f"{place}. {name} ({team.name})")


if __name__ == "__main__":
    main()
