"""Command-line entry point: play in the terminal or serve the web frontend."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from chrust.board import Board
from chrust.game import ChessGame
from chrust.pieces import Color
from chrust.players import AIPlayer, HumanPlayer
from chrust.server import run_frontend
from chrust.settings import ProgramState, VizType, parse_args


def _build_game(program_state: ProgramState) -> ChessGame:
    return ChessGame(
        HumanPlayer(name="kasparov", color=Color.WHITE),
        AIPlayer(name="rusty", color=Color.BLACK),
        Board.load("game_start"),
        program_state.human_plays,
        program_state.tick_speed,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; returns the process exit status."""
    try:
        program_state = parse_args(argv)
        game = _build_game(program_state)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if program_state.viz_type is VizType.TERM:
        winner = game.start_game()
        print(f"Winner: {winner}")
    else:
        run_frontend(program_state)
    return 0


if __name__ == "__main__":
    sys.exit(main())