"""A game between a human (or random) player and the search engine."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable

from chrust.board import Board, BoardError
from chrust.coordinate import Coordinate
from chrust.minimax import max_decision
from chrust.pieces import Color, PieceType
from chrust.players import AIPlayer, HumanPlayer, Player

_AI_DEPTH = 2


def _read_stdin_line() -> str:
    return sys.stdin.readline()


class ChessGame:
    """Game state, turn loop and FEN bookkeeping."""

    def __init__(
        self,
        human_player: HumanPlayer,
        ai_player: AIPlayer,
        board: Board,
        human_plays: bool,
        tick_speed: int,
        *,
        read_line: Callable[[], str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.human_player = human_player
        self.ai_player = ai_player
        self.board = board
        self.human_plays = human_plays
        self.tick_speed = tick_speed
        self.side_to_move = "w"
        self.castling_ability = "KQkq"
        self.en_passant_target_square = "h3"
        self.halfmove_clock = 0
        self.fullmove_counter = 1
        self._read_line = read_line or _read_stdin_line
        self._rng = rng or random.Random()

    def check_for_winner(self) -> str | None:
        """Name of the player whose king alone survives, or ``None``."""
        white_king = self.board.piece_specific(Color.WHITE, PieceType.KING)
        black_king = self.board.piece_specific(Color.BLACK, PieceType.KING)
        if white_king is not None and black_king is not None:
            return None
        if white_king is not None:
            return self._user_of_color(Color.WHITE).name
        if black_king is not None:
            return self._user_of_color(Color.BLACK).name
        raise RuntimeError("Something went horribly wrong. Both kings are gone?")

    def start_game(self) -> str:
        """Play turns until a king falls; return the winner's name."""
        self._print_to_screen("Initial")
        turn_num = 1
        while True:
            if not self.human_moves():
                print("Had some difficulty parsing your input there, wanna try again?")
                continue

            self.side_to_move = self.ai_player.color_abbr()
            if self.human_plays:
                self._print_to_screen(f"after ai turn {turn_num}")
            else:
                time.sleep(self.tick_speed / 1000)

            self.ai_moves()
            self.side_to_move = self.human_player.color_abbr()
            self._print_to_screen(f"after ai turn {turn_num}")
            turn_num += 1

            winner = self.check_for_winner()
            if winner is not None:
                return winner

    def ai_moves(self) -> bool:
        """Let the engine play one move."""
        print("ai moving")
        move = max_decision(self.board, self.ai_player.color, _AI_DEPTH)
        self.board.move_piece(move.from_, move.to)
        self.fullmove_counter += 1
        self.halfmove_clock += 1
        return True

    def human_moves(self) -> bool:
        """Play the human side's move; ``False`` if the input was unusable."""
        print("Human moving!")
        if self.human_plays:
            move = self._ask_human_move()
            if move is None:
                return False
        else:
            move = self._random_human_move()
        self.board.move_piece(*move)
        return True

    def fen(self) -> str:
        """Full FEN string of the current position."""
        return " ".join(
            (
                self.board.fen_section(),
                self.side_to_move,
                self.castling_ability,
                self.en_passant_target_square,
                str(self.halfmove_clock),
                str(self.fullmove_counter),
            )
        )

    def _ask_human_move(self) -> tuple[Coordinate, Coordinate] | None:
        print("Select your piece!")
        print("x:")
        x = self._read_line().strip()
        if len(x) != 1:
            return None
        print("y:")
        y = _parse_int(self._read_line())
        if y is None:
            return None

        position = Coordinate(x, y)
        try:
            choices = self.board.possible_moves(position, self.human_player.color)
        except BoardError as reason:
            print(f"Not valid move : {reason}")
            return None
        if not choices:
            print("That piece can't go anywhere!")
            return None

        print("Options: ")
        for index, coordinate in enumerate(choices):
            print(f"choice: {index}, coord: {coordinate}")
        choice = _parse_int(self._read_line())
        if choice is None:
            return None
        if not 0 <= choice < len(choices):
            raise IndexError(f"There is no choice numbered {choice}")
        print(f"Choice: {choices[choice]}")
        return position, choices[choice]

    def _random_human_move(self) -> tuple[Coordinate, Coordinate]:
        cells = self.board.cells_with_pieces_with_color(self.human_player.color)
        if not cells:
            raise BoardError(
                "There was an error while trying to get the human's player's squares"
            )
        for cell in self._rng.sample(cells, len(cells)):
            position = Coordinate(cell.x, cell.y)
            choices = self.board.possible_moves(position, self.human_player.color)
            if choices:
                return position, self._rng.choice(choices)
        raise BoardError("None of the human player's pieces can move")

    def _user_of_color(self, color: Color) -> Player:
        human = self.human_player.color == color
        ai = self.ai_player.color == color
        if human == ai:
            raise ValueError("Players with the same color?")
        return self.human_player if human else self.ai_player

    def _print_to_screen(self, configuration_name: str) -> None:
        self.board.print_to_screen(configuration_name)
        print(self.fen())


def _parse_int(line: str) -> int | None:
    try:
        return int(line.strip())
    except ValueError:
        return None


def _board_from_full_fen(fen: str) -> Board:
    return Board.from_fen(fen.split(" ")[0])


def process_fen(fen: str, num_plies: int) -> str:
    """Let black reply to ``fen``; return the new piece-placement section."""
    board = _board_from_full_fen(fen)
    move = max_decision(board, Color.BLACK, num_plies)
    new_board = board.apply_action(move)
    new_board.print_to_screen("ai move")
    return new_board.fen_section()


def is_valid(current_fen: str, current_location: str, possible_location: str) -> bool:
    """Whether white may move from ``current_location`` to ``possible_location``."""
    board = _board_from_full_fen(current_fen)
    position = Coordinate.parse(current_location)
    moves = board.possible_moves(position, Color.WHITE)
    return Coordinate.parse(possible_location) in moves


def valid_moves(fen: str, location: str) -> list[Coordinate]:
    """Squares the white piece at ``location`` may move to; none for black."""
    board = _board_from_full_fen(fen)
    if len(location) != 2:
        raise ValueError("Invalid format for location string")
    position = Coordinate.parse(location)
    if board.piece(position.x, position.y).color == Color.BLACK:
        return []
    return board.possible_moves(position, Color.WHITE)