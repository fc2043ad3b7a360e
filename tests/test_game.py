import random

import pytest

from chrust.board import Board, BoardError
from chrust.coordinate import Coordinate
from chrust.game import ChessGame, is_valid, process_fen, valid_moves
from chrust.pieces import ChessPiece, Color, PieceType
from chrust.players import AIPlayer, HumanPlayer

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
START_FULL = START + " w KQkq - 0 1"
QUEEN_HANGS = "r3k3/8/8/8/8/8/8/Q3K3"


def _game(fen=START, human_plays=True, lines=(), rng=None, ai_color=Color.BLACK):
    feed = iter(lines)
    return ChessGame(
        HumanPlayer(name="kasparov", color=Color.WHITE),
        AIPlayer(name="rusty", color=ai_color),
        Board.from_fen(fen),
        human_plays,
        0,
        read_line=lambda: next(feed),
        rng=rng,
    )


def test_initial_fen():
    game = _game()
    assert game.fen() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq h3 0 1"


def test_no_winner_with_both_kings():
    assert _game().check_for_winner() is None


def test_white_king_alone_wins_for_human():
    assert _game("8/8/8/8/8/8/8/4K3").check_for_winner() == "kasparov"


def test_black_king_alone_wins_for_ai():
    assert _game("4k3/8/8/8/8/8/8/8").check_for_winner() == "rusty"


def test_no_kings_is_an_error():
    with pytest.raises(RuntimeError):
        _game("8/8/8/8/8/8/8/R7").check_for_winner()


def test_players_of_the_same_color_are_an_error():
    game = _game("8/8/8/8/8/8/8/4K3", ai_color=Color.WHITE)
    with pytest.raises(ValueError):
        game.check_for_winner()


def test_ai_moves_captures_and_counts():
    game = _game(QUEEN_HANGS)
    half, full = game.halfmove_clock, game.fullmove_counter
    assert game.ai_moves() is True
    assert game.board.fen_section() == "4k3/8/8/8/8/8/8/r3K3"
    assert game.halfmove_clock == half + 1
    assert game.fullmove_counter == full + 1


def test_human_moves_from_input():
    game = _game(lines=["e", "2", "0"])
    assert game.human_moves() is True
    assert game.board.piece("e", 3) == ChessPiece(PieceType.PAWN, Color.WHITE)
    assert game.board.cell_at(Coordinate("e", 2)).space is None


@pytest.mark.parametrize(
    "lines",
    [["zz"], ["e", "two"], ["e", "7"], ["e", "4"], ["a", "1"], ["e", "2", "x"]],
)
def test_unusable_input_leaves_board_alone(lines):
    game = _game(lines=lines)
    assert game.human_moves() is False
    assert game.board.fen_section() == START


def test_choice_out_of_range_raises():
    game = _game(lines=["e", "2", "5"])
    with pytest.raises(IndexError):
        game.human_moves()


def test_random_human_move_moves_one_white_piece():
    game = _game(human_plays=False, rng=random.Random(1))
    assert game.human_moves() is True
    white = game.board.cells_with_pieces_with_color(Color.WHITE)
    assert len(white) == 16
    assert len(game.board.cells_with_pieces_with_color(Color.BLACK)) == 16
    assert sum(1 for cell in white if cell.y <= 2) == 15


def test_random_human_without_pieces_raises():
    game = _game("k7/8/8/8/8/8/8/8", human_plays=False, rng=random.Random(0))
    with pytest.raises(BoardError):
        game.human_moves()


def test_start_game_ends_when_king_is_taken():
    game = _game("7k/8/8/8/8/2q5/8/K7", lines=["bad", "a", "1", "2"])
    assert game.start_game() == "rusty"
    assert game.board.piece("b", 2) == ChessPiece(PieceType.QUEEN, Color.BLACK)
    assert game.side_to_move == "W"


def test_process_fen_returns_black_reply():
    assert process_fen(QUEEN_HANGS + " w - - 0 1", 0) == "4k3/8/8/8/8/8/8/r3K3"


def test_is_valid():
    assert is_valid(START_FULL, "e2", "e4") is True
    assert is_valid(START_FULL, "e2", "e5") is False


def test_is_valid_rejects_black_piece():
    with pytest.raises(BoardError):
        is_valid(START_FULL, "e7", "e5")


def test_valid_moves_for_white_pawn():
    assert valid_moves(START_FULL, "e2") == [Coordinate("e", 3), Coordinate("e", 4)]


def test_valid_moves_for_black_piece_is_empty():
    assert valid_moves(START_FULL, "e7") == []


def test_valid_moves_bad_location():
    with pytest.raises(ValueError):
        valid_moves(START_FULL, "e22")


def test_valid_moves_empty_square():
    with pytest.raises(BoardError):
        valid_moves(START_FULL, "e5")