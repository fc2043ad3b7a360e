"""Static evaluation of a board: black is the maximising side."""

from __future__ import annotations

from chrust.board import Board
from chrust.pieces import ChessPiece, Color, PieceType

_PIECE_VALUES = {
    PieceType.PAWN: 10,
    PieceType.ROOK: 50,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}

_FILE_INDEX = {letter: index for index, letter in enumerate("abcdefgh")}

_PAWN_EVAL_WHITE = (
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0),
    (1.0, 1.0, 2.0, 3.0, 3.0, 2.0, 1.0, 1.0),
    (0.5, 0.5, 1.0, 2.5, 2.5, 1.0, 0.5, 0.5),
    (0.0, 0.0, 0.0, 2.0, 2.0, 0.0, 0.0, 0.0),
    (0.5, -0.5, -1.0, 0.0, 0.0, -1.0, -0.5, 0.5),
    (0.5, 1.0, 1.0, -2.0, -2.0, 1.0, 1.0, 0.5),
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
)

_KNIGHT_EVAL_WHITE = (
    (-5.0, -4.0, -3.0, -3.0, -3.0, -3.0, -4.0, -5.0),
    (-4.0, -2.0, 0.0, 0.0, 0.0, 0.0, -2.0, -4.0),
    (-3.0, 0.0, 1.0, 1.5, 1.5, 1.0, 0.0, -3.0),
    (-3.0, 0.5, 1.5, 2.0, 2.0, 1.5, 0.5, -3.0),
    (-3.0, 0.0, 1.5, 2.0, 2.0, 1.5, 0.0, -3.0),
    (-3.0, 0.5, 1.0, 1.5, 1.5, 1.0, 0.5, -3.0),
    (-4.0, -2.0, 0.0, 0.5, 0.5, 0.0, -2.0, -4.0),
    (-5.0, -4.0, -3.0, -3.0, -3.0, -3.0, -4.0, -5.0),
)

_BISHOP_EVAL_WHITE = (
    (-2.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -2.0),
    (-1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 1.0, 1.0, 0.5, 0.0, -1.0),
    (-1.0, 0.5, 0.5, 1.0, 1.0, 0.5, 0.5, -1.0),
    (-1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 0.0, -1.0),
    (-1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, -1.0),
    (-1.0, 0.5, 0.0, 0.0, 0.0, 0.0, 0.5, -1.0),
    (-2.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -2.0),
)

_ROOK_EVAL_WHITE = (
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (0.0, 0.0, 0.0, 0.5, 0.5, 0.0, 0.0, 0.0),
)

_QUEEN_EVAL_WHITE = (
    (-2.0, -1.0, -1.0, -0.5, -0.5, -1.0, -1.0, -2.0),
    (-1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -1.0),
    (-0.5, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -0.5),
    (0.0, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -0.5),
    (-1.0, 0.5, 0.5, 0.5, 0.5, 0.5, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-2.0, -1.0, -1.0, -0.5, -0.5, -1.0, -1.0, -2.0),
)

_KING_EVAL_WHITE = (
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-2.0, -3.0, -3.0, -4.0, -4.0, -3.0, -3.0, -2.0),
    (-1.0, -2.0, -2.0, -2.0, -2.0, -2.0, -2.0, -1.0),
    (2.0, 2.0, 0.0, 0.0, 0.0, 0.0, 2.0, 2.0),
    (2.0, 3.0, 1.0, 0.0, 0.0, 1.0, 3.0, 2.0),
)

_WHITE_TABLES = {
    PieceType.PAWN: _PAWN_EVAL_WHITE,
    PieceType.ROOK: _ROOK_EVAL_WHITE,
    PieceType.KNIGHT: _KNIGHT_EVAL_WHITE,
    PieceType.BISHOP: _BISHOP_EVAL_WHITE,
    PieceType.QUEEN: _QUEEN_EVAL_WHITE,
    PieceType.KING: _KING_EVAL_WHITE,
}

# Black reads the white tables with their outer rows reversed.
_TABLES = {
    **{(kind, Color.WHITE): table for kind, table in _WHITE_TABLES.items()},
    **{(kind, Color.BLACK): table[::-1] for kind, table in _WHITE_TABLES.items()},
}


def _file_index(x: str) -> int:
    try:
        return _FILE_INDEX[x]
    except KeyError:
        raise ValueError("Coordinate not well structured!") from None


def _position_score(piece: ChessPiece, x: str, y: int) -> int:
    table = _TABLES[(piece.piece_type, piece.color)]
    # Fractions are truncated toward zero.
    return int(table[_file_index(x)][y - 1])


def evaluate(board: Board) -> int:
    """Score ``board``: positive favours black, negative favours white."""
    total = 0
    for cell in board.all_cells():
        piece = cell.space
        if piece is None:
            continue
        value = _PIECE_VALUES[piece.piece_type] + _position_score(piece, cell.x, cell.y)
        total += -value if piece.color == Color.WHITE else value
    return total