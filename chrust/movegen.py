"""Move generation for each kind of piece."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from chrust.coordinate import Coordinate
from chrust.pieces import ChessPiece, Color, PieceType

if TYPE_CHECKING:
    from chrust.board import Board

Direction = Callable[[Coordinate, int], Coordinate]

_STRAIGHT: tuple[Direction, ...] = (
    Coordinate.up_by,
    Coordinate.down_by,
    Coordinate.left_by,
    Coordinate.right_by,
)

_DIAGONAL: tuple[Direction, ...] = (
    Coordinate.diagonal_up_left_by,
    Coordinate.diagonal_up_right_by,
    Coordinate.diagonal_down_right_by,
    Coordinate.diagonal_down_left_by,
)

_MAX_REACH = 8


def _occupant_color(board: Board, coordinate: Coordinate) -> Color | None:
    cell = board.cell_at(coordinate)
    if cell is None or cell.space is None:
        return None
    return cell.space.color


def _enemy_occupied(board: Board, coordinate: Coordinate, color: Color) -> bool:
    occupant = _occupant_color(board, coordinate)
    return occupant is not None and occupant != color


def _friendly_occupied(board: Board, coordinate: Coordinate, color: Color) -> bool:
    return _occupant_color(board, coordinate) == color


def _slide(
    piece: ChessPiece,
    position: Coordinate,
    board: Board,
    directions: Iterable[Direction],
    reach: int,
) -> list[Coordinate]:
    """Walk each direction until blocked; a capture ends the walk."""
    moves: list[Coordinate] = []
    for step in directions:
        for distance in range(1, reach + 1):
            target = step(position, distance)
            if not target.is_valid(board):
                continue
            if _friendly_occupied(board, target, piece.color):
                break
            moves.append(target)
            if _enemy_occupied(board, target, piece.color):
                break
    return moves


def _pawn_moves(piece: ChessPiece, position: Coordinate, board: Board) -> list[Coordinate]:
    white = piece.color == Color.WHITE
    forward = Coordinate.up_by if white else Coordinate.down_by
    steps = (1, 2) if position.y == 2 else (1,)

    moves = [
        target
        for target in (forward(position, n) for n in steps)
        if not _enemy_occupied(board, target, piece.color)
    ]

    if white:
        diagonals = [position.diagonal_up_right_by(1), position.diagonal_up_left_by(1)]
    else:
        diagonals = [position.diagonal_down_left_by(1), position.diagonal_down_right_by(1)]
    moves.extend(
        target
        for target in diagonals
        if target.is_valid(board) and _enemy_occupied(board, target, piece.color)
    )

    return [target for target in moves if target.is_valid(board)]


def _knight_moves(piece: ChessPiece, position: Coordinate, board: Board) -> list[Coordinate]:
    jumps = (
        position.up_by(1).left_by(2),
        position.up_by(2).left_by(1),
        position.up_by(2).right_by(1),
        position.up_by(1).right_by(2),
        position.down_by(1).right_by(2),
        position.down_by(2).right_by(1),
        position.down_by(2).left_by(1),
        position.down_by(1).left_by(2),
    )
    return [
        target
        for target in jumps
        if target.is_valid(board) and not _friendly_occupied(board, target, piece.color)
    ]


def _rook_moves(piece: ChessPiece, position: Coordinate, board: Board) -> list[Coordinate]:
    return _slide(piece, position, board, _STRAIGHT, _MAX_REACH)


def _bishop_moves(piece: ChessPiece, position: Coordinate, board: Board) -> list[Coordinate]:
    return _slide(piece, position, board, _DIAGONAL, _MAX_REACH)


def _queen_moves(piece: ChessPiece, position: Coordinate, board: Board) -> list[Coordinate]:
    return _slide(piece, position, board, _STRAIGHT + _DIAGONAL, _MAX_REACH)


def _king_moves(piece: ChessPiece, position: Coordinate, board: Board) -> list[Coordinate]:
    return _slide(piece, position, board, _STRAIGHT + _DIAGONAL, 1)


_GENERATORS = {
    PieceType.PAWN: _pawn_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.KING: _king_moves,
}


def available_moves(piece: ChessPiece, position: Coordinate, board: Board) -> list[Coordinate]:
    """Squares ``piece`` standing at ``position`` may move to on ``board``."""
    return _GENERATORS[piece.piece_type](piece, position, board)