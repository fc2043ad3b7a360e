"""Colours, piece kinds, pieces and board cells."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Side a piece or a square belongs to."""

    WHITE = 1
    BLACK = 2

    def __str__(self) -> str:
        return self.name.capitalize()

    def abbr(self) -> str:
        """First letter of the colour's name, e.g. ``"W"`` for white."""
        return str(self)[0]


class PieceType(Enum):
    """Kind of chess piece."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


_SYMBOLS = {
    (PieceType.PAWN, Color.WHITE): "\u2659",
    (PieceType.PAWN, Color.BLACK): "\u265F",
    (PieceType.ROOK, Color.WHITE): "\u2656",
    (PieceType.ROOK, Color.BLACK): "\u265C",
    (PieceType.KNIGHT, Color.WHITE): "\u2658",
    (PieceType.KNIGHT, Color.BLACK): "\u265E",
    (PieceType.BISHOP, Color.WHITE): "\u2657",
    (PieceType.BISHOP, Color.BLACK): "\u265D",
    (PieceType.QUEEN, Color.WHITE): "\u2655",
    (PieceType.QUEEN, Color.BLACK): "\u265B",
    (PieceType.KING, Color.WHITE): "\u2654",
    (PieceType.KING, Color.BLACK): "\u265A",
}

_FEN_CODES = {
    (PieceType.PAWN, Color.WHITE): "P",
    (PieceType.PAWN, Color.BLACK): "p",
    (PieceType.ROOK, Color.WHITE): "R",
    (PieceType.ROOK, Color.BLACK): "r",
    (PieceType.KNIGHT, Color.WHITE): "N",
    (PieceType.KNIGHT, Color.BLACK): "n",
    (PieceType.BISHOP, Color.WHITE): "B",
    (PieceType.BISHOP, Color.BLACK): "b",
    (PieceType.QUEEN, Color.WHITE): "Q",
    (PieceType.QUEEN, Color.BLACK): "q",
    (PieceType.KING, Color.WHITE): "K",
    (PieceType.KING, Color.BLACK): "k",
}

_FROM_FEN = {code: key for key, code in _FEN_CODES.items()}


@dataclass(frozen=True)
class ChessPiece:
    """A piece of a given kind and colour."""

    piece_type: PieceType
    color: Color

    def symbol(self) -> str:
        """Unicode chess symbol for this piece."""
        return _SYMBOLS[(self.piece_type, self.color)]

    def fen_code(self) -> str:
        """FEN letter for this piece: upper case for white, lower for black."""
        return _FEN_CODES[(self.piece_type, self.color)]

    @classmethod
    def from_fen_char(cls, char: str) -> ChessPiece:
        """Build the piece that a FEN letter stands for."""
        try:
            piece_type, color = _FROM_FEN[char]
        except KeyError:
            raise ValueError(f"Invalid char: {char!r}") from None
        return cls(piece_type=piece_type, color=color)


@dataclass
class Cell:
    """One square of the board, possibly holding a piece."""

    space: ChessPiece | None
    color: Color
    x: str
    y: int