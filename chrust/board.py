"""The chess board, its pieces and FEN conversion."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from chrust.coordinate import Coordinate
from chrust.movegen import available_moves
from chrust.pieces import Cell, ChessPiece, Color, PieceType

_FILE_LETTERS = "abcdefgh"
_DIGITS = "0123456789"
_BOARD_SIZE = 8
_START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class BoardError(ValueError):
    """Raised for invalid board lookups, layouts or moves."""


@dataclass(frozen=True)
class PieceMove:
    """A piece moving from one square to another."""

    chess_piece: ChessPiece
    from_: Coordinate
    to: Coordinate


@dataclass
class Board:
    """Rows of cells, from rank 8 down to rank 1, files a to h."""

    squares: list[list[Cell]]
    board_size: int
    _index: dict[tuple[str, int], Cell] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if len(self.squares) != self.board_size:
            raise BoardError(
                "The board is formatted incorrectly! The expected board_size: "
                f"{self.board_size} does not match the actual board size: "
                f"{len(self.squares)}"
            )
        self._index = {(cell.x, cell.y): cell for row in self.squares for cell in row}

    def cell_at(self, coordinate: Coordinate) -> Cell | None:
        """The cell at ``coordinate``, or ``None`` if there is none."""
        return self._index.get((coordinate.x, coordinate.y))

    def all_cells(self) -> list[Cell]:
        """Every cell, row by row."""
        return [cell for row in self.squares for cell in row]

    def render(self, configuration_name: str) -> str:
        """Text picture of the board under a titled header line."""
        lines = [f"---------------------------{configuration_name}"]
        for row in self.squares:
            prefix = f"{row[0].y}|" if row else ""
            lines.append(
                prefix
                + "".join(
                    f" {cell.space.symbol()} |" if cell.space else "   |" for cell in row
                )
            )
        lines.append(" " + "".join(f"  {letter} " for letter in _FILE_LETTERS))
        return "\n".join(lines) + "\n"

    def print_to_screen(self, configuration_name: str) -> None:
        print(self.render(configuration_name), end="")

    def piece(self, x: str, y: int) -> ChessPiece:
        """The piece standing on square ``x``/``y``."""
        cell = self._index.get((x, y))
        if cell is None:
            raise BoardError(
                "couldnt find the given pairs of points on the board! "
                f"Either the board is goofed - or your points are: x:{x},y:{y}"
            )
        if cell.space is None:
            raise BoardError(
                "You tried to get a piece at a space that didnt have one: "
                f"x:{x},y:{y}"
            )
        return cell.space

    def possible_moves(self, position: Coordinate, color: Color) -> list[Coordinate]:
        """Moves of the piece at ``position``, which must belong to ``color``."""
        target = self.piece(position.x, position.y)
        if target.color != color:
            raise BoardError("Thats not your piece!")
        return available_moves(target, position, self)

    def all_possible_moves(self, color: Color) -> list[PieceMove]:
        """Every move available to the pieces of ``color``."""
        moves: list[PieceMove] = []
        for cell in self.cells_with_pieces_with_color(color):
            position = Coordinate(cell.x, cell.y)
            piece = self.piece(position.x, position.y)
            moves.extend(
                PieceMove(piece, position, target)
                for target in self.possible_moves(position, color)
            )
        return moves

    def apply_action(self, action: PieceMove) -> Board:
        """A new board with ``action`` played; this board is unchanged."""
        new_board = Board(
            [[dataclasses.replace(cell) for cell in row] for row in self.squares],
            self.board_size,
        )
        new_board.move_piece(action.from_, action.to)
        return new_board

    def pieces_of_color(self, color: Color) -> list[ChessPiece]:
        return [cell.space for cell in self.cells_with_pieces_with_color(color)]

    def cells_with_pieces_with_color(self, color: Color) -> list[Cell]:
        return [
            cell
            for cell in self.all_cells()
            if cell.space is not None and cell.space.color == color
        ]

    def piece_specific(self, color: Color, piece_type: PieceType) -> ChessPiece | None:
        """The first piece of ``color`` and ``piece_type``, if any."""
        return next(
            (p for p in self.pieces_of_color(color) if p.piece_type == piece_type),
            None,
        )

    def move_piece(self, from_: Coordinate, to: Coordinate) -> None:
        """Move the piece at ``from_`` onto ``to``, capturing whatever is there.

        Moving from an empty square places a black bishop on ``to``.
        """
        target = ChessPiece(PieceType.BISHOP, Color.BLACK)
        source = self.cell_at(from_)
        if source is not None and source.space is not None:
            target = source.space
        destination = self.cell_at(to)
        if destination is not None:
            destination.space = target
        if source is not None:
            source.space = None

    @classmethod
    def empty(cls) -> Board:
        """A standard board with no pieces on it."""
        squares = [
            [
                Cell(
                    space=None,
                    color=Color.BLACK if (index + rank) % 2 == 1 else Color.WHITE,
                    x=letter,
                    y=rank,
                )
                for index, letter in enumerate(_FILE_LETTERS)
            ]
            for rank in range(_BOARD_SIZE, 0, -1)
        ]
        return cls(squares, _BOARD_SIZE)

    @classmethod
    def load(cls, board_name: str) -> Board:
        """A named layout: ``"game_start"`` or ``"empty_board"``."""
        if board_name == "game_start":
            return cls.from_fen(_START_FEN)
        if board_name == "empty_board":
            return cls.empty()
        raise BoardError("Invalid option for board_name")

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Board from the piece-placement section of a FEN string."""
        board = cls.empty()
        cells = iter(board.all_cells())
        for rank in fen.split("/"):
            for char in rank:
                if char in _DIGITS:
                    for _ in range(int(char)):
                        next(cells, None)
                    continue
                cell = next(cells, None)
                if cell is None:
                    raise BoardError(f"Too many squares described in FEN: {fen!r}")
                try:
                    piece = ChessPiece.from_fen_char(char)
                except ValueError as error:
                    raise BoardError(str(error)) from None
                if cell.space is None:
                    cell.space = piece
        return board

    def fen_section(self) -> str:
        """The piece-placement section of this board's FEN."""
        return "/".join(_fen_rank(row) for row in self.squares)


def _fen_rank(row: list[Cell]) -> str:
    parts: list[str] = []
    empty_run = 0
    for cell in row:
        if cell.space is None:
            empty_run += 1
            continue
        if empty_run:
            parts.append(str(empty_run))
            empty_run = 0
        parts.append(cell.space.fen_code())
    if empty_run:
        parts.append(str(empty_run))
    return "".join(parts)