"""Board coordinates in file/rank form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_FILES = frozenset("abcdefgh")
_DIGITS = "0123456789"


@dataclass(frozen=True)
class Coordinate:
    """A square given by its file letter ``x`` (a-h) and rank ``y`` (1-8).

    The shifting methods do no bounds checking; use :meth:`is_valid`.
    """

    x: str
    y: int

    def __str__(self) -> str:
        return f"{self.x}{self.y}"

    def is_valid(self, board: Any) -> bool:
        """Whether the square is on the standard board and exists on ``board``."""
        return (
            1 <= self.y <= 8
            and self.x in _FILES
            and board.cell_at(self) is not None
        )

    def _shift(self, files: int, ranks: int) -> Coordinate:
        return Coordinate(chr(ord(self.x) + files), self.y + ranks)

    def up_by(self, amount: int) -> Coordinate:
        return self._shift(0, amount)

    def down_by(self, amount: int) -> Coordinate:
        return self._shift(0, -amount)

    def left_by(self, amount: int) -> Coordinate:
        return self._shift(-amount, 0)

    def right_by(self, amount: int) -> Coordinate:
        return self._shift(amount, 0)

    def diagonal_up_right_by(self, amount: int) -> Coordinate:
        return self._shift(amount, amount)

    def diagonal_up_left_by(self, amount: int) -> Coordinate:
        return self._shift(-amount, amount)

    def diagonal_down_right_by(self, amount: int) -> Coordinate:
        return self._shift(amount, -amount)

    def diagonal_down_left_by(self, amount: int) -> Coordinate:
        return self._shift(-amount, -amount)

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Parse a square such as ``"e2"`` from its first two characters."""
        if len(text) < 2 or text[1] not in _DIGITS:
            raise ValueError(f"Invalid coordinate: {text!r}")
        return cls(text[0], int(text[1]))