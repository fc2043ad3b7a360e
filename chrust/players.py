"""The two kinds of participant in a game."""

from __future__ import annotations

from dataclasses import dataclass

from chrust.pieces import Color


@dataclass
class Player:
    """A named player of one colour."""

    name: str
    color: Color

    def color_abbr(self) -> str:
        """First letter of the player's colour."""
        return self.color.abbr()


@dataclass
class HumanPlayer(Player):
    """A player whose moves come from the terminal or from chance."""


@dataclass
class AIPlayer(Player):
    """A player whose moves come from the minimax search."""