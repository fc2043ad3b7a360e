import pytest

from chrust.board import Board
from chrust.evaluate import evaluate

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def _mirror(fen: str) -> str:
    return "/".join(rank[::-1].swapcase() for rank in fen.split("/"))


def test_empty_board_scores_zero():
    assert evaluate(Board.empty()) == 0


@pytest.mark.parametrize("letter", ["P", "R", "N", "B", "Q", "K"])
@pytest.mark.parametrize("rank", [1, 3, 5, 8])
def test_mirrored_pair_on_same_rank_cancels(letter, rank):
    row = f"{letter}6{letter.lower()}"
    ranks = ["8"] * 8
    ranks[8 - rank] = row
    assert evaluate(Board.from_fen("/".join(ranks))) == 0


@pytest.mark.parametrize(
    "fen",
    [
        START,
        "r3k3/8/8/8/8/8/8/Q3K3",
        "8/2p5/3N4/8/1b6/8/5P2/K6k",
        "7k/8/8/8/8/2q5/8/K7",
    ],
)
def test_mirroring_negates_score(fen):
    assert evaluate(Board.from_fen(_mirror(fen))) == -evaluate(Board.from_fen(fen))


def test_lone_white_piece_is_negative_and_black_positive():
    assert evaluate(Board.from_fen("8/8/8/8/3Q4/8/8/8")) < 0
    assert evaluate(Board.from_fen("8/8/8/8/3q4/8/8/8")) > 0


def test_lone_white_king_on_e1():
    assert evaluate(Board.from_fen("8/8/8/8/8/8/8/4K3")) == -898


def test_fractional_bonus_is_truncated():
    assert evaluate(Board.from_fen("8/8/8/8/8/8/8/3P4")) == -10


def test_capturing_a_white_piece_raises_score():
    before = Board.from_fen("r3k3/8/8/8/8/8/8/Q3K3")
    after = Board.from_fen("4k3/8/8/8/8/8/8/r3K3")
    assert evaluate(after) > evaluate(before)