import pytest

from chrust.coordinate import Coordinate
from chrust.pieces import Cell, Color


class _Board:
    def __init__(self):
        self.cells = [
            Cell(space=None, color=Color.WHITE, x=x, y=y)
            for y in range(1, 9)
            for x in "abcdefgh"
        ]

    def cell_at(self, coordinate):
        for cell in self.cells:
            if cell.x == coordinate.x and cell.y == coordinate.y:
                return cell
        return None


class _EmptyBoard:
    def cell_at(self, coordinate):
        return None


def test_parse_takes_first_two_chars():
    assert Coordinate.parse("e2") == Coordinate("e", 2)
    assert Coordinate.parse("h8xyz") == Coordinate("h", 8)


@pytest.mark.parametrize("text", ["", "a", "ab", "a-"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Coordinate.parse(text)


def test_str_round_trip():
    coord = Coordinate("c", 7)
    assert Coordinate.parse(str(coord)) == coord


def test_vertical_round_trip():
    coord = Coordinate("d", 4)
    for n in range(1, 4):
        assert coord.up_by(n).down_by(n) == coord
        assert coord.up_by(n).x == coord.x
        assert coord.up_by(n).y == coord.y + n


def test_horizontal_round_trip():
    coord = Coordinate("d", 4)
    for n in range(1, 4):
        assert coord.right_by(n).left_by(n) == coord
        assert coord.right_by(n).y == coord.y
        assert ord(coord.right_by(n).x) == ord(coord.x) + n


def test_diagonals_compose_from_straight_moves():
    coord = Coordinate("e", 5)
    for n in range(1, 4):
        assert coord.diagonal_up_right_by(n) == coord.up_by(n).right_by(n)
        assert coord.diagonal_up_left_by(n) == coord.up_by(n).left_by(n)
        assert coord.diagonal_down_right_by(n) == coord.down_by(n).right_by(n)
        assert coord.diagonal_down_left_by(n) == coord.down_by(n).left_by(n)


def test_opposite_diagonals_cancel():
    coord = Coordinate("b", 3)
    assert coord.diagonal_up_right_by(2).diagonal_down_left_by(2) == coord
    assert coord.diagonal_up_left_by(1).diagonal_down_right_by(1) == coord


def test_is_valid_on_board():
    board = _Board()
    assert Coordinate("a", 1).is_valid(board)
    assert Coordinate("h", 8).is_valid(board)


def test_is_valid_rejects_off_board():
    board = _Board()
    assert not Coordinate("a", 1).left_by(1).is_valid(board)
    assert not Coordinate("h", 8).up_by(1).is_valid(board)
    assert not Coordinate("a", 1).down_by(1).is_valid(board)
    assert not Coordinate("h", 1).right_by(1).is_valid(board)


def test_is_valid_requires_cell_on_board():
    assert not Coordinate("a", 1).is_valid(_EmptyBoard())


def test_coordinates_are_hashable_values():
    assert {Coordinate("a", 1), Coordinate.parse("a1")} == {Coordinate("a", 1)}