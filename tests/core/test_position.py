"""Tests for Position coordinates and square names."""

import pytest

from chessmoves.core.position import (
    A1, E4, H8,
    BOARD_SIZE,
    Position,
    all_positions,
)


class TestPositionValue:
    def test_equality_by_value(self) -> None:
        assert Position(4, 5) == Position(4, 5)
        assert len({Position(4, 5), Position(4, 5), Position(5, 4)}) == 2

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            E4.row = 5  # type: ignore[misc]

    def test_offset(self) -> None:
        assert A1.offset(1, 2) == Position(2, 3)
        assert A1.offset(-1, 0) == Position(0, 1)

    @pytest.mark.parametrize(
        ("pos", "on_board"),
        [
            (Position(1, 1), True),
            (Position(8, 8), True),
            (Position(0, 4), False),
            (Position(4, 9), False),
            (Position(-1, -1), False),
        ],
    )
    def test_is_on_board(self, pos: Position, on_board: bool) -> None:
        assert pos.is_on_board() is on_board

    def test_all_positions(self) -> None:
        squares = all_positions()
        assert len(squares) == BOARD_SIZE * BOARD_SIZE
        assert squares[0] == A1
        assert squares[-1] == H8


class TestSquareNames:
    def test_name(self) -> None:
        assert A1.name == "a1"
        assert E4.name == "e4"
        assert H8.name == "h8"

    def test_from_name(self) -> None:
        assert Position.from_name("e4") == Position(4, 5)

    def test_names_round_trip_every_square(self) -> None:
        for pos in all_positions():
            assert Position.from_name(pos.name) == pos

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44", "E4"])
    def test_invalid_name_raises(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Position.from_name(name)

    def test_off_board_name_raises(self) -> None:
        with pytest.raises(ValueError, match="off the board"):
            _ = Position(0, 0).name

    def test_str(self) -> None:
        assert str(E4) == "e4"
        assert str(Position(0, 9)) == "(0, 9)"
