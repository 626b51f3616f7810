"""Tests for Board."""

import pytest

from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.position import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    Position,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        pawns = {
            color: [
                pos
                for pos, p in board.occupied(color)
                if p.piece_type == PieceType.PAWN
            ]
            for color in Color
        }
        white, black = pawns[Color.WHITE], pawns[Color.BLACK]
        assert len(white) == 8 and all(pos.row == 2 for pos in white)
        assert len(black) == 8 and all(pos.row == 7 for pos in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(3, 7):
            for col in range(1, 9):
                assert board[Position(row, col)] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board.add_piece(E4, piece)
        assert board.get_piece(E4) == piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_remove_piece(self) -> None:
        board = Board.initial()
        removed = board.remove_piece(E2)
        assert removed == Piece(Color.WHITE, PieceType.PAWN)
        assert board.is_empty(E2)
        assert board.remove_piece(E2) is None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_occupied_counts(self) -> None:
        board = Board.initial()
        assert len(board.occupied(Color.WHITE)) == 16
        assert len(board.occupied(Color.BLACK)) == 16
        assert len(board.occupied()) == 32

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.occupied() == []

    def test_reset_restores_start(self) -> None:
        board = Board()
        board[E4] = Piece(Color.BLACK, PieceType.QUEEN)
        board.reset()
        assert board == Board.initial()

    @pytest.mark.parametrize("pos", [Position(0, 1), Position(1, 9), Position(9, 9)])
    def test_off_board_access_raises(self, pos: Position) -> None:
        board = Board()
        with pytest.raises(IndexError, match="off the board"):
            board.get_piece(pos)

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text
