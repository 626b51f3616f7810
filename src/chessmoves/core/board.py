"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from typing import Protocol

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.position import BOARD_SIZE, Position, all_positions

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardReader(Protocol):
    """Read-only occupancy view consumed by the move generator."""

    def get_piece(self, position: Position) -> Piece | None: ...


class Board:
    """Mutable 64-square board indexed by :class:`Position`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT

    @staticmethod
    def _index(position: Position) -> int:
        if not position.is_on_board():
            raise IndexError(f"Position off the board: {position!r}")
        return (position.row - 1) * BOARD_SIZE + (position.column - 1)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Position) -> Piece | None:
        return self._squares[self._index(position)]

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        self._squares[self._index(position)] = piece

    def get_piece(self, position: Position) -> Piece | None:
        return self[position]

    def add_piece(self, position: Position, piece: Piece) -> None:
        self[position] = piece

    def remove_piece(self, position: Position) -> Piece | None:
        """Empty *position*, returning whatever stood there."""
        old = self[position]
        self[position] = None
        return old

    def is_empty(self, position: Position) -> bool:
        return self[position] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> list[tuple[Position, Piece]]:
        """(position, piece) pairs for *color*'s pieces, or all pieces."""
        result: list[tuple[Position, Piece]] = []
        for position in all_positions():
            piece = self._squares[self._index(position)]
            if piece is None:
                continue
            if color is None or piece.color == color:
                result.append((position, piece))
        return result

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * _SQUARE_COUNT

    def reset(self) -> None:
        """Put every piece back on its starting square."""
        self.clear()
        for col, pt in enumerate(_BACK_RANK, start=1):
            self[Position(1, col)] = Piece(Color.WHITE, pt)
            self[Position(2, col)] = Piece(Color.WHITE, PieceType.PAWN)
            self[Position(7, col)] = Piece(Color.BLACK, PieceType.PAWN)
            self[Position(8, col)] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for col in range(1, BOARD_SIZE + 1):
                p = self[Position(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
