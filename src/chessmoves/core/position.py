"""Board coordinates.

Rows and columns are 1-based, matching how the rules are usually stated:
    row 1 = White's back rank, row 8 = Black's back rank
    column 1 = a-file, column 8 = h-file
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

BOARD_SIZE: Final = 8
MIN_INDEX: Final = 1
MAX_INDEX: Final = BOARD_SIZE

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, column) coordinate.

    Construction never validates the range; off-board positions are legal
    values so that walkers can step past the edge and ask
    :meth:`is_on_board`.
    """

    row: int
    column: int

    def is_on_board(self) -> bool:
        return (
            MIN_INDEX <= self.row <= MAX_INDEX
            and MIN_INDEX <= self.column <= MAX_INDEX
        )

    def offset(self, row_delta: int, col_delta: int) -> Position:
        return Position(self.row + row_delta, self.column + col_delta)

    # ── Notation ─────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Algebraic name, e.g. Position(1, 1) → 'a1'."""
        if not self.is_on_board():
            raise ValueError(f"Position off the board: {self!r}")
        return _FILES[self.column - 1] + _RANKS[self.row - 1]

    @classmethod
    def from_name(cls, name: str) -> Position:
        """Parse square name, e.g. 'e4' → Position(4, 5)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]) + 1, _FILES.index(name[0]) + 1)

    def __str__(self) -> str:
        return self.name if self.is_on_board() else f"({self.row}, {self.column})"


def all_positions() -> list[Position]:
    """Every on-board square, a1 first, h8 last."""
    return [
        Position(row, col)
        for row in range(MIN_INDEX, MAX_INDEX + 1)
        for col in range(MIN_INDEX, MAX_INDEX + 1)
    ]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(1, c) for c in range(1, 9))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(2, c) for c in range(1, 9))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(3, c) for c in range(1, 9))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(4, c) for c in range(1, 9))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(5, c) for c in range(1, 9))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(6, c) for c in range(1, 9))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(7, c) for c in range(1, 9))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(8, c) for c in range(1, 9))
