"""chessmoves - pseudo-legal move generation for standard chess pieces."""

from chessmoves.core import (
    Board,
    BoardReader,
    Color,
    Move,
    MoveGenerator,
    Piece,
    PieceType,
    Position,
    piece_moves,
)

__all__ = [
    "Board",
    "BoardReader",
    "Color",
    "Move",
    "MoveGenerator",
    "Piece",
    "PieceType",
    "Position",
    "piece_moves",
]
