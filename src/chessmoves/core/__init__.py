"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Piece, Position, piece_moves

    board = Board.initial()
    origin = Position.from_name("g1")
    for move in piece_moves(board, board[origin], origin):
        print(move)
"""

from chessmoves.core.board import Board, BoardReader
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.move_generator import (
    BISHOP_DIRS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    MoveGenerator,
    pawn_moves,
    piece_moves,
    walk_ray,
)
from chessmoves.core.piece import Piece
from chessmoves.core.position import BOARD_SIZE, Position, all_positions

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Value types / helpers
    "BOARD_SIZE",
    "Move",
    "Piece",
    "Position",
    "all_positions",
    # Board
    "Board",
    "BoardReader",
    # Generation
    "BISHOP_DIRS",
    "KNIGHT_OFFSETS",
    "QUEEN_DIRS",
    "ROOK_DIRS",
    "MoveGenerator",
    "pawn_moves",
    "piece_moves",
    "walk_ray",
]
