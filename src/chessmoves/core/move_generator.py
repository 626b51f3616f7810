"""Pseudo-legal move generation for a single piece.

Every function here is pure: it reads the board, never writes it, and
returns freshly built moves. King safety is not considered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.position import BOARD_SIZE, MAX_INDEX, MIN_INDEX, Position

if TYPE_CHECKING:
    from chessmoves.core.board import BoardReader
    from chessmoves.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

Direction = tuple[int, int]  # (row_delta, col_delta)

ROOK_DIRS: tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[Direction, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS

# Each base leap paired with its row-mirrored twin.
_KNIGHT_BASE: tuple[Direction, ...] = ((1, 2), (1, -2), (2, 1), (2, -1))
KNIGHT_OFFSETS: tuple[Direction, ...] = tuple(
    offset for dr, dc in _KNIGHT_BASE for offset in ((dr, dc), (-dr, dc))
)

SLIDING_LIMIT = BOARD_SIZE
STEP_LIMIT = 1

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
_PROMOTION_ROWS = (MIN_INDEX, MAX_INDEX)

# color -> (forward row step, home row)
_PAWN_GEOMETRY: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 2),
    Color.BLACK: (-1, 7),
}


# -- Shared primitive --------------------------------------------------------


def walk_ray(
    board: BoardReader,
    piece: Piece,
    origin: Position,
    row_delta: int,
    col_delta: int,
    limit: int,
) -> list[Move]:
    """Step from *origin* along one direction for at most *limit* squares.

    Empty squares are recorded and the walk continues. The first occupied
    square ends the walk; it is recorded only if it holds an enemy piece.
    """
    moves: list[Move] = []
    target = origin.offset(row_delta, col_delta)
    steps = 0
    while target.is_on_board() and steps < limit:
        occupant = board.get_piece(target)
        if occupant is None:
            moves.append(Move(origin, target))
        elif occupant.color != piece.color:
            moves.append(Move(origin, target))
            break
        else:
            break
        target = target.offset(row_delta, col_delta)
        steps += 1
    return moves


def walk_rays(
    board: BoardReader,
    piece: Piece,
    origin: Position,
    directions: tuple[Direction, ...],
    limit: int,
) -> list[Move]:
    """Concatenate :func:`walk_ray` over several directions."""
    moves: list[Move] = []
    for dr, dc in directions:
        moves.extend(walk_ray(board, piece, origin, dr, dc, limit))
    return moves


# -- Piece-specific generators -------------------------------------------------


def rook_moves(board: BoardReader, piece: Piece, origin: Position) -> list[Move]:
    return walk_rays(board, piece, origin, ROOK_DIRS, SLIDING_LIMIT)


def bishop_moves(board: BoardReader, piece: Piece, origin: Position) -> list[Move]:
    return walk_rays(board, piece, origin, BISHOP_DIRS, SLIDING_LIMIT)


def queen_moves(board: BoardReader, piece: Piece, origin: Position) -> list[Move]:
    return walk_rays(board, piece, origin, QUEEN_DIRS, SLIDING_LIMIT)


def king_moves(board: BoardReader, piece: Piece, origin: Position) -> list[Move]:
    return walk_rays(board, piece, origin, QUEEN_DIRS, STEP_LIMIT)


def knight_moves(board: BoardReader, piece: Piece, origin: Position) -> list[Move]:
    return walk_rays(board, piece, origin, KNIGHT_OFFSETS, STEP_LIMIT)


def _pawn_arrivals(origin: Position, target: Position) -> list[Move]:
    """One plain move, or one move per promotion kind on the last rank."""
    if target.row in _PROMOTION_ROWS:
        return [Move(origin, target, pt) for pt in _PROMOTION_TYPES]
    return [Move(origin, target)]


def pawn_moves(board: BoardReader, piece: Piece, origin: Position) -> list[Move]:
    """Diagonal captures, single advance and home-rank double advance."""
    forward, home_row = _PAWN_GEOMETRY[piece.color]
    moves: list[Move] = []

    for col_delta in (-1, 1):
        target = origin.offset(forward, col_delta)
        if not target.is_on_board():
            continue
        occupant = board.get_piece(target)
        if occupant is not None and occupant.color != piece.color:
            moves.extend(_pawn_arrivals(origin, target))

    one_step = origin.offset(forward, 0)
    if not one_step.is_on_board() or board.get_piece(one_step) is not None:
        return moves

    advance = _pawn_arrivals(origin, one_step)
    moves.extend(advance)
    simple_advance = advance[0].promotion is None

    if origin.row == home_row and simple_advance:
        two_step = origin.offset(2 * forward, 0)
        if two_step.is_on_board() and board.get_piece(two_step) is None:
            moves.extend(_pawn_arrivals(origin, two_step))
    return moves


# -- Dispatch ------------------------------------------------------------------

PieceMoveFn = Callable[["BoardReader", "Piece", Position], list[Move]]

_STRATEGIES: dict[PieceType, PieceMoveFn] = {
    PieceType.ROOK: rook_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.PAWN: pawn_moves,
}


def piece_moves(board: BoardReader, piece: Piece, origin: Position) -> frozenset[Move]:
    """All pseudo-legal moves of *piece* standing on *origin*.

    *origin* must be on the board; it is not re-checked against the board's
    occupant.
    """
    moves = frozenset(_STRATEGIES[piece.piece_type](board, piece, origin))
    _LOGGER.debug("%r on %s: %d pseudo-legal moves", piece, origin, len(moves))
    return moves


class OccupancyBoard(Protocol):
    """Board view that can also enumerate a side's pieces."""

    def get_piece(self, position: Position) -> Piece | None: ...

    def occupied(
        self, color: Color | None = None
    ) -> list[tuple[Position, Piece]]: ...


class MoveGenerator:
    """Generates pseudo-legal moves against a fixed board.

    The generator only reads the board; callers must not mutate it while a
    query is running.
    """

    __slots__ = ("_board",)

    def __init__(self, board: OccupancyBoard) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def moves_from(self, origin: Position) -> frozenset[Move]:
        """Moves of whatever stands on *origin*; empty if nothing does."""
        piece = self._board.get_piece(origin)
        if piece is None:
            return frozenset()
        return piece_moves(self._board, piece, origin)

    def destinations(self, origin: Position) -> frozenset[Position]:
        return frozenset(move.end for move in self.moves_from(origin))

    def pseudo_legal_moves(self, color: Color) -> frozenset[Move]:
        """All pseudo-legal moves for *color* (may leave own king in check)."""
        moves: set[Move] = set()
        for position, piece in self._board.occupied(color):
            moves |= piece_moves(self._board, piece, position)
        _LOGGER.debug("%s: %d pseudo-legal moves", color, len(moves))
        return frozenset(moves)
