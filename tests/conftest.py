"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmoves.core.board import Board
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position

PlaceFn = Callable[..., Board]


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def place(empty_board: Board) -> PlaceFn:
    """Drop pieces onto the shared empty board by name, e.g. ``place(e4="P")``."""

    def _place(**pieces: str) -> Board:
        for name, char in pieces.items():
            empty_board[Position.from_name(name)] = Piece.from_char(char)
        return empty_board

    return _place
