"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple modules.
"""

from typing import Callable

import pytest

from chess_engine.chess.board import Board, BoardSetup, create_board
from chess_engine.chess.pieces import Piece
from chess_engine.chess.position import Position


@pytest.fixture
def starting_board() -> Board:
    """Classical starting position on an 8x8 board. White on rows 0/1, Black on rows 6/7."""
    return create_board(BoardSetup.BASIC)


@pytest.fixture
def board_with_pieces() -> Callable[..., Board]:
    """
    Call the inner function with (row, col, kind, color) tuples to get a board with exactly those pieces.
    An optional 5th element sets has_moved.
    """

    def _create_board(*placed: tuple, size: int = 8) -> Board:
        board = Board(size)
        for row, col, kind, color, *has_moved in placed:
            board.set_piece(
                Position(row, col), Piece(kind, color, bool(has_moved and has_moved[0]))
            )
        return board

    return _create_board
