"""Unit tests for /chess_engine/chess/executor.py"""

import logging
from typing import Callable
from unittest.mock import patch

import pytest

import chess_engine.chess.executor as ex
from chess_engine.chess.board import Board
from chess_engine.chess.executor import execute_move
from chess_engine.chess.moves import castle_destinations, possible_moves
from chess_engine.chess.pieces import Color, Piece, PieceKind
from chess_engine.chess.position import Position
from chess_engine.core.exceptions import (
    IllegalMoveError,
    NoPieceAtOriginError,
    OutOfBoundsError,
)

KING = PieceKind.KING
ROOK = PieceKind.ROOK
WHITE = Color.WHITE
BLACK = Color.BLACK

BoardFactory = Callable[..., Board]


@pytest.fixture
def castling_board(board_with_pieces: BoardFactory) -> Board:
    """Both kings on their starting squares, all four rooks in the corners, nothing in between"""
    return board_with_pieces(
        (0, 4, KING, WHITE),
        (0, 0, ROOK, WHITE),
        (0, 7, ROOK, WHITE),
        (7, 4, KING, BLACK),
        (7, 0, ROOK, BLACK),
        (7, 7, ROOK, BLACK),
    )


# --- PLAIN MOVES ---
def test_pawn_double_step(starting_board: Board) -> None:
    before = starting_board.copy()
    captured = execute_move(starting_board, Position(1, 4), Position(3, 4))

    assert captured is None
    assert starting_board.is_empty(Position(1, 4))
    assert starting_board.piece(Position(3, 4)) == Piece(PieceKind.PAWN, WHITE, has_moved=True)
    # nothing else changed
    changed = {
        square
        for square in set(before.occupancy) | set(starting_board.occupancy)
        if before.occupancy.get(square) != starting_board.occupancy.get(square)
    }
    assert changed == {Position(1, 4), Position(3, 4)}


def test_moved_pawn_loses_double_step(starting_board: Board) -> None:
    execute_move(starting_board, Position(6, 3), Position(5, 3))
    assert possible_moves(starting_board, Position(5, 3)) == [Position(4, 3)]
    with pytest.raises(IllegalMoveError):
        execute_move(starting_board, Position(5, 3), Position(3, 3))


def test_knight_move_from_starting_position(starting_board: Board) -> None:
    execute_move(starting_board, Position(0, 6), Position(2, 5))
    assert starting_board.piece(Position(2, 5)) == Piece(PieceKind.KNIGHT, WHITE, has_moved=True)
    assert starting_board.is_empty(Position(0, 6))


def test_capture_returns_displaced_piece(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces((0, 0, ROOK, WHITE), (5, 0, PieceKind.BISHOP, BLACK))
    captured = execute_move(board, Position(0, 0), Position(5, 0))

    assert captured == Piece(PieceKind.BISHOP, BLACK)
    assert board.piece(Position(5, 0)) == Piece(ROOK, WHITE, has_moved=True)
    assert len(list(board.pieces())) == 1


# --- FAILURES ---
def test_move_not_allowed_leaves_board_unchanged(starting_board: Board) -> None:
    before = starting_board.copy()
    with pytest.raises(IllegalMoveError):
        execute_move(starting_board, Position(1, 4), Position(4, 4))
    assert starting_board == before


def test_cannot_take_own_piece(starting_board: Board) -> None:
    before = starting_board.copy()
    with pytest.raises(IllegalMoveError):
        execute_move(starting_board, Position(0, 0), Position(1, 0))
    assert starting_board == before


def test_nothing_to_move(starting_board: Board) -> None:
    with pytest.raises(NoPieceAtOriginError):
        execute_move(starting_board, Position(4, 4), Position(5, 4))


@pytest.mark.parametrize(
    "from_square, to_square",
    [
        (Position(8, 0), Position(7, 0)),
        (Position(1, 0), Position(-1, 0)),
        (Position(0, 1), Position(2, 8)),
    ],
)
def test_out_of_bounds(starting_board: Board, from_square: Position, to_square: Position) -> None:
    before = starting_board.copy()
    with pytest.raises(OutOfBoundsError):
        execute_move(starting_board, from_square, to_square)
    assert starting_board == before


# --- CASTLING ---
@pytest.mark.parametrize(
    "king_from, king_to, rook_from, rook_to",
    [
        (Position(0, 4), Position(0, 6), Position(0, 7), Position(0, 5)),
        (Position(0, 4), Position(0, 2), Position(0, 0), Position(0, 3)),
        (Position(7, 4), Position(7, 6), Position(7, 7), Position(7, 5)),
        (Position(7, 4), Position(7, 2), Position(7, 0), Position(7, 3)),
    ],
)
def test_castling_moves_the_rook(
    castling_board: Board,
    king_from: Position,
    king_to: Position,
    rook_from: Position,
    rook_to: Position,
) -> None:
    color = castling_board.piece(king_from).color
    captured = execute_move(castling_board, king_from, king_to)

    assert captured is None
    assert castling_board.is_empty(king_from)
    assert castling_board.is_empty(rook_from)
    assert castling_board.piece(king_to) == Piece(KING, color, has_moved=True)
    assert castling_board.piece(rook_to) == Piece(ROOK, color, has_moved=True)


def test_castling_only_once(castling_board: Board) -> None:
    execute_move(castling_board, Position(0, 4), Position(0, 6))
    execute_move(castling_board, Position(0, 6), Position(1, 6))
    execute_move(castling_board, Position(1, 6), Position(0, 6))
    assert castle_destinations(castling_board, Position(0, 6)) == []


def test_castling_blocked(castling_board: Board) -> None:
    castling_board.set_piece(Position(0, 1), Piece(PieceKind.KNIGHT, WHITE))
    before = castling_board.copy()
    with pytest.raises(IllegalMoveError):
        execute_move(castling_board, Position(0, 4), Position(0, 2))
    assert castling_board == before


def test_castling_is_atomic(castling_board: Board) -> None:
    """If the rook's part of the castle is refused, neither piece moves"""
    king_square = Position(0, 4)

    def only_king_may_move(board: Board, square: Position) -> list[Position]:
        return [Position(0, 6)] if square == king_square else []

    before = castling_board.copy()
    with patch.object(ex, "possible_moves", side_effect=only_king_may_move):
        with pytest.raises(IllegalMoveError):
            execute_move(castling_board, king_square, Position(0, 6))
    assert castling_board == before


def test_king_step_is_not_a_castle(castling_board: Board) -> None:
    execute_move(castling_board, Position(0, 4), Position(0, 5))
    assert castling_board.piece(Position(0, 7)) == Piece(ROOK, WHITE)


def test_moves_are_logged(castling_board: Board, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="chess_engine.chess.executor")
    execute_move(castling_board, Position(0, 4), Position(0, 6))
    assert "Castling right" in caplog.text
    assert "Moved king" in caplog.text
