"""
Applying a move to the board.

The executor re-derives the possible moves of the piece, refuses anything that is not among them, and only then
touches the board. Castling relocates two pieces, both of which are validated before either of them moves.
"""

import logging
from typing import Optional

from chess_engine.chess.board import Board
from chess_engine.chess.castling import CastlingSquares, castling_side
from chess_engine.chess.moves import possible_moves
from chess_engine.chess.pieces import Piece, PieceKind
from chess_engine.chess.position import Position
from chess_engine.core.exceptions import IllegalMoveError, NoPieceAtOriginError

logger = logging.getLogger(__name__)


def execute_move(
    board: Board, from_square: Position, to_square: Position
) -> Optional[Piece]:
    """
    Move the piece on `from_square` to `to_square`, mutating `board` in place.
    ----

    1. check the move is among the possible moves of the piece
    2. castling? also validate the rook's move
    3. relocate the piece(s), marking them as moved
    4. return the captured piece (or None). The board does not keep it.

    Raises OutOfBoundsError, NoPieceAtOriginError or IllegalMoveError. Nothing is mutated when an error is raised.
    """
    board.validate(to_square)
    piece = board.piece(from_square)
    if piece is None:
        raise NoPieceAtOriginError(f"There is no piece on {from_square} to move.")

    _assert_allowed(board, from_square, to_square)

    side = None
    if piece.kind == PieceKind.KING:
        side = castling_side(from_square, to_square)
    if side is not None:
        squares = CastlingSquares.for_side(board.size, from_square, side)
        _assert_allowed(board, squares.rook_from, squares.rook_to)
        board.move_piece(squares.rook_from, squares.rook_to)
        logger.debug(
            "Castling %s: rook %s -> %s",
            side.name.lower(),
            squares.rook_from,
            squares.rook_to,
        )

    captured = board.move_piece(from_square, to_square)
    logger.debug(
        "Moved %s %s -> %s", piece.kind.name.lower(), from_square, to_square
    )
    if captured is not None:
        logger.debug(
            "Captured %s %s on %s",
            captured.color.name.lower(),
            captured.kind.name.lower(),
            to_square,
        )
    return captured


def _assert_allowed(board: Board, from_square: Position, to_square: Position) -> None:
    if to_square not in possible_moves(board, from_square):
        raise IllegalMoveError(f"Move not allowed: {from_square} -> {to_square}")
