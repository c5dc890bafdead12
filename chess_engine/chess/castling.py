"""Helpers for implementing Castling rules. Needed by both the move generator and the executor"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Self

from chess_engine.chess.board import Board
from chess_engine.chess.pieces import PieceKind
from chess_engine.chess.position import Position

# The king must be at least this many columns away from the corner rook, so that both fit in between after castling.
MIN_KING_ROOK_DISTANCE = 3


class CastlingSide(Enum):
    """Values are the column direction the king travels in."""

    LEFT = -1
    RIGHT = 1


@dataclass(frozen=True)
class CastlingSquares:
    """Squares where king/rook start from and end up in when castling to one side"""

    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position

    @classmethod
    def for_side(
        cls, board_size: int, king_square: Position, side: CastlingSide
    ) -> Self:
        """
        King moves two squares towards the corner, the rook jumps over it and lands on the square the king crossed.

        ex) on an 8x8 board with the king on column 4: RIGHT -> king to column 6, rook 7 -> 5
                                                       LEFT  -> king to column 2, rook 0 -> 3
        """
        direction = side.value
        rook_col = 0 if side == CastlingSide.LEFT else board_size - 1
        return cls(
            king_from=king_square,
            king_to=king_square + (0, 2 * direction),
            rook_from=Position(king_square.row, rook_col),
            rook_to=king_square + (0, direction),
        )


def castling_side(
    from_square: Position, to_square: Position
) -> Optional[CastlingSide]:
    """A king move of exactly two columns along its row is a castle. Anything else is not"""
    if from_square.row != to_square.row:
        return None
    difference_in_cols = to_square.col - from_square.col
    if abs(difference_in_cols) != 2:
        return None
    return CastlingSide.RIGHT if difference_in_cols > 0 else CastlingSide.LEFT


def squares_between_on_row(
    from_square: Position, to_square: Position
) -> list[Position]:
    """
    Squares strictly in between the two squares specified, on the same row.

    Needed for checking if you can still castle (all of those must be empty).
    """
    if from_square.row != to_square.row:
        raise ValueError(
            f"squares_between_on_row requires both squares to lie on the same row. \n from: {from_square}\n to: {to_square}"
        )
    step = 1 if to_square.col > from_square.col else -1
    return [
        Position(from_square.row, col)
        for col in range(from_square.col + step, to_square.col, step)
    ]


def can_castle(board: Board, king_square: Position, side: CastlingSide) -> bool:
    """
    Castling is offered when:
    * the king has not moved yet
    * the corner square on that side holds a rook of the same color that has not moved yet
    * the corner is far enough away for the king to move two squares without landing on the rook
    * every square strictly between king and rook is empty

    NOTE: whether the king is in check, or passes through attacked squares, is deliberately NOT verified.
    """
    king = board.piece(king_square)
    if king is None or king.kind != PieceKind.KING or king.has_moved:
        return False

    squares = CastlingSquares.for_side(board.size, king_square, side)
    if abs(squares.rook_from.col - king_square.col) < MIN_KING_ROOK_DISTANCE:
        return False

    rook = board.piece(squares.rook_from)
    if rook is None or rook.kind != PieceKind.ROOK or rook.has_moved:
        return False
    if rook.color != king.color:
        return False

    return all(
        board.is_empty(square)
        for square in squares_between_on_row(king_square, squares.rook_from)
    )
