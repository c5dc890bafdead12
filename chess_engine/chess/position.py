"""
A position (square) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Classical chess is played on an 8x8 board. Boards are square, but the size can be changed per board.
DEFAULT_BOARD_SIZE = 8

Vector = tuple[int, int]


@dataclass(frozen=True)
class Position:
    """Row/column coordinate. Validity is only known relative to a board (see Board.is_within_bounds)"""

    row: int
    col: int

    def __add__(self, delta: Vector) -> Position:
        d_row, d_col = delta
        return Position(self.row + d_row, self.col + d_col)
