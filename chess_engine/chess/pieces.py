"""Defines the types of chess pieces"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Self


class PieceKind(Enum):
    KING = auto()
    QUEEN = auto()
    ROOK = auto()
    BISHOP = auto()
    KNIGHT = auto()
    PAWN = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row direction the pawns of this color advance in: White moves up (+1), Black moves down (-1)"""
        return 1 if self == Color.WHITE else -1


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color
    has_moved: bool = False

    def is_enemy_of(self, other: "Piece") -> bool:
        return self.color != other.color

    def moved(self) -> Self:
        """Copy of this piece with its move-history flag set. Pieces are values, the board stores the copy."""
        return replace(self, has_moved=True)
