"""
Geometry of the pieces whose moves only depend on the shape of their movement (Queen, Rook, Bishop, Knight).

Each pattern is generated from a small set of vectors by reflecting them across both axes.
King and Pawn are not in here: what they may do depends on the board (threats, captures, first moves), see moves.py.
"""

from dataclasses import dataclass

from chess_engine.chess.pieces import PieceKind
from chess_engine.chess.position import Vector
from chess_engine.core.exceptions import PatternUnsupportedError


@dataclass(frozen=True)
class MovePattern:
    """
    repeatable: sliding piece (offset may be applied until blocked) vs. stepping piece (offset applied once)
    offsets: direction vectors (d_row, d_col)
    """

    repeatable: bool
    offsets: tuple[Vector, ...]


def expand_with_reflections(generators: list[Vector]) -> tuple[Vector, ...]:
    """
    All sign combinations (+-d_row, +-d_col) of each generating vector, without duplicates.

    ex) (1, 1) -> (1, 1), (1, -1), (-1, 1), (-1, -1)
        (0, 1) -> (0, 1), (0, -1)
    """
    offsets: dict[Vector, None] = {}
    for d_row, d_col in generators:
        for row_sign in (1, -1):
            for col_sign in (1, -1):
                offsets[(row_sign * d_row, col_sign * d_col)] = None
    return tuple(offsets)


ORTHOGONALS: list[Vector] = [(0, 1), (1, 0)]
DIAGONALS: list[Vector] = [(1, 1)]
L_SHAPES: list[Vector] = [(1, 2), (2, 1)]

# King neighbourhood: not a MovePattern (king moves are filtered by threats), but the same geometry as the Queen's single steps.
KING_STEPS: tuple[Vector, ...] = expand_with_reflections(ORTHOGONALS + DIAGONALS)

MOVE_PATTERNS: dict[PieceKind, MovePattern] = {
    PieceKind.QUEEN: MovePattern(
        True, expand_with_reflections(ORTHOGONALS + DIAGONALS)
    ),
    PieceKind.ROOK: MovePattern(True, expand_with_reflections(ORTHOGONALS)),
    PieceKind.BISHOP: MovePattern(True, expand_with_reflections(DIAGONALS)),
    PieceKind.KNIGHT: MovePattern(False, expand_with_reflections(L_SHAPES)),
}


def move_pattern(kind: PieceKind) -> MovePattern:
    """Pattern for a sliding/stepping piece. Asking for a King or Pawn is a dispatch bug."""
    try:
        return MOVE_PATTERNS[kind]
    except KeyError:
        raise PatternUnsupportedError(
            f"No generic move pattern for {kind.name.lower()}: it has its own movement rule."
        ) from None
