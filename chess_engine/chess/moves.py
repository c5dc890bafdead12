"""
Move generation: which squares can the piece standing on a given square move to?

Key idea: strategy pattern, one movement rule per piece kind.
* Queen, Rook, Bishop, Knight: pure geometry, expanded from their MovePattern (raycasting / single steps)
* Pawn: pushes only onto empty squares, takes only diagonally
* King: single steps onto squares no enemy piece attacks, plus castling

Attacks (used to keep the King out of harm's way) are computed by a separate set of rules.
Those never filter by threats themselves: an enemy King attacks all of its neighbours.
"""

from typing import Callable

from chess_engine.chess.board import Board
from chess_engine.chess.castling import CastlingSide, CastlingSquares, can_castle
from chess_engine.chess.patterns import KING_STEPS, MovePattern, move_pattern
from chess_engine.chess.pieces import Color, Piece, PieceKind
from chess_engine.chess.position import Position, Vector


# --- PUBLIC API ---
def possible_moves(board: Board, square: Position) -> list[Position]:
    """
    Destination squares of the piece standing on `square`.

    Empty square -> no moves. Square outside of the board -> OutOfBoundsError.
    """
    piece = board.piece(square)
    if piece is None:
        return []
    movement_rule: MovesFn = MOVEMENT_RULES[piece.kind]
    return movement_rule(board, square, piece)


def attack_squares(board: Board, square: Position) -> list[Position]:
    """
    Squares the piece on `square` attacks: plain geometric reachability, no threat filtering and no castling.

    Unlike the move rules, the first piece in a line of sight is attacked whatever its color (a defended piece
    cannot be taken by the King), and a pawn attacks its diagonals even when nothing stands there.
    """
    piece = board.piece(square)
    if piece is None:
        return []
    attack_rule: MovesFn = ATTACK_RULES[piece.kind]
    return attack_rule(board, square, piece)


def is_threatened(board: Board, square: Position, color: Color) -> bool:
    """Is `square` attacked by any piece of the opponent of `color`?"""
    board.validate(square)
    return any(
        square in attack_squares(board, attacker_square)
        for attacker_square, _ in board.pieces(color.opponent)
    )


def castle_destinations(board: Board, king_square: Position) -> list[Position]:
    """King destinations for castling to either side, if available"""
    return [
        CastlingSquares.for_side(board.size, king_square, side).king_to
        for side in CastlingSide
        if can_castle(board, king_square, side)
    ]


# --- MOVEMENT RULES ---
def raycasting_move(
    board: Board, square: Position, piece: Piece, pattern: MovePattern
) -> list[Position]:
    """
    Raycasting algorithm
    -----

    Walk along every direction of the pattern until we leave the board or hit another piece.
    * empty square: record it, and keep walking only if the pattern is repeatable
    * enemy piece: record it (capture), stop walking
    * own piece: stop walking without recording
    """
    moves: list[Position] = []
    for direction in pattern.offsets:
        target_square = square + direction
        while board.is_within_bounds(target_square):
            occupant = board.piece(target_square)
            if occupant is not None:
                if occupant.is_enemy_of(piece):
                    moves.append(target_square)
                break

            moves.append(target_square)
            if not pattern.repeatable:
                break
            target_square = target_square + direction
    return moves


def pattern_moves(board: Board, square: Position, piece: Piece) -> list[Position]:
    """Queen, Rook, Bishop and Knight: the geometry says it all"""
    return raycasting_move(board, square, piece, move_pattern(piece.kind))


def pawn_moves(board: Board, square: Position, piece: Piece) -> list[Position]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square only
    - can move by two on its first move, if both squares ahead are empty
    - takes diagonally (and only moves diagonally when taking)

    NOTE: No en passant and no promotion.
    """
    moves: list[Position] = []
    forward = piece.color.forward

    one_ahead = square + (forward, 0)
    if board.is_within_bounds(one_ahead) and board.is_empty(one_ahead):
        moves.append(one_ahead)

        two_ahead = square + (2 * forward, 0)
        if (
            not piece.has_moved
            and board.is_within_bounds(two_ahead)
            and board.is_empty(two_ahead)
        ):
            moves.append(two_ahead)

    for target_square in _pawn_diagonals(board, square, piece):
        occupant = board.piece(target_square)
        if occupant is not None and occupant.is_enemy_of(piece):
            moves.append(target_square)
    return moves


def king_moves(board: Board, square: Position, piece: Piece) -> list[Position]:
    """
    The king can move by a single square at the time, onto an empty or enemy square that is not under attack.
    Castling is modelled as a special king move of two squares.

    Threats are judged with the king lifted off the board: a rook attacking the king along a row
    also attacks the square behind it.
    """
    without_king = board.copy()
    without_king.remove_piece(square)

    moves: list[Position] = []
    for target_square in _single_steps(board, square, KING_STEPS):
        occupant = board.piece(target_square)
        if occupant is not None and not occupant.is_enemy_of(piece):
            continue
        if not is_threatened(without_king, target_square, piece.color):
            moves.append(target_square)

    moves.extend(castle_destinations(board, square))
    return moves


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovesFn = Callable[[Board, Position, Piece], list[Position]]
MOVEMENT_RULES: dict[PieceKind, MovesFn] = {
    PieceKind.PAWN: pawn_moves,
    PieceKind.KNIGHT: pattern_moves,
    PieceKind.BISHOP: pattern_moves,
    PieceKind.ROOK: pattern_moves,
    PieceKind.QUEEN: pattern_moves,
    PieceKind.KING: king_moves,
}


# --- ATTACKING RULES ---
def raycasting_attack(board: Board, square: Position, piece: Piece) -> list[Position]:
    """Same walk as `raycasting_move()`, but the first occupied square is attacked no matter whose piece stands there"""
    pattern = move_pattern(piece.kind)
    attacked: list[Position] = []
    for direction in pattern.offsets:
        target_square = square + direction
        while board.is_within_bounds(target_square):
            attacked.append(target_square)
            if not pattern.repeatable or not board.is_empty(target_square):
                break
            target_square = target_square + direction
    return attacked


def pawn_attack(board: Board, square: Position, piece: Piece) -> list[Position]:
    return _pawn_diagonals(board, square, piece)


def king_attack(board: Board, square: Position, piece: Piece) -> list[Position]:
    """All neighbours. No threat filtering here, ever (see module docstring)"""
    return _single_steps(board, square, KING_STEPS)


# --- STRATEGY PATTERN: ATTACKING RULES ---
ATTACK_RULES: dict[PieceKind, MovesFn] = {
    PieceKind.PAWN: pawn_attack,
    PieceKind.KNIGHT: raycasting_attack,
    PieceKind.BISHOP: raycasting_attack,
    PieceKind.ROOK: raycasting_attack,
    PieceKind.QUEEN: raycasting_attack,
    PieceKind.KING: king_attack,
}


# -- helpers --
def _single_steps(
    board: Board, square: Position, deltas: tuple[Vector, ...]
) -> list[Position]:
    steps = [square + delta for delta in deltas]
    return [step for step in steps if board.is_within_bounds(step)]


def _pawn_diagonals(board: Board, square: Position, piece: Piece) -> list[Position]:
    forward = piece.color.forward
    return _single_steps(board, square, ((forward, 1), (forward, -1)))
