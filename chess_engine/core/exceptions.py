"""
Custom exceptions raised by the rules engine.

All of them derive from GameError, so a caller (the layer that owns the games) can catch the whole family in one place.
None of them are fatal: they describe a request that cannot be honoured for the board as it is.
"""


class GameError(Exception):
    """Base class for everything the rules engine raises on purpose."""


class InvalidBoardError(GameError):
    """The board cannot be created (or set up) with the requested dimensions."""


class OutOfBoundsError(GameError, IndexError):
    """A position lies outside the board. Never clamped, always rejected."""


class NoPieceAtOriginError(GameError):
    """Asked to move a piece from an empty square."""


class IllegalMoveError(GameError):
    """The requested destination is not among the possible moves of the piece."""


class PatternUnsupportedError(GameError):
    """
    The generic move-pattern library was queried for a King or a Pawn.

    Those are handled by bespoke logic in the move generator, so seeing this error means the dispatch is broken.
    """
