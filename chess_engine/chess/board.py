"""The Board is the sole unit of chess state: a square grid of a given size, with pieces placed on some of its squares"""

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Mapping, Optional, Self

from chess_engine.chess.pieces import Color, Piece, PieceKind
from chess_engine.chess.position import DEFAULT_BOARD_SIZE, Position
from chess_engine.core.exceptions import (
    InvalidBoardError,
    NoPieceAtOriginError,
    OutOfBoundsError,
)

# Back rank of the classical starting position, read from column 0 onwards.
BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


@dataclass
class Board:
    """
    Square board of `size` x `size` squares.
    ---

    Only occupied squares are stored in `occupancy`: a position missing from the mapping is an empty square.
    Every position handed to a query or mutator must satisfy 0 <= row, col < size. Anything else raises OutOfBoundsError.

    NOTE: The board keeps no history, no turn indicator and no game status. Whoever owns the game keeps snapshots of boards.
    """

    size: int = DEFAULT_BOARD_SIZE
    occupancy: dict[Position, Piece] = field(default_factory=dict)

    def __post_init__(self):
        if self.size <= 0:
            raise InvalidBoardError(f"Board size must be positive, got {self.size}.")
        for position in self.occupancy:
            self.validate(position)

    # -- QUERIES --
    def is_within_bounds(self, position: Position) -> bool:
        return (0 <= position.row < self.size) and (0 <= position.col < self.size)

    def validate(self, position: Position) -> None:
        if not self.is_within_bounds(position):
            raise OutOfBoundsError(
                f"{position} lies outside of the {self.size}x{self.size} board."
            )

    def piece(self, position: Position) -> Optional[Piece]:
        """The piece standing on the square, or None if it is empty"""
        self.validate(position)
        return self.occupancy.get(position)

    def is_empty(self, position: Position) -> bool:
        return self.piece(position) is None

    def pieces(
        self, color: Optional[Color] = None
    ) -> Iterator[tuple[Position, Piece]]:
        """All (position, piece) pairs on the board, optionally only those of a single color"""
        for position, piece in list(self.occupancy.items()):
            if color is None or piece.color == color:
                yield position, piece

    def copy(self) -> Self:
        return deepcopy(self)

    # -- MUTATORS --
    def set_piece(self, position: Position, piece: Piece) -> Optional[Piece]:
        """Place a piece on the square. Returns whatever stood there before (it is overwritten)"""
        self.validate(position)
        displaced = self.occupancy.get(position)
        self.occupancy[position] = piece
        return displaced

    def remove_piece(self, position: Position) -> Optional[Piece]:
        self.validate(position)
        return self.occupancy.pop(position, None)

    def move_piece(
        self, from_square: Position, to_square: Position
    ) -> Optional[Piece]:
        """
        Relocate a piece, no questions asked about chess rules (that is the executor's job).

        The piece is marked as moved, and whatever stood on the target square is returned (and dropped from the board).
        """
        self.validate(to_square)
        piece_that_moved = self.piece(from_square)
        if piece_that_moved is None:
            raise NoPieceAtOriginError(f"There is no piece on {from_square} to move.")
        del self.occupancy[from_square]
        return self.set_piece(to_square, piece_that_moved.moved())

    def fill(
        self, piece: Piece, row: Optional[int] = None, col: Optional[int] = None
    ) -> None:
        """
        Bulk placement of copies of `piece`:
        * row and col given: that single square
        * only row given: the entire row
        * only col given: the entire column
        * neither: nothing happens
        """
        if row is None and col is None:
            return

        rows = [row] if row is not None else range(self.size)
        cols = [col] if col is not None else range(self.size)
        self.populate({Position(r, c): piece for r in rows for c in cols})

    def populate(self, setup: Mapping[Position, Piece]) -> None:
        """Bulk insert. The whole mapping is validated first, so a bad position leaves the board untouched."""
        for position in setup:
            self.validate(position)
        self.occupancy.update(setup)


class BoardSetup(Enum):
    BASIC = auto()


def create_board(
    setup: BoardSetup = BoardSetup.BASIC, size: int = DEFAULT_BOARD_SIZE
) -> Board:
    """Construct a board populated with the requested starting arrangement"""
    board = Board(size)
    match setup:
        case BoardSetup.BASIC:
            _setup_basic(board)
    return board


def _setup_basic(board: Board) -> None:
    """
    Classical starting position.

    White sits on rows 0 and 1 (and moves up the board), Black on rows 6 and 7.
    """
    if board.size != len(BACK_RANK):
        raise InvalidBoardError(
            f"The basic setup needs a {len(BACK_RANK)}x{len(BACK_RANK)} board, got {board.size}x{board.size}."
        )
    last_row = board.size - 1

    board.fill(Piece(PieceKind.PAWN, Color.WHITE), row=1)
    board.fill(Piece(PieceKind.PAWN, Color.BLACK), row=last_row - 1)

    setup: dict[Position, Piece] = {}
    for idx, kind in enumerate(BACK_RANK):
        setup[Position(0, idx)] = Piece(kind, Color.WHITE)
        setup[Position(last_row, idx)] = Piece(kind, Color.BLACK)
    board.populate(setup)
