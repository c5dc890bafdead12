"""Unit tests for /chess_engine/chess/position.py"""

import pytest

from chess_engine.chess.position import Position


def test_positions_compare_by_value() -> None:
    """Two positions with the same coordinates are the same square (also as dictionary keys)"""
    assert Position(3, 4) == Position(3, 4)
    assert Position(3, 4) != Position(4, 3)
    assert len({Position(1, 1), Position(1, 1), Position(1, 2)}) == 2


@pytest.mark.parametrize(
    "start, delta, expected",
    [
        (Position(0, 0), (1, 2), Position(1, 2)),
        (Position(4, 4), (-1, -1), Position(3, 3)),
        (Position(0, 0), (-1, 0), Position(-1, 0)),
    ],
)
def test_adding_a_vector(start: Position, delta: tuple[int, int], expected: Position) -> None:
    """Adding a vector never validates anything: negative coordinates are fine until a board is involved"""
    assert start + delta == expected


def test_position_is_immutable() -> None:
    position = Position(0, 0)
    with pytest.raises(AttributeError):
        position.row = 1  # type: ignore[misc]
