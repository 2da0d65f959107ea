import pytest

from maze_walker.geometry import (
    CARDINALS,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    Box,
    Direction,
    Position,
    manhattan_distance,
)
from tests.test_utils import rotated


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction(1, 0), Direction(0, -1)),
        (Direction(0, -1), Direction(-1, 0)),
        (Direction(-1, 0), Direction(0, 1)),
        (Direction(0, 1), Direction(1, 0)),
    ],
)
def test_rotate_left(direction: Direction, expected: Direction) -> None:
    assert direction.rotate_left() == expected


@pytest.mark.parametrize("direction", CARDINALS)
def test_four_rotations_are_identity(direction: Direction) -> None:
    d = direction
    for _ in range(4):
        d = d.rotate_left()
    assert d == direction


@pytest.mark.parametrize("direction", CARDINALS)
def test_rotation_stays_cardinal(direction: Direction) -> None:
    d = direction
    for _ in range(7):
        d = d.rotate_left()
        assert d in CARDINALS


def test_cardinals_are_counter_clockwise_from_right() -> None:
    assert CARDINALS == (RIGHT, UP, LEFT, DOWN)
    assert [d.rotate_left() for d in CARDINALS] == [UP, LEFT, DOWN, RIGHT]


@pytest.mark.parametrize(
    "turns, expected",
    [(0, RIGHT), (1, UP), (2, LEFT), (3, DOWN), (4, RIGHT), (-1, DOWN)],
)
def test_rotated(turns: int, expected: Direction) -> None:
    assert rotated(RIGHT, turns) == expected


def test_position_moved() -> None:
    assert Position(2, 2).moved(UP) == Position(2, 1)
    assert Position(2, 2).moved(DOWN) == Position(2, 3)
    assert Position(0, 0).moved(LEFT) == Position(-1, 0)


def test_manhattan_distance() -> None:
    assert manhattan_distance(Position(0, 0), Position(3, 3)) == 6
    assert manhattan_distance(Position(3, 0), Position(0, 3)) == 6
    assert manhattan_distance(Position(1, 1), Position(1, 1)) == 0


def test_box() -> None:
    box = Box(1, 2, 4, 5)
    assert (box.width, box.height) == (3, 3)
    assert box.contains(1, 2)
    assert box.contains(3, 4)
    assert not box.contains(4, 4)
    assert not box.contains(1, 5)
    assert not box.contains(0, 2)
    assert Box(3, 3, 1, 1).width == 0
