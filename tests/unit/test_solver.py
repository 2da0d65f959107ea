import pytest

from maze_walker.errors import StuckError
from maze_walker.geometry import Box, Position
from maze_walker.solver import SolveResult, decide_turns, default_max_steps, solve
from maze_walker.types import Sight
from tests.test_utils import ScriptedWalker


@pytest.mark.parametrize(
    "left, front, right, expected",
    [
        (False, True, True, 1),
        (False, False, False, 1),
        (False, True, False, 1),
        (False, False, True, 1),
        (True, False, False, 0),
        (True, False, True, 0),
        (True, True, False, 3),
        (True, True, True, 2),
    ],
)
def test_decide_turns(left: bool, front: bool, right: bool, expected: int) -> None:
    assert decide_turns(Sight(left, front, right)) == expected


@pytest.mark.parametrize(
    "sight, expected_turns",
    [
        (Sight(left=False, front=True, right=True), 1),
        (Sight(left=True, front=False, right=False), 0),
        (Sight(left=True, front=True, right=False), 3),
        (Sight(left=True, front=True, right=True), 2),
    ],
)
def test_engine_turns_then_steps(sight: Sight, expected_turns: int) -> None:
    walker = ScriptedWalker(sight=sight)
    result = solve(walker)
    assert walker.calls == ["look"] + ["turn_left"] * expected_turns + ["step"]
    assert result.iterations == 1
    assert list(result.turns) == [expected_turns]


def test_engine_steps_even_when_still_blocked() -> None:
    walker = ScriptedWalker(sight=Sight(left=True, front=True, right=True), steps_to_goal=3)
    result = solve(walker)
    assert walker.calls.count("step") == 3
    assert walker.calls.count("turn_left") == 6
    assert result.turn_events == 3


def test_done_before_start_performs_no_iterations() -> None:
    walker = ScriptedWalker(sight=Sight(True, False, True), steps_to_goal=0)
    result = solve(walker)
    assert walker.calls == []
    assert result == SolveResult(iterations=0, position=Position(0, 0))
    assert result.turn_events == 0


def test_max_steps_raises_stuck() -> None:
    walker = ScriptedWalker(sight=Sight(True, False, True), steps_to_goal=10**9)
    with pytest.raises(StuckError) as excinfo:
        solve(walker, max_steps=5)
    assert excinfo.value.iterations == 5
    assert excinfo.value.position == walker.position
    assert walker.calls.count("step") == 5


def test_max_steps_not_hit_when_goal_reached_in_time() -> None:
    walker = ScriptedWalker(sight=Sight(True, False, True), steps_to_goal=5)
    result = solve(walker, max_steps=5)
    assert result.iterations == 5


def test_default_max_steps() -> None:
    assert default_max_steps(Box(0, 0, 5, 4)) == 80
    assert default_max_steps(Box(2, 2, 3, 3)) == 4
