import numpy as np
import pytest

from statesearch.problems.checks import sanity_check_problem
from statesearch.problems.romania import ROMANIA, RomaniaProblem, romania_problem
from statesearch.problems.sliding_puzzle import (
    SlidingPuzzle,
    is_solvable,
    render,
    scrambled,
    shuffled,
    solved,
)
from statesearch.core.problem import FunctionProblem
from statesearch.problems.vacuum_world import LEFT, RIGHT, SUCK, VacuumState, vacuum_world


def test_vacuum_transitions():
    world = vacuum_world()
    s = world.initial_state
    assert s == VacuumState(LEFT, (True, True))
    assert world.transition(s, SUCK) == VacuumState(LEFT, (False, True))
    assert world.transition(s, RIGHT) == VacuumState(RIGHT, (True, True))
    assert world.transition(s, LEFT) == s
    assert set(world.actions(s)) == {SUCK, LEFT, RIGHT}
    assert not world.is_goal(s)
    assert world.is_goal(VacuumState(RIGHT, (False, False)))


def test_vacuum_rejects_unknown_input():
    with pytest.raises(ValueError):
        vacuum_world(location="Middle")
    with pytest.raises(ValueError):
        vacuum_world().transition(VacuumState(LEFT, (True, True)), "NoOp")


def test_solved_layouts():
    assert solved(3) == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert solved(3, blank_first=True) == tuple(range(9))
    puzzle = SlidingPuzzle(solved(3))
    assert puzzle.is_goal(solved(3))
    assert puzzle.is_goal(solved(3, blank_first=True))


def test_puzzle_actions_stay_on_board():
    puzzle = SlidingPuzzle(solved(3))
    # blank in bottom-right corner
    assert set(puzzle.actions(solved(3))) == {"Up", "Left"}
    centre = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    assert set(puzzle.actions(centre)) == {"Up", "Down", "Left", "Right"}
    with pytest.raises(ValueError):
        puzzle.transition(solved(3), "Down")


def test_puzzle_transition_swaps_blank():
    puzzle = SlidingPuzzle(solved(3))
    after = puzzle.transition(solved(3), "Up")
    assert after == (1, 2, 3, 4, 5, 0, 7, 8, 6)
    assert puzzle.transition(after, "Down") == solved(3)


def test_puzzle_rejects_bad_board():
    with pytest.raises(ValueError):
        SlidingPuzzle((1, 1, 2, 3, 4, 5, 6, 7, 8))


def test_solvability_parity():
    assert is_solvable(solved(3), 3)
    swapped = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert not is_solvable(swapped, 3)
    # even widths: every board reaches one of the two accepted layouts
    assert is_solvable((2, 1, 3, 0), 2)


def test_scrambled_is_reproducible_with_seed():
    a = scrambled(size=3, depth=10, rng=42)
    b = scrambled(size=3, depth=10, rng=np.random.default_rng(42))
    assert a.initial_state == b.initial_state
    assert is_solvable(a.initial_state, 3)


def test_shuffled_is_solvable_and_unsolved():
    rng = np.random.default_rng(7)
    for _ in range(10):
        puzzle = shuffled(3, rng)
        assert is_solvable(puzzle.initial_state, 3)
        assert not puzzle.is_goal(puzzle.initial_state)


def test_render():
    assert render(solved(3), 3) == "1 2 3\n4 5 6\n7 8 ."


def test_romania_problem():
    problem = romania_problem("Arad", "Bucharest")
    assert problem.initial_state == "Arad"
    assert set(problem.actions("Arad")) == {"Zerind", "Sibiu", "Timisoara"}
    assert problem.transition("Arad", "Sibiu") == "Sibiu"
    assert problem.path_cost("Arad", "Sibiu") == 140.0
    assert problem.is_goal("Bucharest")
    with pytest.raises(ValueError):
        RomaniaProblem(start="Atlantis")


def test_roads_are_symmetric():
    for a, nbrs in ROMANIA.items():
        for b, d in nbrs.items():
            assert ROMANIA[b][a] == d


def test_sanity_check():
    assert sanity_check_problem(romania_problem()).startswith("OK: visited 20 states")
    bad = FunctionProblem(
        initial_state=0,
        actions_fn=lambda s: ("step",) if s < 2 else (),
        transition_fn=lambda s, a: s + 1,
        goal_fn=lambda s: False,
        cost_fn=lambda s, a: -1 if s == 1 else 1,
    )
    with pytest.raises(AssertionError):
        sanity_check_problem(bad)


@pytest.mark.parametrize("size", [0, 1])
def test_generators_reject_boards_without_moves(size):
    with pytest.raises(ValueError, match="at least 2"):
        scrambled(size=size, depth=3, rng=0)
    with pytest.raises(ValueError, match="at least 2"):
        shuffled(size, rng=0)


def test_two_by_two_boards():
    assert len(scrambled(size=2, depth=5, rng=1).initial_state) == 4
    board = shuffled(2, rng=1)
    assert not board.is_goal(board.initial_state)
