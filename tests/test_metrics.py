from statesearch import breadth_first_search, uniform_cost_search
from statesearch.core.metrics import CountingProblem, MeasuredRun, measure
from statesearch.problems.romania import romania_problem
from statesearch.problems.vacuum_world import vacuum_world


def test_measure_success():
    r = measure("UCS", uniform_cost_search, romania_problem())
    assert r.success
    assert r.algo == "UCS"
    assert r.cost == 418.0
    assert r.actions[-1] == "Bucharest"
    assert r.nodes_expanded > 0
    assert r.time_s >= 0
    assert r.error is None


def test_expansion_budget_reports_failure():
    r = measure("UCS", uniform_cost_search, romania_problem(), max_expansions=2)
    assert not r.success
    assert r.nodes_expanded == 2
    assert r.cost == float("inf")
    assert "2 expansions" in r.error


def test_measure_initial_goal():
    r = measure("BFS", breadth_first_search, romania_problem("Arad", "Arad"))
    assert r.success and r.actions == [] and r.cost == 0.0


def test_counting_problem_delegates():
    inner = vacuum_world()
    counted = CountingProblem(inner)
    assert counted.initial_state == inner.initial_state
    plan = breadth_first_search(counted)
    assert plan == breadth_first_search(inner)
    assert counted.expanded == 4


def test_measured_run_elapsed():
    with MeasuredRun() as meter:
        sum(range(1000))
        assert meter.elapsed >= 0
    assert meter.elapsed >= 0
    assert meter.peak_kb >= 0


def test_measure_no_solution():
    from statesearch.core.problem import FunctionProblem
    dead_end = FunctionProblem(
        initial_state=0,
        actions_fn=lambda s: (),
        transition_fn=lambda s, a: s,
        goal_fn=lambda s: False,
    )
    r = measure("BFS", breadth_first_search, dead_end)
    assert not r.success
    assert r.error is None
    assert r.nodes_expanded == 1  # the root is still expanded once


def test_measured_run_leaves_outer_tracing_running():
    import tracemalloc
    tracemalloc.start()
    try:
        with MeasuredRun() as outer:
            with MeasuredRun() as inner:
                blob = [bytes(1024) for _ in range(200)]
            assert tracemalloc.is_tracing()
            del blob
        assert tracemalloc.is_tracing()
        assert not inner.owns_tracing and not outer.owns_tracing
        assert inner.peak_kb >= 100
    finally:
        tracemalloc.stop()


def test_measured_run_stops_its_own_session():
    import tracemalloc
    assert not tracemalloc.is_tracing()
    with MeasuredRun() as meter:
        assert tracemalloc.is_tracing()
    assert meter.owns_tracing
    assert not tracemalloc.is_tracing()
