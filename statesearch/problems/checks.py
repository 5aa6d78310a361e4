from __future__ import annotations
from collections import deque
from numbers import Real


def sanity_check_problem(problem, max_states: int = 10_000):
    """Walks states breadth-first and checks every step cost is a non-negative number."""
    seen = set()
    q = deque([problem.initial_state])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a in problem.actions(s):
            cost = problem.path_cost(s, a)
            if not isinstance(cost, Real) or cost < 0:
                raise AssertionError(f"bad path_cost {cost!r} for (s={s!r}, a={a!r})")
            q.append(problem.transition(s, a))
    return f"OK: visited {len(seen)} states; all step costs non-negative."
