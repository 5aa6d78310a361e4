# statesearch/core/utils.py
# Replays a returned solution against its problem (used by tests and the CLI).
from __future__ import annotations
from typing import Iterable, Tuple
from .problem import Action, Cost, Problem, State


def replay(problem: Problem, actions: Iterable[Action]) -> Tuple[State, Cost]:
    """Apply ``actions`` in order from the initial state; return (final state, total cost)."""
    s = problem.initial_state
    total = 0.0
    for a in actions:
        total += float(problem.path_cost(s, a))
        s = problem.transition(s, a)
    return s, total
