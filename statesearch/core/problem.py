# Defines the standard interface for any search problem (initial state, actions, transition, goal, path cost).
# statesearch/core/problem.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Mapping, Protocol

Action = Hashable
State = Hashable
Cost = float


class Problem(Protocol):
    """Canonical state-space search problem (atomic state view).

    Every capability must be a deterministic pure function of its arguments.
    ``actions`` may return any iterable; duplicates are collapsed by the engine
    and an empty result means the state has no successors.
    """
    initial_state: State
    def actions(self, s: State) -> Iterable[Action]: ...
    def transition(self, s: State, a: Action) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def path_cost(self, s: State, a: Action) -> Cost: ...


def unit_cost(s: State, a: Action) -> Cost:
    return 1.0


def actions_from_mapping(mapping: Mapping[State, Iterable[Action]]) -> Callable[[State], Iterable[Action]]:
    """Turn a ``state -> actions`` table into an ``actions`` capability.
    States missing from the table are dead ends."""
    def actions(s: State) -> Iterable[Action]:
        return tuple(mapping.get(s, ()))
    return actions


@dataclass(frozen=True)
class FunctionProblem:
    """A Problem assembled from plain callables, handy for small problems and tests."""
    initial_state: Any
    actions_fn: Callable[[State], Iterable[Action]]
    transition_fn: Callable[[State, Action], State]
    goal_fn: Callable[[State], bool]
    cost_fn: Callable[[State, Action], Cost] = unit_cost

    def actions(self, s: State) -> Iterable[Action]:
        return self.actions_fn(s)

    def transition(self, s: State, a: Action) -> State:
        return self.transition_fn(s, a)

    def is_goal(self, s: State) -> bool:
        return self.goal_fn(s)

    def path_cost(self, s: State, a: Action) -> Cost:
        return self.cost_fn(s, a)
