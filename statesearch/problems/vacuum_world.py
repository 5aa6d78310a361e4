# statesearch/problems/vacuum_world.py
# Two-square vacuum world (AIMA Fig. 2.2) as a search problem.
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from ..core.problem import Action

LEFT, RIGHT = "Left", "Right"
SUCK = "Suck"
_SQUARES = (LEFT, RIGHT)


@dataclass(frozen=True)
class VacuumState:
    location: str               # "Left" or "Right"
    dirty: Tuple[bool, bool]    # (left square dirty?, right square dirty?)


class VacuumWorld:
    """
    - State: VacuumState(location, dirty)
    - ACTIONS(s): always {'Suck', 'Left', 'Right'}; moving to the current square is a no-op
    - TRANSITION(s,a): 'Suck' cleans the current square, 'Left'/'Right' move there
    - IS-GOAL(s): both squares clean
    - c(s,a): 1.0
    """
    def __init__(self, location: str = LEFT, dirty: Tuple[bool, bool] = (True, True)):
        if location not in _SQUARES:
            raise ValueError(f"location must be one of {_SQUARES}, got {location!r}")
        self.initial_state = VacuumState(location, tuple(dirty))

    def actions(self, state: VacuumState) -> Iterable[Action]:
        return (SUCK, LEFT, RIGHT)

    def transition(self, state: VacuumState, action: Action) -> VacuumState:
        if action == SUCK:
            dirty = list(state.dirty)
            dirty[_SQUARES.index(state.location)] = False
            return replace(state, dirty=tuple(dirty))
        if action in _SQUARES:
            return replace(state, location=action)
        raise ValueError(f"unknown vacuum action {action!r}")

    def is_goal(self, state: VacuumState) -> bool:
        return not any(state.dirty)

    def path_cost(self, state: VacuumState, action: Action) -> float:
        return 1.0


def vacuum_world(location: str = LEFT, dirty: Tuple[bool, bool] = (True, True)) -> VacuumWorld:
    return VacuumWorld(location=location, dirty=dirty)
