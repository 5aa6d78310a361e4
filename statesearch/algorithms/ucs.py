# This code implements Uniform Cost Search: expansion in order of accumulated path cost,
# with decrease-key when a cheaper route to a queued state turns up.
# statesearch/algorithms/ucs.py
from __future__ import annotations
from typing import List, Optional
from ..core.frontiers import PriorityQueue
from ..core.node import make_root
from ..core.problem import Action, Problem


def uniform_cost_search(problem: Problem) -> Optional[List[Action]]:
    """
    Return a minimum-cost list of actions reaching a goal, or None when the
    frontier is exhausted.

    The goal test runs when a node is popped as the cheapest frontier member,
    which is what makes the result cost-optimal. When a child reaches a state
    that is already queued with a strictly higher cost, the queued node is
    replaced (parent, action and cost together). Equal-cost ties go to the
    state discovered first.
    """
    frontier = PriorityQueue(key=lambda n: n.path_cost)
    frontier.push(make_root(problem.initial_state))
    explored = set()

    while frontier:
        node = frontier.pop()
        if problem.is_goal(node.state):
            return node.solution()
        explored.add(node.state)
        for child in node.expand(problem):
            if child.state in explored:
                continue
            if child.state not in frontier:
                frontier.push(child)
            elif child.path_cost < frontier.key_of(child.state):
                frontier.decrease_key(child)

    return None
