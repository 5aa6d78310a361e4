# This code implements Breadth-First Search with an explored set and early goal detection.
# statesearch/algorithms/bfs.py
from __future__ import annotations
from typing import List, Optional
from ..core.frontiers import FIFOQueue
from ..core.node import make_root
from ..core.problem import Action, Problem


def breadth_first_search(problem: Problem) -> Optional[List[Action]]:
    """
    Return the shortest (by action count) list of actions reaching a goal, or
    None when the frontier is exhausted. Step costs are carried on the nodes
    but never used for ordering.

    Children are goal-tested when generated, before they are queued. The
    initial state is tested once up front and yields ``[]`` if it is a goal.
    """
    root = make_root(problem.initial_state)
    if problem.is_goal(root.state):
        return []

    frontier = FIFOQueue()
    frontier.push(root)
    explored = set()

    while frontier:
        node = frontier.pop()
        explored.add(node.state)
        for child in node.expand(problem):
            if child.state in explored or child.state in frontier:
                continue
            if problem.is_goal(child.state):
                return child.solution()
            frontier.push(child)

    return None
