"""Uninformed state-space search: breadth-first and uniform-cost strategies over a generic Problem."""
from .algorithms.bfs import breadth_first_search
from .algorithms.ucs import uniform_cost_search
from .core.node import Node, generate, make_root
from .core.problem import FunctionProblem, Problem, actions_from_mapping, unit_cost

__all__ = [
    "FunctionProblem",
    "Node",
    "Problem",
    "actions_from_mapping",
    "breadth_first_search",
    "generate",
    "make_root",
    "uniform_cost_search",
    "unit_cost",
]
