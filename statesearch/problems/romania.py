# statesearch/problems/romania.py
from __future__ import annotations
from typing import Dict, Iterable, Mapping


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
ROMANIA: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}


# --- Problem definition -------------------------------------------------------

class RomaniaProblem:
    """
    Standard AIMA Romania route-finding problem.
    States are city names (strings).
    ACTIONS(s) are neighboring cities; TRANSITION(s,a) = a; path_cost is road distance.
    """

    def __init__(self, start: str = "Arad", goal: str = "Bucharest",
                 graph: Mapping[str, Mapping[str, int]] = ROMANIA):
        for city in (start, goal):
            if city not in graph:
                raise ValueError(f"unknown city {city!r}")
        self.initial_state = start
        self.goal = goal
        self.graph = graph

    def actions(self, state: str) -> Iterable[str]:
        return self.graph[state].keys()

    def transition(self, state: str, action: str) -> str:
        # Action is the next city name
        return action

    def is_goal(self, state: str) -> bool:
        return state == self.goal

    def path_cost(self, state: str, action: str) -> float:
        return float(self.graph[state][action])


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RomaniaProblem:
    """
    Factory for a ready-to-use RomaniaProblem.
    """
    return RomaniaProblem(start=start, goal=goal)
