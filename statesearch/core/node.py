# This code defines the Node record used by the search strategies to represent positions in a search tree.
# statesearch/core/node.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
from .problem import Action, Cost, Problem, State


@dataclass(frozen=True, eq=False)
class Node:
    """
    A state plus the path by which it was reached.

    Nodes are immutable once created and form a tree rooted at the initial
    state: several children may share one parent, but nothing is ever
    re-parented. Equality and hashing look at ``state`` only, so two nodes
    reaching the same state by different paths compare equal.
    """
    state: State
    parent: Optional[Node] = None
    action: Optional[Action] = None
    path_cost: Cost = 0.0
    depth: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __repr__(self) -> str:
        return f"<Node {self.state!r} cost={self.path_cost} depth={self.depth}>"

    def expand(self, problem: Problem) -> Iterator[Node]:
        """Generate one child per distinct action, in the order the problem lists them."""
        for a in dict.fromkeys(problem.actions(self.state)):
            yield generate(problem, self, a)

    def path(self) -> List[Node]:
        """Nodes from the root down to (and including) this one."""
        nodes = []
        cur: Optional[Node] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes

    def solution(self) -> List[Action]:
        """
        Actions leading from the root to this node, in execution order.

        The parent chain is walked node -> root and reversed before returning,
        so the first element is the action applied to the initial state. The
        root contributes no action; a root node yields ``[]``.
        """
        actions = []
        cur = self
        while cur.parent is not None:
            actions.append(cur.action)
            cur = cur.parent
        actions.reverse()
        return actions


def make_root(state: State) -> Node:
    return Node(state)


def generate(problem: Problem, parent: Node, action: Action) -> Node:
    """Apply ``action`` to ``parent.state`` and wrap the successor in a new child node."""
    s = parent.state
    s2 = problem.transition(s, action)
    cost = problem.path_cost(s, action)
    if cost is None or cost < 0:
        raise ValueError(
            f"path_cost returned {cost!r} for (s={s!r}, a={action!r}); "
            "step costs must be non-negative numbers."
        )
    return Node(
        state=s2,
        parent=parent,
        action=action,
        path_cost=parent.path_cost + float(cost),
        depth=parent.depth + 1,
    )


def reconstruct_path(node: Node) -> Tuple[List[Action], Cost]:
    return node.solution(), float(node.path_cost)
