# statesearch/core/frontiers.py
# Frontier containers shared by the strategies. Membership is always by node.state.
from __future__ import annotations
from collections import deque
from typing import Callable, Dict, List, Optional
from .node import Node
from .problem import Cost, State


class FIFOQueue:
    """First-in first-out frontier with O(1) state membership."""
    def __init__(self):
        self.q = deque()
        self.states = set()

    def push(self, node: Node):
        if node.state in self.states:
            raise KeyError(f"state already queued: {node.state!r}")
        self.q.append(node)
        self.states.add(node.state)

    def pop(self) -> Node:
        node = self.q.popleft()
        self.states.discard(node.state)
        return node

    def peek(self) -> Node: return self.q[0]
    def __len__(self): return len(self.q)
    def __contains__(self, state: State): return state in self.states


class _Entry:
    __slots__ = ("key", "order", "node", "index")

    def __init__(self, key: Cost, order: int, node: Node, index: int):
        self.key = key
        self.order = order
        self.node = node
        self.index = index

    def __lt__(self, other: "_Entry") -> bool:
        return (self.key, self.order) < (other.key, other.order)


class PriorityQueue:
    """
    Indexed binary min-heap of nodes keyed by key(node), addressable by state.

    Entries are ordered by (key, discovery order): on equal keys the state that
    was pushed first wins. ``decrease_key`` keeps that original discovery order,
    so improving a queued state never lets it jump ahead of equal-cost states
    discovered earlier.
    """
    def __init__(self, key: Optional[Callable[[Node], Cost]] = None):
        self.key = key or (lambda n: n.path_cost)
        self.h: List[_Entry] = []
        self.index: Dict[State, _Entry] = {}
        self.counter = 0

    def push(self, node: Node):
        if node.state in self.index:
            raise KeyError(f"state already queued: {node.state!r}")
        self.counter += 1
        entry = _Entry(self.key(node), self.counter, node, len(self.h))
        self.h.append(entry)
        self.index[node.state] = entry
        self._sift_up(entry.index)

    def pop(self) -> Node:
        if not self.h:
            raise IndexError("pop from an empty priority queue")
        top = self.h[0]
        last = self.h.pop()
        if self.h:
            self.h[0] = last
            last.index = 0
            self._sift_down(0)
        del self.index[top.node.state]
        return top.node

    def peek(self) -> Node:
        return self.h[0].node

    def key_of(self, state: State) -> Cost:
        return self.index[state].key

    def decrease_key(self, node: Node, key: Optional[Cost] = None):
        """
        Replace the queued node for ``node.state`` with ``node`` and lower its key.

        The stored node (and therefore its parent and action) and the key are
        swapped together, so the queued entry always reports a path that
        matches its cost.
        """
        entry = self.index[node.state]
        new_key = self.key(node) if key is None else key
        if new_key > entry.key:
            raise ValueError(f"new key {new_key!r} is greater than current key {entry.key!r}")
        entry.key = new_key
        entry.node = node
        self._sift_up(entry.index)

    def __len__(self): return len(self.h)
    def __contains__(self, state: State): return state in self.index

    def _swap(self, i: int, j: int):
        h = self.h
        h[i], h[j] = h[j], h[i]
        h[i].index = i
        h[j].index = j

    def _sift_up(self, pos: int):
        h = self.h
        while pos > 0:
            parent = (pos - 1) >> 1
            if h[pos] < h[parent]:
                self._swap(pos, parent)
                pos = parent
            else:
                break

    def _sift_down(self, pos: int):
        h = self.h
        n = len(h)
        while True:
            child = 2 * pos + 1
            if child >= n:
                break
            right = child + 1
            if right < n and h[right] < h[child]:
                child = right
            if h[child] < h[pos]:
                self._swap(pos, child)
                pos = child
            else:
                break
