# statesearch/problems/sliding_puzzle.py
# n x n sliding-tile puzzle (8-puzzle for n=3). Randomness comes only from an injected numpy Generator.
from __future__ import annotations
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from ..core.problem import Action

Tiles = Tuple[int, ...]   # row-major, 0 is the blank
RandomSource = Union[np.random.Generator, int, None]

# The action names the direction the *blank* moves.
_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}
_OPPOSITE = {"Up": "Down", "Down": "Up", "Left": "Right", "Right": "Left"}


def solved(size: int, blank_first: bool = False) -> Tiles:
    n = size * size
    return tuple(range(n)) if blank_first else tuple(range(1, n)) + (0,)


def _parity_class(tiles: Tiles, size: int) -> int:
    # Invariant under legal moves: inversion parity, plus the blank's row from
    # the bottom when the width is even.
    a = np.array([t for t in tiles if t != 0])
    inversions = int(np.triu(a[:, None] > a[None, :], k=1).sum())
    if size % 2:
        return inversions % 2
    row = tiles.index(0) // size
    return (inversions + size - row) % 2


def is_solvable(tiles: Tiles, size: int) -> bool:
    """True if ``tiles`` can reach either accepted solved layout."""
    targets = {_parity_class(solved(size), size), _parity_class(solved(size, blank_first=True), size)}
    return _parity_class(tiles, size) in targets


def check_size(size: int) -> int:
    # A 1x1 board has no moves and is always solved.
    if size < 2:
        raise ValueError(f"puzzle side length must be at least 2, got {size}")
    return size


def render(tiles: Tiles, size: int) -> str:
    grid = np.array(tiles).reshape(size, size)
    width = len(str(size * size - 1))
    return "\n".join(
        " ".join("." * width if t == 0 else str(t).rjust(width) for t in row)
        for row in grid.tolist()
    )


class SlidingPuzzle:
    """
    - State: tuple of tiles in row-major order, 0 for the blank
    - ACTIONS(s): blank moves among {'Up','Down','Left','Right'} that stay on the board
    - TRANSITION(s,a): swap the blank with its neighbour; off-board moves raise ValueError
    - IS-GOAL(s): tiles ascending with the blank either first or last
    - c(s,a): 1.0
    """
    def __init__(self, initial_state: Iterable[int], size: int = 3):
        tiles = tuple(int(t) for t in initial_state)
        if sorted(tiles) != list(range(size * size)):
            raise ValueError(f"not a {size}x{size} board: {tiles!r}")
        self.size = size
        self.initial_state = tiles
        self._goals = {solved(size), solved(size, blank_first=True)}

    def actions(self, state: Tiles) -> Iterable[Action]:
        r, c = divmod(state.index(0), self.size)
        return tuple(
            name for name, (dr, dc) in _MOVES.items()
            if 0 <= r + dr < self.size and 0 <= c + dc < self.size
        )

    def transition(self, state: Tiles, action: Action) -> Tiles:
        blank = state.index(0)
        r, c = divmod(blank, self.size)
        dr, dc = _MOVES[action]
        nr, nc = r + dr, c + dc
        if not (0 <= nr < self.size and 0 <= nc < self.size):
            raise ValueError(f"move {action!r} takes the blank off the board")
        target = nr * self.size + nc
        tiles = list(state)
        tiles[blank], tiles[target] = tiles[target], tiles[blank]
        return tuple(tiles)

    def is_goal(self, state: Tiles) -> bool:
        return state in self._goals

    def path_cost(self, state: Tiles, action: Action) -> float:
        return 1.0

    def __str__(self) -> str:
        return render(self.initial_state, self.size)


def scrambled(size: int = 3, depth: int = 4, rng: RandomSource = None) -> SlidingPuzzle:
    """
    Random walk of ``depth`` blank moves away from the blank-last solved board,
    never immediately undoing the previous move. The optimal solution is at
    most ``depth`` moves long.
    """
    check_size(size)
    rng = np.random.default_rng(rng)
    puzzle = SlidingPuzzle(solved(size), size)
    state = puzzle.initial_state
    last: Optional[str] = None
    for _ in range(depth):
        options = [a for a in puzzle.actions(state) if last is None or a != _OPPOSITE[last]]
        last = options[int(rng.integers(len(options)))]
        state = puzzle.transition(state, last)
    return SlidingPuzzle(state, size)


def shuffled(size: int = 3, rng: RandomSource = None) -> SlidingPuzzle:
    """Uniformly random solvable, unsolved board."""
    check_size(size)
    rng = np.random.default_rng(rng)
    goals = {solved(size), solved(size, blank_first=True)}
    while True:
        tiles = tuple(int(t) for t in rng.permutation(size * size))
        if tiles not in goals and is_solvable(tiles, size):
            return SlidingPuzzle(tiles, size)
