# statesearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional
import time, tracemalloc

from .problem import Action, Cost, Problem, State
from .utils import replay


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Action]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None


class ExpansionBudgetExceeded(RuntimeError):
    pass


class MeasuredRun:
    """
    Times a block and records the peak memory traced while it ran.

    If tracemalloc is already tracing (an outer MeasuredRun, ``-X tracemalloc``)
    the session is shared: it is neither restarted nor stopped here, and the
    peak is reported relative to the memory already traced on entry.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self.owns_tracing = False
        self.baseline = 0
        self._peak_bytes = 0

    def __enter__(self) -> "MeasuredRun":
        self.owns_tracing = not tracemalloc.is_tracing()
        if self.owns_tracing:
            tracemalloc.start()
        self.baseline = tracemalloc.get_traced_memory()[0]
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        self._peak_bytes = self._traced_peak()
        if self.owns_tracing:
            tracemalloc.stop()
        return False

    def _traced_peak(self) -> int:
        return max(self._peak_bytes, tracemalloc.get_traced_memory()[1] - self.baseline, 0)

    @property
    def running(self) -> bool:
        return self.t0 is not None and self.t1 is None

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        return (self.t1 if self.t1 is not None else time.perf_counter()) - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB; live inside the block, frozen after it."""
        return (self._traced_peak() if self.running else self._peak_bytes) // 1024


class CountingProblem:
    """
    Wraps a problem and counts expansions (calls to ``actions``).

    With ``max_expansions`` set, the expansion past the budget raises
    ExpansionBudgetExceeded; the strategies themselves know nothing of it.
    """
    def __init__(self, problem: Problem, max_expansions: Optional[int] = None):
        self.p = problem
        self.max_expansions = max_expansions
        self.expanded = 0

    @property
    def initial_state(self) -> State:
        return self.p.initial_state

    def actions(self, s: State) -> Iterable[Action]:
        if self.max_expansions is not None and self.expanded >= self.max_expansions:
            raise ExpansionBudgetExceeded(f"exceeded {self.max_expansions} expansions")
        self.expanded += 1
        return self.p.actions(s)

    def transition(self, s: State, a: Action) -> State:
        return self.p.transition(s, a)

    def is_goal(self, s: State) -> bool:
        return self.p.is_goal(s)

    def path_cost(self, s: State, a: Action) -> Cost:
        return self.p.path_cost(s, a)


def measure(
    name: str,
    strategy: Callable[[Problem], Optional[List[Action]]],
    problem: Problem,
    max_expansions: Optional[int] = None,
) -> SearchResult:
    counted = CountingProblem(problem, max_expansions=max_expansions)
    with MeasuredRun() as meter:
        try:
            actions = strategy(counted)
        except ExpansionBudgetExceeded as e:
            return SearchResult(name, False, [], float("inf"), counted.expanded,
                                meter.elapsed, meter.peak_kb, error=str(e))
    if actions is None:
        return SearchResult(name, False, [], float("inf"), counted.expanded, meter.elapsed, meter.peak_kb)
    _, cost = replay(problem, actions)
    return SearchResult(name, True, actions, cost, counted.expanded, meter.elapsed, meter.peak_kb)
