# statesearch/cli.py
# Demonstration front end: pick a problem and a strategy, print the plan.
from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .algorithms.bfs import breadth_first_search
from .algorithms.ucs import uniform_cost_search
from .core.utils import replay
from .problems.romania import ROMANIA, romania_problem
from .problems.sliding_puzzle import check_size, scrambled
from .problems.vacuum_world import vacuum_world

STRATEGIES = {
    "bfs": breadth_first_search,
    "ucs": uniform_cost_search,
}


def puzzle_size(text: str) -> int:
    try:
        return check_size(int(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_problem(args: argparse.Namespace):
    if args.problem == "vacuum":
        return vacuum_world()
    if args.problem == "puzzle":
        return scrambled(size=args.size, depth=args.scramble_depth, rng=args.seed)
    return romania_problem(start=args.start, goal=args.goal)


def make_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="statesearch", description="Solve a demo problem with uninformed search.")
    ap.add_argument("--problem", choices=["vacuum", "puzzle", "romania"], default="puzzle")
    ap.add_argument("--strategy", choices=sorted(STRATEGIES), default="ucs")
    ap.add_argument("--size", type=puzzle_size, default=3, help="puzzle side length")
    ap.add_argument("--scramble-depth", type=int, default=12, help="random moves away from solved")
    ap.add_argument("--seed", type=int, default=None, help="seed for the puzzle's random source")
    ap.add_argument("--start", choices=sorted(ROMANIA), default="Arad")
    ap.add_argument("--goal", choices=sorted(ROMANIA), default="Bucharest")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)
    problem = build_problem(args)
    if args.problem == "puzzle":
        print(problem)
        print()

    solution = STRATEGIES[args.strategy](problem)
    if solution is None:
        print("Could not find a solution", file=sys.stderr)
        return 1

    for a in solution:
        print(a)
    _, cost = replay(problem, solution)
    print(f"cost={cost:g} steps={len(solution)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
