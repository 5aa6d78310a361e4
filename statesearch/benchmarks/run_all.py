# statesearch/benchmarks/run_all.py
from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..algorithms.bfs import breadth_first_search
from ..algorithms.ucs import uniform_cost_search
from ..core.metrics import measure
from ..problems.romania import romania_problem
from ..problems.sliding_puzzle import scrambled
from ..problems.vacuum_world import vacuum_world

# ---- Tunables (overridable via environment variables) -----------------------
PUZZLE_SIZE    = int(os.getenv("PUZZLE_SIZE", "3"))
SCRAMBLE_DEPTH = int(os.getenv("SCRAMBLE_DEPTH", "14"))
SEARCH_SEED    = int(os.getenv("SEARCH_SEED", "0"))
_budget        = os.getenv("MAX_EXPANSIONS", "200000")
MAX_EXPANSIONS: Optional[int] = int(_budget) if _budget else None

ALGOS: List[Tuple[str, Callable]] = [
    ("BFS", breadth_first_search),
    ("UCS", uniform_cost_search),
]


def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def load_problems() -> List[Tuple[str, Any]]:
    return [
        ("vacuum", vacuum_world()),
        (f"puzzle{PUZZLE_SIZE}x{PUZZLE_SIZE}(d={SCRAMBLE_DEPTH})",
         scrambled(size=PUZZLE_SIZE, depth=SCRAMBLE_DEPTH, rng=SEARCH_SEED)),
        ("romania", romania_problem()),
    ]


def run(problems=None, algos=None, max_expansions: Optional[int] = MAX_EXPANSIONS) -> List[Dict[str, Any]]:
    problems = load_problems() if problems is None else problems
    algos = ALGOS if algos is None else algos

    rows = []
    for pname, problem in problems:
        for name, fn in algos:
            print(f"→ Running {name} on {pname} ...")
            try:
                r = measure(name, fn, problem, max_expansions=max_expansions)
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
                rows.append({
                    "problem": pname,
                    "algo": r.algo,
                    "success": r.success,
                    "cost": r.cost if r.success else None,
                    "steps": len(r.actions) if r.success else None,
                    "nodes_expanded": r.nodes_expanded,
                    "time_s": r.time_s,
                    "peak_kb": r.peak_kb,
                    "error": r.error,
                })
            except Exception as e:
                print(f"  {name}: ERROR {repr(e)}")
                rows.append({
                    "problem": pname,
                    "algo": name,
                    "success": False,
                    "error": repr(e),
                    "nodes_expanded": None,
                    "cost": None,
                    "steps": None,
                    "time_s": None,
                    "peak_kb": None,
                })
    return rows


def main(out_path: Optional[Path] = None):
    rows = run()
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    # Save JSON next to this script
    out_path = out_path or Path(__file__).with_name("results.json")
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")
    return out


if __name__ == "__main__":
    main()
