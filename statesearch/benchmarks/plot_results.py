# statesearch/benchmarks/plot_results.py
from __future__ import annotations
import json
from pathlib import Path
from typing import List

import matplotlib.pyplot as plt

from ..plots.plotting import bar_compare

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"


def load_rows(path: Path = RESULTS_JSON) -> List[dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m statesearch.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def fmt_table(rows) -> str:
    # Markdown table
    lines = [
        "| Problem | Algorithm | Cost | Steps | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r.get('problem', '')} | {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('steps'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def main(results: Path = RESULTS_JSON, out_dir: Path = HERE):
    rows = load_rows(results)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    fig = bar_compare(rows, title="BFS vs UCS")
    png_path = out_dir / "comparison.png"
    fig.savefig(png_path, format="png", dpi=160)
    plt.close(fig)
    print(f"Wrote {png_path}")


if __name__ == "__main__":
    main()
