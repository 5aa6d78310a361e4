# statesearch/plots/plotting.py
# Grouped bar plots: one group per problem, one bar per algorithm, one panel per metric.
from __future__ import annotations
import matplotlib.pyplot as plt
import numpy as np

METRICS = [
    ("nodes_expanded", "Nodes Expanded"),
    ("cost", "Path Cost"),
    ("time_s", "Time (s)"),
    ("peak_kb", "Peak Memory (KB)"),
]


def _grid(rows, metric):
    """Problems, algorithms (both in first-seen order) and a problems x algos value matrix (NaN = no run)."""
    problems = list(dict.fromkeys(r.get("problem", "") for r in rows))
    algos = list(dict.fromkeys(r["algo"] for r in rows))
    values = np.full((len(problems), len(algos)), np.nan)
    for r in rows:
        v = r.get(metric)
        if v is not None:
            values[problems.index(r.get("problem", "")), algos.index(r["algo"])] = v
    return problems, algos, values


def bar_compare(rows, title="Search Comparison"):
    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    for ax, (metric, label) in zip(axs.ravel(), METRICS):
        problems, algos, values = _grid(rows, metric)
        x = np.arange(len(problems))
        width = 0.8 / max(len(algos), 1)
        for i, algo in enumerate(algos):
            ax.bar(x + (i - (len(algos) - 1) / 2) * width, values[:, i], width, label=algo)
        ax.set_title(label)
        ax.set_xticks(x)
        ax.set_xticklabels(problems, rotation=20, ha="right")
    axs[0, 0].legend()
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig
