# scripts/plot_counts.py
from __future__ import annotations

"""
Plot how many canonical automata the engine produces per (n, k).

Produces:
  - artifacts/growth.csv
  - artifacts/plots/growth.png

Usage:
  python -m scripts.plot_counts --ns 1 2 3 4 5 --ks 2 3
"""

import argparse
import pathlib

import matplotlib.pyplot as plt

from dfagen.metrics import growth_table

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
ART_DIR = PROJECT_ROOT / "artifacts"


def main() -> None:
    ap = argparse.ArgumentParser(description="Plot canonical DFA counts")
    ap.add_argument("--ns", type=int, nargs="+", default=[1, 2, 3, 4, 5])
    ap.add_argument("--ks", type=int, nargs="+", default=[2])
    ap.add_argument("--root-discovered", action="store_true")
    ap.add_argument("--outdir", type=pathlib.Path, default=ART_DIR)
    args = ap.parse_args()

    df = growth_table(args.ns, args.ks, root_discovered=args.root_discovered)
    args.outdir.mkdir(parents=True, exist_ok=True)
    csv_path = args.outdir / "growth.csv"
    df.to_csv(csv_path, index=False)
    print(f"[saved] {csv_path}")
    print(df.to_string(index=False))

    fig, ax = plt.subplots(figsize=(6, 4))
    for k, g in df.groupby("k"):
        g = g[g["count"] > 0]
        ax.plot(g["n"], g["count"], marker="o", label=f"k={k}")
    ax.set_yscale("log")
    ax.set_xlabel("States (n)")
    ax.set_ylabel("Canonical automata")
    ax.legend()
    fig.tight_layout()

    plots = args.outdir / "plots"
    plots.mkdir(parents=True, exist_ok=True)
    out = plots / "growth.png"
    fig.savefig(out, dpi=200)
    plt.close(fig)
    print(f"[saved] {out}")


if __name__ == "__main__":
    main()
