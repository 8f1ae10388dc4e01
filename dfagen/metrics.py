"""
Collection of analysis helpers:
  • acceptance_ratio — accepted automata / leaves visited by the search
  • growth_table     — counts, leaves and runtimes over an (n, k) grid
"""

from typing import Iterable

import pandas as pd
from tqdm import tqdm

from .engine import CanonicalEngine


def acceptance_ratio(accepted: int, leaves: int) -> float:
    """Share of complete assignments that survive the acceptance check."""
    return accepted / leaves if leaves else 0.0


def growth_table(ns: Iterable[int], ks: Iterable[int] = (2,),
                 root_discovered: bool = False, progress: bool = True) -> pd.DataFrame:
    grid = [(n, k) for k in ks for n in ns]
    rows = []
    for n, k in tqdm(grid, desc="growth", disable=not progress):
        res = CanonicalEngine(n, k, root_discovered=root_discovered).search()
        rows.append({
            "n": n,
            "k": k,
            "count": res["count"],
            "leaves": res["leaves"],
            "acceptance": acceptance_ratio(res["count"], res["leaves"]),
            "elapsed": res["elapsed"],
        })
    return pd.DataFrame(rows, columns=["n", "k", "count", "leaves", "acceptance", "elapsed"])
