# dfagen/canonical.py
from __future__ import annotations
from typing import Any, Dict, List, Sequence, Tuple

from .model import EncodedAutomaton

__all__ = [
    "canonical_key",
    "discovery_trace",
    "is_discovery_ordered",
    "has_backward_edges",
]

Rows = Tuple[Tuple[int, ...], ...]


# ---------- helpers ----------
def _to_rows(a: Any) -> Rows:
    """Accept an EncodedAutomaton or an n x k nested sequence of ints."""
    if isinstance(a, EncodedAutomaton):
        return a.rows()
    if isinstance(a, (list, tuple)):
        return tuple(tuple(int(t) for t in row) for row in a)
    raise TypeError(f"expected EncodedAutomaton or rows, got {type(a).__name__}")


def _relabel_compact(rows: Sequence[Sequence[int]]) -> Dict[int, int]:
    """
    Number states by first appearance as a target, scanning the table
    row-major; state 0 keeps label 0. States never referenced get the
    remaining labels in index order.
    """
    remap: Dict[int, int] = {0: 0}
    nxt = 1
    for row in rows:
        for t in row:
            if t not in remap:
                remap[t] = nxt
                nxt += 1
    for s in range(len(rows)):
        if s not in remap:
            remap[s] = nxt
            nxt += 1
    return remap


# ---------- public ----------
def canonical_key(a: Any) -> Rows:
    """
    Relabel states in discovery order and return the resulting table.
    Automata produced by the engine (default, non-rooted mode) are fixed
    points of this map.
    """
    rows = _to_rows(a)
    remap = _relabel_compact(rows)
    inverse = {new: old for old, new in remap.items()}
    return tuple(tuple(remap[t] for t in rows[inverse[s]]) for s in range(len(rows)))


def discovery_trace(a: Any, root_discovered: bool = False) -> List[int]:
    """
    Replay the table row-major after the sink row and return the running
    discovery count after each cell. A cell may target a discovered state
    or the next new one; anything further ahead raises ValueError.
    """
    rows = _to_rows(a)
    n = len(rows)
    seen = 2 if root_discovered else 1
    trace: List[int] = []
    for s, row in enumerate(rows[1:], start=1):
        for c, t in enumerate(row):
            if t > seen:
                raise ValueError(f"cell ({s}, {c}) skips ahead to {t} with only {seen} discovered")
            if t == seen and seen < n:
                seen += 1
            trace.append(seen)
    return trace


def is_discovery_ordered(a: Any, root_discovered: bool = False) -> bool:
    rows = _to_rows(a)
    n = len(rows)
    if any(t != 0 for t in rows[0]):
        return False
    try:
        trace = discovery_trace(rows, root_discovered)
    except ValueError:
        return False
    final = trace[-1] if trace else (2 if root_discovered else 1)
    return final == n


def has_backward_edges(a: Any) -> bool:
    """Every state s > 0 has at least one transition to a state < s."""
    rows = _to_rows(a)
    return all(any(t < s for t in row) for s, row in enumerate(rows) if s > 0)
